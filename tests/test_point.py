import pytest

from katana.point import Point


def test_default_point_is_origin():
    assert Point().is_origin()
    assert Point.ORIGIN == Point(0, 0)


def test_non_zero_point_is_not_origin():
    assert not Point(0, 1).is_origin()
    assert not Point(2, 0).is_origin()


def test_addition_and_subtraction_round_trip():
    a = Point(3, -4)
    b = Point(7, 9)
    assert (a + b) - b == a
    assert (a + b).x == a.x + b.x
    assert (a - b).y == a.y - b.y


def test_addition_returns_new_point():
    a = Point(1, 2)
    result = a + Point(5, 5)
    assert a == Point(1, 2)
    assert result == Point(6, 7)


def test_in_place_add_mutates_same_object():
    a = Point(1, 2)
    alias = a
    a += Point(10, 20)
    assert a is alias
    assert alias == Point(11, 22)


def test_in_place_subtract():
    a = Point(5, 5)
    a -= Point(2, 3)
    assert a == Point(3, 2)


def test_set_from_components_and_point():
    p = Point()
    p.set(4, 8)
    assert (p.x, p.y) == (4, 8)
    p.set(Point(-1, -2))
    assert p == Point(-1, -2)


def test_set_requires_y_for_integer():
    with pytest.raises(TypeError):
        Point().set(3)


def test_string_format():
    assert str(Point(3, -4)) == "{ 3, -4 }"


def test_add_non_point_is_type_error():
    with pytest.raises(TypeError):
        Point(1, 1) + 3