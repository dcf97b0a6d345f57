import pytest

from katana import mathutil


def test_lerp_endpoints():
    assert mathutil.lerp(3.0, 7.0, 0) == 3.0
    assert mathutil.lerp(3.0, 7.0, 1) == 7.0


def test_lerp_clamps_out_of_range_values():
    assert mathutil.lerp(3.0, 7.0, -2.0) == 3.0
    assert mathutil.lerp(3.0, 7.0, 5.0) == 7.0


def test_lerp_midpoint():
    assert mathutil.lerp(0.0, 10.0, 0.5) == pytest.approx(5.0)


def test_lerp_is_monotonic():
    values = [mathutil.lerp(-4.0, 8.0, t / 10) for t in range(11)]
    assert values == sorted(values)


@pytest.mark.parametrize(
    "minimum, maximum, value, expected",
    [(0, 10, -5, 0), (0, 10, 15, 10), (0, 10, 4, 4), (0.0, 1.0, 0.25, 0.25)],
)
def test_clamp(minimum, maximum, value, expected):
    assert mathutil.clamp(minimum, maximum, value) == expected


def test_is_in_range_inclusive():
    assert mathutil.is_in_range(1, 5, 1)
    assert mathutil.is_in_range(1, 5, 5)
    assert mathutil.is_in_range(1.0, 5.0, 3.0)
    assert not mathutil.is_in_range(1, 5, 0)
    assert not mathutil.is_in_range(1, 5, 6)


def test_to_radians_of_half_turn_is_pi():
    assert mathutil.to_radians(180) == pytest.approx(mathutil.PI)


def test_to_degrees_of_pi_is_half_turn():
    assert mathutil.to_degrees(mathutil.PI) == pytest.approx(180)


@pytest.mark.parametrize("degrees", [-270.0, 0.0, 45.0, 90.0, 360.0])
def test_angle_round_trip(degrees):
    assert mathutil.to_degrees(mathutil.to_radians(degrees)) == pytest.approx(degrees)


def test_derived_constants():
    assert mathutil.to_radians(90) == pytest.approx(mathutil.PI_OVER2)
    assert mathutil.to_radians(45) == pytest.approx(mathutil.PI_OVER4)
    assert mathutil.to_degrees(1.0) == pytest.approx(180 * mathutil.INVERSE_PI)
    assert mathutil.to_radians(1.0) == pytest.approx(mathutil.PI * mathutil.INVERSE_180)


def test_random_int_within_bounds():
    results = {mathutil.random_int(2, 6) for _ in range(500)}
    assert results <= {2, 3, 4, 5, 6}
    assert min(results) >= 2 and max(results) <= 6


def test_random_int_single_value():
    assert mathutil.random_int(5, 5) == 5


def test_random_int_default_range():
    for _ in range(100):
        assert 0 <= mathutil.random_int() <= mathutil.RAND_MAX


def test_random_int_rejects_inverted_range():
    with pytest.raises(ValueError):
        mathutil.random_int(10, 1)


def test_random_float_within_unit_interval():
    for _ in range(500):
        assert 0.0 <= mathutil.random_float() <= 1.0