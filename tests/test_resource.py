import pytest

from katana.resource import Resource, split, strip_comment, trim_line


class _Plain(Resource):
    def load(self, path, manager):
        self.loaded_from = path


def test_split_basic():
    assert split("1,2,3,4", ",") == ["1", "2", "3", "4"]


def test_split_drops_trailing_empty():
    assert split("a,b,", ",") == ["a", "b"]


def test_split_keeps_leading_and_inner_empty():
    assert split(",a,,b", ",") == ["", "a", "", "b"]


def test_split_empty_line():
    assert split("", ",") == []


def test_split_joins_back():
    line = "x,y,z"
    assert ",".join(split(line, ",")) == line


def test_strip_comment_removes_and_trims():
    assert strip_comment("  value  // note") == "value"


def test_strip_comment_without_comment_is_unchanged():
    assert strip_comment("  keep  ") == "  keep  "


def test_strip_comment_whole_line():
    assert strip_comment("// only a comment") == ""


def test_trim_line():
    assert trim_line("\t  abc \t") == "abc"
    assert trim_line("   ") == "   "
    assert trim_line("") == ""


def test_resource_is_abstract():
    with pytest.raises(TypeError):
        Resource()


def test_default_clone_is_self():
    res = _Plain()
    assert Resource.clone(res) is res
    assert res.resource_id == 0
    assert res.resource_manager is None
    assert res.cloneable is False