import pytest
from collections import OrderedDict

from dotpath.dotpath_resolver import PathResolver
from dotpath.dotpath_datatypes import PropertyPath


@pytest.fixture
def resolver():
    return PathResolver()


def test_get_single_key(resolver):
    assert resolver.get({"a": 1}, "a") == 1


def test_get_nested_path(resolver):
    root = {"a": {"b": {"c": "deep"}}}
    assert resolver.get(root, "a.b.c") == "deep"
    assert resolver.get(root, "a.b") == {"c": "deep"}


@pytest.mark.parametrize("root,path", [
    (None, "a"),
    ({"a": 1}, None),
    ({"a": 1}, ""),
])
def test_get_degenerate_inputs_return_none(resolver, root, path):
    assert resolver.get(root, path) is None


def test_get_missing_intermediate_returns_none(resolver):
    assert resolver.get({"a": {}}, "a.b.c") is None
    assert resolver.get({"a": None}, "a.b") is None


def test_get_does_not_descend_past_scalar(resolver):
    assert resolver.get({"a": {"b": 2}}, "a.b.c") is None
    assert resolver.get({"a": "text"}, "a.upper") is None


def test_get_scalar_root_returns_none(resolver):
    assert resolver.get(5, "real") is None


def test_exact_dotted_key_takes_precedence(resolver):
    root = {"a.b": 5}
    assert resolver.get(root, "a.b") == 5

    root = {"a.b": "literal", "a": {"b": "nested"}}
    assert resolver.get(root, "a.b") == "literal"


def test_exact_key_with_falsy_value_is_returned(resolver):
    root = {"a.b": 0, "a": {"b": 1}}
    assert resolver.get(root, "a.b") == 0


def test_stored_none_reads_like_missing(resolver):
    # Known limitation: the two cases cannot be told apart
    assert resolver.get({"a": None}, "a") is None
    assert resolver.get({}, "a") is None


def test_get_returns_falsy_leaves(resolver):
    root = {"a": {"zero": 0, "empty": "", "no": False, "blank": {}}}
    assert resolver.get(root, "a.zero") == 0
    assert resolver.get(root, "a.empty") == ""
    assert resolver.get(root, "a.no") is False
    assert resolver.get(root, "a.blank") == {}


def test_get_works_on_any_mapping(resolver):
    root = OrderedDict(a=OrderedDict(b=3))
    assert resolver.get(root, "a.b") == 3


def test_walk_skips_exact_key_shortcut(resolver):
    root = {"a.b": 5}
    assert resolver.walk(root, PropertyPath("a.b")) is None
