import pytest

from treequery.filters import (
    NilTreeError,
    NotFoundError,
    TreeError,
    filter_bool,
    filter_float,
    filter_int,
    filter_string,
    filter_uint,
    full_key_filter,
    key_filter,
    none_filter,
)
from treequery.node import Node, UInt


def _node(value, key="k", full_key="a.k"):
    return Node(full_key, key, value)


def _never(node):
    return False


@pytest.mark.parametrize("value", ["s", 1, 1.0, True, None, UInt(1), {"a": 1}])
def test_none_filter_accepts_everything(value):
    assert none_filter(_node(value)) is True


def test_key_filter_matches_key_only():
    node = _node(1, key="string_val", full_key="nested.string_val")
    assert key_filter("string_val")(node) is True
    assert key_filter("nested.string_val")(node) is False


def test_full_key_filter_matches_full_key_only():
    node = _node(1, key="name", full_key="user.name")
    assert full_key_filter("user.name")(node) is True
    assert full_key_filter("name")(node) is False


@pytest.mark.parametrize(
    "factory, accepted, rejected",
    [
        (filter_string, ["hello world", ""], [b"x", 1, 1.5, True, None]),
        (filter_bool, [True, False], [1, 0, "true", None, UInt(1)]),
        (filter_int, [42, -7, 0], [True, UInt(10), 6.28, "42", None]),
        (filter_uint, [UInt(10), UInt(0)], [10, True, 1.0, "10", None]),
        (filter_float, [6.28, 0.0], [1, True, UInt(1), "6.28", None]),
    ],
)
def test_typed_filters_check_the_value_type(factory, accepted, rejected):
    predicate = factory(none_filter)
    assert [predicate(_node(v)) for v in accepted] == [True] * len(accepted)
    assert [predicate(_node(v)) for v in rejected] == [False] * len(rejected)


@pytest.mark.parametrize(
    "factory, value",
    [
        (filter_string, "s"),
        (filter_bool, True),
        (filter_int, 1),
        (filter_uint, UInt(1)),
        (filter_float, 1.0),
    ],
)
def test_typed_filters_respect_inner_predicate(factory, value):
    assert factory(_never)(_node(value)) is False


def test_inner_predicate_is_not_called_on_wrong_type():
    calls = []

    def recording(node):
        calls.append(node)
        return True

    assert filter_int(recording)(_node("text")) is False
    assert calls == []


def test_typed_filter_combines_with_key_filter():
    predicate = filter_uint(key_filter("id"))
    assert predicate(_node(UInt(1001), key="id")) is True
    assert predicate(_node(UInt(1001), key="age")) is False
    assert predicate(_node(1001, key="id")) is False


def test_errors_share_a_base_and_carry_messages():
    nil_error = NilTreeError()
    not_found = NotFoundError()
    assert str(nil_error) == "tree is nil"
    assert str(not_found) == "No item found"
    assert isinstance(nil_error, TreeError)
    assert isinstance(not_found, TreeError)
    assert isinstance(not_found, LookupError)
    assert isinstance(nil_error, ValueError)