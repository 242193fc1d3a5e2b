from __future__ import annotations

import pytest

from kv_mock.matching import (
    MultiKey,
    any_number,
    any_string,
    eq,
    key_matcher,
    key_parts,
    matches_list_selector,
    matches_object,
)


@pytest.mark.parametrize("key", [["a"], ["a", "b", "c"], []])
def test_key_shape_rejects_wrong_arity(key: list[str]) -> None:
    # A two-part key matcher never matches keys of another length, whatever the part matchers.
    matcher = key_parts([any_string(), any_string()])
    assert matcher.matches(key) is False


def test_key_shape_matches_parts_positionally() -> None:
    matcher = key_parts(["user", any_number()])
    assert matcher.matches(["user", 7])
    assert not matcher.matches(["user", "7"])
    assert not matcher.matches([7, "user"])


def test_key_shape_rejects_missing_key() -> None:
    assert key_parts(["a"]).matches(None) is False


def test_literal_key_resolves_to_key_shape() -> None:
    # Literal parts and matcher parts can be mixed in one key.
    matcher = key_matcher(["orders", any_string(), 3])
    assert matcher.matches(("orders", "o-1", 3))
    assert not matcher.matches(("orders", "o-1", 4))


def test_multi_key_checks_batch_arity_first() -> None:
    matcher = MultiKey([key_matcher(["a"]), key_matcher(["b"])])
    assert matcher.matches([["a"], ["b"]])
    assert not matcher.matches([["a"]])
    assert not matcher.matches([["a"], ["b"], ["c"]])
    assert not matcher.matches([["b"], ["a"]])


def test_list_selector_requires_same_field_count() -> None:
    # A prefix-only expectation must not silently match a prefix+start call.
    matcher = matches_list_selector({"prefix": ["users"]})
    assert matcher.matches({"prefix": ["users"]})
    assert not matcher.matches({"prefix": ["users"], "start": ["users", "m"]})


def test_list_selector_matches_range_fields() -> None:
    matcher = matches_list_selector({"start": ["a"], "end": [any_string()]})
    assert matcher.matches({"start": ["a"], "end": ["z"]})
    assert not matcher.matches({"start": ["b"], "end": ["z"]})
    assert not matcher.matches({"start": ["a"], "prefix": ["z"]})


def test_list_selector_rejects_unknown_fields() -> None:
    with pytest.raises(ValueError):
        matches_list_selector({"suffix": ["x"]})


def test_object_shape_requires_same_field_count() -> None:
    matcher = matches_object({"limit": 10})
    assert matcher.matches({"limit": 10})
    assert not matcher.matches({"limit": 10, "reverse": True})
    assert not matcher.matches({"reverse": True})


def test_object_shape_missing_field_does_not_match() -> None:
    matcher = matches_object({"limit": 10, "reverse": eq(True)})
    assert not matcher.matches({"limit": 10, "cursor": "c"})


def test_object_shape_none_matches_only_none() -> None:
    matcher = matches_object(None)
    assert matcher.matches(None)
    assert not matcher.matches({"limit": 1})
    assert not matches_object({"limit": 1}).matches(None)
