from __future__ import annotations

from kv_mock.matching import any_key
from kv_mock.matching.call_shapes import get_shape, set_shape
from kv_mock.stubbing import ExpectationRegistry


def test_first_registered_matching_stub_wins() -> None:
    # A broad stub registered first shadows a narrower one registered later.
    registry = ExpectationRegistry()
    registry.stub(get_shape(any_key())).then_return("broad")
    registry.stub(get_shape(["a"])).then_return("narrow")
    outcome = registry.resolve("get", (["a"], None))
    assert outcome is not None
    assert outcome.unwrap() == "broad"


def test_narrow_stub_first_keeps_both_reachable() -> None:
    registry = ExpectationRegistry()
    registry.stub(get_shape(["a"])).then_return("narrow")
    registry.stub(get_shape(any_key())).then_return("broad")
    assert registry.resolve("get", (["a"], None)).unwrap() == "narrow"  # type: ignore[union-attr]
    assert registry.resolve("get", (["b"], None)).unwrap() == "broad"  # type: ignore[union-attr]


def test_unmatched_call_resolves_to_none() -> None:
    registry = ExpectationRegistry()
    registry.stub(get_shape(["a"])).then_return("x")
    assert registry.resolve("get", (["b"], None)) is None
    assert registry.resolve("set", (["a"], 1)) is None


def test_stub_without_outcomes_resolves_to_none() -> None:
    # A declared stub with nothing programmed behaves as if unmatched.
    registry = ExpectationRegistry()
    registry.stub(set_shape(["a"], 1))
    assert registry.resolve("set", (["a"], 1)) is None


def test_expectations_are_kept_per_operation_in_order() -> None:
    registry = ExpectationRegistry()
    registry.stub(get_shape(["a"]))
    registry.stub(set_shape(["a"], 1))
    registry.stub(get_shape(["b"]))
    assert [item.shape.describe() for item in registry.expectations("get")] == [
        "kv.get([eq('a')], {consistency: eq(None)})",
        "kv.get([eq('b')], {consistency: eq(None)})",
    ]
    assert registry.expectations("set")[0].operation == "set"
    registry.clear()
    assert registry.expectations("get") == []
