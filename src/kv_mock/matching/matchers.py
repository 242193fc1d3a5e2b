from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Generic, TypeVar

from kv_mock.domain.store import CONSISTENCY_LEVELS, is_kv_key
from kv_mock.matching.equality import deep_equal

T = TypeVar("T")


class Matcher(Generic[T]):
    """Predicate over an optional argument value.

    ``None`` means "no value supplied". Matchers must handle it explicitly and
    must stay total: a shape mismatch is ``False``, never an exception.
    """

    def matches(self, candidate: T | None = None) -> bool:
        raise NotImplementedError("Matcher.matches must be implemented")

    def describe(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        return self.describe()


class Exact(Matcher[T]):
    # Structural equality against a literal value.
    __slots__ = ("expected",)

    def __init__(self, expected: T | None) -> None:
        self.expected = expected

    def matches(self, candidate: T | None = None) -> bool:
        return deep_equal(candidate, self.expected)

    def describe(self) -> str:
        return f"eq({self.expected!r})"


class AnyOfType(Matcher[T]):
    # Any defined value accepted by the runtime shape check.
    __slots__ = ("name", "_check")

    def __init__(self, name: str, check: Callable[[object], bool]) -> None:
        self.name = name
        self._check = check

    def matches(self, candidate: T | None = None) -> bool:
        if candidate is None:
            return False
        return bool(self._check(candidate))

    def describe(self) -> str:
        return f"{self.name}()"


def eq(expected: T | None) -> Matcher[T]:
    return Exact(expected)


def any_key() -> Matcher[object]:
    return AnyOfType("any_key", is_kv_key)


def any_value() -> Matcher[object]:
    return AnyOfType("any_value", lambda _value: True)


def any_list_selector() -> Matcher[object]:
    return AnyOfType("any_list_selector", lambda value: isinstance(value, Mapping))


def any_bytes() -> Matcher[bytes]:
    return AnyOfType("any_bytes", lambda value: isinstance(value, (bytes, bytearray)))


def any_string() -> Matcher[str]:
    return AnyOfType("any_string", lambda value: isinstance(value, str))


def any_number() -> Matcher[float]:
    return AnyOfType(
        "any_number",
        lambda value: isinstance(value, (int, float)) and not isinstance(value, bool),
    )


def any_bigint() -> Matcher[int]:
    # Python ints are unbounded; this is the integer-only counterpart of any_number.
    return AnyOfType("any_bigint", lambda value: isinstance(value, int) and not isinstance(value, bool))


def any_boolean() -> Matcher[bool]:
    return AnyOfType("any_boolean", lambda value: isinstance(value, bool))


def any_consistency_level() -> Matcher[str]:
    return AnyOfType("any_consistency_level", lambda value: value in CONSISTENCY_LEVELS)
