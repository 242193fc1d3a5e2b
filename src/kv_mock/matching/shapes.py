from __future__ import annotations

from collections.abc import Mapping, Sequence

from kv_mock.matching.matchers import Matcher

# Structural matchers for composite argument shapes: keys, key batches, selectors, option objects.

_SELECTOR_FIELDS = ("prefix", "start", "end")


class KeyShape(Matcher[Sequence[object]]):
    # Positional per-part matcher; arity is checked before any part.
    __slots__ = ("part_matchers",)

    def __init__(self, part_matchers: Sequence[Matcher[object]]) -> None:
        self.part_matchers = tuple(part_matchers)

    def matches(self, candidate: Sequence[object] | None = None) -> bool:
        if not _is_key_sequence(candidate):
            return False
        if len(candidate) != len(self.part_matchers):
            return False
        return all(matcher.matches(part) for matcher, part in zip(self.part_matchers, candidate))

    def describe(self) -> str:
        return "[" + ", ".join(m.describe() for m in self.part_matchers) + "]"


class MultiKey(Matcher[Sequence[Sequence[object]]]):
    # Batched key list matcher; the batch size must equal the matcher count.
    __slots__ = ("key_matchers",)

    def __init__(self, key_matchers: Sequence[Matcher[object]]) -> None:
        self.key_matchers = tuple(key_matchers)

    def matches(self, candidate: Sequence[Sequence[object]] | None = None) -> bool:
        if not _is_key_sequence(candidate):
            return False
        if len(candidate) != len(self.key_matchers):
            return False
        return all(matcher.matches(key) for matcher, key in zip(self.key_matchers, candidate))

    def describe(self) -> str:
        return "[" + ", ".join(m.describe() for m in self.key_matchers) + "]"


class ListSelector(Matcher[Mapping[str, object]]):
    # Selector matcher over prefix/start/end; the field sets must have equal size.
    __slots__ = ("field_matchers",)

    def __init__(self, field_matchers: Mapping[str, Matcher[object]]) -> None:
        unknown = sorted(set(field_matchers) - set(_SELECTOR_FIELDS))
        if unknown:
            raise ValueError(f"list selector fields must be one of {list(_SELECTOR_FIELDS)}: {unknown}")
        self.field_matchers = dict(field_matchers)

    def matches(self, candidate: Mapping[str, object] | None = None) -> bool:
        if not isinstance(candidate, Mapping):
            return False
        # A narrower selector never matches a broader call.
        if len(candidate) != len(self.field_matchers):
            return False
        for name in _SELECTOR_FIELDS:
            matcher = self.field_matchers.get(name)
            if matcher is None:
                continue
            if name not in candidate or not matcher.matches(candidate[name]):
                return False
        return True

    def describe(self) -> str:
        return _describe_fields(self.field_matchers)


class ObjectShape(Matcher[Mapping[str, object]]):
    # Option-object matcher; expected None matches only an absent object.
    __slots__ = ("field_matchers",)

    def __init__(self, field_matchers: Mapping[str, Matcher[object]] | None) -> None:
        self.field_matchers = None if field_matchers is None else dict(field_matchers)

    def matches(self, candidate: Mapping[str, object] | None = None) -> bool:
        if self.field_matchers is None or candidate is None:
            return self.field_matchers is None and candidate is None
        if not isinstance(candidate, Mapping):
            return False
        if len(candidate) != len(self.field_matchers):
            return False
        for name, matcher in self.field_matchers.items():
            if name not in candidate or not matcher.matches(candidate[name]):
                return False
        return True

    def describe(self) -> str:
        if self.field_matchers is None:
            return "None"
        return _describe_fields(self.field_matchers)


class FieldMatcher(Matcher[Mapping[str, object]]):
    # Single-field view over an options mapping (get/get_many consistency).
    __slots__ = ("name", "matcher")

    def __init__(self, name: str, matcher: Matcher[object]) -> None:
        self.name = name
        self.matcher = matcher

    def matches(self, candidate: Mapping[str, object] | None = None) -> bool:
        if candidate is None:
            return self.matcher.matches(None)
        if not isinstance(candidate, Mapping):
            return False
        return self.matcher.matches(candidate.get(self.name))

    def describe(self) -> str:
        return "{" + f"{self.name}: {self.matcher.describe()}" + "}"


def _is_key_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _describe_fields(field_matchers: Mapping[str, Matcher[object]]) -> str:
    return "{" + ", ".join(f"{name}: {m.describe()}" for name, m in field_matchers.items()) + "}"

