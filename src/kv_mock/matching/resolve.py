from __future__ import annotations

from collections.abc import Mapping, Sequence

from kv_mock.matching.matchers import Exact, Matcher
from kv_mock.matching.shapes import FieldMatcher, KeyShape, ListSelector, MultiKey, ObjectShape

# Argument positions are either a literal (wrapped as Exact) or a Matcher.
# Classification happens once, when a stub or verification is declared.


def to_matcher(value: object) -> Matcher[object]:
    if isinstance(value, Matcher):
        return value
    return Exact(value)


def key_parts(parts: Sequence[object]) -> Matcher[Sequence[object]]:
    # Per-part key matcher; literal parts compare structurally.
    return KeyShape([to_matcher(part) for part in parts])


def key_matcher(key: object) -> Matcher[object]:
    if isinstance(key, Matcher):
        return key
    if isinstance(key, Sequence) and not isinstance(key, (str, bytes, bytearray)):
        return key_parts(key)
    return Exact(key)


def keys_matcher(keys: object) -> Matcher[object]:
    if isinstance(keys, Matcher):
        return keys
    if not isinstance(keys, Sequence) or isinstance(keys, (str, bytes, bytearray)):
        raise TypeError("keys must be a sequence of keys or a Matcher")
    return MultiKey([key_matcher(key) for key in keys])


def matches_list_selector(expected: object) -> Matcher[object]:
    if isinstance(expected, Matcher):
        return expected
    if not isinstance(expected, Mapping):
        raise TypeError("list selector must be a mapping or a Matcher")
    return ListSelector({name: key_matcher(value) for name, value in expected.items()})


def matches_object(expected: object) -> Matcher[object]:
    # Option objects: a matcher per field; None expects an absent object.
    if isinstance(expected, Matcher):
        return expected
    if expected is None:
        return ObjectShape(None)
    if not isinstance(expected, Mapping):
        raise TypeError("options must be a mapping, None or a Matcher")
    return ObjectShape({name: to_matcher(value) for name, value in expected.items()})


def consistency_matcher(options: object) -> Matcher[object]:
    # get/get_many options carry a single consistency field.
    if isinstance(options, Matcher):
        return options
    if options is None:
        return FieldMatcher("consistency", Exact(None))
    if not isinstance(options, Mapping):
        raise TypeError("options must be a mapping, None or a Matcher")
    return FieldMatcher("consistency", to_matcher(options.get("consistency")))
