from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import fields, is_dataclass


def deep_equal(left: object, right: object) -> bool:
    # Structural equality used by Exact matchers; identity is never required.
    if left is right:
        return True
    if isinstance(left, bool) or isinstance(right, bool):
        # bool is an int subclass; keys distinguish True from 1.
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if isinstance(left, float) and isinstance(right, float):
        if math.isnan(left) and math.isnan(right):
            return True
        return left == right
    if isinstance(left, (bytes, bytearray, memoryview)) or isinstance(right, (bytes, bytearray, memoryview)):
        if not isinstance(left, (bytes, bytearray, memoryview)) or not isinstance(right, (bytes, bytearray, memoryview)):
            return False
        return bytes(left) == bytes(right)
    if isinstance(left, str) or isinstance(right, str):
        return isinstance(left, str) and isinstance(right, str) and left == right
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if len(left) != len(right):
            return False
        for key, value in left.items():
            if key not in right or not deep_equal(value, right[key]):
                return False
        return True
    if _is_sequence(left) and _is_sequence(right):
        if len(left) != len(right):
            return False
        return all(deep_equal(a, b) for a, b in zip(left, right))
    if is_dataclass(left) and is_dataclass(right) and not isinstance(left, type) and not isinstance(right, type):
        if type(left) is not type(right):
            return False
        return all(deep_equal(getattr(left, f.name), getattr(right, f.name)) for f in fields(left))
    if isinstance(left, (set, frozenset)) and isinstance(right, (set, frozenset)):
        return left == right
    try:
        return bool(left == right)
    except Exception:
        # Matcher evaluation stays total: an incomparable pair is simply unequal.
        return False


def _is_sequence(value: object) -> bool:
    # list and tuple are interchangeable for structural comparison.
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray, memoryview))
