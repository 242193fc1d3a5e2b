from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Literal

from kv_mock.matching.matchers import Matcher
from kv_mock.matching.resolve import (
    consistency_matcher,
    key_matcher,
    keys_matcher,
    matches_list_selector,
    matches_object,
    to_matcher,
)

OperationName = Literal["get", "get_many", "set", "delete", "list", "enqueue", "listen_queue", "close"]

# Store operations in contract order; the double, the stubbing facade and the verifier share it.
OPERATIONS: tuple[OperationName, ...] = (
    "get",
    "get_many",
    "set",
    "delete",
    "list",
    "enqueue",
    "listen_queue",
    "close",
)


@dataclass(frozen=True, slots=True)
class CallShape:
    # Resolved matcher tuple for one operation call, positionally aligned with recorded args.
    operation: OperationName
    matchers: tuple[Matcher[object], ...]
    options_index: int | None = None

    def accepts(self, args: Sequence[object]) -> bool:
        if len(args) != len(self.matchers):
            return False
        for index, (matcher, value) in enumerate(zip(self.matchers, args)):
            # A call without options satisfies any options matcher.
            if index == self.options_index and _options_absent(value):
                continue
            if not matcher.matches(value):
                return False
        return True

    def describe(self) -> str:
        return f"kv.{self.operation}(" + ", ".join(m.describe() for m in self.matchers) + ")"


def get_shape(key: object, options: object = None) -> CallShape:
    return CallShape("get", (key_matcher(key), consistency_matcher(options)), options_index=1)


def get_many_shape(keys: object, options: object = None) -> CallShape:
    return CallShape("get_many", (keys_matcher(keys), consistency_matcher(options)), options_index=1)


def set_shape(key: object, value: object) -> CallShape:
    return CallShape("set", (key_matcher(key), to_matcher(value)))


def delete_shape(key: object) -> CallShape:
    return CallShape("delete", (key_matcher(key),))


def list_shape(selector: object, options: object = None) -> CallShape:
    return CallShape("list", (matches_list_selector(selector), matches_object(options)), options_index=1)


def enqueue_shape(value: object, options: object = None) -> CallShape:
    return CallShape("enqueue", (to_matcher(value), matches_object(options)), options_index=1)


def listen_queue_shape(handler: object) -> CallShape:
    return CallShape("listen_queue", (to_matcher(handler),))


def close_shape() -> CallShape:
    return CallShape("close", ())


def _options_absent(value: object) -> bool:
    return value is None or (isinstance(value, Mapping) and len(value) == 0)
