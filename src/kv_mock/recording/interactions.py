from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from threading import RLock

# Operations whose last parameter is an optional options mapping.
_OPTIONS_LAST = frozenset({"get", "get_many", "list", "enqueue"})


@dataclass(slots=True)
class Interaction:
    # One call made to the double; only the verified flag ever changes.
    operation: str
    args: tuple[object, ...]
    verified: bool = False

    def describe(self) -> str:
        # An omitted options argument is left out of failure output.
        args = list(self.args)
        if self.operation in _OPTIONS_LAST and args and args[-1] is None:
            args.pop()
        return f"kv.{self.operation}(" + ", ".join(repr(arg) for arg in args) + ")"


@dataclass(slots=True)
class InteractionLog:
    """Append-only record of every call made to the double, grouped by operation.

    Operations keep first-use order and interactions keep call order. All
    mutation goes through ``record`` and ``mark_matching``, both of which hold
    ``lock``; the lock is re-entrant so the double can hold it across
    record + resolve.
    """

    lock: RLock = field(default_factory=RLock, repr=False)
    _by_operation: dict[str, list[Interaction]] = field(default_factory=dict)

    def record(self, operation: str, args: Sequence[object]) -> Interaction:
        interaction = Interaction(operation=operation, args=tuple(args))
        with self.lock:
            self._by_operation.setdefault(operation, []).append(interaction)
        return interaction

    def interactions(self, operation: str) -> list[Interaction]:
        with self.lock:
            return list(self._by_operation.get(operation, []))

    def mark_matching(self, operation: str, predicate: Callable[[Sequence[object]], bool]) -> list[Interaction]:
        # Filter and mark in one step; marking is idempotent.
        with self.lock:
            matched = [item for item in self._by_operation.get(operation, []) if predicate(item.args)]
            for item in matched:
                item.verified = True
        return matched

    def unverified(self) -> list[Interaction]:
        with self.lock:
            return [item for items in self._by_operation.values() for item in items if not item.verified]

    def operations(self) -> list[str]:
        with self.lock:
            return list(self._by_operation.keys())

    def count(self) -> int:
        with self.lock:
            return sum(len(items) for items in self._by_operation.values())

    def clear(self) -> None:
        with self.lock:
            self._by_operation.clear()
