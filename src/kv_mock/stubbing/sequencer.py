from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Generic, Literal, TypeVar

from kv_mock.domain.outcomes import Failure, Outcome, Value

T = TypeVar("T")

SequencerState = Literal["empty", "pending", "exhausted"]


@dataclass(slots=True)
class ResultSequencer(Generic[T]):
    """Ordered queue of programmed outcomes for one stubbed call shape.

    States:
      empty      no outcome programmed; ``next()`` yields None.
      pending    two or more outcomes queued; ``next()`` pops the front.
      exhausted  exactly one outcome left; ``next()`` replays it forever.
    """

    # Outcomes queued ahead of the tail, front first.
    _pending: deque[Outcome[T]] = field(default_factory=deque)
    _last: Outcome[T] | None = None

    def then_return(self, *values: T | None) -> ResultSequencer[T]:
        # No arguments still queues one empty success.
        if not values:
            values = (None,)
        for value in values:
            self._push(Value(value))
        return self

    def then_throw(self, *errors: BaseException) -> ResultSequencer[T]:
        for error in errors:
            if not isinstance(error, BaseException):
                raise TypeError(f"then_throw expects exception instances, got {type(error).__name__}")
            self._push(Failure(error))
        return self

    def next(self) -> Outcome[T] | None:
        if self._last is None:
            return None
        if not self._pending:
            return self._last
        return self._pending.popleft()

    @property
    def state(self) -> SequencerState:
        if self._last is None:
            return "empty"
        if not self._pending:
            return "exhausted"
        return "pending"

    @property
    def remaining(self) -> int:
        if self._last is None:
            return 0
        return len(self._pending) + 1

    def _push(self, outcome: Outcome[T]) -> None:
        if self._last is None:
            self._last = outcome
            return
        self._pending.append(self._last)
        self._last = outcome
