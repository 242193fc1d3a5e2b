from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from kv_mock.domain.outcomes import Outcome
from kv_mock.matching.call_shapes import CallShape, OperationName
from kv_mock.stubbing.sequencer import ResultSequencer


@dataclass(frozen=True, slots=True)
class Expectation:
    # Registered stub: resolved call shape plus the outcome queue it feeds.
    shape: CallShape
    sequencer: ResultSequencer[object]

    @property
    def operation(self) -> OperationName:
        return self.shape.operation


@dataclass(slots=True)
class ExpectationRegistry:
    # Per-operation stubs in registration order; the first match wins.
    _expectations: dict[str, list[Expectation]] = field(default_factory=dict)

    def stub(self, shape: CallShape) -> ResultSequencer[object]:
        sequencer: ResultSequencer[object] = ResultSequencer()
        self._expectations.setdefault(shape.operation, []).append(Expectation(shape=shape, sequencer=sequencer))
        return sequencer

    def resolve(self, operation: str, args: Sequence[object]) -> Outcome[object] | None:
        # Narrow stubs registered after an overlapping broad stub are unreachable.
        for expectation in self._expectations.get(operation, []):
            if expectation.shape.accepts(args):
                return expectation.sequencer.next()
        return None

    def expectations(self, operation: str) -> list[Expectation]:
        return list(self._expectations.get(operation, []))

    def clear(self) -> None:
        self._expectations.clear()
