from __future__ import annotations

from kv_mock.matching import call_shapes
from kv_mock.matching.call_shapes import CallShape
from kv_mock.observability.emitter import DISABLED, LogEmitter
from kv_mock.recording.interactions import InteractionLog
from kv_mock.verification.errors import KvAssertionError
from kv_mock.verification.exhaustiveness import DEFAULT_DISPLAY_LIMIT, no_more_interactions
from kv_mock.verification.quantifiers import DEFAULT_QUANTIFIER, Quantifier


class _OperationVerifier:
    # Operation-matcher entry points shared by AssertKv and VerificationChain.
    def get(self, key: object, options: object = None) -> bool:
        return self._verify(call_shapes.get_shape(key, options))

    def get_many(self, keys: object, options: object = None) -> bool:
        return self._verify(call_shapes.get_many_shape(keys, options))

    def set(self, key: object, value: object) -> bool:
        return self._verify(call_shapes.set_shape(key, value))

    def delete(self, key: object) -> bool:
        return self._verify(call_shapes.delete_shape(key))

    def list(self, selector: object, options: object = None) -> bool:
        return self._verify(call_shapes.list_shape(selector, options))

    def enqueue(self, value: object, options: object = None) -> bool:
        return self._verify(call_shapes.enqueue_shape(value, options))

    def listen_queue(self, handler: object) -> bool:
        return self._verify(call_shapes.listen_queue_shape(handler))

    def close(self) -> bool:
        # close takes no arguments, so every recorded close matches.
        return self._verify(call_shapes.close_shape())

    def _verify(self, shape: CallShape) -> bool:
        raise NotImplementedError("_verify must be implemented")


class VerificationChain(_OperationVerifier):
    """Quantifier bound to one verification.

    Each quantifier setter on ``AssertKv`` returns a fresh chain, so chains
    never share state. After an evaluation, pass or fail, the chain falls back
    to ``at_least(1)``.
    """

    def __init__(self, log: InteractionLog, quantifier: Quantifier, *, emitter: LogEmitter = DISABLED) -> None:
        self._log = log
        self._quantifier = quantifier
        self._emitter = emitter

    @property
    def quantifier(self) -> Quantifier:
        return self._quantifier

    def _verify(self, shape: CallShape) -> bool:
        quantifier = self._quantifier
        try:
            # Matches are marked verified even when the count check below fails.
            matched = self._log.mark_matching(shape.operation, shape.accepts)
            count = len(matched)
            try:
                quantifier.check(count, call=shape.describe())
            except KvAssertionError:
                self._emit("kv_mock.verification_failed", shape, quantifier, count)
                raise
            self._emit("kv_mock.verification_passed", shape, quantifier, count)
            return True
        finally:
            self._quantifier = DEFAULT_QUANTIFIER

    def _emit(self, message: str, shape: CallShape, quantifier: Quantifier, count: int) -> None:
        self._emitter.emit(
            "debug",
            message,
            operation=shape.operation,
            quantifier=quantifier.describe(),
            count=count,
        )


class AssertKv(_OperationVerifier):
    # Verification facade:
    #   verify.get(["k"])                  at least once (default)
    #   verify.times(2).set(["k"], "v")
    #   verify.never().delete(any_key())
    #   verify.no_more_interactions()
    def __init__(
        self,
        log: InteractionLog,
        *,
        display_limit: int = DEFAULT_DISPLAY_LIMIT,
        emitter: LogEmitter = DISABLED,
    ) -> None:
        self._log = log
        self._display_limit = display_limit
        self._emitter = emitter

    def once(self) -> VerificationChain:
        return self._chain(Quantifier.once())

    def times(self, n: int) -> VerificationChain:
        return self._chain(Quantifier.times(n))

    def never(self) -> VerificationChain:
        return self._chain(Quantifier.never())

    def at_least(self, n: int) -> VerificationChain:
        return self._chain(Quantifier.at_least(n))

    def at_most(self, n: int) -> VerificationChain:
        return self._chain(Quantifier.at_most(n))

    def at_least_once(self) -> VerificationChain:
        return self._chain(Quantifier.at_least(1))

    def at_most_once(self) -> VerificationChain:
        return self._chain(Quantifier.at_most(1))

    def no_more_interactions(self) -> bool:
        try:
            return no_more_interactions(self._log, display_limit=self._display_limit)
        except KvAssertionError:
            self._emitter.emit("debug", "kv_mock.unverified_interactions", count=len(self._log.unverified()))
            raise

    def _verify(self, shape: CallShape) -> bool:
        return self._chain(DEFAULT_QUANTIFIER)._verify(shape)

    def _chain(self, quantifier: Quantifier) -> VerificationChain:
        return VerificationChain(self._log, quantifier, emitter=self._emitter)
