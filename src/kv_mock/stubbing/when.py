from __future__ import annotations

from contextlib import AbstractContextManager, nullcontext

from kv_mock.matching import call_shapes
from kv_mock.matching.call_shapes import CallShape
from kv_mock.observability.emitter import DISABLED, LogEmitter
from kv_mock.stubbing.registry import ExpectationRegistry
from kv_mock.stubbing.sequencer import ResultSequencer


class WhenKv:
    # Stubbing facade: one entry point per store operation, each returning the new outcome queue.
    #   when.get(["user", any_string()]).then_return(entry).then_throw(err)
    def __init__(
        self,
        registry: ExpectationRegistry,
        *,
        lock: AbstractContextManager[object] | None = None,
        log: LogEmitter = DISABLED,
    ) -> None:
        self._registry = registry
        self._lock: AbstractContextManager[object] = lock if lock is not None else nullcontext()
        self._log = log

    def get(self, key: object, options: object = None) -> ResultSequencer[object]:
        return self._stub(call_shapes.get_shape(key, options))

    def get_many(self, keys: object, options: object = None) -> ResultSequencer[object]:
        return self._stub(call_shapes.get_many_shape(keys, options))

    def set(self, key: object, value: object) -> ResultSequencer[object]:
        return self._stub(call_shapes.set_shape(key, value))

    def delete(self, key: object) -> ResultSequencer[object]:
        return self._stub(call_shapes.delete_shape(key))

    def list(self, selector: object, options: object = None) -> ResultSequencer[object]:
        # Programmed values are MockListing instances or plain entry sequences.
        return self._stub(call_shapes.list_shape(selector, options))

    def enqueue(self, value: object, options: object = None) -> ResultSequencer[object]:
        return self._stub(call_shapes.enqueue_shape(value, options))

    def listen_queue(self, handler: object) -> ResultSequencer[object]:
        return self._stub(call_shapes.listen_queue_shape(handler))

    def close(self) -> ResultSequencer[object]:
        return self._stub(call_shapes.close_shape())

    def _stub(self, shape: CallShape) -> ResultSequencer[object]:
        with self._lock:
            sequencer = self._registry.stub(shape)
        self._log.emit("debug", "kv_mock.stub_registered", operation=shape.operation, shape=shape.describe())
        return sequencer
