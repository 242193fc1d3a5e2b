from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from kv_mock.domain.store import DEFAULT_VERSIONSTAMP, KvCommitResult, KvEntryMaybe
from kv_mock.double.listing import MockKvListIterator, as_list_iterator
from kv_mock.integration.kv_store import KvStore
from kv_mock.integration.list_iterator import KvListIterator
from kv_mock.observability.emitter import DISABLED, LogEmitter
from kv_mock.recording.interactions import InteractionLog
from kv_mock.stubbing.registry import ExpectationRegistry


class MockKv(KvStore):
    # The double: records every call, then answers from the first matching stub or a neutral default.
    def __init__(
        self,
        registry: ExpectationRegistry,
        log: InteractionLog,
        *,
        default_versionstamp: str = DEFAULT_VERSIONSTAMP,
        emitter: LogEmitter = DISABLED,
    ) -> None:
        self._registry = registry
        self._log = log
        self._default_versionstamp = default_versionstamp
        self._emitter = emitter

    def get(self, key: Sequence[object], options: Mapping[str, object] | None = None) -> KvEntryMaybe:
        return self._call("get", (key, options), lambda: KvEntryMaybe(key=key, value=None, versionstamp=None))

    def get_many(
        self,
        keys: Sequence[Sequence[object]],
        options: Mapping[str, object] | None = None,
    ) -> list[KvEntryMaybe]:
        result = self._call(
            "get_many",
            (keys, options),
            lambda: [KvEntryMaybe(key=key, value=None, versionstamp=None) for key in keys],
        )
        # then_return() with no value yields None rather than a list.
        return None if result is None else list(result)

    def set(self, key: Sequence[object], value: object) -> KvCommitResult:
        return self._call("set", (key, value), self._default_commit)

    def delete(self, key: Sequence[object]) -> None:
        self._call("delete", (key,), lambda: None)

    def list(
        self,
        selector: Mapping[str, Sequence[object]],
        options: Mapping[str, object] | None = None,
    ) -> KvListIterator:
        result = self._call("list", (selector, options), lambda: MockKvListIterator([], ""))
        return as_list_iterator(result)

    def enqueue(self, value: object, options: Mapping[str, object] | None = None) -> KvCommitResult:
        return self._call("enqueue", (value, options), self._default_commit)

    def listen_queue(self, handler: Callable[[object], object]) -> None:
        return self._call("listen_queue", (handler,), lambda: None)

    def close(self) -> None:
        self._call("close", (), lambda: None)

    def _call(self, operation: str, args: tuple[object, ...], default: Callable[[], object]) -> Any:
        # Record + resolve + consume is one step under the instance lock.
        with self._log.lock:
            self._log.record(operation, args)
            outcome = self._registry.resolve(operation, args)
        self._emitter.emit("debug", "kv_mock.interaction_recorded", operation=operation, stubbed=outcome is not None)
        if outcome is None:
            return default()
        # Programmed failures propagate to the caller unchanged.
        return outcome.unwrap()

    def _default_commit(self) -> KvCommitResult:
        return KvCommitResult(ok=True, versionstamp=self._default_versionstamp)
