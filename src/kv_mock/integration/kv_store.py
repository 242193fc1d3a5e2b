from __future__ import annotations

import ast
import base64
from collections.abc import Callable, Mapping, Sequence

from kv_mock.domain.store import KvCommitResult, KvEntry, KvEntryMaybe, is_kv_key
from kv_mock.integration.list_iterator import KvListIterator


class KvStoreClosedError(RuntimeError):
    # Raised when a closed store is used again.
    pass


class KvStore:
    # Store port: the fixed operation set the double mimics signature-for-signature.
    def get(self, key: Sequence[object], options: Mapping[str, object] | None = None) -> KvEntryMaybe:
        raise NotImplementedError("KvStore.get must be implemented")

    def get_many(
        self,
        keys: Sequence[Sequence[object]],
        options: Mapping[str, object] | None = None,
    ) -> list[KvEntryMaybe]:
        raise NotImplementedError("KvStore.get_many must be implemented")

    def set(self, key: Sequence[object], value: object) -> KvCommitResult:
        raise NotImplementedError("KvStore.set must be implemented")

    def delete(self, key: Sequence[object]) -> None:
        raise NotImplementedError("KvStore.delete must be implemented")

    def list(
        self,
        selector: Mapping[str, Sequence[object]],
        options: Mapping[str, object] | None = None,
    ) -> KvListIterator:
        raise NotImplementedError("KvStore.list must be implemented")

    def enqueue(self, value: object, options: Mapping[str, object] | None = None) -> KvCommitResult:
        raise NotImplementedError("KvStore.enqueue must be implemented")

    def listen_queue(self, handler: Callable[[object], object]) -> None:
        raise NotImplementedError("KvStore.listen_queue must be implemented")

    def close(self) -> None:
        raise NotImplementedError("KvStore.close must be implemented")


STORE_OPERATIONS: tuple[str, ...] = (
    "get",
    "get_many",
    "set",
    "delete",
    "list",
    "enqueue",
    "listen_queue",
    "close",
)


def validate_kv_contract_type(data_type: type[object]) -> None:
    # Install targets must be KvStore or subclasses with the same public API.
    if not isinstance(data_type, type):
        raise TypeError("KV contract must be a class")
    if not issubclass(data_type, KvStore):
        raise TypeError(f"KV contract must inherit from KvStore: {data_type!r}")

    base_api = _public_callable_names(KvStore)
    candidate_api: set[str] = set()
    for klass in data_type.__mro__:
        if klass in (KvStore, object):
            continue
        candidate_api |= _public_callable_names(klass)
    extra_api = sorted(name for name in candidate_api if name not in base_api)
    if extra_api:
        raise TypeError(
            "KV contract must not add public methods; "
            f"the double cannot mimic them ({data_type.__name__}: {extra_api})"
        )


def _public_callable_names(cls: type[object]) -> set[str]:
    names: set[str] = set()
    for name, value in cls.__dict__.items():
        if name.startswith("_"):
            continue
        if callable(value):
            names.add(name)
    return names


class InMemoryKvStore(KvStore):
    # In-memory reference adapter for deterministic local runs and tests.
    # Keys order by part type (bytes < str < number < bool), then by value.
    def __init__(self) -> None:
        # Indexed by sort key so that parts like True and 1 stay distinct.
        self._store: dict[tuple[tuple[int, object], ...], tuple[tuple[object, ...], object, str]] = {}
        self._version = 0
        self._listeners: list[Callable[[object], object]] = []
        self._undelivered: list[tuple[object, Mapping[str, object]]] = []
        self._closed = False

    def get(self, key: Sequence[object], options: Mapping[str, object] | None = None) -> KvEntryMaybe:
        self._ensure_open()
        stored = self._store.get(_sort_key(_normalize_key(key)))
        if stored is None:
            return KvEntryMaybe(key=key, value=None, versionstamp=None)
        _, value, versionstamp = stored
        return KvEntryMaybe(key=key, value=value, versionstamp=versionstamp)

    def get_many(
        self,
        keys: Sequence[Sequence[object]],
        options: Mapping[str, object] | None = None,
    ) -> list[KvEntryMaybe]:
        return [self.get(key, options) for key in keys]

    def set(self, key: Sequence[object], value: object) -> KvCommitResult:
        self._ensure_open()
        versionstamp = self._next_versionstamp()
        normalized = _normalize_key(key)
        self._store[_sort_key(normalized)] = (normalized, value, versionstamp)
        return KvCommitResult(ok=True, versionstamp=versionstamp)

    def delete(self, key: Sequence[object]) -> None:
        self._ensure_open()
        self._store.pop(_sort_key(_normalize_key(key)), None)

    def list(
        self,
        selector: Mapping[str, Sequence[object]],
        options: Mapping[str, object] | None = None,
    ) -> KvListIterator:
        self._ensure_open()
        options = options or {}
        prefix = _optional_key(selector, "prefix")
        start = _optional_key(selector, "start")
        end = _optional_key(selector, "end")
        if prefix is None and start is None and end is None:
            raise ValueError("list selector requires prefix or start/end")

        rows = [self._store[index] for index in sorted(self._store)]
        selected = [row for row in rows if _in_range(row[0], prefix, start, end)]
        if options.get("reverse"):
            selected.reverse()
        cursor = options.get("cursor")
        if isinstance(cursor, str) and cursor:
            after = _decode_cursor(cursor)
            if options.get("reverse"):
                selected = [row for row in selected if _sort_key(row[0]) < _sort_key(after)]
            else:
                selected = [row for row in selected if _sort_key(row[0]) > _sort_key(after)]
        limit = options.get("limit")
        if isinstance(limit, int) and limit >= 0:
            selected = selected[:limit]

        entries = [KvEntry(key=key, value=value, versionstamp=versionstamp) for key, value, versionstamp in selected]
        return KvListIterator(entries, [_encode_cursor(row[0]) for row in selected])

    def enqueue(self, value: object, options: Mapping[str, object] | None = None) -> KvCommitResult:
        # Delivery is immediate and ordered; delay is accepted but not simulated.
        self._ensure_open()
        versionstamp = self._next_versionstamp()
        message_options = dict(options or {})
        if self._listeners:
            self._deliver(value, message_options)
        else:
            self._undelivered.append((value, message_options))
        return KvCommitResult(ok=True, versionstamp=versionstamp)

    def listen_queue(self, handler: Callable[[object], object]) -> None:
        self._ensure_open()
        if not callable(handler):
            raise TypeError("listen_queue handler must be callable")
        self._listeners.append(handler)
        pending, self._undelivered = self._undelivered, []
        for value, options in pending:
            self._deliver(value, options)

    def close(self) -> None:
        self._closed = True
        self._listeners.clear()

    def _deliver(self, value: object, options: Mapping[str, object]) -> None:
        for handler in list(self._listeners):
            try:
                handler(value)
            except Exception:
                # Failed deliveries fall back to keys_if_undelivered when provided.
                fallback = options.get("keys_if_undelivered")
                if not isinstance(fallback, Sequence) or not fallback:
                    raise
                for key in fallback:
                    self.set(key, value)

    def _next_versionstamp(self) -> str:
        self._version += 1
        return f"{self._version:020d}"

    def _ensure_open(self) -> None:
        if self._closed:
            raise KvStoreClosedError("store is closed")


def _normalize_key(key: Sequence[object]) -> tuple[object, ...]:
    if not is_kv_key(key):
        raise TypeError(f"key must be a sequence of str/bytes/int/float/bool parts: {key!r}")
    return tuple(bytes(part) if isinstance(part, bytearray) else part for part in key)


def _optional_key(selector: Mapping[str, Sequence[object]], name: str) -> tuple[object, ...] | None:
    value = selector.get(name)
    if value is None:
        return None
    return _normalize_key(value)


def _part_rank(part: object) -> tuple[int, object]:
    if isinstance(part, bool):
        return (3, part)
    if isinstance(part, (int, float)):
        return (2, part)
    if isinstance(part, str):
        return (1, part)
    return (0, part)


def _sort_key(key: tuple[object, ...]) -> tuple[tuple[int, object], ...]:
    return tuple(_part_rank(part) for part in key)


def _in_range(
    key: tuple[object, ...],
    prefix: tuple[object, ...] | None,
    start: tuple[object, ...] | None,
    end: tuple[object, ...] | None,
) -> bool:
    if prefix is not None and (len(key) <= len(prefix) or _sort_key(key[: len(prefix)]) != _sort_key(prefix)):
        return False
    if start is not None and _sort_key(key) < _sort_key(start):
        return False
    if end is not None and _sort_key(key) >= _sort_key(end):
        return False
    return True


def _encode_cursor(key: tuple[object, ...]) -> str:
    return base64.urlsafe_b64encode(repr(key).encode("utf-8")).decode("ascii")


def _decode_cursor(cursor: str) -> tuple[object, ...]:
    try:
        decoded = ast.literal_eval(base64.urlsafe_b64decode(cursor.encode("ascii")).decode("utf-8"))
    except (ValueError, SyntaxError) as exc:
        raise ValueError(f"invalid list cursor: {cursor!r}") from exc
    if not isinstance(decoded, tuple):
        raise ValueError(f"invalid list cursor: {cursor!r}")
    return decoded
