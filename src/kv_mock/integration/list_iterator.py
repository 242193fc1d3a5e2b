from __future__ import annotations

import copy
from collections.abc import AsyncIterator, Iterator, Sequence

from kv_mock.domain.store import KvEntry


class KvListIterator:
    # Lazy entry stream returned by list(); the cursor tracks the last yielded entry.
    def __init__(self, entries: Sequence[KvEntry], cursors: Sequence[str]) -> None:
        if len(cursors) != len(entries):
            raise ValueError("KvListIterator requires one cursor per entry")
        self._entries = list(entries)
        self._cursors = list(cursors)
        self._cursor = ""
        self._index = -1

    @property
    def cursor(self) -> str:
        if self._index == -1:
            raise RuntimeError("Cannot get cursor before first iteration")
        return self._cursor

    def restart(self) -> KvListIterator:
        # Unconsumed copy over the same entries and cursors.
        fresh = copy.copy(self)
        fresh._cursor = ""
        fresh._index = -1
        return fresh

    def __iter__(self) -> Iterator[KvEntry]:
        return self

    def __next__(self) -> KvEntry:
        if self._index == -1:
            self._index = 0
        if self._index >= len(self._entries):
            raise StopIteration
        entry = self._entries[self._index]
        self._cursor = self._cursors[self._index]
        self._index += 1
        return entry

    def __aiter__(self) -> AsyncIterator[KvEntry]:
        return self

    async def __anext__(self) -> KvEntry:
        try:
            return next(self)
        except StopIteration:
            raise StopAsyncIteration from None
