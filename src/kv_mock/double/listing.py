from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from kv_mock.domain.store import KvEntry
from kv_mock.integration.list_iterator import KvListIterator


class MockKvListIterator(KvListIterator):
    # Canned list() stream: one shared cursor, or one cursor per entry.
    def __init__(self, entries: Sequence[KvEntry], mock_cursor: str | Sequence[str] = "") -> None:
        if isinstance(mock_cursor, str):
            cursors = [mock_cursor] * len(entries)
        else:
            if len(mock_cursor) != len(entries):
                raise ValueError(
                    "When supplying a mock cursor list, it must have the same length as the entries list."
                )
            cursors = list(mock_cursor)
        super().__init__(entries, cursors)


@dataclass(frozen=True, slots=True)
class MockListing:
    # Programmed list() result; every call builds a fresh iterator over it.
    entries: Sequence[KvEntry] = field(default_factory=tuple)
    cursor: str | Sequence[str] = ""

    def __post_init__(self) -> None:
        if not isinstance(self.cursor, str) and len(self.cursor) != len(self.entries):
            raise ValueError("When supplying a mock cursor list, it must have the same length as the entries list.")

    def iterator(self) -> MockKvListIterator:
        return MockKvListIterator(self.entries, self.cursor)


def as_list_iterator(value: object) -> KvListIterator:
    # Normalize a programmed list() value into a restartable iterator.
    if isinstance(value, KvListIterator):
        # The sticky tail replays the same object, so each call gets its own pass.
        return value.restart()
    if value is None:
        return MockKvListIterator([])
    if isinstance(value, MockListing):
        return value.iterator()
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return MockKvListIterator(list(value))
    raise TypeError(f"list() stubs must return MockListing or a sequence of entries, got {type(value).__name__}")
