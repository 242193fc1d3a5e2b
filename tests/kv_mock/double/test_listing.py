from __future__ import annotations

import asyncio

import pytest

from kv_mock.domain import KvEntry
from kv_mock.double import MockKvListIterator, MockListing
from kv_mock.double.listing import as_list_iterator


def _entries(count: int) -> list[KvEntry]:
    return [KvEntry(key=["k", index], value=index, versionstamp=f"{index:020d}") for index in range(count)]


def test_single_cursor_is_reported_for_every_entry() -> None:
    iterator = MockKvListIterator(_entries(2), "page-2")
    for _entry in iterator:
        assert iterator.cursor == "page-2"


def test_cursor_list_tracks_each_entry() -> None:
    iterator = MockKvListIterator(_entries(3), ["a", "b", "c"])
    seen = []
    for _entry in iterator:
        seen.append(iterator.cursor)
    assert seen == ["a", "b", "c"]


def test_cursor_before_first_step_raises() -> None:
    with pytest.raises(RuntimeError):
        _ = MockKvListIterator(_entries(1)).cursor


def test_cursor_list_length_must_match_entries() -> None:
    with pytest.raises(ValueError, match="same length as the entries list"):
        MockKvListIterator(_entries(2), ["only"])
    with pytest.raises(ValueError):
        MockListing(_entries(2), cursor=["a", "b", "c"])


def test_async_iteration() -> None:
    async def collect() -> list[object]:
        iterator = MockKvListIterator(_entries(3), "c")
        values = [entry.value async for entry in iterator]
        assert iterator.cursor == "c"
        return values

    assert asyncio.run(collect()) == [0, 1, 2]


def test_listing_builds_independent_iterators() -> None:
    listing = MockListing(_entries(2))
    assert [entry.value for entry in listing.iterator()] == [0, 1]
    assert [entry.value for entry in listing.iterator()] == [0, 1]


def test_as_list_iterator_normalizes_programmed_values() -> None:
    assert list(as_list_iterator(None)) == []
    assert [entry.value for entry in as_list_iterator(_entries(1))] == [0]
    existing = MockKvListIterator(_entries(1))
    assert [entry.value for entry in existing] == [0]
    replayed = as_list_iterator(existing)
    assert replayed is not existing
    assert [entry.value for entry in replayed] == [0]
    with pytest.raises(TypeError):
        as_list_iterator("entries")


def test_restart_rewinds_cursor_and_keeps_iterator_type() -> None:
    iterator = MockKvListIterator(_entries(2), ["a", "b"])
    assert [entry.value for entry in iterator] == [0, 1]
    fresh = iterator.restart()
    assert isinstance(fresh, MockKvListIterator)
    with pytest.raises(RuntimeError):
        _ = fresh.cursor
    assert [entry.value for entry in fresh] == [0, 1]
    assert fresh.cursor == "b"
