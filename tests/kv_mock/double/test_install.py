from __future__ import annotations

import pytest

from kv_mock import InMemoryKvStore, KvStore, install, mock_kv, restore
from kv_mock.observability import InMemoryLogSink


class _ServiceStore(KvStore):
    # Marker contract with no implementation of its own.
    pass


def test_install_routes_store_calls_through_the_double() -> None:
    mock = mock_kv()
    mock.when.get(["user", 1]).then_return("from-mock")
    installation = install(mock)
    try:
        store = InMemoryKvStore()
        assert store.get(["user", 1]) == "from-mock"
        store.set(["user", 1], "v")
    finally:
        restore(installation)
    mock.verify.once().get(["user", 1])
    mock.verify.once().set(["user", 1], "v")
    mock.no_more_interactions()


def test_restore_puts_original_operations_back() -> None:
    installation = install(mock_kv())
    restore(installation)
    store = InMemoryKvStore()
    store.set(["a"], 1)
    assert store.get(["a"]).value == 1


def test_restore_twice_is_a_noop() -> None:
    installation = install(mock_kv())
    restore(installation)
    restore(installation)
    assert installation.restored is True
    assert InMemoryKvStore().set(["a"], 1).ok is True


def test_install_on_inherited_operations_removes_them_again() -> None:
    # Operations the target only inherits are deleted on restore, not pinned.
    mock = mock_kv()
    installation = install(mock, _ServiceStore)
    try:
        assert _ServiceStore().close() is None
    finally:
        restore(installation)
    assert "close" not in _ServiceStore.__dict__
    with pytest.raises(NotImplementedError):
        _ServiceStore().close()
    mock.verify.once().close()


def test_install_rejects_non_store_targets() -> None:
    with pytest.raises(TypeError):
        install(mock_kv(), dict)  # type: ignore[arg-type]


def test_install_and_restore_are_logged() -> None:
    sink = InMemoryLogSink()
    installation = install(mock_kv(log_sink=sink))
    restore(installation)
    assert sink.names() == ["kv_mock.installed", "kv_mock.restored"]
    assert sink.messages[0].fields == {"target": "InMemoryKvStore"}
