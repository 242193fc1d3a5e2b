from __future__ import annotations

import threading

from kv_mock.matching import any_string
from kv_mock.observability import InMemoryLogSink, LogEmitter
from kv_mock.stubbing import ExpectationRegistry, WhenKv


def test_each_operation_registers_its_own_stub() -> None:
    registry = ExpectationRegistry()
    when = WhenKv(registry)
    when.get(["a"])
    when.get_many([["a"], ["b"]])
    when.set(["a"], 1)
    when.delete(["a"])
    when.list({"prefix": ["a"]})
    when.enqueue("msg")
    when.listen_queue(any_string())
    when.close()
    for operation in ("get", "get_many", "set", "delete", "list", "enqueue", "listen_queue", "close"):
        assert len(registry.expectations(operation)) == 1


def test_stub_returns_chainable_sequencer() -> None:
    registry = ExpectationRegistry()
    when = WhenKv(registry)
    when.set(["a"], any_string()).then_return("first").then_throw(RuntimeError("x"))
    sequencer = registry.expectations("set")[0].sequencer
    assert sequencer.remaining == 2


def test_stubbing_holds_the_shared_lock() -> None:
    # Registration runs under the lock handed in by the owning mock.
    lock = threading.RLock()
    registry = ExpectationRegistry()
    when = WhenKv(registry, lock=lock)
    with lock:
        when.get(["a"]).then_return(1)
    assert len(registry.expectations("get")) == 1


def test_stub_registration_is_logged() -> None:
    sink = InMemoryLogSink()
    when = WhenKv(ExpectationRegistry(), log=LogEmitter(sink=sink))
    when.delete(["a"])
    assert sink.names() == ["kv_mock.stub_registered"]
    assert sink.messages[0].fields == {"operation": "delete", "shape": "kv.delete([eq('a')])"}
