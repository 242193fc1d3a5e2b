from __future__ import annotations

import threading

from kv_mock.recording import Interaction, InteractionLog


def test_record_keeps_call_order_per_operation() -> None:
    log = InteractionLog()
    log.record("set", (["a"], 1))
    log.record("get", (["a"], None))
    log.record("set", (["b"], 2))
    assert [item.args for item in log.interactions("set")] == [(["a"], 1), (["b"], 2)]
    assert log.operations() == ["set", "get"]
    assert log.count() == 3


def test_interactions_start_unverified() -> None:
    log = InteractionLog()
    log.record("delete", (["a"],))
    assert [item.verified for item in log.unverified()] == [False]


def test_mark_matching_marks_only_accepted_calls() -> None:
    log = InteractionLog()
    log.record("set", (["a"], 1))
    log.record("set", (["b"], 2))
    matched = log.mark_matching("set", lambda args: args[1] == 1)
    assert len(matched) == 1
    assert [item.args for item in log.unverified()] == [(["b"], 2)]


def test_mark_matching_is_idempotent() -> None:
    # Re-verifying an already verified call counts it again without side effects.
    log = InteractionLog()
    log.record("close", ())
    assert len(log.mark_matching("close", lambda args: True)) == 1
    assert len(log.mark_matching("close", lambda args: True)) == 1
    assert log.unverified() == []


def test_describe_drops_trailing_absent_arguments() -> None:
    assert Interaction("get", (["user", 1], None)).describe() == "kv.get(['user', 1])"
    assert Interaction("set", (["k"], "v")).describe() == "kv.set(['k'], 'v')"
    assert Interaction("close", ()).describe() == "kv.close()"


def test_describe_keeps_explicit_none_values() -> None:
    # Only an omitted options argument is dropped; a stored None is part of the call.
    assert Interaction("set", (["k"], None)).describe() == "kv.set(['k'], None)"
    assert Interaction("enqueue", (None, None)).describe() == "kv.enqueue(None)"


def test_concurrent_records_are_all_kept() -> None:
    log = InteractionLog()

    def worker(index: int) -> None:
        for offset in range(100):
            log.record("set", ([index, offset], offset))

    threads = [threading.Thread(target=worker, args=(index,)) for index in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert log.count() == 800


def test_clear_drops_everything() -> None:
    log = InteractionLog()
    log.record("get", (["a"], None))
    log.clear()
    assert log.count() == 0
    assert log.operations() == []
