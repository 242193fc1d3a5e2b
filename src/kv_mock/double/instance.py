from __future__ import annotations

from dataclasses import dataclass, field

from kv_mock.config.models import MockConfig
from kv_mock.config.wiring import build_log_emitter
from kv_mock.double.mock import MockKv
from kv_mock.observability.emitter import LogEmitter
from kv_mock.recording.interactions import InteractionLog
from kv_mock.stubbing.registry import ExpectationRegistry
from kv_mock.stubbing.when import WhenKv
from kv_mock.verification.verifier import AssertKv


@dataclass(slots=True)
class KvMock:
    """One test's worth of mock state.

    ``kv`` is the double handed to the system under test, ``when`` programs
    stubs and ``verify`` checks recorded calls. The registry and the log are
    owned here and share the log's re-entrant lock.
    """

    config: MockConfig = field(default_factory=MockConfig)
    log_sink: object | None = None
    registry: ExpectationRegistry = field(init=False)
    interactions: InteractionLog = field(init=False)
    emitter: LogEmitter = field(init=False)
    kv: MockKv = field(init=False)
    when: WhenKv = field(init=False)
    verify: AssertKv = field(init=False)
    _owns_sink: bool = field(init=False, default=False, repr=False)

    def __post_init__(self) -> None:
        self.registry = ExpectationRegistry()
        self.interactions = InteractionLog()
        self._owns_sink = self.log_sink is None
        self.emitter = build_log_emitter(self.config, sink=self.log_sink)
        self.kv = MockKv(
            self.registry,
            self.interactions,
            default_versionstamp=self.config.default_versionstamp,
            emitter=self.emitter,
        )
        self.when = WhenKv(self.registry, lock=self.interactions.lock, log=self.emitter)
        self.verify = AssertKv(
            self.interactions,
            display_limit=self.config.display_limit,
            emitter=self.emitter,
        )

    def no_more_interactions(self) -> bool:
        return self.verify.no_more_interactions()

    def close(self) -> None:
        # Release a sink built from config; an explicitly passed sink belongs to the caller.
        if not self._owns_sink:
            return
        close = getattr(self.emitter.sink, "close", None)
        if callable(close):
            try:
                close()
            except Exception:
                return

    def reset(self) -> None:
        # Drop all stubs and recorded calls in one locked step.
        with self.interactions.lock:
            self.registry.clear()
            self.interactions.clear()
