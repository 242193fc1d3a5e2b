from __future__ import annotations

from pathlib import Path

from kv_mock.config.models import LoggingConfig, MockConfig
from kv_mock.observability.adapters.logging import InMemoryLogSink, JsonlLogSink, StdoutLogSink
from kv_mock.observability.emitter import DISABLED, LogEmitter


def build_log_sink(settings: LoggingConfig) -> object | None:
    if not settings.enabled:
        return None
    if settings.sink == "stdout":
        return StdoutLogSink()
    if settings.sink == "jsonl":
        # Validated by LoggingConfig: path is present for jsonl.
        return JsonlLogSink(Path(str(settings.path)))
    return InMemoryLogSink()


def build_log_emitter(config: MockConfig, *, sink: object | None = None) -> LogEmitter:
    # An explicit sink wins over the configured one.
    resolved = sink if sink is not None else build_log_sink(config.logging)
    if resolved is None:
        return DISABLED
    return LogEmitter(sink=resolved, level=config.logging.level)
