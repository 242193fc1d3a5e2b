from .adapters import InMemoryLogSink, JsonlLogSink, LogSink, StdoutLogSink
from .domain import LogMessage
from .emitter import DISABLED, LogEmitter

__all__ = [
    "DISABLED",
    "InMemoryLogSink",
    "JsonlLogSink",
    "LogEmitter",
    "LogMessage",
    "LogSink",
    "StdoutLogSink",
]
