from .logging import InMemoryLogSink, JsonlLogSink, LogSink, StdoutLogSink

__all__ = ["InMemoryLogSink", "JsonlLogSink", "LogSink", "StdoutLogSink"]
