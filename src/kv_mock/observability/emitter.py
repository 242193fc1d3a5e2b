from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from kv_mock.observability.domain.logging import LogMessage

_LEVEL_RANK = {"debug": 10, "info": 20, "warning": 30, "error": 40}


@dataclass(frozen=True, slots=True)
class LogEmitter:
    # Level-filtered front for an optional sink; a missing sink disables logging.
    sink: object | None = None
    level: str = "debug"

    @property
    def enabled(self) -> bool:
        return callable(getattr(self.sink, "emit", None))

    def emit(self, level: str, message: str, **fields: object) -> None:
        emit = getattr(self.sink, "emit", None)
        if not callable(emit):
            return
        if _LEVEL_RANK.get(level, 0) < _LEVEL_RANK.get(self.level, 0):
            return
        try:
            emit(
                LogMessage(
                    level=level,
                    message=message,
                    timestamp=datetime.now(tz=UTC),
                    fields=dict(fields),
                )
            )
        except Exception:
            # Sink failures never change the outcome of a mocked call or an assertion.
            return


DISABLED = LogEmitter()
