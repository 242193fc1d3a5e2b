from __future__ import annotations

from kv_mock.recording.interactions import Interaction, InteractionLog
from kv_mock.verification.errors import KvAssertionError

DEFAULT_DISPLAY_LIMIT = 10


def format_unverified(unverified: list[Interaction], *, display_limit: int = DEFAULT_DISPLAY_LIMIT) -> str:
    # Bounded listing: at most display_limit calls plus an overflow line.
    lines = [item.describe() for item in unverified[:display_limit]]
    overflow = len(unverified) - display_limit
    if overflow > 0:
        lines.append(f"... ({overflow} more)")
    return "There are unverified interactions: \n\n   " + "\n   ".join(lines) + "\n\n"


def no_more_interactions(log: InteractionLog, *, display_limit: int = DEFAULT_DISPLAY_LIMIT) -> bool:
    # Passes only when every recorded call, across every operation, was touched by a verification.
    unverified = log.unverified()
    if unverified:
        raise KvAssertionError(format_unverified(unverified, display_limit=display_limit))
    return True
