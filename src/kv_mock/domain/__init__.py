from .outcomes import Failure, Outcome, Value
from .store import (
    CONSISTENCY_LEVELS,
    DEFAULT_VERSIONSTAMP,
    KvCommitResult,
    KvConsistencyLevel,
    KvEntry,
    KvEntryMaybe,
    KvKey,
    KvKeyPart,
    KvListSelector,
    KvOptions,
    is_kv_key,
)

__all__ = [
    "CONSISTENCY_LEVELS",
    "DEFAULT_VERSIONSTAMP",
    "Failure",
    "KvCommitResult",
    "KvConsistencyLevel",
    "KvEntry",
    "KvEntryMaybe",
    "KvKey",
    "KvKeyPart",
    "KvListSelector",
    "KvOptions",
    "Outcome",
    "Value",
    "is_kv_key",
]
