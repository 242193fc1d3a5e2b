from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Literal, TypeAlias

# Store data model shared by the double, the matchers and the reference adapter.

KvKeyPart: TypeAlias = str | bytes | int | float | bool
KvKey: TypeAlias = Sequence[KvKeyPart]
KvConsistencyLevel = Literal["strong", "eventual"]
KvListSelector: TypeAlias = Mapping[str, KvKey]
KvOptions: TypeAlias = Mapping[str, object]

CONSISTENCY_LEVELS: frozenset[str] = frozenset({"strong", "eventual"})
DEFAULT_VERSIONSTAMP = "00000000000000010000"


@dataclass(frozen=True, slots=True)
class KvEntryMaybe:
    # Read result: value/versionstamp are None when the key has no entry.
    key: KvKey
    value: object | None = None
    versionstamp: str | None = None

    @property
    def exists(self) -> bool:
        return self.versionstamp is not None


# A found entry carries the same fields; the alias keeps call sites readable.
KvEntry = KvEntryMaybe


@dataclass(frozen=True, slots=True)
class KvCommitResult:
    # Write acknowledgement returned by set/enqueue.
    ok: bool
    versionstamp: str


def is_kv_key(value: object) -> bool:
    # Keys are non-string sequences of scalar parts.
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Sequence):
        return False
    return all(isinstance(part, (str, bytes, int, float, bool)) for part in value)
