from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from kv_mock.verification.errors import KvAssertionError

QuantifierKind = Literal["once", "times", "never", "at_least", "at_most"]


@dataclass(frozen=True, slots=True)
class Quantifier:
    # Expected call count condition for one verification.
    kind: QuantifierKind
    n: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.n, int) or isinstance(self.n, bool):
            raise TypeError("Quantifier count must be an int")
        if self.n < 0:
            raise ValueError("Quantifier count must be >= 0")

    @classmethod
    def once(cls) -> Quantifier:
        return cls("once", 1)

    @classmethod
    def times(cls, n: int) -> Quantifier:
        return cls("times", n)

    @classmethod
    def never(cls) -> Quantifier:
        return cls("never", 0)

    @classmethod
    def at_least(cls, n: int) -> Quantifier:
        return cls("at_least", n)

    @classmethod
    def at_most(cls, n: int) -> Quantifier:
        return cls("at_most", n)

    def satisfied_by(self, count: int) -> bool:
        if self.kind == "once":
            return count == 1
        if self.kind == "times":
            return count == self.n
        if self.kind == "never":
            return count == 0
        if self.kind == "at_least":
            return count >= self.n
        return count <= self.n

    def check(self, count: int, *, call: str | None = None) -> None:
        if self.satisfied_by(count):
            return
        prefix = f"{call}: " if call else ""
        raise KvAssertionError(prefix + self._failure_message(count))

    def describe(self) -> str:
        if self.kind in ("once", "never"):
            return self.kind
        return f"{self.kind}({self.n})"

    def _failure_message(self, count: int) -> str:
        if self.kind == "once":
            return f"Expected to be called once but was called {count} times"
        if self.kind == "times":
            return f"Expected to be called {self.n} times but was called {count} times"
        if self.kind == "never":
            return f"Expected to never be called but was called {count} times"
        if self.kind == "at_least":
            return f"Expected to be called at least {self.n} times but was only called {count} times"
        return f"Expected to be called at most {self.n} times but was called {count} times"


DEFAULT_QUANTIFIER = Quantifier.at_least(1)
