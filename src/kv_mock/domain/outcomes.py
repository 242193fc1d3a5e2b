from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Value(Generic[T]):
    # Programmed success outcome.
    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure:
    # Programmed failure outcome; unwrapping raises the queued error unchanged.
    error: BaseException

    def __post_init__(self) -> None:
        if not isinstance(self.error, BaseException):
            raise TypeError(f"Failure.error must be an exception instance, got {type(self.error).__name__}")

    def unwrap(self) -> object:
        raise self.error


Outcome = Value[T] | Failure
