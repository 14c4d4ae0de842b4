"""Quiz answers: apple pricing, a string command machine and report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

_BULK_THRESHOLD = 40
_REGULAR_PRICE = 2
_BULK_PRICE = 1

T = TypeVar("T")


def calculate_price_of_apples(apples: int) -> int:
    """Two per apple, or one per apple when more than forty are bought."""
    if apples <= _BULK_THRESHOLD:
        return _REGULAR_PRICE * apples
    return _BULK_PRICE * apples


@dataclass(frozen=True)
class Uppercase:
    """Turn the string into upper case."""


@dataclass(frozen=True)
class Trim:
    """Strip whitespace from both ends of the string."""


@dataclass(frozen=True)
class Append:
    """Append ``"bar"`` to the string ``times`` times."""

    times: int


Command = Uppercase | Trim | Append


def _apply(text: str, command: Command) -> str:
    match command:
        case Uppercase():
            return text.upper()
        case Trim():
            return text.strip()
        case Append(times=times):
            return text + "bar" * times
    raise TypeError(f"unknown command: {command!r}")


def transformer(commands: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    return [_apply(text, command) for text, command in commands]


@dataclass
class ReportCard(Generic[T]):
    """A student's report card; the grade may be numeric or alphabetic."""

    grade: T
    student_name: str
    student_age: int

    def report(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )