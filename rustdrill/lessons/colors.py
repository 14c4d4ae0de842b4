"""RGB colours built from integers that must each fit in 0..=255."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


class IntoColorError(ValueError):
    """The values could not be turned into a colour."""

    BAD_LEN = "bad_len"
    INT_CONVERSION = "int_conversion"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def _channel(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise IntoColorError(IntoColorError.INT_CONVERSION)
    return value


@dataclass(frozen=True)
class Color:
    """A colour with red, green and blue channels."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Color:
        """Build a colour from a tuple or array of three integers."""
        return cls.from_slice(tuple(values))

    @classmethod
    def from_slice(cls, values: Sequence[int]) -> Color:
        """Build a colour from a sequence that must hold exactly three integers."""
        if len(values) != 3:
            raise IntoColorError(IntoColorError.BAD_LEN)
        red, green, blue = (_channel(v) for v in values)
        return cls(red, green, blue)