"""Optional values, error messages and validated positive integers."""

from __future__ import annotations

from dataclasses import dataclass

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_I64_MIN, _I64_MAX = -(2**63), 2**63 - 1

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, low: int, high: int) -> int:
    """Parse a signed decimal integer strictly, raising ValueError with a reason."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not all(c in "0123456789" for c in digits):
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if text[0] == "-":
        value = -value
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice cream left at a given hour: 5 before 22, 0 after, None past 24."""
    if time_of_day < 22:
        return 5
    if time_of_day >= 25:
        return None
    return 0


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name raises ValueError."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost of the typed quantity of items plus the processing fee."""
    qty = _parse_int(item_quantity, _I32_MIN, _I32_MAX)
    cost = qty * _COST_PER_ITEM + _PROCESSING_FEE
    if not _I32_MIN <= cost <= _I32_MAX:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


class CreationError(ValueError):
    """A value cannot be a positive non-zero integer."""

    NEGATIVE = "negative"
    ZERO = "zero"

    _MESSAGES = {NEGATIVE: "number is negative", ZERO: "number is zero"}

    def __init__(self, reason: str) -> None:
        super().__init__(self._MESSAGES[reason])
        self.reason = reason


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Parsing text into a positive non-zero integer failed."""

    def __init__(
        self,
        creation: CreationError | None = None,
        parse_int: ValueError | None = None,
    ) -> None:
        cause = creation if creation is not None else parse_int
        super().__init__(str(cause))
        self.creation = creation
        self.parse_int = parse_int

    @classmethod
    def from_creation(cls, err: CreationError) -> ParsePosNonzeroError:
        return cls(creation=err)

    @classmethod
    def from_parse_int(cls, err: ValueError) -> ParsePosNonzeroError:
        return cls(parse_int=err)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a positive non-zero integer."""
    try:
        value = _parse_int(text, _I64_MIN, _I64_MAX)
    except ValueError as err:
        raise ParsePosNonzeroError.from_parse_int(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError.from_creation(err) from err