"""Validated rectangles and a recursive cons list."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """A rectangle whose sides must both be greater than zero."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """One item of a cons list followed by the rest of the list."""

    value: int
    rest: Cons | Nil


ConsList = Cons | Nil


def create_empty_list() -> ConsList:
    return Nil()


def create_non_empty_list() -> ConsList:
    return Cons(1, Nil())