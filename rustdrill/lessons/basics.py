"""Small answers on functions, conditions, lists and strings."""

from __future__ import annotations

from collections.abc import Iterable

_COLOR_WORDS = frozenset({"green", "blue", "red"})
_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}


def is_even(num: int) -> bool:
    """True when ``num`` is divisible by two."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off an even price, three off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    """Where the animal lives, or ``"Unknown"``."""
    return _HABITATS.get(animal, "Unknown")


def vec_loop(values: Iterable[int]) -> list[int]:
    """Each value doubled, built up in a loop."""
    result = []
    for value in values:
        result.append(value * 2)
    return result


def vec_map(values: Iterable[int]) -> list[int]:
    """Each value doubled, by mapping."""
    return [value * 2 for value in values]


def fill_vec(values: Iterable[int]) -> list[int]:
    """A new list holding ``values`` followed by 88; the input is left alone."""
    return [*values, 88]


def new_filled_vec() -> list[int]:
    """A freshly built list ending in 88."""
    return fill_vec([22, 44, 66])


def is_a_color_word(attempt: str) -> bool:
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    return f"{text} world!"


def replace_me(text: str) -> str:
    return text.replace("cars", "balloons")