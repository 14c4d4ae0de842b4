"""Fruit baskets and a football scores table kept in dictionaries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_RESTOCK_AMOUNT = 2
_MAX_GOALS = 255


class Fruit(Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and five pieces in all."""
    return {"banana": 2, "apple": 4, "mango": 6}


def stock_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add every missing kind of fruit; kinds already present are left alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, _RESTOCK_AMOUNT)


@dataclass
class Team:
    """Goals a team has scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        new_scored = self.goals_scored + scored
        new_conceded = self.goals_conceded + conceded
        if new_scored > _MAX_GOALS or new_conceded > _MAX_GOALS:
            raise OverflowError("goal count exceeds 255")
        self.goals_scored = new_scored
        self.goals_conceded = new_conceded


def _goals(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not all(c in "0123456789" for c in digits):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(digits)
    if value > _MAX_GOALS:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table from lines of ``team_1,team_2,goals_1,goals_2``."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        goals_1, goals_2 = _goals(fields[2]), _goals(fields[3])
        scores.setdefault(team_1, Team()).record(goals_1, goals_2)
        scores.setdefault(team_2, Team()).record(goals_2, goals_1)
    return scores