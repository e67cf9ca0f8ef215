"""Dictionary drills: fruit baskets and a football scores table."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_U8_MAX = 255
_UNSIGNED = re.compile(r"\+?[0-9]+")


class Fruit(enum.Enum):
    APPLE = enum.auto()
    BANANA = enum.auto()
    MANGO = enum.auto()
    LYCHEE = enum.auto()
    PINEAPPLE = enum.auto()


def new_fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds and at least five fruits."""
    return {"banana": 2, "pineapple": 4, "apple": 4}


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add ten of every kind of fruit not yet in the basket, leaving the rest alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 10)


@dataclass
class Team:
    """Goals a team has scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def _add(team: Team, scored: int, conceded: int) -> None:
    team.goals_scored += scored
    team.goals_conceded += conceded
    if team.goals_scored > _U8_MAX or team.goals_conceded > _U8_MAX:
        raise OverflowError("goal total does not fit in the scores table")


def build_scores_table(results: str) -> dict[str, Team]:
    """Build goals scored/conceded per team from "team1,team2,goals1,goals2" lines."""
    scores: dict[str, Team] = {}
    lines = results.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for line in lines:
        fields = line.removesuffix("\r").split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])
        _add(scores.setdefault(team_1_name, Team()), team_1_score, team_2_score)
        _add(scores.setdefault(team_2_name, Team()), team_2_score, team_1_score)
    return scores