"""Record drills: message processing, parcels and report cards."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Quit:
    pass


@dataclass
class State:
    """Mutable state updated by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False
    message: str = ""

    def process(self, message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red, green, blue):
                self.color = (red, green, blue)
            case Echo(text):
                self.message = text
            case Move(point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")


@dataclass
class Package:
    """A parcel weighing at least 10 grams."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self):
        if self.weight_in_grams < 10:
            raise ValueError("Can not ship a package with weight below 10 grams.")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram


def _display(grade) -> str:
    if isinstance(grade, float) and math.isfinite(grade) and grade.is_integer():
        return str(int(grade))
    return str(grade)


@dataclass
class ReportCard:
    """A report card with a numeric or alphabetic grade."""

    grade: float | str
    student_name: str
    student_age: int

    def print(self) -> str:
        """Return the report line for this card."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_display(self.grade)}"
        )