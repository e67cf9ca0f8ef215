"""Small worked drills: conditionals, functions, strings, lists and optionals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def calculate_price_of_apples(quantity: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return quantity if quantity > 40 else quantity * 2


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}


def animal_habitat(animal: str) -> str:
    return _HABITATS.get(animal, "Unknown")


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def is_a_color_word(attempt: str) -> bool:
    return attempt in ("green", "blue", "red")


def trim_me(text: str) -> str:
    return text.strip()


def compose_me(text: str) -> str:
    return text + " world!"


def replace_me(text: str) -> str:
    return text.replace("cars", "balloons")


def vec_loop(values: list[int]) -> list[int]:
    """Return the values, each doubled."""
    doubled = list(values)
    for i, value in enumerate(doubled):
        doubled[i] = value * 2
    return doubled


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with each value doubled."""
    return [value * 2 for value in values]


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of icecream left at an hour of the day; None for an invalid hour."""
    if time_of_day < 22:
        return 5
    if time_of_day <= 23:
        return 0
    return None


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


@dataclass
class Rectangle:
    """A rectangle with strictly positive sides."""

    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")