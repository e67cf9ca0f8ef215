"""Drills on recursive lists, clone-on-write data and shared behaviour."""

from __future__ import annotations

import functools
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value followed by the rest of the list; None ends the list."""

    head: int
    tail: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.head
            cell = cell.tail


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """A cons list holding 1 and 2."""
    return Cons(1, Cons(2))


class Cow:
    """A sequence that is borrowed until it must be changed, then copied and owned."""

    def __init__(self, data: Sequence[int], owned: bool):
        self._data = data
        self._owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> Cow:
        return cls(data, owned=False)

    @classmethod
    def owned(cls, data: list[int]) -> Cow:
        return cls(data, owned=True)

    @property
    def is_owned(self) -> bool:
        return self._owned

    def to_mut(self) -> list[int]:
        """Return the data for changing, copying it first if it is borrowed."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"Cow.{kind.lower()}({list(self._data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying borrowed data only if a change is needed."""
    for i, value in enumerate(cow):
        if value < 0:
            cow.to_mut()[i] = -value
    return cow


@functools.singledispatch
def append_bar(value):
    """Append "Bar" to a string, or a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Software that can report its licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int


@dataclass
class OtherSoftware(Licensed):
    version_number: str


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two pieces of software report the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()