"""Iterator drills: capitalising, dividing, factorials, progress counts and a string machine."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

_U64_MAX = 2**64 - 1
_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def capitalize_first(word: str) -> str:
    """Upper-case the first character of ``word``: "hello" -> "Hello"."""
    if not word:
        return ""
    return word[0].upper() + word[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise each word: ["hello", "world"] -> ["Hello", "World"]."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise each word and join them: ["hello", " ", "world"] -> "Hello World"."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """Raised by divide; ``kind`` names the reason."""

    DIVIDE_BY_ZERO = "divide by zero"
    NOT_DIVISIBLE = "not divisible"

    def __init__(self, kind: str, message: str | None = None):
        super().__init__(message or kind)
        self.kind = kind

    def __eq__(self, other):
        if not isinstance(other, DivisionError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args and self.kind == other.kind

    def __hash__(self):
        return hash((type(self), self.kind, self.args))


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int):
        super().__init__(
            DivisionError.NOT_DIVISIBLE, f"{dividend} is not divisible by {divisor}"
        )
        self.dividend = dividend
        self.divisor = divisor


def divide(a: int, b: int) -> int:
    """Return ``a / b`` when ``a`` is evenly divisible by ``b``; raise DivisionError otherwise."""
    if b == 0:
        raise DivisionError(DivisionError.DIVIDE_BY_ZERO)
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def _try_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as err:
        return err


def result_with_list() -> list[int]:
    """Divide each sample number by 27; the first failure is raised."""
    return [divide(number, _DIVISOR) for number in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide each sample number by 27, keeping each outcome: a quotient or its error."""
    return [_try_divide(number, _DIVISOR) for number in _NUMBERS]


def factorial(num: int) -> int:
    """Return ``num!`` for a non-negative ``num`` whose factorial fits in 64 unsigned bits."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("factorial does not fit in 64 bits")
    return result


class Progress(enum.Enum):
    NONE = enum.auto()
    SOME = enum.auto()
    COMPLETE = enum.auto()


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps using explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)


class CommandKind(enum.Enum):
    UPPERCASE = enum.auto()
    TRIM = enum.auto()
    APPEND = enum.auto()


@dataclass(frozen=True)
class Command:
    """A transformation applied to a string; APPEND carries a repeat count."""

    kind: CommandKind
    times: int = 0

    def __post_init__(self):
        if self.times < 0:
            raise ValueError("append count cannot be negative")

    @classmethod
    def uppercase(cls) -> Command:
        return cls(CommandKind.UPPERCASE)

    @classmethod
    def trim(cls) -> Command:
        return cls(CommandKind.TRIM)

    @classmethod
    def append(cls, times: int) -> Command:
        return cls(CommandKind.APPEND, times)

    def apply(self, text: str) -> str:
        """Return ``text`` transformed by this command."""
        if self.kind is CommandKind.UPPERCASE:
            return text.upper()
        if self.kind is CommandKind.TRIM:
            return text.strip()
        return text + "bar" * self.times


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    return [command.apply(text) for text, command in items]