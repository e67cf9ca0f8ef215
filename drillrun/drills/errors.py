"""Error-handling drills: name tags, token costs and positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of ``bits`` width strictly, with integer-parse messages."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the name tag text; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


_PROCESSING_FEE = 1
_COST_PER_ITEM = 5
_I32_MAX = 2**31 - 1
_I32_MIN = -(2**31)


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1."""
    qty = _parse_int(item_quantity, 32)
    cost = qty * _COST_PER_ITEM + _PROCESSING_FEE
    if not _I32_MIN <= cost <= _I32_MAX:
        raise OverflowError("attempt to compute total cost with overflow")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy the typed quantity if affordable; print the outcome and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """Raised when a value cannot be a positive nonzero integer; ``kind`` says why."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"

    def __init__(self, kind: str):
        super().__init__(kind)
        self.kind = kind

    def __eq__(self, other):
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self):
        return hash(self.kind)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer strictly greater than zero."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Raised by parse_pos_nonzero, wrapping either a creation or a parse error."""

    CREATION = "creation"
    PARSE_INT = "parse_int"

    def __init__(self, kind: str, cause: Exception):
        super().__init__(str(cause))
        self.kind = kind
        self.cause = cause

    @classmethod
    def from_creation(cls, err: CreationError) -> ParsePosNonzeroError:
        return cls(cls.CREATION, err)

    @classmethod
    def from_parse_int(cls, err: ValueError) -> ParsePosNonzeroError:
        return cls(cls.PARSE_INT, err)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse ``text`` as a positive nonzero integer."""
    try:
        value = _parse_int(text, 64)
    except ValueError as err:
        raise ParsePosNonzeroError.from_parse_int(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError.from_creation(err) from err