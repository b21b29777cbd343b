"""
Input Events
============
The discrete button presses the engine understands.

Classes:
    Operator: The four binary operators, valued by their display glyph.
    Digit, DecimalPoint, OperatorPressed, Equals, Clear, ToggleSign, Percent:
        One immutable class per event kind.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Operator(str, Enum):
    """Binary operators. The value is the glyph shown on the button."""
    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "×"
    DIVIDE = "÷"


DIGITS = "0123456789"


@dataclass(frozen=True)
class Digit:
    digit: str

    def __post_init__(self) -> None:
        if len(self.digit) != 1 or self.digit not in DIGITS:
            raise ValueError(f"Digit must be a single character 0-9, got {self.digit!r}")


@dataclass(frozen=True)
class DecimalPoint:
    pass


@dataclass(frozen=True)
class OperatorPressed:
    operator: Operator


@dataclass(frozen=True)
class Equals:
    pass


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class ToggleSign:
    pass


@dataclass(frozen=True)
class Percent:
    pass


# Union for type hinting
Event = Union[Digit, DecimalPoint, OperatorPressed, Equals, Clear, ToggleSign, Percent]
