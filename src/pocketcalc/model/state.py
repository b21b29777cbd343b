"""
Calculator State (Data Model)
=============================
This module defines the single entity the engine works on.

The pending calculation is stored as an explicit phase instead of a pair of
flags, and the display as a result type instead of a magic string:

    Idle                   no operator selected
    PendingOperator        operator chosen, next digit starts the second operand
    EnteringSecondOperand  operator chosen, second operand being typed

    Ok(text)               a numeral under construction or a stringified result
    Err(error)             an arithmetic error, shown as "Error"

Classes:
    CalcError: Kinds of arithmetic error.
    Ok, Err: Display variants.
    Idle, PendingOperator, EnteringSecondOperand: Phase variants.
    CalculatorState: The immutable state container.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from pocketcalc.config import ERROR_TEXT
from pocketcalc.model.events import Operator


class CalcError(Enum):
    DIVISION_BY_ZERO = "division_by_zero"
    UNDEFINED_RESULT = "undefined_result"


@dataclass(frozen=True)
class Ok:
    text: str = "0"


@dataclass(frozen=True)
class Err:
    error: CalcError = CalcError.DIVISION_BY_ZERO


Display = Union[Ok, Err]


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class PendingOperator:
    first_operand: float
    operator: Operator


@dataclass(frozen=True)
class EnteringSecondOperand:
    first_operand: float
    operator: Operator


Phase = Union[Idle, PendingOperator, EnteringSecondOperand]


@dataclass(frozen=True)
class CalculatorState:
    """
    Immutable calculator state. Every event produces a new instance.

    The flat properties (`display_value`, `first_operand`, `operator`,
    `waiting_for_second_operand`) are derived views for the presentation layer.
    """
    display: Display = field(default_factory=Ok)
    phase: Phase = field(default_factory=Idle)

    @property
    def is_error(self) -> bool:
        return isinstance(self.display, Err)

    @property
    def display_value(self) -> str:
        if isinstance(self.display, Err):
            return ERROR_TEXT
        return self.display.text

    @property
    def first_operand(self) -> Optional[float]:
        if isinstance(self.phase, Idle):
            return None
        return self.phase.first_operand

    @property
    def operator(self) -> Optional[Operator]:
        if isinstance(self.phase, Idle):
            return None
        return self.phase.operator

    @property
    def waiting_for_second_operand(self) -> bool:
        return isinstance(self.phase, PendingOperator)


INITIAL_STATE = CalculatorState()
