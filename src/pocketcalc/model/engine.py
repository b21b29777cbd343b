"""
Calculator Engine
=================
The state-transition function of the calculator.

`apply(state, event)` is total over the event alphabet: arithmetic errors are
returned in-band as `Err` displays and never raised.

Functions:
    calculate: The arithmetic primitive.
    parse_number: Read the leading numeral of a display string.
    number_to_string: Shortest round-tripping decimal text for a float.
    apply: Produce the next state for one event.
    apply_all: Fold a sequence of events.
"""
from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
import logging
import math
import re
from typing import Iterable, Optional

from pocketcalc.config import MAX_INPUT_LENGTH
from pocketcalc.model.events import (
    Clear, DecimalPoint, Digit, Equals, Event, Operator, OperatorPressed, Percent, ToggleSign,
)
from pocketcalc.model.state import (
    INITIAL_STATE, CalcError, CalculatorState, Display, EnteringSecondOperand, Err, Idle, Ok,
    PendingOperator,
)

logger = logging.getLogger(__name__)

_NUMERAL = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def calculate(a: float, b: float, op: Operator) -> float:
    """
    Apply a binary operator.

    Division by zero yields NaN rather than a signed infinity.
    """
    match op:
        case Operator.ADD:
            return a + b
        case Operator.SUBTRACT:
            return a - b
        case Operator.MULTIPLY:
            return a * b
        case Operator.DIVIDE:
            if b == 0:
                return math.nan
            return a / b
    raise ValueError(f"Unknown operator: {op!r}")


def parse_number(text: str) -> float:
    """
    Parse the longest leading numeral of `text`.

    Trailing garbage is ignored ("5." -> 5.0, "12abc" -> 12.0).
    Text without a leading numeral gives NaN.
    """
    match = _NUMERAL.match(text.lstrip())
    if match is None:
        return math.nan
    return float(match.group(0))


def number_to_string(value: float) -> str:
    """
    Convert a float to its shortest round-tripping decimal text.

    Integral values have no fractional part and negative zero prints as "0".
    Plain notation is used for decimal exponents in [-7, 21), otherwise the
    exponential form "1.5e+21" / "1e-7".

    Args:
        value: The number to convert.

    Returns:
        The text, or "NaN", "Infinity", "-Infinity" for non-finite values.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    # position of the decimal point relative to the first digit
    n = exponent + k

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * -n + digits

    e = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def _resolve(first: float, second: float, op: Operator) -> tuple[Display, Optional[float]]:
    """Run the pending operation. Returns the display and the numeric result (None on error)."""
    result = calculate(first, second, op)
    if math.isnan(result):
        if op is Operator.DIVIDE and second == 0:
            error = CalcError.DIVISION_BY_ZERO
        else:
            error = CalcError.UNDEFINED_RESULT
        logger.warning("Arithmetic error: %s %s %s -> %s", first, op.value, second, error.name)
        return Err(error), None
    return Ok(number_to_string(result)), result


def _input_digit(state: CalculatorState, digit: str) -> CalculatorState:
    phase = state.phase
    if isinstance(phase, PendingOperator):
        return CalculatorState(Ok(digit), EnteringSecondOperand(phase.first_operand, phase.operator))

    text = state.display_value
    if len(text) >= MAX_INPUT_LENGTH:
        return state
    return replace(state, display=Ok(digit if text == "0" else text + digit))


def _input_decimal(state: CalculatorState) -> CalculatorState:
    phase = state.phase
    if isinstance(phase, PendingOperator):
        return CalculatorState(Ok("0."), EnteringSecondOperand(phase.first_operand, phase.operator))

    text = state.display_value
    if "." in text:
        return state
    return replace(state, display=Ok(text + "."))


def _press_operator(state: CalculatorState, operator: Operator) -> CalculatorState:
    value = parse_number(state.display_value)
    phase = state.phase

    if isinstance(phase, EnteringSecondOperand):
        display, result = _resolve(phase.first_operand, value, phase.operator)
        first = phase.first_operand if result is None else result
        return CalculatorState(display, PendingOperator(first, operator))

    # Idle, or an operator is being swapped before the second operand was typed
    return CalculatorState(state.display, PendingOperator(value, operator))


def _press_equals(state: CalculatorState) -> CalculatorState:
    phase = state.phase
    if not isinstance(phase, EnteringSecondOperand):
        return state
    display, _ = _resolve(phase.first_operand, parse_number(state.display_value), phase.operator)
    return CalculatorState(display, Idle())


def _transform_display(state: CalculatorState, func) -> CalculatorState:
    if state.is_error:
        return state
    return replace(state, display=Ok(number_to_string(func(parse_number(state.display_value)))))


def apply(state: CalculatorState, event: Event) -> CalculatorState:
    """
    Produce the next state for one input event.

    While an error is displayed, Digit, DecimalPoint and OperatorPressed start
    over from the initial state; Equals, ToggleSign and Percent are no-ops.

    Args:
        state: The current state.
        event: The button press.

    Returns:
        The next state (the same object when the event is a no-op).

    Raises:
        TypeError: If `event` is not one of the event classes.
    """
    if state.is_error and isinstance(event, (Digit, DecimalPoint, OperatorPressed)):
        logger.debug("Input %r on error display, starting over", event)
        state = INITIAL_STATE

    match event:
        case Digit(digit=digit):
            return _input_digit(state, digit)
        case DecimalPoint():
            return _input_decimal(state)
        case OperatorPressed(operator=operator):
            return _press_operator(state, operator)
        case Equals():
            return _press_equals(state)
        case Clear():
            return INITIAL_STATE
        case ToggleSign():
            return _transform_display(state, lambda x: -x)
        case Percent():
            return _transform_display(state, lambda x: x / 100)

    raise TypeError(f"Unsupported event: {event!r}")


def apply_all(events: Iterable[Event], state: CalculatorState | None = None) -> CalculatorState:
    """Apply `events` in order, starting from `state` (default: the initial state)."""
    current = INITIAL_STATE if state is None else state
    for event in events:
        current = apply(current, event)
    return current
