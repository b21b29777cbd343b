"""
Display Formatting
==================
Turns the raw display string held in the state into the text on screen.

Why is this file needed?
------------------------
The state stores exactly what was typed (or the stringified result). The screen
only has room for about nine characters, so long values are truncated or shown
in exponential form, and short ones get thousands separators.

Classes:
    NumberStyle: Locale separators.

Functions:
    format_operand: Format a raw display string.
    to_exponential: Exponential notation with a fixed number of fraction digits.
    render_display: Map a display result (Ok/Err) to screen text.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
import math

from pocketcalc.config import ERROR_TEXT, EXPONENT_FRACTION_DIGITS, MAX_FRACTION_DIGITS, MAX_INPUT_LENGTH
from pocketcalc.model.engine import parse_number
from pocketcalc.model.state import Display, Err

# Enough digits to hold any double exactly
_EXACT_PRECISION = 1100


@dataclass(frozen=True)
class NumberStyle:
    group_separator: str = ","
    decimal_point: str = "."


EN_US = NumberStyle()


def _sign(value: float) -> str:
    return "-" if math.copysign(1.0, value) < 0 else ""


def to_exponential(value: float, fraction_digits: int = EXPONENT_FRACTION_DIGITS) -> str:
    """
    Format `value` as "d.ddde+N".

    Ties are rounded away from zero on the exact binary value, so 12345 gives
    "1.235e+4".

    Args:
        value: The number to format.
        fraction_digits: Digits after the point in the mantissa.

    Returns:
        The exponential text, or "NaN" / "Infinity" / "-Infinity".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    sign = "-" if value < 0 else ""
    if value == 0:
        mantissa = "0." + "0" * fraction_digits if fraction_digits else "0"
        return f"{mantissa}e+0"

    with localcontext() as ctx:
        ctx.prec = _EXACT_PRECISION
        exact = Decimal(abs(value))
        exponent = exact.adjusted()
        quantum = Decimal(1).scaleb(-fraction_digits)
        mantissa = exact.scaleb(-exponent).quantize(quantum, rounding=ROUND_HALF_UP)
        if mantissa >= 10:
            # 9.9995 rounds up to the next power of ten
            exponent += 1
            mantissa = exact.scaleb(-exponent).quantize(quantum, rounding=ROUND_HALF_UP)

    return f"{sign}{mantissa:f}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


def _grouped(value: float, style: NumberStyle) -> str:
    """Thousands separators, at most MAX_FRACTION_DIGITS fraction digits, trailing zeros trimmed."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return _sign(value) + "∞"

    with localcontext() as ctx:
        ctx.prec = _EXACT_PRECISION
        rounded = abs(Decimal(value)).quantize(
            Decimal(1).scaleb(-MAX_FRACTION_DIGITS), rounding=ROUND_HALF_UP
        )

    integer_part, _, fraction_part = f"{rounded:f}".partition(".")
    fraction_part = fraction_part.rstrip("0")
    text = f"{int(integer_part):,}".replace(",", style.group_separator)
    if fraction_part:
        text += style.decimal_point + fraction_part
    return _sign(value) + text


def format_operand(value: str, style: NumberStyle = EN_US) -> str:
    """
    Format a raw display string for the screen.

    1. Longer than 9 characters with a decimal point: an integer part longer
       than 9 characters goes exponential, otherwise the fraction is cut so the
       whole fits in 9 digits.
    2. Longer than 9 characters without a point: exponential with 3 digits.
    3. Otherwise: grouped with at most 8 fraction digits.
    """
    if len(value) > MAX_INPUT_LENGTH and "." in value:
        integer_part, _, decimal_part = value.partition(".")
        if len(integer_part) > MAX_INPUT_LENGTH:
            return to_exponential(parse_number(integer_part))
        return f"{integer_part}{style.decimal_point}{decimal_part[:MAX_INPUT_LENGTH - len(integer_part)]}"

    if len(value) > MAX_INPUT_LENGTH:
        return to_exponential(parse_number(value))

    return _grouped(parse_number(value), style)


def render_display(display: Display, style: NumberStyle = EN_US) -> str:
    """Screen text for a display result."""
    if isinstance(display, Err):
        return ERROR_TEXT
    return format_operand(display.text, style)
