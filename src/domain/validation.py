from __future__ import annotations

from decimal import Decimal
from typing import Any

from .errors import ArgumentRangeError, ArgumentTypeError


def require_text(argument: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ArgumentTypeError(
            f"{argument} must be a string, got {type(value).__name__}",
            argument=argument,
            value=value,
        )
    return value


def require_number(argument: str, value: Any) -> Decimal:
    """Coerce an int/float/Decimal into a Decimal.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather than
    its binary expansion. ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise ArgumentTypeError(
            f"{argument} must be a number, got {type(value).__name__}",
            argument=argument,
            value=value,
        )
    if isinstance(value, float):
        result = Decimal(str(value))
    else:
        result = Decimal(value)
    if not result.is_finite():
        raise ArgumentRangeError(f"{argument} must be finite", argument=argument, value=value)
    return result


def require_positive(argument: str, value: Any) -> Decimal:
    number = require_number(argument, value)
    if number <= 0:
        raise ArgumentRangeError(f"{argument} must be > 0, got {value}", argument=argument, value=value)
    return number


def require_positive_quantity(argument: str, value: Any) -> int:
    number = require_positive(argument, value)
    if number != number.to_integral_value():
        raise ArgumentRangeError(f"{argument} must be a whole number, got {value}", argument=argument, value=value)
    return int(number)


def require_digits(argument: str, value: str) -> str:
    # str.isdigit accepts superscripts and other unicode digits
    if not value or not all("0" <= char <= "9" for char in value):
        raise ArgumentRangeError(
            f"{argument} must contain only decimal digits, got {value!r}",
            argument=argument,
            value=value,
        )
    return value
