"""
Decimal helpers for monetary arithmetic.

Every amount, rate and percentage in the pipeline is a Decimal. Values are
kept at full precision while a price is being calculated and are only
quantized when they are rendered or serialized.
"""

import decimal
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

from ..errors import InvalidInputError

Number = Union[Decimal, int, float, str]

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")


def to_decimal(value: Any, field: str = "value") -> Decimal:
    """
    Convert a numeric value to Decimal.

    Floats go through ``str()`` so that ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.

    Args:
        value: int, float, str or Decimal
        field: Field name reported in the error

    Returns:
        Finite Decimal value

    Raises:
        InvalidInputError: If the value is not a finite number
    """
    if isinstance(value, bool) or value is None:
        raise InvalidInputError(f"{field} must be a number, got {value!r}", field=field, value=value)

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidInputError(f"{field} is not a valid number: {value!r}", field=field, value=value)
    else:
        raise InvalidInputError(
            f"{field} has unsupported type {type(value).__name__}", field=field, value=value
        )

    if not result.is_finite():
        raise InvalidInputError(f"{field} must be finite, got {value!r}", field=field, value=value)

    return result


def to_money(value: Any, field: str = "amount") -> Decimal:
    """Convert a value to a non-negative Decimal amount."""
    amount = to_decimal(value, field)
    if amount < ZERO:
        raise InvalidInputError(f"{field} must be non-negative, got {amount}", field=field, value=value)
    return amount


def percent_of(amount: Decimal, percent: Decimal) -> Decimal:
    """Return ``percent`` percent of ``amount``."""
    return amount * percent / HUNDRED


def clamp(value: Decimal, lower: Decimal, upper: Optional[Decimal] = None) -> Decimal:
    """Clamp a value to ``[lower, upper]``; ``upper=None`` leaves it unbounded."""
    if value < lower:
        return lower
    if upper is not None and value > upper:
        return upper
    return value


def round_money(value: Decimal, places: int = 2, rounding: str = decimal.ROUND_HALF_UP) -> Decimal:
    """
    Quantize an amount for display.

    Args:
        value: Amount to round
        places: Number of decimal places
        rounding: Name of a decimal rounding mode, e.g. ``"ROUND_HALF_UP"``

    Returns:
        Rounded Decimal
    """
    exponent = Decimal(1).scaleb(-places)
    return value.quantize(exponent, rounding=rounding)
