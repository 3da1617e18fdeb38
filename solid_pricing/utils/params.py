"""Constructor parameter checks shared by the pricing strategies."""

from decimal import Decimal
from typing import Any

from ..errors import InvalidConfigurationError, InvalidInputError
from .money import HUNDRED, ONE, ZERO, to_decimal


def _convert(value: Any, parameter: str) -> Decimal:
    try:
        return to_decimal(value, parameter)
    except InvalidInputError as e:
        raise InvalidConfigurationError(str(e), parameter=parameter, value=value)


def require_percent(value: Any, parameter: str = "percent") -> Decimal:
    """Convert a percentage and check it lies in [0, 100]."""
    percent = _convert(value, parameter)
    if percent < ZERO or percent > HUNDRED:
        raise InvalidConfigurationError(
            f"{parameter} must be between 0 and 100, got {percent}",
            parameter=parameter,
            value=value
        )
    return percent


def require_rate(value: Any, parameter: str = "rate") -> Decimal:
    """Convert a tax rate fraction and check it lies in [0, 1]."""
    rate = _convert(value, parameter)
    if rate < ZERO or rate > ONE:
        raise InvalidConfigurationError(
            f"{parameter} must be between 0 and 1, got {rate}",
            parameter=parameter,
            value=value
        )
    return rate


def require_non_negative(value: Any, parameter: str) -> Decimal:
    """Convert an amount or multiplier and check it is not negative."""
    amount = _convert(value, parameter)
    if amount < ZERO:
        raise InvalidConfigurationError(
            f"{parameter} must be non-negative, got {amount}",
            parameter=parameter,
            value=value
        )
    return amount


def require_positive_int(value: Any, parameter: str) -> int:
    """Check an integer parameter is at least 1."""
    if not isinstance(value, int) or isinstance(value, bool) or value < 1:
        raise InvalidConfigurationError(
            f"{parameter} must be a positive integer, got {value!r}",
            parameter=parameter,
            value=value
        )
    return value
