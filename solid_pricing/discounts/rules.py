"""Discounts driven by the order: quantity, date, cart total and coupons."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from ..errors import InvalidConfigurationError
from ..models.contexts import DiscountContext
from ..utils.money import ZERO
from ..utils.params import require_non_negative, require_positive_int
from .base import DiscountStrategy, PercentageDiscountStrategy


def _as_utc(moment: datetime) -> datetime:
    """Naive datetimes are taken as UTC so config dates compare with aware timestamps."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


class BulkDiscount(PercentageDiscountStrategy):
    """Percentage off when at least ``min_quantity`` units are bought."""

    def __init__(self, min_quantity: int, percent: Any):
        super().__init__(percent)
        self.min_quantity = require_positive_int(min_quantity, "min_quantity")

    @property
    def name(self) -> str:
        return "Bulk Discount"

    def is_applicable(self, context: DiscountContext) -> bool:
        return context.quantity >= self.min_quantity


class SeasonalDiscount(PercentageDiscountStrategy):
    """
    Percentage off for purchases inside a sale window.

    Both window ends are exclusive: a purchase made exactly at ``start`` or
    ``end`` does not qualify. Naive bounds and purchase dates are read as UTC.
    """

    def __init__(self, start: datetime, end: datetime, percent: Any, label: str):
        super().__init__(percent)
        start = _as_utc(start)
        end = _as_utc(end)
        if start >= end:
            raise InvalidConfigurationError(
                f"Season start {start.isoformat()} must be before end {end.isoformat()}",
                parameter="start",
                value=start
            )
        self.start = start
        self.end = end
        self.label = label

    @property
    def name(self) -> str:
        return f"{self.label} Discount"

    def is_applicable(self, context: DiscountContext) -> bool:
        return self.start < _as_utc(context.purchase_date) < self.end


class CartTotalDiscount(PercentageDiscountStrategy):
    """Percentage off when the cart total reaches ``min_total``."""

    def __init__(self, min_total: Any, percent: Any):
        super().__init__(percent)
        self.min_total = require_non_negative(min_total, "min_total")

    @property
    def name(self) -> str:
        return "Cart Total Discount"

    def is_applicable(self, context: DiscountContext) -> bool:
        return context.cart_total >= self.min_total


class FixedAmountDiscount(DiscountStrategy):
    """Fixed amount off, never more than the price it is taken from."""

    def __init__(self, amount: Any, label: str = "Fixed Amount Discount"):
        self.amount = require_non_negative(amount, "amount")
        self.label = label

    @property
    def name(self) -> str:
        return self.label

    def is_applicable(self, context: DiscountContext) -> bool:
        return self.amount > ZERO

    def calculate_discount(self, price: Decimal, context: DiscountContext) -> Decimal:
        if not self.is_applicable(context):
            return ZERO
        return min(self.amount, price)
