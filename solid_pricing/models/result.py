"""Price calculation result returned by the price calculator."""

import decimal
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal
from typing import Any

from ..utils.money import round_money


@dataclass(frozen=True)
class PriceCalculationResult:
    """Immutable breakdown of a single price calculation"""
    original_price: Decimal
    discount_amount: Decimal
    price_after_discount: Decimal
    tax_amount: Decimal
    tax_name: str
    shipping_cost: Decimal
    shipping_method: str
    estimated_delivery: timedelta
    final_price: Decimal
    applied_discounts: tuple[str, ...] = ()  # Evaluation order

    @property
    def total_savings(self) -> Decimal:
        """Amount saved through discounts"""
        return self.discount_amount

    @property
    def has_discounts(self) -> bool:
        """Check if any discount contributed to the price"""
        return bool(self.applied_discounts)

    def to_dict(self, places: int = 2, rounding: str = decimal.ROUND_HALF_UP) -> dict[str, Any]:
        """Serialize with amounts rounded to ``places`` and rendered as strings"""
        def fmt(value: Decimal) -> str:
            return str(round_money(value, places, rounding))

        return {
            "original_price": fmt(self.original_price),
            "discount_amount": fmt(self.discount_amount),
            "price_after_discount": fmt(self.price_after_discount),
            "tax_amount": fmt(self.tax_amount),
            "tax_name": self.tax_name,
            "shipping_cost": fmt(self.shipping_cost),
            "shipping_method": self.shipping_method,
            "estimated_delivery_days": self.estimated_delivery.days,
            "final_price": fmt(self.final_price),
            "applied_discounts": list(self.applied_discounts),
        }

    def summary(self) -> str:
        """Human-readable multi-line breakdown"""
        amounts = self.to_dict()
        applied = ", ".join(self.applied_discounts) or "None"
        return (
            "Price Calculation Result:\n"
            f"  Original Price: ${amounts['original_price']}\n"
            f"  Discounts Applied: {applied}\n"
            f"  Discount Amount: ${amounts['discount_amount']}\n"
            f"  Price After Discount: ${amounts['price_after_discount']}\n"
            f"  Tax ({self.tax_name}): ${amounts['tax_amount']}\n"
            f"  Shipping ({self.shipping_method}): ${amounts['shipping_cost']}\n"
            f"  Final Price: ${amounts['final_price']}\n"
        )
