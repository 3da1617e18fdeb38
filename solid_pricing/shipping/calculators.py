"""Shipping calculators"""

from abc import ABC, abstractmethod
from datetime import timedelta
from decimal import Decimal
from typing import Any, Mapping

from ..config.defaults import ShippingParams
from ..models.contexts import ShippingContext
from ..utils.money import ONE, ZERO
from ..utils.params import require_non_negative, require_positive_int

_DEFAULTS = ShippingParams()


class ShippingCalculator(ABC):
    """
    Computes a shipping cost and delivery estimate for an order.

    The requested priority tier on the context is informational; each
    calculator implements a single delivery method.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Shipping method name."""
        pass

    @property
    @abstractmethod
    def estimated_delivery(self) -> timedelta:
        """Fixed delivery estimate for this method."""
        pass

    @abstractmethod
    def calculate_shipping(self, context: ShippingContext) -> Decimal:
        """Calculate the non-negative shipping cost for the order."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class WeightBasedShipping(ShippingCalculator):
    """Base rate plus a per-weight-unit rate."""

    def __init__(self, base_rate: Any, per_weight_rate: Any, delivery_days: int):
        self.base_rate = require_non_negative(base_rate, "base_rate")
        self.per_weight_rate = require_non_negative(per_weight_rate, "per_weight_rate")
        self.delivery_days = require_positive_int(delivery_days, "delivery_days")

    @property
    def estimated_delivery(self) -> timedelta:
        return timedelta(days=self.delivery_days)

    def weight_cost(self, context: ShippingContext) -> Decimal:
        return self.base_rate + context.weight * self.per_weight_rate

    def calculate_shipping(self, context: ShippingContext) -> Decimal:
        return self.weight_cost(context)


class StandardShipping(WeightBasedShipping):
    """Weight-based shipping, free once the order value reaches the threshold."""

    def __init__(
        self,
        base_rate: Any = _DEFAULTS.standard_base_rate,
        per_weight_rate: Any = _DEFAULTS.standard_per_weight_rate,
        free_shipping_threshold: Any = _DEFAULTS.free_shipping_threshold,
        delivery_days: int = _DEFAULTS.standard_delivery_days,
    ):
        super().__init__(base_rate, per_weight_rate, delivery_days)
        self.free_shipping_threshold = require_non_negative(
            free_shipping_threshold, "free_shipping_threshold"
        )

    @property
    def name(self) -> str:
        return "Standard Shipping"

    def qualifies_for_free_shipping(self, context: ShippingContext) -> bool:
        return context.order_value >= self.free_shipping_threshold

    def calculate_shipping(self, context: ShippingContext) -> Decimal:
        if self.qualifies_for_free_shipping(context):
            return ZERO
        return self.weight_cost(context)


class ExpressShipping(WeightBasedShipping):
    """Weight-based shipping with no free-shipping threshold."""

    def __init__(
        self,
        base_rate: Any = _DEFAULTS.express_base_rate,
        per_weight_rate: Any = _DEFAULTS.express_per_weight_rate,
        delivery_days: int = _DEFAULTS.express_delivery_days,
    ):
        super().__init__(base_rate, per_weight_rate, delivery_days)

    @property
    def name(self) -> str:
        return "Express Shipping"


class InternationalShipping(ShippingCalculator):
    """Base rate scaled by a per-country multiplier (1.0 for unlisted countries)."""

    def __init__(
        self,
        rates_by_country: Mapping[str, Any],
        base_rate: Any = _DEFAULTS.international_base_rate,
        delivery_days: int = _DEFAULTS.international_delivery_days,
    ):
        self.rates_by_country = {
            country: require_non_negative(rate, f"rates_by_country[{country}]")
            for country, rate in rates_by_country.items()
        }
        self.base_rate = require_non_negative(base_rate, "base_rate")
        self.delivery_days = require_positive_int(delivery_days, "delivery_days")

    @property
    def name(self) -> str:
        return "International Shipping"

    @property
    def estimated_delivery(self) -> timedelta:
        return timedelta(days=self.delivery_days)

    def calculate_shipping(self, context: ShippingContext) -> Decimal:
        multiplier = self.rates_by_country.get(context.destination.country, ONE)
        return self.base_rate * multiplier
