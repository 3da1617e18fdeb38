"""Default configuration parameters for the pricing pipeline."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DiscountParams:
    """Customer discount parameters."""
    student_percent: float = 15.0                    # Student discount
    senior_percent: float = 20.0                     # Senior discount
    senior_min_age: int = 65                         # Age at which senior pricing starts
    vip_percent: float = 25.0                        # VIP discount


@dataclass(frozen=True)
class TaxParams:
    """Tax calculation parameters."""
    flat_rate: float = 0.08
    category_default_rate: float = 0.08


@dataclass(frozen=True)
class ShippingParams:
    """Shipping rate parameters."""
    # Standard
    standard_base_rate: float = 5.0
    standard_per_weight_rate: float = 2.0
    free_shipping_threshold: float = 100.0           # Order value for free standard shipping
    standard_delivery_days: int = 5

    # Express
    express_base_rate: float = 15.0
    express_per_weight_rate: float = 5.0
    express_delivery_days: int = 2

    # International
    international_base_rate: float = 25.0
    international_delivery_days: int = 10


@dataclass(frozen=True)
class PipelineParams:
    """Strategy selection for a config-built price calculator."""
    discounts: list[dict[str, Any]] = field(
        default_factory=lambda: [{"type": "student"}, {"type": "senior"}, {"type": "vip"}]
    )
    tax: dict[str, Any] = field(default_factory=lambda: {"policy": "flat"})
    shipping: dict[str, Any] = field(default_factory=lambda: {"method": "standard"})


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    discounts: DiscountParams
    tax: TaxParams
    shipping: ShippingParams
    pipeline: PipelineParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        discounts=DiscountParams(),
        tax=TaxParams(),
        shipping=ShippingParams(),
        pipeline=PipelineParams(),
    )
