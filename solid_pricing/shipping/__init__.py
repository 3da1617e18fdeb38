"""Shipping calculators"""

from .calculators import (
    ExpressShipping,
    InternationalShipping,
    ShippingCalculator,
    StandardShipping,
    WeightBasedShipping,
)

__all__ = [
    "ShippingCalculator",
    "WeightBasedShipping",
    "StandardShipping",
    "ExpressShipping",
    "InternationalShipping",
]
