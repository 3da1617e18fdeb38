"""
Data models and contracts module.

Immutable products, request contexts and price breakdowns.
Follows functional programming principles with frozen dataclasses.
"""

from .contexts import (
    CustomerProfile,
    DiscountContext,
    ShippingAddress,
    ShippingContext,
    ShippingPriority,
    TaxContext,
)
from .product import Product, ProductCategory
from .result import PriceCalculationResult

__all__ = [
    "CustomerProfile",
    "DiscountContext",
    "PriceCalculationResult",
    "Product",
    "ProductCategory",
    "ShippingAddress",
    "ShippingContext",
    "ShippingPriority",
    "TaxContext",
]
