"""Discount strategies"""

from .base import DiscountStrategy, PercentageDiscountStrategy
from .composite import CompositeDiscount
from .customer import SeniorDiscount, StudentDiscount, VipDiscount
from .rules import BulkDiscount, CartTotalDiscount, FixedAmountDiscount, SeasonalDiscount

__all__ = [
    "DiscountStrategy",
    "PercentageDiscountStrategy",
    "StudentDiscount",
    "SeniorDiscount",
    "VipDiscount",
    "BulkDiscount",
    "SeasonalDiscount",
    "CartTotalDiscount",
    "FixedAmountDiscount",
    "CompositeDiscount",
]
