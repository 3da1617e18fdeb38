"""Tax calculators"""

from .base import TaxCalculator
from .calculators import (
    CategoryRateTax,
    FlatRateTax,
    ProgressiveBracketTax,
    RegionalRateTax,
    TaxBracket,
)

__all__ = [
    "TaxCalculator",
    "FlatRateTax",
    "RegionalRateTax",
    "CategoryRateTax",
    "ProgressiveBracketTax",
    "TaxBracket",
]
