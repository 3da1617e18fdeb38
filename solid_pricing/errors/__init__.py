"""
Error classification for the pricing pipeline.

This module provides a structured exception hierarchy that separates bad
caller input, bad pipeline configuration, and strategies that break their
contract during a calculation.
"""

from .configuration import (
    ConfigurationError,
    InvalidConfigurationError,
    InvalidTaxBracketError,
    UnknownStrategyError,
)
from .input import (
    PricingInputError,
    InvalidInputError,
)
from .calculation import (
    PricingCalculationError,
    StrategyContractError,
)

__all__ = [
    # Input Errors
    "PricingInputError",
    "InvalidInputError",
    # Configuration Errors
    "ConfigurationError",
    "InvalidConfigurationError",
    "InvalidTaxBracketError",
    "UnknownStrategyError",
    # Calculation Errors
    "PricingCalculationError",
    "StrategyContractError",
]
