"""
Calculation failure classifications for the pricing pipeline.

These exceptions are raised while a price is being calculated, when a
strategy fails or returns a value that breaks its contract.
"""

from typing import Any, Dict, Optional


class PricingCalculationError(Exception):
    """Base class for failures inside a pricing pipeline stage."""

    def __init__(self, message: str, stage: Optional[str] = None,
                 strategy_name: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.stage = stage
        self.strategy_name = strategy_name
        self.context = context or {}
        self.recoverable = False


class StrategyContractError(PricingCalculationError):
    """A strategy returned a value outside its allowed range."""

    def __init__(self, message: str, value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.value = value
