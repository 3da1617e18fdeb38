"""Base classes for discount strategies."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any

from ..models.contexts import DiscountContext
from ..utils.money import ZERO, percent_of
from ..utils.params import require_percent

DEFAULT_PRIORITY = 1


class DiscountStrategy(ABC):
    """
    Base class for discount strategies.

    A strategy decides whether it applies to a request and how much it takes
    off a price. For any non-negative price the discount is in
    ``[0, price]``, and a strategy that does not apply returns exactly 0.
    Strategies with a higher priority are evaluated first when combined.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name recorded in the price breakdown."""
        pass

    @property
    def priority(self) -> int:
        """Evaluation tier; higher values are evaluated first."""
        return DEFAULT_PRIORITY

    @abstractmethod
    def is_applicable(self, context: DiscountContext) -> bool:
        """Check whether this discount applies to the request."""
        pass

    @abstractmethod
    def calculate_discount(self, price: Decimal, context: DiscountContext) -> Decimal:
        """
        Calculate the discount taken off ``price``.

        Args:
            price: Price the discount is taken from
            context: Request facts

        Returns:
            Discount amount in ``[0, price]``
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, priority={self.priority})"


class PercentageDiscountStrategy(DiscountStrategy):
    """Discount that takes a fixed percentage off the price when applicable."""

    def __init__(self, percent: Any):
        self.percent = require_percent(percent)

    def calculate_discount(self, price: Decimal, context: DiscountContext) -> Decimal:
        if not self.is_applicable(context):
            return ZERO
        return percent_of(price, self.percent)
