"""Base class for tax calculators."""

from abc import ABC, abstractmethod
from decimal import Decimal

from ..models.contexts import TaxContext


class TaxCalculator(ABC):
    """Computes tax on a post-discount amount."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable tax policy name."""
        pass

    @abstractmethod
    def calculate_tax(self, amount: Decimal, context: TaxContext) -> Decimal:
        """
        Calculate tax owed on ``amount``.

        Args:
            amount: Non-negative taxable amount
            context: Tax jurisdiction and classification facts

        Returns:
            Non-negative tax amount
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
