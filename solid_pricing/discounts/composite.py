"""Composite discount that stacks several strategies."""

from decimal import Decimal
from typing import Iterable

from ..errors import InvalidConfigurationError
from ..logging.config import get_logger
from ..models.contexts import DiscountContext
from ..utils.money import ZERO
from .base import DiscountStrategy

logger = get_logger(__name__)

COMPOSITE_PRIORITY = 3


class CompositeDiscount(DiscountStrategy):
    """
    Stacks child strategies against a shrinking price.

    Children are evaluated by priority, highest first; children with equal
    priority keep their configured order. Each applicable child discounts
    the price left over by the children before it, so a 25% VIP discount
    followed by a 15% student discount on 100 takes 25 and then 11.25.
    """

    def __init__(self, children: Iterable[DiscountStrategy], name: str = "Composite Discount"):
        self.children = tuple(children)
        if not self.children:
            raise InvalidConfigurationError(
                "Composite discount needs at least one child strategy",
                parameter="children",
                value=[]
            )
        self._name = name
        # sorted() is stable, so ties keep configured order
        self._ordered = tuple(sorted(self.children, key=lambda s: s.priority, reverse=True))

    @property
    def name(self) -> str:
        return self._name

    @property
    def priority(self) -> int:
        return COMPOSITE_PRIORITY

    @property
    def evaluation_order(self) -> tuple[DiscountStrategy, ...]:
        """Children in the order they are evaluated"""
        return self._ordered

    def is_applicable(self, context: DiscountContext) -> bool:
        return any(child.is_applicable(context) for child in self.children)

    def calculate_discount(self, price: Decimal, context: DiscountContext) -> Decimal:
        total, _ = self._evaluate(price, context)
        return total

    def applied_names(self, price: Decimal, context: DiscountContext) -> list[str]:
        """Names of the children that took a positive amount, in evaluation order"""
        _, names = self._evaluate(price, context)
        return names

    def _evaluate(self, price: Decimal, context: DiscountContext) -> tuple[Decimal, list[str]]:
        total = ZERO
        remaining = price
        names = []

        for child in self._ordered:
            if not child.is_applicable(context):
                continue

            discount = child.calculate_discount(remaining, context)
            total += discount
            remaining -= discount
            if discount > ZERO:
                names.append(child.name)

        if names:
            logger.debug(
                "Composite discount evaluated",
                subsystem="pricing",
                composite=self._name,
                children_applied=names,
                total=str(total),
            )

        return total, names
