"""Discounts driven by the customer profile."""

from typing import Any, Optional

from ..config.defaults import DiscountParams
from ..models.contexts import DiscountContext
from ..utils.params import require_positive_int
from .base import PercentageDiscountStrategy

_DEFAULTS = DiscountParams()


class StudentDiscount(PercentageDiscountStrategy):
    """15% off for students."""

    def __init__(self, percent: Optional[Any] = None):
        super().__init__(_DEFAULTS.student_percent if percent is None else percent)

    @property
    def name(self) -> str:
        return "Student Discount"

    def is_applicable(self, context: DiscountContext) -> bool:
        return context.customer.is_student is True


class SeniorDiscount(PercentageDiscountStrategy):
    """20% off for customers aged ``min_age`` or older."""

    def __init__(self, percent: Optional[Any] = None, min_age: Optional[int] = None):
        super().__init__(_DEFAULTS.senior_percent if percent is None else percent)
        self.min_age = require_positive_int(
            _DEFAULTS.senior_min_age if min_age is None else min_age, "min_age"
        )

    @property
    def name(self) -> str:
        return "Senior Discount"

    def is_applicable(self, context: DiscountContext) -> bool:
        age = context.customer.age
        return age is not None and age >= self.min_age


class VipDiscount(PercentageDiscountStrategy):
    """25% off for VIP customers, evaluated ahead of the default tier."""

    def __init__(self, percent: Optional[Any] = None):
        super().__init__(_DEFAULTS.vip_percent if percent is None else percent)

    @property
    def name(self) -> str:
        return "VIP Discount"

    @property
    def priority(self) -> int:
        return 2

    def is_applicable(self, context: DiscountContext) -> bool:
        return context.customer.is_vip is True
