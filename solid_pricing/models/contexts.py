"""
Request context models consumed by the pricing strategies.

Each context is assembled once per pricing request by the caller and is
read-only while the strategies evaluate it.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..errors import InvalidInputError
from ..utils.money import ZERO, to_money
from .product import Product, ProductCategory

STUDENT_KEYS = ("isStudent", "is_student")
VIP_KEYS = ("isVip", "is_vip")
AGE_KEYS = ("age",)


def _lookup(attributes: Mapping[str, Any], keys: tuple) -> Any:
    for key in keys:
        if key in attributes:
            return attributes[key]
    return None


@dataclass(frozen=True)
class CustomerProfile:
    """Customer facts consulted by the customer discount strategies."""
    is_student: bool = False
    age: Optional[int] = None
    is_vip: bool = False

    def __post_init__(self) -> None:
        if self.age is not None:
            if not isinstance(self.age, int) or isinstance(self.age, bool):
                raise InvalidInputError(f"age must be an integer, got {self.age!r}", field="age", value=self.age)
            if self.age < 0:
                raise InvalidInputError(f"age must be non-negative, got {self.age}", field="age", value=self.age)

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, Any]) -> "CustomerProfile":
        """
        Build a profile from a loosely typed attribute bag.

        Recognizes ``isStudent``, ``age`` and ``isVip`` (and their snake_case
        spellings). Flags only count when they are exactly ``True``.
        """
        return cls(
            is_student=_lookup(attributes, STUDENT_KEYS) is True,
            age=_lookup(attributes, AGE_KEYS),
            is_vip=_lookup(attributes, VIP_KEYS) is True,
        )


@dataclass(frozen=True)
class DiscountContext:
    """Facts a discount strategy consults for one pricing request."""
    product: Product
    purchase_date: datetime
    user_id: Optional[str] = None
    quantity: int = 1
    cart_total: Decimal = ZERO
    customer: CustomerProfile = field(default_factory=CustomerProfile)
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.quantity, int) or isinstance(self.quantity, bool) or self.quantity < 1:
            raise InvalidInputError(
                f"quantity must be a positive integer, got {self.quantity!r}",
                field="quantity",
                value=self.quantity
            )
        object.__setattr__(self, "cart_total", to_money(self.cart_total, "cart_total"))
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @classmethod
    def from_attributes(
        cls,
        product: Product,
        purchase_date: datetime,
        attributes: Mapping[str, Any],
        **kwargs: Any
    ) -> "DiscountContext":
        """Build a context whose customer profile is read from ``attributes``."""
        return cls(
            product=product,
            purchase_date=purchase_date,
            customer=CustomerProfile.from_attributes(attributes),
            attributes=attributes,
            **kwargs
        )


@dataclass(frozen=True)
class TaxContext:
    """Facts a tax calculator consults for one pricing request."""
    region: str
    country: Optional[str] = None
    category: Optional[ProductCategory] = None
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.category is not None:
            object.__setattr__(self, "category", ProductCategory.parse(self.category))
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))


@dataclass(frozen=True)
class ShippingAddress:
    """Delivery address. Only the country is used for rate lookup."""
    street: str
    city: str
    region: str
    postal_code: str
    country: str


class ShippingPriority(str, Enum):
    """Requested delivery tier. Informational for the base calculators."""
    STANDARD = "standard"
    EXPRESS = "express"
    OVERNIGHT = "overnight"


@dataclass(frozen=True)
class ShippingContext:
    """Order facts a shipping calculator consults."""
    weight: Decimal
    order_value: Decimal
    destination: ShippingAddress
    order_date: datetime
    priority: ShippingPriority = ShippingPriority.STANDARD

    def __post_init__(self) -> None:
        object.__setattr__(self, "weight", to_money(self.weight, "weight"))
        object.__setattr__(self, "order_value", to_money(self.order_value, "order_value"))
