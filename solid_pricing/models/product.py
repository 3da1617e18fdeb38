"""Product data model supplied by the catalog."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from ..utils.money import to_money


class ProductCategory(str, Enum):
    """Product categories used for tax classification."""
    FOOD = "food"
    ELECTRONICS = "electronics"
    CLOTHING = "clothing"
    BOOKS = "books"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Any) -> "ProductCategory":
        """Map a free-form category tag to a member, OTHER when unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.OTHER


@dataclass(frozen=True)
class Product:
    """Catalog product being priced. Never mutated by the pipeline."""
    id: str
    name: str
    price: Decimal        # Unit price, non-negative
    category: str = ProductCategory.OTHER.value

    def __post_init__(self) -> None:
        object.__setattr__(self, "price", to_money(self.price, "price"))

    @property
    def tax_category(self) -> ProductCategory:
        """Category tag parsed for tax lookup."""
        return ProductCategory.parse(self.category)
