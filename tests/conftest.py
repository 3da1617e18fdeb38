"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timezone
from decimal import Decimal

from solid_pricing.models import (
    CustomerProfile,
    DiscountContext,
    Product,
    ShippingAddress,
    ShippingContext,
    TaxContext,
)


@pytest.fixture
def purchase_date() -> datetime:
    """Fixed purchase timestamp for deterministic date checks."""
    return datetime(2024, 11, 29, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def product() -> Product:
    """Sample product priced at 100."""
    return Product(id="1", name="Test Product", price=Decimal("100.00"), category="electronics")


@pytest.fixture
def make_discount_context(product, purchase_date):
    """Factory for discount contexts around the sample product."""
    def _make(**kwargs) -> DiscountContext:
        kwargs.setdefault("product", product)
        kwargs.setdefault("purchase_date", purchase_date)
        return DiscountContext(**kwargs)
    return _make


@pytest.fixture
def student_context(make_discount_context) -> DiscountContext:
    return make_discount_context(customer=CustomerProfile(is_student=True))


@pytest.fixture
def plain_context(make_discount_context) -> DiscountContext:
    return make_discount_context()


@pytest.fixture
def address() -> ShippingAddress:
    return ShippingAddress(
        street="1 Main St",
        city="Sacramento",
        region="CA",
        postal_code="95814",
        country="US",
    )


@pytest.fixture
def make_shipping_context(address, purchase_date):
    """Factory for shipping contexts."""
    def _make(weight=1, order_value=50, **kwargs) -> ShippingContext:
        kwargs.setdefault("destination", address)
        kwargs.setdefault("order_date", purchase_date)
        return ShippingContext(weight=weight, order_value=order_value, **kwargs)
    return _make


@pytest.fixture
def tax_context() -> TaxContext:
    return TaxContext(region="CA", country="US")
