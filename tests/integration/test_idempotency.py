"""Integration tests for repeatable price calculations."""

import pytest
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

from solid_pricing.calculator import PriceCalculator
from solid_pricing.discounts import BulkDiscount, CompositeDiscount, StudentDiscount, VipDiscount
from solid_pricing.models import CustomerProfile, Product
from solid_pricing.shipping import StandardShipping
from solid_pricing.tax import CategoryRateTax


@pytest.fixture
def calculator():
    return PriceCalculator(
        [CompositeDiscount([StudentDiscount(), VipDiscount()]), BulkDiscount(min_quantity=2, percent=5)],
        CategoryRateTax({"food": 0, "electronics": "0.12"}),
        StandardShipping(),
    )


@pytest.mark.integration
class TestIdempotency:
    """Identical inputs always produce identical results."""

    def test_repeated_calls_identical(self, calculator, product, make_discount_context, tax_context,
                                      make_shipping_context):
        context = make_discount_context(customer=CustomerProfile(is_student=True, is_vip=True), quantity=3)
        shipping_context = make_shipping_context(weight=2)

        first = calculator.calculate_price(product, context, tax_context, shipping_context)
        second = calculator.calculate_price(product, context, tax_context, shipping_context)

        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_inputs_not_mutated(self, calculator, make_discount_context, tax_context, make_shipping_context):
        product = Product(id="sku-9", name="Lamp", price="49.99", category="electronics")
        context = make_discount_context(product=product, attributes={"isStudent": True})

        calculator.calculate_price(product, context, tax_context, make_shipping_context())

        assert product.price == Decimal("49.99")
        assert dict(context.attributes) == {"isStudent": True}

    def test_shared_calculator_across_threads(self, calculator, product, student_context, tax_context,
                                              make_shipping_context):
        shipping_context = make_shipping_context()
        expected = calculator.calculate_price(product, student_context, tax_context, shipping_context)

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(
                lambda _: calculator.calculate_price(product, student_context, tax_context, shipping_context),
                range(20),
            ))

        assert all(result == expected for result in results)
