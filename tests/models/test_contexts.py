"""Tests for product and request context models."""

import pytest
from dataclasses import FrozenInstanceError
from decimal import Decimal

from solid_pricing.errors import InvalidInputError
from solid_pricing.models import (
    CustomerProfile,
    DiscountContext,
    Product,
    ProductCategory,
    ShippingContext,
    ShippingPriority,
    TaxContext,
)


class TestProduct:
    """Test product validation."""

    def test_price_converted_to_decimal(self):
        product = Product(id="p", name="Pen", price=1.1)
        assert product.price == Decimal("1.1")
        assert product.category == "other"

    def test_negative_price_rejected(self):
        with pytest.raises(InvalidInputError) as exc_info:
            Product(id="p", name="Pen", price=-5)
        assert exc_info.value.field == "price"

    def test_product_is_immutable(self, product):
        with pytest.raises(FrozenInstanceError):
            product.price = Decimal("1")

    def test_tax_category(self):
        assert Product(id="b", name="Novel", price=10, category="Books").tax_category == ProductCategory.BOOKS
        assert Product(id="x", name="Thing", price=10, category="gadgets").tax_category == ProductCategory.OTHER


class TestCustomerProfile:
    """Test typed customer attributes."""

    def test_from_attributes_legacy_keys(self):
        profile = CustomerProfile.from_attributes({"isStudent": True, "age": 70, "isVip": False})
        assert profile.is_student is True
        assert profile.age == 70
        assert profile.is_vip is False

    def test_from_attributes_snake_case(self):
        profile = CustomerProfile.from_attributes({"is_vip": True})
        assert profile.is_vip is True
        assert profile.age is None

    def test_truthy_non_bool_flags_do_not_count(self):
        profile = CustomerProfile.from_attributes({"isStudent": "yes", "isVip": 1})
        assert profile.is_student is False
        assert profile.is_vip is False

    @pytest.mark.parametrize("age", ["65", -1, 65.0, True])
    def test_invalid_age_rejected(self, age):
        with pytest.raises(InvalidInputError):
            CustomerProfile(age=age)


class TestDiscountContext:
    """Test discount context validation."""

    def test_defaults(self, plain_context):
        assert plain_context.quantity == 1
        assert plain_context.cart_total == Decimal("0")
        assert plain_context.customer == CustomerProfile()
        assert plain_context.user_id is None

    @pytest.mark.parametrize("quantity", [0, -3, 1.5, True])
    def test_quantity_must_be_positive_int(self, make_discount_context, quantity):
        with pytest.raises(InvalidInputError) as exc_info:
            make_discount_context(quantity=quantity)
        assert exc_info.value.field == "quantity"

    def test_negative_cart_total_rejected(self, make_discount_context):
        with pytest.raises(InvalidInputError):
            make_discount_context(cart_total=-10)

    def test_attributes_are_read_only(self, make_discount_context):
        context = make_discount_context(attributes={"coupon": "SAVE10"})
        with pytest.raises(TypeError):
            context.attributes["coupon"] = "other"

    def test_attributes_copied_from_caller(self, make_discount_context):
        source = {"coupon": "SAVE10"}
        context = make_discount_context(attributes=source)
        source["coupon"] = "changed"
        assert context.attributes["coupon"] == "SAVE10"

    def test_from_attributes(self, product, purchase_date):
        context = DiscountContext.from_attributes(
            product, purchase_date, {"isStudent": True, "age": 20}, quantity=3, user_id="u-1"
        )
        assert context.customer.is_student is True
        assert context.customer.age == 20
        assert context.quantity == 3
        assert context.user_id == "u-1"
        assert context.attributes["isStudent"] is True


class TestTaxAndShippingContexts:
    """Test tax and shipping context models."""

    def test_tax_category_parsed(self):
        assert TaxContext(region="CA", category="food").category == ProductCategory.FOOD
        assert TaxContext(region="CA").category is None

    def test_shipping_defaults(self, make_shipping_context):
        context = make_shipping_context(weight=2.5, order_value=40)
        assert context.weight == Decimal("2.5")
        assert context.order_value == Decimal("40")
        assert context.priority == ShippingPriority.STANDARD

    @pytest.mark.parametrize("field", ["weight", "order_value"])
    def test_negative_values_rejected(self, make_shipping_context, field):
        kwargs = {"weight": 1, "order_value": 1}
        kwargs[field] = -1
        with pytest.raises(InvalidInputError) as exc_info:
            make_shipping_context(**kwargs)
        assert exc_info.value.field == field
