"""Tests for shipping calculators."""

import pytest
from datetime import timedelta
from decimal import Decimal

from solid_pricing.errors import InvalidConfigurationError
from solid_pricing.models import ShippingAddress, ShippingPriority
from solid_pricing.shipping import (
    ExpressShipping,
    InternationalShipping,
    ShippingCalculator,
    StandardShipping,
)


@pytest.fixture
def german_address():
    return ShippingAddress(
        street="Unter den Linden 1",
        city="Berlin",
        region="BE",
        postal_code="10117",
        country="DE",
    )


class TestStandardShipping:
    """Test weight-based standard shipping with free threshold."""

    def test_weight_based_cost(self, make_shipping_context):
        shipping = StandardShipping()

        assert shipping.name == "Standard Shipping"
        assert shipping.calculate_shipping(make_shipping_context(weight=5, order_value=50)) == Decimal("15")

    def test_free_at_threshold(self, make_shipping_context):
        shipping = StandardShipping()

        assert shipping.calculate_shipping(make_shipping_context(weight=5, order_value=150)) == 0
        assert shipping.calculate_shipping(make_shipping_context(weight=5, order_value=100)) == 0
        assert shipping.calculate_shipping(
            make_shipping_context(weight=5, order_value="99.99")
        ) == Decimal("15")

    def test_zero_weight_pays_base_rate(self, make_shipping_context):
        assert StandardShipping().calculate_shipping(make_shipping_context(weight=0)) == Decimal("5")

    def test_delivery_estimate(self):
        assert StandardShipping().estimated_delivery == timedelta(days=5)

    def test_custom_rates(self, make_shipping_context):
        shipping = StandardShipping(base_rate=3, per_weight_rate="1.5", free_shipping_threshold=40)
        assert shipping.calculate_shipping(make_shipping_context(weight=2, order_value=30)) == Decimal("6")
        assert shipping.calculate_shipping(make_shipping_context(weight=2, order_value=40)) == 0

    def test_priority_is_informational(self, make_shipping_context):
        context = make_shipping_context(weight=5, order_value=50, priority=ShippingPriority.OVERNIGHT)
        assert StandardShipping().calculate_shipping(context) == Decimal("15")


class TestExpressShipping:
    """Test express shipping."""

    def test_cost_and_delivery(self, make_shipping_context):
        shipping = ExpressShipping()

        assert shipping.name == "Express Shipping"
        assert shipping.estimated_delivery == timedelta(days=2)
        assert shipping.calculate_shipping(make_shipping_context(weight=2, order_value=50)) == Decimal("25")

    def test_no_free_threshold(self, make_shipping_context):
        assert ExpressShipping().calculate_shipping(
            make_shipping_context(weight=2, order_value=1000)
        ) == Decimal("25")


class TestInternationalShipping:
    """Test per-country multipliers."""

    def test_country_multiplier(self, make_shipping_context, german_address):
        shipping = InternationalShipping({"DE": "1.5", "JP": 2})
        context = make_shipping_context(destination=german_address)

        assert shipping.name == "International Shipping"
        assert shipping.estimated_delivery == timedelta(days=10)
        assert shipping.calculate_shipping(context) == Decimal("37.5")

    def test_unlisted_country_uses_base_rate(self, make_shipping_context):
        shipping = InternationalShipping({"DE": "1.5"})
        assert shipping.calculate_shipping(make_shipping_context()) == Decimal("25")

    def test_weight_does_not_affect_cost(self, make_shipping_context):
        shipping = InternationalShipping({})
        light = shipping.calculate_shipping(make_shipping_context(weight=1))
        heavy = shipping.calculate_shipping(make_shipping_context(weight=40))
        assert light == heavy


class TestShippingConfiguration:
    """Test constructor validation."""

    @pytest.mark.parametrize("kwargs,parameter", [
        ({"base_rate": -1}, "base_rate"),
        ({"per_weight_rate": "bad"}, "per_weight_rate"),
        ({"free_shipping_threshold": -5}, "free_shipping_threshold"),
        ({"delivery_days": 0}, "delivery_days"),
    ])
    def test_standard_rejects_invalid(self, kwargs, parameter):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            StandardShipping(**kwargs)
        assert exc_info.value.parameter == parameter

    def test_international_rejects_negative_multiplier(self):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            InternationalShipping({"DE": -1})
        assert exc_info.value.parameter == "rates_by_country[DE]"

    @pytest.mark.parametrize("weight,value", [(0, 0), (3, 20), ("12.5", 99), (7, 500)])
    def test_cost_never_negative(self, make_shipping_context, weight, value):
        context = make_shipping_context(weight=weight, order_value=value)
        for shipping in (StandardShipping(), ExpressShipping(), InternationalShipping({"US": 0})):
            assert isinstance(shipping, ShippingCalculator)
            assert shipping.calculate_shipping(context) >= 0
