#!/usr/bin/env python3
"""
Basic Usage Example - Order Pricing Pipeline

This script demonstrates the basic usage of the pricing pipeline. It shows how to:
- Assemble a price calculator from strategies
- Build request contexts for discounts, tax and shipping
- Stack customer discounts with a composite
- Build a calculator from the bundled configuration

Run: python examples/basic_usage.py
"""

from datetime import datetime, timezone

from solid_pricing.calculator import PriceCalculator
from solid_pricing.discounts import (
    BulkDiscount,
    CompositeDiscount,
    SeniorDiscount,
    StudentDiscount,
    VipDiscount,
)
from solid_pricing.errors import PricingInputError
from solid_pricing.logging import configure_logging
from solid_pricing.models import (
    CustomerProfile,
    DiscountContext,
    Product,
    ShippingAddress,
    ShippingContext,
    TaxContext,
)
from solid_pricing.shipping import StandardShipping
from solid_pricing.tax import ProgressiveBracketTax, RegionalRateTax


def create_address(region: str, country: str = "US") -> ShippingAddress:
    """Create a sample delivery address."""
    return ShippingAddress(
        street="1 Main St",
        city="Springfield",
        region=region,
        postal_code="00000",
        country=country,
    )


def price_order(calculator: PriceCalculator, product: Product, customer: CustomerProfile,
                quantity: int = 1, weight: float = 1.0) -> None:
    """Price one order and print its breakdown."""
    now = datetime.now(timezone.utc)
    address = create_address("CA")

    result = calculator.calculate_price(
        product,
        DiscountContext(product=product, purchase_date=now, quantity=quantity, customer=customer),
        TaxContext(region=address.region, country=address.country, category=product.category),
        ShippingContext(weight=weight, order_value=product.price * quantity,
                        destination=address, order_date=now),
    )
    print(result.summary())


def main():
    """Main demonstration function."""
    configure_logging(level="WARNING")

    print("🚀 Order Pricing Pipeline - Basic Usage Demo")
    print("=" * 60)

    laptop = Product(id="sku-100", name="Laptop", price="100.00", category="electronics")

    # Independent strategies, each discounting the original price
    print("1. Student buying a laptop with regional tax...")
    calculator = PriceCalculator(
        [StudentDiscount(), SeniorDiscount(), VipDiscount()],
        RegionalRateTax({"CA": "0.10", "NY": "0.08"}),
        StandardShipping(),
    )
    price_order(calculator, laptop, CustomerProfile(is_student=True), weight=1)

    # Stacked strategies, each discounting what the previous left over
    print("2. VIP student with stacked customer discounts and progressive tax...")
    stacked = PriceCalculator(
        [
            CompositeDiscount([StudentDiscount(), VipDiscount()], name="Customer Discounts"),
            BulkDiscount(min_quantity=10, percent=5),
        ],
        ProgressiveBracketTax([(0, 50, "0.05"), (50, None, "0.10")]),
        StandardShipping(),
    )
    price_order(stacked, laptop, CustomerProfile(is_student=True, is_vip=True), weight=5)

    print("3. Calculator built from config/pricing.yaml...")
    configured = PriceCalculator.from_config()
    described = configured.describe()
    print(f"   Discounts: {', '.join(described['discounts'])}")
    print(f"   Tax: {described['tax']}, Shipping: {described['shipping']}")
    price_order(configured, laptop, CustomerProfile(age=70), quantity=12, weight=3)

    print("4. Rejecting invalid input...")
    try:
        Product(id="bad", name="Broken", price=-1)
    except PricingInputError as e:
        print(f"   ❌ {e} (recoverable: {e.recoverable})")
    print()

    print("✅ Demo completed successfully!")


if __name__ == "__main__":
    main()
