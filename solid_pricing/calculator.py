"""
Price calculator coordinating the pricing pipeline.

Runs discount selection, tax calculation and shipping calculation in
sequence and aggregates the results into an immutable breakdown. The
calculator depends only on the strategy abstractions; concrete strategies
are injected at construction.
"""

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Iterable, Optional

from .discounts.base import DiscountStrategy
from .errors import (
    ConfigurationError,
    InvalidConfigurationError,
    InvalidInputError,
    PricingCalculationError,
    PricingInputError,
    StrategyContractError,
)
from .logging.config import get_pricing_logger, log_discount_decision
from .models.contexts import DiscountContext, ShippingContext, TaxContext
from .models.product import Product
from .models.result import PriceCalculationResult
from .shipping.calculators import ShippingCalculator
from .tax.base import TaxCalculator
from .utils.money import ZERO, clamp, to_decimal

if TYPE_CHECKING:
    from .config.loader import ConfigLoader

KNOWN_ERRORS = (PricingInputError, ConfigurationError, PricingCalculationError)


class PriceCalculator:
    """
    Main price calculator that coordinates the discount, tax and shipping stages.

    Pipeline:
    Product price → Discounts → Tax on discounted price → Shipping → Final price

    The configured strategies are read-only after construction, so one
    calculator can be shared between callers.
    """

    def __init__(
        self,
        discount_strategies: Iterable[DiscountStrategy],
        tax_calculator: TaxCalculator,
        shipping_calculator: ShippingCalculator,
    ):
        self.discount_strategies = tuple(discount_strategies)
        self.tax_calculator = tax_calculator
        self.shipping_calculator = shipping_calculator

        self._validate_components()
        self.logger = get_pricing_logger(__name__)

    @classmethod
    def from_config(
        cls,
        config: Optional[dict[str, Any]] = None,
        loader: Optional["ConfigLoader"] = None,
    ) -> "PriceCalculator":
        """
        Build a calculator from a configuration mapping.

        Args:
            config: Merged configuration; loaded through ``loader`` when omitted
            loader: Configuration loader, defaults to ``ConfigLoader.create()``

        Returns:
            Configured PriceCalculator
        """
        from .config.factory import build_price_calculator
        from .config.loader import ConfigLoader

        if config is None:
            config = (loader or ConfigLoader.create()).merge_config()
        return build_price_calculator(config)

    def describe(self) -> dict[str, Any]:
        """Names of the configured strategies"""
        return {
            "discounts": [strategy.name for strategy in self.discount_strategies],
            "tax": self.tax_calculator.name,
            "shipping": self.shipping_calculator.name,
        }

    def calculate_price(
        self,
        product: Product,
        discount_context: DiscountContext,
        tax_context: TaxContext,
        shipping_context: ShippingContext,
    ) -> PriceCalculationResult:
        """
        Price a product for one request.

        Args:
            product: Product being priced
            discount_context: Facts for discount selection
            tax_context: Facts for tax lookup
            shipping_context: Facts for shipping cost

        Returns:
            PriceCalculationResult with every intermediate amount
        """
        try:
            if product is None:
                raise InvalidInputError("Product is required for price calculation", field="product")

            original_price = product.price

            discount_amount, applied_discounts = self._apply_discounts(original_price, discount_context)

            if discount_amount > original_price:
                self.logger.warning(
                    "Discounts exceed original price, clamping",
                    product_id=product.id,
                    original_price=str(original_price),
                    discount_amount=str(discount_amount),
                    applied_discounts=applied_discounts,
                )
            discount_amount = clamp(discount_amount, ZERO, original_price)

            price_after_discount = original_price - discount_amount
            tax_amount = self._calculate_tax(price_after_discount, tax_context)
            shipping_cost = self._calculate_shipping(shipping_context)
            final_price = price_after_discount + tax_amount + shipping_cost

            result = PriceCalculationResult(
                original_price=original_price,
                discount_amount=discount_amount,
                price_after_discount=price_after_discount,
                tax_amount=tax_amount,
                tax_name=self.tax_calculator.name,
                shipping_cost=shipping_cost,
                shipping_method=self.shipping_calculator.name,
                estimated_delivery=self.shipping_calculator.estimated_delivery,
                final_price=final_price,
                applied_discounts=tuple(applied_discounts),
            )

            self.logger.info(
                "Price calculated",
                product_id=product.id,
                final_price=str(final_price),
                applied_discounts=applied_discounts,
            )

            return result

        except KNOWN_ERRORS:
            raise
        except Exception as e:
            raise PricingCalculationError(
                f"Unexpected error in price calculation: {str(e)}",
                stage="unknown",
                context={"product": str(product)[:100]}
            ) from e

    def _apply_discounts(self, original_price: Decimal,
                         context: DiscountContext) -> tuple[Decimal, list[str]]:
        """Evaluate every configured strategy against the original price, in order."""
        discount_amount = ZERO
        applied = []

        for strategy in self.discount_strategies:
            try:
                if not strategy.is_applicable(context):
                    log_discount_decision(self.logger, strategy.name, False, ZERO)
                    continue
                raw = strategy.calculate_discount(original_price, context)
            except KNOWN_ERRORS:
                raise
            except Exception as e:
                raise PricingCalculationError(
                    f"Discount strategy failed: {str(e)}",
                    stage="discount",
                    strategy_name=strategy.name
                ) from e

            discount = self._validate_discount(strategy, raw, original_price)
            was_applied = discount > ZERO
            log_discount_decision(self.logger, strategy.name, was_applied, discount)

            if was_applied:
                discount_amount += discount
                applied.append(strategy.name)

        return discount_amount, applied

    def _calculate_tax(self, amount: Decimal, context: TaxContext) -> Decimal:
        """Run the tax stage."""
        try:
            raw = self.tax_calculator.calculate_tax(amount, context)
        except KNOWN_ERRORS:
            raise
        except Exception as e:
            raise PricingCalculationError(
                f"Tax calculation failed: {str(e)}",
                stage="tax",
                strategy_name=self.tax_calculator.name,
                context={"amount": str(amount)}
            ) from e
        return self._validate_non_negative(raw, "tax", self.tax_calculator.name)

    def _calculate_shipping(self, context: ShippingContext) -> Decimal:
        """Run the shipping stage."""
        try:
            raw = self.shipping_calculator.calculate_shipping(context)
        except KNOWN_ERRORS:
            raise
        except Exception as e:
            raise PricingCalculationError(
                f"Shipping calculation failed: {str(e)}",
                stage="shipping",
                strategy_name=self.shipping_calculator.name
            ) from e
        return self._validate_non_negative(raw, "shipping", self.shipping_calculator.name)

    def _validate_components(self) -> None:
        """Validate injected strategies implement the expected abstractions."""
        for index, strategy in enumerate(self.discount_strategies):
            if not isinstance(strategy, DiscountStrategy):
                raise InvalidConfigurationError(
                    f"Discount strategy at position {index} is not a DiscountStrategy: {strategy!r}",
                    parameter="discount_strategies",
                    value=strategy
                )

        if not isinstance(self.tax_calculator, TaxCalculator):
            raise InvalidConfigurationError(
                f"Tax calculator is not a TaxCalculator: {self.tax_calculator!r}",
                parameter="tax_calculator",
                value=self.tax_calculator
            )

        if not isinstance(self.shipping_calculator, ShippingCalculator):
            raise InvalidConfigurationError(
                f"Shipping calculator is not a ShippingCalculator: {self.shipping_calculator!r}",
                parameter="shipping_calculator",
                value=self.shipping_calculator
            )

    def _validate_discount(self, strategy: DiscountStrategy, raw: Any, price: Decimal) -> Decimal:
        """Validate a discount lies in [0, price]."""
        discount = self._validate_non_negative(raw, "discount", strategy.name)
        if discount > price:
            raise StrategyContractError(
                f"Discount {discount} exceeds price {price}",
                value=discount,
                stage="discount",
                strategy_name=strategy.name
            )
        return discount

    def _validate_non_negative(self, raw: Any, stage: str, strategy_name: str) -> Decimal:
        """Validate a strategy result is a finite non-negative number."""
        try:
            value = to_decimal(raw, stage)
        except InvalidInputError as e:
            raise StrategyContractError(
                f"Invalid {stage} value: {raw!r}",
                value=raw,
                stage=stage,
                strategy_name=strategy_name
            ) from e
        if value < ZERO:
            raise StrategyContractError(
                f"Negative {stage} value: {value}",
                value=value,
                stage=stage,
                strategy_name=strategy_name
            )
        return value
