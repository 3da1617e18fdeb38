"""
Assembly of a price calculator from a configuration mapping.

The ``pipeline`` section selects the strategies, while the ``discounts``,
``tax`` and ``shipping`` sections supply the default parameters they fall
back on. Example::

    pipeline:
      discounts:
        - type: vip
        - type: bulk
          min_quantity: 10
          percent: 5
      tax:
        policy: regional
        rates: {CA: 0.10, NY: 0.08}
      shipping:
        method: standard
"""

from datetime import date, datetime, time
from typing import TYPE_CHECKING, Any, Callable

from ..discounts import (
    BulkDiscount,
    CartTotalDiscount,
    CompositeDiscount,
    DiscountStrategy,
    FixedAmountDiscount,
    SeasonalDiscount,
    SeniorDiscount,
    StudentDiscount,
    VipDiscount,
)
from ..errors import InvalidConfigurationError, UnknownStrategyError
from ..logging.config import get_logger
from ..shipping import ExpressShipping, InternationalShipping, ShippingCalculator, StandardShipping
from ..tax import CategoryRateTax, FlatRateTax, ProgressiveBracketTax, RegionalRateTax, TaxCalculator
from .validation import ConfigValidator

if TYPE_CHECKING:
    from ..calculator import PriceCalculator

logger = get_logger(__name__)


def _require(spec: dict[str, Any], key: str, family: str) -> Any:
    if key not in spec:
        raise InvalidConfigurationError(
            f"{family} spec of type {spec.get('type', spec.get('policy', spec.get('method')))!r} "
            f"is missing required key {key!r}",
            parameter=key,
            value=spec
        )
    return spec[key]


def _pick(spec: dict[str, Any], params: dict[str, Any], keys: dict[str, str]) -> dict[str, Any]:
    """Constructor kwargs from the spec, then the defaults section; absent keys are left out."""
    kwargs = {}
    for argument, param_key in keys.items():
        value = spec.get(argument, params.get(param_key))
        if value is not None:
            kwargs[argument] = value
    return kwargs


def _parse_datetime(value: Any, parameter: str) -> datetime:
    """Accept datetimes, dates (midnight) and ISO 8601 strings."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            pass
    raise InvalidConfigurationError(
        f"{parameter} must be an ISO 8601 date or datetime, got {value!r}",
        parameter=parameter,
        value=value
    )


def build_discount(spec: dict[str, Any], params: dict[str, Any]) -> DiscountStrategy:
    """
    Build one discount strategy from its spec.

    Args:
        spec: Mapping with a ``type`` key and type-specific parameters
        params: The ``discounts`` defaults section

    Returns:
        Configured DiscountStrategy
    """
    kind = spec.get("type")
    builder = DISCOUNT_BUILDERS.get(kind)
    if builder is None:
        raise UnknownStrategyError(
            f"Unknown discount type {kind!r}; expected one of {sorted(DISCOUNT_BUILDERS)}",
            kind=kind,
            family="discount"
        )
    return builder(spec, params)


def _build_student(spec: dict[str, Any], params: dict[str, Any]) -> DiscountStrategy:
    return StudentDiscount(spec.get("percent", params.get("student_percent")))


def _build_senior(spec: dict[str, Any], params: dict[str, Any]) -> DiscountStrategy:
    return SeniorDiscount(
        spec.get("percent", params.get("senior_percent")),
        min_age=spec.get("min_age", params.get("senior_min_age")),
    )


def _build_vip(spec: dict[str, Any], params: dict[str, Any]) -> DiscountStrategy:
    return VipDiscount(spec.get("percent", params.get("vip_percent")))


def _build_bulk(spec: dict[str, Any], params: dict[str, Any]) -> DiscountStrategy:
    return BulkDiscount(
        min_quantity=_require(spec, "min_quantity", "Discount"),
        percent=_require(spec, "percent", "Discount"),
    )


def _build_seasonal(spec: dict[str, Any], params: dict[str, Any]) -> DiscountStrategy:
    return SeasonalDiscount(
        start=_parse_datetime(_require(spec, "start", "Discount"), "start"),
        end=_parse_datetime(_require(spec, "end", "Discount"), "end"),
        percent=_require(spec, "percent", "Discount"),
        label=_require(spec, "label", "Discount"),
    )


def _build_cart_total(spec: dict[str, Any], params: dict[str, Any]) -> DiscountStrategy:
    return CartTotalDiscount(
        min_total=_require(spec, "min_total", "Discount"),
        percent=_require(spec, "percent", "Discount"),
    )


def _build_fixed(spec: dict[str, Any], params: dict[str, Any]) -> DiscountStrategy:
    label = spec.get("label", "Fixed Amount Discount")
    return FixedAmountDiscount(_require(spec, "amount", "Discount"), label=label)


def _build_composite(spec: dict[str, Any], params: dict[str, Any]) -> DiscountStrategy:
    children = _require(spec, "children", "Discount")
    if not isinstance(children, list):
        raise InvalidConfigurationError(
            "Composite children must be a list of discount specs",
            parameter="children",
            value=children
        )
    return CompositeDiscount(
        [build_discount(child, params) for child in children],
        name=spec.get("name", "Composite Discount"),
    )


DISCOUNT_BUILDERS: dict[str, Callable[[dict[str, Any], dict[str, Any]], DiscountStrategy]] = {
    "student": _build_student,
    "senior": _build_senior,
    "vip": _build_vip,
    "bulk": _build_bulk,
    "seasonal": _build_seasonal,
    "cart_total": _build_cart_total,
    "fixed": _build_fixed,
    "composite": _build_composite,
}


def build_tax_calculator(spec: dict[str, Any], params: dict[str, Any]) -> TaxCalculator:
    """Build the tax calculator named by ``spec['policy']``."""
    policy = spec.get("policy")

    if policy == "flat":
        return FlatRateTax(**_pick(spec, params, {"rate": "flat_rate"}))
    if policy == "regional":
        return RegionalRateTax(_require(spec, "rates", "Tax"))
    if policy == "category":
        return CategoryRateTax(
            _require(spec, "rates", "Tax"),
            **_pick(spec, params, {"default_rate": "category_default_rate"}),
        )
    if policy == "progressive":
        return ProgressiveBracketTax(_require(spec, "brackets", "Tax"))

    raise UnknownStrategyError(
        f"Unknown tax policy {policy!r}; expected flat, regional, category or progressive",
        kind=policy,
        family="tax"
    )


def build_shipping_calculator(spec: dict[str, Any], params: dict[str, Any]) -> ShippingCalculator:
    """Build the shipping calculator named by ``spec['method']``."""
    method = spec.get("method")

    if method == "standard":
        return StandardShipping(**_pick(spec, params, {
            "base_rate": "standard_base_rate",
            "per_weight_rate": "standard_per_weight_rate",
            "free_shipping_threshold": "free_shipping_threshold",
            "delivery_days": "standard_delivery_days",
        }))
    if method == "express":
        return ExpressShipping(**_pick(spec, params, {
            "base_rate": "express_base_rate",
            "per_weight_rate": "express_per_weight_rate",
            "delivery_days": "express_delivery_days",
        }))
    if method == "international":
        return InternationalShipping(spec.get("rates", {}), **_pick(spec, params, {
            "base_rate": "international_base_rate",
            "delivery_days": "international_delivery_days",
        }))

    raise UnknownStrategyError(
        f"Unknown shipping method {method!r}; expected standard, express or international",
        kind=method,
        family="shipping"
    )


def build_price_calculator(config: dict[str, Any]) -> "PriceCalculator":
    """
    Build a PriceCalculator from a merged configuration.

    Args:
        config: Configuration as returned by ``ConfigLoader.merge_config``

    Returns:
        Configured PriceCalculator

    Raises:
        InvalidConfigurationError: If the configuration fails validation
        UnknownStrategyError: If a strategy type is not recognized
    """
    from ..calculator import PriceCalculator

    errors = ConfigValidator.validate_config(config)
    if errors:
        details = "; ".join(f"{e.field}: {e.message}" for e in errors)
        raise InvalidConfigurationError(
            f"Invalid pricing configuration: {details}",
            parameter=errors[0].field,
            value=errors[0].value,
            context={"errors": [e.field for e in errors]}
        )

    pipeline = config.get("pipeline", {})
    discount_params = config.get("discounts", {})

    discounts = [build_discount(spec, discount_params) for spec in pipeline.get("discounts", [])]
    tax_calculator = build_tax_calculator(pipeline.get("tax", {"policy": "flat"}), config.get("tax", {}))
    shipping_calculator = build_shipping_calculator(
        pipeline.get("shipping", {"method": "standard"}), config.get("shipping", {})
    )

    calculator = PriceCalculator(discounts, tax_calculator, shipping_calculator)
    logger.info("Price calculator built from configuration", **calculator.describe())
    return calculator
