"""Tax calculators: flat, regional, category and progressive bracket policies."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional, Union

from ..config.defaults import TaxParams
from ..errors import InvalidConfigurationError, InvalidTaxBracketError
from ..logging.config import get_logger
from ..models.contexts import TaxContext
from ..models.product import ProductCategory
from ..utils.money import ZERO, to_money
from ..utils.params import require_non_negative, require_rate
from .base import TaxCalculator

logger = get_logger(__name__)

_DEFAULTS = TaxParams()


class FlatRateTax(TaxCalculator):
    """Single rate for every amount."""

    def __init__(self, rate: Any = _DEFAULTS.flat_rate):
        self.rate = require_rate(rate)

    @property
    def name(self) -> str:
        return "Standard Tax"

    def calculate_tax(self, amount: Decimal, context: TaxContext) -> Decimal:
        return to_money(amount, "amount") * self.rate


class RegionalRateTax(TaxCalculator):
    """Rate looked up by region; unknown regions are untaxed."""

    def __init__(self, rates_by_region: Mapping[str, Any]):
        self.rates_by_region = {
            region: require_rate(rate, f"rates_by_region[{region}]")
            for region, rate in rates_by_region.items()
        }

    @property
    def name(self) -> str:
        return "Regional Tax"

    def rate_for(self, context: TaxContext) -> Decimal:
        return self.rates_by_region.get(context.region, ZERO)

    def calculate_tax(self, amount: Decimal, context: TaxContext) -> Decimal:
        return to_money(amount, "amount") * self.rate_for(context)


def _category_key(category: Any) -> ProductCategory:
    """Resolve a rate table key; unknown tags are rejected rather than taxed as OTHER."""
    if isinstance(category, ProductCategory):
        return category
    try:
        return ProductCategory(str(category).strip().lower())
    except ValueError:
        raise InvalidConfigurationError(
            f"Unknown product category {category!r}; expected one of "
            f"{[member.value for member in ProductCategory]}",
            parameter=f"rates_by_category[{category}]",
            value=category
        )


class CategoryRateTax(TaxCalculator):
    """Rate looked up by product category, falling back to ``default_rate``."""

    def __init__(
        self,
        rates_by_category: Mapping[Union[ProductCategory, str], Any],
        default_rate: Any = _DEFAULTS.category_default_rate,
    ):
        self.rates_by_category = {
            _category_key(category): require_rate(rate, f"rates_by_category[{category}]")
            for category, rate in rates_by_category.items()
        }
        self.default_rate = require_rate(default_rate, "default_rate")

    @property
    def name(self) -> str:
        return "Category Tax"

    def rate_for(self, context: TaxContext) -> Decimal:
        # No classification is taxed as OTHER
        category = context.category or ProductCategory.OTHER
        return self.rates_by_category.get(category, self.default_rate)

    def calculate_tax(self, amount: Decimal, context: TaxContext) -> Decimal:
        return to_money(amount, "amount") * self.rate_for(context)


@dataclass(frozen=True)
class TaxBracket:
    """Marginal bracket covering ``[lower, upper)``; ``upper=None`` is unbounded."""
    lower: Decimal
    upper: Optional[Decimal]
    rate: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "lower", require_non_negative(self.lower, "lower"))
        if self.upper is not None:
            object.__setattr__(self, "upper", require_non_negative(self.upper, "upper"))
        object.__setattr__(self, "rate", require_rate(self.rate))

    @classmethod
    def coerce(cls, value: Any) -> "TaxBracket":
        """Accept a TaxBracket, a ``(lower, upper, rate)`` sequence or a mapping."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(lower=value["lower"], upper=value.get("upper"), rate=value["rate"])
        lower, upper, rate = value
        return cls(lower=lower, upper=upper, rate=rate)

    def taxable_portion(self, amount: Decimal) -> Decimal:
        """Part of ``amount`` that falls inside this bracket."""
        top = amount if self.upper is None else min(amount, self.upper)
        return max(top - self.lower, ZERO)


class ProgressiveBracketTax(TaxCalculator):
    """
    Marginal tax over contiguous brackets.

    Each bracket taxes only the part of the amount that falls inside it, so
    with brackets ``[(0, 100, 5%), (100, 500, 10%)]`` an amount of 150 pays
    5% on the first 100 and 10% on the remaining 50.

    Brackets must start at 0, be listed in ascending order and be
    contiguous; only the last one may be unbounded. When the last bracket is
    bounded, amounts above it are not taxed.
    """

    def __init__(self, brackets: Iterable[Any]):
        coerced = []
        for index, bracket in enumerate(brackets):
            try:
                coerced.append(TaxBracket.coerce(bracket))
            except (KeyError, TypeError, ValueError, InvalidConfigurationError) as e:
                raise InvalidTaxBracketError(
                    f"Bracket {index} must be (lower, upper, rate): {e}",
                    bracket_index=index,
                    parameter="brackets",
                    value=bracket
                )
        self.brackets = tuple(coerced)
        self._validate_brackets()

    @property
    def name(self) -> str:
        return "Progressive Tax"

    def calculate_tax(self, amount: Decimal, context: TaxContext) -> Decimal:
        amount = to_money(amount, "amount")
        total = ZERO

        for bracket in self.brackets:
            if amount <= bracket.lower:
                break
            total += bracket.taxable_portion(amount) * bracket.rate

        return total

    def _validate_brackets(self) -> None:
        """Fail fast on brackets that would produce wrong totals."""
        if not self.brackets:
            raise InvalidTaxBracketError("At least one tax bracket is required", parameter="brackets")

        first = self.brackets[0]
        if first.lower != ZERO:
            raise InvalidTaxBracketError(
                f"First bracket must start at 0, got {first.lower}",
                bracket_index=0,
                parameter="lower",
                value=first.lower
            )

        for index, bracket in enumerate(self.brackets):
            is_last = index == len(self.brackets) - 1

            if bracket.upper is None and not is_last:
                raise InvalidTaxBracketError(
                    "Only the last bracket may be unbounded",
                    bracket_index=index,
                    parameter="upper",
                    value=None
                )

            if bracket.upper is not None and bracket.upper <= bracket.lower:
                raise InvalidTaxBracketError(
                    f"Bracket upper bound {bracket.upper} must exceed lower bound {bracket.lower}",
                    bracket_index=index,
                    parameter="upper",
                    value=bracket.upper
                )

            if index > 0:
                previous = self.brackets[index - 1]
                if bracket.lower != previous.upper:
                    raise InvalidTaxBracketError(
                        f"Bracket {index} starts at {bracket.lower} but bracket {index - 1} "
                        f"ends at {previous.upper}",
                        bracket_index=index,
                        parameter="lower",
                        value=bracket.lower
                    )

        top = self.brackets[-1].upper
        if top is not None:
            logger.warning(
                "Progressive tax brackets are bounded; amounts above the top bracket are untaxed",
                top_bound=str(top),
            )
