"""
Error handling tests for the pricing pipeline.

Tests cover the error hierarchy, recoverability flags and the context each
error carries for callers.
"""

import pytest

from solid_pricing.errors import (
    ConfigurationError,
    InvalidConfigurationError,
    InvalidInputError,
    InvalidTaxBracketError,
    PricingCalculationError,
    PricingInputError,
    StrategyContractError,
    UnknownStrategyError,
)


class TestErrorClassification:
    """Test error classification system."""

    def test_input_error_hierarchy(self):
        """Input errors are recoverable once the caller fixes the request."""
        base_error = PricingInputError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        field_error = InvalidInputError("bad price", field="price", value=-1, context={"sku": "1"})
        assert isinstance(field_error, PricingInputError)
        assert field_error.field == "price"
        assert field_error.value == -1
        assert field_error.context == {"sku": "1"}
        assert str(field_error) == "bad price"

    def test_configuration_error_hierarchy(self):
        """Configuration errors are not recoverable at request time."""
        config_error = InvalidConfigurationError("bad rate", parameter="rate", value=2)
        assert isinstance(config_error, ConfigurationError)
        assert config_error.recoverable is False
        assert config_error.parameter == "rate"

        bracket_error = InvalidTaxBracketError("gap", bracket_index=2, parameter="lower", value=150)
        assert isinstance(bracket_error, InvalidConfigurationError)
        assert bracket_error.bracket_index == 2
        assert bracket_error.parameter == "lower"

        unknown_error = UnknownStrategyError("no such tax", kind="vat", family="tax")
        assert isinstance(unknown_error, ConfigurationError)
        assert unknown_error.kind == "vat"
        assert unknown_error.family == "tax"

    def test_calculation_error_hierarchy(self):
        calculation_error = PricingCalculationError("tax failed", stage="tax", strategy_name="Regional Tax")
        assert calculation_error.recoverable is False
        assert calculation_error.stage == "tax"
        assert calculation_error.strategy_name == "Regional Tax"
        assert calculation_error.context == {}

        contract_error = StrategyContractError("negative", value=-1, stage="discount", strategy_name="X")
        assert isinstance(contract_error, PricingCalculationError)
        assert contract_error.value == -1
        assert contract_error.stage == "discount"

    @pytest.mark.parametrize("error_class", [PricingInputError, ConfigurationError, PricingCalculationError])
    def test_families_are_independent(self, error_class):
        families = {PricingInputError, ConfigurationError, PricingCalculationError}
        for other in families - {error_class}:
            assert not issubclass(error_class, other)
