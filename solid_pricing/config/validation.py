"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_range(
    params: dict[str, Any],
    name: str,
    minimum: float,
    maximum: Optional[float],
    message: str,
) -> list[ValidationError]:
    if name not in params:
        return []
    value = params[name]
    if not _is_number(value) or value < minimum or (maximum is not None and value > maximum):
        return [ValidationError(field=name, message=message, value=value)]
    return []


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_discount_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate customer discount parameters."""
        errors = []

        for name in ("student_percent", "senior_percent", "vip_percent"):
            errors.extend(_check_range(
                params, name, 0, 100, "Must be a number between 0 and 100"
            ))

        # Validate senior_min_age
        if "senior_min_age" in params:
            value = params["senior_min_age"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="senior_min_age",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_tax_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate tax parameters."""
        errors = []

        errors.extend(_check_range(
            params, "flat_rate", 0, 1, "Must be a rate between 0 and 1"
        ))
        errors.extend(_check_range(
            params, "category_default_rate", 0, 1, "Must be a rate between 0 and 1"
        ))

        return errors

    @staticmethod
    def validate_shipping_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate shipping parameters."""
        errors = []

        for name in (
            "standard_base_rate",
            "standard_per_weight_rate",
            "free_shipping_threshold",
            "express_base_rate",
            "express_per_weight_rate",
            "international_base_rate",
        ):
            errors.extend(_check_range(params, name, 0, None, "Must be a non-negative number"))

        for name in ("standard_delivery_days", "express_delivery_days", "international_delivery_days"):
            if name in params:
                value = params[name]
                if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive integer",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_pipeline_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate the strategy selection section."""
        errors = []

        if "discounts" in params:
            value = params["discounts"]
            if not isinstance(value, list):
                errors.append(ValidationError(
                    field="discounts",
                    message="Must be a list of discount specs",
                    value=value
                ))
            else:
                for index, spec in enumerate(value):
                    if not isinstance(spec, dict) or "type" not in spec:
                        errors.append(ValidationError(
                            field=f"discounts[{index}]",
                            message="Each discount spec must be a mapping with a 'type' key",
                            value=spec
                        ))

        if "tax" in params:
            value = params["tax"]
            if not isinstance(value, dict) or "policy" not in value:
                errors.append(ValidationError(
                    field="tax",
                    message="Must be a mapping with a 'policy' key",
                    value=value
                ))

        if "shipping" in params:
            value = params["shipping"]
            if not isinstance(value, dict) or "method" not in value:
                errors.append(ValidationError(
                    field="shipping",
                    message="Must be a mapping with a 'method' key",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "discounts" in config:
            errors.extend(ConfigValidator.validate_discount_params(config["discounts"]))

        if "tax" in config:
            errors.extend(ConfigValidator.validate_tax_params(config["tax"]))

        if "shipping" in config:
            errors.extend(ConfigValidator.validate_shipping_params(config["shipping"]))

        if "pipeline" in config:
            errors.extend(ConfigValidator.validate_pipeline_params(config["pipeline"]))

        return errors
