"""
Configuration error classifications for pricing strategies.

These exceptions represent programming or configuration mistakes, such as a
negative tax rate or overlapping tax brackets. They are raised when a
strategy is constructed so that a misconfigured pipeline never produces
silently wrong numbers.
"""

from typing import Any, Dict, Optional


class ConfigurationError(Exception):
    """Base class for unrecoverable pipeline configuration problems."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InvalidConfigurationError(ConfigurationError):
    """A strategy parameter is outside its allowed range."""

    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.parameter = parameter
        self.value = value


class InvalidTaxBracketError(InvalidConfigurationError):
    """Progressive tax brackets are empty, overlapping or not contiguous."""

    def __init__(self, message: str, bracket_index: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.bracket_index = bracket_index


class UnknownStrategyError(ConfigurationError):
    """A configuration names a strategy type that does not exist."""

    def __init__(self, message: str, kind: Optional[str] = None,
                 family: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.kind = kind
        self.family = family
