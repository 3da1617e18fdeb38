"""
Input error classifications for pricing requests.

These exceptions are raised when a caller hands the pipeline a product or
context value that cannot be priced, such as a negative price or a zero
quantity. The request can be retried once the input is corrected.
"""

from typing import Any, Dict, Optional


class PricingInputError(Exception):
    """Base class for malformed pricing request data."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidInputError(PricingInputError):
    """A single input field is missing, malformed or out of range."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
