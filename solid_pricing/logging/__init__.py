"""
Logging configuration and utilities for the pricing pipeline.
"""
from .config import configure_logging, get_logger, get_pricing_logger, log_discount_decision

__all__ = ["configure_logging", "get_logger", "get_pricing_logger", "log_discount_decision"]
