"""
Centralized logging configuration for the pricing pipeline.

This module provides standardized logging configuration using structlog
for all components. Strategies and the price calculator log through these
helpers so discount decisions and price breakdowns share one structured
format.
"""
import logging
import sys
from decimal import Decimal
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_pricing_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the pricing subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for pricing decisions
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="pricing",
        audit_trail=True
    )


def log_discount_decision(
    logger: FilteringBoundLogger,
    strategy_name: str,
    applied: bool,
    amount: Decimal,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a discount decision with standardized format.

    Args:
        logger: Structlog logger instance
        strategy_name: Display name of the discount strategy
        applied: Whether the strategy contributed a positive amount
        amount: Discount amount computed by the strategy
        context: Additional context data
    """
    bound_logger = logger.bind(
        strategy_name=strategy_name,
        discount_result="APPLIED" if applied else "SKIPPED",
        amount=str(amount),
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Discount evaluated")
