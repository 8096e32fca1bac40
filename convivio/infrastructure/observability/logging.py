"""Structured logging configuration with structlog.

Production renders one JSON object per line; any other environment gets
colored console output. The level comes from ``LOG_LEVEL`` (default INFO).

Log Entry Format (production):
    {
        "timestamp": "2026-06-12T17:00:00.000000Z",
        "level": "info",
        "event": "wine_service_scheduled",
        "correlation_id": "uuid",
        "dinner_id": "uuid",
        ...additional context
    }

Usage:
    from convivio.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")
"""

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from convivio.infrastructure.observability.correlation import (
    correlation_id_processor,
)

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _get_log_level() -> int:
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.INFO)


def build_processors(environment: str) -> list[Processor]:
    """Return the processor chain for an environment.

    Args:
        environment: 'production' for JSON output, anything else for
            console output.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if environment == "production":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    return processors


def configure_structlog(environment: str = "production") -> None:
    """Configure structlog once at application startup."""
    structlog.configure(
        processors=build_processors(environment),
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
