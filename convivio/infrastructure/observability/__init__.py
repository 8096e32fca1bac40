"""Observability infrastructure: structured logging and correlation IDs.

Usage:
    from convivio.infrastructure.observability import (
        configure_structlog,
        correlation_scope,
    )

    configure_structlog(environment="production")
    with correlation_scope():
        ...
"""

from convivio.infrastructure.observability.correlation import (
    correlation_id_processor,
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from convivio.infrastructure.observability.logging import (
    build_processors,
    configure_structlog,
)

__all__: list[str] = [
    "build_processors",
    "configure_structlog",
    "correlation_id_processor",
    "correlation_scope",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
]
