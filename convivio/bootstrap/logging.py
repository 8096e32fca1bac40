"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

import os

from convivio.infrastructure.observability import (
    configure_structlog as _configure_structlog,
)

ENVIRONMENT_ENV = "CONVIVIO_ENV"


def configure_structlog(environment: str | None = None) -> None:
    """Configure structlog for the given environment.

    Falls back to ``CONVIVIO_ENV`` and then to "development".
    """
    _configure_structlog(
        environment=environment or os.environ.get(ENVIRONMENT_ENV, "development")
    )


__all__ = ["configure_structlog"]
