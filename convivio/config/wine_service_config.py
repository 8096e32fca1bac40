"""Wine service reminder configuration.

Environment Variables:
- CONVIVIO_POST_EVENT_OFFSET_MINUTES: Minutes after the serving time at
  which the post-event reminder fires (default: 240)
- CONVIVIO_SKIP_PAST_REMINDERS: Leave out reminders whose instant has
  already passed instead of requesting them (default: true)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    value = os.environ.get(key)
    if value is None:
        return default
    return value.lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class WineServiceConfig:
    """Configuration for wine service scheduling.

    Attributes:
        post_event_offset_minutes: Estimated length of the dinner; the
            reminder to record consumed bottles fires this long after the
            serving time. Default: 240 (4 hours).
        skip_past_reminders: When True, reminder instants that are not in
            the future are reported as skipped rather than requested.
    """

    post_event_offset_minutes: int = 240
    skip_past_reminders: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.post_event_offset_minutes < 0:
            raise ValueError(
                "post_event_offset_minutes must be non-negative, "
                f"got {self.post_event_offset_minutes}"
            )

    @property
    def post_event_offset(self) -> timedelta:
        return timedelta(minutes=self.post_event_offset_minutes)

    @classmethod
    def from_environment(cls) -> "WineServiceConfig":
        """Create config from environment variables with defaults."""
        return cls(
            post_event_offset_minutes=_get_int_env(
                "CONVIVIO_POST_EVENT_OFFSET_MINUTES", 240
            ),
            skip_past_reminders=_get_bool_env("CONVIVIO_SKIP_PAST_REMINDERS", True),
        )


# Default production config
DEFAULT_WINE_SERVICE_CONFIG = WineServiceConfig()

# Testing config: every instant is requested, past or not
TEST_WINE_SERVICE_CONFIG = WineServiceConfig(
    post_event_offset_minutes=240,
    skip_past_reminders=False,
)
