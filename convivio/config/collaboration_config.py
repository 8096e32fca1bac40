"""Collaboration limits configuration.

Environment Variables:
- CONVIVIO_MAX_COMMENT_LENGTH: Maximum trimmed comment length (default: 1000)
- CONVIVIO_MAX_DISH_NAME_LENGTH: Maximum proposed dish name length (default: 200)
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _get_int_env(key: str, default: int) -> int:
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class CollaborationConfig:
    """Limits applied to collaborative input.

    Attributes:
        max_comment_length: Maximum length of a trimmed comment.
        max_dish_name_length: Maximum length of a proposed dish name.
    """

    max_comment_length: int = 1000
    max_dish_name_length: int = 200

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.max_comment_length < 1:
            raise ValueError(
                f"max_comment_length must be positive, got {self.max_comment_length}"
            )
        if self.max_dish_name_length < 1:
            raise ValueError(
                "max_dish_name_length must be positive, "
                f"got {self.max_dish_name_length}"
            )

    @classmethod
    def from_environment(cls) -> "CollaborationConfig":
        """Create config from environment variables with defaults."""
        return cls(
            max_comment_length=_get_int_env("CONVIVIO_MAX_COMMENT_LENGTH", 1000),
            max_dish_name_length=_get_int_env("CONVIVIO_MAX_DISH_NAME_LENGTH", 200),
        )


DEFAULT_COLLABORATION_CONFIG = CollaborationConfig()

# Testing config with small limits so boundary cases stay short
TEST_COLLABORATION_CONFIG = CollaborationConfig(
    max_comment_length=50,
    max_dish_name_length=30,
)
