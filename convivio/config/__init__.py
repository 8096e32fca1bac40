"""Configuration module for Convivio.

Available Configurations:
- WineServiceConfig: Post-event reminder offset and past-instant handling
- CollaborationConfig: Comment and dish name limits
"""

from convivio.config.collaboration_config import (
    DEFAULT_COLLABORATION_CONFIG,
    TEST_COLLABORATION_CONFIG,
    CollaborationConfig,
)
from convivio.config.wine_service_config import (
    DEFAULT_WINE_SERVICE_CONFIG,
    TEST_WINE_SERVICE_CONFIG,
    WineServiceConfig,
)

__all__ = [
    "CollaborationConfig",
    "DEFAULT_COLLABORATION_CONFIG",
    "DEFAULT_WINE_SERVICE_CONFIG",
    "TEST_COLLABORATION_CONFIG",
    "TEST_WINE_SERVICE_CONFIG",
    "WineServiceConfig",
]
