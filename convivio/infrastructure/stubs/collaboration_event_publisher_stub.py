"""Collaboration event publisher stub implementation.

Records published collaboration events in memory for testing.
"""

from __future__ import annotations

from structlog import get_logger

from convivio.application.ports.collaboration_event_publisher import (
    CollaborationEventPublisherProtocol,
)
from convivio.domain.events.collaboration import CollaborationEvent

logger = get_logger()


class EventDeliveryError(Exception):
    """Simulated failure of the collaboration notification channel."""


class CollaborationEventPublisherStub(CollaborationEventPublisherProtocol):
    """In-memory collaboration event publisher.

    Attributes:
        published: Events published, in order.
        fail_on_publish: When True, publish raises EventDeliveryError.
    """

    def __init__(self, *, fail_on_publish: bool = False) -> None:
        self.fail_on_publish = fail_on_publish
        self.published: list[CollaborationEvent] = []

    async def publish(self, event: CollaborationEvent) -> None:
        if self.fail_on_publish:
            raise EventDeliveryError(
                f"simulated failure publishing {type(event).__name__}"
            )
        self.published.append(event)
        logger.debug("collaboration_event_published", payload=event.to_dict())

    def events_of(self, event_type: type) -> list[CollaborationEvent]:
        """Published events of one class."""
        return [e for e in self.published if isinstance(e, event_type)]

    def clear(self) -> None:
        self.published.clear()
