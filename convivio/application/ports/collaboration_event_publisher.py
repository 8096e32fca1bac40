"""Collaboration event publisher port.

Port interface for telling other participants of a shared dinner that
something happened (a proposal, a vote, a comment, a state change).
"""

from typing import Protocol

from convivio.domain.events.collaboration import CollaborationEvent


class CollaborationEventPublisherProtocol(Protocol):
    """Port for publishing collaboration events.

    Callers log and swallow delivery failures: a notification that cannot
    be sent never undoes a persisted proposal, vote or comment.
    """

    async def publish(self, event: CollaborationEvent) -> None:
        """Publish one collaboration event.

        Args:
            event: The event to publish.
        """
        ...
