"""Infrastructure stubs for development and testing.

In-memory implementations of the application ports. Not for production.
"""

from convivio.infrastructure.stubs.collaboration_event_publisher_stub import (
    CollaborationEventPublisherStub,
    EventDeliveryError,
)
from convivio.infrastructure.stubs.dinner_repository_stub import DinnerRepositoryStub
from convivio.infrastructure.stubs.reminder_notifier_stub import (
    ReminderDeliveryError,
    ReminderNotifierStub,
    ScheduledReminder,
)

__all__: list[str] = [
    "CollaborationEventPublisherStub",
    "DinnerRepositoryStub",
    "EventDeliveryError",
    "ReminderDeliveryError",
    "ReminderNotifierStub",
    "ScheduledReminder",
]
