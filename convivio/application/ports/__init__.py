"""Application ports - Abstract interfaces for infrastructure adapters.

Ports define the contracts that infrastructure adapters must implement.
This follows the hexagonal architecture pattern where the application
layer depends only on abstractions, not concrete implementations.

Available ports:
- TimeAuthorityProtocol: Timestamp provisioning
- ReminderNotifierProtocol: Timed local reminders
- DinnerRepositoryProtocol: Dinner aggregate persistence
- TemperatureSuggesterProtocol: Default temperature category
- CollaborationEventPublisherProtocol: Collaboration notifications
"""

from convivio.application.ports.collaboration_event_publisher import (
    CollaborationEventPublisherProtocol,
)
from convivio.application.ports.dinner_repository import DinnerRepositoryProtocol
from convivio.application.ports.reminder_notifier import ReminderNotifierProtocol
from convivio.application.ports.temperature_suggester import (
    TemperatureSuggesterProtocol,
)
from convivio.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = [
    "CollaborationEventPublisherProtocol",
    "DinnerRepositoryProtocol",
    "ReminderNotifierProtocol",
    "TemperatureSuggesterProtocol",
    "TimeAuthorityProtocol",
]
