"""Application services for Convivio.

Services orchestrate the domain layer with the ports: they load the
dinner, apply one guarded change, save it and talk to the notification
collaborators.

Available services:
- DinnerService: Lifecycle transitions, confirmed wines and wine service
- CollaborationService: Proposals, votes, comments and collaboration state
- WineServiceScheduler: Reminder batches for the wine service
"""

from convivio.application.services.collaboration_service import (
    CollaborationService,
)
from convivio.application.services.dinner_service import DinnerService
from convivio.application.services.wine_service_scheduler import (
    WineServiceScheduler,
)

__all__ = [
    "CollaborationService",
    "DinnerService",
    "WineServiceScheduler",
]
