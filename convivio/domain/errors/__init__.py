"""Domain errors for Convivio.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from ConvivioError.
"""

from convivio.domain.errors.collaboration import (
    ParticipantNotAllowedError,
    ProposalNotFoundError,
)
from convivio.domain.errors.lifecycle import (
    CollaborationNotEnabledError,
    LifecycleViolationError,
)
from convivio.domain.errors.notification import (
    PermissionDeniedError,
    SchedulingFailureError,
)
from convivio.domain.errors.persistence import DinnerNotFoundError, PersistenceError
from convivio.domain.errors.validation import ValidationError

__all__: list[str] = [
    "CollaborationNotEnabledError",
    "DinnerNotFoundError",
    "LifecycleViolationError",
    "ParticipantNotAllowedError",
    "PermissionDeniedError",
    "PersistenceError",
    "ProposalNotFoundError",
    "SchedulingFailureError",
    "ValidationError",
]
