"""Persistence errors surfaced from the dinner repository collaborator."""

from __future__ import annotations

from uuid import UUID

from convivio.domain.exceptions import ConvivioError


class DinnerNotFoundError(ConvivioError):
    """Raised when a dinner cannot be loaded.

    Attributes:
        dinner_id: The dinner id that was not found.
    """

    def __init__(self, dinner_id: UUID) -> None:
        self.dinner_id = dinner_id
        super().__init__(f"Dinner not found: {dinner_id}")


class PersistenceError(ConvivioError):
    """Raised when saving a dinner aggregate fails.

    Saves are not retried automatically; the failure is reported so the
    caller can tell the user.

    Attributes:
        dinner_id: The dinner whose save failed.
        reason: Description of the underlying failure.
    """

    def __init__(self, dinner_id: UUID, reason: str) -> None:
        self.dinner_id = dinner_id
        self.reason = reason
        super().__init__(f"Failed to save dinner {dinner_id}: {reason}")
