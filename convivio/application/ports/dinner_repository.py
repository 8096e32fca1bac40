"""Dinner repository port.

Persistence of the dinner aggregate: the event itself with its voting
ledger, wine pairings and confirmed wines. Concurrent edits resolve
last-writer-wins at record granularity; that is the implementation's
concern, not the caller's.

Developer Golden Rules:
1. FAIL LOUD - Repository raises PersistenceError on write failures
2. NO RETRIES - Callers surface the failure instead of retrying
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol
from uuid import UUID

from convivio.domain.models.dinner_event import DinnerEvent


class DinnerRepositoryProtocol(Protocol):
    """Protocol for dinner aggregate storage.

    Methods:
        save: Store or replace a dinner
        get: Load a dinner by id
        delete: Remove a dinner
        list_upcoming: Dinners whose serving time is not yet past
    """

    async def save(self, event: DinnerEvent) -> None:
        """Store or replace the dinner.

        Raises:
            PersistenceError: If the write fails.
        """
        ...

    async def get(self, event_id: UUID) -> DinnerEvent | None:
        """Load a dinner.

        Returns:
            The dinner if found, None otherwise.
        """
        ...

    async def delete(self, event_id: UUID) -> None:
        """Remove a dinner. Deleting an unknown id is a no-op."""
        ...

    async def list_upcoming(self, now: datetime) -> list[DinnerEvent]:
        """Dinners at or after ``now``, soonest first."""
        ...
