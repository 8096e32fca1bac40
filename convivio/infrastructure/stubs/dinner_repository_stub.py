"""Dinner repository stub implementation.

In-memory implementation of DinnerRepositoryProtocol for development and
testing. Dinners are stored as JSON documents (``DinnerDocument``), so a
load always returns a fresh aggregate and every field must survive the
document mapping. It is NOT suitable for production use.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from structlog import get_logger

from convivio.application.dtos.dinner_document import DinnerDocument
from convivio.application.ports.dinner_repository import DinnerRepositoryProtocol
from convivio.domain.errors.persistence import PersistenceError
from convivio.domain.models.dinner_event import DinnerEvent

logger = get_logger()


class DinnerRepositoryStub(DinnerRepositoryProtocol):
    """In-memory dinner storage.

    Attributes:
        fail_on_save: When True, save raises PersistenceError.
        save_count: Number of successful saves.
        _documents: JSON documents by dinner id.
    """

    def __init__(self, *, fail_on_save: bool = False) -> None:
        self.fail_on_save = fail_on_save
        self.save_count = 0
        self._documents: dict[UUID, str] = {}

    async def save(self, event: DinnerEvent) -> None:
        if self.fail_on_save:
            logger.info("dinner_repository_stub.save.failed", dinner_id=str(event.id))
            raise PersistenceError(event.id, "simulated write failure")
        self._documents[event.id] = DinnerDocument.from_domain(event).model_dump_json()
        self.save_count += 1

    async def get(self, event_id: UUID) -> DinnerEvent | None:
        raw = self._documents.get(event_id)
        if raw is None:
            return None
        return DinnerDocument.model_validate_json(raw).to_domain()

    async def delete(self, event_id: UUID) -> None:
        self._documents.pop(event_id, None)

    async def list_upcoming(self, now: datetime) -> list[DinnerEvent]:
        events = [
            DinnerDocument.model_validate_json(raw).to_domain()
            for raw in self._documents.values()
        ]
        return sorted((e for e in events if e.date >= now), key=lambda e: e.date)

    def raw_document(self, event_id: UUID) -> str | None:
        """Stored JSON of a dinner, for inspecting the persisted shape."""
        return self._documents.get(event_id)

    def clear(self) -> None:
        self._documents.clear()
        self.save_count = 0
