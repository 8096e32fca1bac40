"""Wine service plan models: schedule entries and reminder payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID

from convivio.domain.models.wine import ConfirmedWine


class ReminderKind(Enum):
    """What a reminder asks the host to do."""

    PUT_IN_COOLING = "put_in_cooling"
    REMOVE_FROM_COOLING = "remove_from_cooling"
    POST_EVENT = "post_event"


@dataclass(frozen=True)
class ScheduleEntry:
    """Cooling instants for one wine.

    Attributes:
        wine: The confirmed wine.
        put_in_time: When the bottle goes into the cooling environment.
        take_out_time: When it comes back out, None when it stays cold
            until served.
    """

    wine: ConfirmedWine
    put_in_time: datetime
    take_out_time: datetime | None = None


@dataclass(frozen=True)
class ReminderPayload:
    """Content handed to the notification collaborator with each request.

    Attributes:
        kind: Reminder kind.
        title: Short notification title.
        body: Notification body.
        dinner_id: The dinner the reminder belongs to.
        wine_id: The wine concerned, None for the post-event reminder.
    """

    kind: ReminderKind
    title: str
    body: str
    dinner_id: UUID
    wine_id: UUID | None = None


@dataclass(frozen=True)
class SkippedReminder:
    """A reminder that was not requested because its instant had passed."""

    kind: ReminderKind
    at: datetime
    wine_id: UUID | None = None


@dataclass(frozen=True)
class ServicePlan:
    """Outcome of scheduling a dinner's wine service.

    Attributes:
        entries: Schedule entries sorted by put-in time.
        post_event_at: Instant of the post-event reminder.
        tokens: Reminder tokens obtained for this batch.
        skipped: Reminders left out because their instant had passed.
        superseded_tokens: Tokens of the previous batch, still pending until
            the caller releases them.
    """

    entries: tuple[ScheduleEntry, ...]
    post_event_at: datetime
    tokens: tuple[str, ...] = ()
    skipped: tuple[SkippedReminder, ...] = field(default_factory=tuple)
    superseded_tokens: tuple[str, ...] = ()

    @property
    def tokens_issued(self) -> int:
        return len(self.tokens)
