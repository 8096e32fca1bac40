"""Dinner event aggregate.

A ``DinnerEvent`` is one planned gathering. It is the unit the persistence
collaborator loads and saves: the event's own fields together with its
voting ledger, wine pairings and confirmed wines.

The aggregate is mutated only through ``DinnerLifecycle`` operations, the
voting ledger (via the collaboration service) and the wine service
scheduler. Capability predicates are derived from it on demand; see
``convivio.domain.models.capabilities``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from convivio.domain.models.dinner_status import CollaborationState, DinnerStatus
from convivio.domain.models.voting_ledger import VotingLedger
from convivio.domain.models.wine import ConfirmedWine, WinePairing


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


@dataclass
class DinnerEvent:
    """One planned dinner.

    Attributes:
        title: Dinner title.
        date: Target serving time (timezone-aware).
        guest_count: Number of guests.
        occasion: Optional occasion.
        notes: Optional free-text notes.
        status: Lifecycle state.
        collaboration_state: Collaboration sub-machine state, None when the
            dinner is not shared.
        ledger: Proposals, votes and comments.
        wine_pairings: Pairings supplied by the menu generator.
        confirmed_wines: Wines locked in for service.
        notifications_scheduled: Whether reminder tokens are outstanding.
        post_event_token: Token of the post-event reminder, if scheduled.
        id: Unique identifier.
        created_at: Creation timestamp (UTC).
        updated_at: Last modification timestamp (UTC).
    """

    title: str
    date: datetime
    guest_count: int = 2
    occasion: str | None = None
    notes: str | None = None
    status: DinnerStatus = DinnerStatus.PLANNING
    collaboration_state: CollaborationState | None = None
    ledger: VotingLedger = field(default_factory=VotingLedger)
    wine_pairings: list[WinePairing] = field(default_factory=list)
    confirmed_wines: list[ConfirmedWine] = field(default_factory=list)
    notifications_scheduled: bool = False
    post_event_token: str | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utc_now)
    updated_at: datetime = field(default_factory=_utc_now)

    def __post_init__(self) -> None:
        """Validate dinner fields."""
        if self.date.tzinfo is None:
            raise ValueError("Dinner date must be timezone-aware")
        if self.guest_count < 1:
            raise ValueError(f"guest_count must be positive, got {self.guest_count}")

    @property
    def is_collaborative(self) -> bool:
        """Whether the dinner is shared across multiple participants."""
        return self.collaboration_state is not None

    @property
    def has_wine_pairings(self) -> bool:
        return bool(self.wine_pairings)

    @property
    def wanted_wines(self) -> list[ConfirmedWine]:
        """Confirmed wines with a positive quantity."""
        return [w for w in self.confirmed_wines if w.is_wanted]

    @property
    def has_confirmed_wines(self) -> bool:
        return bool(self.wanted_wines)

    def get_confirmed_wine(self, wine_id: UUID) -> ConfirmedWine | None:
        for wine in self.confirmed_wines:
            if wine.id == wine_id:
                return wine
        return None

    def is_past(self, now: datetime) -> bool:
        return self.date < now

    def needs_bottle_unload(self, now: datetime) -> bool:
        """Whether the host should record the bottles consumed.

        True for a dinner whose serving time has passed, that is neither
        completed nor cancelled, and that has wanted confirmed wines.
        """
        return (
            self.is_past(now)
            and not self.status.is_terminal()
            and self.has_confirmed_wines
        )

    def touch(self, at: datetime) -> None:
        self.updated_at = at
