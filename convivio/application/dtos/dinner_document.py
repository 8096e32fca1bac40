"""Persisted document shape of the dinner aggregate.

Pydantic models describing the dinner as it is stored by a document
repository: the event's own fields with its proposals, votes, comments,
wine pairings and confirmed wines nested inside it.

``DinnerDocument.from_domain`` and ``DinnerDocument.to_domain`` convert
between the document and the ``DinnerEvent`` aggregate. Enum fields are
stored by value; datetimes are ISO 8601 with their UTC offset.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from convivio.domain.models.dinner_event import DinnerEvent
from convivio.domain.models.dinner_status import CollaborationState, DinnerStatus
from convivio.domain.models.proposal import (
    Comment,
    CourseType,
    Proposal,
    ProposalStatus,
    Vote,
)
from convivio.domain.models.temperature import TemperatureCategory
from convivio.domain.models.voting_ledger import VotingLedger
from convivio.domain.models.wine import ConfirmedWine, WinePairing, WineSource


class ProposalDocument(BaseModel):
    """A dish proposal."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    dinner_id: UUID
    course: CourseType
    dish_name: str = Field(..., min_length=1)
    dish_description: str | None = None
    proposed_by_id: str
    proposed_by_name: str
    wine_suggestion: str | None = None
    status: ProposalStatus = ProposalStatus.PENDING
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, proposal: Proposal) -> ProposalDocument:
        return cls(
            id=proposal.id,
            dinner_id=proposal.dinner_id,
            course=proposal.course,
            dish_name=proposal.dish_name,
            dish_description=proposal.dish_description,
            proposed_by_id=proposal.proposed_by_id,
            proposed_by_name=proposal.proposed_by_name,
            wine_suggestion=proposal.wine_suggestion,
            status=proposal.status,
            created_at=proposal.created_at,
            updated_at=proposal.updated_at,
        )

    def to_domain(self) -> Proposal:
        return Proposal(
            id=self.id,
            dinner_id=self.dinner_id,
            course=self.course,
            dish_name=self.dish_name,
            dish_description=self.dish_description,
            proposed_by_id=self.proposed_by_id,
            proposed_by_name=self.proposed_by_name,
            wine_suggestion=self.wine_suggestion,
            status=self.status,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class VoteDocument(BaseModel):
    """One participant's vote on a proposal."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    proposal_id: UUID
    voter_id: str
    voter_name: str
    is_upvote: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, vote: Vote) -> VoteDocument:
        return cls(
            id=vote.id,
            proposal_id=vote.proposal_id,
            voter_id=vote.voter_id,
            voter_name=vote.voter_name,
            is_upvote=vote.is_upvote,
            created_at=vote.created_at,
            updated_at=vote.updated_at,
        )

    def to_domain(self) -> Vote:
        return Vote(
            id=self.id,
            proposal_id=self.proposal_id,
            voter_id=self.voter_id,
            voter_name=self.voter_name,
            is_upvote=self.is_upvote,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class CommentDocument(BaseModel):
    """A comment on a proposal."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    proposal_id: UUID
    author_id: str
    author_name: str
    text: str = Field(..., min_length=1)
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> CommentDocument:
        return cls(
            id=comment.id,
            proposal_id=comment.proposal_id,
            author_id=comment.author_id,
            author_name=comment.author_name,
            text=comment.text,
            created_at=comment.created_at,
        )

    def to_domain(self) -> Comment:
        return Comment(
            id=self.id,
            proposal_id=self.proposal_id,
            author_id=self.author_id,
            author_name=self.author_name,
            text=self.text,
            created_at=self.created_at,
        )


class WinePairingDocument(BaseModel):
    """A menu-generated wine pairing."""

    model_config = ConfigDict(frozen=True)

    course: str
    wine_name: str
    producer: str | None = None
    vintage: str | None = None
    source: WineSource = WineSource.FROM_CELLAR
    quantity: int = Field(default=1, ge=0)
    reasoning: str | None = None
    wine_id: str | None = None

    @classmethod
    def from_domain(cls, pairing: WinePairing) -> WinePairingDocument:
        return cls(
            course=pairing.course,
            wine_name=pairing.wine_name,
            producer=pairing.producer,
            vintage=pairing.vintage,
            source=pairing.source,
            quantity=pairing.quantity,
            reasoning=pairing.reasoning,
            wine_id=pairing.wine_id,
        )

    def to_domain(self) -> WinePairing:
        return WinePairing(
            course=self.course,
            wine_name=self.wine_name,
            producer=self.producer,
            vintage=self.vintage,
            source=self.source,
            quantity=self.quantity,
            reasoning=self.reasoning,
            wine_id=self.wine_id,
        )


class ConfirmedWineDocument(BaseModel):
    """A wine confirmed for service, with its reminder tokens."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    wine_id: str | None = None
    wine_name: str
    producer: str | None = None
    vintage: str | None = None
    course: str
    source: WineSource
    quantity: int = Field(..., ge=0)
    temperature_category: TemperatureCategory
    cool_down_token: str | None = None
    remove_token: str | None = None

    @classmethod
    def from_domain(cls, wine: ConfirmedWine) -> ConfirmedWineDocument:
        return cls(
            id=wine.id,
            wine_id=wine.wine_id,
            wine_name=wine.wine_name,
            producer=wine.producer,
            vintage=wine.vintage,
            course=wine.course,
            source=wine.source,
            quantity=wine.quantity,
            temperature_category=wine.temperature_category,
            cool_down_token=wine.cool_down_token,
            remove_token=wine.remove_token,
        )

    def to_domain(self) -> ConfirmedWine:
        return ConfirmedWine(
            id=self.id,
            wine_id=self.wine_id,
            wine_name=self.wine_name,
            producer=self.producer,
            vintage=self.vintage,
            course=self.course,
            source=self.source,
            quantity=self.quantity,
            temperature_category=self.temperature_category,
            cool_down_token=self.cool_down_token,
            remove_token=self.remove_token,
        )


class DinnerDocument(BaseModel):
    """The whole dinner aggregate as one document.

    Attributes:
        date: Target serving time; must carry a UTC offset.
        collaboration_state: None for a dinner that is not shared.
        proposals: Proposals in insertion order (ranking ties rely on it).
        comments: Comments in creation order.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    title: str
    date: datetime
    guest_count: int = Field(default=2, ge=1)
    occasion: str | None = None
    notes: str | None = None
    status: DinnerStatus = DinnerStatus.PLANNING
    collaboration_state: CollaborationState | None = None
    proposals: list[ProposalDocument] = Field(default_factory=list)
    votes: list[VoteDocument] = Field(default_factory=list)
    comments: list[CommentDocument] = Field(default_factory=list)
    wine_pairings: list[WinePairingDocument] = Field(default_factory=list)
    confirmed_wines: list[ConfirmedWineDocument] = Field(default_factory=list)
    notifications_scheduled: bool = False
    post_event_token: str | None = None
    created_at: datetime
    updated_at: datetime

    @field_validator("date")
    @classmethod
    def validate_date_is_aware(cls, v: datetime) -> datetime:
        """Reject serving times without a UTC offset."""
        if v.tzinfo is None:
            raise ValueError("date must include a UTC offset")
        return v

    @classmethod
    def from_domain(cls, event: DinnerEvent) -> DinnerDocument:
        """Build the document of a dinner aggregate."""
        ledger = event.ledger
        return cls(
            id=event.id,
            title=event.title,
            date=event.date,
            guest_count=event.guest_count,
            occasion=event.occasion,
            notes=event.notes,
            status=event.status,
            collaboration_state=event.collaboration_state,
            proposals=[ProposalDocument.from_domain(p) for p in ledger.proposals],
            votes=[VoteDocument.from_domain(v) for v in ledger.all_votes],
            comments=[CommentDocument.from_domain(c) for c in ledger.all_comments],
            wine_pairings=[
                WinePairingDocument.from_domain(p) for p in event.wine_pairings
            ],
            confirmed_wines=[
                ConfirmedWineDocument.from_domain(w) for w in event.confirmed_wines
            ],
            notifications_scheduled=event.notifications_scheduled,
            post_event_token=event.post_event_token,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )

    def to_domain(self) -> DinnerEvent:
        """Rebuild the dinner aggregate, ledger included."""
        ledger = VotingLedger.from_records(
            proposals=[p.to_domain() for p in self.proposals],
            votes=[v.to_domain() for v in self.votes],
            comments=[c.to_domain() for c in self.comments],
        )
        return DinnerEvent(
            id=self.id,
            title=self.title,
            date=self.date,
            guest_count=self.guest_count,
            occasion=self.occasion,
            notes=self.notes,
            status=self.status,
            collaboration_state=self.collaboration_state,
            ledger=ledger,
            wine_pairings=[p.to_domain() for p in self.wine_pairings],
            confirmed_wines=[w.to_domain() for w in self.confirmed_wines],
            notifications_scheduled=self.notifications_scheduled,
            post_event_token=self.post_event_token,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
