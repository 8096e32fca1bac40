"""Collaboration domain events.

Emitted by the collaboration service after a proposal, vote, comment or
collaboration state change has been persisted, so that other participants
can be notified. Events are immutable and timestamped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

# =============================================================================
# Event Type Constants
# =============================================================================

PROPOSAL_SUBMITTED_EVENT_TYPE: str = "collaboration.proposal.submitted"
VOTE_CAST_EVENT_TYPE: str = "collaboration.vote.cast"
COMMENT_ADDED_EVENT_TYPE: str = "collaboration.comment.added"
COLLABORATION_STATE_CHANGED_EVENT_TYPE: str = "collaboration.state.changed"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, eq=True)
class ProposalSubmittedEvent:
    """A participant proposed a dish.

    Attributes:
        dinner_id: The shared dinner.
        proposal_id: The new proposal.
        course: CourseType value of the proposal.
        dish_name: Proposed dish.
        proposed_by_id: Participant who proposed it.
        proposed_by_name: Display name of that participant.
        event_id: Unique id of this event.
        occurred_at: When the proposal was recorded.
    """

    dinner_id: UUID
    proposal_id: UUID
    course: str
    dish_name: str
    proposed_by_id: str
    proposed_by_name: str
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=_utc_now)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "event_type": PROPOSAL_SUBMITTED_EVENT_TYPE,
            "event_id": str(self.event_id),
            "dinner_id": str(self.dinner_id),
            "proposal_id": str(self.proposal_id),
            "course": self.course,
            "dish_name": self.dish_name,
            "proposed_by_id": self.proposed_by_id,
            "proposed_by_name": self.proposed_by_name,
            "occurred_at": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True, eq=True)
class VoteCastEvent:
    """A participant voted, flipped or retracted a vote.

    ``outcome`` is the VoteOutcome value and ``is_upvote`` the polarity of
    the tap, not of the resulting vote (there is none after a retraction).
    """

    dinner_id: UUID
    proposal_id: UUID
    voter_id: str
    voter_name: str
    is_upvote: bool
    outcome: str
    score: int
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=_utc_now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": VOTE_CAST_EVENT_TYPE,
            "event_id": str(self.event_id),
            "dinner_id": str(self.dinner_id),
            "proposal_id": str(self.proposal_id),
            "voter_id": self.voter_id,
            "voter_name": self.voter_name,
            "is_upvote": self.is_upvote,
            "outcome": self.outcome,
            "score": self.score,
            "occurred_at": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True, eq=True)
class CommentAddedEvent:
    """A participant commented on a proposal."""

    dinner_id: UUID
    proposal_id: UUID
    comment_id: UUID
    author_id: str
    author_name: str
    text: str
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=_utc_now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": COMMENT_ADDED_EVENT_TYPE,
            "event_id": str(self.event_id),
            "dinner_id": str(self.dinner_id),
            "proposal_id": str(self.proposal_id),
            "comment_id": str(self.comment_id),
            "author_id": self.author_id,
            "author_name": self.author_name,
            "text": self.text,
            "occurred_at": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True, eq=True)
class CollaborationStateChangedEvent:
    """The owner moved the collaboration state of a shared dinner."""

    dinner_id: UUID
    from_state: str
    to_state: str
    changed_by_id: str
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=_utc_now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": COLLABORATION_STATE_CHANGED_EVENT_TYPE,
            "event_id": str(self.event_id),
            "dinner_id": str(self.dinner_id),
            "from_state": self.from_state,
            "to_state": self.to_state,
            "changed_by_id": self.changed_by_id,
            "occurred_at": self.occurred_at.isoformat(),
        }


CollaborationEvent = (
    ProposalSubmittedEvent
    | VoteCastEvent
    | CommentAddedEvent
    | CollaborationStateChangedEvent
)
