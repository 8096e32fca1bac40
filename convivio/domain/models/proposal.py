"""Dish proposal, vote and comment models for collaborative menu planning.

A proposal is a candidate dish contributed by a participant for one course.
Votes and comments are attached to a proposal but owned by the dinner's
``VotingLedger``, which keys votes by ``(proposal_id, voter_id)`` so that
the one-vote-per-voter rule holds structurally.

Vote and Comment are frozen records; changing a vote's polarity replaces the
record under the same key while preserving its id and creation time.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


class CourseType(Enum):
    """Menu course a dish belongs to, in serving order."""

    APERITIF = "aperitif"
    STARTER = "starter"
    FIRST_COURSE = "first_course"
    MAIN_COURSE = "main_course"
    SIDE_DISH = "side_dish"
    DESSERT = "dessert"
    DIGESTIF = "digestif"


class ProposalStatus(Enum):
    """Editorial decision on a proposal.

    The status is decided by the dinner owner, informed by (but not
    derived from) the proposal's score.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class VoteOutcome(Enum):
    """What a ``cast_vote`` call did to the voter's vote."""

    CREATED = "created"
    FLIPPED = "flipped"
    RETRACTED = "retracted"


@dataclass
class Proposal:
    """A dish proposed by a participant for a dinner menu.

    Attributes:
        id: Unique identifier.
        dinner_id: The dinner the proposal belongs to.
        course: Target course.
        dish_name: Name of the dish.
        proposed_by_id: Identity of the proposer.
        proposed_by_name: Display name of the proposer.
        dish_description: Optional free-text description.
        wine_suggestion: Optional wine the proposer would pair with it.
        status: Editorial decision (defaults to PENDING).
        created_at: Creation timestamp (UTC).
        updated_at: Last modification timestamp (UTC).
    """

    dinner_id: UUID
    course: CourseType
    dish_name: str
    proposed_by_id: str
    proposed_by_name: str
    dish_description: str | None = None
    wine_suggestion: str | None = None
    status: ProposalStatus = ProposalStatus.PENDING
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utc_now)
    updated_at: datetime = field(default_factory=_utc_now)


@dataclass(frozen=True, eq=True)
class Vote:
    """One participant's stance on one proposal.

    Attributes:
        proposal_id: The proposal voted on.
        voter_id: Identity of the voter.
        voter_name: Display name of the voter.
        is_upvote: True for an upvote, False for a downvote.
        id: Unique identifier, preserved across polarity flips.
        created_at: When the vote was first cast.
        updated_at: When the polarity last changed.
    """

    proposal_id: UUID
    voter_id: str
    voter_name: str
    is_upvote: bool
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utc_now)
    updated_at: datetime = field(default_factory=_utc_now)

    @property
    def key(self) -> tuple[UUID, str]:
        """The ledger key enforcing one vote per (proposal, voter)."""
        return (self.proposal_id, self.voter_id)

    def with_polarity(self, is_upvote: bool, at: datetime) -> Vote:
        """Return the same vote record with its polarity changed."""
        return replace(self, is_upvote=is_upvote, updated_at=at)


@dataclass(frozen=True, eq=True)
class Comment:
    """A timestamped remark on a proposal.

    Attributes:
        proposal_id: The proposal commented on.
        author_id: Identity of the author.
        author_name: Display name of the author.
        text: Comment body, already trimmed.
        id: Unique identifier.
        created_at: Creation timestamp (UTC).
    """

    proposal_id: UUID
    author_id: str
    author_name: str
    text: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utc_now)
