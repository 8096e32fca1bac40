"""Voting ledger: proposals, votes and comments of one dinner.

The ledger owns every Proposal, Vote and Comment of a dinner. Votes are
stored in a map keyed by ``(proposal_id, voter_id)``, which makes the
one-vote-per-voter rule structural: a second vote from the same voter can
only replace or remove the first.

Scores and counts are recomputed from the vote map on every call and never
cached, so they cannot go stale.

The ledger does not check who is acting. Capability checks (propose, vote,
comment) and lifecycle gating are the caller's job; see
``convivio.application.services.collaboration_service``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID

from convivio.domain.errors.collaboration import ProposalNotFoundError
from convivio.domain.errors.validation import ValidationError
from convivio.domain.models.proposal import (
    Comment,
    CourseType,
    Proposal,
    ProposalStatus,
    Vote,
    VoteOutcome,
)

VoteKey = tuple[UUID, str]


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CollaborationSummary:
    """Counts over a dinner's collaborative activity."""

    total_proposals: int
    pending_proposals: int
    accepted_proposals: int
    total_votes: int
    total_comments: int
    proposals_by_course: dict[CourseType, list[Proposal]] = field(
        default_factory=dict
    )


class VotingLedger:
    """Proposals with their votes and comments for one dinner.

    Attributes:
        _proposals: Proposals by id, in insertion order.
        _votes: Votes keyed by (proposal_id, voter_id).
        _comments: Comments per proposal id, in creation order.
    """

    def __init__(self) -> None:
        self._proposals: dict[UUID, Proposal] = {}
        self._votes: dict[VoteKey, Vote] = {}
        self._comments: dict[UUID, list[Comment]] = {}

    @classmethod
    def from_records(
        cls,
        proposals: list[Proposal],
        votes: list[Vote],
        comments: list[Comment],
    ) -> VotingLedger:
        """Rebuild a ledger from persisted records.

        Records attached to unknown proposals are dropped. If two votes share
        a key the later one wins.
        """
        ledger = cls()
        for proposal in proposals:
            ledger._proposals[proposal.id] = proposal
            ledger._comments[proposal.id] = []
        for vote in votes:
            if vote.proposal_id in ledger._proposals:
                ledger._votes[vote.key] = vote
        for comment in sorted(comments, key=lambda c: c.created_at):
            if comment.proposal_id in ledger._proposals:
                ledger._comments[comment.proposal_id].append(comment)
        return ledger

    # =========================================================================
    # Proposals
    # =========================================================================

    @property
    def proposals(self) -> list[Proposal]:
        """All proposals in insertion order."""
        return list(self._proposals.values())

    def get_proposal(self, proposal_id: UUID) -> Proposal:
        """Return a proposal by id.

        Raises:
            ProposalNotFoundError: If the proposal is not in the ledger.
        """
        proposal = self._proposals.get(proposal_id)
        if proposal is None:
            raise ProposalNotFoundError(proposal_id)
        return proposal

    def add_proposal(self, proposal: Proposal) -> Proposal:
        """Add a proposal to the ledger.

        Raises:
            ValueError: If a proposal with the same id already exists.
        """
        if proposal.id in self._proposals:
            raise ValueError(f"Proposal already exists: {proposal.id}")
        self._proposals[proposal.id] = proposal
        self._comments[proposal.id] = []
        return proposal

    def remove_proposal(self, proposal_id: UUID) -> Proposal:
        """Remove a proposal together with its votes and comments.

        Raises:
            ProposalNotFoundError: If the proposal is not in the ledger.
        """
        proposal = self.get_proposal(proposal_id)
        del self._proposals[proposal_id]
        self._comments.pop(proposal_id, None)
        for key in [k for k in self._votes if k[0] == proposal_id]:
            del self._votes[key]
        return proposal

    def set_proposal_status(
        self,
        proposal_id: UUID,
        status: ProposalStatus,
        at: datetime | None = None,
    ) -> Proposal:
        """Record the editorial decision on a proposal.

        Votes and comments are kept whatever the decision.
        """
        proposal = self.get_proposal(proposal_id)
        proposal.status = status
        proposal.updated_at = at or _utc_now()
        return proposal

    # =========================================================================
    # Votes
    # =========================================================================

    def cast_vote(
        self,
        proposal_id: UUID,
        voter_id: str,
        voter_name: str,
        is_upvote: bool,
        at: datetime | None = None,
    ) -> VoteOutcome:
        """Apply toggle-to-retract vote semantics.

        - No existing vote: a new vote is created.
        - Existing vote of opposite polarity: flipped in place.
        - Existing vote of the same polarity: removed.

        Args:
            proposal_id: The proposal being voted on.
            voter_id: Identity of the voter.
            voter_name: Display name of the voter.
            is_upvote: Polarity of the tap.
            at: Timestamp for the change (defaults to now).

        Returns:
            What happened to the voter's vote.

        Raises:
            ProposalNotFoundError: If the proposal is not in the ledger.
        """
        self.get_proposal(proposal_id)
        now = at or _utc_now()
        key: VoteKey = (proposal_id, voter_id)
        existing = self._votes.get(key)

        if existing is None:
            self._votes[key] = Vote(
                proposal_id=proposal_id,
                voter_id=voter_id,
                voter_name=voter_name,
                is_upvote=is_upvote,
                created_at=now,
                updated_at=now,
            )
            return VoteOutcome.CREATED

        if existing.is_upvote == is_upvote:
            del self._votes[key]
            return VoteOutcome.RETRACTED

        self._votes[key] = existing.with_polarity(is_upvote, now)
        return VoteOutcome.FLIPPED

    def votes_for(self, proposal_id: UUID) -> list[Vote]:
        return [v for k, v in self._votes.items() if k[0] == proposal_id]

    def user_vote(self, proposal_id: UUID, voter_id: str) -> Vote | None:
        """Return the voter's current vote on a proposal, if any."""
        return self._votes.get((proposal_id, voter_id))

    def has_voted(self, proposal_id: UUID, voter_id: str) -> bool:
        return (proposal_id, voter_id) in self._votes

    def upvote_count(self, proposal_id: UUID) -> int:
        return sum(1 for v in self.votes_for(proposal_id) if v.is_upvote)

    def downvote_count(self, proposal_id: UUID) -> int:
        return sum(1 for v in self.votes_for(proposal_id) if not v.is_upvote)

    def score(self, proposal_id: UUID) -> int:
        """Upvotes minus downvotes, recomputed on every call."""
        return self.upvote_count(proposal_id) - self.downvote_count(proposal_id)

    @property
    def all_votes(self) -> list[Vote]:
        return list(self._votes.values())

    # =========================================================================
    # Comments
    # =========================================================================

    def add_comment(
        self,
        proposal_id: UUID,
        author_id: str,
        author_name: str,
        text: str,
        at: datetime | None = None,
        max_length: int | None = None,
    ) -> Comment:
        """Append a comment to a proposal.

        Args:
            proposal_id: The proposal commented on.
            author_id: Identity of the author.
            author_name: Display name of the author.
            text: Raw comment text; stored trimmed.
            at: Creation timestamp (defaults to now).
            max_length: Optional upper bound on the trimmed length.

        Returns:
            The stored comment.

        Raises:
            ProposalNotFoundError: If the proposal is not in the ledger.
            ValidationError: If the trimmed text is empty or too long.
        """
        self.get_proposal(proposal_id)
        trimmed = text.strip()
        if not trimmed:
            raise ValidationError("comment text", "must not be empty")
        if max_length is not None and len(trimmed) > max_length:
            raise ValidationError(
                "comment text", f"exceeds maximum length of {max_length} characters"
            )

        comment = Comment(
            proposal_id=proposal_id,
            author_id=author_id,
            author_name=author_name,
            text=trimmed,
            created_at=at or _utc_now(),
        )
        self._comments[proposal_id].append(comment)
        return comment

    def comments_for(self, proposal_id: UUID) -> list[Comment]:
        """Comments on a proposal, newest first."""
        return sorted(
            self._comments.get(proposal_id, []),
            key=lambda c: c.created_at,
            reverse=True,
        )

    def comment_count(self, proposal_id: UUID) -> int:
        return len(self._comments.get(proposal_id, []))

    @property
    def all_comments(self) -> list[Comment]:
        return [c for comments in self._comments.values() for c in comments]

    # =========================================================================
    # Ranking
    # =========================================================================

    def ranked_proposals(self, course: CourseType | None = None) -> list[Proposal]:
        """Proposals sorted by descending score.

        ``sorted`` is stable, so equal scores keep insertion order.

        Args:
            course: Restrict to one course (optional).
        """
        candidates = [
            p for p in self._proposals.values() if course is None or p.course is course
        ]
        return sorted(candidates, key=lambda p: self.score(p.id), reverse=True)

    def winning_proposal(self, course: CourseType) -> Proposal | None:
        """The highest-scoring proposal for a course, if any."""
        ranked = self.ranked_proposals(course)
        return ranked[0] if ranked else None

    def summary(self) -> CollaborationSummary:
        by_course: dict[CourseType, list[Proposal]] = {}
        for proposal in self.ranked_proposals():
            by_course.setdefault(proposal.course, []).append(proposal)
        statuses = [p.status for p in self._proposals.values()]
        return CollaborationSummary(
            total_proposals=len(self._proposals),
            pending_proposals=statuses.count(ProposalStatus.PENDING),
            accepted_proposals=statuses.count(ProposalStatus.ACCEPTED),
            total_votes=len(self._votes),
            total_comments=len(self.all_comments),
            proposals_by_course=by_course,
        )
