"""Collaboration service: proposals, votes and comments on a shared dinner.

Every operation runs the same pipeline:
1. Role guard: the participant's role must grant the capability
   (ParticipantNotAllowedError otherwise).
2. Lifecycle gate: the dinner must be shared, still PLANNING, and its
   collaboration state must allow the action.
3. Ledger change.
4. Save the dinner.
5. Publish a collaboration event. Publishing failures are logged and
   never undo the saved change.

Steps 1 and 2 raise before anything changes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn
from uuid import UUID

from structlog import get_logger

from convivio.config.collaboration_config import (
    DEFAULT_COLLABORATION_CONFIG,
    CollaborationConfig,
)
from convivio.domain.errors.collaboration import ParticipantNotAllowedError
from convivio.domain.errors.persistence import DinnerNotFoundError
from convivio.domain.errors.validation import ValidationError
from convivio.domain.events.collaboration import (
    CollaborationEvent,
    CollaborationStateChangedEvent,
    CommentAddedEvent,
    ProposalSubmittedEvent,
    VoteCastEvent,
)
from convivio.domain.models.dinner_event import DinnerEvent
from convivio.domain.models.dinner_status import CollaborationState
from convivio.domain.models.participant import ParticipantRole
from convivio.domain.models.proposal import (
    Comment,
    CourseType,
    Proposal,
    ProposalStatus,
    VoteOutcome,
)
from convivio.domain.models.voting_ledger import CollaborationSummary
from convivio.domain.services.dinner_lifecycle import DinnerLifecycle
from convivio.domain.services.role_authority import capabilities_for

if TYPE_CHECKING:
    from convivio.application.ports.collaboration_event_publisher import (
        CollaborationEventPublisherProtocol,
    )
    from convivio.application.ports.dinner_repository import DinnerRepositoryProtocol
    from convivio.application.ports.time_authority import TimeAuthorityProtocol

logger = get_logger(__name__)

Role = ParticipantRole | str | None


def _as_role(role: Role) -> ParticipantRole | None:
    if isinstance(role, ParticipantRole) or role is None:
        return role
    try:
        return ParticipantRole(role)
    except ValueError:
        return None


class CollaborationService:
    """Application service for collaborative menu building.

    Example:
        >>> service = CollaborationService(repository, time_authority)
        >>> proposal = await service.submit_proposal(
        ...     dinner_id, "user-1", "Anna", ParticipantRole.MEMBER,
        ...     CourseType.FIRST_COURSE, "Risotto alla milanese",
        ... )
        >>> await service.cast_vote(
        ...     dinner_id, proposal.id, "user-2", "Bruno", "guest", True
        ... )
    """

    def __init__(
        self,
        repository: DinnerRepositoryProtocol,
        time_authority: TimeAuthorityProtocol,
        publisher: CollaborationEventPublisherProtocol | None = None,
        config: CollaborationConfig | None = None,
        lifecycle: DinnerLifecycle | None = None,
    ) -> None:
        """Initialize the collaboration service.

        Args:
            repository: Dinner aggregate storage.
            time_authority: Source of vote and comment timestamps.
            publisher: Collaboration event publisher (optional).
            config: Input limits (defaults apply when omitted).
            lifecycle: Dinner state machine (a fresh one when omitted).
        """
        self._repository = repository
        self._time = time_authority
        self._publisher = publisher
        self._config = config or DEFAULT_COLLABORATION_CONFIG
        self._lifecycle = lifecycle or DinnerLifecycle()

    async def submit_proposal(
        self,
        dinner_id: UUID,
        participant_id: str,
        participant_name: str,
        role: Role,
        course: CourseType,
        dish_name: str,
        dish_description: str | None = None,
        wine_suggestion: str | None = None,
    ) -> Proposal:
        """Propose a dish for a course.

        Raises:
            ParticipantNotAllowedError: If the role cannot propose.
            CollaborationNotEnabledError: If the dinner is not shared.
            LifecycleViolationError: If proposals are closed.
            ValidationError: If the dish name is blank or too long.
        """
        self._guard(participant_id, role, "propose")
        event = await self._load(dinner_id)
        self._lifecycle.ensure_collaboration_allows(event, "propose")

        name = dish_name.strip()
        if not name:
            raise ValidationError("dish name", "must not be empty")
        if len(name) > self._config.max_dish_name_length:
            raise ValidationError(
                "dish name",
                f"exceeds maximum length of {self._config.max_dish_name_length} "
                "characters",
            )

        now = self._time.now()
        proposal = event.ledger.add_proposal(
            Proposal(
                dinner_id=event.id,
                course=course,
                dish_name=name,
                dish_description=dish_description,
                proposed_by_id=participant_id,
                proposed_by_name=participant_name,
                wine_suggestion=wine_suggestion,
                created_at=now,
                updated_at=now,
            )
        )
        event.touch(now)
        await self._repository.save(event)
        logger.info(
            "proposal_submitted",
            dinner_id=str(event.id),
            proposal_id=str(proposal.id),
            course=course.value,
        )
        await self._publish(
            ProposalSubmittedEvent(
                dinner_id=event.id,
                proposal_id=proposal.id,
                course=course.value,
                dish_name=name,
                proposed_by_id=participant_id,
                proposed_by_name=participant_name,
                occurred_at=now,
            )
        )
        return proposal

    async def cast_vote(
        self,
        dinner_id: UUID,
        proposal_id: UUID,
        voter_id: str,
        voter_name: str,
        role: Role,
        is_upvote: bool,
    ) -> VoteOutcome:
        """Vote on a proposal, toggling to retract a repeated vote.

        Raises:
            ParticipantNotAllowedError: If the role cannot vote.
            CollaborationNotEnabledError: If the dinner is not shared.
            LifecycleViolationError: If voting is closed.
            ProposalNotFoundError: If the proposal is unknown.
        """
        self._guard(voter_id, role, "vote")
        event = await self._load(dinner_id)
        self._lifecycle.ensure_collaboration_allows(event, "vote")

        now = self._time.now()
        outcome = event.ledger.cast_vote(
            proposal_id, voter_id, voter_name, is_upvote, now
        )
        event.touch(now)
        await self._repository.save(event)
        score = event.ledger.score(proposal_id)
        logger.info(
            "vote_cast",
            dinner_id=str(event.id),
            proposal_id=str(proposal_id),
            outcome=outcome.value,
            score=score,
        )
        await self._publish(
            VoteCastEvent(
                dinner_id=event.id,
                proposal_id=proposal_id,
                voter_id=voter_id,
                voter_name=voter_name,
                is_upvote=is_upvote,
                outcome=outcome.value,
                score=score,
                occurred_at=now,
            )
        )
        return outcome

    async def add_comment(
        self,
        dinner_id: UUID,
        proposal_id: UUID,
        author_id: str,
        author_name: str,
        role: Role,
        text: str,
    ) -> Comment:
        """Comment on a proposal.

        Raises:
            ParticipantNotAllowedError: If the role cannot comment.
            CollaborationNotEnabledError: If the dinner is not shared.
            LifecycleViolationError: If comments are closed.
            ProposalNotFoundError: If the proposal is unknown.
            ValidationError: If the trimmed text is empty or too long.
        """
        self._guard(author_id, role, "comment")
        event = await self._load(dinner_id)
        self._lifecycle.ensure_collaboration_allows(event, "comment")

        now = self._time.now()
        comment = event.ledger.add_comment(
            proposal_id,
            author_id,
            author_name,
            text,
            at=now,
            max_length=self._config.max_comment_length,
        )
        event.touch(now)
        await self._repository.save(event)
        logger.info(
            "comment_added",
            dinner_id=str(event.id),
            proposal_id=str(proposal_id),
            comment_id=str(comment.id),
        )
        await self._publish(
            CommentAddedEvent(
                dinner_id=event.id,
                proposal_id=proposal_id,
                comment_id=comment.id,
                author_id=author_id,
                author_name=author_name,
                text=comment.text,
                occurred_at=now,
            )
        )
        return comment

    async def change_collaboration_state(
        self,
        dinner_id: UUID,
        participant_id: str,
        role: Role,
        target: CollaborationState,
    ) -> CollaborationState:
        """Move the dinner's collaboration state.

        Returns:
            The previous collaboration state.

        Raises:
            ParticipantNotAllowedError: Unless the role is the owner's.
            CollaborationNotEnabledError: If the dinner is not shared.
            LifecycleViolationError: For a move outside the transition matrix.
        """
        self._guard(participant_id, role, "change_collaboration_state")
        event = await self._load(dinner_id)
        now = self._time.now()
        previous = self._lifecycle.change_collaboration_state(event, target, now)
        await self._repository.save(event)
        await self._publish(
            CollaborationStateChangedEvent(
                dinner_id=event.id,
                from_state=previous.value,
                to_state=target.value,
                changed_by_id=participant_id,
                occurred_at=now,
            )
        )
        return previous

    async def set_proposal_status(
        self,
        dinner_id: UUID,
        proposal_id: UUID,
        participant_id: str,
        role: Role,
        status: ProposalStatus,
    ) -> Proposal:
        """Accept or reject a proposal; its votes and comments are kept.

        Raises:
            ParticipantNotAllowedError: Unless the role is the owner's.
            CollaborationNotEnabledError: If the dinner is not shared.
            LifecycleViolationError: If the dinner has left PLANNING.
            ProposalNotFoundError: If the proposal is unknown.
        """
        self._guard(participant_id, role, "change_collaboration_state")
        event = await self._load(dinner_id)
        self._lifecycle.ensure_menu_open(event, "decide proposal")

        now = self._time.now()
        proposal = event.ledger.set_proposal_status(proposal_id, status, now)
        event.touch(now)
        await self._repository.save(event)
        logger.info(
            "proposal_status_set",
            dinner_id=str(event.id),
            proposal_id=str(proposal_id),
            status=status.value,
        )
        return proposal

    async def remove_proposal(
        self,
        dinner_id: UUID,
        proposal_id: UUID,
        participant_id: str,
        role: Role,
    ) -> Proposal:
        """Delete a proposal with its votes and comments.

        The owner may remove any proposal; other participants only their
        own, and only while proposals are open.

        Raises:
            ParticipantNotAllowedError: If the participant may not remove it.
            CollaborationNotEnabledError: If the dinner is not shared.
            LifecycleViolationError: If the dinner has left PLANNING, or
                proposals are closed for a non-owner.
            ProposalNotFoundError: If the proposal is unknown.
        """
        capabilities = capabilities_for(role)
        event = await self._load(dinner_id)
        proposal = event.ledger.get_proposal(proposal_id)
        if capabilities.can_change_collaboration_state:
            self._lifecycle.ensure_menu_open(event, "remove proposal")
        elif proposal.proposed_by_id == participant_id and capabilities.can_propose:
            self._lifecycle.ensure_collaboration_allows(event, "propose")
        else:
            self._reject(participant_id, role, "remove proposal")

        event.ledger.remove_proposal(proposal_id)
        event.touch(self._time.now())
        await self._repository.save(event)
        logger.info(
            "proposal_removed",
            dinner_id=str(event.id),
            proposal_id=str(proposal_id),
        )
        return proposal

    # =========================================================================
    # Read models
    # =========================================================================

    async def ranked_proposals(
        self, dinner_id: UUID, course: CourseType | None = None
    ) -> list[Proposal]:
        event = await self._load(dinner_id)
        return event.ledger.ranked_proposals(course)

    async def summary(self, dinner_id: UUID) -> CollaborationSummary:
        event = await self._load(dinner_id)
        return event.ledger.summary()

    # =========================================================================
    # Internals
    # =========================================================================

    def _guard(self, participant_id: str, role: Role, action: str) -> None:
        if not capabilities_for(role).allows(action):
            self._reject(participant_id, role, action)

    @staticmethod
    def _reject(participant_id: str, role: Role, action: str) -> NoReturn:
        logger.warning(
            "collaboration_action_rejected",
            participant_id=participant_id,
            role=getattr(role, "value", role),
            action=action,
        )
        raise ParticipantNotAllowedError(participant_id, _as_role(role), action)

    async def _load(self, dinner_id: UUID) -> DinnerEvent:
        event = await self._repository.get(dinner_id)
        if event is None:
            raise DinnerNotFoundError(dinner_id)
        return event

    async def _publish(self, event: CollaborationEvent) -> None:
        if self._publisher is None:
            return
        try:
            await self._publisher.publish(event)
        except Exception as exc:
            logger.warning(
                "collaboration_event_publish_failed",
                event_type=type(event).__name__,
                dinner_id=str(event.dinner_id),
                error=str(exc),
            )
