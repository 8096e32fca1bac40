"""Collaboration errors for proposals, votes and comments."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from convivio.domain.exceptions import ConvivioError

if TYPE_CHECKING:
    from convivio.domain.models.participant import ParticipantRole


class ParticipantNotAllowedError(ConvivioError):
    """Raised when a participant's role lacks the capability for an action.

    The capability check is done by the application service before the
    ledger or lifecycle is touched, so nothing has changed.

    Attributes:
        participant_id: Identity of the participant.
        role: The participant's role, None when unknown.
        action: The attempted action (e.g. "propose").
    """

    def __init__(
        self,
        participant_id: str,
        role: ParticipantRole | None,
        action: str,
    ) -> None:
        self.participant_id = participant_id
        self.role = role
        self.action = action
        role_str = role.value if role is not None else "unknown"
        super().__init__(
            f"Participant {participant_id} with role {role_str} may not {action}"
        )


class ProposalNotFoundError(ConvivioError):
    """Raised when a proposal id is not part of the dinner's ledger.

    Attributes:
        proposal_id: The proposal that was not found.
    """

    def __init__(self, proposal_id: UUID) -> None:
        self.proposal_id = proposal_id
        super().__init__(f"Proposal not found: {proposal_id}")
