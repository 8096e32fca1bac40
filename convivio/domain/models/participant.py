"""Participant roles and their capability sets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ParticipantRole(Enum):
    """Membership role of a participant in a shared cellar.

    Roles:
        OWNER: Full control over the cellar and its dinners
        MEMBER: Can add and edit wines and dinners, and propose dishes
        GUEST: Can only view, vote and comment on menus
    """

    OWNER = "owner"
    MEMBER = "member"
    GUEST = "guest"


@dataclass(frozen=True)
class RoleCapabilities:
    """The collaborative actions a participant may take.

    Attributes:
        can_propose: May submit dish proposals.
        can_vote: May up/down-vote proposals.
        can_comment: May comment on proposals.
        can_change_collaboration_state: May advance the collaboration
            sub-machine and decide proposal status.
    """

    can_propose: bool = False
    can_vote: bool = False
    can_comment: bool = False
    can_change_collaboration_state: bool = False

    def allows(self, action: str) -> bool:
        """Look up a capability by its action name.

        Args:
            action: One of "propose", "vote", "comment",
                "change_collaboration_state".

        Returns:
            The capability flag, False for unknown actions.
        """
        return bool(getattr(self, f"can_{action}", False))


# Most restrictive capability set, used for unknown roles.
READ_ONLY_CAPABILITIES = RoleCapabilities()
