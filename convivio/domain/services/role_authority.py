"""Role authority: maps a participant role to its capability set.

Pure lookup with no side effects and no error conditions. Unknown or
missing roles get the most restrictive (read-only) capability set.

    Role     propose  vote  comment  change collaboration state
    OWNER    yes      yes   yes      yes
    MEMBER   yes      yes   yes      no
    GUEST    no       yes   yes      no
"""

from __future__ import annotations

from typing import Final

from convivio.domain.models.participant import (
    READ_ONLY_CAPABILITIES,
    ParticipantRole,
    RoleCapabilities,
)

ROLE_CAPABILITIES: Final[dict[ParticipantRole, RoleCapabilities]] = {
    ParticipantRole.OWNER: RoleCapabilities(
        can_propose=True,
        can_vote=True,
        can_comment=True,
        can_change_collaboration_state=True,
    ),
    ParticipantRole.MEMBER: RoleCapabilities(
        can_propose=True,
        can_vote=True,
        can_comment=True,
    ),
    ParticipantRole.GUEST: RoleCapabilities(
        can_vote=True,
        can_comment=True,
    ),
}


def capabilities_for(role: ParticipantRole | str | None) -> RoleCapabilities:
    """Return the capability set of a role.

    Args:
        role: A ParticipantRole, its raw string value, or None.

    Returns:
        The role's capabilities; read-only for anything unrecognised.
    """
    if isinstance(role, str):
        try:
            role = ParticipantRole(role)
        except ValueError:
            return READ_ONLY_CAPABILITIES
    if role is None:
        return READ_ONLY_CAPABILITIES
    return ROLE_CAPABILITIES.get(role, READ_ONLY_CAPABILITIES)
