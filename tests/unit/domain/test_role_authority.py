"""Unit tests for the role to capability mapping."""

from __future__ import annotations

import pytest

from convivio.domain.models.participant import (
    READ_ONLY_CAPABILITIES,
    ParticipantRole,
    RoleCapabilities,
)
from convivio.domain.services.role_authority import capabilities_for


def test_owner_has_every_capability() -> None:
    assert capabilities_for(ParticipantRole.OWNER) == RoleCapabilities(
        can_propose=True,
        can_vote=True,
        can_comment=True,
        can_change_collaboration_state=True,
    )


def test_member_cannot_change_collaboration_state() -> None:
    caps = capabilities_for(ParticipantRole.MEMBER)
    assert caps.can_propose and caps.can_vote and caps.can_comment
    assert not caps.can_change_collaboration_state


def test_guest_votes_and_comments_only() -> None:
    caps = capabilities_for(ParticipantRole.GUEST)
    assert not caps.can_propose
    assert caps.can_vote and caps.can_comment
    assert not caps.can_change_collaboration_state


def test_accepts_raw_role_value() -> None:
    assert capabilities_for("member") == capabilities_for(ParticipantRole.MEMBER)


@pytest.mark.parametrize("role", [None, "", "admin", "OWNER"])
def test_unknown_role_is_read_only(role: str | None) -> None:
    assert capabilities_for(role) == READ_ONLY_CAPABILITIES


def test_allows_looks_up_by_action_name() -> None:
    caps = capabilities_for(ParticipantRole.GUEST)
    assert caps.allows("vote")
    assert not caps.allows("propose")
    assert not caps.allows("delete")
