"""Unit tests for domain error messages and attributes."""

from __future__ import annotations

from uuid import uuid4

import pytest

from convivio.domain.errors import (
    CollaborationNotEnabledError,
    DinnerNotFoundError,
    LifecycleViolationError,
    ParticipantNotAllowedError,
    PermissionDeniedError,
    PersistenceError,
    ProposalNotFoundError,
    SchedulingFailureError,
    ValidationError,
)
from convivio.domain.exceptions import ConvivioError
from convivio.domain.models.dinner_status import CollaborationState, DinnerStatus
from convivio.domain.models.participant import ParticipantRole


def test_lifecycle_violation_message() -> None:
    error = LifecycleViolationError(
        action="confirm dinner",
        current_state=DinnerStatus.PLANNING,
        allowed_states=[DinnerStatus.WINES_CONFIRMED],
    )

    assert str(error) == (
        "Cannot confirm dinner in state planning. "
        "Allowed from: ['wines_confirmed']."
    )
    assert error.reason is None


def test_lifecycle_violation_with_reason() -> None:
    error = LifecycleViolationError(
        "propose", CollaborationState.LOCKED, reason="menu is frozen"
    )
    assert str(error) == "Cannot propose in state locked (menu is frozen)."


def test_collaboration_not_enabled_is_a_lifecycle_violation() -> None:
    dinner_id = uuid4()
    error = CollaborationNotEnabledError(dinner_id, "vote", DinnerStatus.PLANNING)

    assert isinstance(error, LifecycleViolationError)
    assert error.dinner_id == dinner_id
    assert "not shared" in str(error)


def test_participant_not_allowed_with_unknown_role() -> None:
    error = ParticipantNotAllowedError("u-9", None, "propose")
    assert str(error) == "Participant u-9 with role unknown may not propose"

    guest = ParticipantNotAllowedError("u-8", ParticipantRole.GUEST, "propose")
    assert guest.role is ParticipantRole.GUEST


def test_scheduling_failure_keeps_cause() -> None:
    error = SchedulingFailureError("quota exceeded", "put_in_cooling")

    assert error.cause_message == "quota exceeded"
    assert str(error) == (
        "Reminder scheduling failed for put_in_cooling reminder: quota exceeded"
    )
    assert error.user_message
    assert PermissionDeniedError().user_message


@pytest.mark.parametrize(
    "error",
    [
        DinnerNotFoundError(uuid4()),
        PersistenceError(uuid4(), "disk full"),
        ProposalNotFoundError(uuid4()),
        ValidationError("title", "must not be empty"),
        PermissionDeniedError(),
    ],
)
def test_every_error_is_a_convivio_error(error: Exception) -> None:
    assert isinstance(error, ConvivioError)
