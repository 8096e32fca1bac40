"""Unit tests for the dinner and collaboration state enums."""

from __future__ import annotations

import pytest

from convivio.domain.models.dinner_status import (
    COLLABORATION_TRANSITION_MATRIX,
    STATE_TRANSITION_MATRIX,
    TERMINAL_STATES,
    CollaborationState,
    DinnerStatus,
)


class TestDinnerStatus:
    def test_terminal_states(self) -> None:
        assert TERMINAL_STATES == {DinnerStatus.COMPLETED, DinnerStatus.CANCELLED}
        assert DinnerStatus.COMPLETED.is_terminal()
        assert DinnerStatus.CANCELLED.is_terminal()
        assert not DinnerStatus.PLANNING.is_terminal()

    def test_forward_path(self) -> None:
        assert DinnerStatus.WINES_CONFIRMED in DinnerStatus.PLANNING.valid_transitions()
        assert DinnerStatus.CONFIRMED in DinnerStatus.WINES_CONFIRMED.valid_transitions()
        assert DinnerStatus.COMPLETED in DinnerStatus.CONFIRMED.valid_transitions()

    @pytest.mark.parametrize(
        "status",
        [DinnerStatus.PLANNING, DinnerStatus.WINES_CONFIRMED, DinnerStatus.CONFIRMED],
    )
    def test_every_non_terminal_state_can_cancel(self, status: DinnerStatus) -> None:
        assert DinnerStatus.CANCELLED in status.valid_transitions()

    def test_terminal_states_have_no_exits(self) -> None:
        for status in TERMINAL_STATES:
            assert status.valid_transitions() == frozenset()

    def test_no_skipping_ahead(self) -> None:
        assert DinnerStatus.CONFIRMED not in DinnerStatus.PLANNING.valid_transitions()
        assert DinnerStatus.COMPLETED not in DinnerStatus.PLANNING.valid_transitions()

    def test_matrix_covers_every_state(self) -> None:
        assert set(STATE_TRANSITION_MATRIX) == set(DinnerStatus)


class TestCollaborationState:
    def test_open_and_voting_accept_activity(self) -> None:
        for state in (CollaborationState.OPEN_FOR_PROPOSALS, CollaborationState.VOTING):
            assert state.allows_proposals
            assert state.allows_voting

    def test_locked_freezes_everything(self) -> None:
        locked = CollaborationState.LOCKED
        assert not locked.allows_proposals
        assert not locked.allows_voting
        assert locked.is_terminal()
        assert locked.valid_transitions() == frozenset()

    def test_transitions(self) -> None:
        assert COLLABORATION_TRANSITION_MATRIX[CollaborationState.OPEN_FOR_PROPOSALS] == {
            CollaborationState.VOTING,
            CollaborationState.LOCKED,
        }
        assert CollaborationState.LOCKED in CollaborationState.VOTING.valid_transitions()
