"""Dinner lifecycle and collaboration state enums.

This module defines the two state machines that govern a dinner:

- ``DinnerStatus``: the overall lifecycle of the gathering.
- ``CollaborationState``: the sub-machine gating multi-participant
  proposal, voting and commenting activity on shared dinners.

Both are closed enumerations with an explicit transition matrix. There is
no rule language: the matrices below are the whole set of legal moves.
"""

from __future__ import annotations

from enum import Enum


class DinnerStatus(Enum):
    """State in the dinner lifecycle.

    State Machine:
        PLANNING -> WINES_CONFIRMED (wine pairings locked in)
        WINES_CONFIRMED -> CONFIRMED (menu frozen)
        CONFIRMED -> COMPLETED (bottles unloaded after the dinner)
        PLANNING | WINES_CONFIRMED | CONFIRMED -> CANCELLED

    Terminal States:
        COMPLETED and CANCELLED accept no further transitions.
    """

    PLANNING = "planning"
    WINES_CONFIRMED = "wines_confirmed"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    def is_terminal(self) -> bool:
        """Check if this state is terminal.

        Returns:
            True for COMPLETED and CANCELLED, False otherwise.
        """
        return self in TERMINAL_STATES

    def valid_transitions(self) -> frozenset[DinnerStatus]:
        """Get valid transitions from this state.

        Returns:
            Frozenset of states this state can transition to.
            Empty set for terminal states.
        """
        return STATE_TRANSITION_MATRIX.get(self, frozenset())


TERMINAL_STATES: frozenset[DinnerStatus] = frozenset(
    {
        DinnerStatus.COMPLETED,
        DinnerStatus.CANCELLED,
    }
)

STATE_TRANSITION_MATRIX: dict[DinnerStatus, frozenset[DinnerStatus]] = {
    DinnerStatus.PLANNING: frozenset(
        {
            DinnerStatus.WINES_CONFIRMED,
            DinnerStatus.CANCELLED,
        }
    ),
    DinnerStatus.WINES_CONFIRMED: frozenset(
        {
            DinnerStatus.CONFIRMED,
            DinnerStatus.CANCELLED,
        }
    ),
    DinnerStatus.CONFIRMED: frozenset(
        {
            DinnerStatus.COMPLETED,
            DinnerStatus.CANCELLED,
        }
    ),
    DinnerStatus.COMPLETED: frozenset(),
    DinnerStatus.CANCELLED: frozenset(),
}


class CollaborationState(Enum):
    """State of collaborative menu planning on a shared dinner.

    State Machine:
        OPEN_FOR_PROPOSALS -> VOTING (owner opens the vote)
        OPEN_FOR_PROPOSALS -> LOCKED (owner freezes without a vote)
        VOTING -> OPEN_FOR_PROPOSALS (owner reopens proposals)
        VOTING -> LOCKED (owner freezes the proposal set)

    The machine is only ever advanced manually by a participant whose role
    can change the collaboration state. LOCKED is terminal.
    """

    OPEN_FOR_PROPOSALS = "proposals"
    VOTING = "voting"
    LOCKED = "locked"

    @property
    def allows_proposals(self) -> bool:
        """Whether new dish proposals may be submitted."""
        return self in _ACTIVE_COLLABORATION_STATES

    @property
    def allows_voting(self) -> bool:
        """Whether votes and comments may be recorded."""
        return self in _ACTIVE_COLLABORATION_STATES

    def is_terminal(self) -> bool:
        """Check if the proposal set is frozen."""
        return self is CollaborationState.LOCKED

    def valid_transitions(self) -> frozenset[CollaborationState]:
        """Get valid collaboration transitions from this state."""
        return COLLABORATION_TRANSITION_MATRIX.get(self, frozenset())


_ACTIVE_COLLABORATION_STATES: frozenset[CollaborationState] = frozenset(
    {
        CollaborationState.OPEN_FOR_PROPOSALS,
        CollaborationState.VOTING,
    }
)

COLLABORATION_TRANSITION_MATRIX: dict[
    CollaborationState, frozenset[CollaborationState]
] = {
    CollaborationState.OPEN_FOR_PROPOSALS: frozenset(
        {
            CollaborationState.VOTING,
            CollaborationState.LOCKED,
        }
    ),
    CollaborationState.VOTING: frozenset(
        {
            CollaborationState.OPEN_FOR_PROPOSALS,
            CollaborationState.LOCKED,
        }
    ),
    CollaborationState.LOCKED: frozenset(),
}
