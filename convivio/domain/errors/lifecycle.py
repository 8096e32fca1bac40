"""Lifecycle errors for the dinner and collaboration state machines.

This module defines the errors raised when an operation is attempted in a
state that does not permit it. A lifecycle violation is always recoverable:
the operation has not applied any effect and the caller re-presents the
current, unchanged state.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from convivio.domain.exceptions import ConvivioError

if TYPE_CHECKING:
    from uuid import UUID


class LifecycleViolationError(ConvivioError):
    """Raised when an illegal state transition or gated action is attempted.

    Examples:
        - ``confirm_dinner()`` while the dinner is still PLANNING
        - ``cancel()`` on a dinner that is already COMPLETED
        - proposing a dish once the collaboration is LOCKED

    Attributes:
        action: The operation that was attempted (e.g. "confirm dinner").
        current_state: The state the machine was in at the time.
        allowed_states: States from which the action would have been legal.
        reason: Optional extra detail (e.g. "no wine pairings").
    """

    def __init__(
        self,
        action: str,
        current_state: Enum,
        allowed_states: list[Enum] | None = None,
        reason: str | None = None,
    ) -> None:
        """Initialize lifecycle violation error.

        Args:
            action: The attempted operation.
            current_state: The state the operation was attempted from.
            allowed_states: States where the operation is permitted (optional).
            reason: Additional explanation (optional).
        """
        self.action = action
        self.current_state = current_state
        self.allowed_states = allowed_states or []
        self.reason = reason

        allowed_str = (
            f" Allowed from: {[s.value for s in self.allowed_states]}."
            if self.allowed_states
            else ""
        )
        reason_str = f" ({reason})" if reason else ""
        super().__init__(
            f"Cannot {action} in state {current_state.value}{reason_str}.{allowed_str}"
        )


class CollaborationNotEnabledError(LifecycleViolationError):
    """Raised when a collaborative action targets a dinner that is not shared.

    Only dinners with a collaboration state accept proposals, votes and
    comments from other participants.
    """

    def __init__(self, dinner_id: UUID, action: str, current_state: Enum) -> None:
        self.dinner_id = dinner_id
        super().__init__(
            action=action,
            current_state=current_state,
            reason=f"dinner {dinner_id} is not shared for collaboration",
        )
