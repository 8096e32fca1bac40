"""Dinner lifecycle domain service.

Applies the guarded transitions of the dinner state machine and of the
collaboration sub-machine to a ``DinnerEvent``. Each operation either
applies its whole effect or raises ``LifecycleViolationError`` and leaves
the dinner untouched.

Transitions:
    confirm_wines    PLANNING -> WINES_CONFIRMED   (needs a wine pairing)
    confirm_dinner   WINES_CONFIRMED -> CONFIRMED  (menu frozen)
    complete_dinner  CONFIRMED -> COMPLETED        (needs a wanted wine)
    cancel           any non-terminal -> CANCELLED

``confirm_wines`` does not compute the wine schedule: the host may still
adjust temperature categories and quantities before scheduling.

Collaborative activity (proposing, voting, commenting) requires a shared
dinner still in PLANNING whose collaboration state is OPEN_FOR_PROPOSALS or
VOTING. Once the dinner leaves PLANNING the menu is frozen for everyone.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import NoReturn

import structlog

from convivio.domain.errors.lifecycle import (
    CollaborationNotEnabledError,
    LifecycleViolationError,
)
from convivio.domain.models.dinner_event import DinnerEvent
from convivio.domain.models.dinner_status import CollaborationState, DinnerStatus

logger = structlog.get_logger(__name__)

_COLLABORATIVE_ACTIONS = ("propose", "vote", "comment")


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


def _states_allowing(target: DinnerStatus) -> list[DinnerStatus]:
    return [s for s in DinnerStatus if target in s.valid_transitions()]


class DinnerLifecycle:
    """Guarded transitions over a dinner's status and collaboration state."""

    def confirm_wines(self, event: DinnerEvent, at: datetime | None = None) -> None:
        """Lock in the wine pairings.

        Raises:
            LifecycleViolationError: If the dinner is not PLANNING or has no
                wine pairings.
        """
        if event.status is DinnerStatus.PLANNING and not event.has_wine_pairings:
            self._reject(
                event, "confirm wines", DinnerStatus.WINES_CONFIRMED, "no wine pairings"
            )
        self._transition(event, DinnerStatus.WINES_CONFIRMED, "confirm wines", at)

    def confirm_dinner(self, event: DinnerEvent, at: datetime | None = None) -> None:
        """Freeze the menu.

        Raises:
            LifecycleViolationError: Unless the dinner is WINES_CONFIRMED.
        """
        self._transition(event, DinnerStatus.CONFIRMED, "confirm dinner", at)

    def complete_dinner(self, event: DinnerEvent, at: datetime | None = None) -> None:
        """Mark the dinner as held, after the bottles have been unloaded.

        Raises:
            LifecycleViolationError: If the dinner is not CONFIRMED or has no
                wanted confirmed wine.
        """
        if event.status is DinnerStatus.CONFIRMED and not event.has_confirmed_wines:
            self._reject(
                event, "complete dinner", DinnerStatus.COMPLETED, "no confirmed wines"
            )
        self._transition(event, DinnerStatus.COMPLETED, "complete dinner", at)

    def cancel(self, event: DinnerEvent, at: datetime | None = None) -> None:
        """Cancel the dinner.

        Raises:
            LifecycleViolationError: If the dinner is already COMPLETED or
                CANCELLED.
        """
        self._transition(event, DinnerStatus.CANCELLED, "cancel dinner", at)

    # =========================================================================
    # Collaboration sub-machine
    # =========================================================================

    def change_collaboration_state(
        self,
        event: DinnerEvent,
        target: CollaborationState,
        at: datetime | None = None,
    ) -> CollaborationState:
        """Move a shared dinner's collaboration state.

        Args:
            event: The shared dinner.
            target: The requested collaboration state.
            at: Timestamp of the change (defaults to now).

        Returns:
            The previous collaboration state.

        Raises:
            CollaborationNotEnabledError: If the dinner is not shared.
            LifecycleViolationError: If the dinner is terminal or the move is
                not in the collaboration transition matrix.
        """
        action = f"move collaboration to {target.value}"
        current = event.collaboration_state
        if current is None:
            raise CollaborationNotEnabledError(event.id, action, event.status)
        if event.status.is_terminal():
            self._reject(event, action, DinnerStatus.PLANNING, "dinner is closed")
        if target not in current.valid_transitions():
            logger.warning(
                "collaboration_transition_rejected",
                dinner_id=str(event.id),
                from_state=current.value,
                to_state=target.value,
            )
            raise LifecycleViolationError(
                action=action,
                current_state=current,
                allowed_states=[
                    s for s in CollaborationState if target in s.valid_transitions()
                ],
            )

        event.collaboration_state = target
        event.touch(at or _utc_now())
        logger.info(
            "collaboration_state_changed",
            dinner_id=str(event.id),
            from_state=current.value,
            to_state=target.value,
        )
        return current

    def ensure_menu_open(self, event: DinnerEvent, action: str) -> CollaborationState:
        """Check that a shared dinner's menu can still change.

        Returns:
            The current collaboration state.

        Raises:
            CollaborationNotEnabledError: If the dinner is not shared.
            LifecycleViolationError: If the dinner has left PLANNING.
        """
        state = event.collaboration_state
        if state is None:
            raise CollaborationNotEnabledError(event.id, action, event.status)
        if event.status is not DinnerStatus.PLANNING:
            raise LifecycleViolationError(
                action=action,
                current_state=event.status,
                allowed_states=[DinnerStatus.PLANNING],
                reason="menu is frozen",
            )
        return state

    def ensure_collaboration_allows(self, event: DinnerEvent, action: str) -> None:
        """Check that a collaborative action is legal right now.

        Args:
            event: The dinner.
            action: One of "propose", "vote", "comment".

        Raises:
            ValueError: For an unknown action name.
            CollaborationNotEnabledError: If the dinner is not shared.
            LifecycleViolationError: If the dinner has left PLANNING or the
                collaboration state does not allow the action.
        """
        if action not in _COLLABORATIVE_ACTIONS:
            raise ValueError(f"Unknown collaborative action: {action}")
        state = self.ensure_menu_open(event, action)
        allowed = state.allows_proposals if action == "propose" else state.allows_voting
        if not allowed:
            raise LifecycleViolationError(
                action=action,
                current_state=state,
                allowed_states=[
                    CollaborationState.OPEN_FOR_PROPOSALS,
                    CollaborationState.VOTING,
                ],
            )

    # =========================================================================
    # Internals
    # =========================================================================

    def _transition(
        self,
        event: DinnerEvent,
        target: DinnerStatus,
        action: str,
        at: datetime | None,
    ) -> None:
        if target not in event.status.valid_transitions():
            self._reject(event, action, target)
        previous = event.status
        event.status = target
        event.touch(at or _utc_now())
        logger.info(
            "dinner_status_changed",
            dinner_id=str(event.id),
            from_state=previous.value,
            to_state=target.value,
        )

    def _reject(
        self,
        event: DinnerEvent,
        action: str,
        target: DinnerStatus,
        reason: str | None = None,
    ) -> NoReturn:
        logger.warning(
            "dinner_transition_rejected",
            dinner_id=str(event.id),
            action=action,
            current_state=event.status.value,
            reason=reason,
        )
        raise LifecycleViolationError(
            action=action,
            current_state=event.status,
            allowed_states=_states_allowing(target),
            reason=reason,
        )
