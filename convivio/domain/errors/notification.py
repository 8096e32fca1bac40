"""Reminder scheduling errors.

Permission and scheduling failures are surfaced to the user as actionable
messages rather than silently degrading. Each error carries a
``user_message`` suitable for display next to the scheduling control.
"""

from __future__ import annotations

from convivio.domain.exceptions import ConvivioError


class PermissionDeniedError(ConvivioError):
    """Raised when the notification collaborator refuses permission.

    No reminder of the batch has been requested when this is raised.

    Attributes:
        user_message: Actionable message for the user.
    """

    user_message = (
        "Notifications are disabled. Enable them in Settings to get wine reminders."
    )

    def __init__(self, message: str = "Notification permission was denied") -> None:
        super().__init__(message)


class SchedulingFailureError(ConvivioError):
    """Raised when a reminder request fails for a reason other than permission.

    The scheduling batch is rolled back: tokens issued earlier in the same
    batch have been cancelled again and the dinner is left unchanged.

    Attributes:
        reminder_kind: Kind of reminder whose request failed, if known.
        cause_message: Message of the underlying collaborator failure.
        user_message: Actionable message for the user.
    """

    user_message = "Wine reminders could not be scheduled. Please try again."

    def __init__(
        self,
        reason: str,
        reminder_kind: str | None = None,
    ) -> None:
        """Initialize scheduling failure error.

        Args:
            reason: Description of the underlying failure.
            reminder_kind: The ReminderKind value being requested (optional).
        """
        self.reminder_kind = reminder_kind
        self.cause_message = reason
        kind_str = f" for {reminder_kind} reminder" if reminder_kind else ""
        super().__init__(f"Reminder scheduling failed{kind_str}: {reason}")
