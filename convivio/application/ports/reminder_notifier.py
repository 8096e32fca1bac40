"""Reminder notifier port.

Port interface for the local notification collaborator that delivers the
wine service reminders at their scheduled instants. The core never talks
to the operating system directly.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from convivio.domain.models.service_plan import ReminderPayload


class ReminderNotifierProtocol(Protocol):
    """Protocol for requesting and cancelling timed reminders.

    Methods:
        request_permission: Ask the user for notification permission
        schedule_reminder: Request one reminder, returning its token
        cancel_reminder: Cancel a previously issued token
    """

    async def request_permission(self) -> bool:
        """Ask for permission to deliver reminders.

        Returns:
            True if reminders may be scheduled.
        """
        ...

    async def schedule_reminder(self, at: datetime, payload: ReminderPayload) -> str:
        """Request a reminder at the given instant.

        Args:
            at: Delivery instant (timezone-aware).
            payload: Reminder content.

        Returns:
            Opaque token identifying the reminder.

        Raises:
            Exception: Any failure of the collaborator; the scheduler
                wraps it in SchedulingFailureError.
        """
        ...

    async def cancel_reminder(self, token: str) -> None:
        """Cancel a reminder.

        Cancelling an unknown or already delivered token is not an error.
        """
        ...
