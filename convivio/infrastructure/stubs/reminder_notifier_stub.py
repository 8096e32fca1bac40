"""Reminder notifier stub implementation.

In-memory implementation of ReminderNotifierProtocol for development and
testing. It records every requested and cancelled reminder and can be told
to refuse permission or to fail on a given request.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from itertools import count

from structlog import get_logger

from convivio.application.ports.reminder_notifier import ReminderNotifierProtocol
from convivio.domain.models.service_plan import ReminderPayload

logger = get_logger()


class ReminderDeliveryError(Exception):
    """Simulated failure of the notification collaborator."""


@dataclass(frozen=True)
class ScheduledReminder:
    """Record of a requested reminder (for stub tracking)."""

    token: str
    at: datetime
    payload: ReminderPayload


class ReminderNotifierStub(ReminderNotifierProtocol):
    """In-memory reminder notifier.

    Attributes:
        permission_granted: Answer returned by request_permission.
        fail_on_request: 1-based index of the schedule_reminder call that
            raises ReminderDeliveryError, None to never fail.
        fail_on_cancel: When True, cancel_reminder raises.
        pending: Reminders requested and not cancelled, by token.
        cancelled: Tokens cancelled, in order.
        permission_requests: Number of permission prompts.
    """

    def __init__(
        self,
        *,
        permission_granted: bool = True,
        fail_on_request: int | None = None,
        fail_on_cancel: bool = False,
    ) -> None:
        self.permission_granted = permission_granted
        self.fail_on_request = fail_on_request
        self.fail_on_cancel = fail_on_cancel
        self.pending: dict[str, ScheduledReminder] = {}
        self.cancelled: list[str] = []
        self.permission_requests = 0
        self._request_count = 0
        self._tokens = count(1)

    async def request_permission(self) -> bool:
        self.permission_requests += 1
        return self.permission_granted

    async def schedule_reminder(self, at: datetime, payload: ReminderPayload) -> str:
        self._request_count += 1
        if self.fail_on_request == self._request_count:
            logger.info(
                "reminder_notifier_stub.schedule.failed",
                kind=payload.kind.value,
                request=self._request_count,
            )
            raise ReminderDeliveryError(
                f"simulated failure on request {self._request_count}"
            )
        token = f"reminder-{next(self._tokens)}"
        self.pending[token] = ScheduledReminder(token=token, at=at, payload=payload)
        return token

    async def cancel_reminder(self, token: str) -> None:
        if self.fail_on_cancel:
            raise ReminderDeliveryError(f"simulated failure cancelling {token}")
        self.pending.pop(token, None)
        self.cancelled.append(token)

    @property
    def request_count(self) -> int:
        """Number of schedule_reminder calls, failed ones included."""
        return self._request_count

    def reset(self) -> None:
        """Forget every recorded reminder and failure setting."""
        self.permission_granted = True
        self.fail_on_request = None
        self.fail_on_cancel = False
        self.pending.clear()
        self.cancelled.clear()
        self.permission_requests = 0
        self._request_count = 0
