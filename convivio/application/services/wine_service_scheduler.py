"""Wine service scheduler.

Turns a dinner's confirmed wines and serving time into timed reminders
through the notification collaborator, and cancels them again.

A scheduling batch is all-or-nothing:
1. The dinner must be WINES_CONFIRMED or CONFIRMED.
2. The cooling schedule is computed (``plan_wine_service``).
3. Permission is requested; a refusal raises PermissionDeniedError before
   any reminder is requested.
4. One reminder per put-in instant, one per take-out instant, and one
   post-event reminder are requested. Instants already past are skipped
   when configured so.
5. If any request fails, the tokens already issued in this batch are
   cancelled and SchedulingFailureError is raised; the dinner is
   unchanged.
6. Only then are the tokens stored on the dinner. Reminders of a previous
   batch stay pending; they are returned as ``superseded_tokens`` and the
   caller releases them once the dinner has been saved.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from structlog import get_logger

from convivio.application.ports.reminder_notifier import ReminderNotifierProtocol
from convivio.application.ports.time_authority import TimeAuthorityProtocol
from convivio.config.wine_service_config import (
    DEFAULT_WINE_SERVICE_CONFIG,
    WineServiceConfig,
)
from convivio.domain.errors.lifecycle import LifecycleViolationError
from convivio.domain.errors.notification import (
    PermissionDeniedError,
    SchedulingFailureError,
)
from convivio.domain.models.dinner_event import DinnerEvent
from convivio.domain.models.dinner_status import DinnerStatus
from convivio.domain.models.service_plan import (
    ReminderPayload,
    ServicePlan,
    SkippedReminder,
)
from convivio.domain.services.wine_service_plan import (
    plan_wine_service,
    post_event_payload,
    post_event_time,
    put_in_cooling_payload,
    remove_from_cooling_payload,
)

logger = get_logger(__name__)

SCHEDULABLE_STATES = (DinnerStatus.WINES_CONFIRMED, DinnerStatus.CONFIRMED)


@dataclass
class _Batch:
    """Tokens issued so far in one scheduling batch."""

    cool_down: dict[UUID, str]
    remove: dict[UUID, str]
    post_event: str | None
    skipped: list[SkippedReminder]

    @property
    def tokens(self) -> list[str]:
        issued = [*self.cool_down.values(), *self.remove.values()]
        if self.post_event is not None:
            issued.append(self.post_event)
        return issued


class WineServiceScheduler:
    """Schedules and cancels a dinner's wine service reminders.

    Example:
        >>> scheduler = WineServiceScheduler(notifier, time_authority)
        >>> plan = await scheduler.schedule(dinner)
        >>> await scheduler.cancel_schedule(dinner)
    """

    def __init__(
        self,
        notifier: ReminderNotifierProtocol,
        time_authority: TimeAuthorityProtocol,
        config: WineServiceConfig | None = None,
    ) -> None:
        """Initialize the scheduler.

        Args:
            notifier: Notification collaborator issuing reminder tokens.
            time_authority: Source of the current time.
            config: Scheduling configuration (defaults apply when omitted).
        """
        self._notifier = notifier
        self._time = time_authority
        self._config = config or DEFAULT_WINE_SERVICE_CONFIG

    async def schedule(self, event: DinnerEvent) -> ServicePlan:
        """Request every reminder of the dinner's wine service.

        Args:
            event: The dinner; mutated only when the whole batch succeeds.

        Returns:
            The computed plan with the tokens issued, the reminders skipped
            because their instant had passed, and the previous batch's
            tokens, which are not cancelled here.

        Raises:
            LifecycleViolationError: If the dinner is not WINES_CONFIRMED
                or CONFIRMED.
            ValidationError: If a wine or the serving time is invalid.
            PermissionDeniedError: If notification permission is refused.
            SchedulingFailureError: If a reminder request fails.
        """
        log = logger.bind(dinner_id=str(event.id), status=event.status.value)

        if event.status not in SCHEDULABLE_STATES:
            log.warning("wine_service_schedule_rejected", reason="invalid_state")
            raise LifecycleViolationError(
                action="schedule wine service",
                current_state=event.status,
                allowed_states=list(SCHEDULABLE_STATES),
            )

        entries = plan_wine_service(event.wanted_wines, event.date)
        post_event_at = post_event_time(event.date, self._config.post_event_offset)

        if not await self._notifier.request_permission():
            log.warning("wine_service_permission_denied")
            raise PermissionDeniedError()

        now = self._time.now()
        batch = _Batch(cool_down={}, remove={}, post_event=None, skipped=[])
        try:
            for entry in entries:
                wine = entry.wine
                token = await self._request(
                    batch,
                    now,
                    entry.put_in_time,
                    put_in_cooling_payload(wine, event.id, event.title),
                )
                if token is not None:
                    batch.cool_down[wine.id] = token
                if entry.take_out_time is not None:
                    token = await self._request(
                        batch,
                        now,
                        entry.take_out_time,
                        remove_from_cooling_payload(wine, event.id),
                    )
                    if token is not None:
                        batch.remove[wine.id] = token
            batch.post_event = await self._request(
                batch, now, post_event_at, post_event_payload(event.id, event.title)
            )
        except SchedulingFailureError:
            await self.release(batch.tokens, event.id)
            log.warning("wine_service_batch_rolled_back", cancelled=len(batch.tokens))
            raise

        previous = self._issued_tokens(event)
        self._apply(event, batch, now)

        plan = ServicePlan(
            entries=tuple(entries),
            post_event_at=post_event_at,
            tokens=tuple(batch.tokens),
            skipped=tuple(batch.skipped),
            superseded_tokens=tuple(previous),
        )
        log.info(
            "wine_service_scheduled",
            entries=len(plan.entries),
            tokens_issued=plan.tokens_issued,
            skipped=len(plan.skipped),
            replaced=len(previous),
        )
        return plan

    def detach(self, event: DinnerEvent) -> list[str]:
        """Clear the dinner's reminder tokens without cancelling them.

        The returned tokens are still pending; pass them to ``release``
        once the dinner has been saved.
        """
        tokens = self._issued_tokens(event)
        if not tokens and not event.notifications_scheduled:
            return []
        for wine in event.confirmed_wines:
            wine.clear_tokens()
        event.post_event_token = None
        event.notifications_scheduled = False
        event.touch(self._time.now())
        return tokens

    async def release(self, tokens: Iterable[str], dinner_id: UUID) -> int:
        """Cancel reminder tokens.

        Errors from the notifier are logged and do not stop the loop.

        Returns:
            Number of tokens handed to the notifier.
        """
        count = 0
        for token in tokens:
            count += 1
            try:
                await self._notifier.cancel_reminder(token)
            except Exception as exc:
                logger.warning(
                    "reminder_cancel_failed",
                    dinner_id=str(dinner_id),
                    token=token,
                    error=str(exc),
                )
        return count

    async def cancel_schedule(self, event: DinnerEvent) -> int:
        """Cancel every reminder of the dinner and clear its tokens.

        Idempotent: a dinner without reminders is left as it is.

        Returns:
            Number of tokens that were cancelled.
        """
        tokens = self.detach(event)
        if not tokens:
            return 0
        await self.release(tokens, event.id)
        logger.info(
            "wine_service_cancelled",
            dinner_id=str(event.id),
            tokens_cancelled=len(tokens),
        )
        return len(tokens)

    # =========================================================================
    # Internals
    # =========================================================================

    async def _request(
        self,
        batch: _Batch,
        now: datetime,
        at: datetime,
        payload: ReminderPayload,
    ) -> str | None:
        if self._config.skip_past_reminders and at <= now:
            batch.skipped.append(
                SkippedReminder(kind=payload.kind, at=at, wine_id=payload.wine_id)
            )
            return None
        try:
            return await self._notifier.schedule_reminder(at, payload)
        except Exception as exc:
            raise SchedulingFailureError(str(exc), payload.kind.value) from exc

    def _apply(self, event: DinnerEvent, batch: _Batch, now: datetime) -> None:
        for wine in event.confirmed_wines:
            wine.cool_down_token = batch.cool_down.get(wine.id)
            wine.remove_token = batch.remove.get(wine.id)
        event.post_event_token = batch.post_event
        event.notifications_scheduled = bool(batch.tokens)
        event.touch(now)

    @staticmethod
    def _issued_tokens(event: DinnerEvent) -> list[str]:
        tokens: list[str] = []
        for wine in event.confirmed_wines:
            if wine.cool_down_token is not None:
                tokens.append(wine.cool_down_token)
            if wine.remove_token is not None:
                tokens.append(wine.remove_token)
        if event.post_event_token is not None:
            tokens.append(event.post_event_token)
        return tokens
