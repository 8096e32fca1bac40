"""Dinner service: lifecycle orchestration with persistence.

Each operation loads the dinner, applies one guarded change through
``DinnerLifecycle`` or ``WineServiceScheduler`` and saves the result.
A rejected change raises before anything is saved, so the stored dinner
is untouched.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from structlog import get_logger

from convivio.domain.errors.lifecycle import LifecycleViolationError
from convivio.domain.errors.persistence import DinnerNotFoundError, PersistenceError
from convivio.domain.errors.validation import ValidationError
from convivio.domain.models.capabilities import (
    DinnerCapabilities,
    can_edit_confirmed_wines,
    capabilities_for,
)
from convivio.domain.models.dinner_event import DinnerEvent
from convivio.domain.models.dinner_status import CollaborationState, DinnerStatus
from convivio.domain.models.service_plan import ServicePlan
from convivio.domain.models.temperature import TemperatureCategory
from convivio.domain.models.wine import ConfirmedWine, WinePairing, WineSummary
from convivio.domain.services.dinner_lifecycle import DinnerLifecycle
from convivio.domain.services.temperature_suggester import KeywordTemperatureSuggester
from convivio.domain.services.wine_service_plan import (
    format_schedule_summary,
    plan_wine_service,
)

if TYPE_CHECKING:
    from convivio.application.ports.dinner_repository import DinnerRepositoryProtocol
    from convivio.application.ports.temperature_suggester import (
        TemperatureSuggesterProtocol,
    )
    from convivio.application.ports.time_authority import TimeAuthorityProtocol
    from convivio.application.services.wine_service_scheduler import (
        WineServiceScheduler,
    )

logger = get_logger(__name__)


class DinnerService:
    """Application service for a dinner's lifecycle and wine service.

    Example:
        >>> service = DinnerService(repository, scheduler, time_authority)
        >>> dinner = await service.confirm_wines(dinner_id)
        >>> plan = await service.schedule_wine_service(dinner_id)
    """

    def __init__(
        self,
        repository: DinnerRepositoryProtocol,
        scheduler: WineServiceScheduler,
        time_authority: TimeAuthorityProtocol,
        suggester: TemperatureSuggesterProtocol | None = None,
        lifecycle: DinnerLifecycle | None = None,
    ) -> None:
        """Initialize the dinner service.

        Args:
            repository: Dinner aggregate storage.
            scheduler: Wine service reminder scheduler.
            time_authority: Source of the current time.
            suggester: Default temperature category for new confirmed wines
                (keyword heuristic when omitted).
            lifecycle: Dinner state machine (a fresh one when omitted).
        """
        self._repository = repository
        self._scheduler = scheduler
        self._time = time_authority
        self._suggester = suggester or KeywordTemperatureSuggester()
        self._lifecycle = lifecycle or DinnerLifecycle()

    async def create_dinner(
        self,
        title: str,
        date: datetime,
        guest_count: int = 2,
        occasion: str | None = None,
        notes: str | None = None,
        wine_pairings: list[WinePairing] | None = None,
        shared: bool = False,
    ) -> DinnerEvent:
        """Create and store a dinner in PLANNING.

        Args:
            title: Dinner title.
            date: Target serving time (timezone-aware).
            guest_count: Number of guests.
            occasion: Optional occasion.
            notes: Optional notes.
            wine_pairings: Pairings supplied by the menu generator.
            shared: Open the dinner to collaborative proposals.

        Raises:
            ValidationError: If the title is blank, the date is naive or
                the guest count is not positive.
        """
        if not title.strip():
            raise ValidationError("title", "must not be empty")
        now = self._time.now()
        try:
            event = DinnerEvent(
                title=title.strip(),
                date=date,
                guest_count=guest_count,
                occasion=occasion,
                notes=notes,
                wine_pairings=list(wine_pairings or []),
                collaboration_state=(
                    CollaborationState.OPEN_FOR_PROPOSALS if shared else None
                ),
                created_at=now,
                updated_at=now,
            )
        except ValueError as exc:
            raise ValidationError("dinner", str(exc)) from exc
        await self._repository.save(event)
        logger.info("dinner_created", dinner_id=str(event.id), shared=shared)
        return event

    async def get_dinner(self, dinner_id: UUID) -> DinnerEvent:
        """Load a dinner.

        Raises:
            DinnerNotFoundError: If no dinner has this id.
        """
        event = await self._repository.get(dinner_id)
        if event is None:
            raise DinnerNotFoundError(dinner_id)
        return event

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def confirm_wines(self, dinner_id: UUID) -> DinnerEvent:
        """Lock in the wine pairings as confirmed wines.

        Each pairing with a positive quantity becomes a ConfirmedWine whose
        temperature category is pre-filled by the suggester. Does not
        schedule any reminder.

        Raises:
            DinnerNotFoundError: If the dinner does not exist.
            LifecycleViolationError: If the dinner is not PLANNING or has
                no wine pairings.
        """
        event = await self.get_dinner(dinner_id)
        self._lifecycle.confirm_wines(event, self._time.now())
        event.confirmed_wines = [
            ConfirmedWine.from_pairing(p, self._suggester.suggest(p.wine_name))
            for p in event.wine_pairings
            if p.quantity > 0
        ]
        await self._repository.save(event)
        logger.info(
            "wines_confirmed",
            dinner_id=str(event.id),
            wine_count=len(event.confirmed_wines),
        )
        return event

    async def confirm_dinner(self, dinner_id: UUID) -> DinnerEvent:
        event = await self.get_dinner(dinner_id)
        self._lifecycle.confirm_dinner(event, self._time.now())
        await self._repository.save(event)
        return event

    async def complete_dinner(self, dinner_id: UUID) -> DinnerEvent:
        """Mark the dinner as held and drop any reminder still pending."""
        event = await self.get_dinner(dinner_id)
        self._lifecycle.complete_dinner(event, self._time.now())
        await self._save_and_release(event, self._scheduler.detach(event))
        return event

    async def cancel_dinner(self, dinner_id: UUID) -> DinnerEvent:
        """Cancel the dinner together with its wine service reminders.

        Raises:
            LifecycleViolationError: If the dinner is already COMPLETED or
                CANCELLED.
        """
        event = await self.get_dinner(dinner_id)
        self._lifecycle.cancel(event, self._time.now())
        await self._save_and_release(event, self._scheduler.detach(event))
        return event

    # =========================================================================
    # Confirmed wines
    # =========================================================================

    async def update_confirmed_wine(
        self,
        dinner_id: UUID,
        wine_id: UUID,
        temperature_category: TemperatureCategory | None = None,
        quantity: int | None = None,
    ) -> ConfirmedWine:
        """Adjust a confirmed wine before its reminders are scheduled.

        A quantity of 0 keeps the record but excludes the wine from
        scheduling and completion.

        Raises:
            LifecycleViolationError: If the dinner is not WINES_CONFIRMED or
                CONFIRMED, or its reminders are already scheduled.
            ValidationError: If the wine is unknown or the quantity negative.
        """
        event = await self.get_dinner(dinner_id)
        if not can_edit_confirmed_wines(event):
            logger.warning(
                "confirmed_wine_update_rejected",
                dinner_id=str(dinner_id),
                status=event.status.value,
                notifications_scheduled=event.notifications_scheduled,
            )
            raise LifecycleViolationError(
                action="edit confirmed wines",
                current_state=event.status,
                allowed_states=[DinnerStatus.WINES_CONFIRMED, DinnerStatus.CONFIRMED],
                reason=(
                    "reminders are scheduled" if event.notifications_scheduled else None
                ),
            )
        wine = event.get_confirmed_wine(wine_id)
        if wine is None:
            raise ValidationError("wine_id", f"no confirmed wine {wine_id}")
        if quantity is not None and quantity < 0:
            raise ValidationError("quantity", f"must not be negative, got {quantity}")

        if temperature_category is not None:
            wine.temperature_category = temperature_category
        if quantity is not None:
            wine.quantity = quantity
        event.touch(self._time.now())
        await self._repository.save(event)
        return wine

    # =========================================================================
    # Wine service
    # =========================================================================

    async def schedule_wine_service(self, dinner_id: UUID) -> ServicePlan:
        """Schedule the dinner's wine reminders and store the tokens.

        Reminders of a previous batch are cancelled only after the dinner
        has been saved. If the save fails, the new reminders are cancelled
        instead and the stored dinner keeps its previous ones.

        Raises:
            LifecycleViolationError: If the dinner is not WINES_CONFIRMED or
                CONFIRMED.
            PermissionDeniedError: If notification permission is refused.
            SchedulingFailureError: If a reminder request fails.
            PersistenceError: If the dinner cannot be saved.
        """
        event = await self.get_dinner(dinner_id)
        plan = await self._scheduler.schedule(event)
        try:
            await self._repository.save(event)
        except PersistenceError:
            await self._scheduler.release(plan.tokens, event.id)
            raise
        await self._scheduler.release(plan.superseded_tokens, event.id)
        return plan

    async def cancel_wine_service(self, dinner_id: UUID) -> int:
        """Cancel the dinner's wine reminders; safe to call repeatedly."""
        event = await self.get_dinner(dinner_id)
        was_scheduled = event.notifications_scheduled
        tokens = self._scheduler.detach(event)
        if not tokens and not was_scheduled:
            return 0
        return await self._save_and_release(event, tokens)

    async def schedule_summary(self, dinner_id: UUID) -> str:
        """Human-readable cooling timetable of the dinner's wanted wines."""
        event = await self.get_dinner(dinner_id)
        entries = plan_wine_service(event.wanted_wines, event.date)
        return format_schedule_summary(entries, event.date.tzinfo)

    # =========================================================================
    # Read models
    # =========================================================================

    async def capabilities(self, dinner_id: UUID) -> DinnerCapabilities:
        event = await self.get_dinner(dinner_id)
        return capabilities_for(event)

    async def wine_summary(self, dinner_id: UUID) -> WineSummary:
        event = await self.get_dinner(dinner_id)
        return WineSummary.of(event.confirmed_wines)

    async def needs_bottle_unload(self, dinner_id: UUID) -> bool:
        event = await self.get_dinner(dinner_id)
        return event.needs_bottle_unload(self._time.now())

    # =========================================================================
    # Internals
    # =========================================================================

    async def _save_and_release(self, event: DinnerEvent, tokens: list[str]) -> int:
        """Save the dinner, then cancel the reminders detached from it.

        A failed save leaves the stored dinner and its reminders untouched.
        """
        await self._repository.save(event)
        cancelled = await self._scheduler.release(tokens, event.id)
        if cancelled:
            logger.info(
                "wine_service_cancelled",
                dinner_id=str(event.id),
                tokens_cancelled=cancelled,
            )
        return cancelled
