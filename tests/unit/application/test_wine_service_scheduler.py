"""Unit tests for WineServiceScheduler batches, rollback and cancellation."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from convivio.application.services.wine_service_scheduler import WineServiceScheduler
from convivio.config.wine_service_config import (
    TEST_WINE_SERVICE_CONFIG,
    WineServiceConfig,
)
from convivio.domain.errors.lifecycle import LifecycleViolationError
from convivio.domain.errors.notification import (
    PermissionDeniedError,
    SchedulingFailureError,
)
from convivio.domain.models.dinner_event import DinnerEvent
from convivio.domain.models.dinner_status import DinnerStatus
from convivio.domain.models.service_plan import ReminderKind
from convivio.domain.models.temperature import TemperatureCategory
from convivio.infrastructure.stubs import ReminderNotifierStub
from tests.helpers import FakeTimeAuthority, make_confirmed_wine, make_dinner


def _dinner(status: DinnerStatus = DinnerStatus.WINES_CONFIRMED) -> DinnerEvent:
    """Sparkling (one reminder) and light white (two reminders)."""
    return make_dinner(
        status,
        confirmed_wines=[
            make_confirmed_wine(TemperatureCategory.SPARKLING, "Franciacorta"),
            make_confirmed_wine(TemperatureCategory.LIGHT_WHITE, "Soave"),
        ],
    )


@pytest.fixture
def scheduler(
    notifier: ReminderNotifierStub,
    fake_time_authority: FakeTimeAuthority,
    wine_service_config: WineServiceConfig,
) -> WineServiceScheduler:
    return WineServiceScheduler(notifier, fake_time_authority, wine_service_config)


class TestSchedule:
    async def test_issues_every_reminder_and_stores_tokens(
        self, scheduler: WineServiceScheduler, notifier: ReminderNotifierStub
    ) -> None:
        dinner = _dinner()

        plan = await scheduler.schedule(dinner)

        sparkling, white = dinner.confirmed_wines
        assert plan.tokens_issued == 4
        assert plan.skipped == ()
        assert sparkling.cool_down_token == "reminder-1"
        assert sparkling.remove_token is None
        assert (white.cool_down_token, white.remove_token) == (
            "reminder-2",
            "reminder-3",
        )
        assert dinner.post_event_token == "reminder-4"
        assert dinner.notifications_scheduled is True
        assert notifier.pending["reminder-4"].at == datetime(
            2026, 6, 13, 0, 0, tzinfo=timezone.utc
        )
        assert notifier.pending["reminder-4"].payload.kind is ReminderKind.POST_EVENT

    async def test_allowed_once_dinner_is_confirmed(
        self, scheduler: WineServiceScheduler
    ) -> None:
        dinner = _dinner(DinnerStatus.CONFIRMED)

        await scheduler.schedule(dinner)

        assert dinner.notifications_scheduled

    @pytest.mark.parametrize(
        "status",
        [DinnerStatus.PLANNING, DinnerStatus.COMPLETED, DinnerStatus.CANCELLED],
    )
    async def test_rejected_outside_wine_service_states(
        self,
        scheduler: WineServiceScheduler,
        notifier: ReminderNotifierStub,
        status: DinnerStatus,
    ) -> None:
        with pytest.raises(LifecycleViolationError):
            await scheduler.schedule(_dinner(status))

        assert notifier.permission_requests == 0
        assert notifier.request_count == 0

    async def test_permission_denied_requests_nothing(
        self, scheduler: WineServiceScheduler, notifier: ReminderNotifierStub
    ) -> None:
        notifier.permission_granted = False
        dinner = _dinner()

        with pytest.raises(PermissionDeniedError):
            await scheduler.schedule(dinner)

        assert notifier.request_count == 0
        assert dinner.notifications_scheduled is False

    @pytest.mark.parametrize("failing_request", [1, 2, 3, 4])
    async def test_failure_rolls_back_the_batch(
        self,
        scheduler: WineServiceScheduler,
        notifier: ReminderNotifierStub,
        failing_request: int,
    ) -> None:
        notifier.fail_on_request = failing_request
        dinner = _dinner()
        updated_at = dinner.updated_at

        with pytest.raises(SchedulingFailureError):
            await scheduler.schedule(dinner)

        assert notifier.pending == {}
        assert len(notifier.cancelled) == failing_request - 1
        assert dinner.notifications_scheduled is False
        assert dinner.post_event_token is None
        assert not any(w.has_scheduled_reminders for w in dinner.confirmed_wines)
        assert dinner.updated_at == updated_at

    async def test_failure_names_the_reminder_kind(
        self, scheduler: WineServiceScheduler, notifier: ReminderNotifierStub
    ) -> None:
        notifier.fail_on_request = 3

        with pytest.raises(SchedulingFailureError) as exc_info:
            await scheduler.schedule(_dinner())

        assert exc_info.value.reminder_kind == ReminderKind.REMOVE_FROM_COOLING.value

    async def test_past_instants_are_skipped(
        self,
        scheduler: WineServiceScheduler,
        notifier: ReminderNotifierStub,
        fake_time_authority: FakeTimeAuthority,
    ) -> None:
        fake_time_authority.set_time(datetime(2026, 6, 12, 17, 15, tzinfo=timezone.utc))
        dinner = _dinner()

        plan = await scheduler.schedule(dinner)

        [skipped] = plan.skipped
        assert skipped.kind is ReminderKind.PUT_IN_COOLING
        assert skipped.wine_id == dinner.confirmed_wines[0].id
        assert plan.tokens_issued == 3
        assert dinner.confirmed_wines[0].cool_down_token is None
        assert all(r.at > fake_time_authority.now() for r in notifier.pending.values())

    async def test_nothing_left_to_remind(
        self,
        scheduler: WineServiceScheduler,
        notifier: ReminderNotifierStub,
        fake_time_authority: FakeTimeAuthority,
    ) -> None:
        fake_time_authority.set_time(datetime(2026, 6, 13, 1, 0, tzinfo=timezone.utc))
        dinner = _dinner(DinnerStatus.CONFIRMED)

        plan = await scheduler.schedule(dinner)

        assert plan.tokens_issued == 0
        assert len(plan.skipped) == 4
        assert notifier.request_count == 0
        assert dinner.notifications_scheduled is False

    async def test_past_instants_requested_when_skipping_disabled(
        self, notifier: ReminderNotifierStub, fake_time_authority: FakeTimeAuthority
    ) -> None:
        scheduler = WineServiceScheduler(
            notifier, fake_time_authority, TEST_WINE_SERVICE_CONFIG
        )
        fake_time_authority.set_time(datetime(2026, 6, 12, 17, 15, tzinfo=timezone.utc))

        plan = await scheduler.schedule(_dinner())

        assert plan.tokens_issued == 4
        assert plan.skipped == ()

    async def test_only_post_event_reminder_without_cooling(
        self, scheduler: WineServiceScheduler
    ) -> None:
        dinner = make_dinner(
            DinnerStatus.WINES_CONFIRMED,
            confirmed_wines=[
                make_confirmed_wine(TemperatureCategory.STRUCTURED_RED, "Barolo"),
                make_confirmed_wine(TemperatureCategory.SPARKLING, quantity=0),
            ],
        )

        plan = await scheduler.schedule(dinner)

        assert plan.entries == ()
        assert plan.tokens_issued == 1
        assert dinner.post_event_token is not None

    async def test_rescheduling_hands_back_previous_reminders(
        self, scheduler: WineServiceScheduler, notifier: ReminderNotifierStub
    ) -> None:
        dinner = _dinner()
        await scheduler.schedule(dinner)

        plan = await scheduler.schedule(dinner)

        assert plan.superseded_tokens == (
            "reminder-1",
            "reminder-2",
            "reminder-3",
            "reminder-4",
        )
        assert plan.tokens == ("reminder-5", "reminder-6", "reminder-7", "reminder-8")
        assert notifier.cancelled == []
        assert len(notifier.pending) == 8
        assert dinner.post_event_token == "reminder-8"

        await scheduler.release(plan.superseded_tokens, dinner.id)

        assert sorted(notifier.pending) == list(plan.tokens)

    async def test_failed_reschedule_keeps_previous_reminders(
        self, scheduler: WineServiceScheduler, notifier: ReminderNotifierStub
    ) -> None:
        dinner = _dinner()
        await scheduler.schedule(dinner)
        notifier.fail_on_request = 6

        with pytest.raises(SchedulingFailureError):
            await scheduler.schedule(dinner)

        assert notifier.cancelled == ["reminder-5"]
        assert dinner.post_event_token == "reminder-4"
        assert dinner.notifications_scheduled is True


class TestCancelSchedule:
    async def test_cancels_every_token(
        self, scheduler: WineServiceScheduler, notifier: ReminderNotifierStub
    ) -> None:
        dinner = _dinner()
        await scheduler.schedule(dinner)

        cancelled = await scheduler.cancel_schedule(dinner)

        assert cancelled == 4
        assert notifier.pending == {}
        assert dinner.notifications_scheduled is False
        assert dinner.post_event_token is None
        assert not any(w.has_scheduled_reminders for w in dinner.confirmed_wines)

    async def test_is_idempotent(
        self, scheduler: WineServiceScheduler, notifier: ReminderNotifierStub
    ) -> None:
        dinner = _dinner()
        await scheduler.schedule(dinner)
        await scheduler.cancel_schedule(dinner)
        updated_at = dinner.updated_at

        assert await scheduler.cancel_schedule(dinner) == 0
        assert len(notifier.cancelled) == 4
        assert dinner.updated_at == updated_at

    async def test_notifier_errors_do_not_stop_cancellation(
        self, scheduler: WineServiceScheduler, notifier: ReminderNotifierStub
    ) -> None:
        dinner = _dinner()
        await scheduler.schedule(dinner)
        notifier.fail_on_cancel = True

        cancelled = await scheduler.cancel_schedule(dinner)

        assert cancelled == 4
        assert dinner.notifications_scheduled is False
        assert dinner.post_event_token is None


class TestDetach:
    async def test_clears_tokens_but_leaves_reminders_pending(
        self, scheduler: WineServiceScheduler, notifier: ReminderNotifierStub
    ) -> None:
        dinner = _dinner()
        await scheduler.schedule(dinner)

        tokens = scheduler.detach(dinner)

        assert tokens == ["reminder-1", "reminder-2", "reminder-3", "reminder-4"]
        assert sorted(notifier.pending) == tokens
        assert dinner.notifications_scheduled is False
        assert dinner.post_event_token is None

    def test_returns_nothing_without_reminders(
        self, scheduler: WineServiceScheduler
    ) -> None:
        dinner = _dinner()
        updated_at = dinner.updated_at

        assert scheduler.detach(dinner) == []
        assert dinner.updated_at == updated_at
