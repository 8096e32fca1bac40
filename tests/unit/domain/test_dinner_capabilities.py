"""Unit tests for the capability predicates derived from a dinner's state."""

from __future__ import annotations

import pytest

from convivio.domain.models.capabilities import (
    can_cancel,
    can_complete_dinner,
    can_confirm_dinner,
    can_confirm_wines,
    can_edit_confirmed_wines,
    can_edit_dishes,
    can_generate_invite,
    can_regenerate_menu,
    can_schedule_wine_service,
    capabilities_for,
)
from convivio.domain.models.dinner_status import DinnerStatus
from tests.helpers import make_confirmed_wine, make_dinner, make_pairing


class TestCapabilityTable:
    @pytest.mark.parametrize(
        ("status", "edit", "confirm_dinner", "invite", "regenerate"),
        [
            (DinnerStatus.PLANNING, True, False, False, True),
            (DinnerStatus.WINES_CONFIRMED, False, True, False, False),
            (DinnerStatus.CONFIRMED, False, False, True, False),
            (DinnerStatus.COMPLETED, False, False, True, False),
            (DinnerStatus.CANCELLED, False, False, False, False),
        ],
    )
    def test_state_only_gates(
        self,
        status: DinnerStatus,
        edit: bool,
        confirm_dinner: bool,
        invite: bool,
        regenerate: bool,
    ) -> None:
        dinner = make_dinner(status)
        assert can_edit_dishes(dinner) is edit
        assert can_confirm_dinner(dinner) is confirm_dinner
        assert can_generate_invite(dinner) is invite
        assert can_regenerate_menu(dinner) is regenerate

    def test_confirm_wines_needs_pairings(self) -> None:
        assert not can_confirm_wines(make_dinner())
        assert can_confirm_wines(make_dinner(wine_pairings=[make_pairing()]))

    def test_complete_needs_wanted_wines(self) -> None:
        empty = make_dinner(DinnerStatus.CONFIRMED)
        excluded = make_dinner(
            DinnerStatus.CONFIRMED, confirmed_wines=[make_confirmed_wine(quantity=0)]
        )
        ready = make_dinner(
            DinnerStatus.CONFIRMED, confirmed_wines=[make_confirmed_wine()]
        )
        assert not can_complete_dinner(empty)
        assert not can_complete_dinner(excluded)
        assert can_complete_dinner(ready)

    def test_cancel_only_when_not_terminal(self) -> None:
        assert can_cancel(make_dinner(DinnerStatus.CONFIRMED))
        assert not can_cancel(make_dinner(DinnerStatus.COMPLETED))


class TestWineServiceGates:
    def test_confirmed_wines_editable_until_scheduled(self) -> None:
        dinner = make_dinner(DinnerStatus.WINES_CONFIRMED)
        assert can_edit_confirmed_wines(dinner)

        dinner.notifications_scheduled = True
        assert not can_edit_confirmed_wines(dinner)

    def test_scheduling_allowed_after_wine_confirmation(self) -> None:
        assert not can_schedule_wine_service(make_dinner())
        assert can_schedule_wine_service(make_dinner(DinnerStatus.WINES_CONFIRMED))
        assert can_schedule_wine_service(make_dinner(DinnerStatus.CONFIRMED))
        assert not can_schedule_wine_service(make_dinner(DinnerStatus.COMPLETED))


def test_snapshot_is_recomputed_from_current_state() -> None:
    dinner = make_dinner(wine_pairings=[make_pairing()])
    before = capabilities_for(dinner)

    dinner.status = DinnerStatus.WINES_CONFIRMED
    after = capabilities_for(dinner)

    assert before.can_confirm_wines and not before.can_confirm_dinner
    assert after.can_confirm_dinner and not after.can_confirm_wines
