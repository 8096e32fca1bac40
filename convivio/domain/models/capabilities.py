"""Read-only capability gates derived from a dinner's current state.

The rest of the application consults these predicates to enable or
disable actions. They are pure functions of the dinner, recomputed on
every call, never stored on the aggregate.

    State            edit  confirm  confirm  invite  complete  regenerate
                           wines    dinner
    PLANNING         yes   pairings no       no      no        yes
    WINES_CONFIRMED  no    no       yes      no      no        no
    CONFIRMED        no    no       no       yes     wines     no
    COMPLETED        no    no       no       yes     no        no
    CANCELLED        no    no       no       no      no        no
"""

from __future__ import annotations

from dataclasses import dataclass

from convivio.domain.models.dinner_event import DinnerEvent
from convivio.domain.models.dinner_status import DinnerStatus


def can_edit_dishes(event: DinnerEvent) -> bool:
    """Dishes and wine pairings are editable only while planning."""
    return event.status is DinnerStatus.PLANNING


def can_edit_wines(event: DinnerEvent) -> bool:
    return event.status is DinnerStatus.PLANNING


def can_confirm_wines(event: DinnerEvent) -> bool:
    return event.status is DinnerStatus.PLANNING and event.has_wine_pairings


def can_confirm_dinner(event: DinnerEvent) -> bool:
    return event.status is DinnerStatus.WINES_CONFIRMED


def can_generate_invite(event: DinnerEvent) -> bool:
    return event.status in (DinnerStatus.CONFIRMED, DinnerStatus.COMPLETED)


def can_complete_dinner(event: DinnerEvent) -> bool:
    return event.status is DinnerStatus.CONFIRMED and event.has_confirmed_wines


def can_regenerate_menu(event: DinnerEvent) -> bool:
    return event.status is DinnerStatus.PLANNING


def can_cancel(event: DinnerEvent) -> bool:
    return not event.status.is_terminal()


def can_edit_confirmed_wines(event: DinnerEvent) -> bool:
    """Temperature and quantity stay editable until reminders are scheduled."""
    return (
        event.status in (DinnerStatus.WINES_CONFIRMED, DinnerStatus.CONFIRMED)
        and not event.notifications_scheduled
    )


def can_schedule_wine_service(event: DinnerEvent) -> bool:
    return event.status in (DinnerStatus.WINES_CONFIRMED, DinnerStatus.CONFIRMED)


@dataclass(frozen=True)
class DinnerCapabilities:
    """Snapshot of every capability gate for one render."""

    can_edit_dishes: bool
    can_edit_wines: bool
    can_confirm_wines: bool
    can_confirm_dinner: bool
    can_generate_invite: bool
    can_complete_dinner: bool
    can_regenerate_menu: bool
    can_cancel: bool
    can_edit_confirmed_wines: bool
    can_schedule_wine_service: bool


def capabilities_for(event: DinnerEvent) -> DinnerCapabilities:
    """Evaluate every capability gate against the dinner's current state."""
    return DinnerCapabilities(
        can_edit_dishes=can_edit_dishes(event),
        can_edit_wines=can_edit_wines(event),
        can_confirm_wines=can_confirm_wines(event),
        can_confirm_dinner=can_confirm_dinner(event),
        can_generate_invite=can_generate_invite(event),
        can_complete_dinner=can_complete_dinner(event),
        can_regenerate_menu=can_regenerate_menu(event),
        can_cancel=can_cancel(event),
        can_edit_confirmed_wines=can_edit_confirmed_wines(event),
        can_schedule_wine_service=can_schedule_wine_service(event),
    )
