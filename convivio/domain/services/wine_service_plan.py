"""Wine service planning: cooling instants and reminder content.

Pure computation over confirmed wines and a target serving time ``T``:

    put_in_time   = T - lead_time
    take_out_time = T - warm_up_window   (only when the category has one)

Only wanted wines whose category requires cooling produce an entry.
Structured reds are served at ambient temperature and never appear.
Entries are independent of each other; they are presented sorted by
``put_in_time`` ascending.

Requesting the reminders is the scheduler's job, see
``convivio.application.services.wine_service_scheduler``.
"""

from __future__ import annotations

from datetime import datetime, timedelta, tzinfo
from uuid import UUID

from convivio.domain.errors.validation import ValidationError
from convivio.domain.models.service_plan import (
    ReminderKind,
    ReminderPayload,
    ScheduleEntry,
)
from convivio.domain.models.wine import ConfirmedWine

NO_COOLING_MESSAGE = "No wine needs cooling."


def plan_wine_service(
    wines: list[ConfirmedWine],
    serve_at: datetime,
) -> list[ScheduleEntry]:
    """Compute the cooling schedule for a dinner's wines.

    Args:
        wines: Candidate wines. Wines at quantity 0 must be filtered out by
            the caller; see ``DinnerEvent.wanted_wines``.
        serve_at: Target serving time (timezone-aware).

    Returns:
        One entry per wine requiring cooling, sorted by put-in time.

    Raises:
        ValidationError: If ``serve_at`` is naive or a wine has a
            non-positive quantity.
    """
    if serve_at.tzinfo is None:
        raise ValidationError("serving time", "must be timezone-aware")

    entries: list[ScheduleEntry] = []
    for wine in wines:
        if wine.quantity <= 0:
            raise ValidationError(
                "quantity", f"{wine.display_name} has quantity {wine.quantity}"
            )
        profile = wine.temperature_category.profile
        if not profile.requires_cooling or profile.lead_time is None:
            continue
        take_out = None
        if profile.warm_up_window is not None:
            take_out = serve_at - profile.warm_up_window
        entries.append(
            ScheduleEntry(
                wine=wine,
                put_in_time=serve_at - profile.lead_time,
                take_out_time=take_out,
            )
        )
    return sorted(entries, key=lambda e: e.put_in_time)


def post_event_time(serve_at: datetime, offset: timedelta) -> datetime:
    """Estimated end of the dinner, when the host records consumed bottles."""
    return serve_at + offset


# =============================================================================
# Reminder payloads
# =============================================================================


def put_in_cooling_payload(
    wine: ConfirmedWine, dinner_id: UUID, dinner_title: str
) -> ReminderPayload:
    return ReminderPayload(
        kind=ReminderKind.PUT_IN_COOLING,
        title="Put the wine in the fridge",
        body=(
            f"{wine.display_name} for {dinner_title}. "
            f"Serve at {wine.temperature_category.serving_temperature}."
        ),
        dinner_id=dinner_id,
        wine_id=wine.id,
    )


def remove_from_cooling_payload(
    wine: ConfirmedWine, dinner_id: UUID
) -> ReminderPayload:
    window = wine.temperature_category.warm_up_window or timedelta(0)
    minutes = int(window.total_seconds() // 60)
    return ReminderPayload(
        kind=ReminderKind.REMOVE_FROM_COOLING,
        title="Take the wine out of the fridge",
        body=(
            f"{wine.display_name} - leave it at room temperature "
            f"for {minutes} minutes."
        ),
        dinner_id=dinner_id,
        wine_id=wine.id,
    )


def post_event_payload(dinner_id: UUID, dinner_title: str) -> ReminderPayload:
    return ReminderPayload(
        kind=ReminderKind.POST_EVENT,
        title=f"How did {dinner_title} go?",
        body="Confirm the bottles you opened to keep your cellar up to date.",
        dinner_id=dinner_id,
    )


# =============================================================================
# Summary
# =============================================================================


def format_schedule_summary(
    entries: list[ScheduleEntry],
    tz: tzinfo | None = None,
) -> str:
    """Render a schedule as one ``HH:MM - action: wine`` line per instant.

    Args:
        entries: Schedule entries, usually from ``plan_wine_service``.
        tz: Timezone to display the instants in (defaults to each
            instant's own timezone).

    Returns:
        The summary text, or ``NO_COOLING_MESSAGE`` for an empty schedule.
    """
    if not entries:
        return NO_COOLING_MESSAGE

    def _hhmm(at: datetime) -> str:
        return (at.astimezone(tz) if tz is not None else at).strftime("%H:%M")

    lines: list[str] = []
    for entry in entries:
        name = entry.wine.display_name
        lines.append(f"{_hhmm(entry.put_in_time)} - Put in cooling: {name}")
        if entry.take_out_time is not None:
            lines.append(f"{_hhmm(entry.take_out_time)} - Remove from cooling: {name}")
    return "\n".join(lines)
