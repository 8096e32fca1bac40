"""Wine temperature categories and their cooling profiles.

Each category maps to a serving temperature and, when the wine must be
chilled before service, a lead time (how long before serving it goes into
the cooling environment) and an optional warm-up window (how long before
serving it comes back out so it is not served too cold).

Profiles:
    SPARKLING         6-8°C    in 3h before, stays cold until served
    LIGHT_WHITE       8-10°C   in 2h30 before, out 10 min before
    ROSE              10-12°C  in 2h before, out 15 min before
    STRUCTURED_WHITE  12-14°C  in 1h30 before, out 20 min before
    LIGHT_RED         14-16°C  in 30 min before, served straight away
    STRUCTURED_RED    16-18°C  ambient, never scheduled
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum


class WineType(Enum):
    """Broad wine type as recorded in the cellar."""

    RED = "red"
    WHITE = "white"
    ROSE = "rose"
    SPARKLING = "sparkling"
    DESSERT = "dessert"
    FORTIFIED = "fortified"


@dataclass(frozen=True)
class TemperatureProfile:
    """Serving and cooling parameters of a temperature category.

    Attributes:
        serving_temperature: Human-readable serving range.
        lead_time: Time in the cooling environment before serving,
            None when the wine is served at ambient temperature.
        warm_up_window: Time out of the cooling environment before
            serving, None when the wine stays cold until served.
    """

    serving_temperature: str
    lead_time: timedelta | None = None
    warm_up_window: timedelta | None = None

    @property
    def requires_cooling(self) -> bool:
        """Whether the bottle must be actively chilled before service."""
        return self.lead_time is not None and self.lead_time > timedelta(0)


class TemperatureCategory(Enum):
    """Service temperature category of a confirmed wine."""

    SPARKLING = "sparkling"
    LIGHT_WHITE = "light_white"
    STRUCTURED_WHITE = "structured_white"
    ROSE = "rose"
    LIGHT_RED = "light_red"
    STRUCTURED_RED = "structured_red"

    @property
    def profile(self) -> TemperatureProfile:
        """Return the cooling profile for this category."""
        return TEMPERATURE_PROFILES[self]

    @property
    def serving_temperature(self) -> str:
        return self.profile.serving_temperature

    @property
    def requires_cooling(self) -> bool:
        return self.profile.requires_cooling

    @property
    def lead_time(self) -> timedelta | None:
        return self.profile.lead_time

    @property
    def warm_up_window(self) -> timedelta | None:
        return self.profile.warm_up_window


TEMPERATURE_PROFILES: dict[TemperatureCategory, TemperatureProfile] = {
    TemperatureCategory.SPARKLING: TemperatureProfile(
        serving_temperature="6-8°C",
        lead_time=timedelta(hours=3),
    ),
    TemperatureCategory.LIGHT_WHITE: TemperatureProfile(
        serving_temperature="8-10°C",
        lead_time=timedelta(minutes=150),
        warm_up_window=timedelta(minutes=10),
    ),
    TemperatureCategory.ROSE: TemperatureProfile(
        serving_temperature="10-12°C",
        lead_time=timedelta(hours=2),
        warm_up_window=timedelta(minutes=15),
    ),
    TemperatureCategory.STRUCTURED_WHITE: TemperatureProfile(
        serving_temperature="12-14°C",
        lead_time=timedelta(minutes=90),
        warm_up_window=timedelta(minutes=20),
    ),
    TemperatureCategory.LIGHT_RED: TemperatureProfile(
        serving_temperature="14-16°C",
        lead_time=timedelta(minutes=30),
    ),
    TemperatureCategory.STRUCTURED_RED: TemperatureProfile(
        serving_temperature="16-18°C",
    ),
}
