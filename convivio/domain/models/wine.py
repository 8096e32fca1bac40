"""Wine pairing and confirmed wine models.

A ``WinePairing`` is what the menu generator suggested for a course. Once the
host confirms the wines, each pairing becomes a ``ConfirmedWine`` carrying a
temperature category the host can still adjust, a bottle quantity and the
reminder tokens returned by the notification collaborator.

Quantity is the unit of "still wanted": a confirmed wine at quantity 0 is
excluded from scheduling and completion without deleting the record, so the
host's edits (category, producer, ...) survive.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID, uuid4

from convivio.domain.models.temperature import TemperatureCategory


class WineSource(Enum):
    """Where a confirmed bottle comes from."""

    FROM_CELLAR = "from_cellar"
    PURCHASE = "purchase"


@dataclass(frozen=True)
class WinePairing:
    """A wine suggested for a course by the menu generator.

    Attributes:
        course: Course the wine accompanies (free text from the menu).
        wine_name: Wine name.
        producer: Optional producer.
        vintage: Optional vintage.
        source: Cellar bottle or purchase suggestion.
        quantity: Bottles needed.
        reasoning: Optional explanation of the pairing.
        wine_id: Cellar wine reference when the source is the cellar.
    """

    course: str
    wine_name: str
    producer: str | None = None
    vintage: str | None = None
    source: WineSource = WineSource.FROM_CELLAR
    quantity: int = 1
    reasoning: str | None = None
    wine_id: str | None = None


@dataclass
class ConfirmedWine:
    """A wine selected to be served at a dinner.

    Attributes:
        wine_name: Wine name.
        course: Course the wine accompanies.
        temperature_category: Service temperature category.
        source: Cellar bottle or purchase.
        quantity: Bottles wanted; 0 means logically excluded.
        producer: Optional producer.
        vintage: Optional vintage.
        wine_id: Cellar wine reference, None for purchases.
        cool_down_token: Reminder token for "put in cooling", if scheduled.
        remove_token: Reminder token for "remove from cooling", if scheduled.
        id: Unique identifier.
    """

    wine_name: str
    course: str
    temperature_category: TemperatureCategory
    source: WineSource = WineSource.FROM_CELLAR
    quantity: int = 1
    producer: str | None = None
    vintage: str | None = None
    wine_id: str | None = None
    cool_down_token: str | None = None
    remove_token: str | None = None
    id: UUID = field(default_factory=uuid4)

    @property
    def display_name(self) -> str:
        """Producer, name and vintage joined for display."""
        parts = [p for p in (self.producer, self.wine_name, self.vintage) if p]
        return " ".join(parts)

    @property
    def is_wanted(self) -> bool:
        """Whether the wine still takes part in scheduling and completion."""
        return self.quantity > 0

    @property
    def is_from_cellar(self) -> bool:
        return self.source is WineSource.FROM_CELLAR

    @property
    def has_scheduled_reminders(self) -> bool:
        return self.cool_down_token is not None or self.remove_token is not None

    def clear_tokens(self) -> None:
        """Forget both reminder tokens."""
        self.cool_down_token = None
        self.remove_token = None

    @classmethod
    def from_pairing(
        cls,
        pairing: WinePairing,
        temperature_category: TemperatureCategory,
    ) -> ConfirmedWine:
        """Create a confirmed wine from a menu pairing.

        Args:
            pairing: The generated pairing.
            temperature_category: Default category, usually suggested from
                the wine name.

        Returns:
            A new ConfirmedWine without reminder tokens.
        """
        return cls(
            wine_name=pairing.wine_name,
            course=pairing.course,
            temperature_category=temperature_category,
            source=pairing.source,
            quantity=pairing.quantity,
            producer=pairing.producer,
            vintage=pairing.vintage,
            wine_id=pairing.wine_id,
        )


@dataclass(frozen=True)
class WineSummary:
    """Aggregate view over a dinner's wanted confirmed wines."""

    wines: tuple[ConfirmedWine, ...]

    @classmethod
    def of(cls, wines: list[ConfirmedWine]) -> WineSummary:
        return cls(wines=tuple(w for w in wines if w.is_wanted))

    @property
    def total_bottles(self) -> int:
        return sum(w.quantity for w in self.wines)

    @property
    def cellar_wines_count(self) -> int:
        return sum(1 for w in self.wines if w.is_from_cellar)

    @property
    def purchase_wines_count(self) -> int:
        return sum(1 for w in self.wines if not w.is_from_cellar)

    @property
    def wines_needing_cooling(self) -> list[ConfirmedWine]:
        return [w for w in self.wines if w.temperature_category.requires_cooling]
