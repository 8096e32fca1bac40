"""Temperature suggester port.

Pluggable source of the default temperature category pre-filled when a
wine pairing becomes a confirmed wine. The default implementation is the
keyword heuristic in ``convivio.domain.services.temperature_suggester``.
"""

from __future__ import annotations

from typing import Protocol

from convivio.domain.models.temperature import TemperatureCategory


class TemperatureSuggesterProtocol(Protocol):
    """Suggests a temperature category for a wine.

    A suggestion never blocks confirmation; the host can always change it.
    """

    def suggest(self, wine_name: str) -> TemperatureCategory:
        """Return the suggested category for a wine name."""
        ...
