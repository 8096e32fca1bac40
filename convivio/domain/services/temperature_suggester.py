"""Keyword heuristic suggesting a default temperature category.

The suggestion only pre-fills the category when wines are confirmed; the
host can always change it afterwards, and a name that matches nothing
falls back to STRUCTURED_RED (ambient, never scheduled).

Keywords match whole words only. Checks run in order, first match wins:
    sparkling  spumante, prosecco, champagne, franciacorta, metodo classico,
               brut, cava, cremant
    rose       rosato, rosé, rose, cerasuolo, chiaretto
    white      bianco, verdicchio, pinot grigio, sauvignon, chardonnay, ...
               (STRUCTURED_WHITE when also riserva or barrique)
    light red  lambrusco, grignolino, schiava, freisa, beaujolais
"""

from __future__ import annotations

import re
from typing import Final

from convivio.domain.models.temperature import TemperatureCategory, WineType

SPARKLING_KEYWORDS: Final[tuple[str, ...]] = (
    "spumante",
    "prosecco",
    "champagne",
    "franciacorta",
    "metodo classico",
    "brut",
    "cava",
    "cremant",
    "crémant",
)

ROSE_KEYWORDS: Final[tuple[str, ...]] = (
    "rosato",
    "rosé",
    "rose",
    "cerasuolo",
    "chiaretto",
)

WHITE_KEYWORDS: Final[tuple[str, ...]] = (
    "bianco",
    "blanc",
    "verdicchio",
    "pinot grigio",
    "sauvignon",
    "chardonnay",
    "vermentino",
    "trebbiano",
    "soave",
    "gavi",
    "falanghina",
    "riesling",
)

STRUCTURED_WHITE_KEYWORDS: Final[tuple[str, ...]] = ("riserva", "barrique")

LIGHT_RED_KEYWORDS: Final[tuple[str, ...]] = (
    "lambrusco",
    "grignolino",
    "schiava",
    "freisa",
    "beaujolais",
)

WINE_TYPE_CATEGORIES: Final[dict[WineType, TemperatureCategory]] = {
    WineType.SPARKLING: TemperatureCategory.SPARKLING,
    WineType.WHITE: TemperatureCategory.LIGHT_WHITE,
    WineType.ROSE: TemperatureCategory.ROSE,
    WineType.RED: TemperatureCategory.STRUCTURED_RED,
    WineType.DESSERT: TemperatureCategory.STRUCTURED_WHITE,
    WineType.FORTIFIED: TemperatureCategory.STRUCTURED_RED,
}


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(re.search(rf"\b{re.escape(k)}\b", text) for k in keywords)


def suggest_for_wine_type(wine_type: WineType) -> TemperatureCategory:
    """Default category for a cellar wine type."""
    return WINE_TYPE_CATEGORIES[wine_type]


class KeywordTemperatureSuggester:
    """Suggests a temperature category from words in the wine name."""

    def suggest(self, wine_name: str) -> TemperatureCategory:
        name = wine_name.lower()
        if _contains_any(name, SPARKLING_KEYWORDS):
            return TemperatureCategory.SPARKLING
        if _contains_any(name, ROSE_KEYWORDS):
            return TemperatureCategory.ROSE
        if _contains_any(name, WHITE_KEYWORDS):
            if _contains_any(name, STRUCTURED_WHITE_KEYWORDS):
                return TemperatureCategory.STRUCTURED_WHITE
            return TemperatureCategory.LIGHT_WHITE
        if _contains_any(name, LIGHT_RED_KEYWORDS):
            return TemperatureCategory.LIGHT_RED
        return TemperatureCategory.STRUCTURED_RED
