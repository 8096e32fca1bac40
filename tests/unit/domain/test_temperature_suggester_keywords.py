"""Unit tests for the temperature category heuristics."""

from __future__ import annotations

import pytest

from convivio.domain.models.temperature import TemperatureCategory, WineType
from convivio.domain.services.temperature_suggester import (
    KeywordTemperatureSuggester,
    suggest_for_wine_type,
)


@pytest.fixture
def suggester() -> KeywordTemperatureSuggester:
    return KeywordTemperatureSuggester()


@pytest.mark.parametrize(
    ("wine_name", "expected"),
    [
        ("Franciacorta Brut", TemperatureCategory.SPARKLING),
        ("Prosecco Superiore", TemperatureCategory.SPARKLING),
        ("Champagne Rosé", TemperatureCategory.SPARKLING),
        ("Cerasuolo d'Abruzzo", TemperatureCategory.ROSE),
        ("Bardolino Chiaretto", TemperatureCategory.ROSE),
        ("Soave Classico", TemperatureCategory.LIGHT_WHITE),
        ("Vermentino di Gallura", TemperatureCategory.LIGHT_WHITE),
        ("Verdicchio Riserva", TemperatureCategory.STRUCTURED_WHITE),
        ("Chardonnay Barrique", TemperatureCategory.STRUCTURED_WHITE),
        ("Lambrusco di Sorbara", TemperatureCategory.LIGHT_RED),
        ("Beaujolais Villages", TemperatureCategory.LIGHT_RED),
        ("Barolo", TemperatureCategory.STRUCTURED_RED),
        ("", TemperatureCategory.STRUCTURED_RED),
    ],
)
def test_suggest_from_name(
    suggester: KeywordTemperatureSuggester,
    wine_name: str,
    expected: TemperatureCategory,
) -> None:
    assert suggester.suggest(wine_name) is expected


def test_matching_ignores_case(suggester: KeywordTemperatureSuggester) -> None:
    assert suggester.suggest("GAVI DI GAVI") is TemperatureCategory.LIGHT_WHITE


@pytest.mark.parametrize(
    ("wine_name", "expected"),
    [
        ("Cavalleri Curtefranca Rosso", TemperatureCategory.STRUCTURED_RED),
        ("Rosenberg Barolo", TemperatureCategory.STRUCTURED_RED),
        ("Gavioli Lambrusco", TemperatureCategory.LIGHT_RED),
        ("Crémant de Loire", TemperatureCategory.SPARKLING),
    ],
)
def test_keywords_match_whole_words_only(
    suggester: KeywordTemperatureSuggester,
    wine_name: str,
    expected: TemperatureCategory,
) -> None:
    assert suggester.suggest(wine_name) is expected


@pytest.mark.parametrize(
    ("wine_type", "expected"),
    [
        (WineType.SPARKLING, TemperatureCategory.SPARKLING),
        (WineType.WHITE, TemperatureCategory.LIGHT_WHITE),
        (WineType.ROSE, TemperatureCategory.ROSE),
        (WineType.RED, TemperatureCategory.STRUCTURED_RED),
        (WineType.DESSERT, TemperatureCategory.STRUCTURED_WHITE),
        (WineType.FORTIFIED, TemperatureCategory.STRUCTURED_RED),
    ],
)
def test_suggest_from_wine_type(
    wine_type: WineType, expected: TemperatureCategory
) -> None:
    assert suggest_for_wine_type(wine_type) is expected


def test_profiles_cover_every_category() -> None:
    cooled = {c for c in TemperatureCategory if c.requires_cooling}
    assert TemperatureCategory.STRUCTURED_RED not in cooled
    assert len(cooled) == len(TemperatureCategory) - 1
    assert TemperatureCategory.SPARKLING.warm_up_window is None
    assert TemperatureCategory.STRUCTURED_RED.serving_temperature == "16-18°C"
