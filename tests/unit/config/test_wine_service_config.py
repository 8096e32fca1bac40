"""Unit tests for WineServiceConfig."""

from datetime import timedelta

import pytest

from convivio.config.wine_service_config import (
    DEFAULT_WINE_SERVICE_CONFIG,
    TEST_WINE_SERVICE_CONFIG,
    WineServiceConfig,
)


class TestWineServiceConfig:
    def test_defaults(self) -> None:
        assert DEFAULT_WINE_SERVICE_CONFIG.post_event_offset == timedelta(hours=4)
        assert DEFAULT_WINE_SERVICE_CONFIG.skip_past_reminders is True
        assert TEST_WINE_SERVICE_CONFIG.skip_past_reminders is False

    def test_negative_offset_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            WineServiceConfig(post_event_offset_minutes=-1)

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONVIVIO_POST_EVENT_OFFSET_MINUTES", "180")
        monkeypatch.setenv("CONVIVIO_SKIP_PAST_REMINDERS", "no")

        config = WineServiceConfig.from_environment()

        assert config.post_event_offset == timedelta(hours=3)
        assert config.skip_past_reminders is False

    def test_invalid_values_fall_back_to_defaults(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CONVIVIO_POST_EVENT_OFFSET_MINUTES", "four hours")
        monkeypatch.delenv("CONVIVIO_SKIP_PAST_REMINDERS", raising=False)

        config = WineServiceConfig.from_environment()

        assert config == DEFAULT_WINE_SERVICE_CONFIG

    @pytest.mark.parametrize("raw", ["1", "true", "YES"])
    def test_truthy_skip_values(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("CONVIVIO_SKIP_PAST_REMINDERS", raw)
        assert WineServiceConfig.from_environment().skip_past_reminders is True
