"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from solarcast.config import DEFAULT_FORECAST_URL, Settings


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings.from_env()
        assert settings.forecast_url == DEFAULT_FORECAST_URL
        assert settings.http_timeout == 30.0
        assert settings.installed_power_kw == 2.5
        assert settings.panel_efficiency == 0.2
        assert settings.forecast_days == 7

    def test_overrides_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SOLARCAST_INSTALLED_POWER_KW", "4.2")
        monkeypatch.setenv("SOLARCAST_PANEL_EFFICIENCY", "0.18")
        monkeypatch.setenv("SOLARCAST_FORECAST_DAYS", "10")
        monkeypatch.setenv("SOLARCAST_HTTP_TIMEOUT", "5")

        settings = Settings.from_env()
        assert settings.installed_power_kw == 4.2
        assert settings.panel_efficiency == 0.18
        assert settings.forecast_days == 10
        assert settings.http_timeout == 5.0

    def test_empty_variable_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SOLARCAST_FORECAST_URL", "")
        assert Settings.from_env().forecast_url == DEFAULT_FORECAST_URL

    def test_invalid_value_names_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SOLARCAST_PANEL_EFFICIENCY", "1.5")
        with pytest.raises(RuntimeError, match="SOLARCAST_PANEL_EFFICIENCY"):
            Settings.from_env()

    def test_unparseable_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SOLARCAST_FORECAST_DAYS", "a week")
        with pytest.raises(RuntimeError, match="SOLARCAST_FORECAST_DAYS"):
            Settings.from_env()

    def test_fewer_than_seven_days_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(forecast_days=3)

    def test_frozen(self) -> None:
        settings = Settings()
        with pytest.raises(ValidationError):
            settings.http_timeout = 1.0  # type: ignore[misc]
