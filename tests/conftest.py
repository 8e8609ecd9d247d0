"""Shared series builders for solarcast tests."""

import os
from collections.abc import Callable, Sequence

import pytest

from solarcast.models import ForecastSeries, RawSeries, SummarySeries

# 2024-01-15 00:00:00 UTC (Monday)
START_EPOCH = 1705276800
HOUR = 3600
DAY = 86400


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SOLARCAST_* variables from the host out of the tests."""
    for name in list(os.environ):
        if name.startswith("SOLARCAST_"):
            monkeypatch.delenv(name)


def _raw(count: int, interval: int, variables: dict[str, Sequence[float]], offset: int = 0) -> RawSeries:
    return RawSeries(
        start_epoch=START_EPOCH,
        end_epoch=START_EPOCH + count * interval,
        interval_seconds=interval,
        utc_offset_seconds=offset,
        variables={name: list(values) for name, values in variables.items()},
    )


@pytest.fixture
def make_forecast_series() -> Callable[..., ForecastSeries]:
    """Factory for forecast series; hourly arrays default to one week."""

    def _make(
        temperatures: Sequence[float] | None = None,
        codes: Sequence[float] | None = None,
        daylight: Sequence[float] | None = None,
        offset: int = 0,
    ) -> ForecastSeries:
        temperatures = [10.0 + (i % 24) / 2 for i in range(168)] if temperatures is None else temperatures
        codes = [3.0] * len(temperatures) if codes is None else codes
        daylight = [36000.0] * 7 if daylight is None else daylight
        return ForecastSeries(
            hourly=_raw(
                len(temperatures),
                HOUR,
                {"temperature_2m": temperatures, "weather_code": codes},
                offset,
            ),
            daily=_raw(len(daylight), DAY, {"daylight_duration": daylight}, offset),
        )

    return _make


@pytest.fixture
def make_summary_series() -> Callable[..., SummarySeries]:
    """Factory for summary series; unspecified hourly variables are dry and flat."""

    def _make(
        temperatures: Sequence[float] | None = None,
        pressure: Sequence[float] | None = None,
        rain: Sequence[float] | None = None,
        snowfall: Sequence[float] | None = None,
        sunshine: Sequence[float] | None = None,
    ) -> SummarySeries:
        temperatures = [5.0 + (i % 24) / 4 for i in range(168)] if temperatures is None else temperatures
        hours = len(temperatures)
        pressure = [1013.0] * hours if pressure is None else pressure
        rain = [0.0] * hours if rain is None else rain
        snowfall = [0.0] * hours if snowfall is None else snowfall
        sunshine = [18000.0] * 7 if sunshine is None else sunshine
        return SummarySeries(
            hourly=_raw(
                hours,
                HOUR,
                {
                    "temperature_2m": temperatures,
                    "relative_humidity_2m": [70.0] * hours,
                    "precipitation_probability": [10.0] * hours,
                    "precipitation": [r + s for r, s in zip(rain, snowfall, strict=True)],
                    "rain": rain,
                    "snowfall": snowfall,
                    "surface_pressure": pressure,
                },
            ),
            daily=_raw(len(sunshine), DAY, {"sunshine_duration": sunshine}),
        )

    return _make
