"""Weather series from the Open-Meteo forecast API (free, no key required)."""

from collections.abc import Sequence
from typing import Any

import httpx
import structlog

from solarcast.config import DEFAULT_FORECAST_URL
from solarcast.errors import DataUnavailableError
from solarcast.models import Coordinate, ForecastSeries, RawSeries, SummarySeries

log = structlog.get_logger()

# Variables are requested in a fixed order and bound by name on the way back
FORECAST_HOURLY = ("temperature_2m", "weather_code")
FORECAST_DAILY = ("daylight_duration",)

SUMMARY_HOURLY = (
    "temperature_2m",
    "relative_humidity_2m",
    "precipitation_probability",
    "precipitation",
    "rain",
    "snowfall",
    "surface_pressure",
)
SUMMARY_DAILY = ("sunshine_duration",)

HOURLY_INTERVAL = 3600
DAILY_INTERVAL = 86400


class WeatherClient:
    """Client for fetching hourly and daily series from Open-Meteo."""

    def __init__(
        self,
        base_url: str = DEFAULT_FORECAST_URL,
        timeout: float = 30.0,
        forecast_days: int = 7,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = base_url
        self._forecast_days = forecast_days
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def fetch_forecast_series(self, coordinate: Coordinate) -> ForecastSeries:
        """Fetch the series backing the daily forecast."""
        hourly, daily = self._fetch(coordinate, FORECAST_HOURLY, FORECAST_DAILY)
        return ForecastSeries(hourly=hourly, daily=daily)

    def fetch_summary_series(self, coordinate: Coordinate) -> SummarySeries:
        """Fetch the series backing the period summary."""
        hourly, daily = self._fetch(coordinate, SUMMARY_HOURLY, SUMMARY_DAILY)
        return SummarySeries(hourly=hourly, daily=daily)

    def _fetch(
        self,
        coordinate: Coordinate,
        hourly_vars: Sequence[str],
        daily_vars: Sequence[str],
    ) -> tuple[RawSeries, RawSeries]:
        params: dict[str, str | float | int] = {
            "latitude": coordinate.latitude,
            "longitude": coordinate.longitude,
            "hourly": ",".join(hourly_vars),
            "daily": ",".join(daily_vars),
            "timeformat": "unixtime",
            "timezone": "auto",
            "forecast_days": self._forecast_days,
        }
        log.info(
            "fetching_weather",
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
            hourly=params["hourly"],
            daily=params["daily"],
        )

        response = self._client.get(self._url, params=params)
        response.raise_for_status()
        data = response.json()

        offset = int(data.get("utc_offset_seconds", 0))
        hourly = _parse_block(data.get("hourly"), "hourly", hourly_vars, offset, HOURLY_INTERVAL)
        daily = _parse_block(data.get("daily"), "daily", daily_vars, offset, DAILY_INTERVAL)

        log.info(
            "weather_fetched",
            hourly_samples=len(hourly.timeline()),
            daily_samples=len(daily.timeline()),
            utc_offset_seconds=offset,
        )
        return hourly, daily

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "WeatherClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def _parse_block(
    block: dict[str, Any] | None,
    kind: str,
    names: Sequence[str],
    utc_offset_seconds: int,
    default_interval: int,
) -> RawSeries:
    """Turn one Open-Meteo series block into a RawSeries.

    The block carries epoch timestamps in ``time``; the series end is one
    interval past the last timestamp.
    """
    if not block or not block.get("time"):
        raise DataUnavailableError(f"{kind.capitalize()} weather data is unavailable")

    times = [int(t) for t in block["time"]]
    if "interval" in block:
        interval = int(block["interval"])
    elif len(times) > 1:
        interval = times[1] - times[0]
    else:
        interval = default_interval

    variables: dict[str, list[float]] = {}
    for name in names:
        values = block.get(name)
        if values is None:
            raise DataUnavailableError(f"{kind.capitalize()} variable '{name}' is unavailable")
        if any(v is None for v in values):
            raise DataUnavailableError(f"{kind.capitalize()} variable '{name}' has missing values")
        if len(values) != len(times):
            raise DataUnavailableError(
                f"{kind.capitalize()} variable '{name}' has {len(values)} values for {len(times)} timestamps"
            )
        variables[name] = [float(v) for v in values]

    return RawSeries(
        start_epoch=times[0],
        end_epoch=times[-1] + interval,
        interval_seconds=interval,
        utc_offset_seconds=utc_offset_seconds,
        variables=variables,
    )
