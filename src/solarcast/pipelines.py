"""Forecast and summary pipelines: fetch, then reduce."""

from typing import Protocol

import structlog

from solarcast.aggregation import aggregate_day, summarize_period
from solarcast.config import Settings
from solarcast.energy import estimate_energy
from solarcast.errors import DataUnavailableError
from solarcast.models import (
    Coordinate,
    DailyForecast,
    ForecastSeries,
    PeriodSummary,
    SummarySeries,
)
from solarcast.windowing import FORECAST_DAYS, HOURS_PER_DAY, daily_value, window_days, zip_hourly

log = structlog.get_logger()


class SeriesFetcher(Protocol):
    def fetch_forecast_series(self, coordinate: Coordinate) -> ForecastSeries: ...

    def fetch_summary_series(self, coordinate: Coordinate) -> SummarySeries: ...


def forecast_from_series(
    series: ForecastSeries, settings: Settings | None = None
) -> list[DailyForecast]:
    """Reduce forecast series into one DailyForecast per day.

    A day whose daylight duration is missing from the daily series is left
    out; the remaining days are still returned.

    Raises:
        DataUnavailableError: If the hourly arrays do not line up with the timeline
    """
    settings = settings or Settings()
    hourly, daily = series.hourly, series.daily

    samples = zip_hourly(
        hourly.timeline(),
        hourly.values("temperature_2m"),
        hourly.values("weather_code"),
    )
    daylight = daily.values("daylight_duration")

    days = []
    for index, bucket in enumerate(window_days(samples, HOURS_PER_DAY, FORECAST_DAYS)):
        try:
            daylight_seconds = daily_value(daylight, index)
        except DataUnavailableError:
            log.warning("daily_value_missing", day=index, daily_length=len(daylight))
            continue

        day, code, min_temp, max_temp = aggregate_day(bucket)
        days.append(
            DailyForecast(
                day=day,
                code=code,
                min_temp=min_temp,
                max_temp=max_temp,
                generated_energy=estimate_energy(
                    daylight_seconds,
                    installed_power_kw=settings.installed_power_kw,
                    efficiency=settings.panel_efficiency,
                ),
            )
        )

    return days


def build_forecast(
    coordinate: Coordinate, client: SeriesFetcher, settings: Settings | None = None
) -> list[DailyForecast]:
    """Fetch forecast series for a coordinate and reduce them to daily entries."""
    series = client.fetch_forecast_series(coordinate)
    days = forecast_from_series(series, settings)
    log.info("forecast_built", days=len(days))
    return days


def build_summary(coordinate: Coordinate, client: SeriesFetcher) -> PeriodSummary:
    """Fetch summary series for a coordinate and reduce them to a PeriodSummary."""
    series = client.fetch_summary_series(coordinate)
    summary = summarize_period(series)
    log.info("summary_built", weather_summary=summary.weather_summary.value)
    return summary
