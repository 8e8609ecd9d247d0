"""Reductions over day buckets and whole periods."""

from collections.abc import Sequence
from datetime import date

from solarcast.errors import AggregationError, DataUnavailableError
from solarcast.models import (
    HourlySample,
    PeriodSummary,
    RawSeries,
    SummarySeries,
    TemperatureExtremes,
    WeatherSummary,
)

SECONDS_PER_HOUR = 3600


def mean(values: Sequence[float], name: str = "series") -> float:
    if not values:
        raise AggregationError(f"Cannot average empty {name}")
    return sum(values) / len(values)


def extremes(values: Sequence[float], name: str = "series") -> tuple[float, float]:
    """Return (min, max) of a non-empty series."""
    if not values:
        raise AggregationError(f"Cannot take extremes of empty {name}")
    return min(values), max(values)


def count_positive(values: Sequence[float]) -> int:
    return sum(1 for v in values if v > 0)


def aggregate_day(bucket: Sequence[HourlySample]) -> tuple[date, int, float, float]:
    """Reduce one day bucket to (date, code, min_temp, max_temp).

    The weather code is taken from the first hour of the bucket, not the most
    frequent one.
    """
    if not bucket:
        raise AggregationError("Cannot aggregate an empty day bucket")

    first = bucket[0]
    min_temp, max_temp = extremes([s.temperature for s in bucket], "day bucket")
    return first.timestamp.date(), first.weather_code, min_temp, max_temp


def classify_precipitation(rain_count: int, snow_count: int, total_days: int) -> WeatherSummary:
    """Classify a period from counts of wet hours.

    Counts are hourly while ``total_days`` is the length of the daily series,
    so the majority threshold is half the number of days. Equal counts always
    give no precipitation.
    """
    threshold = total_days / 2

    if snow_count > rain_count and snow_count > threshold:
        return WeatherSummary.SNOW
    if rain_count > snow_count and rain_count > threshold:
        return WeatherSummary.RAIN
    return WeatherSummary.NO_PRECIPITATION


def aligned_values(series: RawSeries, name: str, steps: int) -> list[float]:
    """Return a variable's samples, checked against the timeline length.

    Raises:
        DataUnavailableError: If the variable is missing or its length differs
    """
    values = series.values(name)
    if len(values) != steps:
        raise DataUnavailableError(
            f"Variable '{name}' has {len(values)} values for a {steps}-step timeline"
        )
    return values


def summarize_period(series: SummarySeries) -> PeriodSummary:
    """Reduce the whole hourly and daily series into a PeriodSummary.

    Raises:
        DataUnavailableError: If a required variable or the daily timeline is
            missing, or a variable does not line up with its timeline
        AggregationError: If a series to be reduced is empty
    """
    hourly, daily = series.hourly, series.daily
    hours = len(hourly.timeline())
    days = daily.timeline()

    pressure_values = aligned_values(hourly, "surface_pressure", hours)
    temperatures = aligned_values(hourly, "temperature_2m", hours)
    rain = aligned_values(hourly, "rain", hours)
    snowfall = aligned_values(hourly, "snowfall", hours)
    sunshine = aligned_values(daily, "sunshine_duration", len(days))

    pressure = mean(pressure_values, "surface_pressure")
    sunshine_hours = mean(sunshine, "sunshine_duration") / SECONDS_PER_HOUR
    min_temp, max_temp = extremes(temperatures, "temperature_2m")

    summary = classify_precipitation(
        rain_count=count_positive(rain),
        snow_count=count_positive(snowfall),
        total_days=len(sunshine),
    )

    if not days:
        raise DataUnavailableError("Daily timeline is empty")
    first_day = days[0].date().isoformat()
    last_day = days[-1].date().isoformat()

    return PeriodSummary(
        date_range=f"{first_day} - {last_day}",
        average_pressure=round(pressure, 2),
        average_sunshine_hours=round(sunshine_hours, 2),
        extreme_temperatures=TemperatureExtremes(min_temp=min_temp, max_temp=max_temp),
        weather_summary=summary,
    )
