"""Split an hourly series into per-day buckets."""

from collections.abc import Sequence
from datetime import datetime

from solarcast.errors import DataUnavailableError
from solarcast.models import HourlySample

HOURS_PER_DAY = 24
FORECAST_DAYS = 7


def zip_hourly(
    timeline: Sequence[datetime],
    temperatures: Sequence[float],
    weather_codes: Sequence[float],
) -> list[HourlySample]:
    """Pair each timestamp with its temperature and weather code.

    Raises:
        DataUnavailableError: If the arrays do not match the timeline length
    """
    if not len(timeline) == len(temperatures) == len(weather_codes):
        raise DataUnavailableError(
            f"Hourly series length mismatch: {len(timeline)} timestamps, "
            f"{len(temperatures)} temperatures, {len(weather_codes)} weather codes"
        )

    return [
        HourlySample(timestamp=ts, temperature=temp, weather_code=int(code))
        for ts, temp, code in zip(timeline, temperatures, weather_codes, strict=True)
    ]


def window_days(
    samples: Sequence[HourlySample],
    bucket_size: int = HOURS_PER_DAY,
    horizon: int = FORECAST_DAYS,
) -> list[list[HourlySample]]:
    """Partition samples into consecutive day buckets.

    Bucket i holds samples [i * bucket_size, (i + 1) * bucket_size). Samples
    past the horizon are dropped and the last bucket may be short, but no
    bucket is ever empty.
    """
    usable = samples[: bucket_size * horizon]
    return [
        list(usable[start : start + bucket_size])
        for start in range(0, len(usable), bucket_size)
    ]


def daily_value(values: Sequence[float], index: int) -> float:
    """Look up the daily-series value paired with bucket ``index``.

    Raises:
        DataUnavailableError: If the daily series has no entry at ``index``
    """
    if not 0 <= index < len(values):
        raise DataUnavailableError(f"No daily value for day {index}")
    return values[index]
