"""Shape pipeline results into response payloads."""

from collections.abc import Sequence
from typing import Any

from solarcast.models import DailyForecast, PeriodSummary


def format_forecast(days: Sequence[DailyForecast]) -> dict[str, Any]:
    return {"data": [day.model_dump(by_alias=True, mode="json") for day in days]}


def format_summary(summary: PeriodSummary) -> dict[str, Any]:
    return {"data": summary.model_dump(by_alias=True, mode="json")}
