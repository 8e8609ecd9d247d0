"""Data models for the solarcast pipelines."""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from solarcast.errors import DataUnavailableError
from solarcast.timeline import materialize


class WeatherSummary(str, Enum):
    """Categorical precipitation summary for a period."""

    NO_PRECIPITATION = "no precipitation"
    SNOW = "snow"
    RAIN = "rain"


class Coordinate(BaseModel):
    """Validated point on the globe."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(ge=-180, le=180, allow_inf_nan=False)


class RawSeries(BaseModel):
    """One provider series block (hourly or daily) with named variables."""

    model_config = ConfigDict(frozen=True)

    start_epoch: int
    end_epoch: int
    interval_seconds: int
    utc_offset_seconds: int = 0
    variables: dict[str, list[float]] = Field(default_factory=dict)

    def timeline(self) -> list[datetime]:
        return materialize(
            self.start_epoch,
            self.end_epoch,
            self.interval_seconds,
            self.utc_offset_seconds,
        )

    def values(self, name: str) -> list[float]:
        """Return the samples for a variable.

        Raises:
            DataUnavailableError: If the provider did not return the variable
        """
        try:
            return self.variables[name]
        except KeyError:
            raise DataUnavailableError(f"Variable '{name}' is unavailable") from None


class ForecastSeries(BaseModel):
    """Series backing the 7-day forecast.

    Hourly: temperature_2m, weather_code. Daily: daylight_duration.
    """

    hourly: RawSeries
    daily: RawSeries


class SummarySeries(BaseModel):
    """Series backing the period summary.

    Hourly: temperature_2m, relative_humidity_2m, precipitation_probability,
    precipitation, rain, snowfall, surface_pressure. Daily: sunshine_duration.
    """

    hourly: RawSeries
    daily: RawSeries


class HourlySample(BaseModel):
    """Single hour of the forecast, zipped from the timeline and value arrays."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    temperature: float
    weather_code: int


class DailyForecast(BaseModel):
    """One day of the forecast."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    day: date = Field(alias="date")
    code: int
    min_temp: float = Field(alias="minTemp")
    max_temp: float = Field(alias="maxTemp")
    generated_energy: float = Field(ge=0, alias="generatedEnergy")

    @model_validator(mode="after")
    def _check_order(self) -> "DailyForecast":
        if self.max_temp < self.min_temp:
            raise ValueError("max_temp must not be below min_temp")
        return self


class TemperatureExtremes(BaseModel):
    """Lowest and highest temperature over a period."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    min_temp: float = Field(alias="minTemp")
    max_temp: float = Field(alias="maxTemp")

    @model_validator(mode="after")
    def _check_order(self) -> "TemperatureExtremes":
        if self.max_temp < self.min_temp:
            raise ValueError("max_temp must not be below min_temp")
        return self


class PeriodSummary(BaseModel):
    """Multi-day weather summary."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date_range: str = Field(alias="dateRange")
    average_pressure: float = Field(alias="averagePressure")
    average_sunshine_hours: float = Field(alias="averageSunshineHours")
    extreme_temperatures: TemperatureExtremes = Field(alias="extremeTemperatures")
    weather_summary: WeatherSummary = Field(alias="weatherSummary")
