"""Series fetching from weather APIs."""

from solarcast.ingestion.weather import WeatherClient

__all__ = ["WeatherClient"]
