"""
FastAPI application exposing the forecast and summary pipelines.

Routes:
- GET /api/forecast: 7-day forecast with estimated PV yield
- GET /api/summary: period summary (pressure, sunshine, extremes, precipitation)

Errors are returned as ``{"error": message}`` with 400 for invalid
coordinates, 404 for unavailable weather data and 500 for anything else.
"""

from collections.abc import Callable, Generator
from typing import Annotated, Any

import httpx
import structlog
from fastapi import Depends, FastAPI, Query
from fastapi.responses import JSONResponse

from solarcast.config import Settings
from solarcast.errors import DataUnavailableError, ValidationError
from solarcast.formatting import format_forecast, format_summary
from solarcast.ingestion import WeatherClient
from solarcast.pipelines import build_forecast, build_summary
from solarcast.validation import parse_coordinate

structlog.configure(
    processors=[
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(),
    ]
)

log = structlog.get_logger()


def get_settings() -> Settings:
    return Settings.from_env()


def get_weather_client(
    settings: Annotated[Settings, Depends(get_settings)],
) -> Generator[WeatherClient, None, None]:
    """Yield a per-request weather client, closed when the request ends."""
    with WeatherClient(
        base_url=settings.forecast_url,
        timeout=settings.http_timeout,
        forecast_days=settings.forecast_days,
    ) as client:
        yield client


app = FastAPI(
    title="Solarcast API",
    description="Daily weather forecast with PV yield estimates and period summaries.",
    version="0.1.0",
)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _respond(endpoint: str, produce: Callable[[], dict[str, Any]]) -> Any:
    """Run a pipeline and map its failures onto HTTP responses."""
    try:
        return produce()
    except ValidationError as e:
        log.info("request_rejected", endpoint=endpoint, reason=str(e))
        return _error(400, str(e))
    except DataUnavailableError as e:
        log.warning("weather_unavailable", endpoint=endpoint, reason=str(e))
        return _error(404, str(e))
    except httpx.HTTPError as e:
        log.error("weather_fetch_failed", endpoint=endpoint, error=str(e))
        return _error(500, "Failed to fetch weather data")
    except Exception:
        log.exception("request_failed", endpoint=endpoint)
        return _error(500, "Internal server error")


@app.get("/")
def root() -> dict:
    return {"status": "ok"}


@app.get("/api/forecast", response_model=None)
def forecast(
    client: Annotated[WeatherClient, Depends(get_weather_client)],
    settings: Annotated[Settings, Depends(get_settings)],
    latitude: Annotated[str | None, Query()] = None,
    longitude: Annotated[str | None, Query()] = None,
) -> Any:
    """Daily forecast for the next days at a coordinate."""

    def produce() -> dict[str, Any]:
        coordinate = parse_coordinate(latitude, longitude)
        return format_forecast(build_forecast(coordinate, client, settings))

    return _respond("forecast", produce)


@app.get("/api/summary", response_model=None)
def summary(
    client: Annotated[WeatherClient, Depends(get_weather_client)],
    latitude: Annotated[str | None, Query()] = None,
    longitude: Annotated[str | None, Query()] = None,
) -> Any:
    """Weather summary over the forecast period at a coordinate."""

    def produce() -> dict[str, Any]:
        coordinate = parse_coordinate(latitude, longitude)
        return format_summary(build_summary(coordinate, client))

    return _respond("summary", produce)
