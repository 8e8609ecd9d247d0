"""Command-line interface for the solarcast pipelines."""

import json
from typing import NoReturn

import httpx
import structlog
import typer
from rich.console import Console
from rich.table import Table

from solarcast.config import Settings
from solarcast.errors import DataUnavailableError, ValidationError
from solarcast.formatting import format_forecast, format_summary
from solarcast.ingestion import WeatherClient
from solarcast.pipelines import build_forecast, build_summary
from solarcast.validation import parse_coordinate
from solarcast.weather_codes import describe

# Configure structured logging
structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(),
    ]
)

app = typer.Typer(
    name="solarcast",
    help="Weather forecast, PV yield estimate and period summary for a coordinate",
    no_args_is_help=True,
)
console = Console()


def _client(settings: Settings) -> WeatherClient:
    return WeatherClient(
        base_url=settings.forecast_url,
        timeout=settings.http_timeout,
        forecast_days=settings.forecast_days,
    )


def _fail(message: str) -> NoReturn:
    console.print(f"[bold red]{message}[/bold red]")
    raise typer.Exit(code=1)


@app.command()
def forecast(
    latitude: str = typer.Option(..., help="Latitude in degrees (-90 to 90)"),
    longitude: str = typer.Option(..., help="Longitude in degrees (-180 to 180)"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON payload"),
) -> None:
    """Show the daily forecast with estimated PV energy."""
    settings = Settings.from_env()

    try:
        coordinate = parse_coordinate(latitude, longitude)
        with _client(settings) as client:
            days = build_forecast(coordinate, client, settings)
    except (ValidationError, DataUnavailableError) as e:
        _fail(str(e))
    except httpx.HTTPError:
        _fail("Failed to fetch weather data")

    if as_json:
        console.print_json(json.dumps(format_forecast(days)))
        return

    table = Table(title=f"Forecast for {coordinate.latitude}, {coordinate.longitude}")
    table.add_column("Date", style="cyan")
    table.add_column("Weather")
    table.add_column("Min °C", justify="right")
    table.add_column("Max °C", justify="right")
    table.add_column("Energy kWh", justify="right", style="bold")

    for day in days:
        table.add_row(
            day.day.isoformat(),
            describe(day.code),
            f"{day.min_temp:.1f}",
            f"{day.max_temp:.1f}",
            f"{day.generated_energy:,.2f}",
        )

    console.print(table)


@app.command()
def summary(
    latitude: str = typer.Option(..., help="Latitude in degrees (-90 to 90)"),
    longitude: str = typer.Option(..., help="Longitude in degrees (-180 to 180)"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON payload"),
) -> None:
    """Show the weather summary over the forecast period."""
    settings = Settings.from_env()

    try:
        coordinate = parse_coordinate(latitude, longitude)
        with _client(settings) as client:
            result = build_summary(coordinate, client)
    except (ValidationError, DataUnavailableError) as e:
        _fail(str(e))
    except httpx.HTTPError:
        _fail("Failed to fetch weather data")

    if as_json:
        console.print_json(json.dumps(format_summary(result)))
        return

    extremes = result.extreme_temperatures
    console.print(f"[bold]Weather summary {result.date_range}[/bold]\n")
    console.print(f"Average pressure:  {result.average_pressure:.2f} hPa")
    console.print(f"Average sunshine:  {result.average_sunshine_hours:.2f} h")
    console.print(f"Temperature range: {extremes.min_temp:.1f} °C to {extremes.max_temp:.1f} °C")
    console.print(f"Precipitation:     {result.weather_summary.value}")


if __name__ == "__main__":
    app()
