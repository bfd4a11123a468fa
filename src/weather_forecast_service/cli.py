"""Command-line boundary: list providers, search locations, fetch a forecast."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from datetime import UTC, datetime

from rich.console import Console
from rich.table import Table

from .config import load_settings
from .exceptions import ConfigError, ProviderURLError, ServiceError
from .forecast.models import Location, NormalizedForecast
from .log_setup import setup_logger
from .service import WeatherService

EXIT_OK = 0
EXIT_CONFIG = 2
EXIT_INVALID_ARGUMENT = 3
EXIT_INTERNAL = 4
EXIT_DEFECT = 70


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        description="Daily weather forecasts from several third-party providers."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("providers", help="List the supported forecast providers.")

    locations = commands.add_parser("locations", help="Search locations by name.")
    locations.add_argument("query", help='Usually "City,State,Country"; parts may be omitted.')

    forecast = commands.add_parser("forecast", help="Fetch the forecast for one day.")
    forecast.add_argument("--provider", required=True, help="Provider name, e.g. OpenWeatherMap.")
    forecast.add_argument("--lat", type=float, required=True, help="Latitude.")
    forecast.add_argument("--lon", type=float, required=True, help="Longitude.")
    forecast.add_argument("--date", required=True, help="Forecast date as mm.dd.yyyy.")
    forecast.add_argument("--name", default="", help="Location name (display only).")
    forecast.add_argument("--state", default="", help="Location state (display only).")
    forecast.add_argument("--country", default="", help="Location country (display only).")
    return parser.parse_args(argv)


def exit_code_for_status(status_code: int) -> int:
    if 400 <= status_code < 500:
        return EXIT_INVALID_ARGUMENT
    return EXIT_INTERNAL


def _print_locations(console: Console, locations: list[Location]) -> None:
    if not locations:
        console.print("No locations found.")
        return

    table = Table(title="Locations")
    table.add_column("Name", overflow="fold")
    table.add_column("State", overflow="fold")
    table.add_column("Country")
    table.add_column("Lat")
    table.add_column("Lon")
    for location in locations:
        table.add_row(
            location.name,
            location.state or "-",
            location.country,
            f"{location.lat:g}",
            f"{location.lon:g}",
        )
    console.print(table)


def _print_forecast(
    console: Console, provider: str, location: Location, forecast: NormalizedForecast
) -> None:
    day = datetime.fromtimestamp(forecast.timestamp, UTC).date().isoformat()
    place = location.name or f"({location.lat:g}, {location.lon:g})"
    table = Table(title=f"{provider} forecast for {place} on {day}")
    table.add_column("Min °C")
    table.add_column("Max °C")
    table.add_column("Avg °C")
    table.add_column("Condition", overflow="fold")
    table.add_row(
        f"{forecast.min_temp:g}",
        f"{forecast.max_temp:g}",
        f"{forecast.avg_temp:g}",
        forecast.condition,
    )
    console.print(table)


def run(args: argparse.Namespace, service: WeatherService, console: Console) -> int:
    """Dispatch one parsed command against ``service``."""
    if args.command == "providers":
        for name in service.list_providers():
            console.print(name)
        return EXIT_OK

    if args.command == "locations":
        _print_locations(console, service.search_locations(args.query))
        return EXIT_OK

    location = Location(
        name=args.name,
        state=args.state,
        country=args.country,
        lat=args.lat,
        lon=args.lon,
    )
    forecast = service.get_forecast(args.provider, location, args.date)
    _print_forecast(console, args.provider, location, forecast)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Run one CLI command and return the process exit code."""
    args = parse_args(argv)
    logger = setup_logger()
    console = Console()

    try:
        settings = load_settings()
    except ConfigError as exc:
        logger.error("Configuration failure: %s", exc)
        return EXIT_CONFIG
    logger.setLevel(settings.log_level)
    logger.debug("Loaded settings: %s", settings.safe_summary())

    with WeatherService(settings=settings, logger=logger) as service:
        try:
            return run(args, service, console)
        except ServiceError as exc:
            console.print(str(exc), style="red", markup=False, highlight=False)
            return exit_code_for_status(exc.status_code)
        except ProviderURLError as exc:
            logger.critical("Forecast adapter defect: %s", exc)
            return EXIT_DEFECT


if __name__ == "__main__":
    sys.exit(main())
