"""Service facade exposing provider listing, location search and forecasts."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from .exceptions import (
    INTERNAL,
    INVALID_ARGUMENT,
    ErrorKind,
    ForecastError,
    LocationSearchError,
    ServiceError,
)
from .forecast.models import Location, NormalizedForecast
from .forecast.orchestrator import ForecastOrchestrator
from .forecast.registry import ProviderRegistry
from .locations import LocationSearchClient

if TYPE_CHECKING:
    from .config import Settings

_STATUS_FOR_KIND: dict[ErrorKind, int] = {
    INVALID_ARGUMENT: httpx.codes.BAD_REQUEST,
    INTERNAL: httpx.codes.INTERNAL_SERVER_ERROR,
}


def status_for(kind: ErrorKind) -> int:
    """Map a forecast error kind onto a transport status code."""
    return int(_STATUS_FOR_KIND[kind])


class WeatherService:
    """Request/response boundary over the forecast core.

    ``ProviderURLError`` is not translated here: an adapter that cannot build
    a valid URL is a defect and propagates to whoever hosts the service.
    """

    def __init__(
        self,
        settings: Settings,
        logger: logging.Logger,
        *,
        orchestrator: ForecastOrchestrator | None = None,
        location_search: LocationSearchClient | None = None,
    ) -> None:
        self.logger = logger
        credentials = settings.credentials()
        self.orchestrator = orchestrator or ForecastOrchestrator(
            registry=ProviderRegistry(credentials),
            settings=settings,
            logger=logger,
        )
        self.location_search = location_search or LocationSearchClient(
            api_key=credentials.openweathermap,
            settings=settings,
            logger=logger,
        )

    def __enter__(self) -> WeatherService:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        self.orchestrator.close()
        self.location_search.close()

    def list_providers(self) -> list[str]:
        registry = self.orchestrator.registry
        return [registry.render(provider) for provider in registry.list()]

    def search_locations(self, query: str) -> list[Location]:
        try:
            return self.location_search.search(query)
        except LocationSearchError as exc:
            self.logger.error("Location search failure: %s", exc)
            raise ServiceError(str(exc), status_code=status_for(INTERNAL)) from exc

    def get_forecast(
        self, provider: str, location: Location, date_text: str
    ) -> NormalizedForecast:
        try:
            return self.orchestrator.resolve(provider, location, date_text)
        except ForecastError as exc:
            self.logger.warning("Forecast request failed (%s): %s", exc.kind, exc.message)
            raise ServiceError(
                f"An error occurred when performing forecast request: {exc.message}.",
                status_code=status_for(exc.kind),
            ) from exc
