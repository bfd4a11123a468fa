"""Location search backed by the OpenWeatherMap direct geocoding API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .exceptions import LocationSearchError
from .forecast.models import Location
from .redaction import sanitize_text

if TYPE_CHECKING:
    from .config import Settings

GEOCODING_URL = "http://api.openweathermap.org/geo/1.0/direct"


class _GeoItem(BaseModel):
    name: str
    state: str = ""
    country: str
    lat: float
    lon: float


_GEO_REPLY = TypeAdapter(list[_GeoItem])


class LocationSearchClient:
    """Looks up candidate locations for a free-text "City,State,Country" query."""

    def __init__(
        self,
        api_key: str,
        settings: Settings,
        logger: logging.Logger,
        client: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self.settings = settings
        self.logger = logger
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=settings.weather_timeout_seconds,
            headers={
                "Accept": "application/json",
                "User-Agent": settings.user_agent,
            },
        )

    def __enter__(self) -> LocationSearchClient:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def search(self, query: str) -> list[Location]:
        """Return matching locations; an empty list when nothing matches."""
        params = {
            "q": query,
            "limit": self.settings.location_search_limit,
            "appid": self._api_key,
        }
        try:
            response = self._client.get(GEOCODING_URL, params=params)
        except httpx.HTTPError as exc:
            raise LocationSearchError(
                f"Location search request failed: {sanitize_text(str(exc))}"
            ) from exc

        if response.status_code != httpx.codes.OK:
            raise LocationSearchError(
                f"Location search failed with status {response.status_code}: "
                f"{sanitize_text(response.text[:300])}"
            )

        try:
            items = _GEO_REPLY.validate_json(response.content)
        except ValidationError as exc:
            raise LocationSearchError(
                f"Location search returned malformed payload: {exc}"
            ) from exc

        self.logger.info("Location search for %r matched %d places", query, len(items))
        return [
            Location(
                name=item.name,
                state=item.state,
                country=item.country,
                lat=item.lat,
                lon=item.lon,
            )
            for item in items
        ]
