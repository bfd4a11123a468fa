"""Turns a (provider, location, date) request into one normalized forecast."""

from __future__ import annotations

import logging
import re
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING, Any

import httpx

from ..exceptions import (
    INTERNAL,
    INVALID_ARGUMENT,
    ForecastError,
    InvalidProviderName,
    ProviderURLError,
)
from ..redaction import sanitize_text
from .base import ForecastAdapter
from .models import Location, NormalizedForecast
from .registry import ProviderRegistry

if TYPE_CHECKING:
    from ..config import Settings

DATE_FORMAT = "%m.%d.%Y"
DATE_NOT_FOUND_MESSAGE = (
    "Can't find forecast for specified date. "
    "Make sure that you use the format mm.dd.yyyy and do not specify a past date."
)

# strptime alone accepts unpadded fields such as "1.5.2024".
_DATE_TEXT_RE = re.compile(r"[0-9]{2}\.[0-9]{2}\.[0-9]{4}")


def parse_requested_date(date_text: str) -> date:
    """Parse ``mm.dd.yyyy`` or raise an ``invalid_argument`` ForecastError."""
    if not isinstance(date_text, str) or not _DATE_TEXT_RE.fullmatch(date_text):
        raise ForecastError(DATE_NOT_FOUND_MESSAGE, kind=INVALID_ARGUMENT)
    try:
        return datetime.strptime(date_text, DATE_FORMAT).date()
    except ValueError as exc:
        raise ForecastError(DATE_NOT_FOUND_MESSAGE, kind=INVALID_ARGUMENT) from exc


def checked_url(url: str) -> httpx.URL:
    """Return ``url`` as an ``httpx.URL`` or raise ``ProviderURLError``."""
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise ProviderURLError(
            f"There was a problem parsing the url: {sanitize_text(url)}"
        ) from exc
    if parsed.scheme not in {"http", "https"} or not parsed.host:
        raise ProviderURLError(f"There was a problem parsing the url: {sanitize_text(url)}")
    return parsed


def _utc_date(timestamp: int) -> date:
    try:
        return datetime.fromtimestamp(timestamp, UTC).date()
    except (OverflowError, OSError, ValueError) as exc:
        raise ForecastError(
            f"Provider returned an out-of-range forecast timestamp: {timestamp}",
            kind=INTERNAL,
        ) from exc


class ForecastOrchestrator:
    """Resolves adapters, performs the single HTTP exchange and picks the day.

    No retries are attempted: every failure is reported to the caller as a
    ``ForecastError`` whose ``kind`` tells who has to act on it.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        settings: Settings,
        logger: logging.Logger,
        client: httpx.Client | None = None,
    ) -> None:
        self.registry = registry
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

    def __enter__(self) -> ForecastOrchestrator:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def resolve(
        self, provider_name: str, location: Location, date_text: str
    ) -> NormalizedForecast:
        """Return the forecast for ``date_text`` from the named provider."""
        requested_date = parse_requested_date(date_text)
        try:
            provider = self.registry.parse(provider_name)
        except InvalidProviderName as exc:
            raise ForecastError(
                f"Invalid weather provider passed: {provider_name!r}.",
                kind=INVALID_ARGUMENT,
            ) from exc
        adapter = self.registry.resolve(provider)
        return self.fetch(adapter, location, requested_date)

    def fetch(
        self, adapter: ForecastAdapter, location: Location, requested_date: date
    ) -> NormalizedForecast:
        """Run the request/parse/select stages against an already resolved adapter."""
        url = adapter.build_url(location)
        request_url = checked_url(url)
        safe_url = sanitize_text(url)

        self.logger.debug("Requesting %s forecast from %s", adapter.provider, safe_url)
        try:
            response = self._client.get(request_url)
        except httpx.HTTPError as exc:
            self.logger.warning(
                "%s request failed (%s)", adapter.provider, type(exc).__name__
            )
            raise ForecastError(
                f"Unable to make request. {sanitize_text(str(exc))}", kind=INTERNAL
            ) from exc

        status = response.status_code
        if status == httpx.codes.BAD_REQUEST:
            self.logger.warning(
                "%s rejected the request",
                adapter.provider,
                extra={"provider": adapter.provider.render(), "status_code": status},
            )
            raise ForecastError(response.text, kind=INVALID_ARGUMENT)
        if status != httpx.codes.OK:
            self.logger.warning(
                "%s answered with unexpected status",
                adapter.provider,
                extra={"provider": adapter.provider.render(), "status_code": status},
            )
            raise ForecastError(response.text, kind=INTERNAL)

        forecasts = adapter.parse_reply(response.content)
        self.logger.info(
            "%s returned %d forecast days", adapter.provider, len(forecasts)
        )
        return self._take_matching_day(forecasts, requested_date)

    @staticmethod
    def _take_matching_day(
        forecasts: list[NormalizedForecast], requested_date: date
    ) -> NormalizedForecast:
        # First match in provider order wins if a window ever repeats a date.
        for index, forecast in enumerate(forecasts):
            if _utc_date(forecast.timestamp) == requested_date:
                return forecasts.pop(index)
        raise ForecastError(DATE_NOT_FOUND_MESSAGE, kind=INVALID_ARGUMENT)
