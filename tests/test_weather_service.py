"""Service facade: operation wiring and error-kind to status mapping."""

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import httpx
import pytest

from weather_forecast_service.exceptions import (
    INTERNAL,
    INVALID_ARGUMENT,
    ProviderURLError,
    ServiceError,
)
from weather_forecast_service.forecast.models import Location
from weather_forecast_service.forecast.orchestrator import ForecastOrchestrator
from weather_forecast_service.forecast.providers import ProviderCredentials
from weather_forecast_service.forecast.registry import ProviderRegistry
from weather_forecast_service.locations import LocationSearchClient
from weather_forecast_service.service import WeatherService, status_for

FIXTURES = Path(__file__).parent / "fixtures"


def _settings(**overrides: Any) -> SimpleNamespace:
    credentials = ProviderCredentials(openweathermap="owm-key", weatherapi="wa-key")
    payload: dict[str, Any] = {
        "weather_timeout_seconds": 5.0,
        "user_agent": "weather-forecast-service-tests/0.1",
        "location_search_limit": 5,
        "credentials": lambda: credentials,
    }
    payload.update(overrides)
    return SimpleNamespace(**payload)


def _service(handler: Any) -> WeatherService:
    settings = _settings()
    logger = logging.getLogger("test.service")
    client = httpx.Client(transport=httpx.MockTransport(handler))
    orchestrator = ForecastOrchestrator(
        registry=ProviderRegistry(settings.credentials()),
        settings=settings,
        logger=logger,
        client=client,
    )
    location_search = LocationSearchClient(
        api_key="owm-key", settings=settings, logger=logger, client=client
    )
    return WeatherService(
        settings=settings,
        logger=logger,
        orchestrator=orchestrator,
        location_search=location_search,
    )


def _location(**overrides: Any) -> Location:
    values: dict[str, Any] = {
        "name": "Name",
        "state": "State",
        "country": "Country",
        "lat": 2.2,
        "lon": 1.1,
    }
    values.update(overrides)
    return Location(**values)


def test_status_for_maps_kinds_to_client_and_server_errors() -> None:
    assert status_for(INVALID_ARGUMENT) == 400
    assert status_for(INTERNAL) == 500


def test_list_providers_renders_registry_names() -> None:
    service = _service(lambda request: httpx.Response(200))
    assert service.list_providers() == ["OpenWeatherMap", "WeatherApi"]


def test_get_forecast_returns_normalized_day() -> None:
    body = (FIXTURES / "openweathermap_onecall.json").read_text(encoding="utf-8")
    service = _service(lambda request: httpx.Response(200, text=body))

    forecast = service.get_forecast("OpenWeatherMap", _location(), "01.01.2000")
    assert forecast.timestamp == 946684800
    assert forecast.condition == "Sky is clear, warm and good"


def test_get_forecast_wrong_date_format_maps_to_400() -> None:
    service = _service(lambda request: httpx.Response(200))
    with pytest.raises(ServiceError) as excinfo:
        service.get_forecast("OpenWeatherMap", _location(), "01/01/2000")
    assert excinfo.value.status_code == 400
    assert str(excinfo.value).startswith("An error occurred when performing forecast request:")


def test_get_forecast_unknown_provider_maps_to_400() -> None:
    service = _service(lambda request: httpx.Response(200))
    with pytest.raises(ServiceError) as excinfo:
        service.get_forecast("openweathermap", _location(), "01.01.2000")
    assert excinfo.value.status_code == 400
    assert "Invalid weather provider" in str(excinfo.value)


def test_get_forecast_rejected_location_maps_to_400() -> None:
    body = '{"cod":"400","message":"wrong latitude"}'
    service = _service(lambda request: httpx.Response(400, text=body))
    with pytest.raises(ServiceError) as excinfo:
        service.get_forecast("OpenWeatherMap", _location(lat=240.0, lon=240.0), "01.01.2000")
    assert excinfo.value.status_code == 400
    assert "wrong latitude" in str(excinfo.value)


def test_get_forecast_upstream_failure_maps_to_500() -> None:
    service = _service(lambda request: httpx.Response(502, text="bad gateway"))
    with pytest.raises(ServiceError) as excinfo:
        service.get_forecast("WeatherApi", _location(), "01.01.2000")
    assert excinfo.value.status_code == 500
    assert "bad gateway" in str(excinfo.value)


def test_adapter_defect_is_not_translated() -> None:
    service = _service(lambda request: httpx.Response(200))
    broken = service.orchestrator.registry.resolve(service.orchestrator.registry.parse("WeatherApi"))
    broken.build_url = lambda location: "not a url"  # type: ignore[method-assign]

    with pytest.raises(ProviderURLError):
        service.get_forecast("WeatherApi", _location(), "01.01.2000")


def test_search_locations_passes_results_through() -> None:
    body = (FIXTURES / "geocoding_direct.json").read_text(encoding="utf-8")
    service = _service(lambda request: httpx.Response(200, text=body))
    locations = service.search_locations("London")
    assert [location.country for location in locations] == ["GB", "CA", "XX"]


def test_search_locations_failure_maps_to_500() -> None:
    service = _service(lambda request: httpx.Response(503, text="unavailable"))
    with pytest.raises(ServiceError) as excinfo:
        service.search_locations("London")
    assert excinfo.value.status_code == 500
