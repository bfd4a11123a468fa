"""Forecast resolution: provider adapters, registry and orchestration."""

from .base import ForecastAdapter
from .models import Location, NormalizedForecast
from .openweathermap import OpenWeatherMapAdapter
from .orchestrator import ForecastOrchestrator, parse_requested_date
from .providers import ProviderCredentials, ProviderName
from .registry import ProviderRegistry
from .weatherapi import WeatherApiAdapter

__all__ = [
    "ForecastAdapter",
    "ForecastOrchestrator",
    "Location",
    "NormalizedForecast",
    "OpenWeatherMapAdapter",
    "ProviderCredentials",
    "ProviderName",
    "ProviderRegistry",
    "WeatherApiAdapter",
    "parse_requested_date",
]
