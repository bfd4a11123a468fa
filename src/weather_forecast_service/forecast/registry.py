"""Provider registry: name lookup and adapter dispatch."""

from __future__ import annotations

from .base import ForecastAdapter
from .openweathermap import OpenWeatherMapAdapter
from .providers import ProviderCredentials, ProviderName
from .weatherapi import WeatherApiAdapter

_ADAPTER_TYPES: dict[ProviderName, type[ForecastAdapter]] = {
    ProviderName.OPENWEATHERMAP: OpenWeatherMapAdapter,
    ProviderName.WEATHERAPI: WeatherApiAdapter,
}


class ProviderRegistry:
    """Holds one adapter per known provider, keyed by ``ProviderName``."""

    def __init__(self, credentials: ProviderCredentials) -> None:
        self._adapters: dict[ProviderName, ForecastAdapter] = {
            provider: _ADAPTER_TYPES[provider](credentials.for_provider(provider))
            for provider in ProviderName.all()
        }

    @staticmethod
    def list() -> list[ProviderName]:
        return ProviderName.all()

    @staticmethod
    def parse(name: str) -> ProviderName:
        return ProviderName.parse(name)

    @staticmethod
    def render(provider: ProviderName) -> str:
        return provider.render()

    def resolve(self, provider: ProviderName) -> ForecastAdapter:
        return self._adapters[provider]
