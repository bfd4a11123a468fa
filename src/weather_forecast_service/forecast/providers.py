"""Provider identities and the credentials handed to their adapters."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import InvalidProviderName


class ProviderName(StrEnum):
    """Closed set of forecast providers, in advertised order."""

    OPENWEATHERMAP = "OpenWeatherMap"
    WEATHERAPI = "WeatherApi"

    @classmethod
    def all(cls) -> list[ProviderName]:
        return list(cls)

    @classmethod
    def parse(cls, name: str) -> ProviderName:
        """Exact, case-sensitive lookup by canonical name."""
        for provider in cls:
            if provider.value == name:
                return provider
        raise InvalidProviderName(f"Unknown weather provider: {name!r}")

    def render(self) -> str:
        return self.value


class ProviderCredentials(BaseModel):
    """API keys for every provider, built once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    openweathermap: str = Field(repr=False)
    weatherapi: str = Field(repr=False)

    def for_provider(self, provider: ProviderName) -> str:
        if provider is ProviderName.OPENWEATHERMAP:
            return self.openweathermap
        if provider is ProviderName.WEATHERAPI:
            return self.weatherapi
        raise InvalidProviderName(f"No credential slot for provider {provider!r}")
