"""Typed settings loader for the weather forecast service."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError
from .forecast.providers import ProviderCredentials


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    openweathermap_authorization: str = Field(
        alias="OPENWEATHERMAP_AUTHORIZATION", repr=False
    )
    weather_api_authorization: str = Field(alias="WEATHER_API_AUTHORIZATION", repr=False)

    weather_timeout_seconds: float = Field(default=15.0, alias="WEATHER_TIMEOUT_SECONDS")
    location_search_limit: int = Field(default=5, alias="LOCATION_SEARCH_LIMIT")
    user_agent: str = Field(
        default="weather-forecast-service/0.1",
        alias="WEATHER_USER_AGENT",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", alias="LOG_LEVEL"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def validate_values(self) -> Settings:
        """Reject blank credentials and out-of-range numeric settings."""
        if not self.openweathermap_authorization.strip():
            raise ValueError("OPENWEATHERMAP_AUTHORIZATION must not be empty.")
        if not self.weather_api_authorization.strip():
            raise ValueError("WEATHER_API_AUTHORIZATION must not be empty.")
        if self.weather_timeout_seconds <= 0:
            raise ValueError("WEATHER_TIMEOUT_SECONDS must be > 0.")
        # The OpenWeatherMap geocoder caps results at five.
        if not (1 <= self.location_search_limit <= 5):
            raise ValueError("LOCATION_SEARCH_LIMIT must be between 1 and 5.")
        if not self.user_agent.strip():
            raise ValueError("WEATHER_USER_AGENT must not be empty.")
        return self

    def credentials(self) -> ProviderCredentials:
        return ProviderCredentials(
            openweathermap=self.openweathermap_authorization.strip(),
            weatherapi=self.weather_api_authorization.strip(),
        )

    def safe_summary(self) -> dict[str, Any]:
        """Return config summary safe for logging (no credentials)."""
        return {
            "weather_timeout_seconds": self.weather_timeout_seconds,
            "location_search_limit": self.location_search_limit,
            "user_agent": self.user_agent,
            "log_level": self.log_level,
        }


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc
