"""Typed models for locations and normalized daily forecasts."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """A named point on the map; coordinates are passed upstream unchecked."""

    name: str
    state: str = ""
    country: str
    lat: float
    lon: float


class NormalizedForecast(BaseModel):
    """One calendar day of forecast data in provider-independent form."""

    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(description="Start of the forecast day, epoch seconds")
    min_temp: float = Field(description="Minimum temperature, degrees Celsius")
    max_temp: float = Field(description="Maximum temperature, degrees Celsius")
    avg_temp: float = Field(description="Average/day temperature, degrees Celsius")
    condition: str
