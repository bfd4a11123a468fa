"""OpenWeatherMap One Call adapter."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .base import ForecastAdapter, format_coordinate
from .models import Location, NormalizedForecast
from .providers import ProviderName

ONECALL_URL = "https://api.openweathermap.org/data/2.5/onecall"
UNITS = "metric"
EXCLUDED_BLOCKS = "current,minutely,hourly"


class _Temp(BaseModel):
    model_config = ConfigDict(strict=True)

    min: float
    max: float
    day: float


class _Condition(BaseModel):
    model_config = ConfigDict(strict=True)

    main: str
    description: str


class _Day(BaseModel):
    model_config = ConfigDict(strict=True)

    dt: int
    temp: _Temp
    weather: list[_Condition] = Field(min_length=1)


class _Reply(BaseModel):
    model_config = ConfigDict(strict=True)

    daily: list[_Day]


class OpenWeatherMapAdapter(ForecastAdapter):
    """Reads the ``daily`` block of the One Call API."""

    provider = ProviderName.OPENWEATHERMAP

    def build_url(self, location: Location) -> str:
        lat = format_coordinate(location.lat)
        lon = format_coordinate(location.lon)
        return (
            f"{ONECALL_URL}?lat={lat}&lon={lon}"
            f"&units={UNITS}&exclude={EXCLUDED_BLOCKS}&appid={self._api_key}"
        )

    def parse_reply(self, raw_body: str | bytes) -> list[NormalizedForecast]:
        reply = self._validate_reply(_Reply, raw_body)
        return [
            NormalizedForecast(
                timestamp=day.dt,
                min_temp=day.temp.min,
                max_temp=day.temp.max,
                avg_temp=day.temp.day,
                condition=f"{day.weather[0].main}, {day.weather[0].description}",
            )
            for day in reply.daily
        ]
