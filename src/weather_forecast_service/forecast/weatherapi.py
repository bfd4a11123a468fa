"""WeatherAPI.com forecast adapter."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .base import ForecastAdapter, format_coordinate
from .models import Location, NormalizedForecast
from .providers import ProviderName

FORECAST_URL = "http://api.weatherapi.com/v1/forecast.json"
FORECAST_DAYS = 10


class _Condition(BaseModel):
    model_config = ConfigDict(strict=True)

    text: str


class _DayData(BaseModel):
    model_config = ConfigDict(strict=True)

    maxtemp_c: float
    mintemp_c: float
    avgtemp_c: float
    condition: _Condition


class _ForecastDay(BaseModel):
    model_config = ConfigDict(strict=True)

    date_epoch: int
    day: _DayData


class _Forecast(BaseModel):
    model_config = ConfigDict(strict=True)

    forecastday: list[_ForecastDay]


class _Reply(BaseModel):
    model_config = ConfigDict(strict=True)

    forecast: _Forecast


class WeatherApiAdapter(ForecastAdapter):
    """Reads ``forecast.forecastday`` from the WeatherAPI forecast endpoint."""

    provider = ProviderName.WEATHERAPI

    def build_url(self, location: Location) -> str:
        # Air quality and alerts are not part of the normalized forecast.
        lat = format_coordinate(location.lat)
        lon = format_coordinate(location.lon)
        return (
            f"{FORECAST_URL}?key={self._api_key}&q={lat},{lon}"
            f"&days={FORECAST_DAYS}&aqi=no&alerts=no"
        )

    def parse_reply(self, raw_body: str | bytes) -> list[NormalizedForecast]:
        reply = self._validate_reply(_Reply, raw_body)
        return [
            NormalizedForecast(
                timestamp=item.date_epoch,
                min_temp=item.day.mintemp_c,
                max_temp=item.day.maxtemp_c,
                avg_temp=item.day.avgtemp_c,
                condition=item.day.condition.text,
            )
            for item in reply.forecast.forecastday
        ]
