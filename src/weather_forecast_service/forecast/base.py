"""Provider-agnostic forecast adapter interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import INTERNAL, ForecastError
from .models import Location, NormalizedForecast
from .providers import ProviderName

ReplyT = TypeVar("ReplyT", bound=BaseModel)


def format_coordinate(value: float) -> str:
    """Render a coordinate as the shortest plain decimal, never in exponent form."""
    return format(Decimal(repr(value)), "f")


class ForecastAdapter(ABC):
    """Base contract for one third-party forecast API.

    An adapter knows how to address its provider and how to read the
    provider's reply. It performs no I/O itself.
    """

    provider: ProviderName

    def __init__(self, api_key: str) -> None:
        self._api_key = api_key

    @abstractmethod
    def build_url(self, location: Location) -> str:
        """Return the request URL for a daily forecast at ``location``."""

    @abstractmethod
    def parse_reply(self, raw_body: str | bytes) -> list[NormalizedForecast]:
        """Normalize a successful reply body into per-day forecasts."""

    def _validate_reply(self, model: type[ReplyT], raw_body: str | bytes) -> ReplyT:
        try:
            return model.model_validate_json(raw_body)
        except ValidationError as exc:
            raise ForecastError(
                f"Unable to process the response from {self.provider.render()}. {exc}",
                kind=INTERNAL,
            ) from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}(provider={self.provider.render()!r})"
