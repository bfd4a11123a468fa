"""Application exception classes."""

from __future__ import annotations

from typing import Literal

ErrorKind = Literal["internal", "invalid_argument"]

INTERNAL: ErrorKind = "internal"
INVALID_ARGUMENT: ErrorKind = "invalid_argument"


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""


class ForecastError(Exception):
    """Raised when a forecast request cannot be satisfied.

    ``kind`` separates caller-fixable failures (``invalid_argument``) from
    failures the service itself has to answer for (``internal``).
    """

    def __init__(self, message: str, *, kind: ErrorKind = INTERNAL) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


class InvalidProviderName(ValueError):
    """Raised when a provider name does not match any known provider."""


class ProviderURLError(Exception):
    """Raised when an adapter produced a URL that cannot be requested.

    This is a programming defect in the adapter, never a caller mistake, and
    is deliberately kept outside the ``ForecastError`` channel.
    """


class LocationSearchError(Exception):
    """Raised when a geocoding lookup fails or returns malformed data."""


class ServiceError(Exception):
    """Raised by the service facade with a transport-level status code."""

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code
