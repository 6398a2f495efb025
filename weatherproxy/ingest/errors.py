"""Errors raised while fetching or reading upstream weather data."""

from typing import Any


class WeatherClientError(Exception):
    """Base error; ``details`` is what the HTTP layer reports to callers."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = message if details is None else details


class DataNotFoundError(WeatherClientError):
    """Raised when an expected field is missing from the upstream response."""


class UpstreamHTTPError(WeatherClientError):
    """Raised on transport failures and 4xx/5xx responses from the provider."""

    def __init__(self, message: str, status_code: int | None = None, details: Any = None):
        super().__init__(message, details)
        self.status_code = status_code
