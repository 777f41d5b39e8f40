"""Error types for weather provider interactions."""


class WeatherError(Exception):
    """Base error for weather lookups."""


class ProviderError(WeatherError):
    """The provider answered with a non-success status code."""

    def __init__(self, message: str, code: str | int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class MalformedResponseError(WeatherError):
    """The provider response could not be decoded or normalized."""
