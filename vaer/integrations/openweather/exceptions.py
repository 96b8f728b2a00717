"""OpenWeatherMap API exceptions."""

from ..common import IntegrationAPIError

__all__ = [
    "CityNotFound",
    "FetchFailed",
    "OpenWeatherAPIError",
]


class OpenWeatherAPIError(IntegrationAPIError):
    """The API responded with an unexpected status code or payload."""


class CityNotFound(OpenWeatherAPIError):
    """The API responded 404 for the requested location."""


class FetchFailed(OpenWeatherAPIError):
    """The request never got a response."""
