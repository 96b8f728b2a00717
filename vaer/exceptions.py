"""
Errors surfaced to the user by the weather app.

Every error carries a short message that is safe to show. Details that
should only go to the logs are kept in the exception chain.
"""


class WeatherError(Exception):
    """Base exception for errors that end a user action."""

    message = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(WeatherError):
    """The user input was rejected before any request was made."""

    message = "Please enter a city name."


class NotFoundError(WeatherError):
    """The weather API could not resolve the requested location."""

    message = "City not found. Check spelling."


class RemoteError(WeatherError):
    """The weather API failed, or could not be reached."""

    message = "Error fetching weather. See logs."


class GeolocationError(WeatherError):
    """Base exception for geolocation failures."""

    message = "Unable to determine your location."


class GeolocationUnsupported(GeolocationError):
    message = "Geolocation not supported."


class GeolocationPermissionDenied(GeolocationError):
    message = "Location permission denied."


class PositionUnavailable(GeolocationError):
    message = "Location unavailable."


class StorageError(Exception):
    """Reading from or writing to local storage failed."""

    pass
