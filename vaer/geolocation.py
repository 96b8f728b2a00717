"""
Providers of the user's current position.
"""

import math
from typing import Protocol

import httpx
import pydantic
import structlog

from .exceptions import (
    GeolocationPermissionDenied,
    GeolocationUnsupported,
    PositionUnavailable,
)
from .settings import GeolocationMode

logger = structlog.get_logger()

IP_LOOKUP_URL = "https://ipapi.co/json/"


class GeolocationProvider(Protocol):
    async def locate(self) -> tuple[float, float]: ...


class IPLocation(pydantic.BaseModel):
    latitude: float
    longitude: float
    city: str | None = None


class IPGeolocationProvider:
    """
    Approximate the position from the public IP address.
    """

    def __init__(
        self, *, url: str = IP_LOOKUP_URL, client: httpx.AsyncClient | None = None
    ) -> None:
        self.url = url
        self.client = client

    async def locate(self) -> tuple[float, float]:
        try:
            if self.client:
                response = await self.client.get(self.url)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.get(self.url)
            response.raise_for_status()
            location = IPLocation.model_validate_json(response.text)
        except (httpx.HTTPError, pydantic.ValidationError) as e:
            logger.error("IP geolocation failed", url=self.url, error=str(e))
            raise PositionUnavailable() from e

        logger.info("Located by IP address", city=location.city)
        return location.latitude, location.longitude


class FixedLocationProvider:
    """A provider that always returns the same, already known, position."""

    def __init__(self, latitude: float, longitude: float) -> None:
        self.coordinate = (latitude, longitude)

    async def locate(self) -> tuple[float, float]:
        if not all(math.isfinite(c) for c in self.coordinate):
            raise PositionUnavailable()
        return self.coordinate


class DeniedLocationProvider:
    """The user has not allowed looking up their position."""

    async def locate(self) -> tuple[float, float]:
        raise GeolocationPermissionDenied()


class UnsupportedLocationProvider:
    async def locate(self) -> tuple[float, float]:
        raise GeolocationUnsupported()


def get_provider(mode: GeolocationMode) -> GeolocationProvider:
    if mode == "ip":
        return IPGeolocationProvider()
    elif mode == "deny":
        return DeniedLocationProvider()
    else:
        return UnsupportedLocationProvider()
