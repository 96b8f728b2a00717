import math
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

import pydantic
import structlog

from ..exceptions import NotFoundError, RemoteError, ValidationError
from ..integrations.openweather.client import OpenWeatherClient
from ..integrations.openweather.exceptions import CityNotFound, OpenWeatherAPIError
from ..integrations.openweather.types import CurrentWeather, Forecast
from ..units import Unit
from ..utils import timed

logger = structlog.get_logger()


@dataclass(frozen=True)
class SearchResult:
    current: CurrentWeather
    forecast: Forecast


class QueryDispatcher:
    """
    Look up current conditions and the forecast for a location.

    The forecast is requested by coordinate, so the current conditions are
    always fetched first, and the forecast is never requested if that fails.
    """

    def __init__(self, client: OpenWeatherClient) -> None:
        self.client = client

    async def by_city(self, city: str, *, unit: Unit) -> SearchResult:
        city = city.strip()
        if not city:
            raise ValidationError()

        with timed("Search by city", city=city, unit=unit.value):
            with translate_errors(city=city):
                current = await self.client.get_current_by_city(city, unit=unit)
                forecast = await self.client.get_forecast(
                    coordinate=(current.coord.lat, current.coord.lon), unit=unit
                )

        return SearchResult(current=current, forecast=forecast)

    async def by_coordinate(
        self, latitude: float, longitude: float, *, unit: Unit
    ) -> SearchResult:
        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            raise ValidationError("Invalid coordinates.")

        coordinate = (latitude, longitude)
        with timed("Search by coordinate", coordinate=coordinate, unit=unit.value):
            with translate_errors(coordinate=coordinate):
                current = await self.client.get_current_by_coordinate(
                    coordinate=coordinate, unit=unit
                )
                forecast = await self.client.get_forecast(
                    coordinate=coordinate, unit=unit
                )

        return SearchResult(current=current, forecast=forecast)


@contextmanager
def translate_errors(**context: Any) -> Iterator[None]:
    """
    Turn API client errors into the errors shown to the user, logging the
    details that the user won't see.
    """

    try:
        yield
    except CityNotFound as e:
        logger.info("Location not found", **context)
        raise NotFoundError() from e
    except (OpenWeatherAPIError, pydantic.ValidationError) as e:
        logger.error("Weather lookup failed", error=str(e), **context)
        raise RemoteError() from e
