from typing import Any

import httpx
import structlog

from ...units import Unit
from ..common import BaseAPIClient
from .exceptions import CityNotFound, FetchFailed, OpenWeatherAPIError
from .types import CurrentWeather, Forecast

logger = structlog.get_logger()

API_URL = "https://api.openweathermap.org/data/2.5"
ICON_URL = "https://openweathermap.org/img/wn/{icon}@2x.png"


def icon_url(icon: str) -> str:
    return ICON_URL.format(icon=icon)


class OpenWeatherClient(BaseAPIClient):
    """
    A client for the OpenWeatherMap current weather and forecast APIs.

    Requests are made once. Failures are raised to the caller, there is no
    retry.
    """

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = API_URL,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(client=client)
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    ###################
    # Current weather #
    ###################

    async def get_current_by_city(self, city: str, *, unit: Unit) -> CurrentWeather:
        """
        Get the current weather for a city name, as resolved by the API.
        """
        response = await self._get("weather", {"q": city}, unit=unit)
        return self._decode_json(response, CurrentWeather)

    async def get_current_by_coordinate(
        self, *, coordinate: tuple[float, float], unit: Unit
    ) -> CurrentWeather:
        """
        Get the current weather at a coordinate.
        """
        latitude, longitude = coordinate
        response = await self._get(
            "weather", {"lat": latitude, "lon": longitude}, unit=unit
        )
        return self._decode_json(response, CurrentWeather)

    ############
    # Forecast #
    ############

    async def get_forecast(
        self, *, coordinate: tuple[float, float], unit: Unit
    ) -> Forecast:
        """
        Get the 5 day forecast, in 3 hour steps, at a coordinate.
        """
        latitude, longitude = coordinate
        response = await self._get(
            "forecast", {"lat": latitude, "lon": longitude}, unit=unit
        )
        return self._decode_json(response, Forecast)

    ####################
    # Internal helpers #
    ####################

    async def _get(
        self, endpoint: str, params: dict[str, Any], *, unit: Unit
    ) -> httpx.Response:
        try:
            response = await self.client.get(
                f"{self.base_url}/{endpoint}",
                params={**params, "units": unit.value, "appid": self.api_key},
            )
        except httpx.TransportError as e:
            raise FetchFailed(f"Request to {endpoint} failed: {e}") from e

        if response.status_code == 404:
            raise CityNotFound(
                f"Location not found: {params}", status_code=response.status_code
            )

        if not response.is_success:
            raise OpenWeatherAPIError(
                f"Got unexpected status code {response.status_code} "
                f"from {endpoint}: {response.text}",
                status_code=response.status_code,
            )

        logger.debug("OpenWeather request done", endpoint=endpoint, unit=unit.value)
        return response
