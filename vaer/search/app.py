"""
The weather app: user actions in, rendered weather and messages out.

Every public method is a user action. Actions never raise, failures end up
as a message on the renderer, and flashed messages are cleared again after
`message_duration` seconds. Overlapping actions are not coordinated, the
last one to finish is what stays on display.
"""

import asyncio

import structlog

from ..exceptions import (
    GeolocationError,
    GeolocationUnsupported,
    NotFoundError,
    RemoteError,
    ValidationError,
    WeatherError,
)
from ..forecasts.buckets import bucket_by_day
from ..geolocation import GeolocationProvider
from ..presentation.renderer import MessageKind, Renderer
from ..recents.store import RecentsStore
from ..units import Unit
from .dispatcher import QueryDispatcher, SearchResult
from .session import SessionState

logger = structlog.get_logger()

MESSAGE_DURATION = 6.0
LOCATION_ERROR_MESSAGE = "Error fetching weather for current location."
TOGGLE_HINT_MESSAGE = "Toggle unit: search a city to update units."


class WeatherApp:
    def __init__(
        self,
        *,
        dispatcher: QueryDispatcher,
        recents: RecentsStore,
        renderer: Renderer,
        session: SessionState | None = None,
        geolocation: GeolocationProvider | None = None,
        message_duration: float = MESSAGE_DURATION,
    ) -> None:
        self.dispatcher = dispatcher
        self.recents = recents
        self.renderer = renderer
        self.session = session or SessionState()
        self.geolocation = geolocation
        self.message_duration = message_duration

    ###########
    # Actions #
    ###########

    async def search(self, city: str) -> bool:
        """
        Search for a city by name and show its weather.
        """

        unit = self.session.unit
        self.renderer.show_message("Loading...", "info")
        try:
            result = await self.dispatcher.by_city(city, unit=unit)
            self._show(result, unit)
        except WeatherError as e:
            self.flash(e.message)
            return False
        except Exception:
            logger.exception("Unexpected error while searching", city=city)
            self.flash(RemoteError.message)
            return False

        return True

    async def search_coordinate(self, latitude: float, longitude: float) -> bool:
        """
        Show the weather at a coordinate.
        """

        unit = self.session.unit
        self.renderer.show_message("Loading weather...", "info")
        try:
            result = await self.dispatcher.by_coordinate(latitude, longitude, unit=unit)
            self._show(result, unit)
        except (ValidationError, NotFoundError) as e:
            self.flash(e.message)
            return False
        except RemoteError:
            self.flash(LOCATION_ERROR_MESSAGE)
            return False
        except Exception:
            logger.exception(
                "Unexpected error while searching", coordinate=(latitude, longitude)
            )
            self.flash(LOCATION_ERROR_MESSAGE)
            return False

        return True

    async def locate(self) -> bool:
        """
        Show the weather at the user's current position.
        """

        if self.geolocation is None:
            self.flash(GeolocationUnsupported.message)
            return False

        self.renderer.show_message("Getting location...", "info")
        try:
            latitude, longitude = await self.geolocation.locate()
        except GeolocationError as e:
            self.flash(e.message)
            return False

        return await self.search_coordinate(latitude, longitude)

    async def select_recent(self, city: str) -> bool:
        """
        Search again for a city picked from the recent searches.
        """

        if not city:
            return False
        return await self.search(city)

    async def toggle_unit(self) -> Unit:
        """
        Switch between metric and imperial units, and fetch the last searched
        city again in the new unit.
        """

        unit = self.session.toggle_unit()
        logger.info("Unit toggled", unit=unit.value)

        if self.session.last_city:
            await self.search(self.session.last_city)
        else:
            self.flash(TOGGLE_HINT_MESSAGE, "info")

        return unit

    def recent_cities(self) -> list[str]:
        return self.recents.list()

    ####################
    # Internal helpers #
    ####################

    def flash(self, text: str, kind: MessageKind = "error") -> None:
        """
        Show a message that clears itself after a while.
        """

        self.renderer.show_message(text, kind)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        loop.call_later(self.message_duration, self.renderer.show_message, "", kind)

    def _show(self, result: SearchResult, unit: Unit) -> None:
        self.renderer.show_current(result.current, unit)
        self.renderer.show_forecast(bucket_by_day(result.forecast.samples), unit)

        city = result.current.name
        self.recents.record(city)
        self.session.last_city = city
        self.renderer.show_message("", "info")
        logger.info("Weather shown", city=city, unit=unit.value)
