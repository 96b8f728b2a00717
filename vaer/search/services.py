from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import click

from ..geolocation import GeolocationProvider, get_provider
from ..integrations.openweather.client import OpenWeatherClient
from ..presentation.renderer import ConsoleRenderer, Renderer
from ..recents.store import RecentsStore
from ..settings import Settings
from ..storage import JSONFileStore
from ..units import Unit
from .app import WeatherApp
from .dispatcher import QueryDispatcher
from .session import SessionState


def load_settings() -> Settings:
    try:
        return Settings.from_env()
    except KeyError as e:
        raise click.ClickException(e.args[0]) from e


@asynccontextmanager
async def weather_app(
    *,
    units: Unit | None = None,
    renderer: Renderer | None = None,
    geolocation: GeolocationProvider | None = None,
) -> AsyncIterator[WeatherApp]:
    """
    Set up a weather app from the environment settings, closing the API
    client when done.
    """

    settings = load_settings()

    async with OpenWeatherClient(
        api_key=settings.api_key, base_url=settings.base_url
    ) as client:
        yield WeatherApp(
            dispatcher=QueryDispatcher(client),
            recents=RecentsStore(JSONFileStore(settings.storage_path)),
            renderer=renderer or ConsoleRenderer(),
            session=SessionState(unit=units or settings.units),
            geolocation=geolocation or get_provider(settings.geolocation),
            message_duration=settings.message_seconds,
        )
