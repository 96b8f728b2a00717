from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable, Sequence
from datetime import datetime, timedelta, timezone
from typing import Any

import httpx
import pytest

from vaer.forecasts.types import DayBucket
from vaer.integrations.openweather.client import OpenWeatherClient
from vaer.integrations.openweather.types import CurrentWeather
from vaer.recents.store import RecentsStore
from vaer.search.app import WeatherApp
from vaer.search.dispatcher import QueryDispatcher
from vaer.search.session import SessionState
from vaer.storage import MemoryStore
from vaer.units import Unit


def pytest_sessionfinish() -> None:
    """
    Silence exceptions raised when logging during atexit callbacks
    """

    logging.raiseExceptions = False


############
# Payloads #
############


@pytest.fixture
def base_time() -> datetime:
    """Time of the first forecast step."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def coordinate() -> tuple[float, float]:
    return (59.9171, 10.7276)


@pytest.fixture
def current_payload(
    base_time: datetime, coordinate: tuple[float, float]
) -> dict[str, Any]:
    latitude, longitude = coordinate
    return {
        "coord": {"lat": latitude, "lon": longitude},
        "weather": [
            {"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}
        ],
        "main": {"temp": 4.5, "feels_like": 1.2, "pressure": 1012, "humidity": 87},
        "wind": {"speed": 3.6, "deg": 200},
        "dt": int(base_time.timestamp()),
        "sys": {"country": "NO"},
        "timezone": 3600,
        "name": "Oslo",
    }


@pytest.fixture
def forecast_payload(base_time: datetime) -> dict[str, Any]:
    """
    A 5 day forecast in 3 hour steps, starting at noon. The 40 steps span 6
    UTC dates, with 4 steps on the first and last date.
    """

    items = []
    for step in range(40):
        time = base_time + timedelta(hours=3 * step)
        items.append(
            {
                "dt": int(time.timestamp()),
                "main": {"temp": step / 2, "humidity": 80},
                "weather": [
                    {
                        "id": 800,
                        "main": "Clear",
                        "description": "clear sky",
                        "icon": "01d",
                    }
                ],
                "wind": {"speed": 2.0},
                "dt_txt": time.strftime("%Y-%m-%d %H:%M:%S"),
            }
        )

    return {"cod": "200", "cnt": len(items), "list": items, "city": {"name": "Oslo"}}


###############
# Weather API #
###############


class FakeOpenWeather:
    """
    Stands in for the OpenWeatherMap API. Responses are configured per
    endpoint, either as (status code, json) or as an exception to raise.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responses: dict[str, tuple[int, Any] | Exception] = {}

    def respond(self, endpoint: str, status_code: int, json: Any = None) -> None:
        self.responses[endpoint] = (status_code, json)

    def fail(self, endpoint: str, exc: Exception) -> None:
        self.responses[endpoint] = exc

    @property
    def endpoints(self) -> list[str]:
        return [request.url.path.rsplit("/", 1)[-1] for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.rsplit("/", 1)[-1]
        response = self.responses.get(endpoint, (500, {"message": "not set up"}))
        if isinstance(response, Exception):
            raise response
        status_code, json = response
        return httpx.Response(status_code, json=json)


@pytest.fixture
def api(
    current_payload: dict[str, Any], forecast_payload: dict[str, Any]
) -> FakeOpenWeather:
    fake = FakeOpenWeather()
    fake.respond("weather", 200, current_payload)
    fake.respond("forecast", 200, forecast_payload)
    return fake


@pytest.fixture
async def openweather_client(
    api: FakeOpenWeather,
) -> AsyncIterator[OpenWeatherClient]:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(api.handler))
    try:
        yield OpenWeatherClient(
            api_key="secret", base_url="https://api.test/data/2.5", client=http_client
        )
    finally:
        await http_client.aclose()


#######
# App #
#######


class RecordingRenderer:
    """A renderer that remembers everything it was asked to show."""

    def __init__(self) -> None:
        self.current: list[tuple[CurrentWeather, Unit]] = []
        self.forecasts: list[tuple[Sequence[DayBucket], Unit]] = []
        self.messages: list[tuple[str, str]] = []

    def show_current(self, current: CurrentWeather, unit: Unit) -> None:
        self.current.append((current, unit))

    def show_forecast(self, buckets: Sequence[DayBucket], unit: Unit) -> None:
        self.forecasts.append((buckets, unit))

    def show_message(self, text: str, kind: str) -> None:
        self.messages.append((text, kind))

    @property
    def message(self) -> str:
        """The text currently in the message region."""
        return self.messages[-1][0] if self.messages else ""

    @property
    def texts(self) -> list[str]:
        return [text for text, _ in self.messages]


@pytest.fixture
def storage() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def recents(storage: MemoryStore) -> RecentsStore:
    return RecentsStore(storage)


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def session() -> SessionState:
    return SessionState()


@pytest.fixture
def make_app(
    openweather_client: OpenWeatherClient,
    recents: RecentsStore,
    renderer: RecordingRenderer,
    session: SessionState,
) -> Callable[..., WeatherApp]:
    def _make_app(**kwargs: Any) -> WeatherApp:
        return WeatherApp(
            dispatcher=QueryDispatcher(openweather_client),
            recents=recents,
            renderer=renderer,
            session=session,
            **kwargs,
        )

    return _make_app


@pytest.fixture
def app(make_app: Callable[..., WeatherApp]) -> WeatherApp:
    return make_app()
