from datetime import datetime, timezone

import pydantic

from ...forecasts.types import WeatherSample


class Coordinate(pydantic.BaseModel):
    lat: float
    lon: float


class Condition(pydantic.BaseModel):
    id: int | None = None
    main: str
    description: str
    icon: str


class MainReadings(pydantic.BaseModel):
    temp: float
    feels_like: float | None = None
    temp_min: float | None = None
    temp_max: float | None = None
    pressure: float | None = None
    humidity: int


class Wind(pydantic.BaseModel):
    speed: float
    deg: float | None = None
    gust: float | None = None


class CurrentSys(pydantic.BaseModel):
    country: str | None = None
    sunrise: int | None = None
    sunset: int | None = None


class _Reading(pydantic.BaseModel):
    dt: int
    main: MainReadings
    weather: list[Condition] = pydantic.Field(min_length=1)
    wind: Wind

    @property
    def condition(self) -> Condition:
        return self.weather[0]

    @property
    def time(self) -> datetime:
        return datetime.fromtimestamp(self.dt, tz=timezone.utc)

    def to_sample(self) -> WeatherSample:
        return WeatherSample(
            timestamp=self.dt,
            temperature=self.main.temp,
            humidity=self.main.humidity,
            wind_speed=self.wind.speed,
            condition=self.condition.main,
            description=self.condition.description,
            icon=self.condition.icon,
        )


class CurrentWeather(_Reading):
    """Response from the current weather endpoint."""

    coord: Coordinate
    name: str
    sys: CurrentSys = CurrentSys()
    timezone: int | None = None

    @property
    def location_name(self) -> str:
        if self.sys.country:
            return f"{self.name}, {self.sys.country}"
        return self.name


class ForecastItem(_Reading):
    dt_txt: str | None = None


class ForecastCity(pydantic.BaseModel):
    name: str | None = None
    country: str | None = None
    coord: Coordinate | None = None
    timezone: int | None = None


class Forecast(pydantic.BaseModel):
    """Response from the 5 day / 3 hour forecast endpoint."""

    items: list[ForecastItem] = pydantic.Field(alias="list")
    city: ForecastCity | None = None

    @property
    def samples(self) -> list[WeatherSample]:
        return [item.to_sample() for item in self.items]
