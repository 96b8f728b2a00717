"""
Formatting of weather data into display fields.

Forecast days are bucketed by UTC date, but labelled in the local time zone
of the machine.
"""

from collections.abc import Sequence
from datetime import datetime, tzinfo
from typing import Literal, TypeAlias

from pydantic import BaseModel

from ..forecasts.types import DayBucket, WeatherSample
from ..integrations.openweather.client import icon_url
from ..integrations.openweather.types import CurrentWeather
from ..units import Unit
from ..utils import round_half_up

Theme: TypeAlias = Literal["rain", "clouds", "clear", "default"]


class CurrentDisplay(BaseModel):
    location: str
    temperature: str
    description: str
    extra: str
    icon_url: str
    theme: Theme


class ForecastCard(BaseModel):
    date: str
    temperature: str
    condition: str
    extra: str
    icon_url: str


def theme_for(condition: str) -> Theme:
    """Pick a colour theme from the condition category."""
    condition = condition.lower()
    if "rain" in condition:
        return "rain"
    elif "cloud" in condition:
        return "clouds"
    elif "clear" in condition:
        return "clear"
    return "default"


def format_temperature(value: float, unit: Unit) -> str:
    return f"{round_half_up(value)}{unit.temperature_symbol}"


def format_current(current: CurrentWeather, unit: Unit) -> CurrentDisplay:
    condition = current.condition
    return CurrentDisplay(
        location=current.location_name,
        temperature=format_temperature(current.main.temp, unit),
        description=condition.description,
        extra=(
            f"Humidity: {current.main.humidity}% · "
            f"Wind: {current.wind.speed} {unit.speed_label}"
        ),
        icon_url=icon_url(condition.icon),
        theme=theme_for(condition.main),
    )


def format_day_label(sample: WeatherSample, tz: tzinfo | None = None) -> str:
    local_time = datetime.fromtimestamp(sample.timestamp, tz=tz).astimezone(tz)
    return f"{local_time:%a, %b} {local_time.day}"


def format_forecast(
    buckets: Sequence[DayBucket], unit: Unit, *, tz: tzinfo | None = None
) -> list[ForecastCard]:
    cards = []
    for bucket in buckets:
        sample = bucket.representative
        cards.append(
            ForecastCard(
                date=format_day_label(sample, tz),
                temperature=format_temperature(sample.temperature, unit),
                condition=sample.condition,
                extra=(
                    f"Wind: {sample.wind_speed} {unit.speed_label} · "
                    f"Hum: {sample.humidity}%"
                ),
                icon_url=icon_url(sample.icon),
            )
        )
    return cards
