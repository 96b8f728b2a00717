from collections.abc import Sequence
from typing import Literal, Protocol, TypeAlias

import click

from ..forecasts.types import DayBucket
from ..integrations.openweather.types import CurrentWeather
from ..units import Unit
from .formatting import format_current, format_forecast

MessageKind: TypeAlias = Literal["success", "info", "error"]

COLOR_MAPPING: dict[MessageKind, str] = {
    "success": "green",
    "info": "cyan",
    "error": "red",
}
THEME_COLORS = {
    "rain": "blue",
    "clouds": "white",
    "clear": "yellow",
    "default": "reset",
}


class Renderer(Protocol):
    """Where the app sends everything it displays."""

    def show_current(self, current: CurrentWeather, unit: Unit) -> None: ...

    def show_forecast(self, buckets: Sequence[DayBucket], unit: Unit) -> None: ...

    def show_message(self, text: str, kind: MessageKind) -> None: ...


class ConsoleRenderer:
    """
    Render to the terminal. An empty message clears the message region, which
    for a terminal means nothing is printed.
    """

    def show_current(self, current: CurrentWeather, unit: Unit) -> None:
        display = format_current(current, unit)
        click.echo()
        click.secho(display.location, bold=True)
        click.secho(
            f"{display.temperature}  {display.description}",
            fg=THEME_COLORS[display.theme],
        )
        click.echo(display.extra)
        click.echo(click.style(display.icon_url, dim=True))

    def show_forecast(self, buckets: Sequence[DayBucket], unit: Unit) -> None:
        if not buckets:
            return

        click.echo()
        for card in format_forecast(buckets, unit):
            click.echo(
                f"{card.date:<12} {card.temperature:>6}  "
                f"{card.condition:<14} {card.extra}"
            )

    def show_message(self, text: str, kind: MessageKind) -> None:
        if text:
            click.secho(text, fg=COLOR_MAPPING[kind], err=kind == "error")
