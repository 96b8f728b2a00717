import asyncio

import click

from ..geolocation import FixedLocationProvider
from ..units import Unit
from .app import WeatherApp
from .services import weather_app

SHELL_HELP = """\
Type a city name to search, or one of:
  :loc        weather at your current location
  :unit       toggle between metric and imperial
  :recent     list recent searches
  :recent N   search recent search number N
  :quit       exit
"""


units_option = click.option(
    "--units",
    type=click.Choice([unit.value for unit in Unit]),
    help="Unit system, overrides VAER_UNITS",
)


def parse_units(units: str | None) -> Unit | None:
    return Unit(units) if units else None


@click.group(name="weather", help="Look up current weather and forecasts")
def cli() -> None:
    pass


@cli.command(help="Show the weather for a city")
@click.argument("city", nargs=-1, required=True)
@units_option
async def search(*, city: tuple[str, ...], units: str | None) -> None:
    async with weather_app(units=parse_units(units)) as app:
        if not await app.search(" ".join(city)):
            raise SystemExit(1)


@cli.command(help="Show the weather at your current location")
@click.option("--lat", type=float, help="Latitude, skips the location lookup")
@click.option("--lon", type=float, help="Longitude, skips the location lookup")
@units_option
async def locate(*, lat: float | None, lon: float | None, units: str | None) -> None:
    if (lat is None) != (lon is None):
        raise click.UsageError("--lat and --lon must be given together")

    geolocation = None
    if lat is not None and lon is not None:
        geolocation = FixedLocationProvider(lat, lon)

    async with weather_app(units=parse_units(units), geolocation=geolocation) as app:
        if not await app.locate():
            raise SystemExit(1)


@cli.command(help="Show the weather for one of the recent searches")
@click.argument("number", type=click.IntRange(min=1))
@units_option
async def recent(*, number: int, units: str | None) -> None:
    async with weather_app(units=parse_units(units)) as app:
        cities = app.recent_cities()
        if number > len(cities):
            raise click.ClickException(f"There are only {len(cities)} recent searches")
        if not await app.select_recent(cities[number - 1]):
            raise SystemExit(1)


@cli.command(help="Start an interactive weather session")
@units_option
async def shell(*, units: str | None) -> None:
    async with weather_app(units=parse_units(units)) as app:
        click.echo(SHELL_HELP)
        while True:
            try:
                prompt = f"[{app.session.unit.temperature_symbol}] > "
                line = await asyncio.to_thread(input, prompt)
            except EOFError:
                break

            if not await run_shell_command(app, line.strip()):
                break


async def run_shell_command(app: WeatherApp, line: str) -> bool:
    """
    Run a single line typed into the shell. Returns False when the user asked
    to quit.
    """

    command, _, argument = line.partition(" ")

    if command in (":quit", ":q"):
        return False
    elif command == ":loc":
        await app.locate()
    elif command == ":unit":
        await app.toggle_unit()
    elif command == ":recent" and argument:
        cities = app.recent_cities()
        if argument.isdigit() and 0 < int(argument) <= len(cities):
            await app.select_recent(cities[int(argument) - 1])
        else:
            app.flash(f"No recent search number {argument}.")
    elif command == ":recent":
        for number, city in enumerate(app.recent_cities(), start=1):
            click.echo(f"{number:>2}  {city}")
    elif command == ":help":
        click.echo(SHELL_HELP)
    else:
        await app.search(line)

    return True
