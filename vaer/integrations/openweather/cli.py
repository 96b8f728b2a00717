import click

from ...forecasts.buckets import bucket_by_day
from ...search.services import load_settings
from ...units import Unit
from .client import OpenWeatherClient
from .exceptions import OpenWeatherAPIError

LOCATION_REQUIRED = "Either --city or both --lat and --lon are required"


@click.group(name="openweather", help="Query the OpenWeatherMap API directly")
def cli() -> None:
    pass


def get_client() -> OpenWeatherClient:
    settings = load_settings()
    return OpenWeatherClient(api_key=settings.api_key, base_url=settings.base_url)


@cli.command(help="Print the raw current weather response")
@click.option("--city", help="City name")
@click.option("--lat", type=float, help="Latitude")
@click.option("--lon", type=float, help="Longitude")
@click.option("--units", type=click.Choice([u.value for u in Unit]), default="metric")
async def current(
    *, city: str | None, lat: float | None, lon: float | None, units: str
) -> None:
    if not city and (lat is None or lon is None):
        raise click.UsageError(LOCATION_REQUIRED)

    async with get_client() as client:
        try:
            if city:
                result = await client.get_current_by_city(city, unit=Unit(units))
            elif lat is not None and lon is not None:
                result = await client.get_current_by_coordinate(
                    coordinate=(lat, lon), unit=Unit(units)
                )
            else:
                raise click.UsageError(LOCATION_REQUIRED)
        except OpenWeatherAPIError as e:
            raise click.ClickException(str(e)) from e

    click.echo(result.model_dump_json(indent=2))


@cli.command(help="Print the forecast steps, grouped by UTC day")
@click.option("--lat", type=float, required=True, help="Latitude")
@click.option("--lon", type=float, required=True, help="Longitude")
@click.option("--units", type=click.Choice([u.value for u in Unit]), default="metric")
async def forecast(*, lat: float, lon: float, units: str) -> None:
    unit = Unit(units)
    async with get_client() as client:
        try:
            result = await client.get_forecast(coordinate=(lat, lon), unit=unit)
        except OpenWeatherAPIError as e:
            raise click.ClickException(str(e)) from e

    for bucket in bucket_by_day(result.samples):
        click.echo(f"\n{bucket.date.isoformat()}")
        for sample in bucket.samples:
            marker = "*" if sample is bucket.representative else " "
            click.echo(
                f" {marker} {sample.time:%H:%M}  "
                f"{sample.temperature:>6.1f}{unit.temperature_symbol}  "
                f"{sample.description}"
            )
