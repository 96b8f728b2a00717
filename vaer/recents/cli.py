import click

from ..settings import STORAGE_FILENAME, get_data_dir
from ..storage import JSONFileStore
from .store import RecentsStore


def get_recents_store() -> RecentsStore:
    return RecentsStore(JSONFileStore(get_data_dir() / STORAGE_FILENAME))


@click.group(name="recents", help="Manage recent searches")
def cli() -> None:
    pass


@cli.command(name="list")
def list_recents() -> None:
    """List recent searches, most recent first."""
    cities = get_recents_store().list()
    if not cities:
        click.echo("No recent searches.")
        return

    for number, city in enumerate(cities, start=1):
        click.echo(f"{number:>2}  {city}")


@cli.command(name="clear")
def clear_recents() -> None:
    """Forget all recent searches."""
    get_recents_store().clear()
    click.echo("Recent searches cleared.")
