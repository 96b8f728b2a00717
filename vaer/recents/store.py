"""
The list of recently searched cities.

Storage failures never reach the caller: a store that can't be read, or
holds something other than a list of names, behaves as an empty store, and
a failed write is dropped.
"""

import json

import structlog

from ..exceptions import StorageError
from ..storage import KeyValueStore

logger = structlog.get_logger()

STORAGE_KEY = "recentCities"
CAPACITY = 6


class RecentsStore:
    def __init__(
        self,
        storage: KeyValueStore,
        *,
        key: str = STORAGE_KEY,
        capacity: int = CAPACITY,
    ) -> None:
        self.storage = storage
        self.key = key
        self.capacity = capacity

    def list(self) -> list[str]:
        """
        The stored cities, most recently searched first.
        """

        try:
            raw = self.storage.get(self.key)
        except StorageError as e:
            logger.warning("Unable to read recent cities", error=str(e))
            return []

        if raw is None:
            return []

        try:
            cities = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Ignoring corrupt recent cities", raw=raw)
            return []

        if not isinstance(cities, list) or not all(
            isinstance(city, str) for city in cities
        ):
            logger.warning("Ignoring corrupt recent cities", raw=raw)
            return []

        return cities[: self.capacity]

    def record(self, city: str) -> None:
        """
        Put the city first in the list. An existing entry with the same name,
        ignoring case, is replaced, so the latest spelling wins.
        """

        cities = [c for c in self.list() if c.casefold() != city.casefold()]
        cities.insert(0, city)

        try:
            self.storage.set(self.key, json.dumps(cities[: self.capacity]))
        except StorageError as e:
            logger.warning("Unable to save recent cities", city=city, error=str(e))

    def clear(self) -> None:
        try:
            self.storage.remove(self.key)
        except StorageError as e:
            logger.warning("Unable to clear recent cities", error=str(e))
