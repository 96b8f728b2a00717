"""
Local key-value storage.

Values are plain strings, callers decide how to serialize. The file store
keeps every key in a single JSON object on disk, and rewrites the whole
file on each change.
"""

import json
import os
from pathlib import Path
from typing import Protocol

import structlog

from .exceptions import StorageError

logger = structlog.get_logger()


class KeyValueStore(Protocol):
    """Protocol for durable string storage."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    """A store that lives as long as the process."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data = dict(data or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class JSONFileStore:
    """A store backed by a JSON file, surviving restarts."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        if value is not None and not isinstance(value, str):
            raise StorageError(f"Corrupt value for {key} in {self.path}")
        return value

    def set(self, key: str, value: str) -> None:
        data = self._load(discard_corrupt=True)
        data[key] = value
        self._dump(data)

    def remove(self, key: str) -> None:
        data = self._load(discard_corrupt=True)
        if data.pop(key, None) is not None:
            self._dump(data)

    def _load(self, *, discard_corrupt: bool = False) -> dict[str, str]:
        """
        Read the whole file. With `discard_corrupt`, a file that does not hold
        a JSON object reads as empty, so the next write replaces it.
        """

        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise StorageError(f"Unable to read {self.path}: {e}") from e

        try:
            data = json.loads(content)
            if not isinstance(data, dict):
                raise ValueError("not an object")
        except ValueError as e:
            if not discard_corrupt:
                raise StorageError(f"Corrupt storage file {self.path}: {e}") from e
            logger.warning("Replacing corrupt storage file", path=str(self.path))
            return {}

        return data

    def _dump(self, data: dict[str, str]) -> None:
        # Replace atomically
        tmp_path = self.path.with_suffix(".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StorageError(f"Unable to write {self.path}: {e}") from e

        logger.debug("Storage written", path=str(self.path), keys=len(data))
