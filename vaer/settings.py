import os
from pathlib import Path
from typing import Literal, TypeAlias

from pydantic import BaseModel, ConfigDict

from .units import Unit

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_DATA_DIR = "~/.local/share/vaer"
DEFAULT_MESSAGE_SECONDS = 6.0
STORAGE_FILENAME = "storage.json"

GeolocationMode: TypeAlias = Literal["ip", "off", "deny"]


def getenv(key: str) -> str:
    """
    Get a required environment variable.

    Raises KeyError if the variable is not set.
    """
    if value := os.getenv(key):
        return value

    raise KeyError(f"Environment variable {key} not set")


def get_data_dir() -> Path:
    return Path(os.getenv("VAER_DATA_DIR", DEFAULT_DATA_DIR)).expanduser()


class Settings(BaseModel):
    """
    Runtime configuration, read from the environment:

    - OPENWEATHER_API_KEY (required)
    - OPENWEATHER_BASE_URL
    - VAER_DATA_DIR: where recent searches are stored
    - VAER_UNITS: metric or imperial
    - VAER_GEOLOCATION: ip, off or deny
    - VAER_MESSAGE_SECONDS: how long messages stay on screen
    """

    model_config = ConfigDict(frozen=True)

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    data_dir: Path = Path(DEFAULT_DATA_DIR)
    units: Unit = Unit.METRIC
    geolocation: GeolocationMode = "ip"
    message_seconds: float = DEFAULT_MESSAGE_SECONDS

    @property
    def storage_path(self) -> Path:
        return self.data_dir.expanduser() / STORAGE_FILENAME

    @classmethod
    def from_env(cls) -> "Settings":
        return cls.model_validate(
            {
                "api_key": getenv("OPENWEATHER_API_KEY"),
                "base_url": os.getenv("OPENWEATHER_BASE_URL", DEFAULT_BASE_URL),
                "data_dir": get_data_dir(),
                "units": os.getenv("VAER_UNITS", Unit.METRIC.value),
                "geolocation": os.getenv("VAER_GEOLOCATION", "ip"),
                "message_seconds": os.getenv(
                    "VAER_MESSAGE_SECONDS", DEFAULT_MESSAGE_SECONDS
                ),
            }
        )
