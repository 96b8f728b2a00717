from datetime import date, datetime, timezone

from pydantic import BaseModel, ConfigDict


class WeatherSample(BaseModel):
    """
    A single reading from the weather API, either current conditions or one
    3-hour forecast step. Values are in whatever unit system was requested.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: int  # Epoch seconds
    temperature: float
    humidity: int  # Percent, 0-100
    wind_speed: float
    condition: str  # Category, e.g. "Rain", "Clear" or "Clouds"
    description: str
    icon: str

    @property
    def time(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)

    @property
    def utc_date(self) -> date:
        return self.time.date()

    @property
    def utc_hour(self) -> int:
        return self.time.hour


class DayBucket(BaseModel):
    """All forecast samples for one UTC calendar day."""

    model_config = ConfigDict(frozen=True)

    date: date
    samples: tuple[WeatherSample, ...]
    representative: WeatherSample
