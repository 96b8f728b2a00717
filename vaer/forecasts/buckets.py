"""
Grouping of 3-hour forecast samples into calendar days.

The forecast API returns a flat list of samples, 8 per day for 5 days. For
display we want a single sample per day, so samples are grouped by their
UTC calendar date and the sample closest to midday is picked to represent
each day.
"""

from collections.abc import Iterable, Sequence
from datetime import date

from .types import DayBucket, WeatherSample

MAX_DAYS = 6
MIDDAY_HOUR = 12


def distance_from_midday(sample: WeatherSample) -> int:
    return abs(sample.utc_hour - MIDDAY_HOUR)


def select_representative(samples: Sequence[WeatherSample]) -> WeatherSample:
    """
    Pick the sample whose UTC hour is closest to noon.

    On a tie the sample that comes first in the sequence wins, as min()
    keeps the first of equal keys.
    """

    if not samples:
        raise ValueError("Cannot select a representative from no samples")

    return min(samples, key=distance_from_midday)


def bucket_by_day(
    samples: Iterable[WeatherSample], *, limit: int = MAX_DAYS
) -> list[DayBucket]:
    """
    Group samples by UTC calendar date, ordered by ascending date and capped
    at `limit` days. The input does not have to be sorted, samples keep
    their input order within each day.
    """

    by_date: dict[date, list[WeatherSample]] = {}
    for sample in samples:
        by_date.setdefault(sample.utc_date, []).append(sample)

    return [
        DayBucket(
            date=day,
            samples=tuple(day_samples),
            representative=select_representative(day_samples),
        )
        for day, day_samples in sorted(by_date.items())[:limit]
    ]
