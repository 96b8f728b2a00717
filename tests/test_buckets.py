"""
Tests for grouping forecast samples into days.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from vaer.forecasts.buckets import bucket_by_day, select_representative
from vaer.forecasts.types import WeatherSample
from vaer.integrations.openweather.types import Forecast


def sample(
    hour: int, *, day: int = 15, temperature: float = 10.0, description: str = ""
) -> WeatherSample:
    time = datetime(2024, 1, day, tzinfo=timezone.utc) + timedelta(hours=hour)
    return WeatherSample(
        timestamp=int(time.timestamp()),
        temperature=temperature,
        humidity=70,
        wind_speed=3.0,
        condition="Clouds",
        description=description,
        icon="03d",
    )


class TestSelectRepresentative:
    def test_closest_to_noon(self) -> None:
        samples = [sample(0), sample(6), sample(12), sample(21)]
        assert select_representative(samples).utc_hour == 12

    def test_closest_when_noon_is_missing(self) -> None:
        samples = [sample(0), sample(3), sample(18), sample(10)]
        assert select_representative(samples).utc_hour == 10

    def test_tie_goes_to_earlier_sample(self) -> None:
        samples = [sample(0), sample(9), sample(15), sample(18)]
        assert select_representative(samples).utc_hour == 9

    def test_tie_follows_input_order_not_time(self) -> None:
        samples = [sample(18), sample(15), sample(9), sample(0)]
        assert select_representative(samples).utc_hour == 15

    def test_tie_between_identical_hours(self) -> None:
        first = sample(12, description="first")
        second = sample(12, description="second")
        assert select_representative([first, second]) is first

    def test_single_sample(self) -> None:
        only = sample(21)
        assert select_representative([only]) is only

    def test_no_samples(self) -> None:
        with pytest.raises(ValueError):
            select_representative([])


class TestBucketByDay:
    def test_groups_by_utc_date(self) -> None:
        samples = [sample(h, day=d) for d in (15, 16) for h in range(0, 24, 3)]

        buckets = bucket_by_day(samples)

        assert [b.date for b in buckets] == [date(2024, 1, 15), date(2024, 1, 16)]
        assert all(len(b.samples) == 8 for b in buckets)
        assert all(b.representative.utc_hour == 12 for b in buckets)

    def test_unsorted_input(self) -> None:
        samples = [sample(12, day=17), sample(3, day=15), sample(12, day=16)]
        samples += [sample(12, day=15)]

        buckets = bucket_by_day(samples)

        assert [b.date.day for b in buckets] == [15, 16, 17]
        assert [s.utc_hour for s in buckets[0].samples] == [3, 12]
        assert buckets[0].representative.utc_hour == 12

    def test_one_bucket_per_date(self, forecast_samples: list[WeatherSample]) -> None:
        buckets = bucket_by_day(forecast_samples)

        assert len(buckets) == 6
        assert [b.date for b in buckets] == sorted(b.date for b in buckets)
        assert sum(len(b.samples) for b in buckets) == len(forecast_samples)

    def test_partial_first_and_last_day(
        self, forecast_samples: list[WeatherSample]
    ) -> None:
        buckets = bucket_by_day(forecast_samples)

        assert [s.utc_hour for s in buckets[0].samples] == [12, 15, 18, 21]
        assert buckets[0].representative.utc_hour == 12
        assert [s.utc_hour for s in buckets[-1].samples] == [0, 3, 6, 9]
        assert buckets[-1].representative.utc_hour == 9

    def test_capped_at_six_days(self) -> None:
        samples = [sample(12, day=d) for d in range(20, 12, -1)]

        buckets = bucket_by_day(samples)

        assert len(buckets) == 6
        assert [b.date.day for b in buckets] == [13, 14, 15, 16, 17, 18]

    def test_custom_limit(self) -> None:
        samples = [sample(12, day=d) for d in range(15, 20)]
        assert len(bucket_by_day(samples, limit=3)) == 3

    def test_fewer_days_are_not_padded(self) -> None:
        buckets = bucket_by_day([sample(9, day=15), sample(12, day=16)])
        assert len(buckets) == 2

    def test_empty(self) -> None:
        assert bucket_by_day([]) == []

    def test_midnight_belongs_to_next_day(self) -> None:
        buckets = bucket_by_day([sample(21, day=15), sample(24, day=15)])

        assert [b.date.day for b in buckets] == [15, 16]
        assert buckets[1].representative.utc_hour == 0

    def test_deterministic(self, forecast_samples: list[WeatherSample]) -> None:
        assert bucket_by_day(forecast_samples) == bucket_by_day(forecast_samples)


@pytest.fixture
def forecast_samples(forecast_payload: dict) -> list[WeatherSample]:
    return Forecast.model_validate(forecast_payload).samples
