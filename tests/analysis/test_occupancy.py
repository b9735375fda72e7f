import logging
from datetime import datetime

import pytest
from sleepchart.analysis.occupancy import allocate, allocate_interval, hour_start
from sleepchart.models import SleepInterval


def interval(start, end):
    return SleepInterval(datetime.fromisoformat(start), datetime.fromisoformat(end))


def test_hour_start_truncates():
    assert hour_start(datetime(2024, 1, 1, 22, 47, 13, 500)) == datetime(2024, 1, 1, 22)


def test_exact_hour_produces_single_full_bucket():
    """A one-hour aligned interval takes the hour-by-hour path and fills one bucket."""
    occupancy = allocate([interval("2024-01-01 18:00:00", "2024-01-01 19:00:00")])
    assert occupancy == {datetime(2024, 1, 1, 18): 1.0}


def test_interval_spanning_boundary():
    occupancy = allocate([interval("2024-01-01 17:30:00", "2024-01-01 19:15:00")])
    assert occupancy == {
        datetime(2024, 1, 1, 17): 0.5,
        datetime(2024, 1, 1, 18): 1.0,
        datetime(2024, 1, 1, 19): 0.25,
    }


def test_zero_duration_produces_no_buckets():
    occupancy = allocate([interval("2024-01-01 23:00:00", "2024-01-01 23:00:00")])
    assert occupancy == {}


def test_short_interval_same_day():
    occupancy = allocate([interval("2024-01-02 06:30:00", "2024-01-02 07:00:00")])
    assert occupancy == {datetime(2024, 1, 2, 6): 0.5}


def test_short_interval_ignores_seconds():
    occupancy = allocate([interval("2024-01-02 06:00:00", "2024-01-02 06:30:45")])
    assert occupancy == {datetime(2024, 1, 2, 6): 0.5}


def test_short_interval_is_recorded_at_start_hour():
    """Under an hour on one calendar day: all minutes go to the start's hour."""
    occupancy = allocate([interval("2024-01-01 17:50:00", "2024-01-01 18:10:00")])
    assert list(occupancy) == [datetime(2024, 1, 1, 17)]
    assert occupancy[datetime(2024, 1, 1, 17)] == pytest.approx(20 / 60)


def test_short_interval_across_midnight_is_split():
    occupancy = allocate([interval("2024-01-01 23:50:00", "2024-01-02 00:10:00")])
    assert occupancy == {
        datetime(2024, 1, 1, 23): pytest.approx(10 / 60),
        datetime(2024, 1, 2, 0): pytest.approx(10 / 60),
    }


def test_overlapping_hour_is_overwritten_not_summed(caplog):
    caplog.set_level(logging.DEBUG, logger="sleepchart.analysis.occupancy")
    occupancy = allocate([
        interval("2024-01-01 22:00:00", "2024-01-01 22:30:00"),
        interval("2024-01-01 22:40:00", "2024-01-01 22:50:00"),
    ])
    assert occupancy == {datetime(2024, 1, 1, 22): pytest.approx(10 / 60)}
    assert "Overwriting 2024-01-01 22:00:00: 0.50 -> 0.17" in caplog.text


def test_fractions_sum_to_duration():
    intervals = [
        interval("2024-01-01 22:15:00", "2024-01-02 06:45:00"),
        interval("2024-01-02 13:20:00", "2024-01-02 14:05:00"),
    ]
    occupancy = allocate(intervals)

    expected = sum(i.duration_hours for i in intervals)
    assert sum(occupancy.values()) == pytest.approx(expected, abs=0.01)
    assert all(0.0 <= f <= 1.0 for f in occupancy.values())


def test_allocate_interval_updates_existing_map():
    occupancy = {datetime(2024, 1, 1, 3): 0.75}
    allocate_interval(interval("2024-01-01 05:00:00", "2024-01-01 06:30:00"), occupancy)
    assert occupancy == {
        datetime(2024, 1, 1, 3): 0.75,
        datetime(2024, 1, 1, 5): 1.0,
        datetime(2024, 1, 1, 6): 0.5,
    }
