"""Hourly occupancy allocation.

Spreads each sleep interval over the clock hours it overlaps, producing a
sparse map of hour start -> fraction of that hour spent asleep.

Writes overwrite: if two intervals touch the same hour, the one processed
last wins. Input intervals are expected not to overlap within an hour.
"""

import logging
from datetime import datetime, timedelta

from ..models import SleepInterval

logger = logging.getLogger(__name__)

ONE_HOUR = timedelta(hours=1)


def hour_start(ts: datetime) -> datetime:
    """Truncate a timestamp to the top of its clock hour."""
    return ts.replace(minute=0, second=0, microsecond=0)


def _store(occupancy: dict[datetime, float], bucket: datetime, fraction: float) -> None:
    previous = occupancy.get(bucket)
    if previous:
        logger.debug(
            "Overwriting %s: %.2f -> %.2f (overlapping intervals)", bucket, previous, fraction
        )
    occupancy[bucket] = fraction


def allocate_interval(interval: SleepInterval, occupancy: dict[datetime, float]) -> None:
    """Record one interval's hourly fractions into occupancy."""
    start, end = interval.start, interval.end
    duration = end - start

    # Short sleep on one calendar day: minutes of the duration, at start's hour
    if duration < ONE_HOUR and start.date() == end.date():
        minutes_asleep = int(duration.total_seconds() // 60) % 60
        if minutes_asleep:
            _store(occupancy, hour_start(start), minutes_asleep / 60)
        return

    bucket = hour_start(start)
    while bucket < end:
        bucket_end = bucket + ONE_HOUR
        overlap = min(bucket_end, end) - max(bucket, start)
        overlap_minutes = overlap.total_seconds() / 60
        _store(occupancy, bucket, overlap_minutes / 60)
        bucket = bucket_end


def allocate(intervals: list[SleepInterval]) -> dict[datetime, float]:
    """Build the hourly occupancy map for all intervals, in input order."""
    occupancy: dict[datetime, float] = {}
    for interval in intervals:
        allocate_interval(interval, occupancy)
    return occupancy
