"""Sleep-day boundaries and the reporting window.

A sleep day runs from 18:00 on one calendar day to 17:59:59 on the next,
so a night's sleep lands on a single chart row.
"""

from datetime import datetime, timedelta

from ..errors import NoDataError
from ..models import ReportingWindow, SleepInterval

SLEEP_DAY_START_HOUR = 18
SLEEP_DAY_LAST_HOUR = 17


def sleep_day_start(ts: datetime) -> datetime:
    """18:00 anchor of the sleep day containing ts."""
    anchor = ts.replace(hour=SLEEP_DAY_START_HOUR, minute=0, second=0, microsecond=0)
    if ts.hour <= SLEEP_DAY_LAST_HOUR:
        anchor -= timedelta(days=1)
    return anchor


def sleep_day_end(ts: datetime) -> datetime:
    """17:00 hour of the sleep day containing ts."""
    last_hour = ts.replace(hour=SLEEP_DAY_LAST_HOUR, minute=0, second=0, microsecond=0)
    if ts.hour >= SLEEP_DAY_START_HOUR:
        last_hour += timedelta(days=1)
    return last_hour


def find_reporting_window(intervals: list[SleepInterval]) -> ReportingWindow:
    """Window from the first interval's sleep day to the last interval's.

    The end bound comes from the end timestamp of the last interval in
    input order.
    """
    if not intervals:
        raise NoDataError("Cannot find a reporting window without sleep data")

    return ReportingWindow(
        start_date=sleep_day_start(intervals[0].start),
        end_date=sleep_day_end(intervals[-1].end),
    )
