"""Data models for sleep intervals and chart rows."""

from dataclasses import dataclass, field
from datetime import datetime

HOURS_PER_DAY = 24


@dataclass(frozen=True)
class SleepInterval:
    """A single logged sleep interval."""

    start: datetime
    end: datetime
    line_number: int | None = field(default=None, compare=False)

    @property
    def duration_hours(self) -> float:
        return (self.end - self.start).total_seconds() / 3600


@dataclass(frozen=True)
class ReportingWindow:
    """Span of sleep days covered by one run.

    start_date is the 18:00 anchor of the first sleep day, end_date the
    17:00 hour of the last one.
    """

    start_date: datetime
    end_date: datetime


@dataclass(frozen=True)
class ChartRow:
    """One sleep day in the output chart."""

    day_start: datetime
    date_label: str
    hourly_fractions: tuple[float, ...]
    daily_total: str  # HH:MM, or "" for a day with no sleep
