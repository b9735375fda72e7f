"""Generate the tab-delimited hourly sleep chart.

Each row covers one sleep day (18:00 to 17:59 the next day):

    01/01/24 → 01/02/24 <TAB> 24 hourly cells <TAB> HH:MM

Cells hold the fraction of the hour spent asleep to 2 decimals, or nothing
for an hour with no sleep, so the sheet the chart is pasted into stays
sparse. There is no header row.
"""

import os
import tempfile
from datetime import datetime, timedelta
from pathlib import Path

from ..errors import OutputWriteError
from ..models import HOURS_PER_DAY, ChartRow, ReportingWindow

ONE_HOUR = timedelta(hours=1)
ONE_DAY = timedelta(days=1)

LABEL_DATE_FORMAT = "%m/%d/%y"


def format_cell(fraction: float) -> str:
    """Format an hourly fraction, leaving empty hours blank."""
    return f"{fraction:.2f}" if fraction else ""


def format_total(fractions: list[float] | tuple[float, ...]) -> str:
    """Format the summed fractions as HH:MM, or "" if nothing was slept."""
    total_hours = sum(fractions)
    if total_hours <= 0:
        return ""

    total_minutes = int(round(total_hours * 60))
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours:02d}:{minutes:02d}"


def format_date_label(day_start: datetime) -> str:
    """Label like '01/01/24 → 01/02/24' for the sleep day starting at day_start."""
    last_hour = day_start + ONE_DAY - ONE_HOUR
    return f"{day_start.strftime(LABEL_DATE_FORMAT)} → {last_hour.strftime(LABEL_DATE_FORMAT)}"


def render_day(cursor: datetime, occupancy: dict[datetime, float]) -> tuple[ChartRow, datetime]:
    """Render the sleep day starting at cursor.

    Returns the row and the cursor advanced past the day's 24 hours.
    """
    day_start = cursor
    fractions = []
    for _ in range(HOURS_PER_DAY):
        fractions.append(occupancy.get(cursor, 0.0))
        cursor += ONE_HOUR

    row = ChartRow(
        day_start=day_start,
        date_label=format_date_label(day_start),
        hourly_fractions=tuple(fractions),
        daily_total=format_total(fractions),
    )
    return row, cursor


def render_chart(window: ReportingWindow, occupancy: dict[datetime, float]) -> list[ChartRow]:
    """Render one row per sleep day in the window."""
    rows = []
    cursor = window.start_date
    while cursor < window.end_date:
        row, cursor = render_day(cursor, occupancy)
        rows.append(row)
    return rows


def format_row(row: ChartRow) -> str:
    """Tab-delimited line for a chart row, without the newline."""
    cells = [format_cell(f) for f in row.hourly_fractions]
    return "\t".join([row.date_label, *cells, row.daily_total])


def chart_to_text(rows: list[ChartRow]) -> str:
    """Full chart text, one newline-terminated line per row."""
    return "".join(format_row(row) + "\n" for row in rows)


def write_chart(rows: list[ChartRow], output_path: Path) -> Path:
    """Write the chart, replacing output_path only once the full text is on disk.

    Returns the resolved output path.
    """
    output_path = Path(output_path)
    text = chart_to_text(rows)
    temp_path = None

    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=output_path.parent,
            prefix=f".{output_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            temp_path = Path(f.name)
            f.write(text)
        os.replace(temp_path, output_path)
    except OSError as e:
        if temp_path is not None and temp_path.exists():
            temp_path.unlink()
        raise OutputWriteError(f"Cannot write chart to {output_path}: {e}") from e

    return output_path.resolve()
