"""Run the sleep log -> hourly chart pipeline."""

import logging
from dataclasses import dataclass
from pathlib import Path

from .analysis.occupancy import allocate
from .analysis.window import find_reporting_window
from .collectors.sleep_log import read_intervals
from .config import ChartConfig
from .models import ChartRow, ReportingWindow
from .reports.hourly_chart import render_chart, write_chart

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    """Outcome of a successful run."""

    output_path: Path
    window: ReportingWindow
    interval_count: int
    row_count: int


def build_chart(config: ChartConfig) -> tuple[ReportingWindow, list[ChartRow], int]:
    """Parse the input once and render every chart row.

    Returns the reporting window, the rows and the number of intervals read.
    """
    intervals = read_intervals(config.input_path, config.delimiter, config.date_format)
    window = find_reporting_window(intervals)
    logger.info(
        "Read %d interval(s); reporting window %s to %s",
        len(intervals),
        window.start_date,
        window.end_date,
    )

    occupancy = allocate(intervals)
    rows = render_chart(window, occupancy)
    return window, rows, len(intervals)


def process(config: ChartConfig) -> ProcessResult:
    """Build the chart and write it to config.output_path."""
    window, rows, interval_count = build_chart(config)
    output_path = write_chart(rows, config.output_path)
    logger.info("Wrote %d sleep day(s) to %s", len(rows), output_path)

    return ProcessResult(
        output_path=output_path,
        window=window,
        interval_count=interval_count,
        row_count=len(rows),
    )
