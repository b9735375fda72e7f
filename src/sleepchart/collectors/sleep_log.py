"""Sleep log importer.

Reads delimited exports of sleep intervals. The first line is a header and
is always discarded; each following line starts with the start and end
timestamps of one interval. Extra trailing fields are ignored.

Example (default format):
    Start;End;Sleep quality
    2024-01-01 22:00:00;2024-01-02 06:30:00;81%
"""

import csv
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable

from ..config import DEFAULT_DATE_FORMAT, DEFAULT_DELIMITER
from ..errors import InputNotFoundError, MalformedRowError, NoDataError
from ..models import SleepInterval

logger = logging.getLogger(__name__)


def parse_timestamp(value: str, date_format: str, line_number: int) -> datetime:
    try:
        return datetime.strptime(value.strip(), date_format)
    except ValueError as e:
        raise MalformedRowError(
            line_number, f"'{value.strip()}' does not match date format '{date_format}'"
        ) from e


def _read_rows(reader):
    """Yield rows from a csv reader, reporting csv errors against their line."""
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as e:
            raise MalformedRowError(reader.line_num, str(e)) from e
        yield row


def parse_rows(
    lines: Iterable[str],
    delimiter: str = DEFAULT_DELIMITER,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> list[SleepInterval]:
    """Parse sleep log lines into intervals, preserving input order.

    Raises MalformedRowError for the first row that cannot be split, is short, has an
    unparseable timestamp or ends before it starts.
    """
    reader = csv.reader(lines, delimiter=delimiter)
    rows = _read_rows(reader)
    next(rows, None)  # header

    intervals = []
    for row in rows:
        line_number = reader.line_num
        if not row or (len(row) == 1 and not row[0].strip()):
            logger.debug("Skipping blank line %d", line_number)
            continue

        if len(row) < 2:
            raise MalformedRowError(
                line_number, f"expected at least 2 fields separated by '{delimiter}', got {len(row)}"
            )

        start = parse_timestamp(row[0], date_format, line_number)
        end = parse_timestamp(row[1], date_format, line_number)
        if start > end:
            raise MalformedRowError(line_number, f"sleep ends ({end}) before it starts ({start})")

        intervals.append(SleepInterval(start=start, end=end, line_number=line_number))

    return intervals


def read_intervals(
    input_path: Path,
    delimiter: str = DEFAULT_DELIMITER,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> list[SleepInterval]:
    """Read and parse a sleep log file.

    Raises:
        InputNotFoundError: the file does not exist or cannot be read
        NoDataError: the file has no data rows after the header
        MalformedRowError: a data row is invalid
    """
    try:
        with open(input_path, encoding="utf-8-sig", newline="") as f:
            intervals = parse_rows(f, delimiter, date_format)
    except FileNotFoundError as e:
        raise InputNotFoundError(f"Sleep log not found: {input_path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise InputNotFoundError(f"Cannot read sleep log {input_path}: {e}") from e

    if not intervals:
        raise NoDataError(f"No sleep data found in {input_path} (only a header or empty file)")

    logger.debug("Read %d interval(s) from %s", len(intervals), input_path)
    return intervals
