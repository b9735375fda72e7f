"""Exceptions raised while building a sleep chart."""


class SleepChartError(Exception):
    """Base exception for sleep chart errors."""
    pass


class ConfigError(SleepChartError):
    """Invalid delimiter, date format or config file."""
    pass


class InputNotFoundError(SleepChartError):
    """The input file is missing or unreadable."""
    pass


class NoDataError(SleepChartError):
    """The input has no data rows after the header."""
    pass


class MalformedRowError(SleepChartError):
    """A data row could not be split or its timestamps could not be parsed."""

    def __init__(self, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Line {line_number}: {reason}")


class OutputWriteError(SleepChartError):
    """The chart could not be written to its destination."""
    pass
