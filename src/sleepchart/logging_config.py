"""Logging setup for the sleepchart command line."""

import logging
import logging.config
from typing import Any

from rich.console import Console

stderr_console = Console(stderr=True)

_logging_configured = False


def _build_logging_config(verbose: bool = False) -> dict[str, Any]:
    level = "DEBUG" if verbose else "INFO"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {"format": "%(message)s", "datefmt": "[%X]"},
        },
        "handlers": {
            "console": {
                "class": "rich.logging.RichHandler",
                "level": level,
                "formatter": "console",
                "console": "ext://sleepchart.logging_config.stderr_console",
                "show_path": False,
            },
        },
        "root": {
            "level": level,
            "handlers": ["console"],
        },
    }


def setup_logging(*, verbose: bool = False) -> None:
    """Configure logging once, sending records to stderr through rich."""
    global _logging_configured

    if _logging_configured:
        return

    logging.config.dictConfig(_build_logging_config(verbose=verbose))
    _logging_configured = True
