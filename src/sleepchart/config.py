"""Run configuration for the sleep chart pipeline."""

from dataclasses import dataclass
from pathlib import Path

import yaml

from .errors import ConfigError

DEFAULT_DELIMITER = ";"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONFIG_KEYS = {"delimiter", "date_format"}


@dataclass(frozen=True)
class ChartConfig:
    """Paths and input format for a single run."""

    input_path: Path
    output_path: Path
    delimiter: str = DEFAULT_DELIMITER
    date_format: str = DEFAULT_DATE_FORMAT

    def __post_init__(self):
        if len(self.delimiter) != 1:
            raise ConfigError(f"Delimiter must be a single character, got {self.delimiter!r}")
        if not self.date_format:
            raise ConfigError("Date format must not be empty")


def load_config_file(config_path: Path) -> dict:
    """Load delimiter/date_format defaults from a YAML file."""
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    unknown = set(data) - CONFIG_KEYS
    if unknown:
        raise ConfigError(
            f"Unknown config key(s): {', '.join(sorted(unknown))}. "
            f"Allowed: {', '.join(sorted(CONFIG_KEYS))}"
        )

    for key, value in data.items():
        if not isinstance(value, str):
            raise ConfigError(f"Config value for '{key}' must be a string")

    return data


def build_config(
    input_path: Path,
    output_path: Path,
    delimiter: str | None = None,
    date_format: str | None = None,
    config_path: Path | None = None,
) -> ChartConfig:
    """Resolve a ChartConfig.

    Explicit arguments win over the config file, which wins over the
    built-in defaults.
    """
    file_values = load_config_file(config_path) if config_path else {}
    if delimiter is None:
        delimiter = file_values.get("delimiter", DEFAULT_DELIMITER)
    if date_format is None:
        date_format = file_values.get("date_format", DEFAULT_DATE_FORMAT)

    return ChartConfig(
        input_path=Path(input_path),
        output_path=Path(output_path),
        delimiter=delimiter,
        date_format=date_format,
    )
