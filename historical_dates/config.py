"""Configuration and logging setup for historical dates."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path


_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_EVENT_SCHEMA_PATH = Path(__file__).resolve().parent / "event_schema.json"
_LOG_FORMAT = "%(asctime)s\t%(levelname)s\t%(name)s\t%(message)s"


@dataclass(frozen=True)
class DatesConfig:
    log_level: str
    event_schema_path: Path


def _parse_log_level(value: str | None, default: str) -> str:
    if value is None or not value.strip():
        return default
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


def load_dates_config() -> DatesConfig:
    """Load configuration from environment variables."""
    log_level = _parse_log_level(os.getenv("HISTORICAL_DATES_LOG_LEVEL"), _DEFAULT_LOG_LEVEL)
    schema_override = os.getenv("HISTORICAL_DATES_EVENT_SCHEMA", "").strip()
    event_schema_path = Path(schema_override) if schema_override else _DEFAULT_EVENT_SCHEMA_PATH

    return DatesConfig(
        log_level=log_level,
        event_schema_path=event_schema_path,
    )


def setup_logging(config: DatesConfig | None = None) -> logging.Logger:
    """Send historical_dates and date_parsing logs to stderr.

    Call once from the application that embeds this library; importing the
    library never configures logging.
    """
    config = config or load_dates_config()
    formatter = logging.Formatter(_LOG_FORMAT)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    for name in ("historical_dates", "date_parsing"):
        package_logger = logging.getLogger(name)
        package_logger.setLevel(config.log_level)
        # Remove existing handlers to avoid duplicates if called multiple times
        package_logger.handlers.clear()
        package_logger.addHandler(handler)

    return logging.getLogger("historical_dates")
