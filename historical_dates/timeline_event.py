"""Timeline events: a dated, titled historical event.

Events are usually built from raw (date text, title, url) records. Records
given as dictionaries are checked against event_schema.json before their
date text is parsed.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable

import jsonschema

from historical_dates.config import load_dates_config
from historical_dates.errors import TimelineEventError
from historical_dates.event_date import EventDate

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _load_event_schema(schema_path: Path) -> dict:
    """Load the timeline event JSON schema."""
    with open(schema_path, "r", encoding="utf-8") as f:
        return json.load(f)


def validate_event_record(data: dict[str, Any]) -> tuple[bool, str]:
    """Validate a raw event record against the timeline event schema.

    Args:
        data: Record to validate, e.g. {"date": "44 BCE", "title": "..."}

    Returns:
        Tuple of (is_valid, error_message). error_message is empty string if valid.
    """
    schema = _load_event_schema(load_dates_config().event_schema_path)
    try:
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as e:
        return False, e.message
    return True, ""


@dataclass(frozen=True)
class TimelineEvent:
    """A historical event placed on the timeline.

    Attributes:
        date: When the event happened
        title: Event title (non-empty)
        url: Optional link to more information
    """
    date: EventDate
    title: str
    url: str | None = None

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise TimelineEventError("Event title cannot be empty")

    @classmethod
    def create(cls, title: str, date_text: str, url: str | None = None) -> TimelineEvent:
        """Create an event, parsing its date from text.

        Raises:
            DateError: If the date text is not a valid event date
            TimelineEventError: If the title is empty
        """
        # Lazy import to avoid circular dependency
        from date_parsing.date_parser import parse_event_date

        return cls(date=parse_event_date(date_text), title=title, url=url)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TimelineEvent:
        """Create an event from a raw record.

        Raises:
            TimelineEventError: If the record does not match the schema
            DateError: If the record's date is not a valid event date
        """
        is_valid, error_message = validate_event_record(data)
        if not is_valid:
            logger.warning("Rejected timeline event record %r: %s", data, error_message)
            raise TimelineEventError(f"Invalid timeline event: {error_message}")
        return cls.create(data["title"], data["date"], data.get("url"))

    def to_dict(self) -> dict[str, Any]:
        """Convert this event to a dictionary for JSON serialization."""
        return {
            "date": str(self.date),
            "title": self.title,
            "url": self.url,
            "sort_value": str(self.date.sort_value()),
        }

    def __str__(self) -> str:
        return f"{str(self.date):<20} {self.title}"


def sort_chronologically(events: Iterable[TimelineEvent]) -> list[TimelineEvent]:
    """Sort events by date.

    Events whose dates share a sort value keep their original relative
    order, on the assumption that the source listed them chronologically.
    """
    return sorted(events, key=lambda event: event.date.sort_value())
