"""EventDate domain model.

An event date wraps one or two fuzzy dates:

- specific: "18 Apr 1472 CE"
- before:   "< 13 BCE"   (some time before the date)
- after:    "> 13 BCE"   (some time after the date)
- between:  "13 BCE - 14 Jun 34 CE"

Sort values are Decimals so the +/-0.1 nudges for open-ended dates stay
exact. A "before" date sorts just ahead of events on its day, while
"after" and "between" dates sort just behind them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from historical_dates.errors import DateError
from historical_dates.fuzzy_date import FuzzyDate

logger = logging.getLogger(__name__)


RANGE_ORDER_ERROR = "The second date cannot come before the first."


class EventDateKind(Enum):
    """The shapes an event date can take."""
    SPECIFIC = "specific"
    BEFORE = "before"
    AFTER = "after"
    BETWEEN = "between"


_SORT_ADJUSTMENTS = {
    EventDateKind.SPECIFIC: Decimal("0.0"),
    EventDateKind.BEFORE: Decimal("-0.1"),
    EventDateKind.AFTER: Decimal("0.1"),
    EventDateKind.BETWEEN: Decimal("0.1"),
}


def validate_event_date(kind: EventDateKind, first: FuzzyDate, last: FuzzyDate | None = None) -> tuple[bool, str]:
    """Validate the dates making up an event date.

    Returns:
        Tuple of (is_valid, error_message). error_message is empty string if valid.
    """
    if kind == EventDateKind.BETWEEN:
        if last is None:
            return False, "A date range needs both a first and a last date."
        if first.sort_value() > last.sort_value():
            return False, RANGE_ORDER_ERROR
    elif last is not None:
        return False, f"Only a date range can have a last date, not a {kind.value} date."
    return True, ""


@dataclass(frozen=True)
class EventDate:
    """The date of a historical event.

    Attributes:
        kind: Which shape of event date this is
        first: The date itself, or the start of a range
        last: The end of a range, None for every other kind
    """
    kind: EventDateKind
    first: FuzzyDate
    last: FuzzyDate | None = None

    def __post_init__(self) -> None:
        """Validate field values after initialization."""
        is_valid, error_message = validate_event_date(self.kind, self.first, self.last)
        if not is_valid:
            logger.debug("Rejected %s event date %s / %s: %s", self.kind.value, self.first, self.last, error_message)
            raise DateError(error_message)

    @classmethod
    def specific(cls, date: FuzzyDate) -> EventDate:
        """A single specific date, e.g. 18 Apr 1472 CE."""
        return cls(EventDateKind.SPECIFIC, date)

    @classmethod
    def before(cls, date: FuzzyDate) -> EventDate:
        """Some time before a date, e.g. < 13 BCE."""
        return cls(EventDateKind.BEFORE, date)

    @classmethod
    def after(cls, date: FuzzyDate) -> EventDate:
        """Some time after a date, e.g. > 13 BCE."""
        return cls(EventDateKind.AFTER, date)

    @classmethod
    def between(cls, first: FuzzyDate, last: FuzzyDate) -> EventDate:
        """A date range, e.g. 13 BCE - 14 Jun 34 CE.

        Raises:
            DateError: If last comes before first
        """
        return cls(EventDateKind.BETWEEN, first, last)

    def sort_value(self) -> Decimal:
        """Value to compare when sorting event dates chronologically.

        Ranges sort by their first date.
        """
        return Decimal(self.first.sort_value()) + _SORT_ADJUSTMENTS[self.kind]

    def __str__(self) -> str:
        if self.kind == EventDateKind.SPECIFIC:
            return str(self.first)
        elif self.kind == EventDateKind.BEFORE:
            return f"< {self.first}"
        elif self.kind == EventDateKind.AFTER:
            return f"> {self.first}"
        elif self.kind == EventDateKind.BETWEEN:
            return f"{self.first} - {self.last}"
        else:
            raise ValueError(f"Unknown event date kind: {self.kind}")
