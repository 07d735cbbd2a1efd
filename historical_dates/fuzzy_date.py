"""FuzzyDate domain model.

A fuzzy date is a historical date that may only be partially known: a
year, a month within a year, or a fully specified day. Every fuzzy date
carries an era (BCE/CE).

Fuzzy dates can be ordered through their sort value, the number of days
from 1 Jan 1 BCE (day 0). Partial dates sort as the first day of the
period they describe, so "42 BCE" sorts with "1 Jan 42 BCE".
"""

from __future__ import annotations

from dataclasses import dataclass

from historical_dates.calendar_math import (
    MONTH_ABBREVIATIONS,
    day_of_year,
    days_before_year,
    days_in_month,
)
from historical_dates.era import Era
from historical_dates.errors import DateError


YEAR_ERROR = "The year cannot be less than 1."
MONTH_ERROR = "The month must be between 1 and 12."
DAY_ERROR = "The day is not valid for the given month and year."
DAY_WITHOUT_MONTH_ERROR = "A day cannot be given without a month."


def validate_fuzzy_date(era: Era, year: int, month: int | None = None, day: int | None = None) -> tuple[bool, str]:
    """Validate the components of a fuzzy date.

    Checks run in order and stop at the first failure. A missing month or
    day counts as 1 for the range checks.

    Returns:
        Tuple of (is_valid, error_message). error_message is empty string if valid.
    """
    month_or_default = 1 if month is None else month
    day_or_default = 1 if day is None else day

    if year < 1:
        return False, YEAR_ERROR
    if not (1 <= month_or_default <= 12):
        return False, MONTH_ERROR
    if not (1 <= day_or_default <= days_in_month(era, year, month_or_default)):
        return False, DAY_ERROR
    if day is not None and month is None:
        return False, DAY_WITHOUT_MONTH_ERROR
    return True, ""


@dataclass(frozen=True)
class FuzzyDate:
    """A validated, possibly partial, historical date.

    Attributes:
        year: Year within the era (1 or more)
        era: BCE or CE
        month: Month (1-12), or None for a whole year
        day: Day of the month, or None for a whole month or year
    """
    year: int
    era: Era
    month: int | None = None
    day: int | None = None

    def __post_init__(self) -> None:
        """Validate field values after initialization."""
        is_valid, error_message = validate_fuzzy_date(self.era, self.year, self.month, self.day)
        if not is_valid:
            raise DateError(error_message)

    @classmethod
    def create_year(cls, era: Era, year: int) -> FuzzyDate:
        """Create a year, e.g. 42 BCE."""
        return cls(year=year, era=era)

    @classmethod
    def create_month(cls, era: Era, year: int, month: int) -> FuzzyDate:
        """Create a month, e.g. Jan 42 BCE."""
        return cls(year=year, era=era, month=month)

    @classmethod
    def create_day(cls, era: Era, year: int, month: int, day: int) -> FuzzyDate:
        """Create a fully specified day, e.g. 31 Jan 42 BCE."""
        return cls(year=year, era=era, month=month, day=day)

    def sort_value(self) -> int:
        """Number of days from 1 Jan 1 BCE, which is day 0.

        CE dates count upwards from the end of 1 BCE; BCE dates before 1 BCE
        count backwards, so 31 Dec 2 BCE is -1.
        """
        month = self.month or 1
        day = self.day or 1
        return days_before_year(self.era, self.year) + day_of_year(self.era, self.year, month, day) - 1

    def __str__(self) -> str:
        """Format as "DD Mon YYYY ERA", "Mon YYYY ERA" or "YYYY ERA"."""
        if self.day is not None and self.month is not None:
            return f"{self.day:02d} {MONTH_ABBREVIATIONS[self.month - 1]} {self.year} {self.era.value}"
        elif self.month is not None:
            return f"{MONTH_ABBREVIATIONS[self.month - 1]} {self.year} {self.era.value}"
        else:
            return f"{self.year} {self.era.value}"
