"""Day counting on top of the historical leap year rules.

These helpers assume their inputs have already been validated (see
FuzzyDate); they do not range-check months or days.
"""

from historical_dates.era import Era, astronomical_year
from historical_dates.leap_years import is_leap_year, leap_years_before


DAYS_IN_NORMAL_YEAR = 365
DAYS_IN_LEAP_YEAR = 366

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_MONTH_NUMBERS = {name.lower(): number for number, name in enumerate(MONTH_ABBREVIATIONS, start=1)}


def month_from_abbreviation(name: str) -> int | None:
    """Convert a three letter month name to its number (1-12).

    Args:
        name: e.g. "Jan", "feb", "DEC"

    Returns:
        1-12 or None if not recognized
    """
    if not name:
        return None
    return _MONTH_NUMBERS.get(name.lower())


def days_in_month(era: Era, year: int, month: int) -> int:
    if month == 2 and is_leap_year(era, year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def days_in_year(era: Era, year: int) -> int:
    return DAYS_IN_LEAP_YEAR if is_leap_year(era, year) else DAYS_IN_NORMAL_YEAR


def day_of_year(era: Era, year: int, month: int, day: int) -> int:
    """One-based position of a day within its year (1 Jan is 1)."""
    return sum(days_in_month(era, year, m) for m in range(1, month)) + day


def days_remaining_in_year(era: Era, year: int, month: int, day: int) -> int:
    """Days left in the year after the given day (31 Dec leaves 0)."""
    return days_in_year(era, year) - day_of_year(era, year, month, day)


def days_before_year(era: Era, year: int) -> int:
    """Days from 1 Jan 1 BCE to 1 Jan of the given year.

    Negative for years before 1 BCE.
    """
    astronomical = astronomical_year(era, year)
    return DAYS_IN_NORMAL_YEAR * astronomical + leap_years_before(astronomical) - leap_years_before(0)
