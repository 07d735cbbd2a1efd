"""
Historical Dates

Domain model for "fuzzy" historical dates, providing:
- Historical leap year rules (none, triennial, Julian, Gregorian)
- Day counting across the BCE/CE boundary
- FuzzyDate (year, month or day precision) and EventDate (specific,
  before, after, between) with chronological sort values

Reading dates from text lives in the date_parsing package.
"""

from historical_dates.era import Era, astronomical_year
from historical_dates.errors import DateError, DateParseError, TimelineEventError
from historical_dates.leap_years import LeapYearRegime, is_leap_year, regime_for
from historical_dates.fuzzy_date import FuzzyDate, validate_fuzzy_date
from historical_dates.event_date import EventDate, EventDateKind, validate_event_date

__all__ = [
    "Era",
    "astronomical_year",
    "DateError",
    "DateParseError",
    "TimelineEventError",
    "LeapYearRegime",
    "is_leap_year",
    "regime_for",
    "FuzzyDate",
    "validate_fuzzy_date",
    "EventDate",
    "EventDateKind",
    "validate_event_date",
]
