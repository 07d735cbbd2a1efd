"""Reading fuzzy dates and event dates from text.

Grammar (month names and eras are case-insensitive):

    date      ::= day | month | year
    year      ::= INT " " era
    month     ::= MON " " INT " " era
    day       ::= INT " " MON " " INT " " era
    era       ::= "BCE" | "CE"
    MON       ::= "Jan" .. "Dec"
    eventdate ::= "< " date | "> " date | date " - " date | date
"""

from __future__ import annotations

from date_parsing.orchestrators.event_date_parse_orchestrator import EventDateParseOrchestrator
from date_parsing.orchestrators.fuzzy_date_parse_orchestrator import FuzzyDateParseOrchestrator
from historical_dates.event_date import EventDate
from historical_dates.fuzzy_date import FuzzyDate


_FUZZY_DATES = FuzzyDateParseOrchestrator()
_EVENT_DATES = EventDateParseOrchestrator()


def probe_date(text: str) -> bool:
    """True if the text looks like a fuzzy date. The date is not validated."""
    return _FUZZY_DATES.probe(text)


def probe_event_date(text: str) -> bool:
    """True if the text looks like an event date. The dates are not validated."""
    return _EVENT_DATES.probe(text)


def parse_fuzzy_date(text: str) -> FuzzyDate:
    """Parse a fuzzy date such as "31 Jan 42 BCE".

    Raises:
        DateParseError: If the text is not a date or has an unknown month
        DateError: If the date is invalid, e.g. "30 Feb 2001 CE"
    """
    return _FUZZY_DATES.parse(text)


def parse_event_date(text: str) -> EventDate:
    """Parse an event date such as "< 13 BCE" or "13 BCE - 14 Jun 34 CE".

    Raises:
        DateParseError: If the text is not a date or has an unknown month
        DateError: If a date is invalid or a range is reversed
    """
    return _EVENT_DATES.parse(text)


def try_parse_fuzzy_date(text: str) -> tuple[FuzzyDate | None, str]:
    """Like parse_fuzzy_date, but returns (date, error_message) instead of raising."""
    return _FUZZY_DATES.try_parse(text)


def try_parse_event_date(text: str) -> tuple[EventDate | None, str]:
    """Like parse_event_date, but returns (date, error_message) instead of raising."""
    return _EVENT_DATES.try_parse(text)
