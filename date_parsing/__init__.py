"""Date parsing module for reading historical dates from text.

This module provides a parser per form of the date grammar (year, month,
day, before, after, between) and orchestrators that try them in order.
"""

from date_parsing.strategy import DateParserStrategy
from date_parsing.factory import DateParsers, DateParserFactory
from date_parsing.date_parser import (
    parse_event_date,
    parse_fuzzy_date,
    probe_date,
    probe_event_date,
    try_parse_event_date,
    try_parse_fuzzy_date,
)

__all__ = [
    "DateParserStrategy",
    "DateParsers",
    "DateParserFactory",
    "parse_event_date",
    "parse_fuzzy_date",
    "probe_date",
    "probe_event_date",
    "try_parse_event_date",
    "try_parse_fuzzy_date",
]
