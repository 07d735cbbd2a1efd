"""Orchestrator for parsing fuzzy dates."""

from __future__ import annotations

from date_parsing.factory import DateParsers
from date_parsing.orchestrators.parse_orchestrator import ParseOrchestrator
from historical_dates.fuzzy_date import FuzzyDate


class FuzzyDateParseOrchestrator(ParseOrchestrator):
    """Parses "42 BCE", "Jan 42 BCE" and "31 Jan 42 BCE"."""

    def get_parser_steps(self) -> list[DateParsers]:
        return [
            DateParsers.YEAR,
            DateParsers.MONTH_AND_YEAR,
            DateParsers.DAY_MONTH_AND_YEAR,
        ]

    def parse(self, text: str) -> FuzzyDate:
        return super().parse(text)
