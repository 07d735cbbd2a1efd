"""Orchestrator for parsing event dates."""

from __future__ import annotations

from date_parsing.factory import DateParsers
from date_parsing.orchestrators.parse_orchestrator import ParseOrchestrator
from historical_dates.event_date import EventDate


class EventDateParseOrchestrator(ParseOrchestrator):
    """Parses specific, before, after and between event dates."""

    def get_parser_steps(self) -> list[DateParsers]:
        """Get the ordered list of parser strategies for event dates.

        The marked forms come first; a bare fuzzy date is the fallback.

        Returns:
            Ordered list of DateParsers to try in sequence
        """
        return [
            DateParsers.BEFORE,
            DateParsers.AFTER,
            DateParsers.BETWEEN,
            DateParsers.SPECIFIC,
        ]

    def parse(self, text: str) -> EventDate:
        return super().parse(text)
