"""Parser for date ranges."""

import re

from date_parsing.orchestrators.fuzzy_date_parse_orchestrator import FuzzyDateParseOrchestrator
from date_parsing.strategy import DateParserStrategy
from historical_dates.event_date import EventDate


class BetweenParser(DateParserStrategy):
    """Parses a range between two fuzzy dates.

    The text is split at the first " - ".

    Example: 13 BCE - 14 Jun 34 CE
    """

    pattern = re.compile(r"^(.+?) - (.+)$")

    def __init__(self):
        self._dates = FuzzyDateParseOrchestrator()

    def probe(self, text: str) -> bool:
        m = self.match(text)
        if m is None:
            return False
        return self._dates.probe(m.group(1)) and self._dates.probe(m.group(2))

    def parse(self, text: str) -> EventDate | None:
        """Parse a date range.

        Args:
            text: The text to parse

        Returns:
            An EventDate range if the text contains " - ", None otherwise

        Raises:
            DateParseError: If either side is not a date
            DateError: If either side is invalid or the range is reversed
        """
        m = self.match(text)
        if m is None:
            return None
        first = self._dates.parse(m.group(1))
        last = self._dates.parse(m.group(2))
        return EventDate.between(first, last)
