"""Parser for "some time before" event dates."""

import re

from date_parsing.orchestrators.fuzzy_date_parse_orchestrator import FuzzyDateParseOrchestrator
from date_parsing.strategy import DateParserStrategy
from historical_dates.event_date import EventDate


class BeforeParser(DateParserStrategy):
    """Parses an open-ended date before a fuzzy date.

    Example: < 13 BCE
    """

    pattern = re.compile(r"^< (.+)$")

    def __init__(self):
        self._dates = FuzzyDateParseOrchestrator()

    def probe(self, text: str) -> bool:
        m = self.match(text)
        return m is not None and self._dates.probe(m.group(1))

    def parse(self, text: str) -> EventDate | None:
        m = self.match(text)
        if m is None:
            return None
        return EventDate.before(self._dates.parse(m.group(1)))
