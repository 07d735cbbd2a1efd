"""Parser for specific event dates."""

import re

from date_parsing.orchestrators.fuzzy_date_parse_orchestrator import FuzzyDateParseOrchestrator
from date_parsing.strategy import DateParserStrategy
from historical_dates.event_date import EventDate


class SpecificParser(DateParserStrategy):
    """Parses a bare fuzzy date as a specific event date.

    Accepts any text, so it must be the last step tried.

    Example: 18 Apr 1472 CE
    """

    pattern = re.compile(r"^(.*)$")

    def __init__(self):
        self._dates = FuzzyDateParseOrchestrator()

    def probe(self, text: str) -> bool:
        return self._dates.probe(text)

    def parse(self, text: str) -> EventDate | None:
        return EventDate.specific(self._dates.parse(text))
