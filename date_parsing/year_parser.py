"""Parser for year-only dates."""

import re

from date_parsing.strategy import DateParserStrategy
from historical_dates.fuzzy_date import FuzzyDate


class YearParser(DateParserStrategy):
    """Parses a year with its era.

    Example: 42 BCE
    """

    pattern = re.compile(r"^([0-9]+) (BCE|CE)$", re.IGNORECASE)

    def parse(self, text: str) -> FuzzyDate | None:
        m = self.match(text)
        if m is None:
            return None
        return FuzzyDate.create_year(self.read_era(m.group(2)), self.read_year(m.group(1)))
