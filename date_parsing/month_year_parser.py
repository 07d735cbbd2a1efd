"""Parser for month and year dates."""

import re

from date_parsing.strategy import DateParserStrategy
from historical_dates.fuzzy_date import FuzzyDate


class MonthYearParser(DateParserStrategy):
    """Parses a three letter month followed by a year and era.

    Example: Jan 42 BCE
    """

    pattern = re.compile(r"^([a-z]{3}) ([0-9]+) (BCE|CE)$", re.IGNORECASE)

    def parse(self, text: str) -> FuzzyDate | None:
        """Parse month and year.

        Args:
            text: The text to parse

        Returns:
            A FuzzyDate if the text is a month and year, None otherwise

        Raises:
            DateParseError: If the month name is not recognized
            DateError: If the year is invalid
        """
        m = self.match(text)
        if m is None:
            return None
        month = self.read_month(m.group(1))
        return FuzzyDate.create_month(self.read_era(m.group(3)), self.read_year(m.group(2)), month)
