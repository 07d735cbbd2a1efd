"""Parser for fully specified dates."""

import re

from date_parsing.strategy import DateParserStrategy
from historical_dates.fuzzy_date import FuzzyDate


class DayMonthYearParser(DateParserStrategy):
    """Parses a day, three letter month, year and era.

    Example: 31 Jan 42 BCE
    Example: 05 Mar 44 BCE (zero padded day, as displayed)
    """

    pattern = re.compile(r"^([0-9]{1,2}) ([a-z]{3}) ([0-9]+) (BCE|CE)$", re.IGNORECASE)

    def parse(self, text: str) -> FuzzyDate | None:
        """Parse a full date.

        Args:
            text: The text to parse

        Returns:
            A FuzzyDate if the text is a full date, None otherwise

        Raises:
            DateParseError: If the month name is not recognized
            DateError: If the year or day is invalid
        """
        m = self.match(text)
        if m is None:
            return None
        month = self.read_month(m.group(2))
        return FuzzyDate.create_day(
            self.read_era(m.group(4)),
            self.read_year(m.group(3)),
            month,
            int(m.group(1)),
        )
