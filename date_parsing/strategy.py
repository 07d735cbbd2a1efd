"""Abstract base class for date parsing strategies."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import ClassVar

from historical_dates.calendar_math import month_from_abbreviation
from historical_dates.era import Era
from historical_dates.errors import DateParseError


INVALID_MONTH_ERROR = "The input contained an invalid month."
NO_DATE_ERROR = "The input does not appear to contain a date."


class DateParserStrategy(ABC):
    """Interface for date parsing strategies.

    Each strategy recognizes one form of the date grammar through its
    ``pattern``. ``parse`` returns None when the text is not in that form
    and raises when the text is in that form but does not hold a valid date.
    """

    pattern: ClassVar[re.Pattern]

    def match(self, text: str) -> re.Match | None:
        """Match the whole text against this strategy's form."""
        return self.pattern.fullmatch(text)

    def probe(self, text: str) -> bool:
        """True if the text may hold a date of this form.

        Only the shape of the text is checked; the date is not validated.
        """
        return self.match(text) is not None

    @staticmethod
    def read_era(code: str) -> Era:
        return Era.from_code(code)

    @staticmethod
    def read_year(digits: str) -> int:
        """Convert the digits of a year.

        Raises:
            DateParseError: If there are too many digits to be a number
        """
        try:
            return int(digits)
        except ValueError as e:
            raise DateParseError(NO_DATE_ERROR) from e

    @staticmethod
    def read_month(name: str) -> int:
        """Resolve a three letter month name.

        Raises:
            DateParseError: If the name is not a month
        """
        month = month_from_abbreviation(name)
        if month is None:
            raise DateParseError(INVALID_MONTH_ERROR)
        return month

    @abstractmethod
    def parse(self, text: str):
        """Parse text into a date, or return None if not in this form.

        Args:
            text: The text to parse

        Returns:
            A FuzzyDate or EventDate if the text is in this form, None otherwise

        Raises:
            DateError: If the text is in this form but the date is invalid
        """
        pass
