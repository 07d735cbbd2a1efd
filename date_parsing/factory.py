"""Factory for creating date parser strategies."""

from enum import Enum, auto

from date_parsing.strategy import DateParserStrategy


class DateParsers(Enum):
    """Enumeration of available date parsing strategies."""
    YEAR = auto()
    MONTH_AND_YEAR = auto()
    DAY_MONTH_AND_YEAR = auto()
    BEFORE = auto()
    AFTER = auto()
    BETWEEN = auto()
    SPECIFIC = auto()


class DateParserFactory:
    """Factory for creating DateParserStrategy instances."""

    @staticmethod
    def get_parser(strategy: DateParsers) -> DateParserStrategy:
        """Get a parser instance for the specified strategy.

        Args:
            strategy: The type of parser to create

        Returns:
            An instance of the requested parser strategy

        Raises:
            ValueError: If the strategy is unknown
        """
        # Import here to avoid circular dependencies
        from date_parsing.year_parser import YearParser
        from date_parsing.month_year_parser import MonthYearParser
        from date_parsing.day_month_year_parser import DayMonthYearParser
        from date_parsing.before_parser import BeforeParser
        from date_parsing.after_parser import AfterParser
        from date_parsing.between_parser import BetweenParser
        from date_parsing.specific_parser import SpecificParser

        if strategy == DateParsers.YEAR:
            return YearParser()
        elif strategy == DateParsers.MONTH_AND_YEAR:
            return MonthYearParser()
        elif strategy == DateParsers.DAY_MONTH_AND_YEAR:
            return DayMonthYearParser()
        elif strategy == DateParsers.BEFORE:
            return BeforeParser()
        elif strategy == DateParsers.AFTER:
            return AfterParser()
        elif strategy == DateParsers.BETWEEN:
            return BetweenParser()
        elif strategy == DateParsers.SPECIFIC:
            return SpecificParser()
        else:
            raise ValueError(f"Unknown strategy: {strategy}")
