"""Base class for parsers that orchestrate multiple parsing strategies."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List

from date_parsing.factory import DateParserFactory, DateParsers
from date_parsing.strategy import NO_DATE_ERROR
from historical_dates.errors import DateError, DateParseError

logger = logging.getLogger(__name__)


class ParseOrchestrator(ABC):
    """Base class for parsers that try multiple parsing strategies in order.

    Subclasses define the order and selection of parsers to try. The first
    strategy whose form matches the text decides the outcome.
    """

    @abstractmethod
    def get_parser_steps(self) -> List[DateParsers]:
        """Return the ordered list of parser strategies to try.

        Returns:
            List of DateParsers enum values in the order they should be attempted.
        """
        pass

    def probe(self, text: str) -> bool:
        """True if the text may hold a date, without validating it."""
        if not text:
            return False
        for step in self.get_parser_steps():
            parser = DateParserFactory.get_parser(step)
            if parser.match(text) is not None:
                return parser.probe(text)
        return False

    def parse(self, text: str):
        """Parse a date from text.

        Raises:
            DateParseError: If no strategy recognizes the text
            DateError: If the recognized date is invalid
        """
        if text:
            for step in self.get_parser_steps():
                parser = DateParserFactory.get_parser(step)
                try:
                    return_value = parser.parse(text)
                except DateError as e:
                    logger.debug("%s rejected %r: %s", type(parser).__name__, text, e)
                    raise
                if return_value is not None:
                    return return_value

        logger.debug("No date found in %r", text)
        raise DateParseError(NO_DATE_ERROR)

    def try_parse(self, text: str):
        """Parse a date from text without raising.

        Returns:
            Tuple of (date, error_message). date is None and error_message
            explains why when parsing fails; error_message is empty otherwise.
        """
        try:
            return self.parse(text), ""
        except DateError as e:
            return None, str(e)
