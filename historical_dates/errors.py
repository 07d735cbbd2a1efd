"""Exceptions raised by the historical date model and parsers."""


class DateError(ValueError):
    """A date, or a range of dates, failed validation."""


class DateParseError(DateError):
    """Input text could not be read as a date."""


class TimelineEventError(ValueError):
    """A timeline event record failed validation."""
