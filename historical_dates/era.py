"""Eras and astronomical year numbering."""

from enum import Enum


class Era(Enum):
    """The two eras a historical year can belong to."""
    BCE = "BCE"
    CE = "CE"

    @classmethod
    def from_code(cls, code: str) -> "Era":
        """Resolve an era code such as "bce" or "CE" (case-insensitive)."""
        return cls(code.strip().upper())


def astronomical_year(era: Era, year: int) -> int:
    """Convert an era year to astronomical numbering.

    1 BCE is year 0, 2 BCE is -1 and so on, while CE years are unchanged.
    All calendar arithmetic runs on this axis.
    """
    if era == Era.BCE:
        return -(year - 1)
    return year
