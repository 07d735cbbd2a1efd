"""Leap year rules for the historical calendar.

Dates use the proleptic Gregorian calendar with "historical" leap years:
none before 46 BCE, the erroneous triennial leap years between 46 BCE and
4 CE, Julian leap years (every fourth year) from 4 CE and Gregorian leap
years from 1582 CE onwards.

See:
    http://en.wikipedia.org/wiki/Proleptic_Gregorian_calendar
    http://en.wikipedia.org/wiki/Julian_calendar#Leap_year_error
"""

from enum import Enum

from historical_dates.era import Era, astronomical_year


# First astronomical year of each regime (46 BCE, 4 CE, 1582 CE)
TRIENNIAL_START = -45
JULIAN_START = 4
GREGORIAN_START = 1582

# Bennett's reconstruction: every third year from 44 BCE (-43) to 8 BCE (-7)
TRIENNIAL_LEAP_YEARS = frozenset(range(-43, -6, 3))


class LeapYearRegime(Enum):
    """Leap year calculation in force for a given year."""
    NONE = "none"
    TRIENNIAL = "triennial"
    JULIAN = "julian"
    GREGORIAN = "gregorian"


# Ordered newest first; a year belongs to the first regime it reaches.
_REGIME_STARTS = (
    (GREGORIAN_START, LeapYearRegime.GREGORIAN),
    (JULIAN_START, LeapYearRegime.JULIAN),
    (TRIENNIAL_START, LeapYearRegime.TRIENNIAL),
)


def regime_for(astronomical: int) -> LeapYearRegime:
    """Classify an astronomical year into its leap year regime."""
    for start, regime in _REGIME_STARTS:
        if astronomical >= start:
            return regime
    return LeapYearRegime.NONE


def _is_triennial_leap_year(astronomical: int) -> bool:
    return astronomical in TRIENNIAL_LEAP_YEARS


def _is_julian_leap_year(astronomical: int) -> bool:
    return astronomical % 4 == 0


def _is_gregorian_leap_year(astronomical: int) -> bool:
    if astronomical % 4 != 0:
        return False
    return astronomical % 100 != 0 or astronomical % 400 == 0


def is_leap_year(era: Era, year: int) -> bool:
    """True if the given era year is a leap year."""
    astronomical = astronomical_year(era, year)
    regime = regime_for(astronomical)

    if regime == LeapYearRegime.NONE:
        return False
    elif regime == LeapYearRegime.TRIENNIAL:
        return _is_triennial_leap_year(astronomical)
    elif regime == LeapYearRegime.JULIAN:
        return _is_julian_leap_year(astronomical)
    elif regime == LeapYearRegime.GREGORIAN:
        return _is_gregorian_leap_year(astronomical)
    else:
        raise ValueError(f"Unknown leap year regime: {regime}")


def _gregorian_leap_years_through(astronomical: int) -> int:
    return astronomical // 4 - astronomical // 100 + astronomical // 400


def leap_years_before(astronomical: int) -> int:
    """Number of leap years earlier than the given astronomical year."""
    count = sum(1 for year in TRIENNIAL_LEAP_YEARS if year < astronomical)

    julian_stop = min(astronomical, GREGORIAN_START)
    if julian_stop > JULIAN_START:
        count += (julian_stop - 1) // 4

    if astronomical > GREGORIAN_START:
        count += (_gregorian_leap_years_through(astronomical - 1)
                  - _gregorian_leap_years_through(GREGORIAN_START - 1))
    return count
