"""Unit tests for reading fuzzy dates from text."""

import pytest

from date_parsing.date_parser import parse_fuzzy_date, probe_date, try_parse_fuzzy_date
from date_parsing.day_month_year_parser import DayMonthYearParser
from date_parsing.month_year_parser import MonthYearParser
from date_parsing.strategy import INVALID_MONTH_ERROR, NO_DATE_ERROR
from date_parsing.year_parser import YearParser
from historical_dates.era import Era
from historical_dates.errors import DateError, DateParseError
from historical_dates.fuzzy_date import DAY_ERROR, YEAR_ERROR, FuzzyDate


class TestYearParser:
    """Test cases for YearParser."""

    def setup_method(self):
        self.parser = YearParser()

    def test_bce_year(self):
        assert self.parser.parse("42 BCE") == FuzzyDate.create_year(Era.BCE, 42)

    def test_ce_year(self):
        assert self.parser.parse("1066 CE") == FuzzyDate.create_year(Era.CE, 1066)

    def test_lowercase_era(self):
        assert self.parser.parse("42 bce").era == Era.BCE

    @pytest.mark.parametrize("text", ["Jan 42 BCE", "42BCE", "42  BCE", "42 BC", "42 AD", " 42 BCE"])
    def test_other_forms_not_matched(self, text):
        assert self.parser.parse(text) is None


class TestMonthYearParser:
    """Test cases for MonthYearParser."""

    def setup_method(self):
        self.parser = MonthYearParser()

    def test_month_and_year(self):
        assert self.parser.parse("Jan 42 BCE") == FuzzyDate.create_month(Era.BCE, 42, 1)

    @pytest.mark.parametrize("text", ["dec 42 ce", "DEC 42 CE", "dEc 42 Ce"])
    def test_case_insensitive(self, text):
        assert self.parser.parse(text) == FuzzyDate.create_month(Era.CE, 42, 12)

    def test_invalid_month_raises(self):
        with pytest.raises(DateParseError, match=INVALID_MONTH_ERROR):
            self.parser.parse("Xyz 1 CE")

    def test_full_month_name_not_matched(self):
        assert self.parser.parse("January 42 BCE") is None


class TestDayMonthYearParser:
    """Test cases for DayMonthYearParser."""

    def setup_method(self):
        self.parser = DayMonthYearParser()

    def test_full_date(self):
        assert self.parser.parse("15 Mar 44 BCE") == FuzzyDate.create_day(Era.BCE, 44, 3, 15)

    def test_zero_padded_day(self):
        assert self.parser.parse("05 Jan 32 BCE") == FuzzyDate.create_day(Era.BCE, 32, 1, 5)

    def test_three_digit_day_not_matched(self):
        assert self.parser.parse("105 Jan 32 BCE") is None

    def test_invalid_day_raises(self):
        with pytest.raises(DateError, match=DAY_ERROR):
            self.parser.parse("30 Feb 2001 CE")

    def test_invalid_month_raises(self):
        with pytest.raises(DateParseError, match=INVALID_MONTH_ERROR):
            self.parser.parse("1 Foo 2001 CE")


class TestParseFuzzyDate:
    """Tests for parse_fuzzy_date and its companions."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1 BCE", FuzzyDate.create_year(Era.BCE, 1)),
            ("Jan 1 BCE", FuzzyDate.create_month(Era.BCE, 1, 1)),
            ("1 Jan 1 BCE", FuzzyDate.create_day(Era.BCE, 1, 1, 1)),
            ("29 Feb 4 CE", FuzzyDate.create_day(Era.CE, 4, 2, 29)),
        ],
    )
    def test_parses_each_form(self, text, expected):
        assert parse_fuzzy_date(text) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1 Jan 1 BCE", 0),
            ("2 Jan 1 BCE", 1),
            ("1 Jan 1 CE", 365),
            ("31 Dec 2 BCE", -1),
            ("1 Jan 2 BCE", -365),
            ("1 Jan 5 CE", 1826),
            ("1 Jan 9 BCE", -2921),
            ("1 BCE", 0),
            ("Jan 1 BCE", 0),
        ],
    )
    def test_sort_values(self, text, expected):
        assert parse_fuzzy_date(text).sort_value() == expected

    def test_year_zero(self):
        with pytest.raises(DateError, match=YEAR_ERROR):
            parse_fuzzy_date("0 CE")

    def test_invalid_day(self):
        with pytest.raises(DateError, match=DAY_ERROR):
            parse_fuzzy_date("30 Feb 2001 CE")

    def test_invalid_month(self):
        with pytest.raises(DateParseError, match=INVALID_MONTH_ERROR):
            parse_fuzzy_date("Xyz 1 CE")

    @pytest.mark.parametrize("text", ["banana", "", "42", "BCE", "< 42 BCE", "42 BCE - 40 BCE"])
    def test_no_date(self, text):
        with pytest.raises(DateParseError, match=NO_DATE_ERROR):
            parse_fuzzy_date(text)

    def test_try_parse_success(self):
        assert try_parse_fuzzy_date("Mar 44 BCE") == (FuzzyDate.create_month(Era.BCE, 44, 3), "")

    def test_try_parse_failure(self):
        assert try_parse_fuzzy_date("banana") == (None, NO_DATE_ERROR)
        assert try_parse_fuzzy_date("30 Feb 2001 CE") == (None, DAY_ERROR)

    @pytest.mark.parametrize(
        "date",
        [
            FuzzyDate.create_year(Era.CE, 1),
            FuzzyDate.create_year(Era.BCE, 753),
            FuzzyDate.create_month(Era.CE, 2024, 12),
            FuzzyDate.create_day(Era.BCE, 32, 1, 5),
            FuzzyDate.create_day(Era.BCE, 44, 2, 29),
            FuzzyDate.create_day(Era.CE, 9999, 12, 31),
        ],
    )
    def test_display_parses_back(self, date):
        assert parse_fuzzy_date(str(date)) == date


class TestProbeDate:
    """Tests for probe_date."""

    @pytest.mark.parametrize("text", ["42 BCE", "Jan 42 BCE", "15 Mar 44 BCE", "Xyz 1 CE", "30 Feb 2001 CE", "0 CE"])
    def test_looks_like_a_date(self, text):
        """Probing checks the shape only, not whether the date is valid"""
        assert probe_date(text) is True

    @pytest.mark.parametrize("text", ["banana", "", "< 42 BCE", "42 BCE - 40 BCE", "42BCE"])
    def test_not_a_date(self, text):
        assert probe_date(text) is False


class TestMalformedInput:
    """Input that only resembles a date is reported, never raised as a crash."""

    def test_year_with_too_many_digits(self):
        assert try_parse_fuzzy_date("9" * 5000 + " CE") == (None, NO_DATE_ERROR)

    def test_year_with_too_many_digits_raises_parse_error(self):
        with pytest.raises(DateParseError, match=NO_DATE_ERROR):
            parse_fuzzy_date("Jan " + "9" * 5000 + " BCE")
        with pytest.raises(DateParseError, match=NO_DATE_ERROR):
            parse_fuzzy_date("01 Jan " + "9" * 5000 + " BCE")

    def test_large_year_within_limits(self):
        assert parse_fuzzy_date("99999999 CE") == FuzzyDate.create_year(Era.CE, 99999999)

    @pytest.mark.parametrize("text", ["13 BCE\n", "Jan 13 BCE\n", "01 Jan 13 BCE\n", "13\nBCE"])
    def test_trailing_newline_not_matched(self, text):
        assert try_parse_fuzzy_date(text) == (None, NO_DATE_ERROR)
        assert probe_date(text) is False
