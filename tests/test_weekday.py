"""
Tests for weekday parsing.
"""

from datetime import date

import pytest

from workdays.core.exceptions import InvalidWeekdayError
from workdays.core.weekday import (
    Weekday,
    format_weekdays,
    parse_weekday,
    parse_weekday_spec,
)


class TestParseWeekday:
    """Tests for parse_weekday."""

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("Monday", Weekday.MON),
            ("tue", Weekday.TUE),
            ("WED", Weekday.WED),
            ("  thursday\t", Weekday.THU),
            ("Fri", Weekday.FRI),
            ("SATURDAY", Weekday.SAT),
            ("sun", Weekday.SUN),
        ],
    )
    def test_valid_tokens(self, token, expected):
        """Test full names and abbreviations in any case."""
        assert parse_weekday(token) == expected

    @pytest.mark.parametrize("token", ["", "Mo", "Tues", "Invalid", "montag", "7"])
    def test_invalid_tokens(self, token):
        """Test that unknown tokens raise and carry the token."""
        with pytest.raises(InvalidWeekdayError) as exc_info:
            parse_weekday(token)

        assert exc_info.value.token == token

    def test_invalid_weekday_is_value_error(self):
        """Test that callers can catch ValueError."""
        with pytest.raises(ValueError, match="Invalid weekday"):
            parse_weekday("Funday")

    def test_weekday_passthrough(self):
        """Test that Weekday values pass through unchanged."""
        assert parse_weekday(Weekday.SAT) is Weekday.SAT

    def test_numbering_matches_date_weekday(self):
        """Test Weekday values line up with date.weekday()."""
        assert Weekday(date(2023, 8, 21).weekday()) is Weekday.MON
        assert Weekday(date(2023, 8, 27).weekday()) is Weekday.SUN


class TestParseWeekdaySpec:
    """Tests for parse_weekday_spec."""

    def test_comma_separated(self):
        """Test a mixed-case comma-separated spec."""
        assert parse_weekday_spec("mon, Tuesday ,WED") == {
            Weekday.MON, Weekday.TUE, Weekday.WED
        }

    def test_semicolons(self):
        """Test semicolon delimiters."""
        assert parse_weekday_spec("Sat;Sun") == {Weekday.SAT, Weekday.SUN}

    def test_empty_spec(self):
        """Test that an empty spec yields no weekdays."""
        assert parse_weekday_spec(" , ,") == frozenset()

    def test_invalid_token(self):
        """Test the offending token is reported."""
        with pytest.raises(InvalidWeekdayError) as exc_info:
            parse_weekday_spec("Mon, Blursday")

        assert exc_info.value.token == "Blursday"


def test_format_weekdays_in_week_order():
    """Test formatting sorts by weekday."""
    assert format_weekdays({Weekday.FRI, Weekday.MON, Weekday.WED}) == "Mon,Wed,Fri"
    assert format_weekdays(set()) == ""
