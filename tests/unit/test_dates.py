"""
test_dates.py
-------------
Unit tests for timezone-free date parsing and formatting.

Coverage dates are plain (year, month, day) triples; nothing here may
depend on the process timezone, so the display tests also run under
several TZ settings.
"""
import time
from datetime import date

import pytest

from vidpod.utils.dates import (
    CanonicalDate,
    DisplayFormat,
    PIVOT_ENV_VAR,
    add_current_year,
    describe_date_formats,
    expand_two_digit_year,
    format_coverage,
    format_for_display,
    is_valid_date_string,
    parse_flexible_date,
)

TODAY = date(2026, 10, 19)


class TestParseDayMonth:
    """Test the D-Mon spreadsheet shape."""

    def test_day_month_uses_current_year(self):
        """Year-less dates take the reference year."""
        assert parse_flexible_date("1-Jan", today=TODAY) == CanonicalDate(2026, 1, 1)
        assert parse_flexible_date("15-Dec", today=TODAY) == CanonicalDate(2026, 12, 15)

    def test_day_month_defaults_to_real_current_year(self):
        """Without an injected day the year is read at call time."""
        parsed = parse_flexible_date("1-Jan")
        assert parsed == CanonicalDate(date.today().year, 1, 1)

    def test_month_abbreviation_is_case_insensitive(self):
        assert parse_flexible_date("05-mar", today=TODAY) == CanonicalDate(2026, 3, 5)

    def test_feb_29_clamps_outside_leap_year(self):
        """29-Feb becomes Feb 28 when the current year is not a leap year."""
        assert parse_flexible_date("29-Feb", today=TODAY) == CanonicalDate(2026, 2, 28)

    def test_feb_29_kept_in_leap_year(self):
        assert parse_flexible_date("29-Feb", today=date(2024, 5, 1)) == CanonicalDate(
            2024, 2, 29
        )

    def test_unknown_month_is_rejected(self):
        assert parse_flexible_date("15-Foo", today=TODAY) is None


class TestParseIso:
    """Test YYYY-MM-DD input."""

    def test_iso_date(self):
        assert parse_flexible_date("1954-03-05") == CanonicalDate(1954, 3, 5)

    def test_single_digit_month_and_day(self):
        assert parse_flexible_date("2024-1-5") == CanonicalDate(2024, 1, 5)

    def test_time_suffix_never_shifts_the_day(self):
        """A midnight UTC timestamp keeps its calendar day."""
        assert parse_flexible_date("2024-01-15T00:00:00Z") == CanonicalDate(2024, 1, 15)
        assert parse_flexible_date("2024-01-15 23:59:59") == CanonicalDate(2024, 1, 15)

    @pytest.mark.parametrize("value", ["2024-01-15 to 2024-01-20", "2024-01-15Tbd", "2024-01-15 approx"])
    def test_trailing_text_is_rejected(self, value):
        """Only a time of day may follow the date."""
        assert parse_flexible_date(value) is None
        assert describe_date_formats(value) == []

    @pytest.mark.parametrize("value", ["1899-01-01", "2101-01-01", "2024-13-01", "2024-00-10"])
    def test_out_of_bounds_is_rejected(self, value):
        assert parse_flexible_date(value) is None


class TestParseUsSlash:
    """Test M/D/YY and M/D/YYYY input."""

    def test_two_digit_year_above_pivot_is_previous_century(self):
        assert parse_flexible_date("3/5/54", today=TODAY) == CanonicalDate(1954, 3, 5)

    def test_two_digit_year_at_or_below_pivot_is_current_century(self):
        assert parse_flexible_date("4/1/24", today=TODAY) == CanonicalDate(2024, 4, 1)

    def test_four_digit_year(self):
        assert parse_flexible_date("12/31/1999") == CanonicalDate(1999, 12, 31)

    def test_month_comes_first(self):
        """US order: 1/15/24 is January 15."""
        assert parse_flexible_date("1/15/24", today=TODAY) == CanonicalDate(2024, 1, 15)

    def test_day_first_input_is_rejected(self):
        """No DD/MM fallback: a month of 15 is invalid."""
        assert parse_flexible_date("15/1/24", today=TODAY) is None


class TestParseOther:
    """Test empty, typed and unrecognised input."""

    @pytest.mark.parametrize("value", [None, "", "   ", "next week", "2024/01/15", "Jan 15"])
    def test_unrecognised_returns_none(self, value):
        assert parse_flexible_date(value, today=TODAY) is None

    def test_date_objects_pass_through(self):
        assert parse_flexible_date(date(2024, 2, 3)) == CanonicalDate(2024, 2, 3)
        canonical = CanonicalDate(2024, 2, 3)
        assert parse_flexible_date(canonical) is canonical

    def test_surrounding_whitespace_is_ignored(self):
        assert parse_flexible_date("  2024-01-15 ") == CanonicalDate(2024, 1, 15)

    def test_non_calendar_day_is_flagged(self):
        """Bounds allow day 31 in any month; is_calendar_date catches it."""
        parsed = parse_flexible_date("2024-02-30")
        assert parsed == CanonicalDate(2024, 2, 30)
        assert parsed.is_calendar_date is False
        assert parse_flexible_date("2024-02-29").is_calendar_date is True


class TestTwoDigitYearPivot:
    """Test the sliding two-digit year window."""

    def test_pivot_follows_reference_year(self):
        assert expand_two_digit_year(26, today=TODAY) == 2026
        assert expand_two_digit_year(27, today=TODAY) == 1927

    def test_explicit_pivot_wins(self):
        assert expand_two_digit_year(40, today=TODAY, pivot=50) == 2040
        assert expand_two_digit_year(60, today=TODAY, pivot=50) == 1960

    def test_environment_pivot(self, monkeypatch):
        monkeypatch.setenv(PIVOT_ENV_VAR, "70")
        assert expand_two_digit_year(54, today=TODAY) == 2054

    def test_malformed_environment_pivot_is_ignored(self, monkeypatch):
        monkeypatch.setenv(PIVOT_ENV_VAR, "soon")
        assert expand_two_digit_year(54, today=TODAY) == 1954

    def test_pivot_passed_through_parser(self):
        assert parse_flexible_date("3/5/54", today=TODAY, pivot=60) == CanonicalDate(2054, 3, 5)


class TestIsValidDateString:
    """Test is_valid_date_string()."""

    @pytest.mark.parametrize("value", ["2024-02-29", "1900-01-01", "2100-12-31"])
    def test_accepts(self, value):
        assert is_valid_date_string(value) is True

    @pytest.mark.parametrize(
        "value", ["2024-13-01", "1899-01-01", "2024-01-32", "1/15/24", "", None, 20240101]
    )
    def test_rejects(self, value):
        assert is_valid_date_string(value) is False


class TestHelpers:
    """Test add_current_year() and describe_date_formats()."""

    def test_add_current_year(self):
        assert add_current_year("3/5", today=TODAY) == "2026-03-05"

    def test_add_current_year_leaves_invalid_input(self):
        assert add_current_year("13/5", today=TODAY) == "13/5"
        assert add_current_year("tomorrow", today=TODAY) == "tomorrow"
        assert add_current_year("  ", today=TODAY) == ""

    def test_describe_date_formats(self):
        assert describe_date_formats("15-Jan") == ["day_month"]
        assert describe_date_formats("2024-01-15") == ["iso"]
        assert describe_date_formats("1/15/24") == ["us_slash"]
        assert describe_date_formats("soon") == []


class TestFormatForDisplay:
    """Test format_for_display() in every style."""

    def test_numeric_is_default(self):
        assert format_for_display("1954-03-05") == "03/05/1954"

    @pytest.mark.parametrize(
        "fmt, expected",
        [
            (DisplayFormat.LONG, "January 15, 2024"),
            (DisplayFormat.SHORT, "Jan 15, 2024"),
            (DisplayFormat.NO_YEAR, "January 15"),
            (DisplayFormat.NUMERIC_NO_YEAR, "01/15"),
            (DisplayFormat.ISO, "2024-01-15"),
            ("long", "January 15, 2024"),
        ],
    )
    def test_styles(self, fmt, expected):
        assert format_for_display(CanonicalDate(2024, 1, 15), fmt) == expected

    def test_accepts_date_objects(self):
        assert format_for_display(date(2024, 7, 4)) == "07/04/2024"

    def test_empty_input(self):
        assert format_for_display(None) == ""
        assert format_for_display("") == ""

    def test_invalid_string_returned_unchanged(self):
        assert format_for_display("not a date") == "not a date"


class TestFormatCoverage:
    """Test format_coverage()."""

    def test_single_day_without_end(self):
        assert format_coverage("2024-01-15") == "January 15"

    def test_single_day_with_equal_end(self):
        assert format_coverage("2024-01-15", "2024-01-15") == "January 15"

    def test_range(self):
        assert format_coverage("2024-01-15", "2024-03-15") == "Jan 15, 2024 - Mar 15, 2024"

    def test_no_start(self):
        assert format_coverage(None, "2024-03-15") == ""


@pytest.mark.parametrize(
    "tz", ["UTC", "America/Los_Angeles", "Pacific/Kiritimati", "Pacific/Pago_Pago"]
)
class TestTimezoneIndependence:
    """Dates round-trip unchanged whatever TZ the process runs in."""

    @pytest.fixture(autouse=True)
    def _set_tz(self, tz, monkeypatch):
        if not hasattr(time, "tzset"):
            pytest.skip("time.tzset is not available on this platform")
        monkeypatch.setenv("TZ", tz)
        time.tzset()
        yield
        monkeypatch.undo()
        time.tzset()

    def test_display_is_stable(self, tz):
        assert format_for_display("1954-03-05") == "03/05/1954"

    def test_midnight_timestamp_is_stable(self, tz):
        assert parse_flexible_date("2024-01-01T00:00:00Z") == CanonicalDate(2024, 1, 1)

    def test_coverage_is_stable(self, tz):
        assert format_coverage("2024-01-01", "2024-12-31") == "Jan 1, 2024 - Dec 31, 2024"
