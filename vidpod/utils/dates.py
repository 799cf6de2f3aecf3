#!/usr/bin/env python3
"""
dates.py
-------------------
Timezone-free date parsing and formatting for story coverage dates.

Spreadsheet exports write dates in several shapes (``15-Jan``,
``2024-01-15``, ``1/15/24``). Everything here works on plain
``(year, month, day)`` integers so that a date written in a file is the
date shown back to the user, whatever the process timezone is.

Functions:
    parse_flexible_date: Parse a spreadsheet date string into a CanonicalDate
    format_for_display: Render a date as MM/DD/YYYY, "Month D, YYYY", ...
    format_coverage: Render a coverage range, single-day aware
    is_valid_date_string: Check a YYYY-MM-DD string against the bounds
    add_current_year: Expand MM/DD into YYYY-MM-DD with the current year
    describe_date_formats: Name the formats a string looks like

Usage:
    from vidpod.utils.dates import parse_flexible_date, format_for_display

    start = parse_flexible_date("3/5/54")        # CanonicalDate(1954, 3, 5)
    format_for_display(start)                    # "03/05/1954"
    format_for_display("2024-01-15", DisplayFormat.LONG)  # "January 15, 2024"
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, List, Optional, Union

MIN_YEAR = 1900
MAX_YEAR = 2100

PIVOT_ENV_VAR = "VIDPOD_TWO_DIGIT_YEAR_PIVOT"

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
SHORT_MONTH_NAMES = tuple(name[:3] for name in MONTH_NAMES)
_MONTH_LOOKUP = {name.lower(): index + 1 for index, name in enumerate(SHORT_MONTH_NAMES)}

_DAY_MONTH_RE = re.compile(r"^(\d{1,2})-([A-Za-z]{3})$")
_ISO_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})(?:[T ]\d{1,2}:\d{2}.*)?$")
_SLASH_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{2}|\d{4})$")
_STRICT_ISO_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")
_MONTH_DAY_RE = re.compile(r"^(\d{1,2})/(\d{1,2})$")


class DisplayFormat(str, Enum):
    """
    Display styles for dates.

    - NUMERIC: 03/05/1954
    - LONG: March 5, 1954
    - SHORT: Mar 5, 1954
    - NO_YEAR: March 5
    - NUMERIC_NO_YEAR: 03/05
    - ISO: 1954-03-05
    """

    NUMERIC = "numeric"
    LONG = "long"
    SHORT = "short"
    NO_YEAR = "no_year"
    NUMERIC_NO_YEAR = "numeric_no_year"
    ISO = "iso"


@dataclass(frozen=True, order=True)
class CanonicalDate:
    """
    A calendar day as three integers, with no time or timezone.

    Parsing only enforces coarse bounds (day 1..31), so a CanonicalDate
    may name a day that does not exist, such as February 30. Use
    ``is_calendar_date`` before persisting.

    Attributes:
        year: Four-digit year
        month: Month number, 1..12
        day: Day of month, 1..31
    """

    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, value: date) -> "CanonicalDate":
        """Build from a ``datetime.date`` (or datetime, whose time is ignored)."""
        return cls(value.year, value.month, value.day)

    def to_date(self) -> date:
        """
        Convert to ``datetime.date``.

        Raises:
            ValueError: If the triple is not a real calendar day
        """
        return date(self.year, self.month, self.day)

    @property
    def is_calendar_date(self) -> bool:
        """True when the triple names a day that exists."""
        try:
            self.to_date()
        except ValueError:
            return False
        return True

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


# ----- Helpers -----
def _in_bounds(year: int, month: int, day: int) -> bool:
    return MIN_YEAR <= year <= MAX_YEAR and 1 <= month <= 12 and 1 <= day <= 31


def _is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _resolve_pivot(pivot: Optional[int], today: date) -> int:
    """
    Pick the two-digit year pivot.

    Order: explicit argument, then ``VIDPOD_TWO_DIGIT_YEAR_PIVOT``, then
    the last two digits of the current year. Out-of-range or malformed
    values fall through to the next source.
    """
    if pivot is not None and 0 <= pivot <= 99:
        return pivot

    env_value = os.environ.get(PIVOT_ENV_VAR, "").strip()
    if env_value.isdigit() and 0 <= int(env_value) <= 99:
        return int(env_value)

    return today.year % 100


def expand_two_digit_year(yy: int, today: Optional[date] = None, pivot: Optional[int] = None) -> int:
    """
    Expand a two-digit year with a sliding century window.

    Years at or below the pivot fall in the current century, years above
    it in the previous one.

    Args:
        yy: Year in 0..99
        today: Reference day (defaults to ``date.today()``)
        pivot: Optional explicit pivot in 0..99

    Returns:
        Four-digit year

    Examples:
        >>> expand_two_digit_year(54, today=date(2025, 6, 1))
        1954
        >>> expand_two_digit_year(24, today=date(2025, 6, 1))
        2024
    """
    today = today or date.today()
    cutoff = _resolve_pivot(pivot, today)
    century = (today.year // 100) * 100
    if yy <= cutoff:
        return century + yy
    return century - 100 + yy


def _coerce(value: Any) -> Optional[CanonicalDate]:
    """Turn a CanonicalDate, date or ISO string into a CanonicalDate."""
    if isinstance(value, CanonicalDate):
        return value
    if isinstance(value, date):
        return CanonicalDate.from_date(value)
    if isinstance(value, str):
        match = _ISO_RE.match(value.strip())
        if match:
            year, month, day = (int(part) for part in match.groups())
            if _in_bounds(year, month, day):
                return CanonicalDate(year, month, day)
    return None


# ----- Parsing -----
def parse_flexible_date(
    value: Any,
    today: Optional[date] = None,
    pivot: Optional[int] = None,
) -> Optional[CanonicalDate]:
    """
    Parse a spreadsheet date into a CanonicalDate.

    Recognised, in priority order:
        1. ``D-Mon`` / ``DD-Mon`` (``15-Jan``): year defaults to the
           current year; ``29-Feb`` becomes Feb 28 outside leap years.
        2. ``YYYY-MM-DD`` or ``YYYY-M-D``; a trailing time part
           (``T00:00:00Z``) is ignored and never shifts the day.
        3. ``M/D/YY`` or ``M/D/YYYY`` (US month first); two-digit years
           use the sliding pivot from ``expand_two_digit_year``.

    Args:
        value: Raw cell value (str, date, CanonicalDate or None)
        today: Reference day for defaults (injected by tests)
        pivot: Optional two-digit year pivot override

    Returns:
        CanonicalDate, or None when the value is empty, unrecognised or
        outside year 1900..2100, month 1..12, day 1..31
    """
    if value is None:
        return None
    if isinstance(value, CanonicalDate):
        return value
    if isinstance(value, date):
        return CanonicalDate.from_date(value)

    text = str(value).strip()
    if not text:
        return None

    today = today or date.today()

    match = _DAY_MONTH_RE.match(text)
    if match:
        day = int(match.group(1))
        month = _MONTH_LOOKUP.get(match.group(2).lower())
        if month is None:
            return None
        year = today.year
        if month == 2 and day == 29 and not _is_leap_year(year):
            day = 28
        return CanonicalDate(year, month, day) if _in_bounds(year, month, day) else None

    match = _ISO_RE.match(text)
    if match:
        year, month, day = (int(part) for part in match.groups())
        return CanonicalDate(year, month, day) if _in_bounds(year, month, day) else None

    match = _SLASH_RE.match(text)
    if match:
        month, day = int(match.group(1)), int(match.group(2))
        raw_year = match.group(3)
        if len(raw_year) == 2:
            year = expand_two_digit_year(int(raw_year), today=today, pivot=pivot)
        else:
            year = int(raw_year)
        return CanonicalDate(year, month, day) if _in_bounds(year, month, day) else None

    return None


def is_valid_date_string(value: Any) -> bool:
    """
    Check that ``value`` is a ``YYYY-MM-DD`` string within the date bounds.

    Does not check days per month: ``2024-02-30`` passes, as it does in
    the browser helpers.

    Examples:
        >>> is_valid_date_string("2024-02-29")
        True
        >>> is_valid_date_string("2024-13-01")
        False
    """
    if not isinstance(value, str):
        return False
    match = _STRICT_ISO_RE.match(value.strip())
    if not match:
        return False
    year, month, day = (int(part) for part in match.groups())
    return _in_bounds(year, month, day)


def describe_date_formats(value: Any) -> List[str]:
    """
    Name the date shapes a raw cell value looks like.

    Used in import warnings to tell the uploader what was expected.

    Returns:
        Subset of ``["day_month", "iso", "us_slash"]``, possibly empty
    """
    if not isinstance(value, str):
        return []
    text = value.strip()
    names = []
    if _DAY_MONTH_RE.match(text):
        names.append("day_month")
    if _ISO_RE.match(text):
        names.append("iso")
    if _SLASH_RE.match(text):
        names.append("us_slash")
    return names


def add_current_year(month_day: str, today: Optional[date] = None) -> str:
    """
    Expand ``MM/DD`` into ``YYYY-MM-DD`` using the current year.

    Values that are not a valid ``MM/DD`` are returned unchanged.

    Examples:
        >>> add_current_year("3/5", today=date(2025, 1, 1))
        '2025-03-05'
    """
    if not month_day or not month_day.strip():
        return ""
    match = _MONTH_DAY_RE.match(month_day.strip())
    if not match:
        return month_day
    month, day = int(match.group(1)), int(match.group(2))
    if not (1 <= month <= 12 and 1 <= day <= 31):
        return month_day
    year = (today or date.today()).year
    return f"{year:04d}-{month:02d}-{day:02d}"


# ----- Formatting -----
def format_for_display(
    value: Union[CanonicalDate, date, str, None],
    fmt: DisplayFormat = DisplayFormat.NUMERIC,
) -> str:
    """
    Render a date for display using only its year, month and day.

    Args:
        value: CanonicalDate, ``datetime.date`` or ISO string
        fmt: Display style (default MM/DD/YYYY)

    Returns:
        Formatted string; ``""`` for empty input, and unparseable strings
        are returned unchanged

    Examples:
        >>> format_for_display("1954-03-05")
        '03/05/1954'
        >>> format_for_display(CanonicalDate(2024, 1, 15), DisplayFormat.SHORT)
        'Jan 15, 2024'
    """
    if value is None:
        return ""
    if isinstance(value, str) and not value.strip():
        return ""

    canonical = _coerce(value)
    if canonical is None:
        return value if isinstance(value, str) else str(value)

    fmt = DisplayFormat(fmt)
    year, month, day = canonical.year, canonical.month, canonical.day

    if fmt is DisplayFormat.LONG:
        return f"{MONTH_NAMES[month - 1]} {day}, {year}"
    if fmt is DisplayFormat.SHORT:
        return f"{SHORT_MONTH_NAMES[month - 1]} {day}, {year}"
    if fmt is DisplayFormat.NO_YEAR:
        return f"{MONTH_NAMES[month - 1]} {day}"
    if fmt is DisplayFormat.NUMERIC_NO_YEAR:
        return f"{month:02d}/{day:02d}"
    if fmt is DisplayFormat.ISO:
        return canonical.isoformat()
    return f"{month:02d}/{day:02d}/{year}"


def format_coverage(
    start: Union[CanonicalDate, date, str, None],
    end: Union[CanonicalDate, date, str, None] = None,
) -> str:
    """
    Render a story's coverage window.

    A missing end date, or one equal to the start, is a single day and is
    shown as ``Month D``. Ranges are shown as ``Mon D, YYYY - Mon D, YYYY``.

    Examples:
        >>> format_coverage("2024-01-15")
        'January 15'
        >>> format_coverage("2024-01-15", "2024-03-15")
        'Jan 15, 2024 - Mar 15, 2024'
    """
    start_date = _coerce(start)
    if start_date is None:
        return ""

    end_date = _coerce(end)
    if end_date is None or end_date == start_date:
        return format_for_display(start_date, DisplayFormat.NO_YEAR)

    return (
        f"{format_for_display(start_date, DisplayFormat.SHORT)} - "
        f"{format_for_display(end_date, DisplayFormat.SHORT)}"
    )
