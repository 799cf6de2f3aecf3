"""
Utilities package for VidPOD.

This package provides commonly-used helpers organized by domain:
- dates: Timezone-free parsing and display of coverage dates
- parsers: Comma-separated cell splitting

Import commonly-used utilities directly from this package:
    from vidpod.utils import parse_flexible_date, format_for_display
"""
from .dates import (
    CanonicalDate,
    DisplayFormat,
    add_current_year,
    describe_date_formats,
    format_coverage,
    format_for_display,
    is_valid_date_string,
    parse_flexible_date,
)
from .parsers import dedupe_preserving_order, split_comma_list

__all__ = [
    "CanonicalDate",
    "DisplayFormat",
    "add_current_year",
    "describe_date_formats",
    "format_coverage",
    "format_for_display",
    "is_valid_date_string",
    "parse_flexible_date",
    "dedupe_preserving_order",
    "split_comma_list",
]
