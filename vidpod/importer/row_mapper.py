#!/usr/bin/env python3
"""
row_mapper.py
-------------------
Map one spreadsheet row onto a StoryDraft.

Column order and header spelling vary between uploads; the mapper looks
each field up through the alias table in ``columns`` and takes the
first alias whose cell is non-empty.

Usage:
    from vidpod.importer.row_mapper import map_row

    mapped = map_row({"Title": "School Lunch", "Start Date": "1/15/24"})
    mapped.draft.coverage_start_date   # CanonicalDate(2024, 1, 15)
    mapped.warnings                    # []
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

# --- Local imports ---
from vidpod.core.validators import DataValidator
from vidpod.utils.dates import CanonicalDate, describe_date_formats, parse_flexible_date
from vidpod.utils.parsers import dedupe_preserving_order, split_comma_list
from .columns import (
    DESCRIPTION_ALIASES,
    END_DATE_ALIASES,
    INTERVIEWEE_ALIASES,
    NUMBERED_INTERVIEWEE_RE,
    QUESTION_ALIASES,
    QUESTION_COUNT,
    START_DATE_ALIASES,
    TAG_ALIASES,
    TITLE_ALIASES,
    normalize_header,
)
from .models import MappedRow, StoryDraft
from .validate import collection_warnings, require_title, validate_lengths

_BOM = "﻿"


def _normalize_keys(row: Mapping[str, Optional[str]]) -> Dict[str, str]:
    """Re-key a row by normalized header; the first non-empty duplicate wins."""
    values: Dict[str, str] = {}
    for key, value in row.items():
        header = normalize_header(key)
        if not header or values.get(header, "").strip():
            continue
        values[header] = "" if value is None else str(value)
    return values


def _clean_text(value: Optional[str]) -> Optional[str]:
    """Strip BOMs and surrounding whitespace; keep inner line breaks."""
    if value is None:
        return None
    text = value.replace(_BOM, "").strip()
    return text or None


def _first(values: Mapping[str, str], aliases: Sequence[str]) -> Optional[str]:
    """First non-empty cell among ``aliases``, cleaned."""
    for alias in aliases:
        cleaned = _clean_text(values.get(alias))
        if cleaned:
            return cleaned
    return None


def _interviewee_cells(values: Mapping[str, str]) -> List[str]:
    """
    Collect interviewee text from the alias column and numbered columns.

    The first non-empty alias column comes first, then ``interviewee 1``,
    ``interviewee 2``, ... in numeric order.
    """
    cells = []
    primary = _first(values, INTERVIEWEE_ALIASES)
    if primary:
        cells.append(primary)

    numbered: List[Tuple[int, str]] = []
    for header, value in values.items():
        match = NUMBERED_INTERVIEWEE_RE.match(header)
        if match and _clean_text(value):
            numbered.append((int(match.group(1)), value))
    cells.extend(value for _, value in sorted(numbered, key=lambda item: item[0]))
    return cells


def _parse_coverage_date(
    raw: Optional[str],
    label: str,
    warnings: List[str],
    today: Optional[date],
    pivot: Optional[int],
) -> Optional[CanonicalDate]:
    """Parse one date cell, recording a warning when it has to be dropped."""
    if not raw:
        return None

    parsed = parse_flexible_date(raw, today=today, pivot=pivot)
    if parsed is None:
        warnings.append(
            f'Could not parse {label} date: "{raw}". '
            "Recommended format: YYYY-MM-DD"
        )
        return None

    if not parsed.is_calendar_date:
        warnings.append(
            f'{label.capitalize()} date "{raw}" is not a real calendar day '
            f"({', '.join(describe_date_formats(raw)) or 'unknown format'})"
        )
        return None

    return parsed


def map_row(
    row: Mapping[str, Optional[str]],
    today: Optional[date] = None,
    pivot: Optional[int] = None,
) -> MappedRow:
    """
    Map one spreadsheet row to a StoryDraft.

    Args:
        row: Cell text keyed by header (raw or normalized)
        today: Reference day for year-less and two-digit-year dates
        pivot: Optional two-digit year pivot override

    Returns:
        MappedRow with the draft and any non-fatal warnings

    Raises:
        RowValidationError: If the title is missing or a field is too long
    """
    values = _normalize_keys(row)
    warnings: List[str] = []

    title = require_title(DataValidator.normalize_string(_first(values, TITLE_ALIASES)))
    description = _first(values, DESCRIPTION_ALIASES)
    questions = [_first(values, QUESTION_ALIASES[n]) for n in range(1, QUESTION_COUNT + 1)]

    validate_lengths(title, description, questions)

    start = _parse_coverage_date(
        _first(values, START_DATE_ALIASES), "start", warnings, today, pivot
    )
    end = _parse_coverage_date(
        _first(values, END_DATE_ALIASES), "end", warnings, today, pivot
    )

    if end is not None and start is None:
        warnings.append("End date given without a start date; used as a single-day start")
        start, end = end, None
    elif end is not None and end < start:
        warnings.append(
            f"End date {end.isoformat()} is before start date {start.isoformat()}; "
            "end date ignored"
        )
        end = None
    elif end is not None and end == start:
        end = None

    tag_names = split_comma_list(_first(values, TAG_ALIASES))
    interviewee_names = dedupe_preserving_order(
        name for cell in _interviewee_cells(values) for name in split_comma_list(cell)
    )
    warnings.extend(collection_warnings(tag_names, interviewee_names))

    draft = StoryDraft(
        idea_title=title,
        idea_description=description,
        questions=questions,
        coverage_start_date=start,
        coverage_end_date=end,
        tag_names=tag_names,
        interviewee_names=interviewee_names,
    )
    return MappedRow(draft=draft, warnings=warnings)
