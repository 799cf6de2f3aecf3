#!/usr/bin/env python3
"""
columns.py
-------------------
Header aliases and import limits for story idea spreadsheets.

Spreadsheets arrive from many teachers with many conventions, so each
story field accepts a fixed list of header spellings. Headers are
compared after ``normalize_header`` (lowercase, BOM stripped, runs of
spaces/dashes collapsed to one underscore).

Constants:
    TITLE_ALIASES ... INTERVIEWEE_ALIASES: Accepted header names per field
    QUESTION_ALIASES: Accepted header names per question number
    MAX_UPLOAD_BYTES, MAX_ROWS: Whole-file limits
    MAX_TITLE_LENGTH, MAX_DESCRIPTION_LENGTH, MAX_QUESTION_LENGTH: Field limits
    MAX_TAGS, MAX_TAG_LENGTH, MAX_INTERVIEWEES: Warning thresholds
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from typing import Dict, Tuple

# ----- Header aliases (first non-empty wins) -----
TITLE_ALIASES: Tuple[str, ...] = ("idea_title", "title", "story_title", "name")
DESCRIPTION_ALIASES: Tuple[str, ...] = (
    "idea_description",
    "description",
    "enhanced_description",
    "summary",
)
START_DATE_ALIASES: Tuple[str, ...] = (
    "coverage_start_date",
    "start_date",
    "date_start",
    "begin_date",
)
END_DATE_ALIASES: Tuple[str, ...] = (
    "coverage_end_date",
    "end_date",
    "date_end",
    "finish_date",
)
TAG_ALIASES: Tuple[str, ...] = ("tags", "auto_tags", "tag", "categories", "keywords")
INTERVIEWEE_ALIASES: Tuple[str, ...] = (
    "interviewees",
    "people_to_interview",
    "contacts",
    "sources",
)

QUESTION_COUNT = 6
QUESTION_ALIASES: Dict[int, Tuple[str, ...]] = {
    n: (f"question_{n}", f"q{n}", f"question{n}") for n in range(1, QUESTION_COUNT + 1)
}

# "interviewee 1", "interviewees_2", "interviewee3" ...
NUMBERED_INTERVIEWEE_RE = re.compile(r"^interviewees?_?(\d+)$")

# ----- Template column order -----
TEMPLATE_HEADERS: Tuple[str, ...] = (
    "idea_title",
    "idea_description",
    *(f"question_{n}" for n in range(1, QUESTION_COUNT + 1)),
    "coverage_start_date",
    "coverage_end_date",
    "tags",
    "interviewees",
)

# ----- Limits -----
MAX_UPLOAD_BYTES = 10 * 1024 * 1024
MAX_ROWS = 1000

MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 2000
MAX_QUESTION_LENGTH = 500

MAX_TAGS = 10
MAX_TAG_LENGTH = 50
MAX_INTERVIEWEES = 15

_BOM = "﻿"
_SEPARATOR_RE = re.compile(r"[\s\-]+")


def normalize_header(header: str) -> str:
    """
    Normalize a spreadsheet header for alias matching.

    Examples:
        >>> normalize_header("﻿Idea Title ")
        'idea_title'
        >>> normalize_header("Coverage-Start-Date")
        'coverage_start_date'
    """
    text = (header or "").replace(_BOM, "").strip().lower()
    return _SEPARATOR_RE.sub("_", text)


def has_title_column(headers) -> bool:
    """True when any normalized header is a title alias."""
    return any(header in TITLE_ALIASES for header in headers)
