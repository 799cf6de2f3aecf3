#!/usr/bin/env python3
"""
validate.py
-------------------
Field rules for imported story rows.

Length violations make a row fail (RowValidationError); oversized tag
or interviewee lists only produce warnings, because the story is still
usable.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import List, Optional, Sequence

# --- Local imports ---
from vidpod.core.exceptions import RowValidationError, ValidationError
from vidpod.core.validators import DataValidator
from .columns import (
    MAX_DESCRIPTION_LENGTH,
    MAX_INTERVIEWEES,
    MAX_QUESTION_LENGTH,
    MAX_TAG_LENGTH,
    MAX_TAGS,
    MAX_TITLE_LENGTH,
    TITLE_ALIASES,
)


def require_title(title: Optional[str]) -> str:
    """
    Return the title or fail the row.

    Raises:
        RowValidationError: If the title is missing or blank
    """
    if not title:
        raise RowValidationError(
            f"Story title is required ({' or '.join(TITLE_ALIASES[:2])} field)",
            field="idea_title",
        )
    return title


def validate_lengths(
    title: str,
    description: Optional[str],
    questions: Sequence[Optional[str]],
) -> None:
    """
    Enforce the title, description and question length limits.

    Raises:
        RowValidationError: Naming the first field that is too long
    """
    checks = [
        ("idea_title", "Title", title, MAX_TITLE_LENGTH),
        ("idea_description", "Description", description, MAX_DESCRIPTION_LENGTH),
    ]
    checks.extend(
        (f"question_{n}", f"Question {n}", question, MAX_QUESTION_LENGTH)
        for n, question in enumerate(questions, start=1)
    )

    for field, label, value, limit in checks:
        try:
            DataValidator.validate_max_length(value, limit, label)
        except ValidationError as e:
            raise RowValidationError(str(e), field=field) from e


def collection_warnings(tag_names: Sequence[str], interviewee_names: Sequence[str]) -> List[str]:
    """
    Warn about tag and interviewee lists that are longer than recommended.

    Returns:
        Warning messages, possibly empty
    """
    warnings = []

    if len(tag_names) > MAX_TAGS:
        warnings.append(
            f"Too many tags ({len(tag_names)}). Maximum recommended: {MAX_TAGS}"
        )
    for tag in tag_names:
        if len(tag) > MAX_TAG_LENGTH:
            warnings.append(
                f'Tag "{tag}" is too long. Maximum: {MAX_TAG_LENGTH} characters'
            )

    if len(interviewee_names) > MAX_INTERVIEWEES:
        warnings.append(
            f"Too many interviewees ({len(interviewee_names)}). "
            f"Maximum recommended: {MAX_INTERVIEWEES}"
        )

    return warnings
