#!/usr/bin/env python3
"""
parsers.py
--------------------
Parsing utilities for comma-separated spreadsheet cells.

Functions:
    split_comma_list: Split "a, b,,a" into ["a", "b"]
    dedupe_preserving_order: Drop repeated strings, keeping first occurrences

Usage:
    from vidpod.utils.parsers import split_comma_list

    split_comma_list(" Climate , Water,, Climate ")
    # Returns: ["Climate", "Water"]
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Iterable, List, Optional

# --- Local imports ---
from vidpod.core.validators import DataValidator


def dedupe_preserving_order(items: Iterable[str]) -> List[str]:
    """
    Remove exact duplicates while keeping the first occurrence of each item.

    Comparison is case-sensitive: "Climate" and "climate" are distinct.
    """
    seen = set()
    unique = []
    for item in items:
        if item not in seen:
            seen.add(item)
            unique.append(item)
    return unique


def split_comma_list(value: Optional[str]) -> List[str]:
    """
    Split a comma-separated cell into clean, unique segments.

    Each segment is normalized (BOM removed, inner whitespace collapsed,
    trimmed); empty segments are dropped.

    Args:
        value: Raw cell text, or None

    Returns:
        Ordered list of unique non-empty segments

    Examples:
        >>> split_comma_list("environment,pollution, wildlife")
        ['environment', 'pollution', 'wildlife']
        >>> split_comma_list(" , ")
        []
    """
    if not value:
        return []

    segments = []
    for raw in str(value).split(","):
        normalized = DataValidator.normalize_string(raw)
        if normalized:
            segments.append(normalized)
    return dedupe_preserving_order(segments)
