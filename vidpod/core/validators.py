#!/usr/bin/env python3
"""
validators.py
--------------------
Data validation and normalization utilities for VidPOD operations.

Provides the small set of conversions shared by the database managers,
the CSV importer and the web layer.
"""
from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from .exceptions import ValidationError

_WHITESPACE_RE = re.compile(r"\s+")
_BOM = "﻿"


class DataValidator:
    """Centralized data validation for database operations."""

    @staticmethod
    def validate_required_fields(
        data: Dict[str, Any], required_fields: List[str]
    ) -> None:
        """
        Validate that required fields are present and non-empty.

        Args:
            data: Data dictionary to validate
            required_fields: List of required field names

        Raises:
            ValidationError: If validation fails
        """
        for field in required_fields:
            if field not in data or not data[field]:
                raise ValidationError(f"Required field '{field}' missing or empty")

    @staticmethod
    def normalize_string(value: Any) -> Optional[str]:
        """
        Normalize a free-text value.

        Strips byte-order marks, collapses runs of whitespace into a single
        space and trims both ends. Case is preserved.

        Args:
            value: Value to normalize

        Returns:
            Normalized string, or None when nothing is left
        """
        if value is None:
            return None
        text = str(value).replace(_BOM, "")
        text = _WHITESPACE_RE.sub(" ", text).strip()
        return text or None

    @staticmethod
    def normalize_int(value: Any) -> Optional[int]:
        """
        Convert value to integer safely.

        Args:
            value: Value to convert

        Returns:
            Integer value or None
        """
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(str(value).strip())
        except (TypeError, ValueError):
            return None

    @staticmethod
    def validate_max_length(value: Optional[str], limit: int, label: str) -> None:
        """
        Reject strings longer than ``limit`` characters.

        Args:
            value: String to check (None is accepted)
            limit: Maximum allowed length
            label: Human-readable field name for the message

        Raises:
            ValidationError: If the value is too long
        """
        if value is not None and len(value) > limit:
            raise ValidationError(
                f"{label} must be {limit} characters or less "
                f"(got {len(value)})"
            )

    @staticmethod
    def validate_choice(value: Any, choices: List[str], label: str) -> str:
        """
        Check that ``value`` is one of ``choices``.

        Raises:
            ValidationError: If the value is not an allowed choice
        """
        if value not in choices:
            raise ValidationError(
                f"Invalid {label} '{value}'. Expected one of: {', '.join(choices)}"
            )
        return value
