"""
test_validators.py
------------------
Unit tests for DataValidator.
"""
import pytest

from vidpod.core.exceptions import ValidationError
from vidpod.core.validators import DataValidator


class TestValidateRequiredFields:
    """Test validate_required_fields()."""

    def test_passes_when_present(self):
        DataValidator.validate_required_fields({"username": "a", "email": "b"}, ["username"])

    @pytest.mark.parametrize("data", [{}, {"username": ""}, {"username": None}])
    def test_missing_or_empty_raises(self, data):
        with pytest.raises(ValidationError, match="username"):
            DataValidator.validate_required_fields(data, ["username"])


class TestNormalizeString:
    """Test normalize_string()."""

    def test_trims_and_collapses_whitespace(self):
        assert DataValidator.normalize_string("  School   Lunch\n Program ") == (
            "School Lunch Program"
        )

    def test_preserves_case(self):
        assert DataValidator.normalize_string("COVID Vaccines") == "COVID Vaccines"

    def test_strips_bom(self):
        assert DataValidator.normalize_string("﻿Title") == "Title"

    @pytest.mark.parametrize("value", [None, "", "   ", "﻿"])
    def test_empty_becomes_none(self, value):
        assert DataValidator.normalize_string(value) is None

    def test_non_strings_are_converted(self):
        assert DataValidator.normalize_string(42) == "42"


class TestNormalizeInt:
    """Test normalize_int()."""

    def test_converts_strings(self):
        assert DataValidator.normalize_int(" 7 ") == 7

    @pytest.mark.parametrize("value", [None, "", "seven", True, 3.5])
    def test_invalid_returns_none(self, value):
        assert DataValidator.normalize_int(value) is None


class TestValidateMaxLength:
    """Test validate_max_length()."""

    def test_at_limit_passes(self):
        DataValidator.validate_max_length("x" * 200, 200, "Title")

    def test_none_passes(self):
        DataValidator.validate_max_length(None, 10, "Title")

    def test_over_limit_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            DataValidator.validate_max_length("x" * 201, 200, "Title")
        assert str(exc_info.value) == "Title must be 200 characters or less (got 201)"


class TestValidateChoice:
    """Test validate_choice()."""

    def test_valid_choice_returned(self):
        assert DataValidator.validate_choice("teacher", ["teacher", "student"], "role") == (
            "teacher"
        )

    def test_invalid_choice_raises(self):
        with pytest.raises(ValidationError, match="Invalid role 'janitor'"):
            DataValidator.validate_choice("janitor", ["teacher", "student"], "role")
