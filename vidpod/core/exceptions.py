#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the VidPOD project.

This module defines a hierarchy of exceptions used throughout the project
to handle specific error conditions in different subsystems.

Exception Hierarchy:
    Exception (built-in)
    ├── DatabaseError - Base for all database-related errors
    │   └── RowPersistenceError - A single imported row could not be stored
    ├── ValidationError - Data validation failures
    │   └── RowValidationError - A single imported row is malformed
    ├── ImportFileError - The uploaded file cannot be processed at all
    └── PermissionError (built-in)
        └── ImportPermissionError - Uploader may not import stories

Usage:
    from vidpod.core.exceptions import ImportFileError, RowValidationError

    try:
        summary = importer.import_file(data, uploader)
    except ImportFileError as e:
        logger.error(f"Rejected upload: {e}")
"""
from typing import Optional


class DatabaseError(Exception):
    """
    Base exception for database-related errors.

    Raised when database operations fail due to connection issues,
    query errors, integrity violations, or other database problems.

    Examples:
        >>> raise DatabaseError("Connection to database failed")
        >>> raise DatabaseError("Data integrity violation: duplicate tag")
    """

    pass


class RowPersistenceError(DatabaseError):
    """
    Exception for a row whose story, tags or interviewees could not be stored.

    The orchestrator reports these as ``"Database error: ..."`` and moves
    on to the next row.
    """

    pass


class ValidationError(Exception):
    """
    Exception for data validation failures.

    Examples:
        >>> raise ValidationError("Required field 'username' missing or empty")
    """

    pass


class RowValidationError(ValidationError):
    """
    Exception for a spreadsheet row that cannot become a story.

    The message is shown verbatim to the uploader as the failure reason,
    so it should be a complete, human-readable sentence.

    Attributes:
        field: Name of the offending field, when known
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class ImportFileError(Exception):
    """
    Exception for uploads that cannot be processed as a whole.

    Raised before any row is persisted: empty or undecodable files,
    files without a header or title column, and files over the size
    or row limits.

    Examples:
        >>> raise ImportFileError("CSV file is empty")
    """

    pass


class ImportPermissionError(PermissionError):
    """Exception raised when the uploader's role may not import stories."""

    pass
