#!/usr/bin/env python3
"""
VidPOD Database Package
---------------------------
Persistence layer for story ideas, tags, interviewees and users.

This package provides:
- VidpodDB: engine, session scopes and migrations
- Entity managers bound to one session
- Shared decorators for logging and error translation
"""

from .manager import VidpodDB
from vidpod.core.exceptions import DatabaseError, RowPersistenceError, ValidationError
from .decorators import (
    log_database_operation,
    handle_db_errors,
    validate_metadata,
)

__all__ = [
    # Main manager
    "VidpodDB",
    # Exceptions
    "DatabaseError",
    "RowPersistenceError",
    "ValidationError",
    # Decorators
    "log_database_operation",
    "handle_db_errors",
    "validate_metadata",
]
