"""
VidPOD Story Idea Package
==========================

Story idea management for student video podcast classes.

Teachers collect story ideas in spreadsheets; this package imports them
in bulk, normalizing dates, tags and interviewees, and stores them in a
SQLite (or any SQLAlchemy-supported) database for browsing.

Main Components:
    - importer: CSV reading, row mapping and the per-row import orchestrator
    - database: SQLAlchemy ORM with entity managers and Alembic migrations
    - web: FastAPI upload and browse endpoints
    - core: Logging, validation, exceptions and paths
    - utils: Date normalization and list parsing

Primary Interfaces:
    - vidpod.database.cli: Database management CLI (``vidpod-db``)
    - vidpod.database.manager.VidpodDB: Main database interface
    - vidpod.importer.StoryImporter: Bulk CSV import
    - vidpod.web.create_app: HTTP application factory

Example Usage:
    >>> from vidpod import VidpodDB
    >>> from vidpod.importer import StoryImporter, UploaderIdentity
    >>> db = VidpodDB("sqlite:///data/vidpod.db", log_dir="logs")
    >>> summary = StoryImporter(db).import_file(data, UploaderIdentity(1, "teacher"))
    >>> summary.message
    'CSV import completed successfully: 3 of 3 stories imported'

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__author__ = "VidPOD Project"

# Expose primary interfaces for convenience
from vidpod.database.manager import VidpodDB
from vidpod.core.paths import DATA_DIR, DB_PATH, LOG_DIR

__all__ = [
    "VidpodDB",
    "DATA_DIR",
    "DB_PATH",
    "LOG_DIR",
]
