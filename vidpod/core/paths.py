#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants and configuration for the VidPOD project.

This module defines project paths as Path objects for consistent path
handling across the codebase. Paths are relative to the project root
unless overridden through the environment.

The project structure:
    ROOT/
    ├── vidpod/             # Application package
    │   └── migrations/     # Alembic scripts (shipped with the package)
    ├── data/               # SQLite database
    └── logs/               # Application logs

Environment overrides:
    VIDPOD_DATA_DIR: Directory holding the SQLite database
    VIDPOD_LOG_DIR: Directory for rotating log files
    VIDPOD_DATABASE_URL: Full SQLAlchemy URL (takes precedence over DB_PATH)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine project root directory.

    Assumes this file is at ROOT/vidpod/core/paths.py.

    Returns:
        Path object for project root
    """
    # paths.py -> core/ -> vidpod/ -> ROOT/
    return Path(__file__).resolve().parent.parent.parent


# ----- Project directory -----
ROOT: Path = _get_project_root()
PACKAGE_DIR = ROOT / "vidpod"

# --- Database ---
ALEMBIC_DIR = PACKAGE_DIR / "migrations"
DATA_DIR = Path(os.environ.get("VIDPOD_DATA_DIR", ROOT / "data")).expanduser()
DB_PATH = DATA_DIR / "vidpod.db"
DATABASE_URL = os.environ.get("VIDPOD_DATABASE_URL", f"sqlite:///{DB_PATH}")

# ---- Logs ----
LOG_DIR = Path(os.environ.get("VIDPOD_LOG_DIR", ROOT / "logs")).expanduser()
