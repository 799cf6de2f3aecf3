#!/usr/bin/env python3
"""
conftest.py
-----------
Shared fixtures for import integration tests.

Fixtures:
    importer: StoryImporter on the test database with a fixed 'today'
    make_csv: Build CSV upload bytes from a header and rows
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import csv
import io

# --- Third-party imports ---
import pytest

# --- Local imports ---
from vidpod.importer import StoryImporter


@pytest.fixture
def importer(test_db, reference_day):
    """StoryImporter bound to the test database."""
    return StoryImporter(test_db, today=reference_day)


@pytest.fixture
def make_csv():
    """Return a builder turning (header, rows) into UTF-8 CSV bytes."""

    def _make(header, rows):
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(header)
        writer.writerows(rows)
        return buffer.getvalue().encode("utf-8")

    return _make
