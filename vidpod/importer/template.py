#!/usr/bin/env python3
"""
template.py
-------------------
Downloadable CSV template for story idea imports.

The template uses the canonical header names and two sample rows so
that teachers can fill it in a spreadsheet and upload it unchanged.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import csv
import io
from pathlib import Path
from typing import List, Union

# --- Local imports ---
from .columns import TEMPLATE_HEADERS

TEMPLATE_FILENAME = "story_ideas_template.csv"

SAMPLE_ROWS: List[List[str]] = [
    [
        "Local Environmental Impact",
        "Investigating pollution effects on local wildlife",
        "What pollution sources affect our area?",
        "How has wildlife been impacted?",
        "What cleanup efforts are underway?",
        "How can residents help?",
        "What policies need changing?",
        "What is the long-term outlook?",
        "2024-01-15",
        "2024-03-15",
        "environment,pollution,wildlife",
        "Environmental Scientist,Local Mayor",
    ],
    [
        "School Lunch Program Innovation",
        "How schools are improving nutrition and sustainability",
        "What changes were made to the program?",
        "How do students respond to new options?",
        "What are the nutritional benefits?",
        "How is food sourcing different?",
        "What challenges were faced?",
        "What are the cost implications?",
        "2024-02-01",
        "2024-04-01",
        "education,nutrition,sustainability",
        "School Nutritionist,Principal,Student Representative",
    ],
]


def generate_template() -> str:
    """
    Render the template as CSV text.

    Returns:
        Header line plus sample rows, CRLF-terminated as spreadsheets expect
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(TEMPLATE_HEADERS)
    writer.writerows(SAMPLE_ROWS)
    return buffer.getvalue()


def write_template(output: Union[str, Path]) -> Path:
    """
    Write the template to ``output``.

    A directory argument receives ``story_ideas_template.csv``.

    Returns:
        Path of the written file
    """
    path = Path(output).expanduser()
    if path.is_dir():
        path = path / TEMPLATE_FILENAME
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(generate_template())
    return path
