#!/usr/bin/env python3
"""
reader.py
-------------------
Decode an uploaded CSV file into normalized header/row records.

The reader owns every whole-file failure: empty or oversized uploads,
text that is not UTF-8, malformed CSV, a missing header or title column
and too many rows. Each raises ImportFileError before any row is stored.

Usage:
    from vidpod.importer.reader import read_csv

    parsed = read_csv(uploaded_bytes)
    for record in parsed.rows:
        print(record.row, record.values.get("idea_title"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import csv
import io
from dataclasses import dataclass, field
from typing import Dict, List, Union

# --- Local imports ---
from vidpod.core.exceptions import ImportFileError
from .columns import (
    MAX_ROWS,
    MAX_UPLOAD_BYTES,
    TITLE_ALIASES,
    has_title_column,
    normalize_header,
)

#: Header occupies spreadsheet line 1, so data index 0 is line 2
FIRST_DATA_LINE = 2


@dataclass
class CsvRecord:
    """
    One non-blank data row.

    Attributes:
        row: Spreadsheet line number (data index + 2)
        values: Cell text keyed by normalized header
    """

    row: int
    values: Dict[str, str]


@dataclass
class ParsedCsv:
    """
    A decoded upload.

    Attributes:
        headers: Normalized headers in file order
        rows: Non-blank data rows in file order
        blank_rows: Number of fully blank rows that were skipped
    """

    headers: List[str]
    rows: List[CsvRecord] = field(default_factory=list)
    blank_rows: int = 0


def decode_upload(file_bytes: Union[bytes, bytearray, str, None]) -> str:
    """
    Turn uploaded bytes into text.

    Accepts UTF-8 with or without a byte-order mark.

    Raises:
        ImportFileError: If the upload is missing, empty, too large or
            not valid UTF-8
    """
    if file_bytes is None:
        raise ImportFileError("No CSV file uploaded")

    raw = file_bytes.encode("utf-8") if isinstance(file_bytes, str) else bytes(file_bytes)

    if len(raw) > MAX_UPLOAD_BYTES:
        raise ImportFileError(
            f"CSV file is too large ({len(raw)} bytes); "
            f"the limit is {MAX_UPLOAD_BYTES // (1024 * 1024)} MB"
        )

    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ImportFileError(
            f"CSV file is not valid UTF-8 text (byte {e.start}); "
            "save the spreadsheet as 'CSV UTF-8' and try again"
        ) from e

    if not text.strip():
        raise ImportFileError("CSV file is empty")

    return text


def _is_blank(cells: List[str]) -> bool:
    return all(not (cell or "").strip() for cell in cells)


def _build_values(headers: List[str], cells: List[str]) -> Dict[str, str]:
    """
    Zip headers and cells.

    Short rows are padded with empty strings and extra cells are dropped.
    When two columns share a normalized header, the first non-empty cell
    wins.
    """
    values: Dict[str, str] = {}
    for index, header in enumerate(headers):
        if not header:
            continue
        cell = cells[index] if index < len(cells) else ""
        if values.get(header, "").strip():
            continue
        values[header] = cell
    return values


def read_csv(file_bytes: Union[bytes, bytearray, str, None]) -> ParsedCsv:
    """
    Decode and split an uploaded CSV file.

    Leading blank lines before the header are ignored. Fully blank data
    rows are counted and skipped but still advance the line numbering.

    Args:
        file_bytes: Raw upload

    Returns:
        ParsedCsv with normalized headers and numbered rows

    Raises:
        ImportFileError: On any whole-file problem
    """
    text = decode_upload(file_bytes)

    try:
        records = list(csv.reader(io.StringIO(text, newline="")))
    except csv.Error as e:
        raise ImportFileError(f"Failed to parse CSV file: {e}") from e

    while records and _is_blank(records[0]):
        records.pop(0)

    if not records:
        raise ImportFileError("CSV file has no header row")

    headers = [normalize_header(cell) for cell in records[0]]
    if not has_title_column(headers):
        raise ImportFileError(
            "CSV file has no title column (expected one of: "
            f"{', '.join(TITLE_ALIASES)})"
        )

    parsed = ParsedCsv(headers=headers)
    for index, cells in enumerate(records[1:]):
        if _is_blank(cells):
            parsed.blank_rows += 1
            continue
        parsed.rows.append(
            CsvRecord(row=index + FIRST_DATA_LINE, values=_build_values(headers, cells))
        )

    if len(parsed.rows) > MAX_ROWS:
        raise ImportFileError(
            f"CSV file has {len(parsed.rows)} data rows; the limit is {MAX_ROWS}"
        )

    return parsed
