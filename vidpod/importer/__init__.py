"""
CSV import of story ideas.

Modules:
    - columns: Header aliases and limits
    - reader: Upload decoding and row splitting
    - row_mapper: Row to StoryDraft mapping
    - validate: Field length rules and warnings
    - template: Downloadable CSV template
    - orchestrator: StoryImporter, one transaction per row

Usage:
    from vidpod.importer import StoryImporter, UploaderIdentity
"""
from .models import (
    ImportRowResult,
    ImportSummary,
    ImportWarning,
    MappedRow,
    StoryDraft,
    UploaderIdentity,
)
from .orchestrator import StoryImporter
from .reader import read_csv
from .row_mapper import map_row
from .template import generate_template, write_template

__all__ = [
    "ImportRowResult",
    "ImportSummary",
    "ImportWarning",
    "MappedRow",
    "StoryDraft",
    "UploaderIdentity",
    "StoryImporter",
    "read_csv",
    "map_row",
    "generate_template",
    "write_template",
]
