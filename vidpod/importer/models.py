#!/usr/bin/env python3
"""
models.py
-------------------
Data structures passed between the CSV importer stages.

Classes:
    UploaderIdentity: Who is importing (from the auth collaborator)
    StoryDraft: A validated row, ready to persist
    MappedRow: A draft plus the row's non-fatal warnings
    ImportRowResult: Outcome of one spreadsheet line
    ImportWarning: A non-fatal issue attached to one line
    ImportSummary: Outcome of a whole file
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# --- Local imports ---
from vidpod.database.models import UserRole
from vidpod.utils.dates import CanonicalDate

UNKNOWN_TITLE = "Unknown"


@dataclass(frozen=True)
class UploaderIdentity:
    """
    The authenticated uploader, as handed in by the auth layer.

    Attributes:
        user_id: Id of an existing ``users`` row
        role: The user's role
    """

    user_id: int
    role: UserRole

    def __post_init__(self) -> None:
        object.__setattr__(self, "role", UserRole(self.role))

    @property
    def can_import(self) -> bool:
        return self.role.can_import

    @property
    def is_admin(self) -> bool:
        return self.role.is_admin


@dataclass
class StoryDraft:
    """
    A story idea extracted from one spreadsheet row.

    Invariants: ``idea_title`` is non-empty and within length limits;
    ``coverage_end_date`` is None when it would equal the start; tag and
    interviewee names are trimmed, non-empty and unique.
    """

    idea_title: str
    idea_description: Optional[str] = None
    questions: List[Optional[str]] = field(default_factory=list)
    coverage_start_date: Optional[CanonicalDate] = None
    coverage_end_date: Optional[CanonicalDate] = None
    tag_names: List[str] = field(default_factory=list)
    interviewee_names: List[str] = field(default_factory=list)


@dataclass
class MappedRow:
    """A draft together with the warnings raised while mapping it."""

    draft: StoryDraft
    warnings: List[str] = field(default_factory=list)


@dataclass
class ImportRowResult:
    """
    Outcome of one spreadsheet line.

    Exactly one of ``story_id`` and ``reason`` is set.

    Attributes:
        row: Spreadsheet line number (header is line 1)
        title: Row title, or "Unknown" when the row had none
        story_id: Id of the stored story on success
        reason: Failure message otherwise
    """

    row: int
    title: str
    story_id: Optional[int] = None
    reason: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.story_id is None) == (self.reason is None):
            raise ValueError("ImportRowResult needs exactly one of story_id or reason")

    @property
    def succeeded(self) -> bool:
        return self.story_id is not None

    def to_dict(self) -> Dict[str, Any]:
        return {"row": self.row, "title": self.title, "reason": self.reason}


@dataclass
class ImportWarning:
    """A non-fatal issue attached to one spreadsheet line."""

    row: int
    title: str
    warning: str

    def to_dict(self) -> Dict[str, Any]:
        return {"row": self.row, "title": self.title, "warning": self.warning}


@dataclass
class ImportSummary:
    """
    Outcome of a whole import.

    Attributes:
        total: Data rows considered (blank rows excluded)
        results: One ImportRowResult per considered row, in file order
        warnings: Non-fatal issues in file order
    """

    total: int = 0
    results: List[ImportRowResult] = field(default_factory=list)
    warnings: List[ImportWarning] = field(default_factory=list)

    @property
    def imported(self) -> int:
        return sum(1 for result in self.results if result.succeeded)

    @property
    def failed(self) -> int:
        return sum(1 for result in self.results if not result.succeeded)

    @property
    def errors(self) -> List[ImportRowResult]:
        return [result for result in self.results if not result.succeeded]

    @property
    def story_ids(self) -> List[int]:
        return [result.story_id for result in self.results if result.succeeded]

    @property
    def message(self) -> str:
        status = "successfully" if self.imported > 0 else "with issues"
        return (
            f"CSV import completed {status}: {self.imported} of {self.total} "
            f"stories imported"
        )

    def summary(self) -> str:
        """Get formatted summary."""
        return (
            f"{self.imported} imported, {self.failed} failed, "
            f"{len(self.warnings)} warnings"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the upload endpoint's response shape."""
        return {
            "imported": self.imported,
            "failed": self.failed,
            "total": self.total,
            "errors": [result.to_dict() for result in self.errors],
            "warnings": [warning.to_dict() for warning in self.warnings],
            "message": self.message,
        }
