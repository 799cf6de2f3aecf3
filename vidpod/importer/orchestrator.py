#!/usr/bin/env python3
"""
orchestrator.py
-------------------
Bulk import of story ideas from an uploaded CSV file.

Every row is stored in its own transaction: a row that fails validation
or hits a database error is reported and rolled back while the rows
around it are kept.

Workflow:
    1. Check the uploader may import
    2. Decode and split the file (whole-file errors abort here)
    3. For each non-blank row:
        a. Map cells to a StoryDraft (validation errors fail the row)
        b. In one session: resolve tags, resolve interviewees, create story
        c. Record success, or roll back and record "Database error: ..."
    4. Return an ImportSummary

Usage:
    importer = StoryImporter(db, logger=logger)
    summary = importer.import_file(data, UploaderIdentity(7, UserRole.TEACHER))
    print(summary.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date
from typing import Optional, Union

# --- Third party imports ---
from sqlalchemy.exc import SQLAlchemyError

# --- Local imports ---
from vidpod.core.exceptions import (
    DatabaseError,
    ImportPermissionError,
    RowValidationError,
)
from vidpod.core.logging_manager import VidpodLogger, safe_logger
from vidpod.database.manager import VidpodDB
from vidpod.database.managers import IntervieweeBatchCache
from vidpod.database.models import ApprovalStatus, UserRole
from .columns import TITLE_ALIASES
from .models import (
    UNKNOWN_TITLE,
    ImportRowResult,
    ImportSummary,
    ImportWarning,
    UploaderIdentity,
)
from .reader import CsvRecord, read_csv
from .row_mapper import map_row


class StoryImporter:
    """
    Imports story ideas from CSV uploads.

    Attributes:
        db: Database manager providing per-row session scopes
        logger: Optional logger
        today: Reference day for year-less dates (None means the real today)
        pivot: Optional two-digit year pivot override
    """

    def __init__(
        self,
        db: VidpodDB,
        logger: Optional[VidpodLogger] = None,
        today: Optional[date] = None,
        pivot: Optional[int] = None,
    ) -> None:
        self.db = db
        self.logger = logger if logger is not None else db.logger
        self.today = today
        self.pivot = pivot

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def import_file(
        self,
        file_bytes: Union[bytes, str, None],
        uploader: UploaderIdentity,
        auto_approve: bool = False,
    ) -> ImportSummary:
        """
        Import every row of an uploaded CSV file.

        Args:
            file_bytes: Raw upload
            uploader: Identity of the importing user
            auto_approve: Store rows as approved even for non-admins

        Returns:
            ImportSummary with one result per non-blank row

        Raises:
            ImportPermissionError: If the uploader may not import
            ImportFileError: If the file cannot be processed at all
        """
        log = safe_logger(self.logger)
        role = self._check_permission(uploader)

        parsed = read_csv(file_bytes)
        status = self._approval_status(role, auto_approve)

        log.log_operation(
            "story_import_start",
            {
                "uploader_id": uploader.user_id,
                "rows": len(parsed.rows),
                "blank_rows": parsed.blank_rows,
                "approval_status": status.value,
            },
        )

        summary = ImportSummary()
        cache = IntervieweeBatchCache()

        for record in parsed.rows:
            summary.total += 1
            self._import_record(record, uploader, status, cache, summary)

        log.log_operation(
            "story_import_complete",
            {
                "uploader_id": uploader.user_id,
                "total": summary.total,
                "imported": summary.imported,
                "failed": summary.failed,
                "warnings": len(summary.warnings),
            },
        )
        return summary

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _check_permission(self, uploader: UploaderIdentity) -> UserRole:
        """
        Reject roles that may not import and uploaders with no account.

        The stored account role is authoritative; the identity role only
        short-circuits obvious refusals.

        Returns:
            The role recorded on the uploader's account

        Raises:
            ImportPermissionError: If the import is not allowed
        """
        if not uploader.can_import:
            raise ImportPermissionError(
                f"Users with role '{uploader.role.value}' cannot import story ideas"
            )

        with self.db.session_scope():
            account = self.db.users.get_by_id(uploader.user_id)
            if account is None:
                raise ImportPermissionError(f"Unknown uploader id {uploader.user_id}")
            role = account.role

        if not role.can_import:
            raise ImportPermissionError(
                f"Users with role '{role.value}' cannot import story ideas"
            )
        return role

    @staticmethod
    def _approval_status(role: UserRole, auto_approve: bool) -> ApprovalStatus:
        if role.is_admin or auto_approve:
            return ApprovalStatus.APPROVED
        return ApprovalStatus.PENDING

    @staticmethod
    def _title_hint(record: CsvRecord) -> str:
        """Best-effort title for reporting rows that fail before mapping."""
        for alias in TITLE_ALIASES:
            value = (record.values.get(alias) or "").strip()
            if value:
                return value
        return UNKNOWN_TITLE

    def _import_record(
        self,
        record: CsvRecord,
        uploader: UploaderIdentity,
        status: ApprovalStatus,
        cache: IntervieweeBatchCache,
        summary: ImportSummary,
    ) -> None:
        """Map and persist one row, appending its outcome to ``summary``."""
        log = safe_logger(self.logger)

        try:
            mapped = map_row(record.values, today=self.today, pivot=self.pivot)
        except RowValidationError as e:
            summary.results.append(
                ImportRowResult(row=record.row, title=self._title_hint(record), reason=str(e))
            )
            log.log_warning("import_row_invalid", {"row": record.row, "reason": str(e)})
            return

        draft = mapped.draft
        summary.warnings.extend(
            ImportWarning(row=record.row, title=draft.idea_title, warning=warning)
            for warning in mapped.warnings
        )

        try:
            with self.db.session_scope():
                tags = self.db.tags.resolve_tags(draft.tag_names, created_by=uploader.user_id)
                interviewees = self.db.interviewees.resolve_interviewees(
                    draft.interviewee_names, cache=cache
                )
                story = self.db.stories.create_story(
                    draft,
                    uploader_id=uploader.user_id,
                    approval_status=status,
                    tags=tags,
                    interviewees=interviewees,
                )
                story_id = story.id
        except (DatabaseError, SQLAlchemyError) as e:
            cache.discard()
            reason = f"Database error: {e}"
            summary.results.append(
                ImportRowResult(row=record.row, title=draft.idea_title, reason=reason)
            )
            log.log_warning("import_row_failed", {"row": record.row, "reason": reason})
            return

        cache.commit()
        summary.results.append(
            ImportRowResult(row=record.row, title=draft.idea_title, story_id=story_id)
        )
        log.log_debug("import_row_stored", {"row": record.row, "story_id": story_id})
