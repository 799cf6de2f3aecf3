#!/usr/bin/env python3
"""
story_manager.py
--------------------
Manages StoryIdea entities.

Creates stories from validated import drafts and answers the filtered
listing used by the stories page.

Key Features:
    - Create a story with its tags, interviewees and approval metadata
    - Single-day aware coverage filtering
    - Title/description search, tag and interviewee filters

Usage:
    story_mgr = StoryManager(session, logger)

    story = story_mgr.create_story(
        draft, uploader_id=user.id, approval_status=ApprovalStatus.PENDING
    )
    recent = story_mgr.search(search="lunch", tags=["education"])
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date, datetime
from typing import TYPE_CHECKING, List, Optional, Sequence

# --- Third party imports ---
from sqlalchemy import and_, or_
from sqlalchemy.orm import selectinload

# --- Local imports ---
from vidpod.database.decorators import handle_db_errors, log_database_operation
from vidpod.database.models import (
    ApprovalStatus,
    Interviewee,
    QUESTION_COUNT,
    StoryIdea,
    Tag,
)
from vidpod.database.models.base import utcnow
from .base_manager import BaseManager

if TYPE_CHECKING:
    from vidpod.importer.models import StoryDraft


class StoryManager(BaseManager):
    """
    Manages StoryIdea table operations.

    A story is created once per successfully imported row and is not
    modified afterwards by the import path.
    """

    # -------------------------------------------------------------------------
    # Creation
    # -------------------------------------------------------------------------

    @handle_db_errors
    @log_database_operation("create_story")
    def create_story(
        self,
        draft: "StoryDraft",
        uploader_id: int,
        approval_status: ApprovalStatus = ApprovalStatus.PENDING,
        tags: Optional[Sequence[Tag]] = None,
        interviewees: Optional[Sequence[Interviewee]] = None,
        now: Optional[datetime] = None,
    ) -> StoryIdea:
        """
        Persist a story from an import draft.

        Coverage dates arrive as CanonicalDate triples and are stored as
        calendar dates; an end date equal to the start is stored as NULL.

        Args:
            draft: Validated StoryDraft
            uploader_id: Id of the uploading user
            approval_status: Initial moderation state
            tags: Resolved Tag objects to link
            interviewees: Resolved Interviewee objects to link
            now: Timestamp for submitted/approved columns (defaults to now)

        Returns:
            Flushed StoryIdea with an id

        Raises:
            DatabaseError: If the insert violates a constraint
        """
        now = now or utcnow()
        approval_status = ApprovalStatus(approval_status)

        start = draft.coverage_start_date.to_date() if draft.coverage_start_date else None
        end = draft.coverage_end_date.to_date() if draft.coverage_end_date else None
        if end is not None and end == start:
            end = None

        story = StoryIdea(
            idea_title=draft.idea_title,
            idea_description=draft.idea_description,
            coverage_start_date=start,
            coverage_end_date=end,
            uploaded_by=uploader_id,
            uploaded_date=now,
            approval_status=approval_status,
            submitted_at=now,
        )
        for index in range(QUESTION_COUNT):
            value = draft.questions[index] if index < len(draft.questions) else None
            setattr(story, f"question_{index + 1}", value)

        if approval_status is ApprovalStatus.APPROVED:
            story.approved_at = now
            story.approved_by = uploader_id

        story.tags = list(tags or [])
        story.interviewees = list(interviewees or [])

        self.session.add(story)
        self.session.flush()
        return story

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @handle_db_errors
    def get(self, story_id: int) -> Optional[StoryIdea]:
        """Retrieve a story with its tags and interviewees loaded."""
        return (
            self.session.query(StoryIdea)
            .options(selectinload(StoryIdea.tags), selectinload(StoryIdea.interviewees))
            .filter(StoryIdea.id == story_id)
            .first()
        )

    @handle_db_errors
    def count(self, **filters) -> int:
        return self._count(StoryIdea, **filters)

    @handle_db_errors
    @log_database_operation("search_stories")
    def search(
        self,
        search: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        interviewee: Optional[str] = None,
        approval_status: Optional[ApprovalStatus] = None,
    ) -> List[StoryIdea]:
        """
        List stories matching all given filters, newest upload first.

        Args:
            search: Case-insensitive substring of title or description
            tags: Stories carrying at least one of these exact tag names
            start_date: Coverage must start on or after this day
            end_date: Coverage must end on or before this day; single-day
                stories are judged by their start date
            interviewee: Case-insensitive substring of an interviewee name
            approval_status: Restrict to one moderation state

        Returns:
            List of StoryIdea objects with tags and interviewees loaded
        """
        query = self.session.query(StoryIdea).options(
            selectinload(StoryIdea.tags), selectinload(StoryIdea.interviewees)
        )

        if search:
            pattern = f"%{search}%"
            query = query.filter(
                or_(
                    StoryIdea.idea_title.ilike(pattern),
                    StoryIdea.idea_description.ilike(pattern),
                )
            )

        if start_date:
            query = query.filter(StoryIdea.coverage_start_date >= start_date)

        if end_date:
            query = query.filter(
                or_(
                    StoryIdea.coverage_end_date <= end_date,
                    and_(
                        StoryIdea.coverage_end_date.is_(None),
                        StoryIdea.coverage_start_date <= end_date,
                    ),
                )
            )

        if tags:
            query = query.filter(StoryIdea.tags.any(Tag.tag_name.in_(list(tags))))

        if interviewee:
            query = query.filter(
                StoryIdea.interviewees.any(Interviewee.name.ilike(f"%{interviewee}%"))
            )

        if approval_status is not None:
            query = query.filter(
                StoryIdea.approval_status == ApprovalStatus(approval_status)
            )

        return query.order_by(StoryIdea.uploaded_date.desc(), StoryIdea.id.desc()).all()
