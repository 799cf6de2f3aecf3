"""
Core Models
------------

Central model for the VidPOD database.

Models:
    - StoryIdea: A podcast story idea with coverage window, questions,
      tags and interviewees

Single-day coverage is stored with ``coverage_end_date`` NULL; readers
treat an end date equal to the start the same way.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import CheckConstraint, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy import Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vidpod.utils.dates import format_coverage

from .associations import story_interviewees, story_tags
from .base import Base, utcnow
from .enums import ApprovalStatus

if TYPE_CHECKING:
    from .entities import Interviewee, Tag, User

QUESTION_COUNT = 6


class StoryIdea(Base):
    """
    A story idea uploaded by a teacher or admin.

    Attributes:
        id: Primary key
        idea_title: Short headline (required, non-empty)
        idea_description: Longer pitch
        question_1 .. question_6: Suggested interview questions
        coverage_start_date: First day of coverage
        coverage_end_date: Last day of coverage, NULL for a single day
        uploaded_by: FK to the uploading user
        uploaded_date: When the row was stored
        approval_status: One of ApprovalStatus
        submitted_at: When the story entered moderation
        approved_at: When the story was approved
        approved_by: FK to the approving user

    Relationships:
        uploader: Many-to-one with User
        approver: Many-to-one with User (optional)
        tags: Many-to-many with Tag
        interviewees: Many-to-many with Interviewee
    """

    __tablename__ = "story_ideas"
    __table_args__ = (
        CheckConstraint("idea_title != ''", name="ck_story_non_empty_title"),
        CheckConstraint(
            "coverage_end_date IS NULL OR coverage_start_date IS NOT NULL",
            name="ck_story_end_requires_start",
        ),
    )

    # ---- Primary fields ----
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    idea_title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    idea_description: Mapped[Optional[str]] = mapped_column(Text)
    question_1: Mapped[Optional[str]] = mapped_column(Text)
    question_2: Mapped[Optional[str]] = mapped_column(Text)
    question_3: Mapped[Optional[str]] = mapped_column(Text)
    question_4: Mapped[Optional[str]] = mapped_column(Text)
    question_5: Mapped[Optional[str]] = mapped_column(Text)
    question_6: Mapped[Optional[str]] = mapped_column(Text)

    # ---- Coverage ----
    coverage_start_date: Mapped[Optional[date]] = mapped_column(Date, index=True)
    coverage_end_date: Mapped[Optional[date]] = mapped_column(Date)

    # ---- Ownership & moderation ----
    uploaded_by: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    uploaded_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )
    approval_status: Mapped[ApprovalStatus] = mapped_column(
        SQLEnum(ApprovalStatus, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=ApprovalStatus.PENDING,
        index=True,
    )
    submitted_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    approved_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    approved_by: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )

    # ---- Relationships ----
    uploader: Mapped["User"] = relationship(
        "User", back_populates="stories", foreign_keys=[uploaded_by]
    )
    approver: Mapped[Optional["User"]] = relationship("User", foreign_keys=[approved_by])
    tags: Mapped[List["Tag"]] = relationship(
        "Tag", secondary=story_tags, back_populates="stories"
    )
    interviewees: Mapped[List["Interviewee"]] = relationship(
        "Interviewee", secondary=story_interviewees, back_populates="stories"
    )

    # ---- Computed properties ----
    @property
    def questions(self) -> List[str]:
        """Non-empty questions in order."""
        values = [getattr(self, f"question_{n}") for n in range(1, QUESTION_COUNT + 1)]
        return [value for value in values if value]

    @property
    def is_single_day(self) -> bool:
        """True when coverage is one day (absent end, or end equal to start)."""
        if self.coverage_start_date is None:
            return False
        return (
            self.coverage_end_date is None
            or self.coverage_end_date == self.coverage_start_date
        )

    @property
    def coverage_display(self) -> str:
        return format_coverage(self.coverage_start_date, self.coverage_end_date)

    @property
    def tag_names(self) -> List[str]:
        return sorted(tag.tag_name for tag in self.tags)

    @property
    def interviewee_names(self) -> List[str]:
        return [person.name for person in self.interviewees]

    def __repr__(self) -> str:
        return f"<StoryIdea(id={self.id}, idea_title={self.idea_title})>"

    def __str__(self) -> str:
        return self.idea_title
