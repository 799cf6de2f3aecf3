"""
Entity Models
--------------

People and labels referenced by story ideas.

Models:
    - User: Account that uploads stories and creates tags
    - Tag: Unique keyword label, created lazily on first reference
    - Interviewee: Free-text person to interview, no uniqueness
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String
from sqlalchemy import Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .associations import story_interviewees, story_tags
from .base import Base, TimestampMixin
from .enums import UserRole

if TYPE_CHECKING:
    from .core import StoryIdea


class User(Base, TimestampMixin):
    """
    An account of the VidPOD platform.

    Authentication happens upstream; this table only holds what the
    import path and the story listing need.

    Attributes:
        id: Primary key
        username: Login name (unique)
        email: Contact address (unique)
        role: One of UserRole
        created_at: When the account row was created

    Relationships:
        stories: One-to-many with StoryIdea (uploaded stories)
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("username != ''", name="ck_user_non_empty_username"),
        CheckConstraint("email != ''", name="ck_user_non_empty_email"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    role: Mapped[UserRole] = mapped_column(
        SQLEnum(UserRole, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=UserRole.TEACHER,
    )

    stories: Mapped[List["StoryIdea"]] = relationship(
        "StoryIdea",
        back_populates="uploader",
        foreign_keys="StoryIdea.uploaded_by",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username}, role={self.role.value})>"


class Tag(Base, TimestampMixin):
    """
    Keyword tag for story ideas.

    Tag names are matched exactly and case-sensitively: "Climate" and
    "climate" are two tags. The unique constraint on ``tag_name`` is what
    keeps concurrent importers from creating duplicates.

    Attributes:
        id: Primary key
        tag_name: The tag text (unique)
        created_by: Optional FK to the user whose import created the tag
        created_at: When the tag was created

    Relationships:
        stories: Many-to-many with StoryIdea
    """

    __tablename__ = "tags"
    __table_args__ = (CheckConstraint("tag_name != ''", name="ck_non_empty_tag"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    tag_name: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, index=True
    )
    created_by: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )

    stories: Mapped[List["StoryIdea"]] = relationship(
        "StoryIdea", secondary=story_tags, back_populates="tags"
    )

    @property
    def usage_count(self) -> int:
        """Number of stories using this tag."""
        return len(self.stories)

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, tag_name={self.tag_name})>"

    def __str__(self) -> str:
        return self.tag_name


class Interviewee(Base, TimestampMixin):
    """
    A person suggested for interview.

    Names are free text with no uniqueness: two rows named "Principal"
    may well be different people at different schools.

    Attributes:
        id: Primary key
        name: Free-text name or role

    Relationships:
        stories: Many-to-many with StoryIdea
    """

    __tablename__ = "interviewees"
    __table_args__ = (CheckConstraint("name != ''", name="ck_non_empty_interviewee"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    stories: Mapped[List["StoryIdea"]] = relationship(
        "StoryIdea", secondary=story_interviewees, back_populates="interviewees"
    )

    def __repr__(self) -> str:
        return f"<Interviewee(id={self.id}, name={self.name})>"

    def __str__(self) -> str:
        return self.name
