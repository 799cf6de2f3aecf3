"""
Database Models Package
------------------------

SQLAlchemy ORM models for the VidPOD database.

This package provides a modular organization of database models:
- base: Base class and timestamp mixin
- associations: Many-to-many relationship tables
- enums: Enumeration types
- core: StoryIdea model
- entities: User, Tag, Interviewee

Usage:
    from vidpod.database.models import StoryIdea, Tag, Interviewee
"""
# Base classes
from .base import Base, TimestampMixin

# Enumerations
from .enums import ApprovalStatus, UserRole

# Association tables
from .associations import story_interviewees, story_tags

# Core models
from .core import QUESTION_COUNT, StoryIdea

# Entity models
from .entities import Interviewee, Tag, User

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    # Enums
    "ApprovalStatus",
    "UserRole",
    # Associations
    "story_interviewees",
    "story_tags",
    # Models
    "QUESTION_COUNT",
    "StoryIdea",
    "Interviewee",
    "Tag",
    "User",
]
