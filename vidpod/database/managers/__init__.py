#!/usr/bin/env python3
"""
managers package
--------------------
Modular entity managers for the VidPOD database.

Each manager handles operations for a specific entity type, bound to one
SQLAlchemy session, and inherits from BaseManager.

Available Managers:
    BaseManager: Abstract base class with common utilities
    TagManager: Exact-match tag lookup and lazy creation
    IntervieweeManager: Append-only interviewees with a batch cache
    StoryManager: Story creation and filtered listing
    UserManager: Account creation and lookup

Usage:
    from vidpod.database.managers import TagManager

    tag_mgr = TagManager(session, logger)
"""
from .base_manager import BaseManager
from .tag_manager import TagManager
from .interviewee_manager import IntervieweeBatchCache, IntervieweeManager
from .story_manager import StoryManager
from .user_manager import UserManager

__all__ = [
    "BaseManager",
    "TagManager",
    "IntervieweeBatchCache",
    "IntervieweeManager",
    "StoryManager",
    "UserManager",
]
