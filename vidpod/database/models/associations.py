"""
Association Tables
-------------------

Many-to-many relationship tables for the VidPOD database.

This module contains the pure association tables that connect story
ideas with tags and with interviewees.
"""
# --- Third party imports ---
from sqlalchemy import Column, ForeignKey, Integer, Table

# --- Local imports ---
from .base import Base

story_tags = Table(
    "story_tags",
    Base.metadata,
    Column(
        "story_id",
        Integer,
        ForeignKey("story_ideas.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)

story_interviewees = Table(
    "story_interviewees",
    Base.metadata,
    Column(
        "story_id",
        Integer,
        ForeignKey("story_ideas.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "interviewee_id",
        Integer,
        ForeignKey("interviewees.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)
