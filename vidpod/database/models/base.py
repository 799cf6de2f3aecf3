"""
Base Classes
------------

Foundational ORM classes for the VidPOD database.

Classes:
    - Base: Declarative base for all SQLAlchemy models
    - TimestampMixin: created_at column shared by lookup tables
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import datetime, timezone

# --- Third party ---
from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Timezone-aware current time used for audit columns."""
    return datetime.now(timezone.utc)


# --- Base ORM class ---
class Base(DeclarativeBase):
    """
    Base class for all ORM models.

    Serves as the declarative base for SQLAlchemy models and provides
    access to the metadata object for table creation and migrations.
    """

    pass


class TimestampMixin:
    """Mixin adding a UTC ``created_at`` column."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, doc="Row creation time (UTC)"
    )
