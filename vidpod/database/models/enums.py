"""
Enumeration Types
------------------

Enum classes for the VidPOD database models.

Enums:
    - UserRole: Account roles (amitrace_admin, teacher, student)
    - ApprovalStatus: Story moderation state (draft, pending, approved, rejected)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from enum import Enum
from typing import List


class UserRole(str, Enum):
    """
    Enumeration of account roles.
    - AMITRACE_ADMIN: Platform administrator, imports are auto-approved
    - TEACHER: Class owner, may import story ideas
    - STUDENT: Class member, may not bulk import
    """

    AMITRACE_ADMIN = "amitrace_admin"
    TEACHER = "teacher"
    STUDENT = "student"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all available role choices."""
        return [role.value for role in cls]

    @property
    def can_import(self) -> bool:
        """Whether this role may bulk import story ideas."""
        return self in (UserRole.AMITRACE_ADMIN, UserRole.TEACHER)

    @property
    def is_admin(self) -> bool:
        return self is UserRole.AMITRACE_ADMIN


class ApprovalStatus(str, Enum):
    """
    Enumeration of story moderation states.
    - DRAFT: Saved but not submitted
    - PENDING: Submitted, waiting for an admin
    - APPROVED: Visible to everyone
    - REJECTED: Declined by an admin
    """

    DRAFT = "draft"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
