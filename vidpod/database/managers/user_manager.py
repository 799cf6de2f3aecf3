#!/usr/bin/env python3
"""
user_manager.py
--------------------
Manages User accounts.

Accounts are provisioned by administrators (or the CLI); this manager
only creates and looks them up. Passwords and sessions belong to the
upstream auth service.
"""
from typing import Any, Dict, List, Optional

from vidpod.core.exceptions import ValidationError
from vidpod.core.validators import DataValidator
from vidpod.database.decorators import (
    handle_db_errors,
    log_database_operation,
    validate_metadata,
)
from vidpod.database.models import User, UserRole
from .base_manager import BaseManager


class UserManager(BaseManager):
    """Manages User table operations."""

    @handle_db_errors
    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._get_by_id(User, user_id)

    @handle_db_errors
    def get(self, username: str) -> Optional[User]:
        """Retrieve a user by exact username."""
        return self._get_by_field(User, "username", username)

    @handle_db_errors
    def get_all(self) -> List[User]:
        return self._get_all(User, order_by="username")

    @handle_db_errors
    @log_database_operation("create_user")
    @validate_metadata(["username", "email"])
    def create(self, metadata: Dict[str, Any]) -> User:
        """
        Create a new user.

        Args:
            metadata: Dictionary with keys:
                - username (required)
                - email (required)
                - role (optional, default "teacher")

        Returns:
            Flushed User

        Raises:
            ValidationError: If fields are missing or the role is unknown
            DatabaseError: If the username or email is already taken
        """
        username = DataValidator.normalize_string(metadata["username"])
        email = DataValidator.normalize_string(metadata["email"])
        if not username or not email:
            raise ValidationError("Username and email cannot be blank")

        role = metadata.get("role") or UserRole.TEACHER.value
        if isinstance(role, UserRole):
            role = role.value
        DataValidator.validate_choice(role, UserRole.choices(), "role")

        user = User(username=username, email=email.lower(), role=UserRole(role))
        self.session.add(user)
        self.session.flush()
        return user
