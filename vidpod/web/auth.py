#!/usr/bin/env python3
"""
auth.py
-------------------
Request identity for the HTTP layer.

VidPOD sits behind an authenticating proxy that forwards the signed-in
user as two headers:

    X-User-Id:   numeric id of the ``users`` row
    X-User-Role: amitrace_admin | teacher | student

Deployments with a different auth scheme override
``get_current_uploader`` through ``app.dependency_overrides``.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Optional

# --- Third party imports ---
from fastapi import Header, HTTPException, status

# --- Local imports ---
from vidpod.core.validators import DataValidator
from vidpod.database.models import UserRole
from vidpod.importer.models import UploaderIdentity


def get_current_uploader(
    x_user_id: Optional[str] = Header(None),
    x_user_role: Optional[str] = Header(None),
) -> UploaderIdentity:
    """
    Build the uploader identity from the proxy headers.

    Raises:
        HTTPException: 401 when either header is missing or malformed
    """
    if not x_user_id or not x_user_role:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    user_id = DataValidator.normalize_int(x_user_id)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid user id: {x_user_id}",
        )

    role = x_user_role.strip().lower()
    if role not in UserRole.choices():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid user role: {x_user_role}",
        )

    return UploaderIdentity(user_id=user_id, role=UserRole(role))
