"""
HTTP interface for VidPOD.

Modules:
    - app: FastAPI application factory and routes
    - auth: Identity dependency fed by the auth proxy headers
    - serializers: JSON shapes for stories and tags
"""
from .app import create_app
from .auth import get_current_uploader

__all__ = ["create_app", "get_current_uploader"]
