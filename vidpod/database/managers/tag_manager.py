#!/usr/bin/env python3
"""
tag_manager.py
--------------------
Manages Tag entities for story ideas.

Tags are exact, case-sensitive labels: "Climate" and "climate" are two
tags. A tag is created the first time an import references it and is
never deleted by the import path.

Key Features:
    - Exact-match lookup
    - Get-or-create guarded by the unique constraint and a savepoint
    - Bulk resolution of a row's tag list, in order

Usage:
    tag_mgr = TagManager(session, logger)

    # Resolve a row's tags, creating missing ones
    tags = tag_mgr.resolve_tags(["Climate", "Water"], created_by=user.id)

    # List all tags
    all_tags = tag_mgr.get_all()
"""
from typing import Iterable, List, Optional

from vidpod.core.validators import DataValidator
from vidpod.database.decorators import handle_db_errors, log_database_operation
from vidpod.database.models import Tag
from vidpod.utils.parsers import dedupe_preserving_order
from .base_manager import BaseManager


class TagManager(BaseManager):
    """
    Manages Tag table operations.

    Every lookup is by exact ``tag_name``. Creation happens inside a
    savepoint so that losing a race against another importer only
    rolls back the insert, not the caller's row transaction.
    """

    # -------------------------------------------------------------------------
    # Core CRUD Operations
    # -------------------------------------------------------------------------

    @handle_db_errors
    def exists(self, tag_name: str) -> bool:
        """Check if a tag with exactly this name exists."""
        return self.get(tag_name) is not None

    @handle_db_errors
    @log_database_operation("get_tag")
    def get(self, tag_name: str) -> Optional[Tag]:
        """
        Retrieve a tag by name.

        Args:
            tag_name: The tag text (surrounding whitespace is ignored)

        Returns:
            Tag object if found, None otherwise
        """
        return self._get_by_field(Tag, "tag_name", tag_name)

    @handle_db_errors
    def get_by_id(self, tag_id: int) -> Optional[Tag]:
        return self._get_by_id(Tag, tag_id)

    @handle_db_errors
    @log_database_operation("get_all_tags")
    def get_all(self) -> List[Tag]:
        """Retrieve all tags ordered by name."""
        return self._get_all(Tag, order_by="tag_name")

    @handle_db_errors
    def count(self) -> int:
        return self._count(Tag)

    @handle_db_errors
    @log_database_operation("get_or_create_tag")
    def get_or_create(self, tag_name: str, created_by: Optional[int] = None) -> Tag:
        """
        Return the tag named ``tag_name``, creating it if missing.

        Args:
            tag_name: Tag text; normalized but case preserved
            created_by: Optional id of the user creating it

        Returns:
            Persisted Tag

        Raises:
            ValueError: If the name is empty after normalization
            RowPersistenceError: If the tag can be neither read nor created
        """
        normalized = DataValidator.normalize_string(tag_name)
        if not normalized:
            raise ValueError("Tag name cannot be empty")

        return self._get_or_create(
            Tag,
            {"tag_name": normalized},
            {"created_by": created_by},
        )

    # -------------------------------------------------------------------------
    # Import Resolution
    # -------------------------------------------------------------------------

    @handle_db_errors
    @log_database_operation("resolve_tags")
    def resolve_tags(
        self, names: Iterable[str], created_by: Optional[int] = None
    ) -> List[Tag]:
        """
        Resolve tag names to persisted tags, in input order.

        Blank names are skipped and repeated names resolve once.

        Args:
            names: Tag names from one imported row
            created_by: Id of the uploader, recorded on new tags

        Returns:
            List of Tag objects, one per unique non-blank name

        Raises:
            RowPersistenceError: If a tag cannot be created after retries
        """
        cleaned = [DataValidator.normalize_string(name) for name in names]
        unique = dedupe_preserving_order(name for name in cleaned if name)
        return [self.get_or_create(name, created_by=created_by) for name in unique]
