#!/usr/bin/env python3
"""
base_manager.py
--------------------
Base manager providing common CRUD operations and utilities.
All entity managers should inherit from this class.

Key Features:
    - Savepoint-guarded get-or-create for unique lookup tables
    - Generic get/list/count helpers

Usage:
    class TagManager(BaseManager):
        def get(self, tag_name: str) -> Optional[Tag]:
            return self._get_by_field(Tag, "tag_name", tag_name)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from abc import ABC
from typing import Any, Dict, List, Optional, Protocol, Type, TypeVar

# --- Third party imports ---
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Mapped, Session

# --- Local imports ---
from vidpod.core.exceptions import RowPersistenceError
from vidpod.core.logging_manager import VidpodLogger, safe_logger
from vidpod.core.validators import DataValidator


class HasId(Protocol):
    """Protocol for objects that have an id attribute."""

    id: Mapped[int]


T = TypeVar("T", bound=HasId)


class BaseManager(ABC):
    """
    Abstract base manager providing common CRUD operations and utilities.

    Attributes:
        session: SQLAlchemy session for database operations
        logger: Optional logger for operation tracking
    """

    #: Attempts made by ``_get_or_create`` before giving up on a contended row
    MAX_CREATE_ATTEMPTS = 3

    def __init__(self, session: Session, logger: Optional[VidpodLogger] = None):
        """
        Initialize the base manager.

        Args:
            session: SQLAlchemy session
            logger: Optional logger for operation tracking
        """
        self.session = session
        self.logger = logger

    # -------------------------------------------------------------------------
    # Core Helper Methods
    # -------------------------------------------------------------------------

    def _get_or_create(
        self,
        model_class: Type[T],
        lookup_fields: Dict[str, Any],
        extra_fields: Optional[Dict[str, Any]] = None,
    ) -> T:
        """
        Get an existing row by its unique fields or create it.

        The insert runs inside a SAVEPOINT. If a concurrent writer wins the
        race, the unique constraint raises IntegrityError, only the
        savepoint is rolled back (the caller's transaction survives) and
        the lookup is repeated.

        Args:
            model_class: ORM model class to query or create
            lookup_fields: Dictionary of field_name: value to filter/create
            extra_fields: Additional fields for new object creation only

        Returns:
            ORM instance of the model class

        Raises:
            RowPersistenceError: If the row can be neither found nor created
                after MAX_CREATE_ATTEMPTS attempts
        """
        fields = lookup_fields.copy()
        if extra_fields:
            fields.update(extra_fields)

        for attempt in range(self.MAX_CREATE_ATTEMPTS):
            obj = self.session.query(model_class).filter_by(**lookup_fields).first()
            if obj is not None:
                return obj

            try:
                with self.session.begin_nested():
                    obj = model_class(**fields)
                    self.session.add(obj)
            except IntegrityError:
                safe_logger(self.logger).log_debug(
                    f"{model_class.__name__} insert lost a race, re-reading",
                    {"lookup": lookup_fields, "attempt": attempt + 1},
                )
                continue

            return obj

        raise RowPersistenceError(
            f"Failed to create {model_class.__name__} {lookup_fields} "
            f"after {self.MAX_CREATE_ATTEMPTS} attempts"
        )

    # -------------------------------------------------------------------------
    # Generic CRUD Helpers
    # -------------------------------------------------------------------------

    def _get_by_id(self, model_class: Type[T], entity_id: int) -> Optional[T]:
        """Get entity by primary key, or None."""
        return self.session.get(model_class, entity_id)

    def _get_by_field(
        self,
        model_class: Type[T],
        field_name: str,
        value: Any,
        normalize: bool = True,
    ) -> Optional[T]:
        """
        Get entity by a specific field value.

        Args:
            model_class: ORM model class
            field_name: Field name to filter by
            value: Value to look up
            normalize: Whether to normalize string values first

        Returns:
            Entity if found, None otherwise
        """
        if value is None:
            return None

        if normalize and isinstance(value, str):
            value = DataValidator.normalize_string(value)
            if not value:
                return None

        return self.session.query(model_class).filter_by(**{field_name: value}).first()

    def _get_all(
        self,
        model_class: Type[T],
        order_by: Optional[str] = None,
        **filters: Any,
    ) -> List[T]:
        """
        Get all entities of a type with optional filtering and ordering.

        Args:
            model_class: ORM model class
            order_by: Column name to order by (optional)
            **filters: Additional filter conditions

        Returns:
            List of entities
        """
        query = self.session.query(model_class)

        if filters:
            query = query.filter_by(**filters)

        if order_by and hasattr(model_class, order_by):
            attr = getattr(model_class, order_by)
            # Only order by mapped columns, not Python properties
            if hasattr(attr, "__clause_element__"):
                query = query.order_by(attr)

        return query.all()

    def _count(self, model_class: Type[T], **filters: Any) -> int:
        """Count entities with optional filtering."""
        query = self.session.query(model_class)
        if filters:
            query = query.filter_by(**filters)
        return query.count()
