#!/usr/bin/env python3
"""
interviewee_manager.py
--------------------
Manages Interviewee entities for story ideas.

Interviewee names are free text ("Local Mayor", "Principal") with no
uniqueness in the database. The only deduplication is within a single
import batch, through an IntervieweeBatchCache handed in by the caller.

Usage:
    cache = IntervieweeBatchCache()

    with db.session_scope():
        people = db.interviewees.resolve_interviewees(["Mayor"], cache=cache)
    cache.commit()   # or cache.discard() if the row was rolled back
"""
from typing import Dict, Iterable, List, Optional

from vidpod.core.validators import DataValidator
from vidpod.database.decorators import handle_db_errors, log_database_operation
from vidpod.database.models import Interviewee
from vidpod.utils.parsers import dedupe_preserving_order
from .base_manager import BaseManager


class IntervieweeBatchCache:
    """
    Exact-name to id map scoped to one import batch.

    Ids remembered while a row is in progress stay pending until
    ``commit()``; ``discard()`` forgets them when the row's transaction
    was rolled back and the rows no longer exist.
    """

    def __init__(self) -> None:
        self._committed: Dict[str, int] = {}
        self._pending: Dict[str, int] = {}

    def lookup(self, name: str) -> Optional[int]:
        if name in self._pending:
            return self._pending[name]
        return self._committed.get(name)

    def remember(self, name: str, interviewee_id: int) -> None:
        self._pending[name] = interviewee_id

    def commit(self) -> None:
        """Promote ids from the current row after its transaction committed."""
        self._committed.update(self._pending)
        self._pending.clear()

    def discard(self) -> None:
        """Forget ids from the current row after its transaction rolled back."""
        self._pending.clear()

    def __contains__(self, name: str) -> bool:
        return self.lookup(name) is not None

    def __len__(self) -> int:
        return len(self._committed) + len(self._pending)


class IntervieweeManager(BaseManager):
    """Manages Interviewee table operations."""

    @handle_db_errors
    def get_by_id(self, interviewee_id: int) -> Optional[Interviewee]:
        return self._get_by_id(Interviewee, interviewee_id)

    @handle_db_errors
    def find_by_name(self, name: str) -> List[Interviewee]:
        """All interviewees whose name is exactly ``name``."""
        normalized = DataValidator.normalize_string(name)
        if not normalized:
            return []
        return self._get_all(Interviewee, order_by="id", name=normalized)

    @handle_db_errors
    def count(self) -> int:
        return self._count(Interviewee)

    @handle_db_errors
    @log_database_operation("create_interviewee")
    def create(self, name: str) -> Interviewee:
        """
        Insert a new interviewee row.

        Raises:
            ValueError: If the name is empty after normalization
        """
        normalized = DataValidator.normalize_string(name)
        if not normalized:
            raise ValueError("Interviewee name cannot be empty")

        interviewee = Interviewee(name=normalized)
        self.session.add(interviewee)
        self.session.flush()
        return interviewee

    @handle_db_errors
    @log_database_operation("resolve_interviewees")
    def resolve_interviewees(
        self,
        names: Iterable[str],
        cache: Optional[IntervieweeBatchCache] = None,
    ) -> List[Interviewee]:
        """
        Resolve interviewee names for one imported row.

        Names seen earlier in the same batch reuse that row; any other name
        gets a fresh row. Blank and repeated names are skipped.

        Args:
            names: Interviewee names from one row
            cache: Batch cache shared by all rows of one import

        Returns:
            List of Interviewee objects in input order
        """
        cleaned = [DataValidator.normalize_string(name) for name in names]
        unique = dedupe_preserving_order(name for name in cleaned if name)

        resolved = []
        for name in unique:
            interviewee = None
            if cache is not None:
                cached_id = cache.lookup(name)
                if cached_id is not None:
                    interviewee = self.session.get(Interviewee, cached_id)

            if interviewee is None:
                interviewee = self.create(name)
                if cache is not None:
                    cache.remember(name, interviewee.id)

            resolved.append(interviewee)

        return resolved
