"""
test_tag_manager.py
-------------------
Unit tests for TagManager.

Tags are matched by exact, case-sensitive name and created on demand
inside a savepoint, so duplicate names never produce duplicate rows.
"""
import pytest
from unittest.mock import patch

from sqlalchemy.exc import IntegrityError

from vidpod.core.exceptions import DatabaseError, RowPersistenceError
from vidpod.database.models import Tag


class TestTagManagerLookup:
    """Test exists(), get() and get_all()."""

    def test_exists_returns_false_when_not_found(self, tag_manager):
        assert tag_manager.exists("nonexistent") is False

    def test_exists_normalizes_input(self, tag_manager, db_session):
        """Surrounding whitespace is ignored."""
        db_session.add(Tag(tag_name="Climate"))
        db_session.flush()

        assert tag_manager.exists("  Climate  ") is True

    def test_lookup_is_case_sensitive(self, tag_manager, db_session):
        db_session.add(Tag(tag_name="Climate"))
        db_session.flush()

        assert tag_manager.get("climate") is None

    def test_get_all_ordered_by_name(self, tag_manager, db_session):
        db_session.add_all([Tag(tag_name="Water"), Tag(tag_name="Arts")])
        db_session.flush()

        assert [tag.tag_name for tag in tag_manager.get_all()] == ["Arts", "Water"]


class TestTagManagerGetOrCreate:
    """Test get_or_create()."""

    def test_creates_new_tag(self, tag_manager):
        tag = tag_manager.get_or_create("Climate")
        assert tag.id is not None
        assert tag.tag_name == "Climate"
        assert tag_manager.count() == 1

    def test_returns_existing_tag(self, tag_manager):
        first = tag_manager.get_or_create("Climate")
        second = tag_manager.get_or_create(" Climate ")
        assert first.id == second.id
        assert tag_manager.count() == 1

    def test_records_creator(self, tag_manager, user_manager):
        user = user_manager.create({"username": "ms.rivera", "email": "r@school.org"})
        tag = tag_manager.get_or_create("Climate", created_by=user.id)
        assert tag.created_by == user.id

    def test_empty_name_raises(self, tag_manager):
        with pytest.raises(ValueError):
            tag_manager.get_or_create("   ")

    def test_lost_race_rereads_existing_row(self, tag_manager, db_session):
        """An IntegrityError on insert rolls back the savepoint and re-reads."""
        existing = Tag(tag_name="Climate")
        db_session.add(existing)
        db_session.flush()

        query = db_session.query
        calls = {"n": 0}

        def stale_first_lookup(*args, **kwargs):
            # First lookup pretends the row is not there yet
            result = query(*args, **kwargs)
            calls["n"] += 1
            if calls["n"] == 1:
                return query(*args, **kwargs).filter(Tag.id == -1)
            return result

        with patch.object(db_session, "query", side_effect=stale_first_lookup):
            tag = tag_manager.get_or_create("Climate")

        assert tag.id == existing.id
        assert db_session.query(Tag).count() == 1

    def test_gives_up_after_repeated_conflicts(self, tag_manager, db_session):
        """Persistent conflicts surface as RowPersistenceError."""

        class _Conflict:
            def __enter__(self):
                return self

            def __exit__(self, *exc):
                raise IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))

        with patch.object(db_session, "begin_nested", return_value=_Conflict()), \
             patch.object(db_session, "add"):
            with pytest.raises(RowPersistenceError):
                tag_manager.get_or_create("Climate")

        assert issubclass(RowPersistenceError, DatabaseError)


class TestTagManagerResolveTags:
    """Test resolve_tags()."""

    def test_resolves_in_input_order(self, tag_manager):
        tags = tag_manager.resolve_tags(["Water", "Climate"])
        assert [tag.tag_name for tag in tags] == ["Water", "Climate"]

    def test_blank_and_repeated_names_skipped(self, tag_manager):
        tags = tag_manager.resolve_tags(["Climate", "", "  ", "Climate ", "Water"])
        assert [tag.tag_name for tag in tags] == ["Climate", "Water"]
        assert tag_manager.count() == 2

    def test_reuses_existing_rows(self, tag_manager):
        first = tag_manager.resolve_tags(["Climate"])
        second = tag_manager.resolve_tags(["Climate", "Water"])
        assert first[0].id == second[0].id
        assert tag_manager.count() == 2

    def test_empty_input(self, tag_manager):
        assert tag_manager.resolve_tags([]) == []
