"""
test_interviewee_manager.py
---------------------------
Unit tests for IntervieweeManager and IntervieweeBatchCache.

Interviewee names are not unique: a name is reused only within one
import batch, through the batch cache.
"""
import pytest

from vidpod.database.managers import IntervieweeBatchCache


class TestIntervieweeBatchCache:
    """Test the pending/committed bookkeeping of the batch cache."""

    def test_pending_ids_visible_until_discarded(self):
        cache = IntervieweeBatchCache()
        cache.remember("Dr. Lee", 7)
        assert cache.lookup("Dr. Lee") == 7
        assert "Dr. Lee" in cache

        cache.discard()
        assert cache.lookup("Dr. Lee") is None
        assert len(cache) == 0

    def test_committed_ids_survive_discard(self):
        cache = IntervieweeBatchCache()
        cache.remember("Dr. Lee", 7)
        cache.commit()
        cache.remember("Mayor Ortiz", 8)
        cache.discard()

        assert cache.lookup("Dr. Lee") == 7
        assert "Mayor Ortiz" not in cache
        assert len(cache) == 1


class TestIntervieweeManagerCreate:
    """Test create() and find_by_name()."""

    def test_create_normalizes_name(self, interviewee_manager):
        person = interviewee_manager.create("  Dr.  Jane Lee ")
        assert person.id is not None
        assert person.name == "Dr. Jane Lee"

    def test_create_empty_name_raises(self, interviewee_manager):
        with pytest.raises(ValueError):
            interviewee_manager.create(" ")

    def test_duplicate_names_allowed(self, interviewee_manager):
        interviewee_manager.create("Principal")
        interviewee_manager.create("Principal")
        assert len(interviewee_manager.find_by_name("Principal")) == 2

    def test_find_by_blank_name(self, interviewee_manager):
        assert interviewee_manager.find_by_name("") == []


class TestIntervieweeManagerResolve:
    """Test resolve_interviewees()."""

    def test_without_cache_always_creates(self, interviewee_manager):
        interviewee_manager.resolve_interviewees(["Dr. Lee"])
        interviewee_manager.resolve_interviewees(["Dr. Lee"])
        assert interviewee_manager.count() == 2

    def test_cache_reuses_rows_within_batch(self, interviewee_manager):
        cache = IntervieweeBatchCache()
        first = interviewee_manager.resolve_interviewees(["Dr. Lee", "Mayor"], cache=cache)
        second = interviewee_manager.resolve_interviewees(["Dr. Lee"], cache=cache)

        assert second[0].id == first[0].id
        assert interviewee_manager.count() == 2

    def test_cache_does_not_match_rows_from_other_batches(self, interviewee_manager):
        interviewee_manager.resolve_interviewees(["Dr. Lee"], cache=IntervieweeBatchCache())
        interviewee_manager.resolve_interviewees(["Dr. Lee"], cache=IntervieweeBatchCache())
        assert interviewee_manager.count() == 2

    def test_blank_and_repeated_names_skipped(self, interviewee_manager):
        people = interviewee_manager.resolve_interviewees(["Dr. Lee", " ", "Dr. Lee "])
        assert [person.name for person in people] == ["Dr. Lee"]
