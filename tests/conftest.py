"""
conftest.py
-----------
Shared pytest fixtures for VidPOD tests.

Provides fixtures for:
- Temporary directories and SQLite databases
- Sessions and entity managers bound to them
- Accounts for each role
- Sample CSV uploads
"""
import pytest
from datetime import date
from pathlib import Path
from tempfile import TemporaryDirectory

#: Fixed reference day so year-less and two-digit-year dates are stable
REFERENCE_DAY = date(2026, 10, 19)


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def reference_day():
    """Fixed 'today' used by date parsing in tests."""
    return REFERENCE_DAY


# ----- Test Database Fixtures -----

@pytest.fixture
def test_db_path(tmp_dir):
    """Create temporary test database path."""
    return tmp_dir / "test.db"


@pytest.fixture
def test_db(test_db_path):
    """
    Create test database instance with schema.

    Returns a VidpodDB instance on a fresh SQLite file, created through
    the normal startup path (create_all + Alembic stamp).
    """
    from vidpod.database.manager import VidpodDB

    db = VidpodDB(db_url=test_db_path)

    yield db

    db.close()


@pytest.fixture
def db_session(test_db):
    """
    Create a database session for tests.

    Entity managers on ``test_db`` are bound to this session; the work
    is rolled back after the test.
    """
    with test_db.session_scope() as session:
        yield session
        session.rollback()


@pytest.fixture
def tag_manager(db_session):
    """Create TagManager instance for testing."""
    from vidpod.database.managers.tag_manager import TagManager
    return TagManager(db_session)


@pytest.fixture
def interviewee_manager(db_session):
    """Create IntervieweeManager instance for testing."""
    from vidpod.database.managers.interviewee_manager import IntervieweeManager
    return IntervieweeManager(db_session)


@pytest.fixture
def story_manager(db_session):
    """Create StoryManager instance for testing."""
    from vidpod.database.managers.story_manager import StoryManager
    return StoryManager(db_session)


@pytest.fixture
def user_manager(db_session):
    """Create UserManager instance for testing."""
    from vidpod.database.managers.user_manager import UserManager
    return UserManager(db_session)


# ----- Account Fixtures -----

def _create_user(db, username, role):
    with db.session_scope():
        user = db.users.create(
            {"username": username, "email": f"{username}@school.org", "role": role}
        )
        return user.id


@pytest.fixture
def teacher_id(test_db):
    """Id of a committed teacher account."""
    return _create_user(test_db, "ms.rivera", "teacher")


@pytest.fixture
def admin_id(test_db):
    """Id of a committed administrator account."""
    return _create_user(test_db, "amitrace", "amitrace_admin")


@pytest.fixture
def student_id(test_db):
    """Id of a committed student account."""
    return _create_user(test_db, "sam.student", "student")


@pytest.fixture
def teacher(teacher_id):
    """UploaderIdentity for the teacher account."""
    from vidpod.importer import UploaderIdentity
    return UploaderIdentity(user_id=teacher_id, role="teacher")


@pytest.fixture
def admin(admin_id):
    """UploaderIdentity for the administrator account."""
    from vidpod.importer import UploaderIdentity
    return UploaderIdentity(user_id=admin_id, role="amitrace_admin")


@pytest.fixture
def student(student_id):
    """UploaderIdentity for the student account."""
    from vidpod.importer import UploaderIdentity
    return UploaderIdentity(user_id=student_id, role="student")


# ----- Sample CSV Fixtures -----

@pytest.fixture
def sample_csv():
    """Three-row upload using canonical headers."""
    return (
        "idea_title,idea_description,question_1,coverage_start_date,"
        "coverage_end_date,tags,interviewees\n"
        "Local Environmental Impact,Pollution and wildlife,What sources?,"
        "2024-01-15,2024-03-15,\"environment, Climate\",\"Dr. Lee, Mayor Ortiz\"\n"
        "School Lunch Program,Nutrition changes,What changed?,"
        "1/15/24,,\"Climate, nutrition\",Principal Diaz\n"
        "Homecoming Week,,,15-Oct,,,\n"
    ).encode("utf-8")
