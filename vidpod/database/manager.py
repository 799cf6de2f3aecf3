#!/usr/bin/env python3
"""
manager.py
--------------------
Database manager for the VidPOD story idea system.

Provides the VidpodDB class for interacting with the database.
Handles:
    - Initialization of the database engine and sessionmaker
    - Transactional session scopes with logging
    - Per-session entity managers (stories, tags, interviewees, users)
    - Schema creation and migrations via Alembic

Key Features:
    - Transaction management with automatic rollback
    - SAVEPOINT support on SQLite (used by tag creation)
    - Foreign key enforcement on SQLite

Notes
==============
- One ``session_scope()`` is one transaction; the importer opens one per
  CSV row so a failed row never affects the others
- All datetime fields are UTC-aware
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import threading
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterator, Optional, Union

# --- Third party ---
from sqlalchemy import Engine, create_engine, event, inspect
from sqlalchemy.orm import Session, sessionmaker

from alembic.config import Config
from alembic import command
from alembic.runtime.migration import MigrationContext

# --- Local imports ---
from vidpod.core.exceptions import DatabaseError
from vidpod.core.logging_manager import VidpodLogger, safe_logger
from vidpod.core.paths import ALEMBIC_DIR, DATABASE_URL, ROOT
from .decorators import handle_db_errors, log_database_operation
from .managers import IntervieweeManager, StoryManager, TagManager, UserManager
from .models import Base


def _normalize_url(db_url: Union[str, Path]) -> str:
    """Accept either a SQLAlchemy URL or a filesystem path to a SQLite file."""
    value = str(db_url)
    if "://" in value:
        return value
    return f"sqlite:///{Path(value).expanduser().resolve()}"


def _enable_sqlite_savepoints(engine: Engine) -> None:
    """
    Let SQLAlchemy own SQLite transactions.

    pysqlite's implicit BEGIN handling breaks SAVEPOINT; disabling it and
    emitting BEGIN ourselves restores nested transactions. Foreign keys
    are switched on for every connection.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


# ----- Main Database Manager -----
class VidpodDB:
    """
    Main database manager for the VidPOD database.

    Attributes:
        - db_url (str): SQLAlchemy database URL.
        - alembic_dir (Path): Filesystem path to the Alembic scripts.
        - engine (Engine): SQLAlchemy engine instance.
        - SessionLocal (sessionmaker): SQLAlchemy session factory.
        - logger (VidpodLogger | None): Component logger.

    Usage:
        db = VidpodDB("sqlite:///data/vidpod.db", log_dir="logs")
        with db.session_scope() as session:
            tags = db.tags.resolve_tags(["Climate"])
    """

    # ---- Initialization ----
    def __init__(
        self,
        db_url: Union[str, Path] = DATABASE_URL,
        alembic_dir: Union[str, Path] = ALEMBIC_DIR,
        log_dir: Optional[Union[str, Path]] = None,
        logger: Optional[VidpodLogger] = None,
        auto_initialize: bool = True,
    ) -> None:
        """
        Initialize database engine and session factory.

        Args:
            db_url: SQLAlchemy URL, or a path to a SQLite file
            alembic_dir: Path to the Alembic scripts directory
            log_dir: Directory for log files (optional)
            logger: Ready-made logger; takes precedence over ``log_dir``
            auto_initialize: Create or migrate the schema on startup
        """
        self.db_url = _normalize_url(db_url)
        self.alembic_dir = Path(alembic_dir).expanduser().resolve()

        # --- Logging ---
        if logger is not None:
            self.logger: Optional[VidpodLogger] = logger
        elif log_dir:
            self.log_dir = Path(log_dir).expanduser().resolve()
            self.logger = VidpodLogger(self.log_dir, component_name="database")
        else:
            self.logger = None

        # Managers are bound per thread in session_scope
        self._local = threading.local()

        self._setup_engine()

        if auto_initialize:
            self.initialize_schema()

    def _setup_engine(self) -> None:
        """Initialize database engine and session factory."""
        log = safe_logger(self.logger)
        try:
            log.log_operation(
                "database_init_start",
                {"db_url": self.db_url, "alembic_dir": str(self.alembic_dir)},
            )

            if self.db_url.startswith("sqlite:///") and ":memory:" not in self.db_url:
                Path(self.db_url[len("sqlite:///"):]).parent.mkdir(
                    parents=True, exist_ok=True
                )

            self.engine: Engine = create_engine(
                self.db_url,
                echo=False,
                pool_pre_ping=True,
            )
            if self.engine.dialect.name == "sqlite":
                _enable_sqlite_savepoints(self.engine)

            self.SessionLocal: sessionmaker = sessionmaker(
                bind=self.engine,
                autoflush=True,
                expire_on_commit=False,
            )

            self.alembic_cfg: Config = self._setup_alembic()

            log.log_operation("database_init_complete", {"success": True})

        except Exception as e:
            log.log_error(e, {"operation": "database_init"})
            raise DatabaseError(f"Database initialization failed: {e}") from e

    # ---- Session Management ----
    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """
        Provide a transactional scope around operations with logging.

        Commits on success and rolls back on any exception, which is then
        re-raised. Entity managers are available as properties
        (``db.stories``, ``db.tags``, ...) for the duration of the scope.

        Usage:
            with db.session_scope() as session:
                user = db.users.create({"username": "ms.rivera", ...})
        """
        session = self.SessionLocal()
        session_id = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        log = safe_logger(self.logger)

        previous = getattr(self._local, "managers", None)
        self._local.managers = {
            "tags": TagManager(session, self.logger),
            "interviewees": IntervieweeManager(session, self.logger),
            "stories": StoryManager(session, self.logger),
            "users": UserManager(session, self.logger),
        }

        log.log_debug("session_start", {"session_id": session_id})

        try:
            yield session
            session.commit()
            log.log_debug("session_commit", {"session_id": session_id})

        except Exception as e:
            session.rollback()
            log.log_debug(
                "session_rollback",
                {"session_id": session_id, "error": type(e).__name__},
            )
            raise
        finally:
            self._local.managers = previous

            session.close()
            log.log_debug("session_close", {"session_id": session_id})

    # -------------------------------------------------------------------------
    # Entity Manager Properties
    # -------------------------------------------------------------------------

    def _bound_manager(self, name: str):
        managers = getattr(self._local, "managers", None)
        return managers.get(name) if managers else None

    @property
    def tags(self) -> TagManager:
        """
        Access TagManager for tag operations.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        manager = self._bound_manager("tags")
        if manager is None:
            raise DatabaseError(
                "TagManager requires active session. "
                "Use within session_scope: "
                "with db.session_scope() as session: db.tags.resolve_tags(...)"
            )
        return manager

    @property
    def interviewees(self) -> IntervieweeManager:
        """
        Access IntervieweeManager for interviewee operations.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        manager = self._bound_manager("interviewees")
        if manager is None:
            raise DatabaseError(
                "IntervieweeManager requires active session. Use within session_scope."
            )
        return manager

    @property
    def stories(self) -> StoryManager:
        """
        Access StoryManager for story operations.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        manager = self._bound_manager("stories")
        if manager is None:
            raise DatabaseError(
                "StoryManager requires active session. Use within session_scope."
            )
        return manager

    @property
    def users(self) -> UserManager:
        """
        Access UserManager for account operations.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        manager = self._bound_manager("users")
        if manager is None:
            raise DatabaseError(
                "UserManager requires active session. Use within session_scope."
            )
        return manager

    # ---- Alembic setup ----
    def _setup_alembic(self) -> Config:
        """Setup Alembic configuration."""
        ini_path = ROOT / "alembic.ini"
        alembic_cfg = Config(str(ini_path)) if ini_path.exists() else Config()
        alembic_cfg.set_main_option("script_location", str(self.alembic_dir))
        # ConfigParser interpolation treats % specially
        alembic_cfg.set_main_option("sqlalchemy.url", self.db_url.replace("%", "%%"))
        alembic_cfg.set_main_option(
            "file_template",
            "%%(year)d%%(month).2d%%(day).2d_%%(hour).2d%%(minute).2d_%%(slug)s",
        )
        return alembic_cfg

    @handle_db_errors
    @log_database_operation("initialize_schema")
    def initialize_schema(self) -> None:
        """
        Create tables if needed, otherwise run pending migrations.

        Actions:
            If the database has no tables,
                creates all tables from the ORM models
                stamps the Alembic revision to head
            If not,
                upgrades the schema to head
        """
        try:
            table_names = inspect(self.engine).get_table_names()
        except Exception as e:
            raise DatabaseError(f"Could not inspect database: {e}") from e

        if not table_names:
            Base.metadata.create_all(bind=self.engine)
            try:
                command.stamp(self.alembic_cfg, "head")
            except Exception as e:
                raise DatabaseError(f"Could not stamp new database: {e}") from e
            safe_logger(self.logger).log_operation(
                "fresh_database_created",
                {"tables_created": len(Base.metadata.tables)},
            )
        else:
            self.upgrade_database()
            safe_logger(self.logger).log_operation(
                "existing_database_migrated", {"table_count": len(table_names)}
            )

    @handle_db_errors
    @log_database_operation("upgrade_database")
    def upgrade_database(self, revision: str = "head") -> None:
        """
        Upgrade the database schema to the specified Alembic revision.

        Args:
            revision: Target revision (default 'head')
        """
        try:
            command.upgrade(self.alembic_cfg, revision)
        except Exception as e:
            raise DatabaseError(f"Database upgrade failed: {e}") from e

    def get_migration_history(self) -> Dict[str, Optional[str]]:
        """
        Get the current migration status of the database.

        Returns:
            Dictionary with 'current_revision' and 'status'
            ('up_to_date' or 'needs_migration'), or 'error'.
        """
        try:
            with self.engine.connect() as conn:
                context = MigrationContext.configure(conn)
                current_rev = context.get_current_revision()

            return {
                "current_revision": current_rev,
                "status": "up_to_date" if current_rev else "needs_migration",
            }
        except Exception as e:
            safe_logger(self.logger).log_error(e, {"operation": "get_migration_history"})
            return {"error": str(e)}

    # ---- Lifecycle ----
    def close(self) -> None:
        """Dispose of the engine's connection pool."""
        self.engine.dispose()

    def __enter__(self) -> "VidpodDB":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
