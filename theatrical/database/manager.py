#!/usr/bin/env python3
"""
manager.py
--------------------
Database manager for the Theatrical dataset.

Provides the TheatricalDB class for interacting with the SQLite database.
Handles:
    - Initialization of the database engine and sessionmaker
    - Schema creation
    - Transactional session scopes with logging
    - Access to the record repository inside a session scope

Usage:
    db = TheatricalDB("~/path/to/theatrical.db", log_dir="logs")
    with db.session_scope():
        venues = db.records.fetch_all("venues")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional, Union

# --- Third party ---
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

# --- Local imports ---
from theatrical.core.exceptions import DatabaseError
from theatrical.core.logging_manager import TheatricalLogger, safe_logger
from .models import Base
from .repository import RecordRepository


class TheatricalDB:
    """
    Main database manager for the Theatrical dataset.

    Attributes:
        db_path: Filesystem path to the SQLite database file
        engine: SQLAlchemy engine instance
        SessionLocal: SQLAlchemy session factory
        logger: Optional logger
    """

    def __init__(
        self,
        db_path: Union[str, Path],
        log_dir: Optional[Union[str, Path]] = None,
        logger: Optional[TheatricalLogger] = None,
    ) -> None:
        """
        Initialize database engine and session factory.

        Args:
            db_path: Path to the SQLite file
            log_dir: Directory for log files (optional)
            logger: Existing logger to reuse instead of creating one
        """
        self.db_path = Path(db_path).expanduser().resolve()

        if logger is not None:
            self.logger: Optional[TheatricalLogger] = logger
        elif log_dir:
            self.logger = TheatricalLogger(
                Path(log_dir).expanduser().resolve() / "system",
                component_name="database",
            )
        else:
            self.logger = None

        self._records: Optional[RecordRepository] = None
        self._setup_engine()

    def _setup_engine(self) -> None:
        """Initialize database engine and session factory."""
        logger = safe_logger(self.logger)
        try:
            logger.log_operation("database_init_start", {"db_path": str(self.db_path)})

            self.db_path.parent.mkdir(parents=True, exist_ok=True)

            self.engine: Engine = create_engine(
                f"sqlite:///{self.db_path}",
                echo=False,
                pool_pre_ping=True,
            )
            self.SessionLocal: sessionmaker = sessionmaker(
                bind=self.engine,
                autoflush=True,
                expire_on_commit=False,
            )

            logger.log_operation("database_init_complete", {"success": True})
        except Exception as e:
            logger.log_error(e, {"operation": "database_init"})
            raise DatabaseError(f"Database initialization failed: {e}") from e

    def initialize_schema(self) -> None:
        """Create all tables that do not exist yet."""
        Base.metadata.create_all(self.engine)
        safe_logger(self.logger).log_operation(
            "schema_initialized", {"tables": sorted(Base.metadata.tables)}
        )

    # ---- Session Management ----
    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """
        Provide a transactional scope around operations with logging.

        The record repository is available via ``db.records`` for the
        lifetime of the scope. Commits on success, rolls back and
        re-raises on any error.
        """
        session = self.SessionLocal()
        session_id = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        logger = safe_logger(self.logger)

        self._records = RecordRepository(session, self.logger)
        logger.log_debug("session_start", {"session_id": session_id})

        try:
            yield session
            session.commit()
            logger.log_debug("session_commit", {"session_id": session_id})
        except Exception as e:
            session.rollback()
            logger.log_error(
                e, {"operation": "session_rollback", "session_id": session_id}
            )
            raise
        finally:
            self._records = None
            session.close()
            logger.log_debug("session_close", {"session_id": session_id})

    @property
    def records(self) -> RecordRepository:
        """
        Access the RecordRepository of the active session.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        if self._records is None:
            raise DatabaseError(
                "RecordRepository requires active session. "
                "Use within session_scope: "
                "with db.session_scope(): db.records.fetch_all('roles')"
            )
        return self._records
