#!/usr/bin/env python3
"""
repository.py
--------------------
Record repository: the persistence boundary of the curation core.

The curation core never performs I/O. It consumes whole snapshots of a
record kind and hands back the records it mutated. This module provides
those boundary operations on top of a SQLAlchemy session:

    - fetch_all(kind) -> records      full snapshot, no pagination
    - bulk_update(records) -> records persist already-mutated records
    - remove_range(records) -> count  delete records (orphan cleanup)

Usage:
    with db.session_scope():
        roles = db.records.fetch_all(Role)
        ...
        db.records.bulk_update(changed)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import time
from typing import Any, Callable, List, Optional, Sequence, Type, TypeVar, Union

# --- Third party imports ---
from sqlalchemy import select
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

# --- Local imports ---
from theatrical.core.exceptions import DatabaseError, ValidationError
from theatrical.core.logging_manager import TheatricalLogger, safe_logger
from .decorators import handle_db_errors, log_database_operation
from .models import RECORD_KINDS

T = TypeVar("T")


def resolve_kind(kind: Union[str, Type[T]]) -> Type[T]:
    """
    Resolve a record kind given by name or by model class.

    Args:
        kind: Kind name from RECORD_KINDS (e.g. "people") or a model class

    Returns:
        The model class

    Raises:
        ValidationError: If the name is not a known record kind
    """
    if isinstance(kind, str):
        try:
            return RECORD_KINDS[kind.lower()]  # type: ignore[return-value]
        except KeyError:
            known = ", ".join(RECORD_KINDS)
            raise ValidationError(
                f"Unknown record kind: '{kind}' (expected one of: {known})"
            ) from None
    return kind


class RecordRepository:
    """
    Kind-agnostic fetch/update/remove operations over one session.

    Attributes:
        session: SQLAlchemy session for database operations
        logger: Optional logger for operation tracking
    """

    def __init__(self, session: Session, logger: Optional[TheatricalLogger] = None):
        self.session = session
        self.logger = logger

    def _execute_with_retry(
        self,
        operation: Callable[[], Any],
        max_retries: int = 3,
        retry_delay: float = 0.1,
    ) -> Any:
        """
        Execute database operation with retry on lock.

        Args:
            operation: Callable that performs the operation
            max_retries: Maximum number of retry attempts
            retry_delay: Base delay between retries (exponential backoff)

        Returns:
            Result of the operation

        Raises:
            OperationalError: If the error is not a lock or retries are exhausted
        """
        for attempt in range(max_retries):
            try:
                return operation()
            except OperationalError as e:
                error_msg = str(e).lower()
                if (
                    "locked" in error_msg or "busy" in error_msg
                ) and attempt < max_retries - 1:
                    wait_time = retry_delay * (2**attempt)
                    safe_logger(self.logger).log_debug(
                        f"Database locked, retrying in {wait_time}s",
                        {"attempt": attempt + 1, "max_retries": max_retries},
                    )
                    time.sleep(wait_time)
                    continue
                raise

        raise DatabaseError("Retry loop completed without success")

    @handle_db_errors
    @log_database_operation("fetch_all")
    def fetch_all(self, kind: Union[str, Type[T]]) -> List[T]:
        """
        Fetch every record of a kind, ordered by primary key.

        Args:
            kind: Kind name or model class

        Returns:
            List of all records of that kind
        """
        model = resolve_kind(kind)
        stmt = select(model).order_by(model.id)  # type: ignore[attr-defined]
        records = self._execute_with_retry(
            lambda: list(self.session.scalars(stmt).all())
        )
        safe_logger(self.logger).log_debug(
            "Fetched records", {"kind": model.__name__, "count": len(records)}
        )
        return records

    @handle_db_errors
    @log_database_operation("bulk_update")
    def bulk_update(self, records: Sequence[T]) -> List[T]:
        """
        Persist already-mutated records.

        Args:
            records: Records whose field values were rewritten in memory

        Returns:
            The persisted records
        """
        if not records:
            return []

        def _update() -> List[T]:
            merged = [self.session.merge(record) for record in records]
            self.session.flush()
            return merged

        updated = self._execute_with_retry(_update)
        safe_logger(self.logger).log_operation(
            "records_updated",
            {"kind": type(records[0]).__name__, "count": len(updated)},
        )
        return updated

    @handle_db_errors
    @log_database_operation("remove_range")
    def remove_range(self, records: Sequence[Any]) -> int:
        """
        Delete records.

        Args:
            records: Records to delete

        Returns:
            Number of records deleted
        """
        if not records:
            return 0

        def _remove() -> int:
            for record in records:
                self.session.delete(self.session.merge(record))
            self.session.flush()
            return len(records)

        removed = self._execute_with_retry(_remove)
        safe_logger(self.logger).log_operation(
            "records_removed",
            {"kind": type(records[0]).__name__, "count": removed},
        )
        return removed
