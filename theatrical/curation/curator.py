#!/usr/bin/env python3
"""
curator.py
----------
Kind-agnostic sanitization of record batches.

Every record kind lists its free-text columns in ``CURATABLE_FIELDS``.
The EntityCurator applies the sanitizer to each listed field of each
record and reports only the records that actually changed, so callers
never re-persist untouched rows.

Usage:
    from theatrical.curation.curator import EntityCurator

    curator = EntityCurator()
    changed, count = curator.clean(venues)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, TypeVar

# --- Local imports ---
from theatrical.core.exceptions import MalformedRecordError
from theatrical.core.logging_manager import TheatricalLogger, safe_logger
from .sanitize import sanitize

T = TypeVar("T")

_MISSING = object()


def curatable_fields(record: Any) -> Tuple[str, ...]:
    """
    Get the curatable field names a record declares.

    Args:
        record: Record instance

    Returns:
        Tuple of field names

    Raises:
        MalformedRecordError: If the record kind declares no fields
    """
    fields = getattr(type(record), "CURATABLE_FIELDS", None)
    if not fields:
        raise MalformedRecordError(
            f"{type(record).__name__} declares no CURATABLE_FIELDS"
        )
    return tuple(fields)


def _record_label(record: Any) -> str:
    return f"{type(record).__name__} record {getattr(record, 'id', '?')}"


class EntityCurator:
    """
    Applies a sanitizer to the curatable fields of any record kind.

    Attributes:
        sanitizer: Text cleaning function
        logger: Optional logger for operation tracking
    """

    def __init__(
        self,
        sanitizer: Callable[[Optional[str]], str] = sanitize,
        logger: Optional[TheatricalLogger] = None,
    ) -> None:
        self.sanitizer = sanitizer
        self.logger = logger

    def pending_updates(self, record: Any) -> Dict[str, str]:
        """
        Compute the field values that sanitization would change.

        Null fields hold no text and are left alone.

        Args:
            record: Record instance

        Returns:
            Mapping of field name -> sanitized value, changed fields only

        Raises:
            MalformedRecordError: If a declared field is missing or not text
        """
        updates: Dict[str, str] = {}
        for name in curatable_fields(record):
            value = getattr(record, name, _MISSING)
            if value is _MISSING:
                raise MalformedRecordError(
                    f"{_record_label(record)} has no field '{name}'"
                )
            if value is None:
                continue
            if not isinstance(value, str):
                raise MalformedRecordError(
                    f"{_record_label(record)} field '{name}' holds "
                    f"{type(value).__name__}, expected text"
                )
            cleaned = self.sanitizer(value)
            if cleaned != value:
                updates[name] = cleaned
        return updates

    def clean(self, records: Sequence[T]) -> Tuple[List[T], int]:
        """
        Sanitize a batch of records in place.

        All records are checked before any is mutated, so a malformed
        record leaves the whole batch untouched.

        Args:
            records: Records of one kind

        Returns:
            Tuple of (changed records, changed count)

        Raises:
            MalformedRecordError: If any record breaks the field contract
        """
        planned = [(record, self.pending_updates(record)) for record in records]

        changed: List[T] = []
        for record, updates in planned:
            if not updates:
                continue
            for name, value in updates.items():
                setattr(record, name, value)
            changed.append(record)

        safe_logger(self.logger).log_debug(
            "Records sanitized",
            {"examined": len(records), "changed": len(changed)},
        )
        return changed, len(changed)


def clean_data(
    records: Sequence[T], logger: Optional[TheatricalLogger] = None
) -> Tuple[List[T], int]:
    """Sanitize a batch of records with the default sanitizer."""
    return EntityCurator(logger=logger).clean(records)
