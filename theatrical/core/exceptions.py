#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Theatrical project.

Exception Hierarchy:
    Exception (built-in)
    ├── DatabaseError - Persistence failures (fetch, update, remove)
    ├── CurationError - Base for curation core failures
    │   └── MalformedRecordError - Record kind/field integration defects
    └── ValidationError - Invalid caller input

Usage:
    from theatrical.core.exceptions import DatabaseError, MalformedRecordError

    try:
        changed, count = curator.clean(records)
    except MalformedRecordError as e:
        logger.log_error(e, {"kind": "venues"})
        raise
"""


class DatabaseError(Exception):
    """
    Base exception for database-related errors.

    Raised when fetching, updating or removing records fails due to
    connection issues, locks, integrity violations or other storage
    problems. The curation core never raises this itself; it surfaces
    from the repository the session was given.

    Examples:
        >>> raise DatabaseError("Bulk update of 12 Role records failed")
    """

    pass


class CurationError(Exception):
    """
    Base exception for curation core failures.

    Catch this to handle any failure originating in the sanitizer,
    the entity curator or the role similarity resolver.
    """

    pass


class MalformedRecordError(CurationError):
    """
    Exception for records that do not honour the curatable-field contract.

    Raised when:
    - A record kind declares no CURATABLE_FIELDS
    - A record lacks an attribute named in its CURATABLE_FIELDS
    - A curatable field holds a non-text value

    These are integration bugs, not runtime conditions, so they are never
    skipped silently.

    Examples:
        >>> raise MalformedRecordError("Venue record 4 has no field 'address'")
    """

    pass


class ValidationError(Exception):
    """
    Exception for invalid caller input.

    Raised for unknown record kind names or inconsistent option
    combinations passed to the session or CLI.

    Examples:
        >>> raise ValidationError("Unknown record kind: 'theatres'")
    """

    pass
