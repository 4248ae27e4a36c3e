"""
Database Package
----------------

Persistence layer for the Theatrical dataset: ORM models, the engine and
session manager, and the record repository the curation core is run
against.

Usage:
    from theatrical.database import TheatricalDB, RecordRepository
"""
from .manager import TheatricalDB
from .repository import RecordRepository, resolve_kind

__all__ = ["TheatricalDB", "RecordRepository", "resolve_kind"]
