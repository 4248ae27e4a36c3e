"""
Base Classes and Mixins
------------------------

Foundational ORM classes for the Theatrical database.

Classes:
    - Base: Declarative base for all SQLAlchemy models
    - SourceMixin: Provenance columns shared by every crowd-populated record
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import datetime, timezone
from typing import Optional

# --- Third party ---
from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# --- Base ORM class ---
class Base(DeclarativeBase):
    """
    Base class for all ORM models.

    Serves as the declarative base for SQLAlchemy models and provides
    access to the metadata object for table creation.
    """

    pass


# --- Provenance ---
class SourceMixin:
    """
    Mixin providing provenance columns for crowd-populated records.

    Every record kind remembers which contributing system created it and
    when. Curation never touches these columns.

    Attributes:
        system_id: Identifier of the contributing system
        timestamp: Creation time of the record (UTC)
        CURATABLE_FIELDS: Names of the free-text columns the curator may
            rewrite. Each record kind overrides this.
    """

    CURATABLE_FIELDS = ()

    system_id: Mapped[Optional[int]] = mapped_column(
        Integer, nullable=True, doc="Contributing system"
    )
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
