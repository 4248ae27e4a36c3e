"""
Database Models Package
------------------------

SQLAlchemy ORM models for the Theatrical database.

This package provides a modular organization of database models:
- base: Base class and provenance mixin
- entities: Person, Organizer, Venue
- creative: Production, Role, Contribution

Usage:
    from theatrical.database.models import Person, Role, RECORD_KINDS
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Dict, Type

# Base classes
from .base import Base, SourceMixin

# Entity models
from .entities import Organizer, Person, Venue

# Creative works
from .creative import Contribution, Production, Role

# Kind name -> model, in the order a full curation run visits them
RECORD_KINDS: Dict[str, Type[SourceMixin]] = {
    "contributions": Contribution,
    "organizers": Organizer,
    "people": Person,
    "productions": Production,
    "roles": Role,
    "venues": Venue,
}

__all__ = [
    # Base
    "Base",
    "SourceMixin",
    # Entities
    "Organizer",
    "Person",
    "Venue",
    # Creative
    "Contribution",
    "Production",
    "Role",
    # Registry
    "RECORD_KINDS",
]
