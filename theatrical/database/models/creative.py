"""
Creative Works Models
---------------------

Models for productions and the credits attached to them.

Models:
    - Production: A staged show
    - Role: A credit category ("Actor", "Director", ...)
    - Contribution: A person credited in a production under a role

Contributions reference people, productions and roles by plain integer
ids. Parents can be deleted independently, which leaves dangling
contributions behind until orphan cleanup removes them.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Optional

# --- Third party imports ---
from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

# --- Local imports ---
from .base import Base, SourceMixin


class Production(Base, SourceMixin):
    """
    Represents a staged production.

    Attributes:
        id: Primary key
        organizer_id: Organizer responsible for the production
        title: Production title
        description: Synopsis or programme notes
        producer: Producer credit line
        media_url: Link to promotional media
        duration: Running time as entered (free text)
    """

    __tablename__ = "productions"

    CURATABLE_FIELDS = (
        "title",
        "description",
        "producer",
        "media_url",
        "duration",
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    organizer_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    producer: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    media_url: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    duration: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    def __repr__(self) -> str:
        return f"<Production(id={self.id}, title='{self.title}')>"


class Role(Base, SourceMixin):
    """
    Represents a credit category.

    Role values are typed by many contributors, so the same concept shows
    up under several spellings. Consolidation rewrites ``value`` in place;
    ``id`` never changes.

    Attributes:
        id: Primary key
        value: Role name as entered
    """

    __tablename__ = "roles"

    CURATABLE_FIELDS = ("value",)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    value: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, value='{self.value}')>"


class Contribution(Base, SourceMixin):
    """
    Represents a person credited in a production.

    Attributes:
        id: Primary key
        person_id: Credited person
        production_id: Production credited in
        role_id: Credit category
        sub_role: Free-text refinement of the role (e.g. character name)
    """

    __tablename__ = "contributions"

    CURATABLE_FIELDS = ("sub_role",)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    person_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    production_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    role_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    sub_role: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return (
            f"<Contribution(id={self.id}, person_id={self.person_id}, "
            f"production_id={self.production_id})>"
        )
