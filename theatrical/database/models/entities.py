"""
Entity Models
--------------

Models for the people and organisations behind productions.

Models:
    - Person: Performers and crew members
    - Organizer: Companies and bodies organising productions
    - Venue: Theatres and other performance spaces
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Optional

# --- Third party imports ---
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

# --- Local imports ---
from .base import Base, SourceMixin


class Person(Base, SourceMixin):
    """
    Represents a performer or crew member.

    Attributes:
        id: Primary key
        fullname: Full name as entered by contributors
        description: Short descriptive text
        bio: Biography
        hair_color, eye_color, height, weight: Casting details (free text)
    """

    __tablename__ = "persons"

    CURATABLE_FIELDS = (
        "fullname",
        "description",
        "bio",
        "hair_color",
        "eye_color",
        "height",
        "weight",
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    fullname: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    hair_color: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    eye_color: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    height: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    weight: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    def __repr__(self) -> str:
        return f"<Person(id={self.id}, fullname='{self.fullname}')>"


class Organizer(Base, SourceMixin):
    """
    Represents an organisation that produces shows.

    Attributes:
        id: Primary key
        name: Organisation name
        address, town, postcode: Postal address parts
        phone, email: Contact details
        doy: Tax office
        afm: Tax registration number
    """

    __tablename__ = "organizers"

    CURATABLE_FIELDS = (
        "name",
        "address",
        "town",
        "postcode",
        "phone",
        "email",
        "doy",
        "afm",
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    address: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    town: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    postcode: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    doy: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    afm: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    def __repr__(self) -> str:
        return f"<Organizer(id={self.id}, name='{self.name}')>"


class Venue(Base, SourceMixin):
    """
    Represents a performance space.

    Attributes:
        id: Primary key
        title: Venue name
        address: Street address
    """

    __tablename__ = "venues"

    CURATABLE_FIELDS = ("title", "address")

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    address: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Venue(id={self.id}, title='{self.title}')>"
