#!/usr/bin/env python3
"""
orphans.py
----------
Detection of contributions whose parent record no longer exists.

Contributions reference people and productions by id. Deleting a
person or a production leaves its contributions dangling; these are
found here and removed by the curation session.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, List, Sequence, TypeVar

# --- Local imports ---
from theatrical.core.exceptions import MalformedRecordError, ValidationError
from .configs import ORPHAN_KEYS

C = TypeVar("C")


def orphan_key(missing: str) -> str:
    """
    Get the contribution column that references a parent kind.

    Raises:
        ValidationError: If the parent kind cannot be checked
    """
    try:
        return ORPHAN_KEYS[missing]
    except KeyError:
        raise ValidationError(
            f"Cannot check contributions against '{missing}' "
            f"(expected one of: {', '.join(ORPHAN_KEYS)})"
        ) from None


def find_orphan_contributions(
    contributions: Sequence[C], parents: Sequence[Any], key: str
) -> List[C]:
    """
    Find contributions that reference no existing parent.

    Args:
        contributions: Every contribution record
        parents: Every record of the parent kind
        key: Contribution attribute holding the parent id

    Returns:
        Dangling contributions, in input order

    Raises:
        MalformedRecordError: If a contribution lacks the key attribute
    """
    parent_ids = {parent.id for parent in parents}
    orphans: List[C] = []
    for contribution in contributions:
        if not hasattr(contribution, key):
            raise MalformedRecordError(
                f"{type(contribution).__name__} record "
                f"{getattr(contribution, 'id', '?')} has no field '{key}'"
            )
        if getattr(contribution, key) not in parent_ids:
            orphans.append(contribution)
    return orphans
