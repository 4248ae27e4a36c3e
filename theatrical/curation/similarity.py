#!/usr/bin/env python3
"""
similarity.py
-------------
String distance and disjoint-set primitives for role clustering.

Functions:
    - levenshtein: Edit distance with optional early cut-off
    - grouping_key: Case- and whitespace-insensitive comparison key
    - edit_threshold: Edits tolerated for a string of a given length

Classes:
    - DisjointSet: Union-find over integer indices
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Dict, List, Optional

# --- Local imports ---
from .configs import CHARS_PER_EDIT, MIN_FUZZY_LENGTH


def levenshtein(a: str, b: str, max_distance: Optional[int] = None) -> int:
    """
    Compute the Levenshtein distance between two strings.

    Counts the single-character insertions, deletions and substitutions
    needed to turn ``a`` into ``b``.

    Args:
        a: First string
        b: Second string
        max_distance: Stop early once the distance is known to exceed
            this bound; the return value is then ``max_distance + 1``

    Returns:
        Edit distance (capped at max_distance + 1 when a bound is given)

    Examples:
        >>> levenshtein("actor", "actror")
        1
        >>> levenshtein("kitten", "sitting")
        3
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        distance = len(a)
        return distance if max_distance is None else min(distance, max_distance + 1)
    if max_distance is not None and len(a) - len(b) > max_distance:
        return max_distance + 1

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (ca != cb),
                )
            )
        if max_distance is not None and min(current) > max_distance:
            return max_distance + 1
        previous = current

    distance = previous[-1]
    if max_distance is not None and distance > max_distance:
        return max_distance + 1
    return distance


def grouping_key(value: str) -> str:
    """Comparison key: whitespace-normalised and casefolded."""
    return " ".join(value.split()).casefold()


def edit_threshold(
    length: int,
    chars_per_edit: int = CHARS_PER_EDIT,
    min_fuzzy_length: int = MIN_FUZZY_LENGTH,
) -> int:
    """
    Number of edits tolerated between two strings.

    Scales with the length of the shorter string: one edit per
    ``chars_per_edit`` characters, at least one. Strings shorter than
    ``min_fuzzy_length`` tolerate none.

    Args:
        length: Length of the shorter of the two strings
        chars_per_edit: Characters per tolerated edit
        min_fuzzy_length: Minimum length for any fuzzy match

    Returns:
        Maximum edit distance at which two strings still match
    """
    if length < min_fuzzy_length:
        return 0
    return max(1, length // chars_per_edit)


class DisjointSet:
    """
    Union-find over indices ``0..size-1``.

    The smaller index always becomes the root, so the resulting
    partition and its representatives do not depend on union order.
    """

    def __init__(self, size: int) -> None:
        self.parent = list(range(size))

    def find(self, index: int) -> int:
        """Find the representative of an index (path halving)."""
        parent = self.parent
        while parent[index] != index:
            parent[index] = parent[parent[index]]
            index = parent[index]
        return index

    def union(self, a: int, b: int) -> None:
        """Merge the sets containing ``a`` and ``b``."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return
        if root_b < root_a:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a

    def groups(self) -> Dict[int, List[int]]:
        """Representative -> sorted member indices."""
        result: Dict[int, List[int]] = {}
        for index in range(len(self.parent)):
            result.setdefault(self.find(index), []).append(index)
        return result
