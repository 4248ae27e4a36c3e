#!/usr/bin/env python3
"""
roles.py
--------
Consolidation of near-duplicate role spellings.

Role values are typed by many contributors, so one concept accumulates
variants ("Actor", "actor ", "Actror"). The resolver works in three
explicit steps, each feeding the next:

    1. find_clusters / find_similar
       Group distinct role strings whose edit distance is within a
       length-scaled threshold. Grouping is transitive: a chain of small
       typos forms one cluster. Only clusters of two or more distinct
       strings are kept.
    2. build_dictionary
       Pick one canonical string per cluster (most used, then shortest,
       then lexicographically smallest) and map every other variant to it.
    3. apply_corrections
       Rewrite role values found in the dictionary and return only the
       records that changed.

Clustering must see the full set of role records: the dictionary built
from a subset would differ.

Usage:
    from theatrical.curation.roles import RoleSimilarityResolver

    resolver = RoleSimilarityResolver()
    clusters = resolver.find_clusters(roles)
    dictionary = resolver.build_dictionary(clusters)
    changed = resolver.apply_corrections(resolver.find_similar(roles), dictionary)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from collections import Counter
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, TypeVar

# --- Local imports ---
from theatrical.core.exceptions import CurationError
from theatrical.core.logging_manager import TheatricalLogger, safe_logger
from .configs import CHARS_PER_EDIT, MIN_FUZZY_LENGTH
from .models import (
    CorrectionDictionary,
    RoleValue,
    SimilarityCluster,
    freeze_dictionary,
)
from .similarity import DisjointSet, edit_threshold, grouping_key, levenshtein

R = TypeVar("R", bound=RoleValue)


def select_canonical(variants: Mapping[str, int]) -> str:
    """
    Choose the canonical spelling among a cluster's variants.

    Preference order: highest record count, then shortest, then
    lexicographically smallest.

    Args:
        variants: Original string -> number of records holding it

    Returns:
        The canonical string, always one of the variants

    Raises:
        CurationError: If there are no variants
    """
    if not variants:
        raise CurationError("Cannot select a canonical form for an empty cluster")
    return min(variants, key=lambda s: (-variants[s], len(s), s))


class RoleSimilarityResolver:
    """
    Clusters near-duplicate role strings and maps them to canonical forms.

    Stateless between calls: clusters and dictionaries are returned to
    the caller and passed back in explicitly.

    Attributes:
        chars_per_edit: Characters per tolerated edit
        min_fuzzy_length: Minimum string length for fuzzy matching
        logger: Optional logger for operation tracking
    """

    def __init__(
        self,
        chars_per_edit: int = CHARS_PER_EDIT,
        min_fuzzy_length: int = MIN_FUZZY_LENGTH,
        logger: Optional[TheatricalLogger] = None,
    ) -> None:
        if chars_per_edit < 1:
            raise ValueError(f"chars_per_edit must be positive, got {chars_per_edit}")
        self.chars_per_edit = chars_per_edit
        self.min_fuzzy_length = min_fuzzy_length
        self.logger = logger

    def threshold(self, length: int) -> int:
        """Edits tolerated when the shorter string has ``length`` characters."""
        return edit_threshold(length, self.chars_per_edit, self.min_fuzzy_length)

    def is_similar(self, a: str, b: str) -> bool:
        """
        Check whether two role strings fall within the threshold.

        Case and whitespace differences alone always count as similar.
        """
        key_a, key_b = grouping_key(a), grouping_key(b)
        if not key_a or not key_b:
            return False
        return key_a == key_b or self._keys_match(key_a, key_b)

    def _keys_match(self, key_a: str, key_b: str) -> bool:
        limit = self.threshold(min(len(key_a), len(key_b)))
        if limit == 0 or abs(len(key_a) - len(key_b)) > limit:
            return False
        return levenshtein(key_a, key_b, max_distance=limit) <= limit

    # -------------------------------------------------------------------------
    # Contract A: clustering
    # -------------------------------------------------------------------------

    @staticmethod
    def count_usage(roles: Iterable[R]) -> Counter:
        """Count records per original role string, ignoring blank values."""
        usage: Counter = Counter()
        for role in roles:
            value = role.value
            if isinstance(value, str) and value.strip():
                usage[value] += 1
        return usage

    def find_clusters(self, roles: Sequence[R]) -> List[SimilarityCluster]:
        """
        Cluster the distinct role strings of a full role snapshot.

        Distinct comparison keys are visited in sorted order and merged
        through a disjoint set, so the result does not depend on the
        order of ``roles``.

        Args:
            roles: Every role record

        Returns:
            Clusters with two or more distinct strings, sorted by their
            smallest comparison key
        """
        usage = self.count_usage(roles)

        originals_by_key: Dict[str, List[str]] = {}
        for value in usage:
            originals_by_key.setdefault(grouping_key(value), []).append(value)

        keys = sorted(originals_by_key)
        disjoint = DisjointSet(len(keys))

        for i, key_a in enumerate(keys):
            for j in range(i + 1, len(keys)):
                if self._keys_match(key_a, keys[j]):
                    disjoint.union(i, j)

        clusters: List[SimilarityCluster] = []
        for members in disjoint.groups().values():
            variants = {
                original: usage[original]
                for index in members
                for original in sorted(originals_by_key[keys[index]])
            }
            if len(variants) >= 2:
                clusters.append(SimilarityCluster(variants=variants))

        safe_logger(self.logger).log_debug(
            "Role clusters found",
            {
                "roles": len(roles),
                "distinct_strings": len(usage),
                "clusters": len(clusters),
            },
        )
        return clusters

    def find_similar(self, roles: Sequence[R]) -> List[R]:
        """
        Get the role records whose string belongs to a multi-variant cluster.

        Args:
            roles: Every role record

        Returns:
            Matching records, in input order
        """
        return self.records_in(roles, self.find_clusters(roles))

    @staticmethod
    def records_in(roles: Sequence[R], clusters: Sequence[SimilarityCluster]) -> List[R]:
        """Filter records whose value belongs to any of the clusters."""
        members = {value for cluster in clusters for value in cluster.variants}
        return [role for role in roles if role.value in members]

    # -------------------------------------------------------------------------
    # Contract B: dictionary
    # -------------------------------------------------------------------------

    def build_dictionary(
        self, clusters: Iterable[SimilarityCluster]
    ) -> CorrectionDictionary:
        """
        Build the variant -> canonical mapping for a set of clusters.

        Canonical strings never appear as keys.

        Args:
            clusters: Clusters from find_clusters

        Returns:
            Read-only correction dictionary

        Raises:
            CurationError: If clusters overlap inconsistently, i.e. a
                string would map to two canonicals or a canonical would
                itself be corrected
        """
        corrections: Dict[str, str] = {}
        canonicals = set()

        for cluster in clusters:
            canonical = select_canonical(cluster.variants)
            canonicals.add(canonical)
            for variant in sorted(cluster.variants):
                if variant == canonical:
                    continue
                existing = corrections.get(variant)
                if existing is not None and existing != canonical:
                    raise CurationError(
                        f"Role '{variant}' maps to both '{existing}' and '{canonical}'"
                    )
                corrections[variant] = canonical

        conflicting = canonicals.intersection(corrections)
        if conflicting:
            raise CurationError(
                f"Canonical roles also listed as corrections: {sorted(conflicting)}"
            )

        safe_logger(self.logger).log_debug(
            "Correction dictionary built", {"corrections": len(corrections)}
        )
        return freeze_dictionary(corrections)

    # -------------------------------------------------------------------------
    # Contract C: remapping
    # -------------------------------------------------------------------------

    def apply_corrections(
        self, roles: Sequence[R], dictionary: CorrectionDictionary
    ) -> List[R]:
        """
        Rewrite role values to their canonical form in place.

        Args:
            roles: Role records to correct
            dictionary: Variant -> canonical mapping

        Returns:
            Only the records whose value was replaced
        """
        changed: List[R] = []
        for role in roles:
            current = role.value
            canonical = dictionary.get(current)
            if canonical is None or canonical == current:
                continue
            role.value = canonical
            changed.append(role)

        safe_logger(self.logger).log_debug(
            "Role corrections applied",
            {"examined": len(roles), "changed": len(changed)},
        )
        return changed


# -----------------------------------------------------------------------------
# Module-level shortcuts with the default thresholds
# -----------------------------------------------------------------------------

_default_resolver = RoleSimilarityResolver()


def find_similar_roles(roles: Sequence[R]) -> List[R]:
    """Role records belonging to a multi-variant cluster."""
    return _default_resolver.find_similar(roles)


def corrected_role_dictionary(roles: Sequence[R]) -> CorrectionDictionary:
    """Variant -> canonical mapping for a full role snapshot."""
    return _default_resolver.build_dictionary(_default_resolver.find_clusters(roles))


def map_wrong_roles_to_correct(
    roles: Sequence[R], dictionary: CorrectionDictionary
) -> List[R]:
    """Apply a correction dictionary; return only changed records."""
    return _default_resolver.apply_corrections(roles, dictionary)
