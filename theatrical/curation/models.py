#!/usr/bin/env python3
"""
models.py
---------
Data models for the curation module.

Protocols:
    - Curatable: Record kind exposing CURATABLE_FIELDS
    - RoleValue: Record with an identity and a mutable role string

Result models:
    - SimilarityCluster: Near-duplicate role strings with usage counts
    - CurationResult: Outcome of one curation pass over one record kind
    - CurateAllResult: Outcomes of a pass over every record kind
    - OrphanCleanupResult: Outcome of dangling-contribution removal

Type aliases:
    - CorrectionDictionary: Read-only variant -> canonical mapping
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Protocol, Tuple

CorrectionDictionary = Mapping[str, str]

EMPTY_DICTIONARY: CorrectionDictionary = MappingProxyType({})


class Curatable(Protocol):
    """Record kind that names its sanitizable text fields."""

    CURATABLE_FIELDS: ClassVar[Tuple[str, ...]]


class RoleValue(Protocol):
    """Role record: a storage identity plus a mutable value."""

    id: Any
    value: str


# =============================================================================
# Similarity Models
# =============================================================================

@dataclass(frozen=True)
class SimilarityCluster:
    """
    Group of role strings judged to be spellings of one concept.

    Exists only while a resolution pass runs.

    Attributes:
        variants: Original role string -> number of records holding it
    """
    variants: Mapping[str, int]

    @property
    def size(self) -> int:
        """Number of distinct original strings in the cluster."""
        return len(self.variants)

    @property
    def record_count(self) -> int:
        """Number of records holding any string of the cluster."""
        return sum(self.variants.values())

    def __contains__(self, value: object) -> bool:
        return value in self.variants


# =============================================================================
# Curation Results
# =============================================================================

@dataclass
class CurationResult:
    """
    Outcome of one curation pass over one record kind.

    Only the mutated subset of records is carried, never the full set.

    Attributes:
        kind: Record kind name
        total_count: Records examined
        changed_count: Records whose values changed
        changed: The changed records
        message: Human-readable note for the caller
        dictionary: Corrections applied (role consolidation only)
        clusters: Clusters found (role consolidation only)
        dry_run: True if changes were computed but not persisted
    """
    kind: str
    total_count: int = 0
    changed_count: int = 0
    changed: List[Any] = field(default_factory=list)
    message: str = ""
    dictionary: CorrectionDictionary = field(default_factory=lambda: EMPTY_DICTIONARY)
    clusters: List[SimilarityCluster] = field(default_factory=list)
    dry_run: bool = False

    @property
    def has_changes(self) -> bool:
        """Check if any record changed."""
        return self.changed_count > 0

    def summary(self) -> str:
        """
        Get human-readable summary.

        Returns:
            Formatted summary string
        """
        parts = [
            f"Kind: {self.kind}",
            f"Examined: {self.total_count}",
            f"Changed: {self.changed_count}",
        ]
        if self.clusters:
            parts.append(f"Clusters: {len(self.clusters)}")
        if self.dictionary:
            parts.append(f"Corrections: {len(self.dictionary)}")
        if self.dry_run:
            parts.append("Dry run")
        return " | ".join(parts)


@dataclass
class CurateAllResult:
    """
    Outcomes of a sanitization pass over every record kind.

    Attributes:
        results: Kind name -> CurationResult, in visiting order
        dry_run: True if changes were computed but not persisted
    """
    results: Dict[str, CurationResult] = field(default_factory=dict)
    dry_run: bool = False

    @property
    def total_count(self) -> int:
        """Records examined across all kinds."""
        return sum(r.total_count for r in self.results.values())

    @property
    def changed_count(self) -> int:
        """Records changed across all kinds."""
        return sum(r.changed_count for r in self.results.values())

    def counts(self) -> Dict[str, int]:
        """Changed count per kind."""
        return {kind: r.changed_count for kind, r in self.results.items()}

    def summary(self) -> str:
        """Get human-readable summary."""
        parts = [f"{kind}: {count}" for kind, count in self.counts().items()]
        parts.append(f"Total changed: {self.changed_count}/{self.total_count}")
        return " | ".join(parts)


@dataclass
class OrphanCleanupResult:
    """
    Outcome of removing contributions whose parent record is gone.

    Attributes:
        missing: Parent kind that was checked ("people" or "productions")
        total_count: Contributions examined
        removed_count: Contributions found dangling
        removed: The dangling contributions
        message: Human-readable note for the caller
        dry_run: True if nothing was actually removed
    """
    missing: str
    total_count: int = 0
    removed_count: int = 0
    removed: List[Any] = field(default_factory=list)
    message: str = ""
    dry_run: bool = False

    def summary(self) -> str:
        """Get human-readable summary."""
        summary = (
            f"Missing: {self.missing} | Examined: {self.total_count} | "
            f"Removed: {self.removed_count}"
        )
        if self.dry_run:
            summary += " | Dry run"
        return summary


def freeze_dictionary(corrections: Optional[Dict[str, str]]) -> CorrectionDictionary:
    """Wrap a corrections dict in a read-only view."""
    if not corrections:
        return EMPTY_DICTIONARY
    return MappingProxyType(dict(corrections))
