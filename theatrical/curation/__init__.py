#!/usr/bin/env python3
"""
Curation Module
---------------
Curation of crowd-populated theatrical records.

Sanitizes free-text fields across every record kind and consolidates
near-duplicate role spellings into one canonical form per concept.

Key Components:
    - sanitize: Pure text cleaning (entities, stray symbols, whitespace)
    - curator: Kind-agnostic batch sanitization, changed-only output
    - similarity: Edit distance and disjoint-set primitives
    - roles: Role clustering, canonical dictionary, remapping
    - orphans: Contributions referencing deleted people/productions
    - session: Runs glued to external fetch/update callables
    - export: YAML report of clusters and corrections

Workflow:
    1. Fetch a full snapshot of a record kind
    2. Sanitize it (EntityCurator) or consolidate roles
       (RoleSimilarityResolver)
    3. Persist only the returned changed records

CLI Usage:
    theatrical-curate init
    theatrical-curate clean [--kind people] [--dry-run]
    theatrical-curate roles [--dry-run] [--export report.yaml]
    theatrical-curate orphans --missing people|productions [--dry-run]
    theatrical-curate all [--dry-run]
"""
# --- Annotations ---
from __future__ import annotations

# --- Public API ---
from .curator import EntityCurator, clean_data
from .models import (
    CorrectionDictionary,
    CurateAllResult,
    CurationResult,
    OrphanCleanupResult,
    SimilarityCluster,
)
from .roles import (
    RoleSimilarityResolver,
    corrected_role_dictionary,
    find_similar_roles,
    map_wrong_roles_to_correct,
)
from .sanitize import sanitize
from .session import CurationSession

__all__ = [
    # Models
    "CorrectionDictionary",
    "CurateAllResult",
    "CurationResult",
    "OrphanCleanupResult",
    "SimilarityCluster",
    # Core
    "CurationSession",
    "EntityCurator",
    "RoleSimilarityResolver",
    "sanitize",
    # Shortcuts
    "clean_data",
    "corrected_role_dictionary",
    "find_similar_roles",
    "map_wrong_roles_to_correct",
]
