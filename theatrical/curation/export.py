#!/usr/bin/env python3
"""
export.py
---------
YAML export of role consolidation outcomes for review.

Output Format:
    corrections:
      Actror: Actor
      actor: Actor
    clusters:
      - canonical: Actor
        variants:
          Actor: 3
          Actror: 1
          actor: 1
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Any, Dict, Sequence

# --- Third-party imports ---
import yaml

# --- Local imports ---
from .models import CorrectionDictionary, SimilarityCluster
from .roles import select_canonical


def consolidation_report(
    clusters: Sequence[SimilarityCluster], dictionary: CorrectionDictionary
) -> Dict[str, Any]:
    """
    Build a plain-data report of clusters and corrections.

    Args:
        clusters: Clusters found by the resolver
        dictionary: Correction dictionary built from them

    Returns:
        Dict ready for YAML serialisation
    """
    return {
        "corrections": dict(sorted(dictionary.items())),
        "clusters": [
            {
                "canonical": select_canonical(cluster.variants),
                "variants": dict(cluster.variants),
            }
            for cluster in clusters
        ],
    }


def write_consolidation_report(
    path: Path,
    clusters: Sequence[SimilarityCluster],
    dictionary: CorrectionDictionary,
) -> Path:
    """
    Write the consolidation report to a YAML file.

    Args:
        path: Destination file (parent directories are created)
        clusters: Clusters found by the resolver
        dictionary: Correction dictionary built from them

    Returns:
        The path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(
            consolidation_report(clusters, dictionary),
            f,
            allow_unicode=True,
            sort_keys=False,
        )
    return path
