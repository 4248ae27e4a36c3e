#!/usr/bin/env python3
"""
session.py
----------
Curation runs glued to external fetch/update collaborators.

The session owns no I/O. It receives callables from its caller:

    fetch(kind) -> list of records      complete snapshot of one kind
    update(records) -> list of records  persist already-mutated records
    remove(records) -> count            delete records (orphan cleanup)

and composes the entity curator and the role similarity resolver over
the fetched snapshot. Results carry only the mutated subset.

Usage:
    from theatrical.curation.session import CurationSession

    with db.session_scope():
        session = CurationSession(logger=logger)
        result = session.run_role_consolidation(
            db.records.fetch_all, db.records.bulk_update
        )
        print(result.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, Callable, Iterable, List, Optional

# --- Local imports ---
from theatrical.core.exceptions import ValidationError
from theatrical.core.logging_manager import TheatricalLogger, safe_logger
from .configs import CONTRIBUTION_KIND, KIND_ORDER, ROLE_KIND
from .curator import EntityCurator
from .models import CurateAllResult, CurationResult, OrphanCleanupResult
from .orphans import find_orphan_contributions, orphan_key
from .roles import RoleSimilarityResolver

FetchFn = Callable[[str], List[Any]]
UpdateFn = Callable[[List[Any]], List[Any]]
RemoveFn = Callable[[List[Any]], Any]

NO_SIMILAR_ROLES = (
    "The list of similar roles is empty. Thus there is no need for role correction."
)


def _distinct_by_id(records: Iterable[Any]) -> List[Any]:
    """Order records by id and keep the first record of each id."""
    seen = set()
    distinct = []
    for record in sorted(records, key=lambda r: r.id):
        if record.id in seen:
            continue
        seen.add(record.id)
        distinct.append(record)
    return distinct


class CurationSession:
    """
    Orchestrates curation passes over fetched record snapshots.

    Attributes:
        curator: Entity curator used for generic sanitization
        resolver: Role similarity resolver used for consolidation
        logger: Optional logger for operation tracking
    """

    def __init__(
        self,
        curator: Optional[EntityCurator] = None,
        resolver: Optional[RoleSimilarityResolver] = None,
        logger: Optional[TheatricalLogger] = None,
    ) -> None:
        self.logger = logger
        self.curator = curator or EntityCurator(logger=logger)
        self.resolver = resolver or RoleSimilarityResolver(logger=logger)

    def run_generic(
        self,
        kind: str,
        fetch: FetchFn,
        update: UpdateFn,
        dry_run: bool = False,
    ) -> CurationResult:
        """
        Sanitize every record of one kind and persist the changed ones.

        Args:
            kind: Record kind name
            fetch: Snapshot provider
            update: Persistence callable, skipped when nothing changed
            dry_run: Compute changes without calling update

        Returns:
            CurationResult with the changed records
        """
        records = fetch(kind)
        changed, changed_count = self.curator.clean(records)

        if changed and not dry_run:
            changed = list(update(changed))

        result = CurationResult(
            kind=kind,
            total_count=len(records),
            changed_count=changed_count,
            changed=changed,
            message=f"Corrected {changed_count} of {len(records)} {kind}",
            dry_run=dry_run,
        )
        safe_logger(self.logger).log_operation(
            "curate_generic",
            {
                "kind": kind,
                "examined": result.total_count,
                "changed": result.changed_count,
                "dry_run": dry_run,
            },
        )
        return result

    def run_all(
        self,
        fetch: FetchFn,
        update: UpdateFn,
        kinds: Optional[Iterable[str]] = None,
        dry_run: bool = False,
    ) -> CurateAllResult:
        """
        Sanitize every record kind in turn.

        Kinds are processed one after another; a failing update stops
        the run and propagates. Kinds already updated stay updated.

        Args:
            fetch: Snapshot provider
            update: Persistence callable
            kinds: Kind names to process (default: all, in KIND_ORDER)
            dry_run: Compute changes without calling update

        Returns:
            CurateAllResult with one CurationResult per kind
        """
        selected = list(kinds) if kinds is not None else list(KIND_ORDER)
        unknown = [kind for kind in selected if kind not in KIND_ORDER]
        if unknown:
            raise ValidationError(f"Unknown record kinds: {', '.join(unknown)}")

        outcome = CurateAllResult(dry_run=dry_run)
        for kind in KIND_ORDER:
            if kind in selected:
                outcome.results[kind] = self.run_generic(kind, fetch, update, dry_run)

        safe_logger(self.logger).log_operation("curate_all", outcome.counts())
        return outcome

    def run_role_consolidation(
        self,
        fetch: FetchFn,
        update: UpdateFn,
        dry_run: bool = False,
    ) -> CurationResult:
        """
        Consolidate near-duplicate role spellings.

        Clusters the full role snapshot, builds the correction dictionary
        from those clusters, and rewrites the affected roles.

        Args:
            fetch: Snapshot provider
            update: Persistence callable, skipped when nothing changed
            dry_run: Compute corrections without calling update

        Returns:
            CurationResult whose changed records are ordered and distinct
            by id, with the clusters and dictionary that produced them
        """
        logger = safe_logger(self.logger)
        roles = fetch(ROLE_KIND)

        clusters = self.resolver.find_clusters(roles)
        similar = self.resolver.records_in(roles, clusters)
        if not similar:
            logger.log_info(NO_SIMILAR_ROLES, {"roles": len(roles)})
            return CurationResult(
                kind=ROLE_KIND,
                total_count=len(roles),
                message=NO_SIMILAR_ROLES,
                dry_run=dry_run,
            )

        dictionary = self.resolver.build_dictionary(clusters)
        corrected = self.resolver.apply_corrections(similar, dictionary)

        if corrected and not dry_run:
            corrected = list(update(corrected))
        corrected = _distinct_by_id(corrected)

        result = CurationResult(
            kind=ROLE_KIND,
            total_count=len(roles),
            changed_count=len(corrected),
            changed=corrected,
            message=f"Consolidated {len(corrected)} of {len(roles)} roles",
            dictionary=dictionary,
            clusters=clusters,
            dry_run=dry_run,
        )
        logger.log_operation(
            "consolidate_roles",
            {
                "examined": result.total_count,
                "clusters": len(clusters),
                "corrections": len(dictionary),
                "changed": result.changed_count,
                "dry_run": dry_run,
            },
        )
        return result

    def run_orphan_cleanup(
        self,
        missing: str,
        fetch: FetchFn,
        remove: RemoveFn,
        dry_run: bool = False,
    ) -> OrphanCleanupResult:
        """
        Remove contributions whose person or production no longer exists.

        Args:
            missing: Parent kind to check against ("people" or "productions")
            fetch: Snapshot provider
            remove: Deletion callable, skipped when nothing is dangling
            dry_run: Find orphans without calling remove

        Returns:
            OrphanCleanupResult with the dangling contributions
        """
        key = orphan_key(missing)
        contributions = fetch(CONTRIBUTION_KIND)
        parents = fetch(missing)

        orphans = find_orphan_contributions(contributions, parents, key)
        result = OrphanCleanupResult(
            missing=missing,
            total_count=len(contributions),
            removed_count=len(orphans),
            removed=orphans,
            dry_run=dry_run,
        )

        if not orphans:
            result.message = f"Not found any contributions for deleted {missing}!"
        else:
            if not dry_run:
                remove(orphans)
            result.message = f"Removed contributions: {len(orphans)}"

        safe_logger(self.logger).log_operation(
            "orphan_cleanup",
            {
                "missing": missing,
                "examined": result.total_count,
                "removed": result.removed_count,
                "dry_run": dry_run,
            },
        )
        return result
