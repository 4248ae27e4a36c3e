#!/usr/bin/env python3
"""
cli.py
------
Click CLI commands for dataset curation.

Commands:
    - init: Create the database schema
    - clean: Sanitize free-text fields of one or more record kinds
    - all: Sanitize every record kind
    - roles: Consolidate near-duplicate role spellings
    - orphans: Remove contributions of deleted people or productions

Usage:
    theatrical-curate init
    theatrical-curate clean --kind people --kind venues [--dry-run]
    theatrical-curate all [--dry-run]
    theatrical-curate roles [--dry-run] [--export [report.yaml]]
    theatrical-curate orphans --missing people [--dry-run]

Dry runs compute and print every change, then roll the session back.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional, Tuple

# --- Third-party imports ---
import click

# --- Local imports ---
from theatrical.core.cli import setup_logger
from theatrical.core.logging_manager import handle_cli_error
from theatrical.core.paths import DB_PATH, LOG_DIR, REPORT_DIR
from theatrical.database.manager import TheatricalDB
from .configs import KIND_ORDER, ORPHAN_KEYS
from .models import CurationResult
from .session import CurationSession


def _get_db(ctx: click.Context) -> TheatricalDB:
    """Open the database configured on the command group."""
    if "db" not in ctx.obj:
        ctx.obj["db"] = TheatricalDB(ctx.obj["db_path"], logger=ctx.obj["logger"])
    return ctx.obj["db"]


def _echo_result(result: CurationResult) -> None:
    marker = "✓" if not result.has_changes else "✎"
    click.echo(
        f"  {marker} {result.kind}: {result.changed_count} changed "
        f"of {result.total_count}"
    )


# =============================================================================
# Command Group
# =============================================================================

@click.group()
@click.option(
    "--db-path",
    type=click.Path(dir_okay=False),
    default=str(DB_PATH),
    help="Path to the SQLite database",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Show tracebacks on errors")
@click.pass_context
def cli(ctx: click.Context, db_path: str, log_dir: str, verbose: bool) -> None:
    """Curation tools for the theatrical records database."""
    ctx.ensure_object(dict)
    ctx.obj["db_path"] = Path(db_path)
    ctx.obj["verbose"] = verbose
    if "logger" not in ctx.obj:
        ctx.obj["logger"] = setup_logger(Path(log_dir), "curation")


# =============================================================================
# Init Command
# =============================================================================

@cli.command("init")
@click.pass_context
def init_cmd(ctx: click.Context) -> None:
    """Create the database schema."""
    try:
        _get_db(ctx).initialize_schema()
        click.echo(f"✓ Schema ready at {ctx.obj['db_path']}")
    except Exception as e:
        handle_cli_error(ctx, e, "init")


# =============================================================================
# Clean Commands
# =============================================================================

def _run_clean(ctx: click.Context, kinds: Tuple[str, ...], dry_run: bool) -> None:
    db = _get_db(ctx)
    session = CurationSession(logger=ctx.obj["logger"])

    if dry_run:
        click.echo("[DRY RUN] No changes will be saved.")

    with db.session_scope() as db_session:
        outcome = session.run_all(
            db.records.fetch_all,
            db.records.bulk_update,
            kinds=kinds or None,
            dry_run=dry_run,
        )
        for result in outcome.results.values():
            _echo_result(result)
        if dry_run:
            db_session.rollback()

    click.echo("")
    click.echo(f"Total: {outcome.changed_count} changed of {outcome.total_count}")


@cli.command("clean")
@click.option(
    "--kind", "-k",
    "kinds",
    multiple=True,
    type=click.Choice(list(KIND_ORDER)),
    help="Record kind to sanitize (repeatable; default: all)",
)
@click.option("--dry-run", is_flag=True, help="Report changes without saving")
@click.pass_context
def clean_cmd(ctx: click.Context, kinds: Tuple[str, ...], dry_run: bool) -> None:
    """
    Sanitize free-text fields.

    Removes HTML entities, stray markup symbols and redundant whitespace.
    Only records that actually change are written back.
    """
    try:
        _run_clean(ctx, kinds, dry_run)
    except Exception as e:
        handle_cli_error(ctx, e, "clean", additional_context={"kinds": list(kinds)})


@cli.command("all")
@click.option("--dry-run", is_flag=True, help="Report changes without saving")
@click.pass_context
def all_cmd(ctx: click.Context, dry_run: bool) -> None:
    """Sanitize every record kind."""
    try:
        _run_clean(ctx, (), dry_run)
    except Exception as e:
        handle_cli_error(ctx, e, "clean_all")


# =============================================================================
# Roles Command
# =============================================================================

@cli.command("roles")
@click.option("--dry-run", is_flag=True, help="Report corrections without saving")
@click.option(
    "--export", "-e",
    "export_path",
    is_flag=False,
    flag_value=str(REPORT_DIR / "role_corrections.yaml"),
    type=click.Path(dir_okay=False),
    help="Write clusters and corrections to a YAML file "
    "(default file under data/curation when no path is given)",
)
@click.pass_context
def roles_cmd(ctx: click.Context, dry_run: bool, export_path: Optional[str]) -> None:
    """
    Consolidate near-duplicate role spellings.

    Groups role values by edit distance, picks the most used spelling of
    each group, and rewrites the other spellings to it.
    """
    from theatrical.curation.export import write_consolidation_report

    try:
        db = _get_db(ctx)
        session = CurationSession(logger=ctx.obj["logger"])

        if dry_run:
            click.echo("[DRY RUN] No changes will be saved.")

        with db.session_scope() as db_session:
            result = session.run_role_consolidation(
                db.records.fetch_all, db.records.bulk_update, dry_run=dry_run
            )

            if not result.has_changes:
                click.echo(result.message)
            else:
                click.echo(f"\nCORRECTIONS ({len(result.dictionary)}):")
                for variant, canonical in sorted(result.dictionary.items()):
                    click.echo(f"  {variant!r} → {canonical!r}")
                click.echo("")
                click.echo(result.summary())

            if export_path and result.clusters:
                written = write_consolidation_report(
                    Path(export_path), result.clusters, result.dictionary
                )
                click.echo(f"Report saved to: {written}")

            if dry_run:
                db_session.rollback()
    except Exception as e:
        handle_cli_error(ctx, e, "roles", additional_context={"dry_run": dry_run})


# =============================================================================
# Orphans Command
# =============================================================================

@cli.command("orphans")
@click.option(
    "--missing", "-m",
    required=True,
    type=click.Choice(list(ORPHAN_KEYS)),
    help="Parent kind whose deleted records left contributions behind",
)
@click.option("--dry-run", is_flag=True, help="Report orphans without deleting")
@click.pass_context
def orphans_cmd(ctx: click.Context, missing: str, dry_run: bool) -> None:
    """Remove contributions that reference deleted people or productions."""
    try:
        db = _get_db(ctx)
        session = CurationSession(logger=ctx.obj["logger"])

        if dry_run:
            click.echo("[DRY RUN] Nothing will be deleted.")

        with db.session_scope() as db_session:
            result = session.run_orphan_cleanup(
                missing, db.records.fetch_all, db.records.remove_range, dry_run=dry_run
            )
            click.echo(result.message)
            click.echo(result.summary())
            if dry_run:
                db_session.rollback()
    except Exception as e:
        handle_cli_error(ctx, e, "orphans", additional_context={"missing": missing})


if __name__ == "__main__":
    cli()
