"""
Integration tests for the curation CLI.

Runs every command end-to-end against a temporary SQLite database.
"""
import pytest
import yaml
from click.testing import CliRunner

from theatrical.curation.cli import cli
from theatrical.database.manager import TheatricalDB
from theatrical.database.models import Contribution, Person, Production, Role, Venue


@pytest.fixture
def runner():
    """Click CLI runner."""
    return CliRunner()


@pytest.fixture
def db_path(tmp_dir):
    """Path of the database the CLI works on."""
    return tmp_dir / "theatrical.db"


@pytest.fixture
def invoke(runner, db_path, tmp_dir):
    """Invoke the CLI against the temporary database and log directory."""

    def _invoke(*args):
        return runner.invoke(
            cli,
            ["--db-path", str(db_path), "--log-dir", str(tmp_dir / "logs"), *args],
        )

    return _invoke


@pytest.fixture
def seeded_db(invoke, db_path):
    """Database with dirty records, role variants and orphan contributions."""
    result = invoke("init")
    assert result.exit_code == 0, result.output

    db = TheatricalDB(db_path)
    with db.session_scope() as session:
        session.add_all(
            [
                Person(id=1, fullname="Anna  Synodinou", bio="Actress&nbsp;"),
                Person(id=2, fullname="Dimitris Horn"),
                Production(id=1, title="Antigone"),
                Venue(id=1, title="Herodion", address="<br>Dionysiou Areopagitou"),
                Role(id=1, value="Actor"),
                Role(id=2, value="Actor"),
                Role(id=3, value="Actor"),
                Role(id=4, value="actor"),
                Role(id=5, value="Actror"),
                Role(id=6, value="Director"),
                Contribution(id=1, person_id=1, production_id=1, role_id=1),
                Contribution(id=2, person_id=2, production_id=1, role_id=6),
                Contribution(id=3, person_id=7, production_id=1, role_id=1),
                Contribution(id=4, person_id=1, production_id=9, role_id=1),
            ]
        )
    yield db
    db.engine.dispose()


def role_values(db):
    with db.session_scope():
        return [role.value for role in db.records.fetch_all("roles")]


class TestInitCommand:
    """Tests for the init command."""

    def test_creates_database(self, invoke, db_path):
        """init creates the database file and reports it."""
        result = invoke("init")

        assert result.exit_code == 0
        assert "Schema ready" in result.output
        assert db_path.exists()


class TestCleanCommands:
    """Tests for clean and all commands."""

    def test_clean_single_kind(self, invoke, seeded_db):
        """Only the selected kind is sanitized."""
        result = invoke("clean", "--kind", "people")

        assert result.exit_code == 0, result.output
        assert "people: 1 changed of 2" in result.output
        assert "venues" not in result.output

        with seeded_db.session_scope():
            person = seeded_db.records.fetch_all("people")[0]
            assert person.fullname == "Anna Synodinou"
            assert person.bio == "Actress"
            venue = seeded_db.records.fetch_all("venues")[0]
            assert venue.address == "<br>Dionysiou Areopagitou"

    def test_all_kinds(self, invoke, seeded_db):
        """all sanitizes every kind."""
        result = invoke("all")

        assert result.exit_code == 0, result.output
        assert "Total: 2 changed of" in result.output

        with seeded_db.session_scope():
            venue = seeded_db.records.fetch_all("venues")[0]
            assert venue.address == "Dionysiou Areopagitou"

    def test_dry_run_saves_nothing(self, invoke, seeded_db):
        """A dry run reports changes but leaves the database untouched."""
        result = invoke("all", "--dry-run")

        assert result.exit_code == 0, result.output
        assert "[DRY RUN]" in result.output
        assert "Total: 2 changed of" in result.output

        with seeded_db.session_scope():
            person = seeded_db.records.fetch_all("people")[0]
            assert person.fullname == "Anna  Synodinou"

    def test_unknown_kind(self, invoke, seeded_db):
        """Unknown kinds are rejected by the option parser."""
        result = invoke("clean", "--kind", "theatres")
        assert result.exit_code != 0


class TestRolesCommand:
    """Tests for the roles command."""

    def test_consolidates_roles(self, invoke, seeded_db):
        """Role variants are rewritten to the canonical spelling."""
        result = invoke("roles")

        assert result.exit_code == 0, result.output
        assert "CORRECTIONS (2):" in result.output
        assert "'actor' → 'Actor'" in result.output
        assert role_values(seeded_db) == ["Actor"] * 5 + ["Director"]

    def test_second_run_reports_nothing_to_do(self, invoke, seeded_db):
        """After consolidation the fixed no-op message is printed."""
        invoke("roles")
        result = invoke("roles")

        assert result.exit_code == 0, result.output
        assert "The list of similar roles is empty" in result.output

    def test_dry_run_keeps_roles(self, invoke, seeded_db):
        """A dry run lists corrections without applying them."""
        result = invoke("roles", "--dry-run")

        assert result.exit_code == 0, result.output
        assert "CORRECTIONS (2):" in result.output
        assert role_values(seeded_db) == ["Actor", "Actor", "Actor", "actor", "Actror", "Director"]

    def test_export_report(self, invoke, seeded_db, tmp_dir):
        """The consolidation report is written as YAML."""
        report_path = tmp_dir / "report.yaml"

        result = invoke("roles", "--dry-run", "--export", str(report_path))

        assert result.exit_code == 0, result.output
        with open(report_path, encoding="utf-8") as f:
            report = yaml.safe_load(f)
        assert report["corrections"] == {"Actror": "Actor", "actor": "Actor"}
        assert report["clusters"][0]["canonical"] == "Actor"


class TestOrphansCommand:
    """Tests for the orphans command."""

    def test_removes_orphans_of_people(self, invoke, seeded_db):
        """Contributions of deleted people are removed."""
        result = invoke("orphans", "--missing", "people")

        assert result.exit_code == 0, result.output
        assert "Removed contributions: 1" in result.output
        with seeded_db.session_scope():
            ids = [c.id for c in seeded_db.records.fetch_all("contributions")]
        assert ids == [1, 2, 4]

    def test_removes_orphans_of_productions(self, invoke, seeded_db):
        """Contributions of deleted productions are removed."""
        result = invoke("orphans", "--missing", "productions")

        assert result.exit_code == 0, result.output
        with seeded_db.session_scope():
            ids = [c.id for c in seeded_db.records.fetch_all("contributions")]
        assert ids == [1, 2, 3]

    def test_dry_run_keeps_orphans(self, invoke, seeded_db):
        """A dry run deletes nothing."""
        result = invoke("orphans", "--missing", "people", "--dry-run")

        assert result.exit_code == 0, result.output
        with seeded_db.session_scope():
            assert len(seeded_db.records.fetch_all("contributions")) == 4

    def test_nothing_to_remove(self, invoke, seeded_db):
        """A second cleanup finds nothing."""
        invoke("orphans", "--missing", "people")
        result = invoke("orphans", "--missing", "people")

        assert "Not found any contributions for deleted people!" in result.output

    def test_missing_option_required(self, invoke, seeded_db):
        """The parent kind must be given."""
        assert invoke("orphans").exit_code != 0


class TestErrorHandling:
    """Tests for CLI error reporting."""

    def test_missing_schema_reports_error(self, invoke):
        """Commands on an uninitialized database fail cleanly."""
        result = invoke("roles")

        assert result.exit_code == 1
        assert "DatabaseError" in result.output
