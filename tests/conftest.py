"""
conftest.py
-----------
Shared pytest fixtures for Theatrical tests.

Provides fixtures for:
- Temporary directories
- Database setup and teardown
- Record factories
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ----- Sample Data Factory Functions -----

def make_roles(counts):
    """
    Factory for Role records.

    Args:
        counts: Sequence of (value, how_many) pairs

    Returns:
        List of transient Role records with sequential ids
    """
    from theatrical.database.models import Role

    roles = []
    next_id = 1
    for value, how_many in counts:
        for _ in range(how_many):
            roles.append(Role(id=next_id, value=value))
            next_id += 1
    return roles


@pytest.fixture
def actor_family_roles():
    """Roles from the canonical example: 3 Actor, 1 actor, 1 Actror, 5 Director."""
    return make_roles(
        [("Actor", 3), ("actor", 1), ("Actror", 1), ("Director", 5)]
    )


# ----- Test Database Fixtures -----

@pytest.fixture
def test_db_path(tmp_dir):
    """Create temporary test database path."""
    return tmp_dir / "test.db"


@pytest.fixture
def test_db(test_db_path):
    """
    Create test database instance with schema.

    Returns a TheatricalDB instance with an initialized schema.
    Database is torn down after the test.
    """
    from theatrical.database.manager import TheatricalDB

    db = TheatricalDB(test_db_path)
    db.initialize_schema()

    yield db

    db.engine.dispose()
    if test_db_path.exists():
        test_db_path.unlink()


@pytest.fixture
def db_session(test_db):
    """Create a database session for tests (committed on exit)."""
    with test_db.session_scope() as session:
        yield session


@pytest.fixture
def repository(test_db, db_session):
    """RecordRepository bound to the active test session."""
    return test_db.records


@pytest.fixture
def role_factory():
    """Factory fixture building Role records from (value, count) pairs."""
    return make_roles
