"""
Tests for orphan contribution detection.
"""
from types import SimpleNamespace

import pytest

from theatrical.core.exceptions import MalformedRecordError, ValidationError
from theatrical.curation.orphans import find_orphan_contributions, orphan_key


class TestOrphanKey:
    """Tests for orphan_key."""

    def test_known_parents(self):
        """People and productions map to their contribution columns."""
        assert orphan_key("people") == "person_id"
        assert orphan_key("productions") == "production_id"

    def test_unknown_parent(self):
        """Other kinds cannot orphan a contribution."""
        with pytest.raises(ValidationError):
            orphan_key("roles")


class TestFindOrphanContributions:
    """Tests for find_orphan_contributions."""

    def test_finds_dangling_references(self):
        """Contributions referencing missing parents are returned in order."""
        contributions = [
            SimpleNamespace(id=1, person_id=1),
            SimpleNamespace(id=2, person_id=5),
            SimpleNamespace(id=3, person_id=2),
            SimpleNamespace(id=4, person_id=6),
        ]
        parents = [SimpleNamespace(id=1), SimpleNamespace(id=2)]

        orphans = find_orphan_contributions(contributions, parents, "person_id")

        assert [c.id for c in orphans] == [2, 4]

    def test_no_parents_orphans_everything(self):
        """With every parent deleted, every contribution dangles."""
        contributions = [SimpleNamespace(id=1, production_id=3)]
        assert find_orphan_contributions(contributions, [], "production_id") == contributions

    def test_empty_contributions(self):
        """No contributions, no orphans."""
        assert find_orphan_contributions([], [SimpleNamespace(id=1)], "person_id") == []

    def test_missing_key_attribute(self):
        """A contribution without the reference column is malformed."""
        with pytest.raises(MalformedRecordError, match="person_id"):
            find_orphan_contributions([SimpleNamespace(id=1)], [], "person_id")
