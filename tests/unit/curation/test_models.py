"""
Tests for curation result models.
"""
from types import MappingProxyType

from theatrical.curation.models import (
    EMPTY_DICTIONARY,
    CurateAllResult,
    CurationResult,
    OrphanCleanupResult,
    SimilarityCluster,
    freeze_dictionary,
)


class TestSimilarityCluster:
    """Tests for SimilarityCluster."""

    def test_counts(self):
        """Size counts strings, record_count counts records."""
        cluster = SimilarityCluster(variants={"Actor": 3, "actor": 1, "Actror": 1})
        assert cluster.size == 3
        assert cluster.record_count == 5

    def test_membership(self):
        """Membership tests original strings exactly."""
        cluster = SimilarityCluster(variants={"Actor": 3, "actor": 1})
        assert "actor" in cluster
        assert "ACTOR" not in cluster


class TestCurationResult:
    """Tests for CurationResult."""

    def test_defaults(self):
        """A fresh result reports no changes."""
        result = CurationResult(kind="venues")
        assert not result.has_changes
        assert result.changed == []
        assert result.dictionary == {}

    def test_default_dictionary_is_read_only_and_empty(self):
        """Every fresh result gets the shared empty read-only dictionary."""
        first = CurationResult(kind="roles")
        second = CurationResult(kind="venues")

        assert first.dictionary is EMPTY_DICTIONARY
        assert second.dictionary is EMPTY_DICTIONARY
        assert isinstance(first.dictionary, MappingProxyType)

    def test_summary(self):
        """Summary lists counts and role details when present."""
        result = CurationResult(
            kind="roles",
            total_count=10,
            changed_count=2,
            dictionary=freeze_dictionary({"actor": "Actor", "Actror": "Actor"}),
            clusters=[SimilarityCluster(variants={"Actor": 3, "actor": 1, "Actror": 1})],
            dry_run=True,
        )
        summary = result.summary()
        assert "Kind: roles" in summary
        assert "Changed: 2" in summary
        assert "Clusters: 1" in summary
        assert "Corrections: 2" in summary
        assert "Dry run" in summary


class TestCurateAllResult:
    """Tests for CurateAllResult."""

    def test_totals(self):
        """Totals add up over every kind."""
        outcome = CurateAllResult(
            results={
                "people": CurationResult(kind="people", total_count=5, changed_count=2),
                "venues": CurationResult(kind="venues", total_count=3, changed_count=0),
            }
        )
        assert outcome.total_count == 8
        assert outcome.changed_count == 2
        assert outcome.counts() == {"people": 2, "venues": 0}
        assert outcome.summary().endswith("Total changed: 2/8")


class TestOrphanCleanupResult:
    """Tests for OrphanCleanupResult."""

    def test_summary(self):
        """Summary names the checked parent kind."""
        result = OrphanCleanupResult(missing="people", total_count=4, removed_count=1)
        assert result.summary() == "Missing: people | Examined: 4 | Removed: 1"


class TestFreezeDictionary:
    """Tests for freeze_dictionary."""

    def test_empty(self):
        """Empty or missing corrections share the empty view."""
        assert freeze_dictionary({}) is EMPTY_DICTIONARY
        assert freeze_dictionary(None) is EMPTY_DICTIONARY

    def test_copies(self):
        """The view is detached from the source dict."""
        source = {"actor": "Actor"}
        frozen = freeze_dictionary(source)
        source["Actror"] = "Actor"

        assert isinstance(frozen, MappingProxyType)
        assert dict(frozen) == {"actor": "Actor"}
