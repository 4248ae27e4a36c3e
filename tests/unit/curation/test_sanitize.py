"""
Tests for the free-text sanitizer.

Covers entity decoding, markup and symbol removal, whitespace
collapsing, and the idempotence of the whole pipeline.
"""
import pytest

from theatrical.curation.sanitize import (
    collapse_whitespace,
    decode_entities,
    sanitize,
    strip_noise,
)


# =============================================================================
# Building Blocks
# =============================================================================

class TestDecodeEntities:
    """Tests for decode_entities."""

    def test_decodes_named_entities(self):
        """Named entities become their characters."""
        assert decode_entities("Tom &amp; Jerry") == "Tom & Jerry"

    def test_decodes_double_escaped_entities(self):
        """Double-escaped entities are decoded all the way down."""
        assert "&" not in decode_entities("A&amp;nbsp;B")

    def test_tags_become_spaces(self):
        """Stray tags are replaced by a space, not glued together."""
        assert decode_entities("Director<br>Assistant") == "Director Assistant"

    def test_comments_removed(self):
        """HTML comments are dropped."""
        assert "draft" not in decode_entities("Actor<!-- draft -->")


class TestStripNoise:
    """Tests for strip_noise."""

    def test_removes_redundant_symbols(self):
        """Markup leftovers are removed."""
        assert strip_noise("{Actor}|") == "Actor"

    def test_removes_zero_width_characters(self):
        """Format characters vanish without leaving a gap."""
        assert strip_noise("Act\u200bor") == "Actor"

    def test_removes_control_characters(self):
        """Non-whitespace control characters are removed."""
        assert strip_noise("Act\x00or\x07") == "Actor"

    def test_keeps_whitespace_controls(self):
        """Tabs and newlines are left for the whitespace rule."""
        assert strip_noise("a\tb\nc") == "a\tb\nc"

    def test_keeps_intra_word_punctuation(self):
        """Hyphens, apostrophes and periods survive."""
        assert strip_noise("Jean-Luc O'Brien Jr.") == "Jean-Luc O'Brien Jr."


class TestCollapseWhitespace:
    """Tests for collapse_whitespace."""

    def test_collapses_runs(self):
        """Any whitespace run becomes one space."""
        assert collapse_whitespace("a \t\n  b") == "a b"

    def test_trims(self):
        """Leading and trailing whitespace is removed."""
        assert collapse_whitespace("   a   ") == "a"


# =============================================================================
# Full Pipeline
# =============================================================================

class TestSanitize:
    """Tests for the sanitize pipeline."""

    def test_entity_and_whitespace_example(self):
        """Non-breaking space entities collapse into a single space."""
        assert sanitize("  Hello&nbsp;&nbsp;World!! ") == "Hello World!!"

    def test_none_becomes_empty(self):
        """None is treated as empty text."""
        assert sanitize(None) == ""

    def test_empty_stays_empty(self):
        """Empty input yields empty output."""
        assert sanitize("") == ""

    def test_whitespace_only_becomes_empty(self):
        """Whitespace-only input yields empty output."""
        assert sanitize(" \t\n ") == ""

    def test_clean_text_unchanged(self):
        """Already clean text is returned as is."""
        assert sanitize("Hamlet") == "Hamlet"

    def test_markup_removed(self):
        """Tags around a value are removed."""
        assert sanitize("<b>Actor</b>") == "Actor"

    def test_double_escaped_space(self):
        """A double-escaped non-breaking space still separates words."""
        assert sanitize("A&amp;nbsp;B") == "A B"

    def test_multiline_text(self):
        """Line breaks collapse into spaces."""
        assert sanitize("Line one\n\n\tLine two") == "Line one Line two"

    def test_punctuation_preserved(self):
        """Meaningful punctuation is not touched."""
        assert sanitize("Jean-Luc O'Brien") == "Jean-Luc O'Brien"

    def test_greek_text_preserved(self):
        """Non-Latin letters are kept."""
        assert sanitize("  Ηθοποιός  ") == "Ηθοποιός"

    @pytest.mark.parametrize(
        "raw",
        [
            "  Hello&nbsp;&nbsp;World!! ",
            "A&amp;nbsp;B",
            "&amp;lt;b&amp;gt;Actor&amp;lt;/b&amp;gt;",
            "<<b>>Actor",
            "&l{t;b>",
            "Act\u200bor | \x00 {Director}",
            "\t\n",
            "~^`",
            "Ηθοποιός &amp; Σκηνοθέτης",
        ],
    )
    def test_idempotent(self, raw):
        """Sanitizing twice gives the same result as sanitizing once."""
        once = sanitize(raw)
        assert sanitize(once) == once

    @pytest.mark.parametrize(
        "raw",
        ["  a  ", "a&nbsp;b", "<i>x</i>", "{y}", "z\u200b"],
    )
    def test_output_has_no_edge_or_double_spaces(self, raw):
        """Output never starts or ends with whitespace, nor has double spaces."""
        cleaned = sanitize(raw)
        assert cleaned == cleaned.strip()
        assert "  " not in cleaned


# =============================================================================
# Meaning Preservation
# =============================================================================

class TestContentPreserved:
    """Tests for text that resembles markup but must not change."""

    def test_query_string_parameters_kept(self):
        """Parameters named like entities are not decoded without a ';'."""
        url = "https://example.org/watch?v=1&region=eu&copy=2&notify=1"
        assert sanitize(url) == url

    def test_tilde_in_url_kept(self):
        """URL paths keep their tilde."""
        url = "https://example.org/~ensemble/show"
        assert sanitize(url) == url

    def test_comparisons_kept(self):
        """Angle brackets that form no tag are not removed."""
        text = "Ages 5<x and x>12 welcome"
        assert sanitize(text) == text

    def test_unknown_tag_like_span_kept(self):
        """Only known markup tags are stripped."""
        assert sanitize("<Chorus> member") == "<Chorus> member"

    def test_entity_prefix_not_decoded(self):
        """A known entity name followed by more letters is left alone."""
        assert sanitize("&notit;") == "&notit;"

    def test_complete_entities_still_decoded(self):
        """Entities with their ';' are decoded, named or numeric."""
        assert sanitize("&copy;2024 &#169; &#xA9;") == "©2024 © ©"

    def test_tags_with_attributes_removed(self):
        """Known tags are removed whatever their attributes or case."""
        assert sanitize('<P class="x">Medea</P><BR/>') == "Medea"


# =============================================================================
# Nested Noise
# =============================================================================

class TestNestedNoise:
    """Tests for entities exposed one layer at a time by symbol removal."""

    @pytest.mark.parametrize("depth", [1, 5, 10, 25])
    def test_symbol_split_entities_idempotent(self, depth):
        """However deep the nesting, a second sanitize changes nothing."""
        raw = "&am" + "&ver" * depth + "|" + "bar;" * depth + "p;"

        once = sanitize(raw)

        assert sanitize(once) == once
        assert once == "&"

    def test_deeply_escaped_entity(self):
        """Repeated &amp; escaping unwinds completely."""
        raw = "Tom " + "&amp;" * 1 + "amp;" * 30 + " Jerry"
        once = sanitize(raw)
        assert once == "Tom & Jerry"
        assert sanitize(once) == once

    @pytest.mark.parametrize(
        "raw",
        [
            "https://example.org/watch?v=1&region=eu&copy=2&notify=1",
            "Ages 5<x and x>12 welcome",
            "<b>&lt;i&gt;</b>Actor&lt;/i&gt;",
            "&l{t;b&g|t;Actor",
            "&#38;#38;#38;",
        ],
    )
    def test_idempotent_on_markup_lookalikes(self, raw):
        """Sanitizing twice equals sanitizing once for mixed markup."""
        once = sanitize(raw)
        assert sanitize(once) == once
