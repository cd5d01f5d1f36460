"""
Tests for the Snippet Locator — the three-tier search.

A missing highlight is acceptable; a wrong one is not. Most of these
tests pin exact spans.
"""

from __future__ import annotations

import pytest

from originality.normalizer import normalize
from originality.locator import (
    locate,
    locate_in,
    Span,
    MIN_SNIPPET_CHARS,
    TIER_VERBATIM,
    TIER_NORMALIZED,
    TIER_SPACELESS,
)

DOC = "The quick brown fox jumps over the lazy dog."


def _locate(document: str, snippet: str):
    text, position_map = normalize(document)
    return locate(document, text, position_map, snippet)


class TestVerbatimTier:

    def test_exact_substring(self):
        assert _locate(DOC, "quick brown fox") == Span(4, 19, TIER_VERBATIM)

    def test_span_reproduces_snippet(self):
        span = _locate(DOC, "jumps over")
        assert DOC[span.start:span.end] == "jumps over"
        assert span == Span(20, 30, TIER_VERBATIM)

    def test_verbatim_wins_over_earlier_normalized_match(self):
        document = "ALPHA BETA GAMMA DELTA. alpha beta gamma delta."
        span = _locate(document, "alpha beta gamma delta")
        assert span == Span(24, 46, TIER_VERBATIM)


class TestNormalizedTier:

    def test_case_and_punctuation_differences(self):
        assert _locate(DOC, "Quick, Brown Fox") == Span(4, 19, TIER_NORMALIZED)

    def test_maps_across_dropped_punctuation(self):
        document = "Hello, world: this is fine"
        span = _locate(document, "hello world this")
        assert span == Span(0, 18, TIER_NORMALIZED)
        assert document[span.start:span.end] == "Hello, world: this"

    def test_surrounding_whitespace_in_snippet_ignored(self):
        document = "It ends with the lazy dog."
        assert _locate(document, "  the LAZY dog  ") == Span(13, 25, TIER_NORMALIZED)

    def test_ellipsis_snippet(self):
        span = _locate(DOC, "...over the lazy dog...")
        assert span.tier == TIER_NORMALIZED
        assert DOC[span.start:span.end] == "over the lazy dog"

    def test_leftmost_occurrence(self):
        document = "repeat this phrase and repeat this phrase"
        span = _locate(document, "Repeat this phrase")
        assert span.start == 0
        assert span.tier == TIER_NORMALIZED


class TestSpacelessTier:

    def test_document_splits_word(self):
        document = "Data base management systems are essential."
        assert _locate(document, "database management systems") == Span(0, 28, TIER_SPACELESS)

    def test_snippet_splits_word(self):
        document = "Database management systems"
        assert _locate(document, "data base management") == Span(0, 19, TIER_SPACELESS)

    def test_first_occurrence_wins_even_with_different_spacing(self):
        # Known limitation: the space-free form of both occurrences is
        # identical, so the first one is used regardless of spacing.
        document = "note book keeper. notebook keeper."
        span = _locate(document, "Notebook-keeper")
        assert span.tier == TIER_SPACELESS
        assert span.start == 0


class TestNotFound:

    def test_absent_snippet(self):
        assert _locate(DOC, "zebra unicorn dragon") is None

    def test_short_snippet_rejected_even_if_verbatim(self):
        assert "the lazy" in DOC
        assert _locate(DOC, "the lazy") is None

    def test_floor_counts_normalized_characters(self):
        # 12 raw characters, 8 after normalization
        assert _locate(DOC, "the... lazy!") is None

    def test_floor_boundary(self):
        assert len("jumps over") == MIN_SNIPPET_CHARS
        assert _locate(DOC, "jumps over") is not None
        assert _locate(DOC, "umps over") is None

    def test_empty_snippet(self):
        assert _locate(DOC, "") is None

    def test_punctuation_only_snippet(self):
        assert _locate(DOC, "!!!!!!!!!!!!!!!!") is None

    def test_empty_document(self):
        assert _locate("", "quick brown fox") is None

    def test_words_present_out_of_order(self):
        assert _locate(DOC, "fox brown quick") is None


class TestSpanValidity:

    @pytest.mark.parametrize("snippet", [
        "quick brown fox",
        "Quick, Brown Fox",
        "THE LAZY DOG.",
        "brownfox jumps",
        "  over the lazy dog  ",
    ])
    def test_span_inside_document(self, snippet):
        span = _locate(DOC, snippet)
        assert span is not None
        assert 0 <= span.start < span.end <= len(DOC)
        assert len(span) == span.end - span.start


class TestLocateIn:

    def test_normalizes_document_itself(self):
        assert locate_in(DOC, "Quick, Brown Fox") == Span(4, 19, TIER_NORMALIZED)

    def test_not_found(self):
        assert locate_in(DOC, "zebra unicorn dragon") is None
