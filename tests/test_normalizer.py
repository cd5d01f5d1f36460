"""
Tests for the Text Normalizer.

The position map is what lets every later tier point back at the
original document, so its invariants are checked on every sample.
"""

from __future__ import annotations

import pytest

from originality.normalizer import normalize, strip_spaces, Normalized


SAMPLES = [
    "",
    "The quick brown fox jumps over the lazy dog.",
    "Hello,   World!",
    "  leading and trailing  ",
    "tabs\tand\nnewlines\r\nmixed",
    "Café au lait — naïve résumé",
    "!!!???...",
    "ALL CAPS 123 and numbers 4567",
    "a-b_c/d\\e",
    " non-breaking spaces　here",
]


class TestNormalizeOutput:

    def test_sentence(self):
        result = normalize("The quick brown fox jumps over the lazy dog.")
        assert result.text == "the quick brown fox jumps over the lazy dog"

    def test_punctuation_dropped_whitespace_collapsed(self):
        text, position_map = normalize("Hello,   World!")
        assert text == "hello world"
        assert position_map == [0, 1, 2, 3, 4, 6, 9, 10, 11, 12, 13]

    def test_empty(self):
        text, position_map = normalize("")
        assert text == ""
        assert position_map == []

    def test_only_punctuation(self):
        assert normalize("!!!???...").text == ""

    def test_mixed_whitespace_becomes_single_space(self):
        text, position_map = normalize("a\n\tb")
        assert text == "a b"
        assert position_map == [0, 1, 3]

    def test_leading_space_is_kept(self):
        # Collapsed, not trimmed
        assert normalize("  leading").text == " leading"

    def test_non_ascii_letters_dropped(self):
        assert normalize("Café").text == "caf"

    def test_underscore_and_hyphen_dropped(self):
        assert normalize("a-b_c").text == "abc"

    def test_digits_kept(self):
        assert normalize("Room 101").text == "room 101"

    def test_returns_normalized(self):
        result = normalize("ab")
        assert isinstance(result, Normalized)
        assert len(result) == 2


class TestNormalizeInvariants:

    @pytest.mark.parametrize("sample", SAMPLES)
    def test_idempotent(self, sample):
        once = normalize(sample).text
        assert normalize(once).text == once

    @pytest.mark.parametrize("sample", SAMPLES)
    def test_position_map_length(self, sample):
        text, position_map = normalize(sample)
        assert len(position_map) == len(text)

    @pytest.mark.parametrize("sample", SAMPLES)
    def test_position_map_valid_and_non_decreasing(self, sample):
        _, position_map = normalize(sample)
        assert all(0 <= p < len(sample) for p in position_map)
        assert position_map == sorted(position_map)

    @pytest.mark.parametrize("sample", SAMPLES)
    def test_position_map_points_at_source_character(self, sample):
        text, position_map = normalize(sample)
        for ch, pos in zip(text, position_map):
            if ch == " ":
                assert sample[pos].isspace()
            else:
                assert sample[pos].lower() == ch

    @pytest.mark.parametrize("sample", SAMPLES)
    def test_no_double_spaces(self, sample):
        assert "  " not in normalize(sample).text


class TestStripSpaces:

    def test_strip(self):
        assert strip_spaces("ab cd") == ("abcd", [0, 1, 3, 4])

    def test_no_spaces(self):
        assert strip_spaces("abc") == ("abc", [0, 1, 2])

    def test_empty(self):
        assert strip_spaces("") == ("", [])
