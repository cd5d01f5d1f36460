"""
Snippet Locator — Three-Tier Span Recovery

Providers return snippets without reliable offsets. This module finds
where a snippet lives in the original document:

  1. verbatim    exact substring of the original text
  2. normalized  substring of the normalized text, mapped back via the
                 position map
  3. spaceless   substring once all spaces are removed from both sides,
                 mapped back via the normalized text

First success wins. Not found is None, never an exception: a missing
highlight is preferred over a wrong one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from originality.normalizer import normalize, strip_spaces


# Snippets whose normalized form is shorter than this collide too easily
MIN_SNIPPET_CHARS = 10

TIER_VERBATIM = "verbatim"
TIER_NORMALIZED = "normalized"
TIER_SPACELESS = "spaceless"


@dataclass(frozen=True)
class Span:
    """Half-open character range [start, end) in the original text."""
    start: int
    end: int
    tier: str = TIER_VERBATIM

    def __len__(self) -> int:
        return self.end - self.start


def _map_back(
    position_map: list[int], first: int, last: int,
) -> tuple[int, int]:
    """Map normalized indices of the first/last matched characters to an original span."""
    last = min(last, len(position_map) - 1)
    return position_map[first], position_map[last] + 1


def locate(
    original_text: str,
    normalized_text: str,
    position_map: list[int],
    snippet: str,
    spaceless: Optional[tuple[str, list[int]]] = None,
) -> Optional[Span]:
    """
    Find the span of `snippet` inside `original_text`.

    Args:
        original_text: The document as submitted.
        normalized_text: normalize(original_text).text, computed once by the caller.
        position_map: normalize(original_text).position_map.
        snippet: Raw provider snippet.
        spaceless: strip_spaces(normalized_text). Callers locating many
            snippets in one document pass it in; built on demand otherwise.

    Returns:
        Span of the leftmost occurrence, or None when the snippet is too
        short or cannot be found by any tier.
    """
    if not snippet:
        return None

    needle = normalize(snippet).text.strip(" ")
    if len(needle) < MIN_SNIPPET_CHARS:
        return None

    # --- Tier 1: verbatim ---
    index = original_text.find(snippet)
    if index != -1:
        return Span(index, index + len(snippet), TIER_VERBATIM)

    if not position_map:
        return None

    # --- Tier 2: normalized ---
    index = normalized_text.find(needle)
    if index != -1:
        start, end = _map_back(position_map, index, index + len(needle) - 1)
        return Span(start, end, TIER_NORMALIZED)

    # --- Tier 3: spaceless ---
    if spaceless is None:
        spaceless = strip_spaces(normalized_text)
    haystack, haystack_index = spaceless
    spaceless_needle, _ = strip_spaces(needle)
    index = haystack.find(spaceless_needle)
    if index != -1:
        first = haystack_index[index]
        last = haystack_index[index + len(spaceless_needle) - 1]
        start, end = _map_back(position_map, first, last)
        return Span(start, end, TIER_SPACELESS)

    return None


def locate_in(original_text: str, snippet: str) -> Optional[Span]:
    """Single-shot locate: normalizes the document itself."""
    normalized_text, position_map = normalize(original_text)
    return locate(original_text, normalized_text, position_map, snippet)
