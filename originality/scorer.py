"""
Match Scorer

Derives similarity and confidence for a located snippet, the highlight
severity of a match, and the scan-level verdict.

Similarity comes from the provider's match percentage when supplied.
That percentage describes how much of the SOURCE page matched, not how
reliably the snippet was placed in the document, so confidence is always
derived from snippet length:

  words > 50   similarity 90  confidence high
  words 21-50  similarity 70  confidence medium
  words <= 20  similarity 40  confidence low

Severity (highlight colour):  >= 70 red, >= 40 yellow, else green.
Verdict: overall score > 10 is action_required, otherwise safe.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Optional

HIGH_WORDS = 50
MEDIUM_WORDS = 20

RED_SIMILARITY = 70
YELLOW_SIMILARITY = 40

ACTION_REQUIRED_SCORE = 10


@dataclass(frozen=True)
class MatchScore:
    similarity: float       # 0-100
    confidence: str         # "high", "medium", "low"


@dataclass(frozen=True)
class ScanVerdict:
    overall_score: float    # 0-100
    status: str             # "action_required", "safe"


def coerce_number(value: Any, default: float = 0) -> float:
    """Coerce a provider value to a finite number. Absent, NaN, or junk gives `default`."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return number


def word_count(snippet: str) -> int:
    return len(snippet.split())


def confidence_for(words: int) -> str:
    if words > HIGH_WORDS:
        return "high"
    if words > MEDIUM_WORDS:
        return "medium"
    return "low"


def similarity_for(words: int) -> float:
    if words > HIGH_WORDS:
        return 90
    if words > MEDIUM_WORDS:
        return 70
    return 40


def score_match(snippet: str, percent_matched: Any = None) -> MatchScore:
    """
    Score a located snippet.

    Args:
        snippet: The snippet text as returned by the provider.
        percent_matched: Provider's percentage of the source that matched.
            Used as similarity when present; None falls back to word count.
    """
    words = word_count(snippet)
    if percent_matched is None:
        similarity = similarity_for(words)
    else:
        similarity = max(0.0, min(100.0, coerce_number(percent_matched)))
    return MatchScore(similarity=similarity, confidence=confidence_for(words))


def classify_severity(similarity: float) -> str:
    """Highlight colour for a match."""
    if similarity >= RED_SIMILARITY:
        return "red"
    if similarity >= YELLOW_SIMILARITY:
        return "yellow"
    return "green"


def scan_verdict(
    similarities: Iterable[float],
    all_percent_matched: Optional[float] = None,
) -> ScanVerdict:
    """
    Overall scan score and status.

    The provider's aggregate percentage wins when it is non-zero;
    otherwise the strongest individual match stands in for it.
    """
    overall = coerce_number(all_percent_matched)
    if not overall:
        overall = max(similarities, default=0)
    status = "action_required" if overall > ACTION_REQUIRED_SCORE else "safe"
    return ScanVerdict(overall_score=overall, status=status)
