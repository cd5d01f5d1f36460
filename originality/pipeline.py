"""
Plagiarism Match Pipeline

Turns provider snippet matches into located, scored highlights:

  normalize(document) once, plus its space-free form
  for each provider match, in the order received:
      locate snippet  -> dropped when not found
      score           -> similarity + confidence
      classify        -> highlight severity
      dedup           -> same (start, end, source) already emitted is dropped

The output keeps input order. Renderers use the offsets, not the list
position, so no sorting happens here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Union

from originality.locator import locate
from originality.normalizer import normalize, strip_spaces
from originality.scorer import (
    ScanVerdict,
    classify_severity,
    coerce_number,
    scan_verdict,
    score_match,
)

logger = logging.getLogger(__name__)

PROVIDER = "copyscape"


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class ProviderMatch:
    """One snippet match as reported by the plagiarism provider."""
    snippet_text: str
    source_url: str = ""
    percent_matched: Optional[float] = None
    words_matched: Optional[int] = None
    source_word_count: Optional[int] = None
    view_url: Optional[str] = None


@dataclass(frozen=True)
class LocatedMatch:
    """A provider match placed in the document. 0 <= start < end <= len(document)."""
    start: int
    end: int
    similarity: float          # 0-100
    confidence: str            # "high", "medium", "low"
    source_url: str
    severity: str = "green"    # "red", "yellow", "green"
    view_url: Optional[str] = None
    matched_words: Optional[int] = None
    source_words: Optional[int] = None
    match_percent: Optional[float] = None
    tier: str = "verbatim"
    provider: str = PROVIDER


@dataclass(frozen=True)
class ScanSummary:
    query_words: int = 0
    cost: float = 0
    count: int = 0
    all_words_matched: Optional[int] = None
    all_percent_matched: Optional[float] = None


@dataclass(frozen=True)
class PlagiarismResult:
    located_matches: list[LocatedMatch] = field(default_factory=list)
    summary: ScanSummary = field(default_factory=ScanSummary)
    verdict: ScanVerdict = field(default_factory=lambda: ScanVerdict(0, "safe"))


# ============================================================
# PIPELINE
# ============================================================

def _require_text(text: Any) -> None:
    if not isinstance(text, str):
        raise TypeError(f"document must be str, got {type(text).__name__}")


def resolve_matches(
    original_text: str,
    provider_matches: Iterable[ProviderMatch],
) -> list[LocatedMatch]:
    """
    Locate and score every provider match that can be placed in the document.

    Matches that cannot be located are dropped silently. A match landing on
    the same span from the same source as an earlier one is dropped as a
    duplicate.
    """
    _require_text(original_text)
    normalized_text, position_map = normalize(original_text)
    spaceless = strip_spaces(normalized_text)

    results: list[LocatedMatch] = []
    seen: set[tuple[int, int, str]] = set()
    received = 0

    for match in provider_matches:
        received += 1
        snippet = match.snippet_text or ""
        span = locate(
            original_text, normalized_text, position_map, snippet, spaceless,
        )
        if span is None:
            logger.debug("Snippet not located, dropping match",
                         extra={"source_url": match.source_url})
            continue

        key = (span.start, span.end, match.source_url)
        if key in seen:
            logger.debug("Duplicate match dropped",
                         extra={"source_url": match.source_url, "tier": span.tier})
            continue
        seen.add(key)

        score = score_match(snippet, match.percent_matched)
        results.append(LocatedMatch(
            start=span.start,
            end=span.end,
            similarity=score.similarity,
            confidence=score.confidence,
            source_url=match.source_url,
            severity=classify_severity(score.similarity),
            view_url=match.view_url,
            matched_words=match.words_matched,
            source_words=match.source_word_count,
            match_percent=match.percent_matched,
            tier=span.tier,
        ))

    logger.info(
        f"Resolved {len(results)}/{received} provider matches",
        extra={
            "match_count": received,
            "located_count": len(results),
            "dropped_count": received - len(results),
        },
    )
    return results


def resolve_scan(
    content_text: str,
    raw_matches: Iterable[Union[Mapping[str, Any], ProviderMatch]],
    query_words: Any = 0,
    cost: Any = 0,
    count: Any = None,
    all_words_matched: Any = None,
    all_percent_matched: Any = None,
) -> PlagiarismResult:
    """
    Plagiarism-provider contract: raw provider matches in, located matches,
    summary and verdict out.

    `raw_matches` may hold provider dicts in any supported field spelling
    or already-adapted ProviderMatch values.
    """
    from originality.adapters import adapt_provider_match

    matches = [
        m if isinstance(m, ProviderMatch) else adapt_provider_match(m)
        for m in raw_matches
    ]
    located = resolve_matches(content_text, matches)

    summary = ScanSummary(
        query_words=int(coerce_number(query_words)),
        cost=coerce_number(cost),
        count=int(coerce_number(count, default=len(located))),
        all_words_matched=(
            None if all_words_matched is None else int(coerce_number(all_words_matched))
        ),
        all_percent_matched=(
            None if all_percent_matched is None else coerce_number(all_percent_matched)
        ),
    )
    verdict = scan_verdict((m.similarity for m in located), all_percent_matched)
    return PlagiarismResult(located_matches=located, summary=summary, verdict=verdict)
