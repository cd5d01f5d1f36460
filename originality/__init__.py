"""
Originality — Match Localization and Classification Engine

Relocates provider results (plagiarism snippets, AI-detection sentences)
inside the submitted document and classifies them for highlighting.

Public API:
  - normalize:          Comparison form + position map
  - locate / locate_in: Three-tier snippet search (verbatim, normalized, spaceless)
  - score_match:        Similarity + confidence for a located snippet
  - resolve_matches:    Plagiarism pipeline over ProviderMatch values
  - resolve_scan:       Plagiarism-provider contract (raw dicts in, result out)
  - resolve_sentences:  Cursor-ordered AI sentence placement
  - resolve_ai_result:  AI-detection-provider contract
  - classify_sentence / classify_document: Probability bins

Usage:
    from originality import resolve_scan, resolve_ai_result
"""

__version__ = "1.0.0"

from originality.normalizer import normalize, Normalized
from originality.locator import locate, locate_in, Span, MIN_SNIPPET_CHARS
from originality.scorer import (
    score_match,
    classify_severity,
    scan_verdict,
    MatchScore,
    ScanVerdict,
)
from originality.pipeline import (
    resolve_matches,
    resolve_scan,
    ProviderMatch,
    LocatedMatch,
    ScanSummary,
    PlagiarismResult,
)
from originality.ai_sentences import (
    resolve_sentences,
    resolve_ai_result,
    place_sentence,
    classify_sentence,
    classify_document,
    SentenceProbability,
    LocatedSentence,
    AIDetectionResult,
)
from originality.adapters import adapt_provider_match, adapt_sentence

__all__ = [
    "normalize",
    "Normalized",
    "locate",
    "locate_in",
    "Span",
    "MIN_SNIPPET_CHARS",
    "score_match",
    "classify_severity",
    "scan_verdict",
    "MatchScore",
    "ScanVerdict",
    "resolve_matches",
    "resolve_scan",
    "ProviderMatch",
    "LocatedMatch",
    "ScanSummary",
    "PlagiarismResult",
    "resolve_sentences",
    "resolve_ai_result",
    "place_sentence",
    "classify_sentence",
    "classify_document",
    "SentenceProbability",
    "LocatedSentence",
    "AIDetectionResult",
    "adapt_provider_match",
    "adapt_sentence",
]
