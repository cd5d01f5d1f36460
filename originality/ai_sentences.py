"""
AI-Sentence Locator & Classifier

Places AI-detection sentences in the document and bins probabilities.

The provider returns sentences in document order, so a single forward
cursor is threaded through the list: each sentence is searched from where
the previous one ended, which disambiguates repeated sentences. A sentence
that cannot be found is placed at the cursor instead of being dropped:
every provider sentence must appear in the per-sentence trace.

Sentence bins (score 0-100):   <20 human, <50 likely_human, <80 likely_ai, else ai
Document bins (score 0-100):   <30 human, <70 mixed, else ai
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Union

from originality.scorer import coerce_number

logger = logging.getLogger(__name__)

SENTENCE_BINS = ((20, "human"), (50, "likely_human"), (80, "likely_ai"))
DOCUMENT_BINS = ((30, "human"), (70, "mixed"))


@dataclass(frozen=True)
class SentenceProbability:
    """One provider sentence with its probability of being generated (0-1)."""
    sentence_text: str
    generated_probability: float = 0.0


@dataclass(frozen=True)
class LocatedSentence:
    """
    A provider sentence placed in the document.

    position_start may equal position_end: an empty sentence, or an unfound
    one placed when the cursor is already at the end of the document.
    """
    text: str
    score: float               # 0-100
    classification: str        # "human", "likely_human", "likely_ai", "ai"
    position_start: int
    position_end: int
    located: bool = True       # False when placed at the cursor as a fallback


@dataclass(frozen=True)
class AIDetectionResult:
    overall_score: float       # 0-100
    classification: str        # "human", "mixed", "ai"
    sentences: list[LocatedSentence] = field(default_factory=list)


# ============================================================
# CLASSIFICATION
# ============================================================

def _bin(score: float, bins: tuple[tuple[int, str], ...], top: str) -> str:
    for upper, label in bins:
        if score < upper:
            return label
    return top


def classify_sentence(score: float) -> str:
    return _bin(score, SENTENCE_BINS, "ai")


def classify_document(score: float) -> str:
    return _bin(score, DOCUMENT_BINS, "ai")


def probability_to_score(probability: Any) -> float:
    """Scale a 0-1 probability to a 0-100 score. Junk and NaN count as 0."""
    return max(0.0, min(100.0, coerce_number(probability) * 100))


# ============================================================
# PLACEMENT
# ============================================================

def place_sentence(
    original_text: str, sentence_text: str, cursor: int,
) -> tuple[int, int, bool]:
    """
    Place one sentence at or after `cursor`.

    Returns:
        (start, end, found). When not found the sentence is placed at the
        cursor. Both positions are clamped to [0, len(original_text)].
    """
    limit = len(original_text)
    cursor = max(0, min(cursor, limit))
    start = original_text.find(sentence_text, cursor)
    found = start != -1
    if not found:
        start = cursor
    end = min(start + len(sentence_text), limit)
    return max(0, start), end, found


def resolve_sentences(
    original_text: str,
    sentences: Iterable[SentenceProbability],
) -> list[LocatedSentence]:
    """
    Position and classify every sentence, in order.

    The cursor is the fold accumulator: it starts at 0 and becomes each
    sentence's end, so position_end never decreases across the result.
    """
    if not isinstance(original_text, str):
        raise TypeError(f"document must be str, got {type(original_text).__name__}")

    results: list[LocatedSentence] = []
    cursor = 0
    unplaced = 0
    for sentence in sentences:
        text = sentence.sentence_text or ""
        start, end, found = place_sentence(original_text, text, cursor)
        if not found:
            unplaced += 1
        score = probability_to_score(sentence.generated_probability)
        results.append(LocatedSentence(
            text=text,
            score=score,
            classification=classify_sentence(score),
            position_start=start,
            position_end=end,
            located=found,
        ))
        cursor = end

    logger.info(
        f"Placed {len(results)} sentences",
        extra={"sentence_count": len(results), "unplaced_count": unplaced},
    )
    return results


def resolve_ai_result(
    content_text: str,
    sentences: Iterable[Union[Mapping[str, Any], SentenceProbability]],
    overall_generated_probability: Any = 0,
) -> AIDetectionResult:
    """AI-detection-provider contract: sentences + overall probability in, located result out."""
    from originality.adapters import adapt_sentence

    adapted = [
        s if isinstance(s, SentenceProbability) else adapt_sentence(s)
        for s in sentences
    ]
    overall = probability_to_score(overall_generated_probability)
    return AIDetectionResult(
        overall_score=overall,
        classification=classify_document(overall),
        sentences=resolve_sentences(content_text, adapted),
    )
