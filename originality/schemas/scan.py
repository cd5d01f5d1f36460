"""
API Schemas — Request and Response Models

Pydantic models for the Originality API. Wire names are camelCase
(`contentText`, `locatedMatches`); snake_case names are accepted on input.
Raw provider items stay plain dicts: field-name tolerance lives in
originality.adapters.
"""

from __future__ import annotations

from typing import Any, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from originality.config import settings


class CamelModel(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}


# ============================================================
# PLAGIARISM
# ============================================================

class PlagiarismScanRequest(CamelModel):
    """POST /locate/plagiarism request body."""
    content_text: str = Field(..., max_length=settings.MAX_TEXT_LENGTH,
                              description="The document the provider scanned.")
    raw_matches: list[dict[str, Any]] = Field(
        default_factory=list, max_length=settings.MAX_MATCHES,
        description="Provider matches as received (text/textSnippet, url, percentMatched, ...).",
    )
    query_words: float = 0
    cost: float = 0
    count: Optional[int] = None
    all_words_matched: Optional[int] = None
    all_percent_matched: Optional[float] = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "json_schema_extra": {"examples": [{
            "contentText": "The quick brown fox jumps over the lazy dog.",
            "rawMatches": [{"text": "quick brown fox jumps", "url": "https://example.com/fox"}],
            "queryWords": 9,
            "cost": 0.03,
        }]},
    }


class LocatedMatchResponse(CamelModel):
    start: int
    end: int
    similarity: float
    confidence: str
    severity: str
    source_url: str
    view_url: Optional[str] = None
    matched_words: Optional[int] = None
    source_words: Optional[int] = None
    match_percent: Optional[float] = None
    tier: str
    provider: str


class ScanSummaryResponse(CamelModel):
    query_words: int
    cost: float
    count: int
    all_words_matched: Optional[int] = None
    all_percent_matched: Optional[float] = None


class ScanVerdictResponse(CamelModel):
    overall_score: float
    status: str


class PlagiarismScanResponse(CamelModel):
    """POST /locate/plagiarism response body."""
    located_matches: list[LocatedMatchResponse]
    summary: ScanSummaryResponse
    verdict: ScanVerdictResponse
    engine_version: str


# ============================================================
# AI DETECTION
# ============================================================

class AIDetectionRequest(CamelModel):
    """POST /locate/ai request body."""
    content_text: str = Field(..., max_length=settings.MAX_TEXT_LENGTH)
    sentences: list[dict[str, Any]] = Field(
        default_factory=list, max_length=settings.MAX_SENTENCES,
        description="Provider sentences in document order (sentenceText, generatedProbability).",
    )
    overall_generated_probability: float = Field(
        0, description="0-1; out-of-range values are clamped like per-sentence probabilities.",
    )


class LocatedSentenceResponse(CamelModel):
    text: str
    score: float
    classification: str
    position_start: int
    position_end: int
    located: bool


class AIDetectionResponse(CamelModel):
    """POST /locate/ai response body."""
    overall_score: float
    classification: str
    sentences: list[LocatedSentenceResponse]
    engine_version: str


# ============================================================
# HEALTH
# ============================================================

class HealthResponse(BaseModel):
    status: str
    version: str
    engine_version: str
