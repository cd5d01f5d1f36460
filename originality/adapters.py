"""
Provider Adapters

Providers are inconsistent about field names (`text` vs `textsnippet`,
`viewUrl` vs `viewurl`, camelCase vs lowercase). These adapters map a raw
provider dict onto the canonical shapes the core consumes, so the locator
and scorer never see provider spelling. Missing fields become None.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from originality.ai_sentences import SentenceProbability
from originality.pipeline import ProviderMatch
from originality.scorer import coerce_number

# Canonical field -> accepted provider spellings, first non-empty wins
MATCH_FIELDS: dict[str, tuple[str, ...]] = {
    "snippet_text": ("snippetText", "snippet_text", "text", "textSnippet", "textsnippet"),
    "source_url": ("sourceUrl", "source_url", "url"),
    "percent_matched": ("percentMatched", "percent_matched", "percentmatched"),
    "words_matched": ("wordsMatched", "words_matched", "wordsmatched"),
    "source_word_count": ("sourceWordCount", "source_word_count", "urlWords", "urlwords"),
    "view_url": ("viewUrl", "view_url", "viewurl"),
}

SENTENCE_FIELDS: dict[str, tuple[str, ...]] = {
    "sentence_text": ("sentenceText", "sentence_text", "sentence", "text"),
    "generated_probability": ("generatedProbability", "generated_probability", "generated_prob"),
}


def _pick(raw: Mapping[str, Any], names: tuple[str, ...]) -> Any:
    for name in names:
        value = raw.get(name)
        if value is not None and value != "":
            return value
    return None


def _optional_number(value: Any) -> Optional[float]:
    if value is None:
        return None
    return coerce_number(value)


def _optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    return int(coerce_number(value))


def adapt_provider_match(raw: Mapping[str, Any]) -> ProviderMatch:
    """Map one raw plagiarism-provider match onto ProviderMatch."""
    view_url = _pick(raw, MATCH_FIELDS["view_url"])
    return ProviderMatch(
        snippet_text=str(_pick(raw, MATCH_FIELDS["snippet_text"]) or ""),
        source_url=str(_pick(raw, MATCH_FIELDS["source_url"]) or ""),
        percent_matched=_optional_number(_pick(raw, MATCH_FIELDS["percent_matched"])),
        words_matched=_optional_int(_pick(raw, MATCH_FIELDS["words_matched"])),
        source_word_count=_optional_int(_pick(raw, MATCH_FIELDS["source_word_count"])),
        view_url=str(view_url) if view_url is not None else None,
    )


def adapt_sentence(raw: Mapping[str, Any]) -> SentenceProbability:
    """Map one raw AI-detection sentence onto SentenceProbability."""
    return SentenceProbability(
        sentence_text=str(_pick(raw, SENTENCE_FIELDS["sentence_text"]) or ""),
        generated_probability=coerce_number(
            _pick(raw, SENTENCE_FIELDS["generated_probability"])
        ),
    )
