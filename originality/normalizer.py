"""
Text Normalizer — Comparison Form with Position Map

Canonicalizes text for snippet comparison:
  - lowercased
  - ASCII alphanumerics kept
  - whitespace runs collapsed to a single space
  - everything else (punctuation, symbols, non-ASCII letters) dropped

Every kept character records its index in the source string, so a hit
in the normalized text can be mapped back onto the original document.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Normalized:
    """Normalized text plus the original index of every kept character."""
    text: str
    position_map: list[int] = field(default_factory=list)

    def __iter__(self):
        # Allows `text, position_map = normalize(s)`
        yield self.text
        yield self.position_map

    def __len__(self) -> int:
        return len(self.text)


def _is_ascii_alnum(ch: str) -> bool:
    return len(ch) == 1 and ch.isascii() and ch.isalnum()


def normalize(text: str) -> Normalized:
    """
    Normalize text into its comparison form.

    Returns:
        Normalized(text, position_map) where len(position_map) == len(text)
        and position_map is non-decreasing.
    """
    chars: list[str] = []
    positions: list[int] = []

    for index, ch in enumerate(text):
        lowered = ch.lower()
        if _is_ascii_alnum(lowered):
            chars.append(lowered)
            positions.append(index)
        elif ch.isspace():
            if not chars or chars[-1] != " ":
                chars.append(" ")
                positions.append(index)

    return Normalized("".join(chars), positions)


def strip_spaces(normalized_text: str) -> tuple[str, list[int]]:
    """
    Remove spaces from already-normalized text.

    Returns the space-free string and, for each of its characters,
    the index of that character in normalized_text.
    """
    kept = [(i, ch) for i, ch in enumerate(normalized_text) if ch != " "]
    return "".join(ch for _, ch in kept), [i for i, _ in kept]
