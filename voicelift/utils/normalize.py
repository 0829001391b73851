"""Lexical cleanup of raw speech-to-text transcripts."""

from __future__ import annotations

import re
from typing import Any, List, Pattern, Tuple

from voicelift.core.constants import NUMBER_HOMOPHONES, PLURAL_SMOOTHING

_WHITESPACE_RE = re.compile(r"\s+")


def _word_pattern(words: List[str]) -> Pattern[str]:
    # Apostrophes count as word characters so "won't" keeps its "won".
    alternation = "|".join(re.escape(word) for word in words)
    return re.compile(rf"(?<![\w'])(?:{alternation})(?![\w'])")


_HOMOPHONE_RULES: List[Tuple[Pattern[str], str]] = [
    (_word_pattern(words), digit) for digit, words in NUMBER_HOMOPHONES
]
_PLURAL_RULES: List[Tuple[Pattern[str], str]] = [
    (re.compile(rf"\b{re.escape(word)}'s\b"), f"{word}s") for word in PLURAL_SMOOTHING
]


def lower_view(text: str) -> str:
    """Lowercased transcript with collapsed whitespace and smoothed plurals."""
    value = _WHITESPACE_RE.sub(" ", text.lower()).strip()
    for pattern, replacement in _PLURAL_RULES:
        value = pattern.sub(replacement, value)
    return value


def normalize_transcript(text: Any) -> Any:
    """Normalize a transcript for number extraction.

    Standalone homophones become digits ("bench for ate" -> "bench 4 8"); longer
    number words such as "fourteen" are left alone. Non-string input is
    returned unchanged, as is blank input. Normalizing twice is a no-op.
    """
    if not isinstance(text, str) or not text.strip():
        return text
    value = lower_view(text)
    for pattern, digit in _HOMOPHONE_RULES:
        value = pattern.sub(digit, value)
    return value
