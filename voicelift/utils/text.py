"""Text helpers."""

from __future__ import annotations

import re
from typing import Iterable, List, Set

_TOKEN_RE = re.compile(r"[a-z0-9']+")


def tokenize(value: str) -> List[str]:
    """Lowercase word tokens; hyphens and punctuation split words."""
    return _TOKEN_RE.findall(value.lower())


def word_stems(token: str) -> Set[str]:
    """The token plus its naive singular forms ("presses" -> "presse", "press")."""
    stems = {token}
    if len(token) > 3 and token.endswith("es"):
        stems.add(token[:-2])
    if len(token) > 2 and token.endswith("s"):
        stems.add(token[:-1])
    return stems


def has_keyword(tokens: Iterable[str], keywords: Iterable[str]) -> bool:
    vocabulary = set(keywords)
    return any(word_stems(token) & vocabulary for token in tokens)


def title_case(words: Iterable[str]) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in words if word)
