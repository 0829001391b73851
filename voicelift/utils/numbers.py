"""Spoken number words ("one eighty five", "twelve") to integers."""

from __future__ import annotations

import re
from typing import Dict, Optional

from voicelift.utils.text import tokenize

UNITS: Dict[str, int] = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

TEENS: Dict[str, int] = {
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
}

TENS: Dict[str, int] = {
    "twenty": 20,
    "thirty": 30,
    "forty": 40,
    "fifty": 50,
    "sixty": 60,
    "seventy": 70,
    "eighty": 80,
    "ninety": 90,
}

NUMBER_WORDS: Dict[str, int] = {**UNITS, **TEENS, **TENS}

_WORD_ALTERNATION = "|".join(sorted([*NUMBER_WORDS, "hundred"], key=len, reverse=True))

# Regex fragment matching a run of number words, e.g. "one eighty-five".
SPOKEN_NUMBER = rf"(?:{_WORD_ALTERNATION})(?:[\s-]+(?:{_WORD_ALTERNATION}|and))*\b"

_SPOKEN_RE = re.compile(rf"\b{SPOKEN_NUMBER}")


def words_to_number(text: Optional[str]) -> Optional[int]:
    """Parse the leading number in ``text``.

    A digit token wins outright. Otherwise number words are read until the
    first word that is not one; "one eighty five" follows the gym idiom and
    reads as 185. Returns None when nothing numeric was said.
    """
    if text is None:
        return None
    current = 0
    seen = False
    previous = None
    for token in tokenize(str(text)):
        if token.isdigit():
            return int(token) if not seen else current
        if token == "and" and seen:
            continue
        if token == "hundred":
            current = (current or 1) * 100
            seen = True
            previous = token
            continue
        value = NUMBER_WORDS.get(token)
        if value is None:
            break
        if previous in UNITS and current < 10 and value >= 10:
            # "one eighty" / "two fifteen"
            current = current * 100 + value
        elif previous in TENS and token in UNITS:
            current += value
        elif seen and previous != "hundred":
            break
        else:
            current += value
        seen = True
        previous = token
    if not seen:
        return None
    return current


def find_spoken_number(text: str) -> Optional[int]:
    """First run of number words anywhere in ``text``."""
    match = _SPOKEN_RE.search(text.lower())
    if not match:
        return None
    return words_to_number(match.group(0))
