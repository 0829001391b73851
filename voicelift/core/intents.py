"""Completion and navigation commands.

Both command families are word-boundary anchored and always take priority
over exercise resolution, so "done" is never fuzzy-matched as an exercise.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Tuple

from voicelift.core.constants import COMPLETION_PHRASES, NAVIGATION_RULES
from voicelift.core.models import NavigationCommand, SessionContext
from voicelift.utils.text import tokenize

logger = logging.getLogger(__name__)

COMPLETION = "completion"
LOG_SET = "log_set"


def _phrase_pattern(phrase: str) -> Pattern[str]:
    return re.compile(rf"(?<![\w']){re.escape(phrase)}(?![\w'])")


_COMPLETION_TABLE: List[Tuple[str, Pattern[str]]] = [
    (phrase, _phrase_pattern(phrase)) for phrase in sorted(COMPLETION_PHRASES, key=len, reverse=True)
]

_NAVIGATION_TABLE: List[Tuple[str, str, Pattern[str]]] = sorted(
    ((phrase, kind, _phrase_pattern(phrase)) for kind, phrases in NAVIGATION_RULES for phrase in phrases),
    key=lambda row: len(row[0]),
    reverse=True,
)


@dataclass(frozen=True)
class Intent:
    kind: str
    phrase: Optional[str] = None

    @property
    def is_command(self) -> bool:
        return self.kind != LOG_SET


def command_text(text: str) -> str:
    """Lowercased words only; punctuation from speech-to-text is dropped."""
    return " ".join(tokenize(text)) if isinstance(text, str) else ""


def detect_completion(text: str, context: SessionContext) -> Optional[str]:
    """The completion phrase in ``text``, or None.

    A phrase counts when it is the whole utterance, or when it appears as a
    standalone phrase while an exercise is active.
    """
    clean = command_text(text)
    if not clean:
        return None
    for phrase, pattern in _COMPLETION_TABLE:
        if clean == phrase:
            return phrase
    if not context.current_exercise:
        return None
    for phrase, pattern in _COMPLETION_TABLE:
        if pattern.search(clean):
            return phrase
    return None


def detect_navigation(text: str) -> Optional[str]:
    """``skip_set``/``skip_exercise`` when ``text`` is a navigation command."""
    clean = command_text(text)
    if not clean:
        return None
    for phrase, kind, _ in _NAVIGATION_TABLE:
        if clean == phrase:
            return kind
    if any(char.isdigit() for char in clean):
        return None
    for phrase, kind, pattern in _NAVIGATION_TABLE:
        if pattern.search(clean):
            return kind
    return None


def classify_intent(text: str, context: SessionContext) -> Intent:
    phrase = detect_completion(text, context)
    if phrase is not None:
        return Intent(COMPLETION, phrase)
    kind = detect_navigation(text)
    if kind is not None:
        return Intent(kind)
    return Intent(LOG_SET)


def navigate(kind: str, context: SessionContext, raw_text: str = "") -> NavigationCommand:
    """Move past the current plan entry; fails softly at the end of the plan."""
    index = context.current_index
    if index is None and context.current_exercise:
        index = next(
            (i for i, name in enumerate(context.plan_names) if name.lower() == context.current_exercise.lower()),
            None,
        )
    if index is None and not context.current_exercise:
        logger.debug("Navigation %s rejected: no current exercise", kind)
        return NavigationCommand(kind=kind, accepted=False, message="No exercise to skip", raw_text=raw_text)
    if index is None or index + 1 >= len(context.plan):
        logger.debug("Navigation %s rejected: no next plan entry", kind)
        return NavigationCommand(kind=kind, accepted=False, message="Last exercise in workout", raw_text=raw_text)
    target = context.plan[index + 1]
    return NavigationCommand(
        kind=kind,
        accepted=True,
        target_index=index + 1,
        message=f"Moving to {target.name}",
        raw_text=raw_text,
    )
