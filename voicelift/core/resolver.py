"""Decide which exercise an utterance refers to.

Resolution is an ordered list of strategies. Each takes a
:class:`ResolutionRequest` and returns a :class:`ResolvedExercise` or None;
the first hit wins:

1. the active workout plan
2. exercises logged earlier in the session, strict bound (quick-start)
3. the same, at the mode threshold (quick-start)
4. the full exercise library
5. a heuristic "new exercise" candidate (quick-start)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from voicelift.core.constants import (
    COMPLETION_PHRASES,
    EXERCISE_KEYWORDS,
    MAX_CANDIDATE_WORDS,
    NON_EXERCISE_WORDS,
    NUMBER_HOMOPHONES,
    QUERY_STOPWORDS,
    QUICK_START,
    REP_WORDS,
    UNIT_WORDS,
)
from voicelift.core.fuzzy import find_best_matches
from voicelift.core.library import ExerciseLibrary
from voicelift.core.models import ExerciseDefinition, ResolvedExercise, SessionContext
from voicelift.core.settings import EngineSettings
from voicelift.utils.normalize import lower_view
from voicelift.utils.numbers import NUMBER_WORDS
from voicelift.utils.text import has_keyword, title_case, tokenize

logger = logging.getLogger(__name__)

# Phrases that carry set data rather than an exercise name.
_NON_NAME_PHRASES = [
    r"same as before",
    r"same (?:weight|kg|kilos|reps)",
    r"one more",
    r"another set",
    r"repeat",
    r"again",
    r"same",
    r"(?:add|subtract)",
    r"(?:up|down) to",
    r"body ?weight",
    r"body wt",
    r"bw",
    *[re.escape(phrase) for phrase in COMPLETION_PHRASES],
]
_NON_NAME_RE = re.compile(rf"\b(?:{'|'.join(_NON_NAME_PHRASES)})\b")
_FUSED_UNIT_RE = re.compile(r"^\d+(?:kg|kgs|kilos?|lbs?|x)$")

_HOMOPHONE_WORDS = {word for _, words in NUMBER_HOMOPHONES for word in words}
_DROP_TOKENS = UNIT_WORDS | REP_WORDS | QUERY_STOPWORDS | set(NUMBER_WORDS) | _HOMOPHONE_WORDS | {
    "hundred",
    "weight",
}


def exercise_query(text: str) -> str:
    """Strip numbers, units and command words, leaving the spoken exercise name."""
    if not isinstance(text, str):
        return ""
    stripped = _NON_NAME_RE.sub(" ", lower_view(text))
    kept = [
        token
        for token in tokenize(stripped)
        if not token.isdigit() and token not in _DROP_TOKENS and not _FUSED_UNIT_RE.match(token)
    ]
    return " ".join(kept)


def looks_like_exercise(query: str) -> bool:
    """True when the query contains a body-part or movement word."""
    return has_keyword(tokenize(query), EXERCISE_KEYWORDS)


@dataclass
class ResolutionRequest:
    query: str
    raw_text: str
    plan_names: List[str]
    library: ExerciseLibrary
    mode: str
    recent_exercises: List[str] = field(default_factory=list)
    settings: EngineSettings = field(default_factory=EngineSettings)

    @property
    def quick_start(self) -> bool:
        return self.mode == QUICK_START

    def plan_index(self, name: str) -> Optional[int]:
        for index, plan_name in enumerate(self.plan_names):
            if plan_name.lower() == name.lower():
                return index
        return None


Strategy = Callable[[ResolutionRequest], Optional[ResolvedExercise]]


def from_plan(request: ResolutionRequest) -> Optional[ResolvedExercise]:
    entries = [ExerciseDefinition(canonical_name=name) for name in request.plan_names]
    matches = find_best_matches(request.query, entries, request.settings.threshold_for(request.mode))
    if not matches:
        return None
    best = matches[0]
    return ResolvedExercise(
        name=best.exercise.canonical_name,
        in_workout_plan=True,
        index=entries.index(best.exercise),
        score=best.score,
        strategy="plan",
    )


def _unique(names: Sequence[str]) -> List[str]:
    seen = set()
    unique = []
    for name in names:
        if name.lower() not in seen:
            seen.add(name.lower())
            unique.append(name)
    return unique


def _match_recent(request: ResolutionRequest, threshold: float, minimum: float, strategy: str) -> Optional[ResolvedExercise]:
    if not request.quick_start or not request.recent_exercises:
        return None
    entries = [ExerciseDefinition(canonical_name=name) for name in _unique(request.recent_exercises)]
    matches = find_best_matches(request.query, entries, threshold)
    if not matches or matches[0].score < minimum:
        return None
    name = matches[0].exercise.canonical_name
    index = request.plan_index(name)
    return ResolvedExercise(
        name=name,
        in_workout_plan=index is not None,
        index=index,
        score=matches[0].score,
        is_from_recent_session=True,
        strategy=strategy,
    )


def from_recent_session(request: ResolutionRequest) -> Optional[ResolvedExercise]:
    settings = request.settings
    return _match_recent(request, settings.recent_threshold, settings.recent_high_confidence, "recent_high")


def from_recent_session_loose(request: ResolutionRequest) -> Optional[ResolvedExercise]:
    threshold = request.settings.threshold_for(request.mode)
    return _match_recent(request, threshold, threshold, "recent")


def from_library(request: ResolutionRequest) -> Optional[ResolvedExercise]:
    settings = request.settings
    threshold = settings.library_quick_threshold if request.quick_start else settings.threshold_for(request.mode)
    matches = find_best_matches(request.query, request.library.all_entries(), threshold)
    if not matches:
        return None
    best = matches[0]
    name = best.exercise.canonical_name
    if not request.quick_start and not request.library.exists(name):
        return None
    index = request.plan_index(name)
    return ResolvedExercise(
        name=name,
        in_workout_plan=index is not None,
        index=index,
        score=best.score,
        is_from_library=True,
        strategy="library",
    )


def new_candidate_name(raw_text: str, query: str) -> Optional[str]:
    """Title-cased name for an exercise the library does not know, or None."""
    lowered = lower_view(raw_text) if isinstance(raw_text, str) else ""
    tokens = tokenize(lowered)
    if not query or not tokens:
        return None
    if lowered[:1].isdigit():
        return None
    if any(re.search(rf"\b{re.escape(phrase)}\b", lowered) for phrase in COMPLETION_PHRASES):
        return None
    if any(token in NON_EXERCISE_WORDS for token in tokens):
        return None
    words = query.split()[:MAX_CANDIDATE_WORDS]
    if not has_keyword(words, EXERCISE_KEYWORDS):
        return None
    return title_case(words)


def new_exercise_candidate(request: ResolutionRequest) -> Optional[ResolvedExercise]:
    if not request.quick_start:
        return None
    name = new_candidate_name(request.raw_text, request.query)
    if name is None:
        return None
    return ResolvedExercise(name=name, is_new_candidate=True, strategy="new_candidate")


STRATEGIES: List[Tuple[str, Strategy]] = [
    ("plan", from_plan),
    ("recent_high", from_recent_session),
    ("recent", from_recent_session_loose),
    ("library", from_library),
    ("new_candidate", new_exercise_candidate),
]


def resolve(
    text: str,
    plan_names: Sequence[str],
    library: ExerciseLibrary,
    mode: str,
    recent_exercises: Sequence[str] = (),
    settings: Optional[EngineSettings] = None,
) -> Optional[ResolvedExercise]:
    """Resolve the exercise named in ``text``; None when nothing qualifies."""
    query = exercise_query(text)
    if not query:
        return None
    request = ResolutionRequest(
        query=query,
        raw_text=text,
        plan_names=list(plan_names),
        library=library,
        mode=mode,
        recent_exercises=list(recent_exercises),
        settings=settings or EngineSettings(),
    )
    for name, strategy in STRATEGIES:
        resolved = strategy(request)
        if resolved is not None:
            logger.debug("Resolved %r to %s via %s (score %.2f)", query, resolved.name, name, resolved.score)
            return resolved
    logger.debug("No exercise found for %r in %s mode", query, mode)
    return None


def dumbbell_false_positive(raw_text: str, resolved: Optional[ResolvedExercise], context: SessionContext) -> bool:
    """True when a bare "dumb"/"dumbbell" is really a mis-heard "done"."""
    if resolved is None or "dumb" not in resolved.name.lower():
        return False
    if lower_view(raw_text) not in ("dumb", "dumbbell"):
        return False
    return bool(context.current_exercise) and context.has_targets


def suggest_exercises(query: str, library: ExerciseLibrary, settings: Optional[EngineSettings] = None) -> List[str]:
    """Closest library names for a query the library does not contain."""
    settings = settings or EngineSettings()
    matches = find_best_matches(query, library.all_entries(), settings.suggestion_threshold)
    return [match.exercise.canonical_name for match in matches[: settings.max_suggestions]]
