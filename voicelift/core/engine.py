"""Voice command interpretation: one transcript plus context to one outcome."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Optional

from voicelift.core.confidence import assess, confidence_score
from voicelift.core.constants import GUIDED, QUICK_START
from voicelift.core.extract import extract_fields
from voicelift.core.intents import COMPLETION, LOG_SET, classify_intent, navigate
from voicelift.core.library import ExerciseLibrary
from voicelift.core.models import (
    ExerciseDefinition,
    ParseFailure,
    ParseOutcome,
    ParseResult,
    ResolvedExercise,
    SessionContext,
)
from voicelift.core.resolver import (
    dumbbell_false_positive,
    exercise_query,
    looks_like_exercise,
    resolve,
    suggest_exercises,
)
from voicelift.core.settings import EngineSettings
from voicelift.core.storage import build_custom_definition

__all__ = ["EngineSettings", "VoiceEngine", "parse"]

logger = logging.getLogger(__name__)

NOTHING_TO_PARSE = "Nothing to parse"
PARSING_FAILED = "Parsing failed"
NOT_UNDERSTOOD = "Could not understand, please try again"
NOT_IN_WORKOUT = "Exercise not found in your workout or library"
NO_ACTIVE_EXERCISE = "No active exercise. Please say the exercise name."
SPECIFY_EVERYTHING = "Please specify exercise, weight and reps"
SPECIFY_WEIGHT_AND_REPS = "Please specify weight and reps"


@lru_cache(maxsize=1)
def default_library() -> ExerciseLibrary:
    return ExerciseLibrary()


class VoiceEngine:
    """Parse utterances against one exercise library.

    ``parse`` never raises: anything unexpected is logged and returned as a
    :class:`ParseFailure`.
    """

    def __init__(self, library: Optional[ExerciseLibrary] = None, settings: Optional[EngineSettings] = None) -> None:
        self.library = library if library is not None else default_library()
        self.settings = settings or EngineSettings()

    def mode_for(self, context: SessionContext) -> str:
        if context.mode is not None:
            return context.mode
        if self.settings.default_mode is not None:
            return self.settings.default_mode
        return context.effective_mode

    def parse(self, raw: object, context: Optional[SessionContext] = None) -> ParseOutcome:
        if not isinstance(raw, str) or not raw.strip():
            return ParseFailure(NOTHING_TO_PARSE, raw_text=raw if isinstance(raw, str) else "")
        context = context if context is not None else SessionContext()
        try:
            return self._parse(raw, context)
        except Exception:
            logger.exception("Parsing failed for %r", raw)
            return ParseFailure(PARSING_FAILED, raw_text=raw)

    def _parse(self, raw: str, context: SessionContext) -> ParseOutcome:
        mode = self.mode_for(context)
        intent = classify_intent(raw, context)
        logger.debug("Utterance %r classified as %s in %s mode", raw, intent.kind, mode)
        if intent.kind == COMPLETION:
            return self._complete(raw, context, mode, "completion")
        if intent.kind != LOG_SET:
            return navigate(intent.kind, context, raw_text=raw)

        query = exercise_query(raw)
        resolved = None
        if query:
            resolved = resolve(raw, context.plan_names, self.library, mode, context.recent_exercises, self.settings)
        if dumbbell_false_positive(raw, resolved, context):
            logger.debug("Treating %r as a mis-heard completion", raw)
            return self._complete(raw, context, mode, "misheard_completion")

        notes: List[str] = []
        if resolved is not None:
            exercise = resolved.name
        elif context.current_exercise and (not query or not looks_like_exercise(query)):
            exercise = context.current_exercise
            notes.append("using_current_exercise")
        else:
            logger.debug("No exercise for %r (query %r)", raw, query)
            if mode == GUIDED and query and looks_like_exercise(query):
                return ParseFailure(NOT_IN_WORKOUT, raw_text=raw, notes=("exercise_unresolved",))
            return ParseFailure(NOT_UNDERSTOOD, raw_text=raw, notes=("exercise_unresolved",))

        return self._build_result(raw, context, exercise, resolved, query, notes)

    def _build_result(
        self,
        raw: str,
        context: SessionContext,
        exercise: str,
        resolved: Optional[ResolvedExercise],
        query: str,
        notes: List[str],
    ) -> ParseOutcome:
        new_candidate = resolved is not None and resolved.is_new_candidate
        suggested: Optional[ExerciseDefinition] = None
        suggestions: List[str] = []
        if new_candidate:
            suggested = build_custom_definition(exercise)
            suggestions = suggest_exercises(query, self.library, self.settings)
            is_bodyweight_exercise = suggested.is_bodyweight
        else:
            is_bodyweight_exercise = self.library.is_bodyweight(exercise)

        fields = extract_fields(raw, context, exercise_is_bodyweight=is_bodyweight_exercise)
        assessment = assess(
            fields,
            exercise,
            context,
            exercise_is_bodyweight=is_bodyweight_exercise,
            new_candidate=new_candidate,
            settings=self.settings,
        )
        if fields.reps is None and not assessment.needs_confirmation:
            return ParseFailure(NOT_UNDERSTOOD, raw_text=raw, notes=tuple(notes + fields.notes))

        return ParseResult(
            exercise=exercise,
            weight=fields.weight,
            reps=fields.reps,
            is_bodyweight=fields.is_bodyweight,
            needs_confirmation=assessment.needs_confirmation,
            notes=notes + fields.notes,
            confidence_score=assessment.confidence_score,
            is_high_confidence=assessment.is_high_confidence,
            raw_text=raw,
            unit=fields.unit,
            resolution=resolved,
            suggested_exercise=suggested,
            suggestions=suggestions,
        )

    def _complete(self, raw: str, context: SessionContext, mode: str, note: str) -> ParseOutcome:
        """Log the current exercise at its targets, bypassing extraction."""
        exercise = context.current_exercise
        if not exercise:
            message = SPECIFY_EVERYTHING if mode == QUICK_START else NO_ACTIVE_EXERCISE
            return ParseFailure(message, raw_text=raw, notes=(note,))
        if not context.has_targets:
            return ParseFailure(SPECIFY_WEIGHT_AND_REPS, raw_text=raw, notes=(note,))

        is_bodyweight = self.library.is_bodyweight(exercise) and context.target_weight == 0
        score = confidence_score(exercise, context.target_reps, context.target_weight, is_bodyweight, False, exercise)
        return ParseResult(
            exercise=exercise,
            weight=context.target_weight,
            reps=context.target_reps,
            is_bodyweight=is_bodyweight,
            is_quick_complete=True,
            notes=[note],
            confidence_score=score,
            is_high_confidence=score >= self.settings.high_confidence_score,
            raw_text=raw,
        )


def parse(
    raw: object,
    context: Optional[SessionContext] = None,
    library: Optional[ExerciseLibrary] = None,
    settings: Optional[EngineSettings] = None,
) -> ParseOutcome:
    """Parse one utterance; see :class:`VoiceEngine`."""
    return VoiceEngine(library, settings).parse(raw, context)
