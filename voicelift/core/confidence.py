"""Confirmation reasons and the additive confidence score."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from voicelift.core.constants import (
    HIGH_REPS,
    MISSING_REPS,
    MISSING_WEIGHT,
    NEW_EXERCISE,
    NO_PREVIOUS_SET,
    PROTECTED_REASONS,
    WEIGHT_ON_BODYWEIGHT,
    WEIGHT_UNUSUALLY_HIGH,
    WEIGHT_ZERO,
)
from voicelift.core.extract import ExtractedFields
from voicelift.core.models import SessionContext
from voicelift.core.settings import EngineSettings

logger = logging.getLogger(__name__)

EXERCISE_WEIGHT = 0.4
REPS_WEIGHT = 0.3
LOAD_WEIGHT = 0.3
MEMORY_BONUS = 0.2
CURRENT_EXERCISE_BONUS = 0.1

WEIGHT_BACKFILL_NOTES = {
    "memory_same_all",
    "memory_same_weight",
    "using_same_weight",
    "using_memory_weight",
    "using_last_weight",
    "using_target_weight",
}
REPS_BACKFILL_NOTES = {
    "memory_same_all",
    "memory_same_reps",
    "using_same_reps",
    "using_memory_reps",
    "using_last_reps",
    "using_target_reps",
}


@dataclass
class Assessment:
    needs_confirmation: List[str] = field(default_factory=list)
    confidence_score: float = 0.0
    is_high_confidence: bool = False


def confidence_score(
    exercise: Optional[str],
    reps: Optional[int],
    weight: Optional[float],
    is_bodyweight: bool,
    memory_with_previous: bool,
    current_exercise: Optional[str],
) -> float:
    """Additive ranking score; bonuses can push it past 1.0."""
    score = 0.0
    if exercise:
        score += EXERCISE_WEIGHT
    if reps:
        score += REPS_WEIGHT
    if (weight or 0) > 0 or is_bodyweight:
        score += LOAD_WEIGHT
    if memory_with_previous:
        score += MEMORY_BONUS
    if exercise and current_exercise and exercise.lower() == current_exercise.lower():
        score += CURRENT_EXERCISE_BONUS
    return round(score, 2)


def assess(
    fields: ExtractedFields,
    exercise: Optional[str],
    context: SessionContext,
    exercise_is_bodyweight: bool = False,
    new_candidate: bool = False,
    settings: Optional[EngineSettings] = None,
) -> Assessment:
    """Enumerate confirmation reasons for ``fields`` and score the result.

    May flip ``fields`` to bodyweight when a bodyweight exercise was logged
    with reps but no load.
    """
    settings = settings or EngineSettings()
    notes = set(fields.notes)
    reasons: List[str] = []

    if fields.reps is None and not notes & REPS_BACKFILL_NOTES:
        reasons.append(MISSING_REPS)
    if fields.reps is not None and fields.reps > settings.high_reps_limit:
        reasons.append(HIGH_REPS)

    if fields.weight is None and not fields.is_bodyweight and not notes & WEIGHT_BACKFILL_NOTES:
        if exercise_is_bodyweight and fields.reps:
            fields.set_bodyweight()
            fields.add_note("auto_bodyweight")
        else:
            reasons.append(MISSING_WEIGHT)

    weight = fields.weight
    if (
        exercise_is_bodyweight
        and fields.explicit_weight
        and not fields.is_bodyweight
        and weight is not None
        and weight > settings.bodyweight_weight_limit
    ):
        reasons.append(WEIGHT_ON_BODYWEIGHT)
    if not fields.is_bodyweight and weight is not None and weight > settings.high_weight_limit:
        reasons.append(WEIGHT_UNUSUALLY_HIGH)
    if weight == 0 and not fields.is_bodyweight and not exercise_is_bodyweight:
        reasons.append(WEIGHT_ZERO)
    if fields.memory.used and context.last_logged_set is None:
        reasons.append(NO_PREVIOUS_SET)
    if new_candidate:
        reasons.append(NEW_EXERCISE)

    score = confidence_score(
        exercise,
        fields.reps,
        fields.weight,
        fields.is_bodyweight,
        fields.memory.used and context.last_logged_set is not None,
        context.current_exercise,
    )
    has_load = (fields.weight or 0) > 0 or fields.is_bodyweight
    high = score >= settings.high_confidence_score and bool(exercise) and bool(fields.reps) and has_load
    if high:
        reasons = [reason for reason in reasons if reason in PROTECTED_REASONS]

    logger.debug("Confidence %.2f (high=%s) reasons=%s", score, high, reasons)
    return Assessment(needs_confirmation=reasons, confidence_score=score, is_high_confidence=high)
