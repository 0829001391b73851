"""Fuzzy scoring of spoken exercise names against library entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from voicelift.core.models import ExerciseDefinition

EXACT_SCORE = 1.0
SUBSTRING_SCORE = 0.8
ALL_WORDS_SCORE = 0.6
PARTIAL_WORDS_WEIGHT = 0.4
SUBSEQUENCE_WEIGHT = 0.3
MIN_WORD_LENGTH = 3


@dataclass(frozen=True)
class FuzzyMatch:
    exercise: ExerciseDefinition
    score: float


def _word_overlap(query_tokens: List[str], target_tokens: List[str]) -> float:
    matched = 0
    for query_token in query_tokens:
        if any(query_token in token or token in query_token for token in target_tokens):
            matched += 1
    return matched / len(query_tokens)


def _subsequence_matches(query: str, target: str) -> int:
    cursor = 0
    for char in target:
        if cursor < len(query) and char == query[cursor]:
            cursor += 1
    return cursor


def score(query: str, target: str) -> float:
    """Score how well ``query`` names ``target``, in [0, 1]."""
    query_norm = query.lower().strip()
    target_norm = target.lower().strip()
    if not query_norm or not target_norm:
        return 0.0

    if query_norm == target_norm:
        return EXACT_SCORE
    if query_norm in target_norm:
        return SUBSTRING_SCORE

    query_tokens = [token for token in query_norm.split() if len(token) >= MIN_WORD_LENGTH]
    if query_tokens:
        fraction = _word_overlap(query_tokens, target_norm.split())
        if fraction == 1.0:
            return ALL_WORDS_SCORE
        if fraction > 0:
            return PARTIAL_WORDS_WEIGHT * fraction

    matches = _subsequence_matches(query_norm, target_norm)
    return matches / max(len(query_norm), len(target_norm)) * SUBSEQUENCE_WEIGHT


def exercise_score(query: str, exercise: ExerciseDefinition) -> float:
    """Best score over the canonical name and every alias."""
    return max(score(query, name) for name in exercise.names)


def find_best_matches(
    query: str,
    exercises: Iterable[ExerciseDefinition],
    threshold: float = 0.3,
) -> List[FuzzyMatch]:
    """Exercises scoring at least ``threshold``, best first; ties keep input order."""
    matches = []
    for exercise in exercises:
        best = exercise_score(query, exercise)
        if best >= threshold:
            matches.append(FuzzyMatch(exercise=exercise, score=best))
    matches.sort(key=lambda match: match.score, reverse=True)
    return matches


def find_best_match(
    query: str,
    exercises: Iterable[ExerciseDefinition],
    threshold: float = 0.3,
) -> Optional[ExerciseDefinition]:
    matches = find_best_matches(query, exercises, threshold)
    return matches[0].exercise if matches else None
