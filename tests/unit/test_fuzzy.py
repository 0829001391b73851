from __future__ import annotations

import pytest

from voicelift.core.fuzzy import find_best_match, find_best_matches, score
from voicelift.core.models import ExerciseDefinition


@pytest.mark.parametrize(
    ("query", "target", "expected"),
    [
        ("bench press", "Bench Press", 1.0),
        ("bench", "Bench Press", 0.8),
        ("press bench", "Bench Press", 0.6),
        ("bench curl", "Bench Press", 0.2),
        ("", "Bench Press", 0.0),
    ],
)
def test_score(query: str, target: str, expected: float) -> None:
    assert score(query, target) == pytest.approx(expected)


def test_subsequence_score_stays_below_word_scores() -> None:
    assert 0 < score("sqt", "Squat") <= 0.3


def test_find_best_matches_uses_aliases_and_sorts() -> None:
    entries = [
        ExerciseDefinition(canonical_name="Incline Bench Press"),
        ExerciseDefinition(canonical_name="Bench Press", aliases=("flat bench",)),
        ExerciseDefinition(canonical_name="Squat"),
    ]
    matches = find_best_matches("flat bench", entries, threshold=0.3)

    assert matches[0].exercise.canonical_name == "Bench Press"
    assert matches[0].score == 1.0
    assert all(match.exercise.canonical_name != "Squat" for match in matches)


def test_find_best_match_returns_none_below_threshold() -> None:
    entries = [ExerciseDefinition(canonical_name="Squat")]
    assert find_best_match("bicep curl", entries, threshold=0.5) is None


def test_find_best_matches_keeps_input_order_on_ties() -> None:
    hammer = ExerciseDefinition(canonical_name="Hammer Curl")
    cable = ExerciseDefinition(canonical_name="Cable Curl")

    forward = find_best_matches("curl", [hammer, cable])
    backward = find_best_matches("curl", [cable, hammer])

    assert [match.score for match in forward] == [0.8, 0.8]
    assert [match.exercise.canonical_name for match in forward] == ["Hammer Curl", "Cable Curl"]
    assert [match.exercise.canonical_name for match in backward] == ["Cable Curl", "Hammer Curl"]
    assert find_best_match("curl", [cable, hammer]) == cable
