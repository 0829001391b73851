from __future__ import annotations

import pytest

from voicelift.utils.normalize import lower_view, normalize_transcript


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Bench for ate", "bench 4 8"),
        ("squat 100 kg too reps", "squat 100 kg 2 reps"),
        ("won't stop", "won't stop"),
        ("fourteen reps", "fourteen reps"),
        ("10 rep's", "10 reps"),
        ("  Deadlift   140  ", "deadlift 140"),
    ],
)
def test_normalize_transcript(raw: str, expected: str) -> None:
    assert normalize_transcript(raw) == expected


def test_normalize_is_idempotent() -> None:
    once = normalize_transcript("Squat one hundred for five")
    assert normalize_transcript(once) == once


@pytest.mark.parametrize("raw", [None, 12, "", "   "])
def test_normalize_returns_non_text_unchanged(raw: object) -> None:
    assert normalize_transcript(raw) == raw


def test_lower_view_keeps_homophones() -> None:
    assert lower_view("Bench  FOR ate kilo's") == "bench for ate kilos"
