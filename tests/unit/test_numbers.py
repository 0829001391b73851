from __future__ import annotations

from typing import Optional

import pytest

from voicelift.utils.numbers import find_spoken_number, words_to_number


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("twelve", 12),
        ("twenty five", 25),
        ("forty-five", 45),
        ("one hundred", 100),
        ("hundred", 100),
        ("one hundred and twenty", 120),
        ("one eighty five", 185),
        ("two fifteen", 215),
        ("five five", 5),
        ("12", 12),
        ("banana", None),
        (None, None),
    ],
)
def test_words_to_number(text: Optional[str], expected: Optional[int]) -> None:
    assert words_to_number(text) == expected


def test_find_spoken_number_scans_whole_text() -> None:
    assert find_spoken_number("Squat at one eighty five please") == 185
    assert find_spoken_number("bench press") is None
