from __future__ import annotations

from typing import List

import pytest

from voicelift.core.constants import SKIP_EXERCISE, SKIP_SET
from voicelift.core.intents import (
    COMPLETION,
    LOG_SET,
    classify_intent,
    command_text,
    detect_completion,
    detect_navigation,
    navigate,
)
from voicelift.core.models import PlanEntry, SessionContext


def test_command_text_strips_punctuation() -> None:
    assert command_text("Done!") == "done"
    assert command_text("  That's   it. ") == "that's it"
    assert command_text(None) == ""  # type: ignore[arg-type]


@pytest.mark.parametrize("text", ["done", "Finished.", "that's it", "All done!"])
def test_whole_utterance_completion_without_exercise(text: str) -> None:
    assert detect_completion(text, SessionContext()) is not None


def test_embedded_completion_needs_active_exercise() -> None:
    active = SessionContext(current_exercise="Squat")

    assert detect_completion("okay I'm done", SessionContext()) is None
    assert detect_completion("okay I'm done", active) == "done"
    assert detect_completion("all done with that", active) == "all done"
    assert detect_completion("abandoned", active) is None


@pytest.mark.parametrize(
    ("text", "kind"),
    [
        ("skip this set", SKIP_SET),
        ("Next set", SKIP_SET),
        ("next", SKIP_EXERCISE),
        ("let's skip it", SKIP_EXERCISE),
        ("go to next please", SKIP_EXERCISE),
    ],
)
def test_detect_navigation(text: str, kind: str) -> None:
    assert detect_navigation(text) == kind


def test_navigation_words_with_numbers_are_not_commands() -> None:
    assert detect_navigation("next 80 kg for 5") is None
    assert detect_navigation("bench press 80 for 8") is None


def test_completion_takes_priority() -> None:
    context = SessionContext(current_exercise="Squat")

    assert classify_intent("done, next", context).kind == COMPLETION
    assert classify_intent("skip", context).kind == SKIP_EXERCISE
    assert classify_intent("squat 100 for 5", context).kind == LOG_SET
    assert classify_intent("squat 100 for 5", context).is_command is False


def test_navigate_without_exercise() -> None:
    command = navigate(SKIP_SET, SessionContext(), raw_text="skip set")

    assert command.accepted is False
    assert command.message == "No exercise to skip"
    assert command.raw_text == "skip set"


def test_navigate_finds_index_by_name(sample_plan: List[PlanEntry]) -> None:
    context = SessionContext(current_exercise="bench press", plan=sample_plan)
    command = navigate(SKIP_SET, context)

    assert command.accepted is True
    assert command.target_index == 1
    assert command.message == "Moving to Squat"


def test_navigate_off_plan_exercise_is_rejected(sample_plan: List[PlanEntry]) -> None:
    context = SessionContext(current_exercise="Deadlift", plan=sample_plan)
    command = navigate(SKIP_EXERCISE, context)

    assert command.accepted is False
    assert command.message == "Last exercise in workout"
