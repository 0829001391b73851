from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from voicelift.core.engine import VoiceEngine
from voicelift.core.library import ExerciseLibrary
from voicelift.core.models import NavigationCommand, ParseResult, PlanEntry
from voicelift.core.session import WorkoutSession
from voicelift.core.storage import CustomExerciseStore


@pytest.fixture()
def engine(library: ExerciseLibrary) -> VoiceEngine:
    return VoiceEngine(library)


def test_new_session_starts_at_first_plan_entry(sample_plan: List[PlanEntry]) -> None:
    session = WorkoutSession(plan=sample_plan)
    context = session.context()

    assert context.current_exercise == "Bench Press"
    assert context.current_index == 0
    assert context.target_weight == 80
    assert context.is_first_set is True


def test_step_commits_and_auto_advances(engine: VoiceEngine, sample_plan: List[PlanEntry]) -> None:
    session = WorkoutSession(plan=sample_plan)

    for _ in range(3):
        outcome = session.step(engine, "80 kg for 8")
        assert isinstance(outcome, ParseResult)
        assert outcome.auto_commit is True

    assert len(session.logged) == 3
    assert session.sets_completed("bench press") == 3
    assert session.current_exercise == "Squat"
    assert session.current_index == 1


def test_done_logs_plan_targets(engine: VoiceEngine, sample_plan: List[PlanEntry]) -> None:
    session = WorkoutSession(plan=sample_plan)
    session.step(engine, "done")

    assert session.logged[-1].exercise == "Bench Press"
    assert session.logged[-1].weight == 80
    assert session.logged[-1].reps == 8


def test_navigation_is_applied(engine: VoiceEngine, sample_plan: List[PlanEntry]) -> None:
    session = WorkoutSession(plan=sample_plan)
    outcome = session.step(engine, "next exercise")

    assert isinstance(outcome, NavigationCommand)
    assert session.current_exercise == "Squat"
    assert session.logged == []


def test_results_needing_confirmation_are_not_committed(engine: VoiceEngine) -> None:
    session = WorkoutSession()
    outcome = session.step(engine, "bench press 400 kg for 5")

    assert isinstance(outcome, ParseResult)
    assert outcome.needs_confirmation == ["weight_unusually_high"]
    assert session.logged == []

    session.commit(outcome)
    assert session.logged[-1].weight == 400


def test_off_plan_done_repeats_last_set(engine: VoiceEngine) -> None:
    session = WorkoutSession()
    session.step(engine, "goblet squat 20 kg for 10")
    outcome = session.step(engine, "done")

    assert isinstance(outcome, ParseResult)
    assert outcome.is_quick_complete is True
    assert outcome.weight == 20
    assert outcome.reps == 10
    assert session.recent_exercises == ["Goblet Squat"]
    assert len(session.logged) == 2


def test_commit_rejects_incomplete_sets() -> None:
    session = WorkoutSession()

    with pytest.raises(ValueError):
        session.commit(ParseResult(exercise="Bench Press", weight=None, reps=8))


def test_confirm_new_exercise_saves_and_registers(tmp_path: Path, library: ExerciseLibrary) -> None:
    engine = VoiceEngine(library)
    session = WorkoutSession()
    outcome = session.step(engine, "zercher squat 60 kg for 5")
    assert isinstance(outcome, ParseResult)

    store = CustomExerciseStore(tmp_path / "custom.json")
    saved = session.confirm_new_exercise(outcome, store, library)

    assert saved.canonical_name == "Zercher Squat"
    assert store.exists("Zercher Squat") is True
    assert library.exists("zercher squat") is True

    again = session.step(engine, "zercher squat 60 kg for 5")
    assert isinstance(again, ParseResult)
    assert "new_exercise" not in again.needs_confirmation


def test_confirm_new_exercise_requires_candidate(tmp_path: Path, library: ExerciseLibrary) -> None:
    with pytest.raises(ValueError):
        WorkoutSession().confirm_new_exercise(
            ParseResult(exercise="Squat", weight=100, reps=5),
            CustomExerciseStore(tmp_path / "custom.json"),
            library,
        )
