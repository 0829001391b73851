"""Mutable workout state that feeds the engine and records its results."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, List, Optional

from voicelift.core.models import (
    ExerciseDefinition,
    LoggedSet,
    NavigationCommand,
    ParseOutcome,
    ParseResult,
    PlanEntry,
    SessionContext,
)

if TYPE_CHECKING:
    from voicelift.core.engine import VoiceEngine
    from voicelift.core.library import ExerciseLibrary
    from voicelift.core.storage import CustomExerciseStore

logger = logging.getLogger(__name__)


class WorkoutSession:
    """One workout: the plan position, committed sets and recent exercises.

    The engine only reads a :class:`SessionContext` snapshot; this class is the
    caller that commits results and applies navigation between utterances.
    """

    def __init__(self, plan: Optional[List[PlanEntry]] = None, mode: Optional[str] = None, auto_advance: bool = True):
        self.plan: List[PlanEntry] = list(plan or [])
        self.mode = mode
        self.auto_advance = auto_advance
        self.current_index: Optional[int] = 0 if self.plan else None
        self.current_exercise: Optional[str] = self.plan[0].name if self.plan else None
        self.logged: List[LoggedSet] = []
        self.recent_exercises: List[str] = []
        self.progress: Dict[str, int] = {}

    def plan_index(self, name: str) -> Optional[int]:
        for index, entry in enumerate(self.plan):
            if entry.name.lower() == name.lower():
                return index
        return None

    def last_set_for(self, name: str) -> Optional[LoggedSet]:
        for logged in reversed(self.logged):
            if logged.exercise.lower() == name.lower():
                return logged
        return None

    def sets_completed(self, name: str) -> int:
        return self.progress.get(name.lower(), 0)

    def context(self) -> SessionContext:
        """Snapshot for the next utterance.

        Off-plan exercises use their last logged values as targets, so "done"
        repeats the previous set.
        """
        target_weight = target_reps = None
        if self.current_exercise and self.plan_index(self.current_exercise) is None:
            previous = self.last_set_for(self.current_exercise)
            if previous is not None:
                target_weight, target_reps = previous.weight, previous.reps
        return SessionContext(
            current_exercise=self.current_exercise,
            target_weight=target_weight,
            target_reps=target_reps,
            last_logged_set=self.logged[-1] if self.logged else None,
            recent_exercises=list(self.recent_exercises),
            plan=list(self.plan),
            current_index=self.current_index if self.plan_index(self.current_exercise or "") is not None else None,
            mode=self.mode,
        )

    def commit(self, result: ParseResult) -> LoggedSet:
        """Record a parsed set and make its exercise current."""
        if not result.exercise or result.reps is None or (result.weight is None and not result.is_bodyweight):
            raise ValueError("cannot commit a set without exercise, weight and reps")
        logged = LoggedSet(
            exercise=result.exercise,
            weight=0.0 if result.is_bodyweight else float(result.weight or 0),
            reps=int(result.reps),
            is_bodyweight=result.is_bodyweight,
        )
        self.logged.append(logged)
        key = logged.exercise.lower()
        self.progress[key] = self.progress.get(key, 0) + 1
        if key not in (name.lower() for name in self.recent_exercises):
            self.recent_exercises.append(logged.exercise)

        self.current_exercise = logged.exercise
        index = self.plan_index(logged.exercise)
        if index is not None:
            self.current_index = index
            if self.auto_advance and self.progress[key] >= self.plan[index].target_sets and index + 1 < len(self.plan):
                self._move_to(index + 1)
        logger.debug("Committed %s %s x %s", logged.exercise, logged.weight, logged.reps)
        return logged

    def apply(self, command: NavigationCommand) -> bool:
        if not command.accepted or command.target_index is None:
            return False
        self._move_to(command.target_index)
        return True

    def _move_to(self, index: int) -> None:
        self.current_index = index
        self.current_exercise = self.plan[index].name
        logger.debug("Moved to plan entry %d (%s)", index, self.current_exercise)

    def confirm_new_exercise(
        self,
        result: ParseResult,
        store: "CustomExerciseStore",
        library: "ExerciseLibrary",
    ) -> ExerciseDefinition:
        """Persist a new-exercise candidate and make it resolvable."""
        if result.suggested_exercise is None:
            raise ValueError("result does not propose a new exercise")
        saved = store.save(result.suggested_exercise)
        library.add(saved)
        return saved

    def step(self, engine: "VoiceEngine", raw: str) -> ParseOutcome:
        """Parse ``raw`` and apply it when no confirmation is needed."""
        outcome = engine.parse(raw, self.context())
        if isinstance(outcome, NavigationCommand):
            self.apply(outcome)
        elif isinstance(outcome, ParseResult) and outcome.auto_commit:
            self.commit(outcome)
        return outcome
