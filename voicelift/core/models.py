"""Data models shared by the engine, the session helper and the CLI."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple, Union

from voicelift.core.constants import GUIDED, MODES, QUICK_START


def _pick(data: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


@dataclass(frozen=True)
class ExerciseDefinition:
    """One exercise in the library, either from the core catalog or user-defined."""

    canonical_name: str
    aliases: Tuple[str, ...] = ()
    group_id: str = "full-body"
    is_bodyweight: bool = False
    origin: str = "core"
    equipment: str = "Other"
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def names(self) -> List[str]:
        """Canonical name followed by every alias."""
        return [self.canonical_name, *self.aliases]

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["aliases"] = list(self.aliases)
        return payload

    @classmethod
    def from_dict(cls, data: Dict[str, Any], origin: str = "custom") -> "ExerciseDefinition":
        name = str(data.get("canonical_name") or data.get("name") or "").strip()
        if not name:
            raise ValueError("exercise definition needs a name")
        aliases = tuple(str(alias).lower().strip() for alias in data.get("aliases") or [] if str(alias).strip())
        return cls(
            canonical_name=name,
            aliases=aliases,
            group_id=str(data.get("group_id") or data.get("groupId") or "full-body"),
            is_bodyweight=bool(_pick(data, "is_bodyweight", "isBodyweight", "bodyweight")),
            origin=str(data.get("origin") or origin),
            equipment=str(data.get("equipment") or "Other"),
            created_at=data.get("created_at") or data.get("createdAt"),
            updated_at=data.get("updated_at") or data.get("updatedAt"),
        )


@dataclass(frozen=True)
class PlanEntry:
    """One exercise of the active workout plan."""

    name: str
    target_sets: int = 1
    target_reps: Optional[int] = None
    target_weight: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlanEntry":
        name = str(data.get("name") or "").strip()
        if not name:
            raise ValueError("plan entry needs a name")
        sets = _pick(data, "target_sets", "targetSets", "sets")
        reps = _pick(data, "target_reps", "targetReps", "reps")
        weight = _pick(data, "target_weight", "targetWeight", "weight")
        return cls(
            name=name,
            target_sets=int(sets or 1),
            target_reps=int(reps) if reps is not None else None,
            target_weight=float(weight) if weight is not None else None,
        )


@dataclass(frozen=True)
class LoggedSet:
    """A committed set."""

    exercise: str
    weight: float
    reps: int
    is_bodyweight: bool = False
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat(timespec="seconds"))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoggedSet":
        is_bodyweight = bool(_pick(data, "is_bodyweight", "isBodyweight"))
        payload: Dict[str, Any] = {
            "exercise": str(data.get("exercise") or ""),
            "weight": 0.0 if is_bodyweight else float(data.get("weight") or 0),
            "reps": int(data.get("reps") or 0),
            "is_bodyweight": is_bodyweight,
        }
        if data.get("timestamp"):
            payload["timestamp"] = str(data["timestamp"])
        return cls(**payload)


@dataclass
class SessionContext:
    """Per-workout state read by the engine for every utterance.

    ``last_weight``/``last_reps`` default to the values of ``last_logged_set``.
    ``is_first_set`` defaults to whether the current exercise has no logged set
    yet. ``mode`` defaults to guided when a plan is present.
    """

    current_exercise: Optional[str] = None
    target_weight: Optional[float] = None
    target_reps: Optional[int] = None
    last_logged_set: Optional[LoggedSet] = None
    last_weight: Optional[float] = None
    last_reps: Optional[int] = None
    is_first_set: Optional[bool] = None
    recent_exercises: List[str] = field(default_factory=list)
    plan: List[PlanEntry] = field(default_factory=list)
    current_index: Optional[int] = None
    mode: Optional[str] = None

    def __post_init__(self) -> None:
        if self.mode is not None and self.mode not in MODES:
            raise ValueError(f"mode must be one of: {', '.join(MODES)}")
        if self.current_exercise is None and self.current_index is not None:
            if 0 <= self.current_index < len(self.plan):
                self.current_exercise = self.plan[self.current_index].name
        entry = self.current_plan_entry
        if entry is not None:
            if self.target_weight is None:
                self.target_weight = entry.target_weight
            if self.target_reps is None:
                self.target_reps = entry.target_reps
        if self.last_logged_set is not None:
            if self.last_weight is None:
                self.last_weight = self.last_logged_set.weight
            if self.last_reps is None:
                self.last_reps = self.last_logged_set.reps
        if self.is_first_set is None:
            last = self.last_logged_set
            self.is_first_set = (
                last is None
                or self.current_exercise is None
                or last.exercise.lower() != self.current_exercise.lower()
            )

    @property
    def quick_start(self) -> bool:
        if self.mode is None:
            return not self.plan
        return self.mode == QUICK_START

    @property
    def effective_mode(self) -> str:
        return QUICK_START if self.quick_start else GUIDED

    @property
    def plan_names(self) -> List[str]:
        return [entry.name for entry in self.plan]

    @property
    def current_plan_entry(self) -> Optional[PlanEntry]:
        if self.current_index is not None and 0 <= self.current_index < len(self.plan):
            return self.plan[self.current_index]
        if self.current_exercise:
            for entry in self.plan:
                if entry.name.lower() == self.current_exercise.lower():
                    return entry
        return None

    @property
    def has_targets(self) -> bool:
        return self.target_weight is not None and self.target_reps is not None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionContext":
        """Build a context from snake_case or camelCase keys.

        ``currentExercise`` may be a bare name or ``{name, weight, reps}``.
        """
        current = _pick(data, "current_exercise", "currentExercise")
        target_weight = _pick(data, "target_weight", "targetWeight")
        target_reps = _pick(data, "target_reps", "targetReps")
        if isinstance(current, dict):
            if target_weight is None:
                target_weight = current.get("weight")
            if target_reps is None:
                target_reps = current.get("reps")
            current = current.get("name")

        last_raw = _pick(data, "last_logged_set", "lastLoggedSet")
        plan_raw = _pick(data, "plan", "workoutPlan") or []
        last_weight = _pick(data, "last_weight", "lastWeight")
        last_reps = _pick(data, "last_reps", "lastReps")
        first_set = _pick(data, "is_first_set", "isFirstSet")
        current_index = _pick(data, "current_index", "currentIndex")
        return cls(
            current_exercise=str(current) if current else None,
            target_weight=float(target_weight) if target_weight is not None else None,
            target_reps=int(target_reps) if target_reps is not None else None,
            last_logged_set=LoggedSet.from_dict(last_raw) if isinstance(last_raw, dict) else None,
            last_weight=float(last_weight) if last_weight is not None else None,
            last_reps=int(last_reps) if last_reps is not None else None,
            is_first_set=bool(first_set) if first_set is not None else None,
            recent_exercises=[str(name) for name in _pick(data, "recent_exercises", "recentExercises") or []],
            plan=[PlanEntry.from_dict(item) for item in plan_raw if isinstance(item, dict)],
            current_index=int(current_index) if current_index is not None else None,
            mode=_pick(data, "mode"),
        )


@dataclass(frozen=True)
class ResolvedExercise:
    """Which exercise an utterance refers to and how it was found."""

    name: str
    in_workout_plan: bool = False
    index: Optional[int] = None
    score: float = 0.0
    is_from_recent_session: bool = False
    is_from_library: bool = False
    is_new_candidate: bool = False
    strategy: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _number(value: Optional[float]) -> Optional[Union[int, float]]:
    if value is None:
        return None
    return int(value) if float(value).is_integer() else value


@dataclass
class ParseResult:
    """A parsed set, possibly awaiting confirmation."""

    exercise: Optional[str]
    weight: Optional[float] = None
    reps: Optional[int] = None
    sets: int = 1
    is_bodyweight: bool = False
    is_quick_complete: bool = False
    needs_confirmation: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)
    confidence_score: float = 0.0
    is_high_confidence: bool = False
    raw_text: str = ""
    unit: Optional[str] = None
    resolution: Optional[ResolvedExercise] = None
    suggested_exercise: Optional[ExerciseDefinition] = None
    suggestions: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.is_bodyweight:
            self.weight = 0.0

    @property
    def error(self) -> None:
        return None

    @property
    def auto_commit(self) -> bool:
        """True when the caller may commit without asking the user."""
        return not self.needs_confirmation

    def to_dict(self) -> Dict[str, Any]:
        return {
            "exercise": self.exercise,
            "weight": _number(self.weight),
            "reps": self.reps,
            "sets": self.sets,
            "is_bodyweight": self.is_bodyweight,
            "is_quick_complete": self.is_quick_complete,
            "needs_confirmation": list(self.needs_confirmation),
            "notes": list(self.notes),
            "confidence_score": self.confidence_score,
            "is_high_confidence": self.is_high_confidence,
            "raw_text": self.raw_text,
            "unit": self.unit,
            "resolution": self.resolution.to_dict() if self.resolution else None,
            "suggested_exercise": self.suggested_exercise.to_dict() if self.suggested_exercise else None,
            "suggestions": list(self.suggestions),
            "error": None,
        }


@dataclass(frozen=True)
class ParseFailure:
    """An utterance the engine could not turn into a set."""

    error: str
    raw_text: str = ""
    notes: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error, "raw_text": self.raw_text, "notes": list(self.notes)}


@dataclass(frozen=True)
class NavigationCommand:
    """A skip/next command. Rejected commands carry a message instead of an error."""

    kind: str
    accepted: bool
    target_index: Optional[int] = None
    message: Optional[str] = None
    raw_text: str = ""

    @property
    def error(self) -> None:
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "command": self.kind,
            "accepted": self.accepted,
            "target_index": self.target_index,
            "message": self.message,
            "raw_text": self.raw_text,
            "error": None,
        }


ParseOutcome = Union[ParseResult, ParseFailure, NavigationCommand]
