"""Pull weight, reps, bodyweight and memory references out of an utterance.

Every field is tried against ordered ``(name, pattern)`` tables, first hit
wins. Tables run on the lowercased transcript before its normalized form,
since normalization turns "for"/"to"/"ate" into digits. Fields the utterance
leaves unset are back-filled from the session context, and each back-fill
appends a note.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Pattern, Tuple

from voicelift.core.models import SessionContext
from voicelift.utils.normalize import lower_view, normalize_transcript
from voicelift.utils.numbers import SPOKEN_NUMBER, words_to_number

logger = logging.getLogger(__name__)

NUM = r"(\d+(?:\.\d+)?)"
INT = r"(\d+)(?!\.\d)"
KG = r"(?:kg|kgs|kilos?|kilograms?)"
LBS = r"(?:lbs?|pounds?)"
_NOT_A_UNIT = rf"(?!\s*(?:{KG}|{LBS})\b)"

BODYWEIGHT_RE = re.compile(r"\b(?:bodyweight|body weight|bw|body wt)\b")

# (name, pattern, sign); group 1 is the amount, group 2 the unit if spoken.
RELATIVE_WEIGHT_RULES: List[Tuple[str, Pattern[str], int]] = [
    ("add", re.compile(rf"\badd\s+{NUM}\s*({KG}|{LBS})?\b"), 1),
    ("up_to", re.compile(rf"\bup\s+to\s+{NUM}\s*({KG}|{LBS})?\b"), 1),
    ("subtract", re.compile(rf"\bsubtract\s+{NUM}\s*({KG}|{LBS})?\b"), -1),
    ("down_to", re.compile(rf"\bdown\s+to\s+{NUM}\s*({KG}|{LBS})?\b"), -1),
]

# (name, pattern, unit)
WEIGHT_RULES: List[Tuple[str, Pattern[str], Optional[str]]] = [
    ("kilograms", re.compile(rf"\b{NUM}\s*{KG}\b"), "kg"),
    ("pounds", re.compile(rf"\b{NUM}\s*{LBS}\b"), "lbs"),
    ("at", re.compile(rf"\bat\s+{NUM}\b{_NOT_A_UNIT}"), None),
    ("with", re.compile(rf"\bwith\s+{NUM}\b{_NOT_A_UNIT}"), None),
    ("by_reps", re.compile(rf"\b{NUM}\s*(?:{KG}\s*)?(?:×|x|for)\s*\d+\b"), None),
]

REPS_RULES: List[Tuple[str, Pattern[str]]] = [
    ("reps", re.compile(rf"\b{INT}\s*reps?\b")),
    ("times", re.compile(rf"\b{INT}\s*(?:times|revs|wraps)\b")),
    ("for", re.compile(rf"\bfor\s+{INT}\b{_NOT_A_UNIT}")),
    ("ate", re.compile(rf"\bate\s+{INT}\b{_NOT_A_UNIT}")),
    ("reps_at", re.compile(rf"\b{INT}\s*reps?\s+(?:at|with)\b")),
    ("by", re.compile(rf"\d\s*(?:{KG}\s*)?[x×]\s*{INT}\b")),
]

SPOKEN_WEIGHT_RULES: List[Tuple[str, Pattern[str], Optional[str]]] = [
    ("spoken_kilograms", re.compile(rf"\b({SPOKEN_NUMBER})\s*{KG}\b"), "kg"),
    ("spoken_pounds", re.compile(rf"\b({SPOKEN_NUMBER})\s*{LBS}\b"), "lbs"),
    ("spoken_at", re.compile(rf"\b(?:(?<!same\s)weight|at|with)\s+({SPOKEN_NUMBER})"), None),
    ("spoken_by_reps", re.compile(rf"\b({SPOKEN_NUMBER})\s*(?:×|x|for)\s+(?:\d+|{SPOKEN_NUMBER})"), None),
]

SPOKEN_REPS_RULES: List[Tuple[str, Pattern[str]]] = [
    ("spoken_reps", re.compile(rf"\b({SPOKEN_NUMBER})\s*(?:reps?|times)\b")),
    ("spoken_for", re.compile(rf"\bfor\s+({SPOKEN_NUMBER})(?!\s*(?:{KG}|{LBS}|more)\b)")),
]

SAME_WEIGHT_RE = re.compile(r"\bsame\s+(?:weight|kg|kilos)\b")
SAME_REPS_RE = re.compile(r"\bsame\s+reps\b")
SAME_ALL_RE = re.compile(r"\bsame\s+as\s+before\b|\brepeat\b|\bagain\b|\bone\s+more\b|\banother\s+set\b|^same$")


@dataclass
class MemoryFlags:
    same_weight: bool = False
    same_reps: bool = False
    same_all: bool = False

    @property
    def used(self) -> bool:
        return self.same_weight or self.same_reps or self.same_all


@dataclass
class ExtractedFields:
    weight: Optional[float] = None
    reps: Optional[int] = None
    is_bodyweight: bool = False
    unit: Optional[str] = None
    notes: List[str] = field(default_factory=list)
    memory: MemoryFlags = field(default_factory=MemoryFlags)
    explicit_weight: bool = False
    explicit_reps: bool = False

    def add_note(self, note: str) -> None:
        if note not in self.notes:
            self.notes.append(note)

    def set_bodyweight(self) -> None:
        self.is_bodyweight = True
        self.weight = 0.0


def detect_memory(text: str) -> MemoryFlags:
    lowered = lower_view(text)
    return MemoryFlags(
        same_weight=bool(SAME_WEIGHT_RE.search(lowered)),
        same_reps=bool(SAME_REPS_RE.search(lowered)),
        same_all=bool(SAME_ALL_RE.search(lowered)),
    )


def _views(text: str) -> List[str]:
    lowered = lower_view(text)
    normalized = normalize_transcript(lowered)
    return [lowered] if normalized == lowered else [lowered, normalized]


def _positive(raw: str) -> Optional[float]:
    value = float(raw)
    return value if value > 0 else None


def _spoken_weight(lowered: str) -> Optional[Tuple[float, Optional[str], str]]:
    for name, pattern, unit in SPOKEN_WEIGHT_RULES:
        match = pattern.search(lowered)
        if match:
            value = words_to_number(match.group(1))
            if value:
                return float(value), unit, name
    return None


def _spoken_reps(lowered: str) -> Optional[Tuple[int, str]]:
    for name, pattern in SPOKEN_REPS_RULES:
        match = pattern.search(lowered)
        if match:
            value = words_to_number(match.group(1))
            if value:
                return value, name
    return None


def match_weight(text: str) -> Optional[Tuple[float, Optional[str], str]]:
    """``(weight, unit, rule)`` for the first absolute weight rule that fits.

    Spoken number words are read before the normalized view, which would
    turn "at one eighty" into "at 1 eighty".
    """
    views = _views(text)
    for index, view in enumerate(views):
        for name, pattern, unit in WEIGHT_RULES:
            for match in pattern.finditer(view):
                value = _positive(match.group(1))
                if value is not None:
                    return value, unit, name
        if index == 0:
            spoken = _spoken_weight(view)
            if spoken is not None:
                return spoken
    return None


def match_reps(text: str) -> Optional[Tuple[int, str]]:
    """``(reps, rule)`` for the first reps rule that fits."""
    views = _views(text)
    for index, view in enumerate(views):
        for name, pattern in REPS_RULES:
            for match in pattern.finditer(view):
                value = int(match.group(1))
                if value > 0:
                    return value, name
        if index == 0:
            spoken = _spoken_reps(view)
            if spoken is not None:
                return spoken
    return None


def _relative_unit(raw: Optional[str]) -> Optional[str]:
    if not raw:
        return None
    return "lbs" if raw.startswith(("lb", "pound")) else "kg"


def _apply_relative(fields: ExtractedFields, lowered: str, context: SessionContext) -> bool:
    """True when the utterance asked for a relative change, applied or not."""
    for name, pattern, sign in RELATIVE_WEIGHT_RULES:
        match = pattern.search(lowered)
        if not match:
            continue
        if context.last_weight is None:
            fields.add_note("relative_without_last_weight")
            return True
        amount = float(match.group(1))
        fields.weight = max(0.0, context.last_weight + sign * amount)
        fields.unit = _relative_unit(match.group(2))
        fields.explicit_weight = True
        fields.add_note(f"relative_{name}")
        return True
    return False


def _backfill_weight(fields: ExtractedFields, context: SessionContext, exercise_is_bodyweight: bool) -> None:
    last = context.last_logged_set
    memory = fields.memory
    last_was_bodyweight = last is not None and last.is_bodyweight

    if (memory.same_all or memory.same_weight) and last is not None:
        fields.weight = last.weight
        if last.is_bodyweight:
            fields.set_bodyweight()
        fields.add_note("memory_same_all" if memory.same_all else "memory_same_weight")
        return

    source: Optional[str] = None
    value: Optional[float] = None
    from_bodyweight = False
    if memory.same_weight and context.last_weight is not None:
        source, value, from_bodyweight = "using_same_weight", context.last_weight, last_was_bodyweight
    elif memory.used and last is not None:
        source, value, from_bodyweight = "using_memory_weight", last.weight, last.is_bodyweight
    elif not context.is_first_set and context.last_weight is not None:
        source, value, from_bodyweight = "using_last_weight", context.last_weight, last_was_bodyweight
    elif context.target_weight is not None:
        source, value = "using_target_weight", context.target_weight
        from_bodyweight = exercise_is_bodyweight and context.target_weight == 0
    if source is None:
        return
    fields.weight = value
    if from_bodyweight:
        fields.set_bodyweight()
    fields.add_note(source)


def _backfill_reps(fields: ExtractedFields, context: SessionContext) -> None:
    last = context.last_logged_set
    memory = fields.memory

    if (memory.same_all or memory.same_reps) and last is not None:
        fields.reps = last.reps
        fields.add_note("memory_same_all" if memory.same_all else "memory_same_reps")
        return

    if memory.same_reps and context.last_reps is not None:
        fields.reps, note = context.last_reps, "using_same_reps"
    elif memory.used and last is not None:
        fields.reps, note = last.reps, "using_memory_reps"
    elif not context.is_first_set and context.last_reps is not None:
        fields.reps, note = context.last_reps, "using_last_reps"
    elif context.target_reps is not None:
        fields.reps, note = context.target_reps, "using_target_reps"
    else:
        return
    fields.add_note(note)


def extract_fields(text: str, context: SessionContext, exercise_is_bodyweight: bool = False) -> ExtractedFields:
    """Extract set fields from ``text`` and back-fill the rest from ``context``."""
    lowered = lower_view(text)
    fields = ExtractedFields(memory=detect_memory(lowered))

    if BODYWEIGHT_RE.search(lowered):
        fields.set_bodyweight()
        fields.explicit_weight = True
        fields.add_note("bodyweight_marker")
    elif not _apply_relative(fields, lowered, context):
        weight = match_weight(lowered)
        if weight is not None:
            fields.weight, fields.unit, rule = weight
            fields.explicit_weight = True
            fields.add_note(f"weight_{rule}")

    reps = match_reps(lowered)
    if reps is not None:
        fields.reps, rule = reps
        fields.explicit_reps = True
        fields.add_note(f"reps_{rule}")

    if fields.weight is None and not fields.is_bodyweight:
        _backfill_weight(fields, context, exercise_is_bodyweight)
    if fields.reps is None:
        _backfill_reps(fields, context)

    logger.debug("Extracted weight=%s reps=%s bodyweight=%s notes=%s", fields.weight, fields.reps, fields.is_bodyweight, fields.notes)
    return fields
