"""Formatting helpers used by console output."""

from __future__ import annotations

from typing import List, Optional, Tuple

from voicelift.core.models import NavigationCommand, ParseFailure, ParseOutcome, ParseResult


def format_number(value: Optional[float]) -> str:
    """Drop a trailing ``.0``; None becomes ``-``."""
    if value is None:
        return "-"
    number = float(value)
    return str(int(number)) if number.is_integer() else f"{number:g}"


def format_weight(weight: Optional[float], unit: Optional[str] = None, is_bodyweight: bool = False) -> str:
    if is_bodyweight:
        return "bodyweight"
    if weight is None:
        return "-"
    return f"{format_number(weight)} {unit or 'kg'}"


def format_set(result: ParseResult) -> str:
    """One-line description such as ``Bench Press 80 kg x 8``."""
    weight = format_weight(result.weight, result.unit, result.is_bodyweight)
    return f"{result.exercise or '?'} {weight} x {result.reps if result.reps is not None else '-'}"


def outcome_status(outcome: ParseOutcome) -> str:
    if isinstance(outcome, ParseFailure):
        return "error"
    if isinstance(outcome, NavigationCommand):
        return "navigate" if outcome.accepted else "rejected"
    if outcome.is_quick_complete:
        return "complete"
    return "confirm" if outcome.needs_confirmation else "commit"


def outcome_rows(outcome: ParseOutcome) -> List[Tuple[str, str]]:
    """Field/value pairs for table and plain-text output."""
    if isinstance(outcome, ParseFailure):
        return [("status", "error"), ("error", outcome.error)]
    if isinstance(outcome, NavigationCommand):
        rows = [("status", outcome_status(outcome)), ("command", outcome.kind)]
        if outcome.target_index is not None:
            rows.append(("target_index", str(outcome.target_index)))
        rows.append(("message", outcome.message or ""))
        return rows

    rows = [
        ("status", outcome_status(outcome)),
        ("exercise", outcome.exercise or "-"),
        ("weight", format_weight(outcome.weight, outcome.unit, outcome.is_bodyweight)),
        ("reps", "-" if outcome.reps is None else str(outcome.reps)),
        ("sets", str(outcome.sets)),
        ("confidence", f"{outcome.confidence_score:.2f}"),
        ("confirm", ", ".join(outcome.needs_confirmation) or "-"),
        ("notes", ", ".join(outcome.notes) or "-"),
    ]
    if outcome.resolution is not None:
        rows.append(("matched_by", outcome.resolution.strategy))
    if outcome.suggestions:
        rows.append(("suggestions", ", ".join(outcome.suggestions)))
    return rows
