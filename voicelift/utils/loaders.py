"""Load plans, session contexts and replay scripts from YAML or JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from voicelift.core.constants import MODES, QUICK_START
from voicelift.core.models import PlanEntry, SessionContext


class LoaderError(ValueError):
    """Raised when an input file is missing or malformed."""


@dataclass
class ReplayScript:
    utterances: List[str]
    plan: List[PlanEntry] = field(default_factory=list)
    mode: Optional[str] = None


def read_structured(file_path: Path) -> Any:
    """Parse a YAML (``.yaml``/``.yml``) or JSON file."""
    try:
        text = file_path.read_text()
    except OSError as exc:
        raise LoaderError(f"Cannot read {file_path}: {exc}") from exc
    try:
        if file_path.suffix.lower() in {".yaml", ".yml"}:
            return yaml.safe_load(text)
        return json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise LoaderError(f"Invalid content in {file_path}: {exc}") from exc


def parse_mode(value: Optional[str]) -> Optional[str]:
    """Map ``auto``/``quick``/``guided`` style names to an engine mode."""
    if value is None or value == "auto":
        return None
    if value == "quick":
        return QUICK_START
    if value not in MODES:
        raise LoaderError(f"Unknown mode {value!r}; use auto, quick or guided")
    return value


def _plan_entries(raw: Any, source: Path) -> List[PlanEntry]:
    if isinstance(raw, dict):
        raw = raw.get("plan", raw.get("exercises"))
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise LoaderError(f"{source}: plan must be a list of exercises")
    entries = []
    for item in raw:
        if isinstance(item, str):
            item = {"name": item}
        if not isinstance(item, dict):
            raise LoaderError(f"{source}: plan entries must be mappings or names")
        try:
            entries.append(PlanEntry.from_dict(item))
        except (TypeError, ValueError) as exc:
            raise LoaderError(f"{source}: {exc}") from exc
    return entries


def load_plan(file_path: Path) -> List[PlanEntry]:
    return _plan_entries(read_structured(file_path), file_path)


def load_context(file_path: Path) -> SessionContext:
    raw = read_structured(file_path)
    if not isinstance(raw, dict):
        raise LoaderError(f"{file_path}: context must be a mapping")
    try:
        return SessionContext.from_dict(raw)
    except (TypeError, ValueError) as exc:
        raise LoaderError(f"{file_path}: {exc}") from exc


def load_script(file_path: Path) -> ReplayScript:
    """A bare list of utterances, or ``{plan, mode, utterances}``."""
    raw = read_structured(file_path)
    data: Dict[str, Any] = raw if isinstance(raw, dict) else {"utterances": raw}
    utterances = data.get("utterances")
    if not isinstance(utterances, list) or not all(isinstance(item, str) for item in utterances):
        raise LoaderError(f"{file_path}: utterances must be a list of strings")
    return ReplayScript(
        utterances=utterances,
        plan=_plan_entries(data.get("plan"), file_path),
        mode=parse_mode(data.get("mode")),
    )
