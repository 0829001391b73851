"""JSON-file store for user-defined exercises."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from voicelift.core.constants import EQUIPMENT_RULES, GROUP_RULES
from voicelift.core.models import ExerciseDefinition
from voicelift.utils.text import tokenize, word_stems

logger = logging.getLogger(__name__)


class ExerciseStoreError(RuntimeError):
    """Raised when the custom exercise file cannot be read."""


def _first_rule_hit(name: str, rules: List[tuple], default: str) -> str:
    stems = set()
    for token in tokenize(name):
        stems |= word_stems(token)
    for label, keywords in rules:
        if stems & set(keywords):
            return label
    return default


def infer_group(name: str) -> str:
    """Guess the muscle group of an exercise from its name."""
    return _first_rule_hit(name, GROUP_RULES, "full-body")


def infer_equipment(name: str) -> str:
    """Guess the equipment of an exercise from its name."""
    return _first_rule_hit(name, EQUIPMENT_RULES, "Other")


def build_custom_definition(
    name: str,
    group_id: Optional[str] = None,
    equipment: Optional[str] = None,
    aliases: Optional[List[str]] = None,
    is_bodyweight: Optional[bool] = None,
) -> ExerciseDefinition:
    """Definition for an exercise the user introduced by voice or by hand."""
    clean = " ".join(name.split())
    if not clean:
        raise ValueError("exercise name must not be empty")
    resolved_equipment = equipment or infer_equipment(clean)
    return ExerciseDefinition(
        canonical_name=clean,
        aliases=tuple(alias.lower().strip() for alias in aliases or [] if alias.strip()),
        group_id=group_id or infer_group(clean),
        is_bodyweight=resolved_equipment == "Bodyweight" if is_bodyweight is None else is_bodyweight,
        origin="custom",
        equipment=resolved_equipment,
    )


class CustomExerciseStore:
    """Persist custom exercises as a JSON list keyed case-insensitively by name."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read(self) -> List[Dict[str, Any]]:
        if not self.path.exists():
            return []
        try:
            raw = json.loads(self.path.read_text() or "[]")
        except json.JSONDecodeError as exc:
            raise ExerciseStoreError(f"Invalid JSON in custom exercise file {self.path}: {exc}") from exc
        if not isinstance(raw, list):
            raise ExerciseStoreError(f"Custom exercise file {self.path} must contain a list")
        return [item for item in raw if isinstance(item, dict)]

    def _write(self, items: List[Dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".exercises-", suffix=".json")
        with os.fdopen(fd, "w") as handle:
            handle.write(json.dumps(items, indent=2) + "\n")
        os.replace(tmp_name, self.path)

    def load(self) -> List[ExerciseDefinition]:
        definitions = []
        for item in self._read():
            try:
                definitions.append(ExerciseDefinition.from_dict(item, origin="custom"))
            except ValueError:
                logger.warning("Skipping custom exercise without a name in %s", self.path)
        return definitions

    def find(self, name: str) -> Optional[ExerciseDefinition]:
        wanted = name.lower().strip()
        for definition in self.load():
            if wanted == definition.canonical_name.lower() or wanted in definition.aliases:
                return definition
        return None

    def exists(self, name: str) -> bool:
        return self.find(name) is not None

    def save(self, definition: ExerciseDefinition) -> ExerciseDefinition:
        """Insert or update by name; ``created_at`` survives updates."""
        items = self._read()
        now = datetime.now().isoformat(timespec="seconds")
        key = definition.canonical_name.lower()
        existing = next(
            (index for index, item in enumerate(items) if str(item.get("canonical_name", "")).lower() == key),
            None,
        )
        created_at = items[existing].get("created_at") if existing is not None else None
        payload = definition.to_dict()
        payload.update(origin="custom", created_at=created_at or now, updated_at=now)
        if existing is None:
            items.append(payload)
        else:
            items[existing] = payload
        self._write(items)
        logger.debug("Saved custom exercise %s to %s", definition.canonical_name, self.path)
        return ExerciseDefinition.from_dict(payload)

    def delete(self, name: str) -> bool:
        items = self._read()
        key = name.lower().strip()
        kept = [item for item in items if str(item.get("canonical_name", "")).lower() != key]
        if len(kept) == len(items):
            return False
        self._write(kept)
        return True
