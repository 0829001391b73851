"""Exercise library index: core catalog merged with custom exercises."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set

from voicelift.core.catalog import core_exercises
from voicelift.core.constants import MUSCLE_GROUPS
from voicelift.core.models import ExerciseDefinition


class ExerciseLibrary:
    """Case-insensitive lookup over canonical names and aliases.

    Entries are merged in order, core first. A later definition with the same
    canonical name replaces the earlier one, and a later alias overrides an
    earlier mapping, so custom exercises win over the catalog.
    """

    def __init__(
        self,
        core: Optional[Iterable[ExerciseDefinition]] = None,
        custom: Iterable[ExerciseDefinition] = (),
    ) -> None:
        self._entries: Dict[str, ExerciseDefinition] = {}
        self._alias_map: Dict[str, str] = {}
        self._bodyweight: Set[str] = set()
        for definition in core_exercises() if core is None else core:
            self.add(definition)
        for definition in custom:
            self.add(definition)

    def add(self, definition: ExerciseDefinition) -> None:
        key = definition.canonical_name.lower()
        self._entries[key] = definition
        for name in definition.names:
            self._alias_map[name.lower().strip()] = definition.canonical_name
        if definition.is_bodyweight:
            self._bodyweight.add(definition.canonical_name)
        else:
            self._bodyweight.discard(definition.canonical_name)

    def exists(self, name: str) -> bool:
        return self.resolve_alias(name) is not None

    def resolve_alias(self, text: str) -> Optional[str]:
        if not text:
            return None
        return self._alias_map.get(text.lower().strip())

    def get(self, name: str) -> Optional[ExerciseDefinition]:
        canonical = self.resolve_alias(name)
        if canonical is None:
            return None
        return self._entries.get(canonical.lower())

    def all_entries(self) -> List[ExerciseDefinition]:
        return list(self._entries.values())

    def is_bodyweight(self, canonical_name: Optional[str]) -> bool:
        if not canonical_name:
            return False
        canonical = self.resolve_alias(canonical_name) or canonical_name
        return canonical in self._bodyweight

    def groups(self) -> Dict[str, List[ExerciseDefinition]]:
        """Entries by muscle group; known groups first, in catalog order."""
        grouped: Dict[str, List[ExerciseDefinition]] = {group_id: [] for group_id in MUSCLE_GROUPS}
        for definition in self._entries.values():
            grouped.setdefault(definition.group_id, []).append(definition)
        return {group_id: items for group_id, items in grouped.items() if items}

    def __len__(self) -> int:
        return len(self._entries)
