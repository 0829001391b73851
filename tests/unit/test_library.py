from __future__ import annotations

from voicelift.core.library import ExerciseLibrary
from voicelift.core.models import ExerciseDefinition


def test_aliases_resolve_case_insensitively(library: ExerciseLibrary) -> None:
    assert library.resolve_alias("  FLAT Bench ") == "Bench Press"
    assert library.exists("pullups") is True
    assert library.exists("zercher squat") is False
    assert library.resolve_alias("") is None


def test_bodyweight_lookup_accepts_aliases(library: ExerciseLibrary) -> None:
    assert library.is_bodyweight("Pull-ups") is True
    assert library.is_bodyweight("pull ups") is True
    assert library.is_bodyweight("Bench Press") is False
    assert library.is_bodyweight(None) is False


def test_custom_entries_override_core() -> None:
    custom = ExerciseDefinition(canonical_name="Floor Press", aliases=("flat bench",), origin="custom", group_id="chest")
    library = ExerciseLibrary(custom=[custom])

    assert library.resolve_alias("flat bench") == "Floor Press"
    assert library.get("floor press") == custom


def test_add_replaces_bodyweight_flag() -> None:
    library = ExerciseLibrary(core=[ExerciseDefinition(canonical_name="Dips", is_bodyweight=True)])
    library.add(ExerciseDefinition(canonical_name="Dips", is_bodyweight=False))

    assert library.is_bodyweight("Dips") is False
    assert len(library) == 1


def test_groups_follow_muscle_group_order(library: ExerciseLibrary) -> None:
    groups = library.groups()

    assert list(groups)[0] == "chest"
    assert any(item.canonical_name == "Squat" for item in groups["legs"])
    assert sum(len(items) for items in groups.values()) == len(library)
