from __future__ import annotations

import json
from pathlib import Path

import pytest

from voicelift.core.storage import (
    CustomExerciseStore,
    ExerciseStoreError,
    build_custom_definition,
    infer_equipment,
    infer_group,
)


@pytest.mark.parametrize(
    ("name", "group"),
    [
        ("Zercher Squat", "legs"),
        ("Cable Crossover Chest", "chest"),
        ("Pendlay Row", "back"),
        ("Spider Curl", "arms"),
        ("Viking Press", "chest"),
        ("Turkish Get Up", "full-body"),
    ],
)
def test_infer_group(name: str, group: str) -> None:
    assert infer_group(name) == group


def test_infer_equipment() -> None:
    assert infer_equipment("Kettlebell Swing") == "Kettlebell"
    assert infer_equipment("Ring Dips") == "Bodyweight"
    assert infer_equipment("Zercher Squat") == "Other"


def test_build_custom_definition_defaults() -> None:
    definition = build_custom_definition("  Ring   Dips ", aliases=["Rings", " "])

    assert definition.canonical_name == "Ring Dips"
    assert definition.aliases == ("rings",)
    assert definition.equipment == "Bodyweight"
    assert definition.is_bodyweight is True
    assert definition.origin == "custom"


def test_build_custom_definition_rejects_empty_name() -> None:
    with pytest.raises(ValueError):
        build_custom_definition("   ")


def test_store_round_trip_and_update(tmp_path: Path) -> None:
    store = CustomExerciseStore(tmp_path / "nested" / "custom.json")
    assert store.load() == []

    first = store.save(build_custom_definition("Zercher Squat"))
    assert first.created_at is not None
    assert store.exists("zercher squat") is True

    updated = store.save(build_custom_definition("zercher squat", aliases=["zercher"]))
    items = store.load()

    assert len(items) == 1
    assert updated.created_at == first.created_at
    assert store.find("zercher") is not None


def test_store_delete(tmp_path: Path) -> None:
    store = CustomExerciseStore(tmp_path / "custom.json")
    store.save(build_custom_definition("Zercher Squat"))

    assert store.delete("ZERCHER SQUAT") is True
    assert store.delete("Zercher Squat") is False
    assert json.loads((tmp_path / "custom.json").read_text()) == []


def test_store_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "custom.json"
    path.write_text("{not json")

    with pytest.raises(ExerciseStoreError, match="Invalid JSON"):
        CustomExerciseStore(path).load()


def test_store_rejects_non_list(tmp_path: Path) -> None:
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"name": "Squat"}))

    with pytest.raises(ExerciseStoreError, match="must contain a list"):
        CustomExerciseStore(path).load()


def test_store_skips_nameless_entries(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "custom.json"
    path.write_text(json.dumps([{"name": ""}, {"name": "Sled Push", "equipment": "Other"}]))

    loaded = CustomExerciseStore(path).load()

    assert [item.canonical_name for item in loaded] == ["Sled Push"]
    assert "Skipping custom exercise" in caplog.text


def test_store_reads_camel_case_fields(tmp_path: Path) -> None:
    path = tmp_path / "custom.json"
    path.write_text(json.dumps([{"name": "Ring Dips", "groupId": "chest", "isBodyweight": True}]))

    loaded = CustomExerciseStore(path).load()

    assert loaded[0].group_id == "chest"
    assert loaded[0].is_bodyweight is True
