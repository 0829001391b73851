from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterator, List

import pytest
import yaml
from typer.testing import CliRunner

from voicelift.core.library import ExerciseLibrary
from voicelift.core.models import LoggedSet, PlanEntry, SessionContext


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    data_dir = tmp_path / "data"
    monkeypatch.setenv("VOICELIFT_DATA_DIR", str(data_dir))
    monkeypatch.setenv("VOICELIFT_CONFIG_FILE", str(tmp_path / "config" / "config.toml"))
    monkeypatch.delenv("VOICELIFT_CUSTOM_STORE", raising=False)
    return data_dir


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def library() -> ExerciseLibrary:
    return ExerciseLibrary()


@pytest.fixture()
def sample_plan() -> List[PlanEntry]:
    return [
        PlanEntry(name="Bench Press", target_sets=3, target_reps=8, target_weight=80),
        PlanEntry(name="Squat", target_sets=3, target_reps=5, target_weight=100),
        PlanEntry(name="Pull-ups", target_sets=3, target_reps=10, target_weight=0),
    ]


@pytest.fixture()
def guided_context(sample_plan: List[PlanEntry]) -> SessionContext:
    return SessionContext(plan=sample_plan, current_index=0)


@pytest.fixture()
def squat_context() -> SessionContext:
    return SessionContext(
        current_exercise="Squat",
        target_weight=100,
        target_reps=5,
        last_logged_set=LoggedSet(exercise="Squat", weight=100, reps=10),
    )


@pytest.fixture()
def write_temp_json(tmp_path: Path):
    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, indent=2) + "\n")
        return path

    return _write


@pytest.fixture()
def write_temp_yaml(tmp_path: Path):
    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(payload, sort_keys=False))
        return path

    return _write


@pytest.fixture()
def write_temp_toml(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content.strip() + "\n")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_voicelift_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("voicelift")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
