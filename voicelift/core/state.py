"""Runtime state container for CLI context."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from rich.console import Console

from voicelift.core.engine import VoiceEngine
from voicelift.core.library import ExerciseLibrary
from voicelift.core.settings import EngineSettings
from voicelift.core.storage import CustomExerciseStore


@dataclass
class CLIState:
    """CLI runtime options, loaded configuration and engine collaborators."""

    json_output: bool
    plain_output: bool
    verbose: bool
    quiet: bool
    config_path: Path
    config: Dict[str, Any]
    console: Console
    custom_store: Path
    settings: EngineSettings

    def store(self) -> CustomExerciseStore:
        return CustomExerciseStore(self.custom_store)

    def library(self) -> ExerciseLibrary:
        """Core catalog merged with the user's custom exercises."""
        return ExerciseLibrary(custom=self.store().load())

    def engine(self) -> VoiceEngine:
        return VoiceEngine(self.library(), self.settings)
