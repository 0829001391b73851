"""Tunable thresholds and limits for the voice engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from voicelift.core import constants
from voicelift.core.config import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineSettings:
    guided_threshold: float = constants.GUIDED_THRESHOLD
    quick_start_threshold: float = constants.QUICK_START_THRESHOLD
    recent_threshold: float = constants.RECENT_THRESHOLD
    recent_high_confidence: float = constants.RECENT_HIGH_CONFIDENCE
    library_quick_threshold: float = constants.LIBRARY_QUICK_THRESHOLD
    suggestion_threshold: float = constants.SUGGESTION_THRESHOLD
    max_suggestions: int = constants.MAX_SUGGESTIONS
    high_confidence_score: float = constants.HIGH_CONFIDENCE_SCORE
    high_reps_limit: int = constants.HIGH_REPS_LIMIT
    high_weight_limit: float = constants.HIGH_WEIGHT_LIMIT
    bodyweight_weight_limit: float = constants.BODYWEIGHT_WEIGHT_LIMIT
    default_mode: Optional[str] = None

    def threshold_for(self, mode: str) -> float:
        """Plan and recent-session threshold for ``mode``."""
        return self.quick_start_threshold if mode == constants.QUICK_START else self.guided_threshold

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "EngineSettings":
        """Read ``[engine]`` overrides and ``[defaults] mode`` from a loaded config."""
        section = config.get("engine") or {}
        if not isinstance(section, dict):
            raise ConfigError("[engine] must be a table")
        values: Dict[str, Any] = {}
        known = {item.name: item for item in fields(cls) if item.name != "default_mode"}
        for key, raw in section.items():
            item = known.get(key)
            if item is None:
                logger.warning("Ignoring unknown engine setting %r", key)
                continue
            cast = int if item.type in ("int", int) else float
            try:
                values[key] = cast(raw)
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"engine.{key} must be a number, got {raw!r}") from exc

        mode = (config.get("defaults") or {}).get("mode") or "auto"
        if mode == "quick":
            mode = constants.QUICK_START
        if mode != "auto" and mode not in constants.MODES:
            raise ConfigError(f"defaults.mode must be auto, quick_start or guided, got {mode!r}")
        values["default_mode"] = None if mode == "auto" else mode
        return cls(**values)
