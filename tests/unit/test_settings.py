from __future__ import annotations

import pytest

from voicelift.core.config import ConfigError
from voicelift.core.constants import GUIDED, QUICK_START
from voicelift.core.settings import EngineSettings


def test_defaults() -> None:
    settings = EngineSettings()

    assert settings.threshold_for(GUIDED) == 0.6
    assert settings.threshold_for(QUICK_START) == 0.5
    assert settings.default_mode is None


def test_from_config_casts_engine_values() -> None:
    settings = EngineSettings.from_config(
        {"engine": {"guided_threshold": "0.7", "max_suggestions": 5.0, "high_weight_limit": 400}}
    )

    assert settings.guided_threshold == 0.7
    assert settings.max_suggestions == 5
    assert isinstance(settings.max_suggestions, int)
    assert settings.high_weight_limit == 400.0


def test_from_config_warns_on_unknown_keys(caplog: pytest.LogCaptureFixture) -> None:
    settings = EngineSettings.from_config({"engine": {"fuzziness": 3}})

    assert settings == EngineSettings()
    assert "Ignoring unknown engine setting 'fuzziness'" in caplog.text


def test_from_config_rejects_bad_numbers() -> None:
    with pytest.raises(ConfigError, match="engine.max_suggestions"):
        EngineSettings.from_config({"engine": {"max_suggestions": "many"}})


@pytest.mark.parametrize(
    ("mode", "expected"),
    [("auto", None), ("quick", QUICK_START), ("quick_start", QUICK_START), ("guided", GUIDED)],
)
def test_from_config_default_mode(mode: str, expected: str) -> None:
    assert EngineSettings.from_config({"defaults": {"mode": mode}}).default_mode == expected


def test_from_config_rejects_unknown_mode() -> None:
    with pytest.raises(ConfigError, match="defaults.mode"):
        EngineSettings.from_config({"defaults": {"mode": "freestyle"}})


def test_from_config_rejects_non_table_engine() -> None:
    with pytest.raises(ConfigError):
        EngineSettings.from_config({"engine": "fast"})
