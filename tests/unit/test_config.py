from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from voicelift.core.config import (
    ConfigError,
    _deep_merge,
    default_config,
    default_config_path,
    default_data_dir,
    expand_path,
    load_config,
    render_toml,
    resolve_custom_store,
    resolve_log_level,
    save_config,
)


def test_deep_merge_nested_dicts() -> None:
    base = {"a": {"b": 1, "c": 2}, "x": 3}
    override = {"a": {"b": 9}, "y": 4}
    merged = _deep_merge(base, override)
    assert merged == {"a": {"b": 9, "c": 2}, "x": 3, "y": 4}
    assert base["a"]["b"] == 1


def test_expand_path_expands_home_and_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("VOICELIFT_TMP_PATH", str(tmp_path))
    expanded = expand_path("$VOICELIFT_TMP_PATH/config.toml")
    assert expanded == (tmp_path / "config.toml").resolve()


def test_default_config_path_uses_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "custom.toml"
    monkeypatch.setenv("VOICELIFT_CONFIG_FILE", str(path))
    assert default_config_path() == path.resolve()


def test_default_data_dir_uses_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "voicelift-data"
    monkeypatch.setenv("VOICELIFT_DATA_DIR", str(path))
    assert default_data_dir() == path.resolve()


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "missing.toml")
    assert cfg["defaults"]["mode"] == "auto"
    assert cfg["engine"] == {}
    assert cfg["logging"]["level"] == "WARNING"
    assert cfg["library"]["custom_store"].endswith("custom_exercises.json")


def test_load_config_from_json(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"engine": {"guided_threshold": 0.7}, "defaults": {"mode": "quick"}}))
    cfg = load_config(path)
    assert cfg["engine"]["guided_threshold"] == 0.7
    assert cfg["defaults"]["mode"] == "quick"
    assert cfg["logging"]["level"] == "WARNING"


def test_load_config_from_toml(write_temp_toml) -> None:
    path = write_temp_toml(
        "config.toml",
        """
[engine]
high_weight_limit = 300

[logging]
level = "info"
""",
    )
    cfg = load_config(path)
    assert cfg["engine"]["high_weight_limit"] == 300
    assert cfg["logging"]["level"] == "info"


def test_load_config_invalid_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{broken")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_invalid_toml_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.toml"
    path.write_text("[engine\nguided_threshold = 0.7")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_root_must_be_table(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")
    with pytest.raises(ConfigError, match="object/table"):
        load_config(path)


def test_save_config_json(tmp_path: Path) -> None:
    payload: Dict[str, Any] = {"engine": {"max_suggestions": 5}}
    path = save_config(payload, tmp_path / "config.json")
    assert path.exists()
    assert json.loads(path.read_text())["engine"]["max_suggestions"] == 5


def test_save_config_toml_and_reload(tmp_path: Path) -> None:
    payload = default_config()
    payload["engine"] = {"guided_threshold": 0.65, "aliases": ["a", "b"]}
    path = save_config(payload, tmp_path / "nested" / "config.toml")
    assert path.exists()
    cfg = load_config(path)
    assert cfg["engine"]["guided_threshold"] == 0.65
    assert cfg["engine"]["aliases"] == ["a", "b"]
    assert cfg["defaults"]["mode"] == "auto"


def test_render_toml_skips_none_and_nests_tables() -> None:
    text = render_toml({"defaults": {"mode": "auto", "unused": None}, "engine": {}})
    assert text.splitlines()[0] == "[defaults]"
    assert 'mode = "auto"' in text
    assert "unused" not in text
    assert "[engine]" in text


def test_resolve_custom_store_env_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    store_path = tmp_path / "mine.json"
    monkeypatch.setenv("VOICELIFT_CUSTOM_STORE", str(store_path))
    resolved = resolve_custom_store({"library": {"custom_store": "/nope"}})
    assert resolved == store_path.resolve()


def test_resolve_custom_store_default_uses_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("VOICELIFT_DATA_DIR", str(tmp_path / "xdg"))
    resolved = resolve_custom_store({"library": {}})
    assert resolved == (tmp_path / "xdg" / "custom_exercises.json").resolve()


@pytest.mark.parametrize(
    ("config", "verbose", "quiet", "expected"),
    [
        ({}, False, False, "WARNING"),
        ({"logging": {"level": "info"}}, False, False, "INFO"),
        ({"logging": {"level": "info"}}, True, False, "DEBUG"),
        ({}, False, True, "ERROR"),
    ],
)
def test_resolve_log_level(config: Dict[str, Any], verbose: bool, quiet: bool, expected: str) -> None:
    assert resolve_log_level(config, verbose=verbose, quiet=quiet) == expected


def test_resolve_log_level_rejects_unknown_level() -> None:
    with pytest.raises(ConfigError, match="logging.level"):
        resolve_log_level({"logging": {"level": "chatty"}})
