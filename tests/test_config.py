"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from altdisks.config import DEFAULTS, load_config, load_settings


def test_defaults_are_copied() -> None:
    cfg = load_config(None)
    cfg["plot"]["title"] = "changed"

    assert DEFAULTS["plot"]["title"] == "Swaps per light count"
    assert cfg["algorithms"] == ["alternate", "lawnmower"]


def test_yaml_file_merges_nested_sections(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yaml"
    path.write_text("max_light_count: 5\nplot:\n  title: mine\n", encoding="utf-8")

    cfg = load_config(str(path), overrides={"workers": 3})

    assert cfg["max_light_count"] == 5
    assert cfg["plot"]["title"] == "mine"
    assert cfg["plot"]["width"] == 6.0
    assert cfg["workers"] == 3


def test_empty_yaml_file_keeps_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == load_config(None)


def test_non_mapping_yaml_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ValueError, match="mapping"):
        load_config(path)


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("ALTDISKS_WORKERS", "3")
    monkeypatch.setenv("ALTDISKS_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.workers == 3
    assert settings.log_level == "debug"
    assert settings.max_light_count == 12


def test_settings_reject_invalid_workers(monkeypatch) -> None:
    monkeypatch.setenv("ALTDISKS_WORKERS", "0")

    with pytest.raises(ValidationError):
        load_settings()


def test_file_overrides_environment(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("ALTDISKS_MAX_LIGHT_COUNT", "20")
    monkeypatch.setenv("ALTDISKS_WORKERS", "2")
    path = tmp_path / "cfg.yaml"
    path.write_text("max_light_count: 6\n", encoding="utf-8")

    cfg = load_config(path, settings=load_settings())

    assert cfg["max_light_count"] == 6
    assert cfg["workers"] == 2


def test_sample_config_loads() -> None:
    path = Path(__file__).resolve().parents[1] / "configs" / "compare.yaml"

    cfg = load_config(path)

    assert cfg["max_light_count"] == 8
    assert cfg["workers"] == 2
    assert cfg["plot"]["title"] == "Alternating vs lawnmower swaps"
