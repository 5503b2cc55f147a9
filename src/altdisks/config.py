"""Configuration helpers: YAML run configs layered over environment settings."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULTS: dict[str, Any] = {
    "light_count": 4,
    "max_light_count": 12,
    "algorithms": ["alternate", "lawnmower"],
    "workers": 1,
    "log_level": "INFO",
    "plot": {"width": 6.0, "height": 4.0, "title": "Swaps per light count"},
}


def _merge_dict(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge_dict(result[key], value)
        else:
            result[key] = value
    return result


def load_config(
    path: str | Path | None,
    overrides: dict[str, Any] | None = None,
    settings: AltDisksSettings | None = None,
) -> dict[str, Any]:
    """Return ``DEFAULTS`` layered with *settings*, the YAML file at *path* and *overrides*.

    Later layers win: environment settings, then the file, then explicit overrides.
    """

    config = copy.deepcopy(DEFAULTS)
    if settings is not None:
        config = _merge_dict(config, settings.as_overrides())
    if path:
        with Path(path).open("r", encoding="utf-8") as fh:
            file_cfg = yaml.safe_load(fh) or {}
        if not isinstance(file_cfg, dict):
            raise ValueError(f"Config file {path} must contain a mapping, got {type(file_cfg).__name__}")
        config = _merge_dict(config, file_cfg)
    if overrides:
        config = _merge_dict(config, overrides)
    return config


class AltDisksSettings(BaseSettings):
    """Environment driven defaults for the command line."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    log_level: str = Field(default="INFO", alias="ALTDISKS_LOG_LEVEL")
    workers: int = Field(default=1, ge=1, alias="ALTDISKS_WORKERS")
    max_light_count: int = Field(default=12, ge=1, alias="ALTDISKS_MAX_LIGHT_COUNT")

    def as_overrides(self) -> dict[str, Any]:
        return {
            "log_level": self.log_level,
            "workers": self.workers,
            "max_light_count": self.max_light_count,
        }


def load_settings() -> AltDisksSettings:
    """Return settings initialised from environment."""

    return AltDisksSettings()
