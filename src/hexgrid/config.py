"""User configuration for hexgrid (YAML)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from hexgrid.ui.palette import PALETTES

CONFIG_ENV = "HEXGRID_CONFIG"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


@dataclass(frozen=True)
class ViewerConfig:
    palette: str = "default"
    parse_structure: bool = True
    log_level: str = "WARNING"

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    def with_overrides(self, **values: Any) -> ViewerConfig:
        """Return a copy with every non-None value applied, validated."""
        changes = {k: v for k, v in values.items() if v is not None}
        return _validated(replace(self, **changes))


def get_config_path() -> Path:
    """Platform-appropriate config file location, unless HEXGRID_CONFIG is set."""
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override)
    if os.name == "nt":
        base = os.environ.get("APPDATA", os.path.expanduser("~"))
        return Path(base) / "hexgrid" / "config.yaml"
    return Path.home() / ".config" / "hexgrid" / "config.yaml"


def _validated(cfg: ViewerConfig) -> ViewerConfig:
    errors: list[str] = []
    if not isinstance(cfg.palette, str) or cfg.palette not in PALETTES:
        errors.append(f"palette must be one of {', '.join(sorted(PALETTES))}, got '{cfg.palette}'")
    if not isinstance(cfg.parse_structure, bool):
        errors.append("parse_structure must be true or false")
    level = cfg.log_level.upper() if isinstance(cfg.log_level, str) else cfg.log_level
    if level not in LOG_LEVELS:
        errors.append(f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{cfg.log_level}'")
    if errors:
        raise ConfigError(errors)
    return replace(cfg, log_level=level)


def parse_config(text: str) -> ViewerConfig:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError([f"YAML parse error: {e}"]) from None
    if data is None:
        return ViewerConfig()
    if not isinstance(data, dict):
        raise ConfigError(["Top-level YAML must be a mapping."])
    known = {"palette", "parse_structure", "log_level"}
    unknown = sorted(str(k) for k in data if k not in known)
    if unknown:
        raise ConfigError([f"unknown key '{k}'" for k in unknown])
    return _validated(ViewerConfig(**data))


def load_config(path: str | Path | None = None) -> ViewerConfig:
    """Load config from `path` (or the default location). Missing file -> defaults."""
    p = Path(path) if path is not None else get_config_path()
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ViewerConfig()
    except OSError as e:
        raise ConfigError([f"cannot read {p}: {e}"]) from None
    return parse_config(text)
