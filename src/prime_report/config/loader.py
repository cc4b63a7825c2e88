from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from prime_report.config.models import AppConfig

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[1] / "default_config.yml"

_ALLOWED_KEYS = {"version", "range", "output", "checker", "logging"}
_REQUIRED_KEYS = ("version", "range", "output")


# ConfigError is raised for invalid configuration (fail fast, no defaults for required keys).
class ConfigError(ValueError):
    pass


def load_config(path: Path) -> AppConfig:
    # YAML loader: raw mapping is checked for shape, then validated into typed models.
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")

    _validate_top_level(raw)
    return parse_config(raw)


def parse_config(raw: dict[str, Any]) -> AppConfig:
    try:
        return AppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _validate_top_level(raw: dict[str, Any]) -> None:
    # Fail fast on unknown keys to prevent silent misconfiguration.
    unknown = set(raw.keys()) - _ALLOWED_KEYS
    if unknown:
        raise ConfigError(f"Unknown top-level keys: {sorted(unknown)}")

    missing = [key for key in _REQUIRED_KEYS if key not in raw]
    if missing:
        raise ConfigError(f"Missing required top-level keys: {', '.join(missing)}")

    if not isinstance(raw.get("range"), dict):
        raise ConfigError("range must be a mapping with start and end")
