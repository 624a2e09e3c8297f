"""Configuration loading with CLI > ENV > file > defaults precedence."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

import yaml

from benford_audit.exceptions import ConfigValidationError
from benford_audit.utils.logging import get_logger

log = get_logger(__name__, component="config")

Caster = Callable[[Any], Any]


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML or JSON mapping; an empty file yields ``{}``."""
    path = Path(path)
    if not path.exists():
        raise ConfigValidationError(f"Config file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() == ".json":
            content = json.loads(text) if text.strip() else {}
        else:
            content = yaml.safe_load(text) or {}
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigValidationError(f"Cannot parse config {path}: {exc}") from exc
    if not isinstance(content, dict):
        raise ConfigValidationError(f"Config {path} must contain a mapping, got {type(content).__name__}")
    return content


def _cast(key: str, value: Any, casters: Mapping[str, Caster]) -> Any:
    caster = casters.get(key)
    if caster is None or value is None:
        return value
    try:
        return caster(value)
    except (TypeError, ValueError) as exc:
        raise ConfigValidationError(f"Invalid value for {key}: {value!r} ({exc})") from exc


def load_config_with_precedence(
    *,
    config_path: Optional[Path],
    env_prefix: str,
    cli_values: Mapping[str, Any],
    defaults: Mapping[str, Any],
    casters: Optional[Mapping[str, Caster]] = None,
) -> Dict[str, Any]:
    """Merge configuration sources.

    Later sources win: defaults, then the config file, then ``{env_prefix}{KEY}``
    environment variables, then CLI values that are not None. Only keys present
    in ``defaults`` are read from the environment; file keys outside ``defaults``
    are kept as-is.
    """
    casters = casters or {}
    merged: Dict[str, Any] = dict(defaults)
    sources: Dict[str, str] = {key: "default" for key in defaults}

    if config_path is not None:
        for key, value in _load_yaml(config_path).items():
            merged[key] = _cast(key, value, casters)
            sources[key] = "file"

    for key in defaults:
        env_value = os.environ.get(f"{env_prefix}{key.upper()}")
        if env_value is not None:
            merged[key] = _cast(key, env_value, casters)
            sources[key] = "env"

    for key, value in cli_values.items():
        if value is not None:
            merged[key] = _cast(key, value, casters)
            sources[key] = "cli"

    log.debug("Configuration resolved", extra={"sources": sources})
    return merged


__all__ = ["_load_yaml", "load_config_with_precedence"]
