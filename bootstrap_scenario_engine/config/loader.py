"""Layered configuration loading: CLI > ENV > config file > defaults."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Mapping

import yaml

from bootstrap_scenario_engine.exceptions import ConfigValidationError
from bootstrap_scenario_engine.utils.logging import get_logger

log = get_logger(__name__, component="config.loader")

Caster = Callable[[Any], Any]


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        content = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"Invalid YAML in {path}: {exc}") from exc
    return content or {}


def load_config_file(path: Path | str | None) -> dict[str, Any]:
    """Read a YAML or JSON mapping; ``None`` yields an empty mapping."""

    if path is None:
        return {}
    path = Path(path)
    if not path.exists():
        raise ConfigValidationError(f"Config file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        try:
            content = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ConfigValidationError(f"Invalid JSON in {path}: {exc}") from exc
    elif suffix in {".yml", ".yaml"}:
        content = _load_yaml(path)
    else:
        raise ConfigValidationError("Config file must be JSON or YAML")

    if not isinstance(content, dict):
        raise ConfigValidationError(f"Config file {path} must contain a mapping")
    return {str(k).replace("-", "_"): v for k, v in content.items()}


def _cast(key: str, value: Any, casters: Mapping[str, Caster], source: str) -> Any:
    if value is None or key not in casters:
        return value
    try:
        return casters[key](value)
    except (TypeError, ValueError) as exc:
        raise ConfigValidationError(f"Invalid value for {key} from {source}: {value!r}") from exc


def load_config_with_precedence(
    *,
    config_path: Path | str | None,
    env_prefix: str,
    cli_values: Mapping[str, Any],
    defaults: Mapping[str, Any],
    casters: Mapping[str, Caster] | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Merge configuration sources, highest precedence last applied.

    Only keys present in ``defaults`` are resolved. CLI values of ``None`` mean
    "not supplied" and fall through to the environment (``<PREFIX><KEY>``), then
    the config file, then the default.
    """

    casters = casters or {}
    environ = os.environ if environ is None else environ
    file_values = load_config_file(config_path)

    unknown = set(file_values) - set(defaults)
    if unknown:
        raise ConfigValidationError(f"Unknown config keys in {config_path}: {sorted(unknown)}")

    resolved: dict[str, Any] = {}
    for key, default in defaults.items():
        env_key = f"{env_prefix}{key.upper()}"
        if cli_values.get(key) is not None:
            resolved[key] = _cast(key, cli_values[key], casters, "cli")
        elif env_key in environ:
            resolved[key] = _cast(key, environ[env_key], casters, f"env {env_key}")
        elif key in file_values:
            resolved[key] = _cast(key, file_values[key], casters, "config file")
        else:
            resolved[key] = default

    log.debug("Configuration resolved from %s", config_path or "defaults")
    return resolved


__all__ = ["load_config_file", "load_config_with_precedence"]
