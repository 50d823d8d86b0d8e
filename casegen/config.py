"""
config.py

Responsibility: Load the optional `casegen.yaml` file into a typed, frozen config.

Lookup rules:
- The file is read from the directory casegen runs in; a missing file means defaults.
- The top level must be a YAML mapping. Unknown keys are ignored.
- `CASEGEN_LOG_LEVEL` in the environment overrides `log_level` from the file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

CONFIG_FILENAME = "casegen.yaml"
LOG_LEVEL_ENV = "CASEGEN_LOG_LEVEL"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ScaffoldConfig:
    """Values substituted into generated manifests, plus the CLI log level."""

    license: str = "ISC"
    project_version: str = "1.0.0"
    log_level: str = "WARNING"


def _read_mapping(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {path}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a mapping at the top level: {path}")
    return data


def _str_value(data: Mapping[str, Any], key: str, default: str, *, strict: bool = False) -> str:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, (dict, list)):
        raise ConfigError(f"`{key}` must be a scalar value.")
    # YAML reads 1.10 as the float 1.1; refuse rather than change the text.
    if strict and not isinstance(value, str):
        raise ConfigError(f"`{key}` must be a string; quote it, e.g. {key}: \"{value}\".")
    return str(value).strip() or default


def load_config(
    directory: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> ScaffoldConfig:
    """
    Build a `ScaffoldConfig` from `<directory>/casegen.yaml` and the environment.

    Recognized keys:
    - license: str (default "ISC")
    - project_version: str (default "1.0.0"); must be a YAML string, so quote `"1.10"`
    - log_level: str (default "WARNING")
    """
    base = Path(directory) if directory is not None else Path.cwd()
    env = os.environ if environ is None else environ

    path = base / CONFIG_FILENAME
    data = _read_mapping(path) if path.is_file() else {}

    defaults = ScaffoldConfig()
    log_level = (env.get(LOG_LEVEL_ENV) or "").strip() or _str_value(data, "log_level", defaults.log_level)

    return ScaffoldConfig(
        license=_str_value(data, "license", defaults.license),
        project_version=_str_value(data, "project_version", defaults.project_version, strict=True),
        log_level=log_level.upper(),
    )
