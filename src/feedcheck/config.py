"""Settings loading: YAML file first, FEEDCHECK_* environment variables on top.

Environment keys map onto the settings tree with ``__`` as the level
separator, e.g. ``FEEDCHECK_EXCHANGES__KRAKEN__ENABLED=false``. Values are
parsed as YAML scalars so booleans, numbers and lists work as expected.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .settings import Settings

ENV_PREFIX = "FEEDCHECK_"
DEFAULT_CONFIG_FILE = "feedcheck.yml"

# Variables under the prefix that configure the loader itself.
RESERVED_ENV_KEYS = frozenset({"CONFIG", "LOG_LEVEL"})


def _set_path(tree: dict[str, Any], path: list[str], value: Any) -> None:
    node = tree
    for key in path[:-1]:
        child = node.get(key)
        if not isinstance(child, dict):
            child = node[key] = {}
        node = child
    node[path[-1]] = value


def _env_value(raw: str) -> Any:
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw


def _env_overrides(environ: dict[str, str] | None = None, *, prefix: str = ENV_PREFIX) -> list[tuple[list[str], Any]]:
    """Collect (path, value) overrides from prefixed environment variables."""
    environ = os.environ if environ is None else environ
    overrides = []
    for key, raw in sorted(environ.items()):
        if not key.startswith(prefix):
            continue
        name = key[len(prefix) :]
        if name in RESERVED_ENV_KEYS:
            continue
        path = [part.lower() for part in name.split("__") if part]
        if path:
            overrides.append((path, _env_value(raw)))
    return overrides


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config root must be a mapping, got: {type(loaded)!r}")
    return loaded


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load and validate settings.

    The path defaults to ``$FEEDCHECK_CONFIG`` or ``feedcheck.yml``; a missing
    file yields defaults. Invalid content raises ValueError.
    """
    if config_path is None:
        config_path = os.environ.get(f"{ENV_PREFIX}CONFIG", DEFAULT_CONFIG_FILE)

    data = dict(_read_config_file(Path(config_path)))
    for path, value in _env_overrides():
        _set_path(data, path, value)

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
