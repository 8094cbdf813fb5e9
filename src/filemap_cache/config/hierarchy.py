"""Configuration hierarchy — merges sources in priority order.

Precedence (later overrides earlier):
  1. Package defaults
  2. Global config   (~/.filemap_cache/config.yaml)
  3. Project config   (nearest filemap_cache.yaml from cwd upward)
  4. Environment variables (FILEMAP_CACHE_*)
  5. Runtime arguments
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from filemap_cache.config.defaults import get_defaults
from filemap_cache.types import CacheConfig, validate_snapshot

logger = logging.getLogger(__name__)

_GLOBAL_CONFIG_PATH = Path.home() / ".filemap_cache" / "config.yaml"
_PROJECT_CONFIG_NAME = "filemap_cache.yaml"

_ENV_MAP: dict[str, str] = {
    "FILEMAP_CACHE_DIRECTORY": "cache_directory",
    "FILEMAP_CACHE_FILE_PREFIX": "cache_file_prefix",
    "FILEMAP_CACHE_HASH_ALGORITHM": "hash_algorithm",
    "FILEMAP_CACHE_LOG_LEVEL": "log_level",
}


def load_config_hierarchy(**runtime_overrides: Any) -> dict[str, Any]:
    """Load and merge configuration from all sources.

    Runtime overrides set to ``None`` are treated as not given.
    """
    layers: list[dict[str, Any]] = [
        get_defaults(),
        _read_mapping(_GLOBAL_CONFIG_PATH),
        _read_mapping(_nearest_project_config()),
        {key: os.environ[env] for env, key in _ENV_MAP.items() if env in os.environ},
        {key: value for key, value in runtime_overrides.items() if value is not None},
    ]

    merged: dict[str, Any] = {}
    for layer in layers:
        merged.update(layer)
    return merged


def cache_config_from(config: dict[str, Any]) -> CacheConfig:
    """Build a validated CacheConfig from a merged config dict.

    Raises ConfigError when the directory or prefix is missing or empty.
    """
    return validate_snapshot(
        CacheConfig,
        {
            "cache_directory": config.get("cache_directory"),
            "cache_file_prefix": config.get("cache_file_prefix"),
        },
    )


def _read_mapping(path: Path | None) -> dict[str, Any]:
    """Read a YAML mapping; anything unreadable counts as an empty layer."""
    if path is None or not path.is_file():
        return {}
    try:
        data = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, ignoring", path)
        return {}
    logger.debug("Loaded config layer %s", path)
    return data


def _nearest_project_config() -> Path | None:
    cwd = Path.cwd()
    return next(
        (d / _PROJECT_CONFIG_NAME for d in (cwd, *cwd.parents) if (d / _PROJECT_CONFIG_NAME).exists()),
        None,
    )
