"""YAML loading and validation of build parameters."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from filemap_cache.errors.exceptions import ConfigError
from filemap_cache.types import BuildParameters


def load_build_parameters(path: str | Path) -> BuildParameters:
    """Load a YAML file with a top-level ``build_parameters`` mapping."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Build parameters YAML not found: {path}")

    with open(path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Malformed YAML in {path}: {e}") from e

    if not isinstance(raw, dict) or "build_parameters" not in raw:
        raise ConfigError(f"Invalid build parameters YAML: missing top-level 'build_parameters' key in {path}")

    try:
        return BuildParameters.model_validate(raw["build_parameters"])
    except ValidationError as e:
        raise ConfigError(f"Invalid build parameters in {path}: {e}") from e
