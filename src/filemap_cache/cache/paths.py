"""Cache file path composition."""

from __future__ import annotations

import os

from filemap_cache.errors.exceptions import ConfigError


def build_cache_path(cache_directory: str, cache_file_prefix: str, digest: str) -> str:
    """Join ``<cache_directory>/<cache_file_prefix>-<digest>`` with the platform separator."""
    for field, value in (
        ("cache_directory", cache_directory),
        ("cache_file_prefix", cache_file_prefix),
        ("digest", digest),
    ):
        if not value or not value.strip():
            raise ConfigError(f"{field} must not be empty", field=field)
    return os.path.join(cache_directory, f"{cache_file_prefix}-{digest}")
