"""Package-level default configuration values."""

from __future__ import annotations

import tempfile
from typing import Any

from filemap_cache.cache.keys import DEFAULT_ALGORITHM

# Default cache location
DEFAULT_CACHE_DIRECTORY = tempfile.gettempdir()
DEFAULT_CACHE_FILE_PREFIX = "filemap"

# Digest settings
DEFAULT_HASH_ALGORITHM = DEFAULT_ALGORITHM

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "cache_directory": DEFAULT_CACHE_DIRECTORY,
        "cache_file_prefix": DEFAULT_CACHE_FILE_PREFIX,
        "hash_algorithm": DEFAULT_HASH_ALGORITHM,
        "log_level": DEFAULT_LOG_LEVEL,
    }
