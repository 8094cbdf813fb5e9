"""Error handling — exceptions raised while deriving cache paths."""

from filemap_cache.errors.exceptions import (
    ConfigError,
    FileMapCacheError,
    HashError,
    ResolutionError,
)

__all__ = [
    "FileMapCacheError",
    "ResolutionError",
    "ConfigError",
    "HashError",
]
