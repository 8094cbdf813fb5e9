"""filemap_cache — deterministic cache file identities for file-map builds."""

from filemap_cache.cache.manager import CacheKeyManager
from filemap_cache.types import BuildParameters, CacheConfig, ManagerOptions, PatternSpec

__version__ = "0.1.0"

__all__ = [
    "BuildParameters",
    "CacheConfig",
    "CacheKeyManager",
    "ManagerOptions",
    "PatternSpec",
]
