"""Cache identity — canonical serialization, digests and cache file paths."""

from filemap_cache.cache.contributors import (
    CacheKeyContributor,
    HasCacheKeyContributor,
    NoContributor,
    resolve_module_reference,
)
from filemap_cache.cache.keys import hash_text
from filemap_cache.cache.manager import CacheKeyManager
from filemap_cache.cache.paths import build_cache_path
from filemap_cache.cache.serializer import parameter_components, serialize_parameters

__all__ = [
    "CacheKeyManager",
    "CacheKeyContributor",
    "HasCacheKeyContributor",
    "NoContributor",
    "build_cache_path",
    "hash_text",
    "parameter_components",
    "resolve_module_reference",
    "serialize_parameters",
]
