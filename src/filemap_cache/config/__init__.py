"""Configuration — defaults, layered config files and build parameter YAML."""

from filemap_cache.config.hierarchy import cache_config_from, load_config_hierarchy
from filemap_cache.config.loader import load_build_parameters

__all__ = ["cache_config_from", "load_build_parameters", "load_config_hierarchy"]
