"""Cache-key contributors — external modules that add material to the fingerprint.

A module referenced by a build parameter path resolves exactly once into one
of two variants: it either exposes ``get_cache_key()`` or it doesn't. The
variant is fixed at resolution time; later calls never inspect the module again.
"""

from __future__ import annotations

import hashlib
import importlib.util
import logging
import os
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Protocol, runtime_checkable

from filemap_cache.errors.exceptions import ResolutionError

logger = logging.getLogger(__name__)

# Build parameter fields that hold a path to a contributor module.
MODULE_PATH_FIELDS: tuple[str, ...] = ("dependency_extractor", "haste_impl_module_path")


@runtime_checkable
class CacheKeyContributor(Protocol):
    def get_cache_key(self) -> str: ...


ModuleResolver = Callable[[str], Any]


@dataclass(frozen=True)
class HasCacheKeyContributor:
    """A referenced module that supplies extra cache-key material."""

    path: str
    contributor: CacheKeyContributor

    def cache_material(self) -> list[str | None]:
        return [self.path, contributor_cache_key(self.contributor, origin=self.path)]


@dataclass(frozen=True)
class NoContributor:
    """A referenced module without a cache key; only its path counts."""

    path: str

    def cache_material(self) -> list[str | None]:
        return [self.path, None]


ModuleReference = HasCacheKeyContributor | NoContributor


def normalize_module_path(path: str | os.PathLike[str]) -> str:
    return os.path.normpath(os.path.abspath(os.fspath(path)))


def load_module_from_path(path: str) -> ModuleType:
    """Import a Python source file by path under a name derived from the path."""
    if not os.path.isfile(path):
        raise ResolutionError(f"Cannot resolve module: {path} does not exist", path=path)

    module_name = "_filemap_cache_ref_" + hashlib.sha1(path.encode("utf-8")).hexdigest()[:12]
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ResolutionError(f"Cannot resolve module: {path} is not importable", path=path)

    module = importlib.util.module_from_spec(spec)
    # Registered while executing so dataclasses and similar can look the module up.
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        sys.modules.pop(module_name, None)
        raise ResolutionError(f"Failed to load module {path}: {exc}", path=path, original=exc) from exc
    return module


def resolve_module_reference(
    path: str | os.PathLike[str],
    resolver: ModuleResolver | None = None,
) -> ModuleReference:
    """Resolve a referenced module path into a contributor variant.

    Args:
        path: Path to the module, as given in the build parameters.
        resolver: Callable mapping a normalized path to the loaded module (or
            any object). Defaults to :func:`load_module_from_path`.

    Raises:
        ResolutionError: If the resolver cannot produce the module.
    """
    normalized = normalize_module_path(path)
    resolve = resolver or load_module_from_path
    try:
        target = resolve(normalized)
    except ResolutionError:
        raise
    except Exception as exc:
        raise ResolutionError(
            f"Cannot resolve module {normalized}: {exc}", path=normalized, original=exc
        ) from exc

    if callable(getattr(target, "get_cache_key", None)):
        logger.debug("Module %s contributes a cache key", normalized)
        return HasCacheKeyContributor(path=normalized, contributor=target)

    logger.warning(
        "Expected %s to export get_cache_key() -> str; only its path affects the cache key",
        normalized,
    )
    return NoContributor(path=normalized)


def resolve_module_references(
    values: dict[str, str | None],
    resolver: ModuleResolver | None = None,
) -> dict[str, ModuleReference]:
    """Resolve every non-null module path field; null fields are left out."""
    return {
        field: resolve_module_reference(value, resolver)
        for field, value in values.items()
        if value is not None
    }


def contributor_cache_key(contributor: CacheKeyContributor, origin: str) -> str:
    try:
        key = contributor.get_cache_key()
    except Exception as exc:
        raise ResolutionError(
            f"get_cache_key() of {origin} failed: {exc}", path=origin, original=exc
        ) from exc
    if not isinstance(key, str):
        raise ResolutionError(
            f"get_cache_key() of {origin} returned {type(key).__name__}, expected str",
            path=origin,
        )
    return key


def plugin_cache_keys(plugins: Iterable[CacheKeyContributor]) -> list[str]:
    return [contributor_cache_key(plugin, origin=repr(plugin)) for plugin in plugins]
