"""Cache key manager — turns build parameters into a stable cache file path."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from filemap_cache.cache.contributors import (
    MODULE_PATH_FIELDS,
    CacheKeyContributor,
    ModuleReference,
    ModuleResolver,
    resolve_module_references,
)
from filemap_cache.cache.keys import DEFAULT_ALGORITHM, hash_text
from filemap_cache.cache.paths import build_cache_path
from filemap_cache.cache.serializer import encode_components, parameter_components
from filemap_cache.types import (
    BuildParameters,
    CacheConfig,
    ManagerOptions,
    validate_snapshot,
)

logger = logging.getLogger(__name__)


class CacheKeyManager:
    """Owns an immutable configuration snapshot and its cache file path.

    Referenced modules are resolved and the digest computed once, at
    construction. Contributor keys that change afterwards do not affect an
    existing manager; build a new one to pick them up.
    """

    def __init__(
        self,
        options: ManagerOptions | Mapping[str, Any],
        config: CacheConfig | Mapping[str, Any],
        resolver: ModuleResolver | None = None,
        algorithm: str = DEFAULT_ALGORITHM,
    ) -> None:
        self._options = validate_snapshot(ManagerOptions, options)
        self._config = validate_snapshot(CacheConfig, config)
        self._algorithm = algorithm
        self._references = _resolve(self._options.build_parameters, resolver)
        self._components = parameter_components(
            self._options.build_parameters, self._references, self._options.plugins
        )
        self._digest: str | None = None
        self._cache_path: str | None = None
        self.get_cache_file_path()

    @property
    def build_parameters(self) -> BuildParameters:
        return self._options.build_parameters

    @property
    def config(self) -> CacheConfig:
        return self._config

    @property
    def references(self) -> dict[str, ModuleReference]:
        return dict(self._references)

    @property
    def digest(self) -> str:
        if self._digest is None:
            self._digest = hash_text(encode_components(self._components), self._algorithm)
        return self._digest

    def components(self) -> list[tuple[str, Any]]:
        """The canonical ``(name, value)`` pairs the digest was computed from."""
        return list(self._components)

    def get_cache_file_path(self) -> str:
        if self._cache_path is None:
            self._cache_path = build_cache_path(
                self._config.cache_directory, self._config.cache_file_prefix, self.digest
            )
            logger.debug("Cache file path: %s", self._cache_path)
        return self._cache_path

    @staticmethod
    def compute_cache_file_path(
        build_parameters: BuildParameters | Mapping[str, Any],
        cache_file_prefix: str,
        cache_directory: str,
        resolver: ModuleResolver | None = None,
        plugins: Iterable[CacheKeyContributor] = (),
        algorithm: str = DEFAULT_ALGORITHM,
    ) -> str:
        """Compute the cache file path without keeping a manager around.

        Agrees path-for-path with :meth:`get_cache_file_path` for equal inputs.
        """
        params = validate_snapshot(BuildParameters, build_parameters)
        config = validate_snapshot(
            CacheConfig,
            {"cache_directory": cache_directory, "cache_file_prefix": cache_file_prefix},
        )
        components = parameter_components(params, _resolve(params, resolver), tuple(plugins))
        digest = hash_text(encode_components(components), algorithm)
        return build_cache_path(config.cache_directory, config.cache_file_prefix, digest)


def _resolve(
    params: BuildParameters, resolver: ModuleResolver | None
) -> dict[str, ModuleReference]:
    return resolve_module_references(
        {field: getattr(params, field) for field in MODULE_PATH_FIELDS}, resolver
    )
