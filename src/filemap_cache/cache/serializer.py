"""Canonical serialization of build parameters — the hash input."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from filemap_cache.cache.contributors import (
    MODULE_PATH_FIELDS,
    CacheKeyContributor,
    ModuleReference,
    plugin_cache_keys,
)
from filemap_cache.errors.exceptions import ConfigError
from filemap_cache.types import BuildParameters, PatternSpec

# Canonical field order. Never derived from model or dict iteration.
FIELD_ORDER: tuple[str, ...] = (
    "cache_breaker",
    "compute_dependencies",
    "compute_sha1",
    "dependency_extractor",
    "enable_haste_packages",
    "enable_symlinks",
    "extensions",
    "force_node_filesystem_api",
    "haste_impl_module_path",
    "ignore_pattern",
    "mocks_pattern",
    "platforms",
    "retain_all_files",
    "root_dir",
    "roots",
    "skip_package_json",
)

PLUGINS_COMPONENT = "plugins"


def parameter_components(
    params: BuildParameters,
    references: Mapping[str, ModuleReference] | None = None,
    plugins: Iterable[CacheKeyContributor] = (),
) -> list[tuple[str, Any]]:
    """Return ``(name, value)`` pairs in canonical order, JSON-ready.

    ``references`` must hold a resolved module reference for every non-null
    module path field. Plugin keys are appended last.
    """
    _check_field_order()
    references = references or {}

    components: list[tuple[str, Any]] = []
    for name in FIELD_ORDER:
        value = getattr(params, name)
        if name in MODULE_PATH_FIELDS:
            components.append((name, _module_component(name, value, references)))
        elif isinstance(value, PatternSpec):
            components.append(
                (name, {"flags": value.flags, "kind": value.kind, "source": value.source})
            )
        elif isinstance(value, tuple):
            components.append((name, list(value)))
        else:
            components.append((name, value))

    plugin_keys = plugin_cache_keys(plugins)
    if plugin_keys:
        components.append((PLUGINS_COMPONENT, plugin_keys))
    return components


def serialize_parameters(
    params: BuildParameters,
    references: Mapping[str, ModuleReference] | None = None,
    plugins: Iterable[CacheKeyContributor] = (),
) -> str:
    """Encode build parameters as compact, ASCII-only JSON.

    ``null``, ``""`` and ``[]`` remain distinct tokens in the output.
    """
    return encode_components(parameter_components(params, references, plugins))


def encode_components(components: Iterable[tuple[str, Any]]) -> str:
    return json.dumps(
        [[name, value] for name, value in components],
        ensure_ascii=True,
        separators=(",", ":"),
    )


def _module_component(
    name: str,
    value: str | None,
    references: Mapping[str, ModuleReference],
) -> list[str | None] | None:
    if value is None:
        return None
    reference = references.get(name)
    if reference is None:
        raise ConfigError(f"Module reference for '{name}' was not resolved", field=name)
    return reference.cache_material()


def _check_field_order() -> None:
    declared = set(BuildParameters.model_fields)
    ordered = set(FIELD_ORDER)
    if declared != ordered:
        unknown = sorted(declared ^ ordered)
        raise ConfigError(
            f"Unrecognised build parameter(s): {', '.join(unknown)}",
            field=unknown[0],
        )
