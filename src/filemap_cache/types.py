"""Shared Pydantic models for filemap_cache."""

from __future__ import annotations

import os
import re
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from filemap_cache.errors.exceptions import ConfigError

# Explicit `re` flags and the letters they serialize to. re.UNICODE is
# implied for str patterns and never contributes.
_FLAG_LETTERS: tuple[tuple[re.RegexFlag, str], ...] = (
    (re.ASCII, "a"),
    (re.IGNORECASE, "i"),
    (re.LOCALE, "l"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)

_SNAPSHOT_CONFIG = {
    "frozen": True,
    "extra": "forbid",
    "alias_generator": to_camel,
    "validate_by_name": True,
    "validate_by_alias": True,
}


def flags_to_letters(flags: int) -> str:
    """Render compiled-pattern flags as sorted modifier letters."""
    return "".join(letter for flag, letter in _FLAG_LETTERS if flags & flag)


# ── Config models ──


class PatternSpec(BaseModel):
    """A regular expression captured by its literal text and modifiers."""

    model_config = {"frozen": True, "extra": "forbid"}

    source: str
    flags: str = ""
    kind: Literal["str", "bytes"] = "str"

    @model_validator(mode="before")
    @classmethod
    def _from_pattern(cls, data: Any) -> Any:
        if isinstance(data, re.Pattern):
            source = data.pattern
            kind = "str"
            if isinstance(source, bytes):
                source = source.decode("latin-1")
                kind = "bytes"
            return {"source": source, "flags": flags_to_letters(data.flags), "kind": kind}
        if isinstance(data, str):
            return {"source": data, "flags": ""}
        return data

    @field_validator("flags")
    @classmethod
    def _normalize_flags(cls, value: str) -> str:
        if not value.isalpha() and value:
            raise ValueError(f"pattern flags must be letters, got {value!r}")
        return "".join(sorted(set(value)))

    def __str__(self) -> str:
        prefix = "b" if self.kind == "bytes" else ""
        return f"{prefix}/{self.source}/{self.flags}"


class BuildParameters(BaseModel):
    """How the indexing/build step behaves for one project.

    Field declaration order matches the canonical serialization order used by
    :mod:`filemap_cache.cache.serializer`.
    """

    model_config = _SNAPSHOT_CONFIG

    cache_breaker: str
    compute_dependencies: bool
    compute_sha1: bool
    dependency_extractor: str | None = None
    enable_haste_packages: bool
    enable_symlinks: bool
    extensions: tuple[str, ...]
    force_node_filesystem_api: bool
    haste_impl_module_path: str | None = None
    ignore_pattern: PatternSpec
    mocks_pattern: PatternSpec | None = None
    platforms: tuple[str, ...]
    retain_all_files: bool
    root_dir: str
    roots: tuple[str, ...]
    skip_package_json: bool

    @field_validator("dependency_extractor", "haste_impl_module_path", "root_dir", mode="before")
    @classmethod
    def _fspath(cls, value: Any) -> Any:
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value

    @field_validator("roots", mode="before")
    @classmethod
    def _fspath_roots(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return tuple(os.fspath(v) if isinstance(v, os.PathLike) else v for v in value)
        return value


class CacheConfig(BaseModel):
    """Directory and label under which a cache artifact is stored."""

    model_config = _SNAPSHOT_CONFIG

    cache_directory: str
    cache_file_prefix: str

    @field_validator("cache_directory", "cache_file_prefix", mode="before")
    @classmethod
    def _not_empty(cls, value: Any) -> Any:
        if isinstance(value, os.PathLike):
            value = os.fspath(value)
        if isinstance(value, str) and not value.strip():
            raise ValueError("must not be empty")
        return value


class ManagerOptions(BaseModel):
    """Everything that feeds the fingerprint besides the cache location."""

    model_config = {**_SNAPSHOT_CONFIG, "arbitrary_types_allowed": True}

    build_parameters: BuildParameters
    plugins: tuple[Any, ...] = Field(default_factory=tuple)

    @field_validator("plugins")
    @classmethod
    def _plugins_contribute(cls, value: tuple[Any, ...]) -> tuple[Any, ...]:
        for plugin in value:
            if not callable(getattr(plugin, "get_cache_key", None)):
                raise ValueError(f"plugin {plugin!r} does not provide get_cache_key()")
        return value


def validate_snapshot(model: type[BaseModel], value: Any) -> Any:
    """Validate ``value`` into ``model``; failures become ConfigError.

    ``ConfigError.field`` holds the snake_case name even when the input used
    camelCase aliases.
    """
    if isinstance(value, model):
        return value
    if value is None:
        raise ConfigError(f"{model.__name__} is required")
    try:
        return model.model_validate(value)
    except ValidationError as exc:
        aliases = {info.alias: name for name, info in model.model_fields.items() if info.alias}
        loc = [str(part) for part in exc.errors()[0]["loc"]]
        if loc:
            loc[0] = aliases.get(loc[0], loc[0])
        field = ".".join(loc) or None
        raise ConfigError(f"Invalid {model.__name__}: {exc}", field=field) from exc
