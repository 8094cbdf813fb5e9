"""Custom exception hierarchy for filemap_cache."""

from __future__ import annotations

from typing import Any


class FileMapCacheError(Exception):
    """Base exception for all filemap_cache errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class ResolutionError(FileMapCacheError):
    """A module referenced by a build parameter could not be located or loaded.

    Resolution is deterministic, so this is never retried.
    """

    def __init__(
        self,
        message: str = "",
        path: str | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.original = original


class ConfigError(FileMapCacheError):
    """Build parameters or cache location are missing or invalid."""

    def __init__(self, message: str = "", field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class HashError(FileMapCacheError):
    """The digest could not be computed. Always fatal: there is no fallback."""

    def __init__(
        self,
        message: str = "",
        algorithm: str | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.algorithm = algorithm
        self.original = original
