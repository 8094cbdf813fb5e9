"""Digest generation for cache identities."""

from __future__ import annotations

import hashlib

from filemap_cache.errors.exceptions import HashError

DEFAULT_ALGORITHM = "sha256"

# Fixed-length algorithms only; shake_* needs a caller-chosen length.
SUPPORTED_ALGORITHMS: frozenset[str] = frozenset(
    {
        "md5",
        "sha1",
        "sha224",
        "sha256",
        "sha384",
        "sha512",
        "blake2b",
        "blake2s",
        "sha3_256",
        "sha3_512",
    }
)


def hash_text(text: str, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Hash UTF-8 encoded text and return the hex digest.

    Raises HashError for an unsupported algorithm or if the host's hashlib
    refuses it (e.g. md5 on a FIPS build).
    """
    if algorithm not in SUPPORTED_ALGORITHMS:
        raise HashError(f"Unsupported hash algorithm: {algorithm}", algorithm=algorithm)
    try:
        hasher = hashlib.new(algorithm)
    except ValueError as exc:
        raise HashError(
            f"Hash algorithm {algorithm} is unavailable: {exc}", algorithm=algorithm, original=exc
        ) from exc
    hasher.update(text.encode("utf-8"))
    return hasher.hexdigest()
