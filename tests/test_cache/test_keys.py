"""Tests for digest generation."""

import hashlib

import pytest

from filemap_cache.cache.keys import SUPPORTED_ALGORITHMS, hash_text
from filemap_cache.errors.exceptions import HashError


class TestHashText:
    def test_deterministic(self):
        assert hash_text("payload") == hash_text("payload")

    def test_different_text_different_hash(self):
        assert hash_text("aaa") != hash_text("bbb")

    def test_returns_hex_string(self):
        h = hash_text("test")
        assert len(h) == 64  # SHA256 hex digest
        assert all(c in "0123456789abcdef" for c in h)

    def test_matches_hashlib(self):
        assert hash_text("naïve") == hashlib.sha256("naïve".encode("utf-8")).hexdigest()

    def test_other_algorithm(self):
        assert hash_text("x", "sha1") == hashlib.sha1(b"x").hexdigest()

    def test_unsupported_algorithm(self):
        with pytest.raises(HashError) as exc_info:
            hash_text("x", "shake_128")
        assert exc_info.value.algorithm == "shake_128"

    def test_hashlib_refusal_is_fatal(self, monkeypatch):
        def refuse(name, *args, **kwargs):
            raise ValueError("unsupported hash type")

        monkeypatch.setattr(hashlib, "new", refuse)
        with pytest.raises(HashError) as exc_info:
            hash_text("x", "sha256")
        assert isinstance(exc_info.value.original, ValueError)

    def test_supported_set_is_fixed_length(self):
        assert "sha256" in SUPPORTED_ALGORITHMS
        assert not any(name.startswith("shake") for name in SUPPORTED_ALGORITHMS)
