"""Tests for package defaults."""

import tempfile

from filemap_cache.config.defaults import (
    DEFAULT_CACHE_DIRECTORY,
    DEFAULT_CACHE_FILE_PREFIX,
    DEFAULT_HASH_ALGORITHM,
    DEFAULT_LOG_LEVEL,
    get_defaults,
)


class TestDefaults:
    def test_default_cache_directory_is_temp(self):
        assert DEFAULT_CACHE_DIRECTORY == tempfile.gettempdir()

    def test_default_prefix(self):
        assert DEFAULT_CACHE_FILE_PREFIX == "filemap"

    def test_default_algorithm(self):
        assert DEFAULT_HASH_ALGORITHM == "sha256"

    def test_default_log_level(self):
        assert DEFAULT_LOG_LEVEL == "WARNING"

    def test_get_defaults_has_all_keys(self):
        d = get_defaults()
        assert set(d.keys()) == {
            "cache_directory", "cache_file_prefix", "hash_algorithm", "log_level",
        }
