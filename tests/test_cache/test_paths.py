"""Tests for cache file path composition."""

import os

import pytest

from filemap_cache.cache.paths import build_cache_path
from filemap_cache.errors.exceptions import ConfigError


class TestBuildCachePath:
    def test_joins_with_platform_separator(self):
        assert build_cache_path("cache", "label", "abc") == os.path.join("cache", "label-abc")

    def test_root_directory(self):
        assert build_cache_path(os.sep, "file-prefix", "abc") == os.sep + "file-prefix-abc"

    @pytest.mark.parametrize(
        "args, field",
        [
            (("", "label", "abc"), "cache_directory"),
            (("/tmp", "", "abc"), "cache_file_prefix"),
            (("/tmp", "label", " "), "digest"),
        ],
    )
    def test_empty_parts_rejected(self, args, field):
        with pytest.raises(ConfigError) as exc_info:
            build_cache_path(*args)
        assert exc_info.value.field == field
