import os
import textwrap

import pytest


@pytest.fixture
def build_parameters():
    """A fully populated build parameters mapping."""
    return {
        "cache_breaker": "",
        "compute_dependencies": True,
        "compute_sha1": True,
        "dependency_extractor": None,
        "enable_haste_packages": True,
        "enable_symlinks": False,
        "extensions": ["js", "json"],
        "force_node_filesystem_api": True,
        "haste_impl_module_path": None,
        "ignore_pattern": {"source": "ignored", "flags": ""},
        "mocks_pattern": None,
        "platforms": ["ios", "android"],
        "retain_all_files": False,
        "root_dir": os.path.join("/", "project"),
        "roots": [
            os.path.join("/", "project", "fruits"),
            os.path.join("/", "project", "vegetables"),
        ],
        "skip_package_json": False,
    }


@pytest.fixture
def default_config():
    return {"cache_directory": "/tmp/cache", "cache_file_prefix": "default-label"}


@pytest.fixture
def write_module(tmp_path):
    """Write a Python module into tmp_path and return its path as a string."""

    def _write(name: str, body: str) -> str:
        path = tmp_path / f"{name}.py"
        path.write_text(textwrap.dedent(body))
        return str(path)

    return _write


@pytest.fixture
def sample_params_yaml(tmp_path):
    """Write a build parameters YAML and return its path."""
    content = """
build_parameters:
  cache_breaker: ""
  compute_dependencies: true
  compute_sha1: false
  enable_haste_packages: false
  enable_symlinks: false
  extensions: [js, json, ts]
  force_node_filesystem_api: false
  ignore_pattern:
    source: "/node_modules/"
    flags: ""
  mocks_pattern: null
  platforms: [ios, android]
  retain_all_files: false
  root_dir: /project
  roots: [/project/src]
  skip_package_json: false
"""
    path = tmp_path / "params.yaml"
    path.write_text(content)
    return path
