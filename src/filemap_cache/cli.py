"""Click CLI for filemap_cache — show the cache file path for a build configuration."""

from __future__ import annotations

import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from filemap_cache.config.hierarchy import cache_config_from, load_config_hierarchy
from filemap_cache.errors.exceptions import FileMapCacheError

console = Console()
error_console = Console(stderr=True)


def _setup_logging(verbosity: int, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    level = logging.getLevelName(default_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


def _common_options(fn):
    fn = click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")(fn)
    fn = click.option("--algorithm", type=str, default=None, help="Digest algorithm.")(fn)
    fn = click.option("--prefix", type=str, default=None, help="Cache file prefix (label).")(fn)
    fn = click.option("--cache-dir", type=click.Path(), default=None, help="Cache directory.")(fn)
    fn = click.argument("params_yaml", type=click.Path(exists=True, dir_okay=False))(fn)
    return fn


@click.group()
@click.version_option(package_name="filemap-cache")
def cli() -> None:
    """filemap-cache — deterministic cache file paths for file-map builds."""


@cli.command("path")
@_common_options
def show_path(
    params_yaml: str,
    cache_dir: str | None,
    prefix: str | None,
    algorithm: str | None,
    verbose: int,
) -> None:
    """Print the cache file path for a build parameters YAML."""
    manager = _build_manager(params_yaml, cache_dir, prefix, algorithm, verbose)
    console.print(manager.get_cache_file_path(), soft_wrap=True, highlight=False, markup=False)


@cli.command("inspect")
@_common_options
def inspect_key(
    params_yaml: str,
    cache_dir: str | None,
    prefix: str | None,
    algorithm: str | None,
    verbose: int,
) -> None:
    """Show the serialized components behind a cache file path."""
    manager = _build_manager(params_yaml, cache_dir, prefix, algorithm, verbose)

    table = Table(title="Cache Key Components", show_header=True)
    table.add_column("Component", style="cyan")
    table.add_column("Value")
    for name, value in manager.components():
        table.add_row(name, Text(json.dumps(value)))
    table.add_row("digest", manager.digest)
    table.add_row("path", Text(manager.get_cache_file_path()))

    console.print(table)


def _build_manager(
    params_yaml: str,
    cache_dir: str | None,
    prefix: str | None,
    algorithm: str | None,
    verbose: int,
):
    from filemap_cache.cache.manager import CacheKeyManager
    from filemap_cache.config.loader import load_build_parameters

    config = load_config_hierarchy(
        cache_directory=cache_dir,
        cache_file_prefix=prefix,
        hash_algorithm=algorithm,
    )
    _setup_logging(verbose, str(config.get("log_level", "WARNING")))

    try:
        build_parameters = load_build_parameters(params_yaml)
        return CacheKeyManager(
            {"build_parameters": build_parameters},
            cache_config_from(config),
            algorithm=config["hash_algorithm"],
        )
    except FileMapCacheError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


def main() -> None:
    """Entry point for the CLI."""
    cli()
