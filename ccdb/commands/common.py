"""Options and database resolution shared by all ccdb commands."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from ccdb.config_runtime import load_runtime_config
from ccdb.database import JSONCompilationDatabase, default_registry
from ccdb.utils.logging import logger


def database_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach --db / --build-dir to a command."""
    func = click.option(
        "--build-dir",
        default=".",
        type=click.Path(file_okay=False),
        help="Directory to search for the database (parents too, unless disabled in config)",
    )(func)
    func = click.option(
        "--db",
        "db_path",
        default=None,
        type=click.Path(dir_okay=False),
        help="Explicit compile_commands.json path (skips discovery)",
    )(func)
    return func


def open_database(db_path: str | None, build_dir: str) -> JSONCompilationDatabase:
    """Load the database named on the command line, or discover one.

    Configuration is read relative to the build directory.
    """
    config = load_runtime_config(build_dir)
    max_candidates = config["report"]["max_candidates"]

    if db_path is not None:
        logger.debug("Loading database {path}", path=db_path)
        return JSONCompilationDatabase.load_from_file(db_path, max_candidates=max_candidates)

    registry = default_registry(
        database_file=config["paths"]["database_file"],
        max_candidates=max_candidates,
    )
    return registry.autodetect_from_directory(
        Path(build_dir), search_parents=config["discovery"]["search_parents"]
    )
