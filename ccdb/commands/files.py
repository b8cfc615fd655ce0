"""List every file the database has commands for."""

import click

from ccdb.commands.common import database_options, open_database
from ccdb.utils.error_handler import handle_exceptions


@click.command()
@database_options
@click.option("--sort/--no-sort", "sort_paths", default=True, help="Sort paths (default) or keep database order")
@handle_exceptions
def files(db_path, build_dir, sort_paths):
    """Print every distinct file path in the database, one per line.

    Paths are printed in their normalized form (forward slashes, no "."
    segments), which is the form lookups are matched against."""
    database = open_database(db_path, build_dir)
    paths = database.get_all_files()
    for path in sorted(paths) if sort_paths else paths:
        click.echo(path)
