"""Validate a compilation database."""

import click
from rich.markup import escape

from ccdb.commands.common import database_options, open_database
from ccdb.ui import print_success
from ccdb.utils.error_handler import handle_exceptions


@click.command()
@database_options
@handle_exceptions
def check(db_path, build_dir):
    """Load the database and report what it contains.

    The whole database is validated: an unknown key, a missing field or a
    malformed "command" string anywhere fails the check with the offending
    entry named (exit status 2)."""
    database = open_database(db_path, build_dir)
    print_success(
        f"{len(database)} commands for {len(database.get_all_files())} files "
        f"in {escape(database.source or '<buffer>')}"
    )
