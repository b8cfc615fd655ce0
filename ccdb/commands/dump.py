"""Dump every command in the database as JSON."""

import json

import click

from ccdb.commands.common import database_options, open_database
from ccdb.utils.error_handler import handle_exceptions


@click.command()
@database_options
@handle_exceptions
def dump(db_path, build_dir):
    """Print all compile commands as a JSON array.

    Every entry is written with an "arguments" list, whatever form the
    source database used, so the output is itself a valid database with
    all "command" strings already unescaped."""
    database = open_database(db_path, build_dir)
    click.echo(json.dumps([command.to_dict() for command in database.get_all_compile_commands()], indent=2))
