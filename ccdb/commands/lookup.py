"""Show the recorded compile commands for one source file."""

import json
import sys

import click
from rich.markup import escape
from rich.table import Table

from ccdb.commands.common import database_options, open_database
from ccdb.ui import console, print_error
from ccdb.utils.error_handler import handle_exceptions
from ccdb.utils.exit_codes import ExitCodes


@click.command()
@click.argument("file")
@database_options
@click.option("--json", "as_json", is_flag=True, help="Print the commands as a JSON array")
@handle_exceptions
def lookup(file, db_path, build_dir, as_json):
    """Print the compile commands recorded for FILE.

    FILE may be absolute, use either separator style, or be a trailing part
    of the recorded path (e.g. src/main.c) as long as that part identifies a
    single file in the database.

    \b
    Examples:
      ccdb lookup /work/project/src/main.c
      ccdb lookup src/main.c --build-dir build
      ccdb lookup main.c --db out/compile_commands.json --json

    Exit status is 1 when nothing is recorded for FILE (or the match is
    ambiguous; a warning lists the candidates)."""
    database = open_database(db_path, build_dir)
    commands = database.get_compile_commands(file)

    if as_json:
        click.echo(json.dumps([command.to_dict() for command in commands], indent=2))
    elif commands:
        table = Table(title=escape(file), show_lines=True)
        table.add_column("Directory", style="path", overflow="fold")
        table.add_column("File", overflow="fold")
        table.add_column("Arguments", overflow="fold")
        for command in commands:
            table.add_row(
                escape(command.directory),
                escape(command.filename),
                escape(" ".join(command.arguments)),
            )
        console.print(table)

    if not commands:
        if not as_json:
            print_error(f"No compile command recorded for {escape(file)}")
        sys.exit(ExitCodes.NO_MATCH)
