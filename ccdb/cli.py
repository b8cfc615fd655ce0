"""ccdb CLI - command group for inspecting compilation databases.

Host tools mount this group on their own command line:

    from ccdb.cli import cli as ccdb_group
    host_cli.add_command(ccdb_group, name="compdb")

It is also installed as the ``ccdb`` console script.
"""
# ruff: noqa: E402 - Intentional lazy loading: commands imported after cli group definition

from pathlib import Path

import click

from ccdb import __version__
from ccdb.utils.logging import configure_file_logging


@click.group()
@click.version_option(version=__version__, prog_name="ccdb")
@click.help_option("-h", "--help")
@click.option(
    "--log-dir",
    default=None,
    type=click.Path(file_okay=False),
    help="Also write a rotating debug log to this directory",
)
def cli(log_dir):
    """ccdb - query compile_commands.json compilation databases

    \b
    QUICK START:
      ccdb check                  # Validate ./compile_commands.json (or a parent's)
      ccdb lookup src/main.c      # Compiler invocation(s) for one file
      ccdb files                  # Every file with a recorded command
      ccdb dump                   # All commands, "arguments" form, as JSON

    \b
    Logging: CCDB_LOG_LEVEL=DEBUG, CCDB_LOG_JSON=1, CCDB_LOG_FILE=<path>
    Config:  .ccdb/config.json in the build directory, CCDB_<SECTION>_<KEY>"""
    if log_dir:
        configure_file_logging(Path(log_dir))


from ccdb.commands.check import check
from ccdb.commands.dump import dump
from ccdb.commands.files import files
from ccdb.commands.lookup import lookup

cli.add_command(check)
cli.add_command(dump)
cli.add_command(files)
cli.add_command(lookup)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
