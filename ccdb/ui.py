"""Central UI handler for ccdb.

Single source of truth for Rich console styling. Import this instead of
instantiating Console() in every command file.

Usage:
    from ccdb.ui import console, print_error

    console.print("[path]/src/a.c[/path]")
    print_error("No compile command recorded")
"""

import sys

from rich.console import Console
from rich.theme import Theme

CCDB_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "path": "bold cyan",
    "dim": "dim white",
})

# Single console instance - import this, don't create your own
console = Console(
    theme=CCDB_THEME,
    force_terminal=sys.stdout.isatty(),
    highlight=False,
)

# Diagnostics go to stderr so stdout stays machine-readable
err_console = Console(theme=CCDB_THEME, stderr=True, highlight=False)


def print_error(msg: str) -> None:
    """Print an error message in red."""
    err_console.print(f"[error]ERROR:[/error] {msg}")


def print_success(msg: str) -> None:
    """Print a success message in green."""
    console.print(f"[success]OK:[/success] {msg}")
