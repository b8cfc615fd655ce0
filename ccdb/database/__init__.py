"""Compilation database loading and lookup.

Typical use from a host tool:

    from ccdb.database import JSONCompilationDatabase, LoadError

    try:
        database = JSONCompilationDatabase.load_from_file("build/compile_commands.json")
    except LoadError as e:
        ...  # regenerate the database or give up
    for command in database.get_compile_commands("src/main.c"):
        print(command.directory, command.arguments)
"""

from .core import JSONCompilationDatabase, load_from_bytes, load_from_file
from .exceptions import (
    DatabaseIOError,
    DatabaseNotFoundError,
    EscapeSyntaxError,
    LoadError,
    StructuralError,
    StructuralErrorKind,
)
from .models import CompileCommand, RawCommandRecord
from .plugins import (
    CompilationDatabasePlugin,
    JSONCompilationDatabasePlugin,
    PluginRegistry,
    default_registry,
)
from .tokenizer import unescape_command_line

__all__ = [
    "JSONCompilationDatabase",
    "load_from_bytes",
    "load_from_file",
    "LoadError",
    "DatabaseIOError",
    "DatabaseNotFoundError",
    "StructuralError",
    "StructuralErrorKind",
    "EscapeSyntaxError",
    "CompileCommand",
    "RawCommandRecord",
    "CompilationDatabasePlugin",
    "JSONCompilationDatabasePlugin",
    "PluginRegistry",
    "default_registry",
    "unescape_command_line",
]
