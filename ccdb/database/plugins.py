"""Compilation database plugins and the registry that holds them.

There is no global registry. The hosting application builds one at startup
(default_registry() for the stock JSON plugin) and passes it where databases
need to be located:

    registry = default_registry()
    database = registry.autodetect_from_source("src/lib/a.c")
"""

from abc import ABC, abstractmethod
from pathlib import Path

from ccdb.utils.logging import logger

from .core import DEFAULT_MAX_CANDIDATES, JSONCompilationDatabase
from .exceptions import DatabaseNotFoundError

DEFAULT_DATABASE_FILE = "compile_commands.json"


class CompilationDatabasePlugin(ABC):
    """Knows how to load one kind of compilation database from a directory."""

    name: str = ""
    description: str = ""

    @abstractmethod
    def load_from_directory(self, directory: Path) -> JSONCompilationDatabase:
        """Load the database this plugin understands from ``directory``.

        Raises:
            DatabaseNotFoundError: Nothing this plugin can read lives there
            LoadError: Something is there but it is unreadable or broken
        """
        pass


class JSONCompilationDatabasePlugin(CompilationDatabasePlugin):
    """Reads JSON formatted compilation databases."""

    name = "json-compilation-database"
    description = "Reads JSON formatted compilation databases"

    def __init__(
        self,
        database_file: str = DEFAULT_DATABASE_FILE,
        max_candidates: int = DEFAULT_MAX_CANDIDATES,
    ):
        self.database_file = database_file
        self.max_candidates = max_candidates

    def load_from_directory(self, directory: Path) -> JSONCompilationDatabase:
        return JSONCompilationDatabase.load_from_file(
            Path(directory) / self.database_file, max_candidates=self.max_candidates
        )


class PluginRegistry:
    """Ordered, named collection of compilation database plugins."""

    def __init__(self):
        self._plugins: dict[str, CompilationDatabasePlugin] = {}

    def register(self, plugin: CompilationDatabasePlugin) -> None:
        if not plugin.name:
            raise ValueError(f"Plugin {type(plugin).__name__} has no name")
        if plugin.name in self._plugins:
            raise ValueError(f"Plugin already registered: {plugin.name}")
        self._plugins[plugin.name] = plugin

    def plugins(self) -> list[CompilationDatabasePlugin]:
        return list(self._plugins.values())

    def load_from_directory(self, directory: str | Path) -> JSONCompilationDatabase:
        """Load a database from exactly this directory.

        Plugins are tried in registration order. A plugin that finds nothing
        to read (DatabaseNotFoundError) is skipped. Any other LoadError means a
        database exists but is unreadable or broken, and propagates.

        Raises:
            DatabaseNotFoundError: No plugin found a database in ``directory``
        """
        directory = Path(directory)
        messages = []
        for plugin in self._plugins.values():
            try:
                database = plugin.load_from_directory(directory)
            except DatabaseNotFoundError as e:
                logger.debug("{plugin}: {error}", plugin=plugin.name, error=e.message)
                messages.append(f"{plugin.name}: {e.message}")
                continue
            logger.debug("{plugin} loaded database from {directory}", plugin=plugin.name, directory=str(directory))
            return database

        if not messages:
            messages.append("no plugins registered")
        raise DatabaseNotFoundError(
            f"Could not load compilation database from {directory}: " + "; ".join(messages),
            path=str(directory),
        )

    def autodetect_from_directory(
        self, directory: str | Path, search_parents: bool = True
    ) -> JSONCompilationDatabase:
        """Find the nearest compilation database at or above ``directory``.

        Raises:
            DatabaseNotFoundError: No database in ``directory`` (or, when
                                   search_parents is set, in any parent)
            LoadError: The nearest database exists but could not be loaded
        """
        start = Path(directory).absolute()
        candidates = [start, *start.parents] if search_parents else [start]

        for candidate in candidates:
            try:
                return self.load_from_directory(candidate)
            except DatabaseNotFoundError:
                continue

        scope = " or any parent directory" if search_parents else ""
        raise DatabaseNotFoundError(
            f"Could not auto-detect compilation database from directory {start}\n"
            f"No compilation database found in {start}{scope}",
            path=str(start),
        )

    def autodetect_from_source(
        self, source_file: str | Path, search_parents: bool = True
    ) -> JSONCompilationDatabase:
        """Find the compilation database responsible for a source file."""
        return self.autodetect_from_directory(Path(source_file).absolute().parent, search_parents)


def default_registry(
    database_file: str = DEFAULT_DATABASE_FILE,
    max_candidates: int = DEFAULT_MAX_CANDIDATES,
) -> PluginRegistry:
    """Registry holding the stock JSON plugin."""
    registry = PluginRegistry()
    registry.register(JSONCompilationDatabasePlugin(database_file, max_candidates))
    return registry
