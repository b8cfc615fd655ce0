"""Exceptions raised while loading a compilation database.

Every exception here is fatal to the load: a database is either built from
the whole document or not at all. Queries against a loaded database never
raise; an unknown file is an empty result.
"""

from enum import Enum


class LoadError(Exception):
    """Base class for all compilation database load failures.

    Attributes:
        message: Human-readable error description
        details: Dict with structured context (entry index, key, path, ...)
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DatabaseIOError(LoadError):
    """Raised when the database buffer could not be acquired."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message, {"path": path} if path is not None else None)
        self.path = path


class DatabaseNotFoundError(DatabaseIOError):
    """Raised when there is no database file to read at the given path.

    This is the only load failure that lets discovery move on to the next
    plugin or parent directory. A database file that exists but cannot be
    read raises plain DatabaseIOError.
    """


class StructuralErrorKind(Enum):
    """What was structurally wrong with the document."""

    INVALID_DOCUMENT = "invalid_document"
    EXPECTED_ARRAY = "expected_array"
    EXPECTED_OBJECT = "expected_object"
    EXPECTED_STRING_KEY = "expected_string_key"
    TYPE_MISMATCH = "type_mismatch"
    UNKNOWN_KEY = "unknown_key"
    MISSING_FILE = "missing_file"
    MISSING_DIRECTORY = "missing_directory"
    MISSING_COMMAND_OR_ARGUMENTS = "missing_command_or_arguments"


def _locate(entry_index: int | None) -> str:
    return "" if entry_index is None else f"Entry {entry_index}: "


class StructuralError(LoadError):
    """Raised when the document does not have the compilation database shape.

    The message is prefixed with the offending entry (0-based index into the
    top-level array), when known.
    """

    def __init__(
        self,
        kind: StructuralErrorKind,
        reason: str,
        entry_index: int | None = None,
        key: str | None = None,
    ):
        details = {"kind": kind.value, "entry_index": entry_index, "key": key}
        super().__init__(_locate(entry_index) + reason, details)
        self.kind = kind
        self.reason = reason
        self.entry_index = entry_index
        self.key = key


class EscapeSyntaxError(LoadError):
    """Raised when an escaped command line cannot be split into arguments.

    Attributes:
        command: The escaped command line as recorded
        position: 0-based offset of the offending character
        reason: What went wrong at ``position``
        entry_index: Database entry holding the command, once known
    """

    def __init__(
        self,
        reason: str,
        command: str,
        position: int,
        entry_index: int | None = None,
    ):
        details = {"command": command, "position": position, "entry_index": entry_index}
        super().__init__(
            f"{_locate(entry_index)}{reason} at position {position} in command: {command!r}",
            details,
        )
        self.reason = reason
        self.command = command
        self.position = position
        self.entry_index = entry_index

    def at_entry(self, entry_index: int) -> "EscapeSyntaxError":
        """Return a copy of this error annotated with its database entry."""
        return EscapeSyntaxError(self.reason, self.command, self.position, entry_index)
