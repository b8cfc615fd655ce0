"""Record types produced by a compilation database load."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RawCommandRecord:
    """One database entry after extraction.

    ``file`` is kept exactly as recorded; the canonical path derived from it
    is only used as an index key.
    """

    directory: str
    file: str
    arguments: tuple[str, ...]


@dataclass(frozen=True)
class CompileCommand:
    """One recorded compiler invocation, as handed to consumers."""

    directory: str
    filename: str
    arguments: tuple[str, ...]

    @classmethod
    def from_record(cls, record: RawCommandRecord) -> "CompileCommand":
        return cls(directory=record.directory, filename=record.file, arguments=record.arguments)

    def to_dict(self) -> dict[str, Any]:
        """Serialize in compile_commands.json entry form."""
        return {
            "directory": self.directory,
            "file": self.filename,
            "arguments": list(self.arguments),
        }
