"""JSON compilation database facade.

Loading is a one-shot pipeline over an in-memory buffer:

    parse_document -> extract_records -> canonical_path -> CommandIndex

Any failure along the way raises a LoadError subclass and no database is
returned. A loaded database is read-only; queries never raise.
"""

from pathlib import Path

from ccdb.utils.logging import logger

from .document import parse_document
from .exceptions import DatabaseIOError, DatabaseNotFoundError
from .extractor import extract_records
from .index import CommandIndex
from .models import CompileCommand
from .paths import canonical_path

DEFAULT_MAX_CANDIDATES = 10


class JSONCompilationDatabase:
    """Compile commands indexed by source file.

    Construct through load_from_buffer() or load_from_file().
    """

    def __init__(
        self,
        index: CommandIndex,
        source: str | None = None,
        max_candidates: int = DEFAULT_MAX_CANDIDATES,
    ):
        self._index = index
        self.source = source
        self.max_candidates = max_candidates

    @classmethod
    def load_from_buffer(
        cls,
        buffer: bytes | str,
        source: str | None = None,
        max_candidates: int = DEFAULT_MAX_CANDIDATES,
    ) -> "JSONCompilationDatabase":
        """Build a database from raw compile_commands.json contents.

        Args:
            buffer: Database contents
            source: Where the buffer came from, for diagnostics only
            max_candidates: Candidates listed in ambiguous-lookup warnings

        Raises:
            StructuralError: Document is not a well-formed command array
            EscapeSyntaxError: A ``command`` string could not be split
        """
        records = extract_records(parse_document(buffer))

        index = CommandIndex()
        for record in records:
            index.add(canonical_path(record.file, record.directory), record)

        logger.debug(
            "Loaded {records} compile commands for {files} files from {source}",
            records=len(records),
            files=len(index.files()),
            source=source or "<buffer>",
        )
        return cls(index, source=source, max_candidates=max_candidates)

    @classmethod
    def load_from_file(
        cls,
        file_path: str | Path,
        max_candidates: int = DEFAULT_MAX_CANDIDATES,
    ) -> "JSONCompilationDatabase":
        """Read and load a compile_commands.json file.

        Raises:
            DatabaseNotFoundError: There is no file at file_path
            DatabaseIOError: The file exists but could not be read
            StructuralError: See load_from_buffer()
            EscapeSyntaxError: See load_from_buffer()
        """
        try:
            buffer = Path(file_path).read_bytes()
        except (FileNotFoundError, NotADirectoryError) as e:
            raise DatabaseNotFoundError(
                f"Error while opening JSON database: {e.strerror or e}", path=str(file_path)
            ) from e
        except OSError as e:
            raise DatabaseIOError(
                f"Error while opening JSON database: {e.strerror or e}", path=str(file_path)
            ) from e

        return cls.load_from_buffer(buffer, source=str(file_path), max_candidates=max_candidates)

    def get_compile_commands(self, file_path: str) -> list[CompileCommand]:
        """Commands recorded for a file, in database order.

        The query may use any separator style and may be a relative suffix of
        the recorded path ("src/a.c" for "/work/src/a.c") as long as that
        suffix is unique in the database.
        """
        match = self._index.find_equivalent(file_path, self.max_candidates)
        if match is None:
            return []
        return [CompileCommand.from_record(record) for record in self._index.exact_lookup(match)]

    def get_all_files(self) -> list[str]:
        """Every distinct canonical file path in the database."""
        return self._index.files()

    def get_all_compile_commands(self) -> list[CompileCommand]:
        """Every command, grouped by file."""
        return [
            CompileCommand.from_record(record)
            for _, records in self._index.items()
            for record in records
        ]

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"JSONCompilationDatabase(source={self.source!r}, commands={len(self)})"


def load_from_bytes(buffer: bytes | str) -> JSONCompilationDatabase:
    return JSONCompilationDatabase.load_from_buffer(buffer)


def load_from_file(file_path: str | Path) -> JSONCompilationDatabase:
    return JSONCompilationDatabase.load_from_file(file_path)
