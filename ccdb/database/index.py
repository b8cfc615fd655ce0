"""Lookup index: canonical path -> records, plus the equivalence trie."""

from collections.abc import Iterator

from .match_trie import FileMatchTrie
from .models import RawCommandRecord


class CommandIndex:
    """Records grouped by canonical path.

    Built once during load through add(); every read method leaves the
    index untouched.
    """

    def __init__(self):
        self._by_file: dict[str, list[RawCommandRecord]] = {}
        self._trie = FileMatchTrie()

    def add(self, path: str, record: RawCommandRecord) -> None:
        self._by_file.setdefault(path, []).append(record)
        self._trie.insert(path)

    def exact_lookup(self, path: str) -> tuple[RawCommandRecord, ...]:
        """Records stored under exactly this canonical path, in document order."""
        return tuple(self._by_file.get(path, ()))

    def find_equivalent(self, query: str, max_candidates: int = 10) -> str | None:
        return self._trie.find_equivalent(query, max_candidates)

    def files(self) -> list[str]:
        return list(self._by_file)

    def items(self) -> Iterator[tuple[str, tuple[RawCommandRecord, ...]]]:
        for path, records in self._by_file.items():
            yield path, tuple(records)

    def __len__(self) -> int:
        return sum(len(records) for records in self._by_file.values())
