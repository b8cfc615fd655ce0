"""Path-equivalence trie over canonical paths.

Stored paths are inserted by their segments in reverse order (file name
first, root anchor last). A query is walked the same way; every stored path
at or below the node where the query runs out shares the query as a
trailing suffix. This lets a caller ask for "lib/a.c" and get back
"/home/me/project/lib/a.c" when that is the only file ending that way.

Lookups only read the trie; it is safe to share once built.
"""

from ccdb.utils.logging import logger

from .paths import normalize_path, path_segments


class _TrieNode:
    __slots__ = ("children", "path")

    def __init__(self):
        self.children: dict[str, _TrieNode] = {}
        self.path: str | None = None

    def terminals(self) -> list[str]:
        """All stored paths at or below this node, in sorted order."""
        found = []
        stack = [self]
        while stack:
            node = stack.pop()
            if node.path is not None:
                found.append(node.path)
            stack.extend(node.children.values())
        return sorted(found)


class FileMatchTrie:
    """Suffix trie for resolving query paths to stored canonical paths."""

    def __init__(self):
        self._root = _TrieNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, path: str) -> bool:
        node = self._walk(path_segments(path))
        return node is not None and node.path == path

    def insert(self, path: str) -> None:
        """Register a canonical path. Inserting the same path again is a no-op."""
        node = self._root
        for segment in path_segments(path):
            node = node.children.setdefault(segment, _TrieNode())
        if node.path is None:
            node.path = path
            self._size += 1

    def find_equivalent(self, query: str, max_candidates: int = 10) -> str | None:
        """Resolve a query path to the one stored path it denotes.

        Args:
            query: Path as given by the caller (any separator style, absolute
                   or relative to an unknown directory)
            max_candidates: How many candidates to list in the ambiguity
                            diagnostic

        Returns:
            The stored canonical path, or None when nothing or more than one
            stored path matches
        """
        normalized = normalize_path(query)
        if normalized == ".":
            return None

        node = self._walk(path_segments(normalized))
        if node is None:
            logger.debug("No compile command recorded for {query}", query=query)
            return None

        # Exact hit wins even if longer paths share the suffix.
        if node.path == normalized:
            return node.path

        candidates = node.terminals()
        if len(candidates) == 1:
            return candidates[0]
        if not candidates:
            logger.debug("No compile command recorded for {query}", query=query)
            return None

        shown = ", ".join(candidates[:max_candidates])
        if len(candidates) > max_candidates:
            shown += f", ... ({len(candidates) - max_candidates} more)"
        logger.warning(
            "Path is ambiguous: {query} matches {count} files: {shown}",
            query=query,
            count=len(candidates),
            shown=shown,
        )
        return None

    def _walk(self, segments: list[str]) -> _TrieNode | None:
        node = self._root
        for segment in segments:
            node = node.children.get(segment)
            if node is None:
                return None
        return node
