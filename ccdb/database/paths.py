"""Canonical path keys for the compilation database index.

Paths in a database and paths in queries come from different tools and
rarely agree on spelling. Everything that goes into or is looked up in the
index passes through normalize_path() first:

1. Backslashes become forward slashes (Windows databases, Windows queries)
2. The root is split off: POSIX "/", drive "C:/", or UNC "//"
3. Empty and "." segments are dropped

".." is kept as written. Collapsing it without consulting the filesystem
would be wrong in the presence of symlinks, and the index never touches the
filesystem.
"""

import re
from typing import Final

WINDOWS_DRIVE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z]:/")


def split_root(path: str) -> tuple[str, list[str]]:
    """Split a path into its root anchor and its meaningful segments.

    Returns:
        (anchor, segments) where anchor is "" for relative paths

    Examples:
        >>> split_root("/usr//src/./a.c")
        ('/', ['usr', 'src', 'a.c'])

        >>> split_root("C:\\\\work\\\\a.c")
        ('C:/', ['work', 'a.c'])
    """
    unified = path.replace("\\", "/")

    if WINDOWS_DRIVE_PATTERN.match(unified):
        anchor, rest = unified[:3], unified[3:]
    elif unified.startswith("//") and not unified.startswith("///"):
        anchor, rest = "//", unified[2:]
    elif unified.startswith("/"):
        anchor, rest = "/", unified[1:]
    else:
        anchor, rest = "", unified

    return anchor, [part for part in rest.split("/") if part not in ("", ".")]


def normalize_path(path: str) -> str:
    """Normalize separators and drop redundant segments.

    Relative paths stay relative; nothing is resolved against the current
    working directory.
    """
    anchor, segments = split_root(path)
    return _join(anchor, segments)


def _join(anchor: str, segments: list[str]) -> str:
    return (anchor + "/".join(segments)) or "."


def canonical_path(file: str, directory: str) -> str:
    """Compute the index key for a database entry.

    Args:
        file: The entry's ``file`` value (absolute, or relative to directory)
        directory: The entry's ``directory`` value

    Returns:
        Normalized path of the file
    """
    file_anchor, file_segments = split_root(file)
    if file_anchor:
        return _join(file_anchor, file_segments)
    directory_anchor, directory_segments = split_root(directory)
    return _join(directory_anchor, directory_segments + file_segments)


def path_segments(path: str) -> list[str]:
    """Segments of a path from the file name towards the root.

    The root anchor, if any, is the last element, so an absolute path can
    only ever be fully consumed by the same absolute path.

    Examples:
        >>> path_segments("/src/lib/a.c")
        ['a.c', 'lib', 'src', '/']

        >>> path_segments("lib/a.c")
        ['a.c', 'lib']
    """
    anchor, segments = split_root(path)
    reversed_segments = segments[::-1]
    if anchor:
        reversed_segments.append(anchor)
    return reversed_segments
