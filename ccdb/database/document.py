"""Generic document tree for compilation database input.

The buffer is decoded with the json module and converted into a closed set
of frozen node types. Extraction code matches on exactly these three classes;
anything else is a bug, not an input error.

Mappings keep their key/value pairs in document order, repeated keys
included, so extraction sees the object exactly as it was written.
Non-string JSON scalars (numbers, true/false/null) become scalars holding
their JSON spelling.
"""

import json
from dataclasses import dataclass
from typing import Any, Union

from .exceptions import StructuralError, StructuralErrorKind


@dataclass(frozen=True)
class ScalarNode:
    value: str


@dataclass(frozen=True)
class SequenceNode:
    items: tuple["Node", ...]


@dataclass(frozen=True)
class MappingNode:
    entries: tuple[tuple["Node", "Node"], ...]


Node = Union[ScalarNode, SequenceNode, MappingNode]


class _Pairs(list):
    """Marker for a JSON object decoded by object_pairs_hook."""


def _convert(value: Any) -> Node:
    if isinstance(value, _Pairs):
        return MappingNode(tuple((ScalarNode(key), _convert(item)) for key, item in value))
    if isinstance(value, list):
        return SequenceNode(tuple(_convert(item) for item in value))
    if isinstance(value, str):
        return ScalarNode(value)
    return ScalarNode(json.dumps(value))


def parse_document(buffer: bytes | str) -> Node:
    """Parse a database buffer into a generic node tree.

    Args:
        buffer: Raw database contents (bytes may be UTF-8, UTF-16 or UTF-32)

    Returns:
        Root node of the document

    Raises:
        StructuralError: INVALID_DOCUMENT when the buffer is empty, not
                         decodable, not well-formed JSON, or nested
                         deeper than the interpreter can follow
    """
    if not buffer or not buffer.strip():
        raise StructuralError(StructuralErrorKind.INVALID_DOCUMENT, "Error while parsing JSON: empty document.")

    try:
        data = json.loads(buffer, object_pairs_hook=_Pairs)
    except json.JSONDecodeError as e:
        raise StructuralError(
            StructuralErrorKind.INVALID_DOCUMENT,
            f"Error while parsing JSON: {e.msg} (line {e.lineno}, column {e.colno})",
        ) from e
    except UnicodeDecodeError as e:
        raise StructuralError(
            StructuralErrorKind.INVALID_DOCUMENT, f"Error while decoding JSON: {e}"
        ) from e
    except RecursionError as e:
        raise _too_deep() from e

    try:
        return _convert(data)
    except RecursionError as e:
        raise _too_deep() from e


def _too_deep() -> StructuralError:
    return StructuralError(
        StructuralErrorKind.INVALID_DOCUMENT, "Error while parsing JSON: document nested too deeply"
    )
