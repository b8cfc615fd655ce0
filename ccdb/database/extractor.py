"""Extraction of command records from a generic document tree.

The document must be an array of objects, one per translation unit build:

    [
      {"directory": "/build", "file": "../src/a.c", "arguments": ["cc", "-c", "../src/a.c"]},
      {"directory": "/build", "file": "/src/b.c", "command": "cc -c \\"/src/b.c\\""}
    ]

ZERO FALLBACK: the first malformed entry aborts extraction. Partial databases
are never produced, because a consumer silently missing flags for one file
is worse than a loud failure it can act on (regenerate the database).
"""

from .document import MappingNode, Node, ScalarNode, SequenceNode
from .exceptions import EscapeSyntaxError, StructuralError, StructuralErrorKind
from .models import RawCommandRecord
from .tokenizer import unescape_command_line

KNOWN_KEYS = frozenset({"directory", "file", "arguments", "command"})


def _describe(node: Node) -> str:
    if isinstance(node, ScalarNode):
        return "string"
    if isinstance(node, SequenceNode):
        return "array"
    if isinstance(node, MappingNode):
        return "object"
    raise TypeError(f"Unexpected document node: {node!r}")


def _scalar_value(key: str, value: Node, entry_index: int) -> str:
    if isinstance(value, ScalarNode):
        return value.value
    if isinstance(value, (SequenceNode, MappingNode)):
        raise StructuralError(
            StructuralErrorKind.TYPE_MISMATCH,
            f'Expected string as value for key "{key}", got {_describe(value)}.',
            entry_index,
            key,
        )
    raise TypeError(f"Unexpected document node: {value!r}")


def _argument_list(value: Node, entry_index: int) -> tuple[str, ...]:
    if isinstance(value, (ScalarNode, MappingNode)):
        raise StructuralError(
            StructuralErrorKind.TYPE_MISMATCH,
            f'Expected sequence as value for key "arguments", got {_describe(value)}.',
            entry_index,
            "arguments",
        )
    if not isinstance(value, SequenceNode):
        raise TypeError(f"Unexpected document node: {value!r}")

    arguments = []
    for position, item in enumerate(value.items):
        if not isinstance(item, ScalarNode):
            raise StructuralError(
                StructuralErrorKind.TYPE_MISMATCH,
                f'Expected strings in "arguments", got {_describe(item)} at position {position}.',
                entry_index,
                "arguments",
            )
        arguments.append(item.value)
    return tuple(arguments)


def extract_record(entry: Node, entry_index: int) -> RawCommandRecord:
    """Validate one array element and build its record.

    Args:
        entry: One element of the top-level array
        entry_index: Its 0-based position, used in error messages

    Raises:
        StructuralError: On a non-object entry, bad key, bad value shape, or
                         missing mandatory key
        EscapeSyntaxError: When the ``command`` string cannot be split
    """
    if not isinstance(entry, MappingNode):
        raise StructuralError(
            StructuralErrorKind.EXPECTED_OBJECT,
            f"Expected object, got {_describe(entry)}.",
            entry_index,
        )

    directory: str | None = None
    file: str | None = None
    arguments: tuple[str, ...] | None = None
    command: tuple[str, ...] | None = None

    for key_node, value in entry.entries:
        if not isinstance(key_node, ScalarNode):
            raise StructuralError(
                StructuralErrorKind.EXPECTED_STRING_KEY, "Expected strings as key.", entry_index
            )
        key = key_node.value

        if key not in KNOWN_KEYS:
            raise StructuralError(
                StructuralErrorKind.UNKNOWN_KEY, f'Unknown key: "{key}"', entry_index, key
            )

        if key == "arguments":
            arguments = _argument_list(value, entry_index)
            continue

        text = _scalar_value(key, value, entry_index)
        if key == "directory":
            directory = text
        elif key == "file":
            file = text
        else:
            try:
                command = tuple(unescape_command_line(text))
            except EscapeSyntaxError as e:
                raise e.at_entry(entry_index) from e

    if file is None:
        raise StructuralError(
            StructuralErrorKind.MISSING_FILE, 'Missing key: "file".', entry_index, "file"
        )
    if arguments is None and command is None:
        raise StructuralError(
            StructuralErrorKind.MISSING_COMMAND_OR_ARGUMENTS,
            'Missing key: "command" or "arguments".',
            entry_index,
        )
    if not directory:
        raise StructuralError(
            StructuralErrorKind.MISSING_DIRECTORY,
            'Missing key: "directory".' if directory is None else 'Empty value for key: "directory".',
            entry_index,
            "directory",
        )

    # "arguments" wins when both are present; it needs no unescaping.
    return RawCommandRecord(
        directory=directory,
        file=file,
        arguments=arguments if arguments is not None else command,
    )


def extract_records(root: Node) -> list[RawCommandRecord]:
    """Turn a parsed database document into command records.

    Args:
        root: Root node returned by parse_document()

    Returns:
        One record per array element, in document order

    Raises:
        StructuralError: EXPECTED_ARRAY when the root is not an array, or the
                         first per-entry error (see extract_record)
        EscapeSyntaxError: First malformed ``command`` string
    """
    if not isinstance(root, SequenceNode):
        raise StructuralError(
            StructuralErrorKind.EXPECTED_ARRAY, f"Expected array, got {_describe(root)}."
        )

    return [extract_record(entry, index) for index, entry in enumerate(root.items)]
