"""Splitting of escaped command lines into argument lists.

The ``command`` field of a compilation database entry is one string holding
the whole compiler invocation. It uses backslash escaping, not general POSIX
shell quoting:

- Arguments are separated by one or more plain spaces (tabs are literal).
- ``"..."``: characters copied literally, except that ``\\`` always escapes
  the next character.
- ``'...'``: characters copied literally, no escape processing at all.
- Outside quotes ``\\`` escapes the next character.
- Quoted and unquoted segments concatenate into a single argument until an
  unescaped space outside quotes.

Unlike shlex, malformed input (unterminated quotes, a trailing backslash)
raises EscapeSyntaxError instead of being truncated or guessed at.
"""

from .exceptions import EscapeSyntaxError


class CommandLineArgumentParser:
    """Single-use parser for one escaped command line."""

    def __init__(self, command_line: str):
        self.input = command_line
        self.position = -1
        self.arguments: list[str] = []

    def parse(self) -> list[str]:
        while self._next_non_whitespace():
            self.arguments.append(self._parse_argument())
        return self.arguments

    # Every private method below that returns bool reports whether there is
    # more input after the current position.

    def _parse_argument(self) -> str:
        chars: list[str] = []
        while True:
            current = self._current()
            if current == '"':
                more = self._parse_double_quoted_into(chars)
            elif current == "'":
                more = self._parse_single_quoted_into(chars)
            else:
                more = self._parse_free_into(chars)
            if not more or self._current() == " ":
                return "".join(chars)

    def _parse_double_quoted_into(self, chars: list[str]) -> bool:
        start = self.position
        if not self._next():
            raise self._unterminated('"', start)
        while self._current() != '"':
            if self._current() == "\\" and not self._next():
                raise self._unterminated('"', start)
            chars.append(self._current())
            if not self._next():
                raise self._unterminated('"', start)
        return self._next()

    def _parse_single_quoted_into(self, chars: list[str]) -> bool:
        start = self.position
        if not self._next():
            raise self._unterminated("'", start)
        while self._current() != "'":
            chars.append(self._current())
            if not self._next():
                raise self._unterminated("'", start)
        return self._next()

    def _parse_free_into(self, chars: list[str]) -> bool:
        while True:
            if self._current() == "\\":
                escape_at = self.position
                if not self._next():
                    raise EscapeSyntaxError(
                        "Dangling escape character with no input left", self.input, escape_at
                    )
            chars.append(self._current())
            if not self._next():
                return False
            if self._current() in (" ", '"', "'"):
                return True

    def _unterminated(self, quote: str, start: int) -> EscapeSyntaxError:
        kind = "double" if quote == '"' else "single"
        return EscapeSyntaxError(f"Unterminated {kind}-quoted string", self.input, start)

    def _current(self) -> str:
        return self.input[self.position]

    def _next_non_whitespace(self) -> bool:
        while True:
            if not self._next():
                return False
            if self._current() != " ":
                return True

    def _next(self) -> bool:
        # Clamp so repeated calls at end of input stay at end of input.
        self.position = min(self.position + 1, len(self.input))
        return self.position < len(self.input)


def unescape_command_line(escaped_command_line: str) -> list[str]:
    """Split an escaped command line into its unescaped arguments.

    Args:
        escaped_command_line: The ``command`` value of a database entry

    Returns:
        Ordered argument list; empty for empty or all-space input

    Raises:
        EscapeSyntaxError: On an unterminated quote or a dangling backslash

    Examples:
        >>> unescape_command_line('cc -DNAME="a b" file.c')
        ['cc', '-DNAME=a b', 'file.c']

        >>> unescape_command_line("cc 'C:\\\\dir' x\\\\ y")
        ['cc', 'C:\\\\dir', 'x y']
    """
    return CommandLineArgumentParser(escaped_command_line).parse()
