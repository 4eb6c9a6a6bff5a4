"""Tokenizer primitives for SVG path data.

Path data is a single attribute string with no structure beyond its own
grammar: command letters, numbers and separators. The readers here all
operate on a PathDataCursor, which exposes one character of lookahead
so a reader that does not match consumes nothing.
"""

from svgmesh.domain.commands import COMMAND_LETTERS, CommandCode
from svgmesh.exceptions import (
    DoubleDecimalPointError,
    MalformedNumberError,
    UnknownCommandError,
    UnterminatedPathError,
)

ARGUMENT_SEPARATOR = ","
DIGITS = frozenset("0123456789")
SIGNS = {"+": 1.0, "-": -1.0}


class PathDataCursor:
    """A read position within a path data string.

    Example:
        cursor = PathDataCursor("M0 0")
        cursor.peek()     # "M"
        cursor.advance()  # "M"
        cursor.position   # 1
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._position = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def position(self) -> int:
        """Offset of the next unread character."""
        return self._position

    def at_end(self) -> bool:
        return self._position >= len(self._text)

    def peek(self) -> str | None:
        """Return the next character without consuming it, or None at the end."""
        if self.at_end():
            return None
        return self._text[self._position]

    def advance(self) -> str:
        """Consume and return the next character.

        Raises:
            IndexError: If the cursor is at the end of the text
        """
        if self.at_end():
            raise IndexError("advance past end of path data")
        char = self._text[self._position]
        self._position += 1
        return char

    def remaining(self) -> str:
        return self._text[self._position:]


def is_separator(char: str) -> bool:
    """Return True for any Unicode whitespace character or a comma."""
    return char.isspace() or char == ARGUMENT_SEPARATOR


def read_separator(cursor: PathDataCursor) -> str:
    """Consume a run of whitespace and commas.

    Never fails; an empty run is valid.

    Args:
        cursor: Cursor to read from

    Returns:
        The consumed characters
    """
    start = cursor.position
    while (char := cursor.peek()) is not None and is_separator(char):
        cursor.advance()
    return cursor.text[start:cursor.position]


def read_sign(cursor: PathDataCursor) -> float:
    """Consume an optional sign and return its multiplier.

    A digit or decimal point is left in place and counts as positive.

    Raises:
        MalformedNumberError: If the next character cannot start a number
    """
    char = cursor.peek()
    if char in SIGNS:
        cursor.advance()
        return SIGNS[char]
    if char is not None and (char == "." or char in DIGITS):
        return 1.0
    raise MalformedNumberError(
        "Expected a number" if char is None else f"Expected a number, found {char!r}",
        cursor.position,
    )


def read_number(cursor: PathDataCursor) -> float:
    """Consume a decimal number: optional sign, digits and at most one point.

    Scanning stops without consuming at the first character that is not
    a digit or a first decimal point. Exponents are not part of the
    grammar.

    Args:
        cursor: Cursor to read from

    Returns:
        The parsed value

    Raises:
        MalformedNumberError: If no digits were found
        DoubleDecimalPointError: If a second decimal point is found
    """
    start = cursor.position
    sign = read_sign(cursor)

    seen_point = False
    chars: list[str] = []
    while (char := cursor.peek()) is not None:
        if char == ".":
            if seen_point:
                raise DoubleDecimalPointError(
                    "Double decimal point in number", cursor.position
                )
            seen_point = True
        elif char not in DIGITS:
            break
        chars.append(cursor.advance())

    token = "".join(chars)
    if not any(c in DIGITS for c in token):
        raise MalformedNumberError(
            f"No digits in number {cursor.text[start:cursor.position]!r}", start
        )

    return sign * float(token)


def read_command(cursor: PathDataCursor) -> CommandCode:
    """Consume a single command letter.

    Args:
        cursor: Cursor to read from

    Returns:
        The command code

    Raises:
        UnterminatedPathError: If the cursor is at the end of the text
        UnknownCommandError: If the next character is not a command letter
            (the character is not consumed)
    """
    char = cursor.peek()
    if char is None:
        raise UnterminatedPathError(cursor.position)
    if char not in COMMAND_LETTERS:
        raise UnknownCommandError(char, cursor.position)
    cursor.advance()
    return CommandCode(char)
