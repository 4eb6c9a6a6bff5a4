"""Path data interpreter.

Turns the text of a path's ``d`` attribute into a list of PathCommand
values. One path per shape is supported: parsing ends at the first close
command, and only separators may follow it.
"""

from collections.abc import Sequence

from svgmesh.core.lexer import (
    PathDataCursor,
    read_command,
    read_number,
    read_separator,
)
from svgmesh.domain.commands import (
    AbsoluteCurve,
    AbsoluteHorizontal,
    AbsoluteLine,
    AbsoluteMove,
    AbsoluteVertical,
    Close,
    CommandCode,
    PathCommand,
    RelativeCurve,
    RelativeHorizontal,
    RelativeLine,
    RelativeMove,
    RelativeVertical,
)
from svgmesh.domain.geometry import Point
from svgmesh.exceptions import InvalidArgumentsError, TrailingDataError


def make_command(code: CommandCode, args: Sequence[float]) -> PathCommand:
    """Build the command variant for ``code`` from its parsed arguments.

    Args:
        code: Command letter
        args: Numeric arguments in source order

    Returns:
        The matching PathCommand

    Raises:
        InvalidArgumentsError: If ``len(args)`` does not match the command's arity
    """
    if len(args) != code.arity:
        raise InvalidArgumentsError(code.value, code.arity, len(args))

    match code:
        case CommandCode.ABSOLUTE_MOVE:
            return AbsoluteMove(Point(args[0], args[1]))
        case CommandCode.RELATIVE_MOVE:
            return RelativeMove(Point(args[0], args[1]))
        case CommandCode.ABSOLUTE_LINE:
            return AbsoluteLine(Point(args[0], args[1]))
        case CommandCode.RELATIVE_LINE:
            return RelativeLine(Point(args[0], args[1]))
        case CommandCode.ABSOLUTE_HORIZONTAL:
            return AbsoluteHorizontal(args[0])
        case CommandCode.RELATIVE_HORIZONTAL:
            return RelativeHorizontal(args[0])
        case CommandCode.ABSOLUTE_VERTICAL:
            return AbsoluteVertical(args[0])
        case CommandCode.RELATIVE_VERTICAL:
            return RelativeVertical(args[0])
        case CommandCode.ABSOLUTE_CURVE:
            return AbsoluteCurve(
                Point(args[0], args[1]), Point(args[2], args[3]), Point(args[4], args[5])
            )
        case CommandCode.RELATIVE_CURVE:
            return RelativeCurve(
                Point(args[0], args[1]), Point(args[2], args[3]), Point(args[4], args[5])
            )
        case CommandCode.ABSOLUTE_CLOSE | CommandCode.RELATIVE_CLOSE:
            return Close()

    raise InvalidArgumentsError(code.value, code.arity, len(args))


def read_arguments(cursor: PathDataCursor, count: int) -> list[float]:
    """Read ``count`` numbers separated by optional separators."""
    args: list[float] = []
    for i in range(count):
        if i > 0:
            read_separator(cursor)
        args.append(read_number(cursor))
    return args


def parse_path_data(text: str) -> list[PathCommand]:
    """Parse path data into commands, up to and including the close command.

    Args:
        text: Value of a path's ``d`` attribute

    Returns:
        Commands in source order; the last one is always Close

    Raises:
        LexError: If a number is malformed
        UnknownCommandError: If an unsupported command letter is found
        UnterminatedPathError: If the text ends before a close command
        TrailingDataError: If anything but separators follows the close command
    """
    cursor = PathDataCursor(text)
    commands: list[PathCommand] = []

    while True:
        read_separator(cursor)
        code = read_command(cursor)
        if code.arity:
            read_separator(cursor)
        command = make_command(code, read_arguments(cursor, code.arity))
        commands.append(command)

        if isinstance(command, Close):
            break

    read_separator(cursor)
    if not cursor.at_end():
        raise TrailingDataError(cursor.remaining(), cursor.position)

    return commands
