"""Exception hierarchy for svgmesh."""


class SvgMeshError(Exception):
    """Base exception for all svgmesh errors."""

    pass


class ConfigurationError(SvgMeshError):
    """Invalid runtime configuration (e.g. a non-positive curve resolution)."""

    pass


class DocumentError(SvgMeshError):
    """Errors related to loading the input document."""

    pass


class DocumentLoadError(DocumentError):
    """Error opening or parsing an SVG file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load document '{path}': {reason}")


class PathDataError(SvgMeshError):
    """Errors raised while interpreting a path's ``d`` attribute."""

    def __init__(self, message: str, position: int) -> None:
        self.message = message
        self.position = position
        super().__init__(f"{message} (at offset {position})")


class LexError(PathDataError):
    """A numeric token in path data is malformed."""

    pass


class MalformedNumberError(LexError):
    """No number could be read at the cursor."""

    pass


class DoubleDecimalPointError(LexError):
    """A number contains more than one decimal point."""

    pass


class GrammarError(PathDataError):
    """Path data does not follow the command grammar."""

    pass


class UnknownCommandError(GrammarError):
    """Character at the cursor is not a supported command letter."""

    def __init__(self, char: str, position: int) -> None:
        self.char = char
        super().__init__(f"Unknown path command {char!r}", position)


class InvalidArgumentsError(GrammarError):
    """Wrong number of arguments for a path command."""

    def __init__(self, command: str, expected: int, got: int) -> None:
        self.command = command
        self.expected = expected
        self.got = got
        super().__init__(
            f"Command {command!r} takes {expected} arguments, got {got}", -1
        )


class UnterminatedPathError(GrammarError):
    """Path data ended before a close command."""

    def __init__(self, position: int) -> None:
        super().__init__("Path data ended without a close command", position)


class TrailingDataError(GrammarError):
    """Non-separator characters follow the close command."""

    def __init__(self, trailing: str, position: int) -> None:
        self.trailing = trailing
        super().__init__(f"Unexpected data after close command: {trailing!r}", position)


class ShapeError(SvgMeshError):
    """Errors related to a shape element's attributes."""

    pass


class InvalidAttributeError(ShapeError):
    """A required numeric attribute is missing or malformed."""

    def __init__(self, element: str, attribute: str, value: str | None) -> None:
        self.element = element
        self.attribute = attribute
        self.value = value
        if value is None:
            reason = "missing"
        else:
            reason = f"not a number: {value!r}"
        super().__init__(f"Invalid '{attribute}' attribute on <{element}>: {reason}")


class ColorFormatError(SvgMeshError):
    """Color value is not in #RGB or #RRGGBB form."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unrecognized color format: {value!r}")


class GeometryError(SvgMeshError):
    """Errors in geometric calculations."""

    pass


class TriangulationError(GeometryError):
    """The triangulation library rejected a polygon."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Triangulation failed: {reason}")


class InternalConsistencyError(SvgMeshError):
    """Triangulator output does not match its input ring.

    This signals a contract violation between svgmesh and the
    triangulation library, not a problem with the input document.
    """

    pass
