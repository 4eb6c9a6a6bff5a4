"""Path command model.

A path's ``d`` attribute is parsed into a list of commands drawn from a
closed set of variants. Each variant is an immutable dataclass; code
that consumes commands dispatches on them with ``match``.
"""

from dataclasses import dataclass
from enum import Enum

from svgmesh.domain.geometry import Point


class CommandCode(str, Enum):
    """Supported path command letters."""

    ABSOLUTE_MOVE = "M"
    RELATIVE_MOVE = "m"
    ABSOLUTE_LINE = "L"
    RELATIVE_LINE = "l"
    ABSOLUTE_HORIZONTAL = "H"
    RELATIVE_HORIZONTAL = "h"
    ABSOLUTE_VERTICAL = "V"
    RELATIVE_VERTICAL = "v"
    ABSOLUTE_CURVE = "C"
    RELATIVE_CURVE = "c"
    ABSOLUTE_CLOSE = "Z"
    RELATIVE_CLOSE = "z"

    @property
    def arity(self) -> int:
        """Number of numeric arguments the command takes."""
        return COMMAND_ARITY[self.value.upper()]


COMMAND_ARITY: dict[str, int] = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "Z": 0,
}

COMMAND_LETTERS = frozenset(code.value for code in CommandCode)


@dataclass(frozen=True, slots=True)
class AbsoluteMove:
    point: Point


@dataclass(frozen=True, slots=True)
class RelativeMove:
    offset: Point


@dataclass(frozen=True, slots=True)
class AbsoluteLine:
    point: Point


@dataclass(frozen=True, slots=True)
class RelativeLine:
    offset: Point


@dataclass(frozen=True, slots=True)
class AbsoluteHorizontal:
    x: float


@dataclass(frozen=True, slots=True)
class RelativeHorizontal:
    dx: float


@dataclass(frozen=True, slots=True)
class AbsoluteVertical:
    y: float


@dataclass(frozen=True, slots=True)
class RelativeVertical:
    dy: float


@dataclass(frozen=True, slots=True)
class AbsoluteCurve:
    """Cubic curve to ``end`` through control points ``c0`` and ``c1``."""

    c0: Point
    c1: Point
    end: Point


@dataclass(frozen=True, slots=True)
class RelativeCurve:
    """Cubic curve whose points are offsets from the current point."""

    c0: Point
    c1: Point
    end: Point


@dataclass(frozen=True, slots=True)
class Close:
    pass


PathCommand = (
    AbsoluteMove
    | RelativeMove
    | AbsoluteLine
    | RelativeLine
    | AbsoluteHorizontal
    | RelativeHorizontal
    | AbsoluteVertical
    | RelativeVertical
    | AbsoluteCurve
    | RelativeCurve
    | Close
)
