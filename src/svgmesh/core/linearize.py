"""Path linearization.

Converts parsed path commands into a flat point sequence. The current
point is passed explicitly: each command maps (command, current point)
to the points it emits, and the fold threads the last emitted point into
the next command.
"""

from collections.abc import Iterable

from svgmesh.core._bezier import Bezier
from svgmesh.domain.commands import (
    AbsoluteCurve,
    AbsoluteHorizontal,
    AbsoluteLine,
    AbsoluteMove,
    AbsoluteVertical,
    Close,
    PathCommand,
    RelativeCurve,
    RelativeHorizontal,
    RelativeLine,
    RelativeMove,
    RelativeVertical,
)
from svgmesh.domain.geometry import Point
from svgmesh.exceptions import ConfigurationError

DEFAULT_CURVE_RESOLUTION = 0.1


def check_resolution(resolution: float) -> None:
    """Validate a curve resolution.

    Raises:
        ConfigurationError: If resolution is not in (0, 1]
    """
    if not 0.0 < resolution <= 1.0:
        raise ConfigurationError(
            f"Curve resolution must be in (0, 1], got {resolution!r}"
        )


def linearize_command(
    command: PathCommand, current: Point, resolution: float
) -> list[Point]:
    """Expand one command into absolute points.

    Args:
        command: Command to expand
        current: Current point before the command
        resolution: Bezier parameter step for curve sampling

    Returns:
        Points emitted by the command (empty for Close)
    """
    match command:
        case AbsoluteMove(point) | AbsoluteLine(point):
            return [point]
        case RelativeMove(offset) | RelativeLine(offset):
            return [current + offset]
        case AbsoluteHorizontal(x):
            return [Point(x, current.y)]
        case RelativeHorizontal(dx):
            return [current + Point(dx, 0.0)]
        case AbsoluteVertical(y):
            return [Point(current.x, y)]
        case RelativeVertical(dy):
            return [current + Point(0.0, dy)]
        case AbsoluteCurve(c0, c1, end):
            return list(Bezier(p0=current, c0=c0, c1=c1, p1=end).sample(resolution))
        case RelativeCurve(c0, c1, end):
            curve = Bezier(p0=current, c0=current + c0, c1=current + c1, p1=current + end)
            return list(curve.sample(resolution))
        case Close():
            return []

    raise TypeError(f"Not a path command: {command!r}")


def linearize(
    commands: Iterable[PathCommand], resolution: float = DEFAULT_CURVE_RESOLUTION
) -> list[Point]:
    """Fold commands into one point sequence.

    The current point starts at the origin and becomes the last emitted
    point after each command.

    Args:
        commands: Parsed path commands
        resolution: Bezier parameter step in (0, 1]

    Returns:
        All emitted points in order

    Raises:
        ConfigurationError: If resolution is out of range
    """
    check_resolution(resolution)

    points: list[Point] = []
    current = Point.ZERO
    for command in commands:
        emitted = linearize_command(command, current, resolution)
        if emitted:
            current = emitted[-1]
        points.extend(emitted)
    return points
