"""Shape-to-polygon builders.

One builder per supported shape element. Each reads the element's
attributes, produces a normalized exterior ring (counter-clockwise,
no adjacent duplicates for paths) and only then computes triangles.

Key functions:
- polygon_from_rect: <rect x y width height>
- polygon_from_points: <polygon points>
- polygon_from_path: <path d>
"""

import re

import structlog

from svgmesh.core.geometry import (
    dedup_adjacent,
    drop_closing_duplicate,
    ensure_counter_clockwise,
    signed_area,
)
from svgmesh.core.linearize import DEFAULT_CURVE_RESOLUTION, check_resolution, linearize
from svgmesh.core.parser import parse_path_data
from svgmesh.core.triangulate import resolve_triangles, triangulate
from svgmesh.domain import Color, Element, Point, Polygon, Ring, Triangle, parse_color
from svgmesh.exceptions import InvalidAttributeError

logger = structlog.get_logger(__name__)

COORD_SPLITTER = re.compile(r"[\s,]+")

RECT_TRIANGLES = (Triangle(0, 1, 2), Triangle(2, 3, 0))


def parse_fill(element: Element) -> Color:
    """Parse the element's fill, defaulting to transparent black."""
    fill = element.get("fill")
    if not fill:
        return Color()
    return parse_color(fill)


def _float_attribute(element: Element, name: str) -> float:
    value = element.get(name)
    if value is None:
        raise InvalidAttributeError(element.name, name, None)
    try:
        return float(value)
    except ValueError:
        raise InvalidAttributeError(element.name, name, value) from None


def _triangulated(points: list[Point], fill: Color) -> Polygon:
    ring = Ring(tuple(points))
    triangles = resolve_triangles(ring, triangulate(points))
    logger.debug(
        "Polygon triangulated",
        vertices=len(ring),
        triangles=len(triangles),
    )
    return Polygon(exterior=ring, triangles=triangles, fill=fill)


def polygon_from_rect(element: Element) -> Polygon:
    """Build a polygon from a rectangle element.

    The two triangles are fixed; the triangulator is not used.

    Args:
        element: A ``rect`` element

    Returns:
        Four-vertex polygon

    Raises:
        InvalidAttributeError: If x, y, width or height is missing or not a number
        ColorFormatError: If the fill is not a hex color
    """
    x0 = _float_attribute(element, "x")
    y0 = _float_attribute(element, "y")
    x1 = x0 + _float_attribute(element, "width")
    y1 = y0 + _float_attribute(element, "height")

    corners = [Point(x0, y0), Point(x0, y1), Point(x1, y1), Point(x1, y0)]
    ring = Ring(tuple(ensure_counter_clockwise(corners)))

    return Polygon(exterior=ring, triangles=RECT_TRIANGLES, fill=parse_fill(element))


def parse_point_list(element: Element) -> list[Point]:
    """Parse a ``points`` attribute into points.

    Coordinates are separated by whitespace and/or commas. An unpaired
    trailing coordinate is ignored.

    Raises:
        InvalidAttributeError: If a coordinate is not a number
    """
    text = (element.get("points") or "").strip(" \t\n\r\f\v,")
    if not text:
        return []

    tokens = COORD_SPLITTER.split(text)
    coords: list[float] = []
    for token in tokens[: len(tokens) - len(tokens) % 2]:
        try:
            coords.append(float(token))
        except ValueError:
            raise InvalidAttributeError(element.name, "points", token) from None

    return [Point(coords[i], coords[i + 1]) for i in range(0, len(coords), 2)]


def polygon_from_points(element: Element) -> Polygon:
    """Build a polygon from a point-list element.

    Args:
        element: A ``polygon`` element

    Returns:
        Triangulated polygon

    Raises:
        InvalidAttributeError: If a coordinate is not a number
        ColorFormatError: If the fill is not a hex color
        TriangulationError: If the outline cannot be triangulated
    """
    fill = parse_fill(element)
    points = parse_point_list(element)
    logger.debug("Point list parsed", points=len(points), area=signed_area(points))

    return _triangulated(ensure_counter_clockwise(points), fill)


def polygon_from_path(
    element: Element, resolution: float = DEFAULT_CURVE_RESOLUTION
) -> Polygon:
    """Build a polygon from a path element.

    Args:
        element: A ``path`` element
        resolution: Bezier parameter step for curve sampling

    Returns:
        Triangulated polygon

    Raises:
        ConfigurationError: If resolution is out of range
        PathDataError: If the ``d`` attribute cannot be parsed
        ColorFormatError: If the fill is not a hex color
        TriangulationError: If the outline cannot be triangulated
    """
    check_resolution(resolution)

    d = element.get("d") or ""
    logger.debug("Parsing path data", d=d)

    commands = parse_path_data(d)
    fill = parse_fill(element)

    points = drop_closing_duplicate(dedup_adjacent(linearize(commands, resolution)))
    logger.debug(
        "Path linearized",
        commands=len(commands),
        points=len(points),
        area=signed_area(points),
    )

    return _triangulated(ensure_counter_clockwise(points), fill)
