"""Geometric operations for ring normalization.

This module provides the ring utilities applied between linearization
and triangulation:
- Signed area calculation (shoelace formula)
- Adjacent duplicate removal
- Winding correction

All functions are pure and return new lists.
"""

import operator
from collections.abc import Callable, Sequence

from svgmesh.domain import Point, Ring


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a closed point sequence.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: Points forming the ring boundary

    Returns:
        Signed area in square units. Returns 0.0 for fewer than 3 points.

    Examples:
        >>> p1 = Point(0.0, 0.0)
        >>> p2 = Point(1.0, 0.0)
        >>> p3 = Point(1.0, 1.0)
        >>> p4 = Point(0.0, 1.0)
        >>> signed_area([p1, p2, p3, p4])  # CCW square
        1.0
        >>> signed_area([p1, p4, p3, p2])  # CW square
        -1.0
    """
    return Ring(tuple(points)).signed_area()


def dedup_adjacent(
    points: Sequence[Point],
    equals: Callable[[Point, Point], bool] = operator.eq,
) -> list[Point]:
    """Drop points equal to the previously retained point.

    A single pass: repeats separated by a distinct point are kept.

    Args:
        points: Points in ring order
        equals: Equality predicate (exact comparison by default)

    Returns:
        Points with adjacent duplicates removed

    Examples:
        >>> a, b = Point(0.0, 0.0), Point(1.0, 0.0)
        >>> dedup_adjacent([a, a, b, b, a])
        [Point(x=0.0, y=0.0), Point(x=1.0, y=0.0), Point(x=0.0, y=0.0)]
    """
    result: list[Point] = []
    for point in points:
        if result and equals(point, result[-1]):
            continue
        result.append(point)
    return result


def drop_closing_duplicate(
    points: Sequence[Point],
    equals: Callable[[Point, Point], bool] = operator.eq,
) -> list[Point]:
    """Drop trailing points that repeat the first point.

    Paths that return to their start before closing emit the start point
    twice; the ring closes implicitly, so the copy is redundant.
    """
    result = list(points)
    while len(result) > 1 and equals(result[-1], result[0]):
        result.pop()
    return result


def ensure_counter_clockwise(points: Sequence[Point]) -> list[Point]:
    """Return the points in counter-clockwise order.

    Clockwise input is reversed; anything else is returned unchanged, so
    applying this twice is the same as applying it once.

    Args:
        points: Points in ring order

    Returns:
        Points with non-negative signed area
    """
    if signed_area(points) < 0:
        return list(reversed(points))
    return list(points)
