"""Triangulation and vertex index resolution.

Triangulation is delegated to shapely's constrained Delaunay
triangulation, which only ever uses the input polygon's vertices. The
adapter reduces its output to a flat coordinate list, and
``resolve_triangles`` maps those coordinates back to ring indices.
"""

from collections.abc import Sequence

import shapely
from shapely.errors import GEOSException
from shapely.geometry import Polygon as ShapelyPolygon

from svgmesh.core.geometry import signed_area
from svgmesh.domain import Point, Ring, Triangle
from svgmesh.exceptions import InternalConsistencyError, TriangulationError

COORDS_PER_TRIANGLE = 6


def triangulate(points: Sequence[Point]) -> list[float]:
    """Triangulate a simple polygon.

    Args:
        points: Ring points (the closing edge is implicit)

    Returns:
        Flat coordinates ``[x0, y0, x1, y1, x2, y2, ...]``, six per
        triangle. Rings with fewer than 3 points or zero area have no
        interior and give an empty list.

    Raises:
        TriangulationError: If GEOS rejects the polygon
    """
    if len(points) < 3 or signed_area(points) == 0:
        return []

    try:
        polygon = ShapelyPolygon([p.to_tuple() for p in points])
        triangles = shapely.constrained_delaunay_triangles(polygon)
    except (GEOSException, ValueError) as e:
        raise TriangulationError(str(e)) from e

    coords: list[float] = []
    for triangle in shapely.get_parts(triangles):
        # Exterior rings are closed, so the fourth coordinate repeats the first
        for x, y in triangle.exterior.coords[:3]:
            coords.append(x)
            coords.append(y)
    return coords


def build_index(ring: Ring) -> dict[Point, int]:
    """Map each point to the index of its first occurrence in ``ring``."""
    index: dict[Point, int] = {}
    for i, point in enumerate(ring):
        index.setdefault(point, i)
    return index


def resolve_triangles(ring: Ring, coords: Sequence[float]) -> tuple[Triangle, ...]:
    """Convert triangle coordinates back into indices into ``ring``.

    ``ring`` must be the exact point sequence that was triangulated, so
    every coordinate is expected to match a ring point exactly.

    Args:
        ring: The triangulated ring
        coords: Flat triangle coordinates from ``triangulate``

    Returns:
        Triangles indexing into ``ring``

    Raises:
        InternalConsistencyError: If a coordinate is not a ring point or
            the coordinate count is not a multiple of six
    """
    if len(coords) % COORDS_PER_TRIANGLE:
        raise InternalConsistencyError(
            f"Triangulator returned {len(coords)} coordinates, "
            f"expected a multiple of {COORDS_PER_TRIANGLE}"
        )

    index = build_index(ring)
    triangles: list[Triangle] = []
    for i in range(0, len(coords), COORDS_PER_TRIANGLE):
        corners: list[int] = []
        for j in range(i, i + COORDS_PER_TRIANGLE, 2):
            point = Point(coords[j], coords[j + 1])
            try:
                corners.append(index[point])
            except KeyError:
                raise InternalConsistencyError(
                    f"Triangulator returned vertex ({point.x!r}, {point.y!r}) "
                    "that is not in its input ring"
                ) from None
        triangles.append(Triangle(*corners))
    return tuple(triangles)
