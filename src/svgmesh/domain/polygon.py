"""Triangulated polygon representation.

A Polygon is the output of one shape element: its fill, its normalized
exterior ring and the triangles that cover it.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from svgmesh.domain.color import Color
from svgmesh.domain.geometry import Point, Ring


@dataclass(frozen=True, slots=True)
class Triangle:
    """Three indices into one polygon's exterior ring.

    Indices are only meaningful within the polygon that owns them.
    """

    a: int
    b: int
    c: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.a, self.b, self.c))

    def to_list(self) -> list[int]:
        return [self.a, self.b, self.c]


@dataclass(frozen=True, slots=True)
class Polygon:
    """A filled, triangulated polygon.

    Attributes:
        exterior: Counter-clockwise exterior ring
        triangles: Triangles indexing into ``exterior``
        fill: Fill color (transparent black when the shape has none)
    """

    exterior: Ring
    triangles: tuple[Triangle, ...] = ()
    fill: Color = field(default_factory=Color)

    @property
    def vertex_count(self) -> int:
        return len(self.exterior)

    def triangle_points(self) -> Iterator[tuple[Point, Point, Point]]:
        """Yield each triangle as its three exterior points."""
        for tri in self.triangles:
            yield (self.exterior[tri.a], self.exterior[tri.b], self.exterior[tri.c])

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the structured (JSON) encoding.

        Returns:
            Dictionary with fill, exterior and triangles fields
        """
        return {
            "fill": self.fill.to_dict(),
            "exterior": self.exterior.to_list(),
            "triangles": [t.to_list() for t in self.triangles],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        return cls(
            exterior=Ring(tuple(Point.from_dict(p) for p in data["exterior"])),
            triangles=tuple(Triangle(*t) for t in data["triangles"]),
            fill=Color.from_dict(data["fill"]),
        )
