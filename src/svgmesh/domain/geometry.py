"""Core geometric types for outline representation.

This module defines the fundamental geometric types used throughout svgmesh:
- Point: An exact 2D point
- Ring: A closed loop of points with cyclic indexing
- WindingDirection: Enum for ring winding direction
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, ClassVar


class WindingDirection(Enum):
    """Ring winding direction.

    With the y axis pointing up, a positive signed area means
    counter-clockwise. Every polygon exterior is normalized to
    COUNTER_CLOCKWISE before triangulation.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable. Equality is exact float comparison, which
    is what duplicate removal and triangle index lookup rely on.

    Attributes:
        x: X coordinate in document units
        y: Y coordinate in document units
    """

    x: float
    y: float

    ZERO: ClassVar["Point"]

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        return cls(x=data["x"], y=data["y"])


Point.ZERO = Point(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Ring:
    """An ordered closed loop of points.

    The last point implicitly connects back to the first, so indexing
    through ``at`` is cyclic.

    Attributes:
        points: Points in ring order
    """

    points: tuple[Point, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def at(self, index: int) -> Point:
        """Return the point at ``index`` modulo the ring length.

        An empty ring yields the origin.
        """
        if not self.points:
            return Point.ZERO
        return self.points[index % len(self.points)]

    def signed_area(self) -> float:
        """Calculate signed area using the shoelace formula.

        Positive area means counter-clockwise winding, negative means
        clockwise. Rings with fewer than 3 points have zero area.

        Returns:
            Signed area of the ring
        """
        n = len(self.points)
        if n < 3:
            return 0.0

        area = 0.0
        p0 = self.points[0]
        for i in range(1, n + 1):
            p1 = self.at(i)
            area += p0.x * p1.y - p1.x * p0.y
            p0 = p1

        return area / 2.0

    @property
    def direction(self) -> WindingDirection:
        """Winding direction; degenerate rings count as counter-clockwise."""
        if self.signed_area() < 0:
            return WindingDirection.CLOCKWISE
        return WindingDirection.COUNTER_CLOCKWISE

    @property
    def is_counter_clockwise(self) -> bool:
        return self.direction is WindingDirection.COUNTER_CLOCKWISE

    def reversed(self) -> "Ring":
        """Return a ring with the opposite point order."""
        return Ring(tuple(reversed(self.points)))

    def to_list(self) -> list[dict[str, Any]]:
        return [p.to_dict() for p in self.points]
