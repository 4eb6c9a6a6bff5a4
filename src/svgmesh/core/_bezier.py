"""Internal cubic Bezier evaluation and sampling.

This is an internal module containing the curve helper used by the path
linearizer. Not intended for public use.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from svgmesh.domain import Point


def _lerp(a: Point, b: Point, t: float) -> Point:
    return Point(a.x * (1 - t) + b.x * t, a.y * (1 - t) + b.y * t)


@dataclass(frozen=True, slots=True)
class Bezier:
    """A cubic Bezier curve from ``p0`` to ``p1`` through ``c0`` and ``c1``."""

    p0: Point
    c0: Point
    c1: Point
    p1: Point

    def at(self, t: float) -> Point:
        """Evaluate the curve at parameter ``t`` using De Casteljau's algorithm.

        Args:
            t: Curve parameter in [0, 1]

        Returns:
            Point on the curve. ``at(0)`` is exactly ``p0`` and ``at(1)``
            is exactly ``p1``.
        """
        # First level
        a0 = _lerp(self.p0, self.c0, t)
        a1 = _lerp(self.c0, self.c1, t)
        a2 = _lerp(self.c1, self.p1, t)

        # Second level
        b0 = _lerp(a0, a1, t)
        b1 = _lerp(a1, a2, t)

        return _lerp(b0, b1, t)

    def sample(self, step: float) -> Iterator[Point]:
        """Sample the curve at ``t = 0, step, 2*step, ...`` below 1, then at 1.

        The parameter is accumulated by repeated addition, so sample
        positions match a running-sum loop exactly.

        Args:
            step: Parameter increment, must be positive

        Yields:
            Points along the curve, ending with ``p1``
        """
        t = 0.0
        while t < 1.0:
            yield self.at(t)
            t += step
        yield self.at(1.0)
