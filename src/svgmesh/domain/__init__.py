"""Domain models for svgmesh.

This module contains the value types shared by the parser, the geometry
pipeline and the writers. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries
- Independent of lxml and shapely

Key classes:
- Point, Ring: exact 2D geometry with cyclic ring indexing
- PathCommand variants: parsed path-data commands
- Color: fill color
- Polygon, Triangle: triangulated output shapes
- Element: a document element
"""

from svgmesh.domain.color import Color, parse_color
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
from svgmesh.domain.element import Element
from svgmesh.domain.geometry import Point, Ring, WindingDirection
from svgmesh.domain.polygon import Polygon, Triangle

__all__: list[str] = [
    # Enums
    "CommandCode",
    "WindingDirection",
    # Geometry
    "Point",
    "Ring",
    # Path commands
    "AbsoluteCurve",
    "AbsoluteHorizontal",
    "AbsoluteLine",
    "AbsoluteMove",
    "AbsoluteVertical",
    "Close",
    "PathCommand",
    "RelativeCurve",
    "RelativeHorizontal",
    "RelativeLine",
    "RelativeMove",
    "RelativeVertical",
    # Shapes
    "Color",
    "Element",
    "Polygon",
    "Triangle",
    "parse_color",
]
