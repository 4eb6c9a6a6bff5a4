"""Core processing algorithms for svgmesh.

This module contains the core algorithms for:

- Path data interpretation (lexing, command parsing)
- Linearization (command folding, Bezier sampling)
- Ring normalization (signed area, duplicate removal, winding)
- Triangulation and vertex index resolution
- Shape building and mesh assembly

All functions below the assembler are pure; the only state is the
extraction statistics collected by MeshAssembler.

Key functions:
- parse_path_data: Parse a ``d`` attribute into commands
- linearize: Fold commands into a point sequence
- signed_area: Calculate ring area using the shoelace formula
- dedup_adjacent: Remove adjacent duplicate points
- ensure_counter_clockwise: Correct ring winding
- triangulate: Triangulate a ring into flat coordinates
- resolve_triangles: Map triangle coordinates back to ring indices

Key classes:
- MeshAssembler: Extracts polygons from an element tree
- MeshProcessor: Runs the full file-to-mesh workflow
"""

from svgmesh.core.assembler import MeshAssembler, extract_polygons
from svgmesh.core.builders import polygon_from_path, polygon_from_points, polygon_from_rect
from svgmesh.core.geometry import (
    dedup_adjacent,
    drop_closing_duplicate,
    ensure_counter_clockwise,
    signed_area,
)
from svgmesh.core.lexer import (
    PathDataCursor,
    read_command,
    read_number,
    read_separator,
)
from svgmesh.core.linearize import linearize, linearize_command
from svgmesh.core.parser import make_command, parse_path_data
from svgmesh.core.processor import MeshProcessor
from svgmesh.core.triangulate import resolve_triangles, triangulate

__all__ = [
    # Assembly classes
    "MeshAssembler",
    "MeshProcessor",
    # Lexer
    "PathDataCursor",
    # Geometry functions
    "dedup_adjacent",
    "drop_closing_duplicate",
    "ensure_counter_clockwise",
    "extract_polygons",
    "linearize",
    "linearize_command",
    "make_command",
    "parse_path_data",
    # Builders
    "polygon_from_path",
    "polygon_from_points",
    "polygon_from_rect",
    "read_command",
    "read_number",
    "read_separator",
    "resolve_triangles",
    "signed_area",
    "triangulate",
]
