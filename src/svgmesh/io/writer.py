"""Mesh writers.

This module serializes extracted polygons as OBJ-style text (one global
vertex list followed by faces) or as JSON.
"""

import json
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from svgmesh.config import OutputFormat
from svgmesh.domain.polygon import Polygon


def write_obj(stream: TextIO, polygons: Sequence[Polygon]) -> None:
    """Write polygons as ``v``/``f`` lines.

    All vertices come first, then all faces. Face indices are 1-based and
    offset by the number of vertices of the preceding polygons.

    Args:
        stream: Text stream to write to
        polygons: Polygons to write
    """
    first_vertex: list[int] = []
    count = 1
    for polygon in polygons:
        first_vertex.append(count)
        count += polygon.vertex_count
        for v in polygon.exterior:
            stream.write(f"v {v.x:f} {v.y:f} 0\n")

    for offset, polygon in zip(first_vertex, polygons):
        for t in polygon.triangles:
            stream.write(f"f {offset + t.a} {offset + t.b} {offset + t.c}\n")


def write_json(stream: TextIO, polygons: Sequence[Polygon]) -> None:
    """Write polygons as an indented JSON list of ``Polygon.to_dict()``."""
    json.dump([p.to_dict() for p in polygons], stream, indent="\t")
    stream.write("\n")


class MeshWriter:
    """Writes polygons in the configured format.

    Example:
        writer = MeshWriter(OutputFormat.OBJ)
        writer.write(sys.stdout, polygons)
        writer.save(polygons, Path("drawing.obj"))
    """

    def __init__(self, output_format: OutputFormat = OutputFormat.JSON) -> None:
        self._format = output_format

    @property
    def format(self) -> OutputFormat:
        return self._format

    def write(self, stream: TextIO, polygons: Sequence[Polygon]) -> None:
        """Write polygons to an open text stream."""
        if self._format is OutputFormat.OBJ:
            write_obj(stream, polygons)
        else:
            write_json(stream, polygons)

    def save(self, polygons: Sequence[Polygon], output_path: Path) -> None:
        """Write polygons to a file, replacing it.

        Raises:
            OSError: If the file cannot be written
        """
        with output_path.open("w", encoding="utf-8", newline="\n") as f:
            self.write(f, polygons)

    @staticmethod
    def get_mesh_path(input_path: Path, output_format: OutputFormat) -> Path:
        """Derive an output path next to the input.

        Converts: drawing.svg -> drawing.obj (or drawing.json)

        Args:
            input_path: Source SVG path
            output_format: Output encoding

        Returns:
            Path with the format's extension
        """
        return input_path.with_suffix(f".{output_format.value}")
