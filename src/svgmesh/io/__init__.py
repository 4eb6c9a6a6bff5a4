"""Document I/O layer for svgmesh.

This module handles reading SVG documents with lxml and writing meshes.
It provides a clean abstraction layer between lxml and the domain
models.

Key responsibilities:
- Load SVG files into the domain Element tree
- Write polygons as OBJ-style text or JSON

Key classes:
- SvgReader: Load documents
- MeshWriter: Save meshes
"""

from svgmesh.io.reader import SvgReader
from svgmesh.io.writer import MeshWriter, write_json, write_obj

__all__ = [
    "MeshWriter",
    "SvgReader",
    "write_json",
    "write_obj",
]
