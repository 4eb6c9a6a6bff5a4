"""svgmesh - Convert SVG shapes to indexed triangle meshes.

svgmesh reads the ``rect``, ``polygon`` and ``path`` elements of an SVG
document, flattens their outlines into counter-clockwise vertex rings,
triangulates them and writes a vertex/face mesh (OBJ-style text or JSON).

Example:
    $ svgmesh drawing.svg --format obj > drawing.obj
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
