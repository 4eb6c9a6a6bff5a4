"""Mesh assembly from an element tree.

Walks the document in pre-order and turns every supported shape element
into a Polygon. Shapes are independent of each other and of their
ancestors; the traversal order only fixes output numbering.
"""

from collections.abc import Callable

from svgmesh.core.builders import polygon_from_path, polygon_from_points, polygon_from_rect
from svgmesh.core.linearize import DEFAULT_CURVE_RESOLUTION, check_resolution
from svgmesh.domain import Element, Polygon
from svgmesh.utils.logging import ExtractionLogger, ExtractionStats


class MeshAssembler:
    """Extracts triangulated polygons from an element tree.

    The first shape that fails aborts the extraction; there is no
    partial-success mode.

    Example:
        assembler = MeshAssembler(curve_resolution=0.1)
        polygons = assembler.extract(root)
        print(assembler.stats.triangle_count)
    """

    def __init__(
        self,
        curve_resolution: float = DEFAULT_CURVE_RESOLUTION,
        extraction_logger: ExtractionLogger | None = None,
    ) -> None:
        """Initialize the assembler.

        Args:
            curve_resolution: Bezier parameter step for path curves, in (0, 1]
            extraction_logger: Logger collecting statistics (created if None)

        Raises:
            ConfigurationError: If curve_resolution is out of range
        """
        check_resolution(curve_resolution)
        self.curve_resolution = curve_resolution
        self.extraction_logger = extraction_logger or ExtractionLogger()
        self._builders: dict[str, Callable[[Element], Polygon]] = {
            "rect": polygon_from_rect,
            "polygon": polygon_from_points,
            "path": lambda el: polygon_from_path(el, self.curve_resolution),
        }

    @property
    def stats(self) -> ExtractionStats:
        return self.extraction_logger.stats

    def extract(self, root: Element) -> list[Polygon]:
        """Build one polygon per shape element under ``root``.

        Args:
            root: Document root (itself included in the walk)

        Returns:
            Polygons in document pre-order

        Raises:
            SvgMeshError: From the first shape that fails
        """
        polygons: list[Polygon] = []

        for element in root.iter_preorder():
            builder = self._builders.get(element.name)
            if builder is None:
                continue

            ordinal = len(polygons)
            self.extraction_logger.log_shape_start(ordinal, element.name)
            try:
                polygon = builder(element)
            except Exception as e:
                self.extraction_logger.log_shape_error(ordinal, element.name, e)
                raise

            self.extraction_logger.log_shape_complete(
                ordinal,
                element.name,
                vertices=polygon.vertex_count,
                triangles=len(polygon.triangles),
            )
            polygons.append(polygon)

        return polygons


def extract_polygons(
    root: Element, curve_resolution: float = DEFAULT_CURVE_RESOLUTION
) -> list[Polygon]:
    """Extract polygons from an element tree with a fresh assembler."""
    return MeshAssembler(curve_resolution).extract(root)
