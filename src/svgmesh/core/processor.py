"""Conversion orchestration.

This module coordinates the full SVG-to-mesh workflow: load the
document, extract polygons, write the mesh.

Key components:
- MeshProcessor: Main orchestrator class
"""

import sys
import time
from pathlib import Path
from typing import TextIO

import structlog

from svgmesh.config import SvgMeshSettings
from svgmesh.core.assembler import MeshAssembler
from svgmesh.domain import Polygon
from svgmesh.io import MeshWriter, SvgReader
from svgmesh.utils import ExtractionLogger, ExtractionStats


class MeshProcessor:
    """Orchestrates SVG to mesh conversion.

    Manages the complete workflow:
    1. Load SVG file
    2. Extract a triangulated polygon per shape
    3. Write all polygons as one mesh

    Nothing is written unless every shape was extracted.

    Example:
        settings = SvgMeshSettings()
        processor = MeshProcessor(settings)
        stats = processor.process(
            svg_path=Path("drawing.svg"),
            output_path=Path("drawing.obj"),
        )
    """

    def __init__(self, config: SvgMeshSettings) -> None:
        """Initialize processor with configuration.

        Args:
            config: Settings containing mesh and output config
        """
        self.config = config
        self.logger = structlog.get_logger("svgmesh")

    def extract(self, svg_path: Path) -> tuple[list[Polygon], ExtractionStats]:
        """Load a document and extract its polygons.

        Args:
            svg_path: Path to the SVG file

        Returns:
            Polygons in document order and extraction statistics

        Raises:
            DocumentLoadError: If the file cannot be read
            SvgMeshError: If any shape fails
        """
        extraction_logger = ExtractionLogger(self.logger)
        stats = extraction_logger.stats
        stats.start_time = time.time()

        reader = SvgReader(svg_path)
        reader.load()
        try:
            assembler = MeshAssembler(
                curve_resolution=self.config.mesh.curve_resolution,
                extraction_logger=extraction_logger,
            )
            polygons = assembler.extract(reader.root)
        finally:
            reader.close()

        stats.end_time = time.time()
        self.logger.info(
            "Extraction complete",
            input=str(svg_path),
            shapes=stats.shape_count,
            vertices=stats.vertex_count,
            triangles=stats.triangle_count,
        )
        return polygons, stats

    def process(
        self,
        svg_path: Path,
        output_path: Path | None = None,
        stream: TextIO | None = None,
    ) -> ExtractionStats:
        """Convert an SVG file and write the mesh.

        Args:
            svg_path: Path to the SVG file
            output_path: Output file (falls back to config, then to ``stream``)
            stream: Text stream used when no output file is set (stdout if None)

        Returns:
            ExtractionStats for the run

        Raises:
            DocumentLoadError: If the file cannot be read
            SvgMeshError: If any shape fails
            OSError: If the output file cannot be written
        """
        if output_path is None:
            output_path = self.config.output.path

        polygons, stats = self.extract(svg_path)

        writer = MeshWriter(self.config.output.format)
        if output_path is not None:
            writer.save(polygons, output_path)
            self.logger.info("Mesh written", output=str(output_path), format=writer.format.value)
        else:
            writer.write(stream if stream is not None else sys.stdout, polygons)

        return stats
