"""SVG reader for loading documents.

This module provides the SvgReader class for loading SVG files and
converting them into the domain Element tree.
"""

from pathlib import Path

from lxml import etree

from svgmesh.domain.element import Element
from svgmesh.exceptions import DocumentLoadError
from svgmesh.io.converter import lxml_to_domain


class SvgReader:
    """Loads an SVG document and exposes its element tree.

    Example:
        reader = SvgReader(Path("drawing.svg"))
        reader.load()
        root = reader.root
    """

    def __init__(self, svg_path: Path) -> None:
        """Initialize the reader.

        Args:
            svg_path: Path to the SVG file
        """
        self._svg_path = svg_path
        self._root: Element | None = None

    def load(self) -> None:
        """Load and parse the SVG file.

        Raises:
            DocumentLoadError: If the file cannot be opened or is not valid XML
        """
        if not self._svg_path.is_file():
            raise DocumentLoadError(str(self._svg_path), "file not found")

        parser = etree.XMLParser(remove_comments=True, resolve_entities=False)
        try:
            tree = etree.parse(str(self._svg_path), parser)
        except (OSError, etree.XMLSyntaxError) as e:
            raise DocumentLoadError(str(self._svg_path), str(e)) from e

        self._root = lxml_to_domain(tree.getroot())

    @property
    def root(self) -> Element:
        """Return the document root element.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        if self._root is None:
            raise RuntimeError("Document not loaded. Call load() first.")

        return self._root

    @classmethod
    def from_string(cls, text: str | bytes) -> Element:
        """Parse SVG markup held in memory.

        Raises:
            DocumentLoadError: If the markup is not valid XML
        """
        if isinstance(text, str):
            text = text.encode("utf-8")
        parser = etree.XMLParser(remove_comments=True, resolve_entities=False)
        try:
            node = etree.fromstring(text, parser)
        except etree.XMLSyntaxError as e:
            raise DocumentLoadError("<string>", str(e)) from e
        return lxml_to_domain(node)

    def close(self) -> None:
        """Release the loaded tree."""
        self._root = None

    def __enter__(self) -> "SvgReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
