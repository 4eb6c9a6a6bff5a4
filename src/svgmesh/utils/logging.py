"""Logging utilities for svgmesh."""

import logging
import sys
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class ExtractionStats:
    """Statistics from an extraction run."""

    shapes_by_kind: Counter[str] = field(default_factory=Counter)
    vertex_count: int = 0
    triangle_count: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def shape_count(self) -> int:
        return sum(self.shapes_by_kind.values())

    @property
    def duration_seconds(self) -> float:
        """Calculate extraction duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to stderr and an optional file.

    Standard output is reserved for mesh data, so the console handler
    writes to stderr.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_svgmesh", False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel("ERROR" if quiet else console_level.upper())
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler._svgmesh = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(file_level.upper())
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._svgmesh = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("svgmesh")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ExtractionLogger:
    """Logger for tracking shape extraction and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("svgmesh")
        self._stats = ExtractionStats()

    def log_shape_start(self, ordinal: int, kind: str) -> None:
        """Log start of shape extraction."""
        self._logger.debug("Extracting shape", shape=ordinal, kind=kind)

    def log_shape_complete(
        self,
        ordinal: int,
        kind: str,
        vertices: int,
        triangles: int,
    ) -> None:
        """Log a successfully extracted shape."""
        self._logger.debug(
            "Shape extracted",
            shape=ordinal,
            kind=kind,
            vertices=vertices,
            triangles=triangles,
        )
        self._stats.shapes_by_kind[kind] += 1
        self._stats.vertex_count += vertices
        self._stats.triangle_count += triangles

    def log_shape_error(self, ordinal: int, kind: str, error: Exception) -> None:
        """Log a shape extraction failure."""
        self._logger.error(
            "Shape extraction failed",
            shape=ordinal,
            kind=kind,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> ExtractionStats:
        """Get current extraction statistics."""
        return self._stats
