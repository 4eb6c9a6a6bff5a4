"""Unit tests for logging utilities."""

import json
import logging

import pytest
import structlog

from svgmesh.utils import ExtractionLogger, ExtractionStats, configure_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_svgmesh", False):
            root.removeHandler(handler)
            handler.close()
    structlog.reset_defaults()


def _svgmesh_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if getattr(h, "_svgmesh", False)]


class TestExtractionStats:
    """Tests for ExtractionStats."""

    def test_empty(self):
        stats = ExtractionStats()
        assert stats.shape_count == 0
        assert stats.duration_seconds == 0.0

    def test_duration(self):
        stats = ExtractionStats(start_time=10.0, end_time=12.5)
        assert stats.duration_seconds == 2.5


class TestExtractionLogger:
    """Tests for ExtractionLogger."""

    def test_complete_updates_stats(self):
        extraction_logger = ExtractionLogger()
        extraction_logger.log_shape_start(0, "rect")
        extraction_logger.log_shape_complete(0, "rect", vertices=4, triangles=2)
        extraction_logger.log_shape_complete(1, "path", vertices=5, triangles=3)

        stats = extraction_logger.stats
        assert stats.shapes_by_kind == {"rect": 1, "path": 1}
        assert stats.shape_count == 2
        assert stats.vertex_count == 9
        assert stats.triangle_count == 5

    def test_error_does_not_count(self):
        extraction_logger = ExtractionLogger()
        extraction_logger.log_shape_error(0, "path", ValueError("bad"))
        assert extraction_logger.stats.shape_count == 0


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_console_only(self):
        configure_logging()
        handlers = _svgmesh_handlers()
        assert len(handlers) == 1
        assert handlers[0].level == logging.WARNING

    def test_quiet(self):
        configure_logging(console_level="DEBUG", quiet=True)
        assert _svgmesh_handlers()[0].level == logging.ERROR

    def test_reconfigure_replaces_handlers(self, tmp_path):
        configure_logging(log_file=tmp_path / "first.log")
        configure_logging(log_file=tmp_path / "second.log")
        assert len(_svgmesh_handlers()) == 2

    def test_file_receives_json_events(self, tmp_path):
        log_file = tmp_path / "svgmesh.log"
        logger = configure_logging(log_file=log_file)
        logger.debug("Shape extracted", shape=3)

        for handler in _svgmesh_handlers():
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        events = [json.loads(line.split(" | ", 3)[3]) for line in lines]
        assert events[-1]["event"] == "Shape extracted"
        assert events[-1]["shape"] == 3
        assert events[0]["event"] == "Logging initialized"
