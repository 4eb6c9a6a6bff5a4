"""Utility functions for svgmesh.

This module provides logging setup and extraction statistics.
"""

from svgmesh.utils.logging import (
    ExtractionLogger,
    ExtractionStats,
    configure_logging,
)

__all__ = [
    "ExtractionLogger",
    "ExtractionStats",
    "configure_logging",
]
