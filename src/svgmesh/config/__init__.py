"""Configuration management for svgmesh.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- MeshConfig: Curve flattening settings
- OutputConfig: Output format and destination
- LoggingConfig: Logging settings
- SvgMeshSettings: Main application settings
"""

from svgmesh.config.settings import (
    LoggingConfig,
    MeshConfig,
    OutputConfig,
    OutputFormat,
    SvgMeshSettings,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "MeshConfig",
    "OutputConfig",
    "OutputFormat",
    "SvgMeshSettings",
    "get_default_settings",
]
