"""Configuration settings for svgmesh."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class OutputFormat(str, Enum):
    """Mesh output encoding."""

    OBJ = "obj"
    JSON = "json"


class MeshConfig(BaseModel):
    """Configuration for outline flattening."""

    curve_resolution: float = Field(
        default=0.1,
        gt=0.0,
        le=1.0,
        description="Bezier parameter step used to sample cubic curves",
    )


class OutputConfig(BaseModel):
    """Configuration for mesh output."""

    format: OutputFormat = Field(
        default=OutputFormat.JSON,
        description="Output encoding (obj or json)",
    )
    path: Path | None = Field(
        default=None,
        description="Output file (None = standard output)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SvgMeshSettings(BaseModel):
    """Main application settings."""

    mesh: MeshConfig = Field(default_factory=MeshConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SvgMeshSettings:
    """Get default application settings."""
    return SvgMeshSettings()
