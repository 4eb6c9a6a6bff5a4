"""CLI application entry point for svgmesh.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from svgmesh import __version__
from svgmesh.cli.output import (
    console,
    print_error,
    print_header,
    print_internal_error,
    print_step,
    print_success,
)
from svgmesh.config import (
    LoggingConfig,
    MeshConfig,
    OutputConfig,
    OutputFormat,
    SvgMeshSettings,
)
from svgmesh.core import MeshProcessor
from svgmesh.exceptions import (
    DocumentLoadError,
    InternalConsistencyError,
    PathDataError,
    SvgMeshError,
)
from svgmesh.utils import configure_logging

DEFAULT_INPUT = Path("test.svg")

# Create the Typer app
app = typer.Typer(
    name="svgmesh",
    help="Convert SVG rect, polygon and path shapes into a triangle mesh.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]svgmesh[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def convert(
    input_svg: Annotated[
        Path,
        typer.Argument(
            help="Path to input SVG file",
        ),
    ] = DEFAULT_INPUT,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format",
            case_sensitive=False,
        ),
    ] = OutputFormat.JSON,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file (default: standard output)",
        ),
    ] = None,
    resolution: Annotated[
        float,
        typer.Option(
            "--resolution",
            "-r",
            help="Bezier sampling step, greater than 0 and at most 1",
        ),
    ] = 0.1,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Console logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print errors",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert the shapes of an SVG file into a vertex/face mesh.

    Every rect, polygon and path element becomes a counter-clockwise
    polygon that is triangulated and written as OBJ-style text or JSON.

    Example:
        svgmesh drawing.svg --format obj > drawing.obj
    """
    try:
        settings = SvgMeshSettings(
            mesh=MeshConfig(curve_resolution=resolution),
            output=OutputConfig(format=output_format, path=output),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        print_error("Invalid configuration", details=str(e))
        raise typer.Exit(code=1)

    try:
        configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
    except OSError as e:
        print_error(f"Could not open log file: {e}", details=str(settings.logging.log_file))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_step(f"Converting {input_svg}")

    processor = MeshProcessor(settings)

    try:
        stats = processor.process(svg_path=input_svg)
    except DocumentLoadError as e:
        print_error(f"Could not load document: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except PathDataError as e:
        print_error(f"Invalid path data: {e}")
        raise typer.Exit(code=1)
    except InternalConsistencyError as e:
        print_internal_error(str(e))
        raise typer.Exit(code=1)
    except SvgMeshError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not write output: {e}")
        raise typer.Exit(code=1)

    if not quiet:
        print_success(
            shapes_by_kind=dict(stats.shapes_by_kind),
            vertices=stats.vertex_count,
            triangles=stats.triangle_count,
            total_time_s=stats.duration_seconds,
            output_path=str(settings.output.path) if settings.output.path else None,
        )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
