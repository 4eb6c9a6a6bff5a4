"""Command-line interface for svgmesh.

This module provides the CLI using Typer with rich output on stderr,
leaving stdout for mesh data.

Key features:
- Single optional input argument (defaults to test.svg)
- OBJ or JSON output
- Distinct reporting of input errors and internal errors
"""

from svgmesh.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
