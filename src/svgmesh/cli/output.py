"""Rich console output helpers for the CLI.

Mesh data may be written to standard output, so every human-facing
message goes to a stderr console.
"""

from rich.console import Console
from rich.markup import escape
from rich.text import Text

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header."""
    console.print(f"\n[bold]svgmesh[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(
    shapes_by_kind: dict[str, int],
    vertices: int,
    triangles: int,
    total_time_s: float,
    output_path: str | None = None,
) -> None:
    """Print success message with summary.

    Args:
        shapes_by_kind: Number of extracted shapes per element name
        vertices: Total exported vertices
        triangles: Total exported triangles
        total_time_s: Extraction time in seconds
        output_path: Output file, or None when writing to stdout
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}"
    )

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    kinds = f" {SYM_DOT} ".join(
        f"{count} {kind}" for kind, count in sorted(shapes_by_kind.items())
    )
    console.print(f"  {kinds or 'no shapes'}")
    console.print(f"  {vertices} vertices {SYM_DOT} {triangles} triangles")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")


def print_internal_error(message: str) -> None:
    """Print an internal consistency failure, distinct from input errors."""
    console.print(f"\n[bold magenta]{SYM_ERR} Internal error:[/bold magenta] {escape(message)}")
    console.print("  This is a bug in svgmesh or its triangulation library, not in the input.")
