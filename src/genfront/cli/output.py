"""Rich console output helpers for the CLI.

This module provides user-friendly console output using the Rich library.
"""

from rich.console import Console
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]gen-front[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_panel_info(rows: int, columns: int, pitch: float, output_format: str) -> None:
    """Print the panel configuration.

    Args:
        rows: Number of grid rows
        columns: Number of grid columns
        pitch: LED pitch in millimeters
        output_format: Output format name
    """
    console.print(
        f"  {columns}x{rows} grid {SYM_DOT} {pitch:g} mm pitch {SYM_DOT} {output_format.upper()}"
    )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def _format_size(size_bytes: int) -> str:
    """Format a byte count into human-readable form."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    return f"{size_bytes / (1024 * 1024):.1f} MB"


def print_success(
    output_path: str,
    size_bytes: int,
    total_time_s: float,
    width: float,
    height: float,
    shapes: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        size_bytes: Size of the written file
        total_time_s: Total time in seconds
        width: Document width in millimeters
        height: Document height in millimeters
        shapes: Number of shapes written
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({_format_size(size_bytes)})")
    console.print(line)

    console.print(f"  {width:.2f} x {height:.2f} mm {SYM_DOT} {shapes} shapes")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
