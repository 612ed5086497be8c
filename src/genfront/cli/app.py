"""CLI application entry point for gen-front.

This module provides the command-line interface using Typer. It only maps
arguments to settings; the work is done by FrontPanelGenerator.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from genfront import __version__
from genfront.cli.output import (
    console,
    print_error,
    print_header,
    print_panel_info,
    print_step,
    print_success,
)
from genfront.config import (
    ExportConfig,
    FontConfig,
    FrontPanelSettings,
    GridConfig,
    GridContent,
    LoggingConfig,
    OutputFormat,
    PanelConfig,
)
from genfront.core import FrontPanelGenerator
from genfront.exceptions import (
    FontParseError,
    GenFrontError,
    MissingGlyphError,
    UnsupportedOutputFormatError,
)

# Create the Typer app
app = typer.Typer(
    name="gen-front",
    help="Generate the laser-cut front panel of a word clock from a font.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]gen-front[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def generate(
    font: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF/OTF font file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path,
        typer.Argument(
            help="File to write the panel to (.svg or .dxf)",
            show_default=False,
        ),
    ],
    output_format: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format (svg|dxf, default: from the output suffix)",
        ),
    ] = None,
    grid: Annotated[
        str,
        typer.Option(
            "--grid",
            "-g",
            help="Grid content (french|english)",
        ),
    ] = "french",
    marker: Annotated[
        str,
        typer.Option(
            "--marker",
            help="Character drawn on each panel edge",
        ),
    ] = FontConfig().marker,
    led_size: Annotated[
        float,
        typer.Option("--led-size", help="LED size in mm", min=0.0),
    ] = PanelConfig().led_size,
    led_spacing: Annotated[
        float,
        typer.Option("--led-spacing", help="Gap between LEDs in mm", min=0.0),
    ] = PanelConfig().led_spacing,
    hole_diameter: Annotated[
        float,
        typer.Option("--hole-diameter", help="Mounting hole diameter in mm", min=0.0),
    ] = PanelConfig().hole_diameter,
    margin: Annotated[
        float,
        typer.Option("--margin", help="Border around the grid in mm", min=0.0),
    ] = PanelConfig().margin,
    flatten: Annotated[
        float | None,
        typer.Option(
            "--flatten",
            help="DXF: flatten curves to this tolerance in font units",
        ),
    ] = None,
    bounding_boxes: Annotated[
        bool,
        typer.Option(
            "--bounding-boxes",
            help="Draw glyph bounding boxes instead of letters",
        ),
    ] = False,
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
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
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
    """Generate the front panel of a word clock as SVG or DXF.

    Example:
        gen-front Siruca.ttf cover.svg

    This will size the French grid for an 11x10 LED array and write the panel
    with its letters, edge markers and mounting holes to cover.svg.
    """
    if not font.is_file():
        print_error(
            f"Input file not found: {font}",
            details="Please provide a path to a TTF or OTF font file.",
        )
        raise typer.Exit(code=1)

    try:
        fmt = OutputFormat.parse(output_format) if output_format else OutputFormat.from_path(output)
        grid_content = GridContent(grid.lower())
    except UnsupportedOutputFormatError as e:
        print_error(str(e), details="Valid formats: svg, dxf")
        raise typer.Exit(code=1)
    except ValueError:
        print_error(f"Invalid grid: {grid}", details="Valid values: french, english")
        raise typer.Exit(code=1)

    try:
        settings = FrontPanelSettings(
            panel=PanelConfig(
                led_size=led_size,
                led_spacing=led_spacing,
                hole_diameter=hole_diameter,
                margin=margin,
            ),
            grid=GridConfig(content=grid_content),
            font=FontConfig(marker=marker),
            export=ExportConfig(
                format=fmt,
                flatten_tolerance=flatten,
                draw_bounding_boxes=bounding_boxes,
            ),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level.upper(),
                quiet=quiet,
            ),
        )
    except ValidationError as e:
        print_error("Invalid settings", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        rows = settings.grid.rows()
        print_panel_info(len(rows), len(rows[0]), settings.panel.led_pitch, fmt.value)
        print_step("Generating")

    try:
        generator = FrontPanelGenerator(settings, setup_logging=True)
        stats = generator.generate(
            font_data=font.read_bytes(),
            output_path=output,
            fmt=fmt,
            source=str(font),
        )
    except FontParseError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except MissingGlyphError as e:
        print_error(str(e), details="Pick a font covering every grid character and the marker.")
        raise typer.Exit(code=1)
    except GenFrontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not write {output}: {e}")
        raise typer.Exit(code=1)

    if not quiet:
        print_success(
            output_path=str(output),
            size_bytes=stats.output_bytes,
            total_time_s=stats.duration_seconds,
            width=stats.document_width,
            height=stats.document_height,
            shapes=stats.shape_count,
        )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
