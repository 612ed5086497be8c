"""Command-line interface for gen-front.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- SVG or DXF output, picked from the output suffix or --format
- Built-in French and English grids
- Bounding-box preview mode for checking the layout
"""

from genfront.cli.app import cli, main

__all__ = ["cli", "main"]
