"""Core algorithms for gen-front.

This module contains the core algorithms for:

- Layout solving (letter size and spacing for a square grid)
- Shape composition (holes, markers and letters in document coordinates)
- Pipeline orchestration (font to exported document)

Layout and composition are pure functions of their inputs and return
immutable values.

Key functions:
- solve_layout: Closed-form letter size for a square grid
- layout_for_metrics: solve_layout for an analyzed font
- generate_holes, generate_markers, generate_grid: Shape placement

Key classes:
- Layout: Solved panel dimensions
- CoverComposer: Builds the ordered shape list
- FrontPanelGenerator: Runs the whole pipeline
"""

from genfront.core.composer import (
    CoverComposer,
    generate_grid,
    generate_holes,
    generate_markers,
)
from genfront.core.generator import FrontPanelGenerator
from genfront.core.layout import Layout, layout_for_metrics, solve_layout

__all__ = [
    # Composer
    "CoverComposer",
    # Pipeline
    "FrontPanelGenerator",
    # Layout
    "Layout",
    "generate_grid",
    "generate_holes",
    "generate_markers",
    "layout_for_metrics",
    "solve_layout",
]
