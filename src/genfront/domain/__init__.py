"""Domain models for gen-front.

This module contains the core domain models representing glyph outlines,
font metrics and the panel shapes. All models are immutable frozen
dataclasses, so each pipeline stage hands a finished value to the next.

Key classes:
- Point: A 2D point
- MoveTo, LineTo, QuadTo, CubicTo, ClosePath: Outline drawing commands
- BoundingBox: Glyph bounding box in font units
- Glyph: Outline and bounding box of one character
- FontMetrics: Metrics aggregated over the analyzed characters
- Circle, Path: The two shape kinds of a panel
- Cover: The finished panel design
"""

from genfront.domain.glyph import FontMetrics, Glyph
from genfront.domain.outline import (
    BoundingBox,
    ClosePath,
    CubicTo,
    LineTo,
    MoveTo,
    Outline,
    PathCommand,
    Point,
    QuadTo,
)
from genfront.domain.shapes import Circle, Cover, Path, Shape

__all__: list[str] = [
    # Outline commands
    "ClosePath",
    "CubicTo",
    "LineTo",
    "MoveTo",
    "QuadTo",
    "PathCommand",
    "Outline",
    # Core types
    "Point",
    "BoundingBox",
    "Glyph",
    "FontMetrics",
    # Shapes
    "Circle",
    "Path",
    "Shape",
    "Cover",
]
