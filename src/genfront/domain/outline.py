"""Core geometric types for glyph outline representation.

This module defines the outline vocabulary shared by the extractor and the
exporters:
- Point: A 2D point in font units or document units
- MoveTo, LineTo, QuadTo, CubicTo, ClosePath: typed drawing commands
- BoundingBox: Axis-aligned box in font design units
"""

from dataclasses import dataclass
from typing import ClassVar, TypeAlias

INT16_MIN = -32768
INT16_MAX = 32767


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new contour at ``pt``."""

    pt: Point


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment from the current point to ``pt``."""

    pt: Point


@dataclass(frozen=True, slots=True)
class QuadTo:
    """Quadratic Bezier segment with one control point."""

    ctrl: Point
    pt: Point


@dataclass(frozen=True, slots=True)
class CubicTo:
    """Cubic Bezier segment with two control points."""

    ctrl1: Point
    ctrl2: Point
    pt: Point


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current contour."""


PathCommand: TypeAlias = MoveTo | LineTo | QuadTo | CubicTo | ClosePath
Outline: TypeAlias = tuple[PathCommand, ...]


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box in font design units.

    Values are signed 16-bit integers, like the glyph header of a TrueType
    font.

    Attributes:
        x_min: Left edge
        y_min: Bottom edge
        x_max: Right edge
        y_max: Top edge
    """

    x_min: int
    y_min: int
    x_max: int
    y_max: int

    EMPTY: ClassVar["BoundingBox"]

    @property
    def width(self) -> int:
        return self.x_max - self.x_min

    @property
    def height(self) -> int:
        return self.y_max - self.y_min

    @property
    def center_x(self) -> float:
        return (self.x_min + self.x_max) / 2.0

    @property
    def center_y(self) -> float:
        return (self.y_min + self.y_max) / 2.0

    def to_outline(self) -> Outline:
        """Build a closed rectangle outline tracing this box.

        Returns:
            Outline with one rectangular contour
        """
        return (
            MoveTo(Point(self.x_min, self.y_min)),
            LineTo(Point(self.x_max, self.y_min)),
            LineTo(Point(self.x_max, self.y_max)),
            LineTo(Point(self.x_min, self.y_max)),
            ClosePath(),
        )


BoundingBox.EMPTY = BoundingBox(0, 0, 0, 0)
