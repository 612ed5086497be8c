"""Converters between fonttools and domain models.

This module handles the conversion of fonttools glyph outlines into our
domain models (Glyph, typed drawing commands, BoundingBox).
"""

import math
from typing import Any

from fontTools.pens.basePen import BasePen

from genfront.domain.glyph import Glyph
from genfront.domain.outline import (
    INT16_MAX,
    INT16_MIN,
    BoundingBox,
    ClosePath,
    CubicTo,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    QuadTo,
)


def _clamp16(value: int) -> int:
    return max(INT16_MIN, min(INT16_MAX, value))


class OutlinePen(BasePen):
    """Pen recording typed drawing commands and a running bounding box.

    BasePen already splits TrueType quadratic runs with implied on-curve
    points into single-control segments, and multi-control cubic runs into
    single cubic segments, so every recorded command carries exactly the
    points of one segment. Components are drawn through the glyph set.

    Example:
        pen = OutlinePen(glyph_set)
        glyph_set["A"].draw(pen)
        commands, bbox = pen.commands, pen.bounding_box()
    """

    def __init__(self, glyph_set: Any = None) -> None:
        super().__init__(glyph_set)
        self.commands: list[PathCommand] = []
        self._x_min = math.inf
        self._y_min = math.inf
        self._x_max = -math.inf
        self._y_max = -math.inf

    def _point(self, pt: tuple[float, float]) -> Point:
        x, y = pt
        self._x_min = min(self._x_min, x)
        self._y_min = min(self._y_min, y)
        self._x_max = max(self._x_max, x)
        self._y_max = max(self._y_max, y)
        return Point(float(x), float(y))

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self.commands.append(MoveTo(self._point(pt)))

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self.commands.append(LineTo(self._point(pt)))

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self.commands.append(QuadTo(self._point(pt1), self._point(pt2)))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.commands.append(CubicTo(self._point(pt1), self._point(pt2), self._point(pt3)))

    def _closePath(self) -> None:
        self.commands.append(ClosePath())

    def _endPath(self) -> None:
        # Open contour: nothing to close
        pass

    def bounding_box(self) -> BoundingBox:
        """Return the control-point bounding box of everything drawn so far.

        Returns:
            Integer bounding box clamped to the signed 16-bit range,
            BoundingBox.EMPTY if nothing was drawn
        """
        if not self.commands or self._x_min == math.inf:
            return BoundingBox.EMPTY
        return BoundingBox(
            x_min=_clamp16(math.floor(self._x_min)),
            y_min=_clamp16(math.floor(self._y_min)),
            x_max=_clamp16(math.ceil(self._x_max)),
            y_max=_clamp16(math.ceil(self._y_max)),
        )


def fonttools_glyph_to_domain(char: str, fonttools_glyph: Any, glyph_set: Any) -> Glyph:
    """Convert a fonttools glyph to a domain Glyph model.

    Handles both TrueType (quadratic curves) and OpenType/CFF (cubic curves)
    outlines.

    Args:
        char: Character the glyph is mapped to
        fonttools_glyph: The fonttools glyph object from a GlyphSet
        glyph_set: The GlyphSet used to resolve components

    Returns:
        Domain Glyph model

    Raises:
        Exception: If the glyph outline cannot be drawn
    """
    pen = OutlinePen(glyph_set)
    fonttools_glyph.draw(pen)
    return Glyph(char=char, outline=tuple(pen.commands), bbox=pen.bounding_box())


def empty_glyph(char: str) -> Glyph:
    """Build the placeholder glyph of a character whose outline failed."""
    return Glyph(char=char, outline=(), bbox=BoundingBox.EMPTY)
