"""Shape types making up a front panel.

A front panel is a flat list of shapes in document coordinates (millimeters,
Y axis pointing down). There are exactly two kinds of shape and exporters
match over both of them:

- Circle: A mounting hole
- Path: A glyph outline in font units, placed at an anchor

The affine mapping from font units to document units is not baked into a
Path; each exporter applies it in its own way.
"""

from dataclasses import dataclass
from typing import TypeAlias

from genfront.domain.outline import Outline, Point


@dataclass(frozen=True, slots=True)
class Circle:
    """A circle in document coordinates.

    Attributes:
        center: Circle center
        radius: Circle radius in document units
    """

    center: Point
    radius: float


@dataclass(frozen=True, slots=True)
class Path:
    """A glyph outline placed on the panel.

    The outline stays in font units. A font point (fx, fy) lands on the
    document at (anchor.x + fx * scale, anchor.y - fy * scale).

    Attributes:
        outline: Drawing commands in font design units
        anchor: Document position of the font origin
    """

    outline: Outline
    anchor: Point


Shape: TypeAlias = Circle | Path


@dataclass(frozen=True, slots=True)
class Cover:
    """The finished front panel design, ready for export.

    Attributes:
        scale: Font units to document units factor
        shapes: Holes, then markers, then grid letters
        width: Document width in document units
        height: Document height in document units
    """

    scale: float
    shapes: tuple[Shape, ...]
    width: float
    height: float

    def to_document(self, path: Path, point: Point) -> Point:
        """Map a font-unit point of a path into document coordinates.

        Args:
            path: Path the point belongs to
            point: Point in font units

        Returns:
            Point in document units (Y axis down)
        """
        return Point(
            path.anchor.x + point.x * self.scale,
            path.anchor.y - point.y * self.scale,
        )
