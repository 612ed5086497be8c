"""Composition of the front panel shape list.

The composer places, in document coordinates (millimeters, Y axis down):

1. four mounting holes, one per corner
2. four marker glyphs, one per edge midpoint
3. the letter grid, row by row

This order is part of the contract: exporters emit shapes as they come and
rely on it for deterministic output and layering.
"""

from collections.abc import Sequence

import structlog

from genfront.core.layout import Layout
from genfront.domain import Circle, Cover, FontMetrics, Glyph, Path, Point, Shape
from genfront.exceptions import DegenerateLayoutError

logger = structlog.get_logger(__name__)


def generate_holes(layout: Layout, hole_diameter: float) -> list[Shape]:
    """Place a mounting hole near each corner of the panel.

    Holes are centered half a margin plus one radius away from both edges of
    their corner. Order: top-left, top-right, bottom-right, bottom-left.

    Args:
        layout: Solved layout
        hole_diameter: Hole diameter in document units

    Returns:
        Four Circle shapes
    """
    radius = hole_diameter / 2.0
    inset = layout.margin / 2.0 + radius

    x_left = inset
    x_right = layout.document_width - inset
    y_top = inset
    y_bottom = layout.document_height - inset

    return [
        Circle(center=Point(x, y), radius=radius)
        for x, y in (
            (x_left, y_top),
            (x_right, y_top),
            (x_right, y_bottom),
            (x_left, y_bottom),
        )
    ]


def generate_markers(glyph: Glyph, layout: Layout) -> list[Shape]:
    """Center a marker glyph on the middle of each panel edge.

    The scaled bounding box of the glyph is centered, in both axes, on the
    edge midpoint, halfway into the margin. Order: top, right, bottom, left.

    Args:
        glyph: Marker glyph
        layout: Solved layout

    Returns:
        Four Path shapes
    """
    scale = layout.scale
    half_margin = layout.margin / 2.0
    width = layout.document_width
    height = layout.document_height

    midpoints = (
        (width / 2.0, half_margin),
        (width - half_margin, height / 2.0),
        (width / 2.0, height - half_margin),
        (half_margin, height / 2.0),
    )
    offset_x = glyph.bbox.center_x * scale
    offset_y = glyph.bbox.center_y * scale

    return [
        Path(outline=glyph.outline, anchor=Point(mx - offset_x, my + offset_y))
        for mx, my in midpoints
    ]


def generate_grid(
    metrics: FontMetrics,
    layout: Layout,
    grid: Sequence[str],
    draw_bounding_boxes: bool = False,
) -> list[Shape]:
    """Place the letters of the grid over the LED array.

    Columns follow the LED pitch and the columns block is centered in the
    letter square. Rows divide the square height evenly. Within its cell, a
    letter is centered horizontally on its own bounding box, and the band
    from the baseline to the tallest letter is centered vertically so that
    all letters of a row share a baseline.

    Args:
        metrics: Font metrics holding the glyphs
        layout: Solved layout
        grid: Rows of the grid, one character per cell
        draw_bounding_boxes: Draw each glyph bounding box instead of the glyph

    Returns:
        Path shapes in row-major order

    Raises:
        MissingGlyphError: If a grid character has no glyph
    """
    scale = layout.scale
    pitch = layout.led_pitch
    row_pitch = layout.row_pitch

    base_x = layout.margin + (layout.square_width - (layout.columns - 1) * pitch) / 2.0
    base_y = layout.margin + row_pitch / 2.0
    baseline_offset = metrics.y_max / 2.0 * scale

    shapes: list[Shape] = []
    for row_index, row in enumerate(grid):
        cell_y = base_y + row_index * row_pitch
        for col_index, char in enumerate(row):
            glyph = metrics.get(char)
            cell_x = base_x + col_index * pitch
            anchor = Point(cell_x - glyph.bbox.center_x * scale, cell_y + baseline_offset)
            outline = glyph.bbox.to_outline() if draw_bounding_boxes else glyph.outline
            shapes.append(Path(outline=outline, anchor=anchor))
    return shapes


class CoverComposer:
    """Builds the Cover of a panel from font metrics and a solved layout.

    Example:
        composer = CoverComposer(metrics, layout, FRENCH_GRID, hole_diameter=3.3, marker="⚘")
        cover = composer.compose()
    """

    def __init__(
        self,
        metrics: FontMetrics,
        layout: Layout,
        grid: Sequence[str],
        hole_diameter: float,
        marker: str,
        draw_bounding_boxes: bool = False,
    ) -> None:
        """Initialize the composer.

        Args:
            metrics: Font metrics holding the glyphs
            layout: Layout solved for this grid
            grid: Rows of the grid, one character per cell
            hole_diameter: Mounting hole diameter in document units
            marker: Character drawn on each panel edge
            draw_bounding_boxes: Draw glyph bounding boxes instead of letters

        Raises:
            DegenerateLayoutError: If the grid does not match the layout
        """
        rows = tuple(grid)
        if len(rows) != layout.rows or any(len(row) != layout.columns for row in rows):
            raise DegenerateLayoutError(
                f"grid is not {layout.rows} rows of {layout.columns} cells"
            )
        self._metrics = metrics
        self._layout = layout
        self._grid = rows
        self._hole_diameter = hole_diameter
        self._marker = marker
        self._draw_bounding_boxes = draw_bounding_boxes

    def compose(self) -> Cover:
        """Compose the ordered shape list.

        Every glyph is resolved before any shape is built, so a missing glyph
        fails the whole composition.

        Returns:
            The finished Cover

        Raises:
            MissingGlyphError: If the marker or a grid character has no glyph
        """
        marker = self._metrics.get(self._marker)
        for row in self._grid:
            for char in row:
                self._metrics.get(char)

        shapes: list[Shape] = []
        shapes.extend(generate_holes(self._layout, self._hole_diameter))
        shapes.extend(generate_markers(marker, self._layout))
        shapes.extend(
            generate_grid(
                self._metrics,
                self._layout,
                self._grid,
                draw_bounding_boxes=self._draw_bounding_boxes,
            )
        )

        logger.info(
            "Shapes composed",
            shapes=len(shapes),
            width=round(self._layout.document_width, 4),
            height=round(self._layout.document_height, 4),
        )
        return Cover(
            scale=self._layout.scale,
            shapes=tuple(shapes),
            width=self._layout.document_width,
            height=self._layout.document_height,
        )
