"""Closed-form layout solver.

Finds the letter size and spacing that make the letter grid visually square,
given the fixed pitch of the LED array behind the panel.

Variables:
- l: width of a letter
- h: height of a letter, h = k * l
- d: LED pitch (center-to-center distance of two adjacent LEDs)
- k: letter aspect ratio, k = y_max / glyph_width_avg
- H, W: number of rows and columns of the grid

The horizontal gap between letters is s = d - l, so that letters stay on
the LED pitch. The vertical gap is v = s / k, keeping gaps in proportion
with the letterforms.

    SqW = W * l + (W - 1) * (d - l)
        = W * d - d + l
    SqH = H * k * l + (H - 1) * (d - l) / k
        = l * (H * k - (H - 1) / k) + (H - 1) * d / k

Setting SqW = SqH and isolating l:

    l = d * (W - 1 - (H - 1) / k) / (H * k - (H - 1) / k - 1)
"""

import math
from dataclasses import dataclass

import structlog

from genfront.domain.glyph import FontMetrics
from genfront.exceptions import DegenerateLayoutError

logger = structlog.get_logger(__name__)

DENOMINATOR_EPSILON = 1e-12


@dataclass(frozen=True, slots=True)
class Layout:
    """Solved panel layout, in document units (millimeters).

    Attributes:
        letter_width: Width l of a letter
        letter_height: Height k * l of a letter
        horizontal_spacing: Gap between two letters of a row
        vertical_spacing: Gap between two rows
        square_width: Width of the letter grid
        square_height: Height of the letter grid, equal to square_width
        document_width: Panel width including margins
        document_height: Panel height including margins
        scale: Font units to document units factor
        rows: Number of grid rows
        columns: Number of grid columns
        led_pitch: LED center-to-center distance
        margin: Border around the grid
    """

    letter_width: float
    letter_height: float
    horizontal_spacing: float
    vertical_spacing: float
    square_width: float
    square_height: float
    document_width: float
    document_height: float
    scale: float
    rows: int
    columns: int
    led_pitch: float
    margin: float

    @property
    def row_pitch(self) -> float:
        """Center-to-center distance of two adjacent rows."""
        return self.square_height / self.rows


def solve_layout(
    aspect_ratio: float,
    y_max: float,
    rows: int,
    columns: int,
    led_pitch: float,
    margin: float,
) -> Layout:
    """Solve the letter size so that the letter grid is square.

    Args:
        aspect_ratio: Letter aspect ratio k (height / width)
        y_max: Maximum letter height in font units
        rows: Number of grid rows (H)
        columns: Number of grid columns (W)
        led_pitch: LED center-to-center distance (d)
        margin: Border around the grid

    Returns:
        The solved Layout

    Raises:
        DegenerateLayoutError: If the system has no usable solution
    """
    k = aspect_ratio
    d = led_pitch
    H = rows  # noqa: N806
    W = columns  # noqa: N806

    logger.debug("Solving layout", k=k, d=d, rows=H, columns=W, margin=margin)

    if not (math.isfinite(k) and k > 0.0):
        raise DegenerateLayoutError(f"letter aspect ratio must be > 0, got {k}")
    if H <= 1:
        raise DegenerateLayoutError(f"grid needs more than one row, got {H}")
    if W <= 1:
        raise DegenerateLayoutError(f"grid needs more than one column, got {W}")
    if y_max <= 0:
        raise DegenerateLayoutError(f"maximum letter height must be > 0, got {y_max}")
    if d <= 0:
        raise DegenerateLayoutError(f"LED pitch must be > 0, got {d}")

    denominator = H * k - (H - 1) / k - 1
    if abs(denominator) < DENOMINATOR_EPSILON:
        raise DegenerateLayoutError(
            f"zero denominator for k={k}, rows={H}, columns={W}"
        )

    numerator = d * (W - 1 - (H - 1) / k)
    letter_width = numerator / denominator
    letter_height = letter_width * k
    hspace = d - letter_width
    vspace = hspace / k

    if letter_width <= 0:
        raise DegenerateLayoutError(f"letter width must be > 0, got {letter_width}")
    if hspace <= 0:
        raise DegenerateLayoutError(
            f"letters wider than the LED pitch ({letter_width} >= {d})"
        )

    square_width = W * letter_width + (W - 1) * hspace
    square_height = H * letter_height + (H - 1) * vspace

    layout = Layout(
        letter_width=letter_width,
        letter_height=letter_height,
        horizontal_spacing=hspace,
        vertical_spacing=vspace,
        square_width=square_width,
        square_height=square_height,
        document_width=square_width + 2 * margin,
        document_height=square_height + 2 * margin,
        scale=letter_height / y_max,
        rows=H,
        columns=W,
        led_pitch=d,
        margin=margin,
    )

    if not all(math.isfinite(value) for value in (square_width, square_height, layout.scale)):
        raise DegenerateLayoutError("non-finite layout geometry")

    logger.info(
        "Layout solved",
        letter_width=round(letter_width, 4),
        letter_height=round(letter_height, 4),
        hspace=round(hspace, 4),
        vspace=round(vspace, 4),
        width=round(layout.document_width, 4),
        height=round(layout.document_height, 4),
        scale=layout.scale,
    )
    return layout


def layout_for_metrics(
    metrics: FontMetrics,
    rows: int,
    columns: int,
    led_pitch: float,
    margin: float,
) -> Layout:
    """Solve the layout for the letters of an analyzed font."""
    if metrics.glyph_width_avg <= 0:
        raise DegenerateLayoutError("no letter width known, font has no analyzed letters")
    return solve_layout(
        aspect_ratio=metrics.aspect_ratio,
        y_max=metrics.y_max,
        rows=rows,
        columns=columns,
        led_pitch=led_pitch,
        margin=margin,
    )
