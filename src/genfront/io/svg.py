"""SVG export of a front panel.

SVG applies affine transforms itself, so glyph outlines are written in font
units and each path carries a single matrix mapping them onto the panel:
scale, vertical flip (font Y goes up, SVG Y goes down) and translation to
the anchor.
"""

from io import StringIO
from typing import TextIO, assert_never

import structlog
import svgwrite
from fontTools.pens.svgPathPen import SVGPathPen

from genfront.domain import (
    Circle,
    ClosePath,
    Cover,
    CubicTo,
    LineTo,
    MoveTo,
    Outline,
    Path,
    QuadTo,
)

logger = structlog.get_logger(__name__)


def _ntos(value: float) -> str:
    """Format a number without a useless trailing '.0'."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def outline_to_svg_path(outline: Outline) -> str:
    """Serialize an outline to SVG path data, coordinates unchanged.

    SVGPathPen writes horizontal and vertical lines as H and V, which
    describe the same points as L.

    Args:
        outline: Drawing commands in font units

    Returns:
        The path "d" attribute
    """
    pen = SVGPathPen(None, ntos=_ntos)
    for command in outline:
        match command:
            case MoveTo(pt):
                pen.moveTo(pt.to_tuple())
            case LineTo(pt):
                pen.lineTo(pt.to_tuple())
            case QuadTo(ctrl, pt):
                pen.qCurveTo(ctrl.to_tuple(), pt.to_tuple())
            case CubicTo(ctrl1, ctrl2, pt):
                pen.curveTo(ctrl1.to_tuple(), ctrl2.to_tuple(), pt.to_tuple())
            case ClosePath():
                pen.closePath()
            case _:
                assert_never(command)
    return pen.getCommands()


class SvgExporter:
    """Renders a Cover as a standalone SVG document.

    The document size is given in millimeters and the viewBox matches the
    document size, so one user unit is one millimeter.

    Example:
        with open("cover.svg", "w", encoding="utf-8") as sink:
            SvgExporter().export(cover, sink)
    """

    def __init__(self, stroke: str = "black", stroke_width: float = 0.1) -> None:
        """Initialize the exporter.

        Args:
            stroke: Stroke color of every cut line
            stroke_width: Stroke width in millimeters
        """
        self._stroke = stroke
        self._stroke_width = stroke_width

    def render(self, cover: Cover) -> str:
        """Render the whole document in memory.

        Args:
            cover: The panel to render

        Returns:
            The SVG document text
        """
        dwg = svgwrite.Drawing(
            size=(f"{_ntos(cover.width)}mm", f"{_ntos(cover.height)}mm"),
            viewBox=f"0 0 {_ntos(cover.width)} {_ntos(cover.height)}",
            profile="full",
            debug=False,
        )
        group = dwg.g(
            id="cover",
            fill="none",
            stroke=self._stroke,
            stroke_width=_ntos(self._stroke_width),
        )

        for shape in cover.shapes:
            match shape:
                case Circle(center, radius):
                    group.add(
                        dwg.circle(
                            center=(_ntos(center.x), _ntos(center.y)),
                            r=_ntos(radius),
                        )
                    )
                case Path(outline, anchor):
                    path = dwg.path(d=outline_to_svg_path(outline))
                    path.matrix(
                        _ntos(cover.scale),
                        0,
                        0,
                        _ntos(-cover.scale),
                        _ntos(anchor.x),
                        _ntos(anchor.y),
                    )
                    group.add(path)
                case _:
                    assert_never(shape)

        dwg.add(group)

        buffer = StringIO()
        dwg.write(buffer, pretty=True, indent=2)
        return buffer.getvalue()

    def export(self, cover: Cover, sink: TextIO) -> None:
        """Write the document to a text sink with a single write.

        Args:
            cover: The panel to export
            sink: Text stream receiving the document
        """
        document = self.render(cover)
        sink.write(document)
        logger.info("SVG exported", shapes=len(cover.shapes), chars=len(document))
