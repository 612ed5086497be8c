"""DXF export of a front panel.

DXF has no transformable path entity, so every glyph point is mapped by hand:
font units to document units (scale, vertical flip, translation to the
anchor), then document units to DXF world coordinates, whose Y axis points
up like the font's.

Each contour becomes one SPLINE of degree 3 whose control points are the
contour vertices and whose knot vector is uniform. Quadratic and cubic
segments contribute their control points as plain vertices: the spline
follows the control polygon, not the original curve. Setting a flatten
tolerance replaces the control points by points sampled on the curves.
"""

from collections.abc import Callable, Iterator
from io import StringIO
from typing import TextIO, assert_never

import ezdxf
import structlog
from ezdxf import units
from ezdxf.math import uniform_knot_vector

from genfront.domain import (
    Circle,
    ClosePath,
    Cover,
    CubicTo,
    LineTo,
    MoveTo,
    Outline,
    Path,
    Point,
    QuadTo,
)
from genfront.io._bezier import flatten_cubic, flatten_quadratic

logger = structlog.get_logger(__name__)

DXF_VERSION = "R2010"
LAYER = "0"
SPLINE_DEGREE = 3


def outline_runs(outline: Outline, flatten_tolerance: float | None = None) -> Iterator[list[Point]]:
    """Walk an outline and yield the vertex run of each contour.

    A closed contour ends with its first vertex repeated. A contour left open
    (a move-to without a close) is yielded as is.

    Args:
        outline: Drawing commands in font units
        flatten_tolerance: Flatten curves to this tolerance (font units)
            instead of using their control points

    Yields:
        Vertex lists in font units
    """
    run: list[Point] = []
    for command in outline:
        match command:
            case MoveTo(pt):
                if run:
                    yield run
                run = [pt]
            case LineTo(pt):
                run.append(pt)
            case QuadTo(ctrl, pt):
                if flatten_tolerance is None or not run:
                    run.extend((ctrl, pt))
                else:
                    run.extend(flatten_quadratic([run[-1], ctrl, pt], flatten_tolerance)[1:])
            case CubicTo(ctrl1, ctrl2, pt):
                if flatten_tolerance is None or not run:
                    run.extend((ctrl1, ctrl2, pt))
                else:
                    run.extend(
                        flatten_cubic([run[-1], ctrl1, ctrl2, pt], flatten_tolerance)[1:]
                    )
            case ClosePath():
                if run:
                    run.append(run[0])
                    yield run
                run = []
            case _:
                assert_never(command)
    if run:
        yield run


class DxfExporter:
    """Renders a Cover as a standalone DXF document in millimeters.

    Example:
        with open("cover.dxf", "w", encoding="utf-8") as sink:
            DxfExporter().export(cover, sink)
    """

    def __init__(self, flatten_tolerance: float | None = None) -> None:
        """Initialize the exporter.

        Args:
            flatten_tolerance: Flatten curves to this tolerance (font units)
                instead of approximating them by their control polygon
        """
        self._flatten_tolerance = flatten_tolerance

    def build(self, cover: Cover) -> "ezdxf.document.Drawing":
        """Build the DXF document of a cover.

        Args:
            cover: The panel to convert

        Returns:
            ezdxf document
        """
        doc = ezdxf.new(DXF_VERSION, units=units.MM)
        doc.header["$INSUNITS"] = units.MM
        doc.header["$MEASUREMENT"] = 1

        msp = doc.modelspace()
        # Saving copies the modelspace extents and limits into the header
        msp.reset_extents((0.0, 0.0, 0.0), (cover.width, cover.height, 0.0))
        msp.reset_limits((0.0, 0.0), (cover.width, cover.height))
        attribs = {"layer": LAYER}
        height = cover.height

        def to_world(x: float, y: float) -> tuple[float, float]:
            return (x, height - y)

        # Cut boundary: the page has no implicit border in DXF
        corners = [
            to_world(0.0, 0.0),
            to_world(cover.width, 0.0),
            to_world(cover.width, cover.height),
            to_world(0.0, cover.height),
        ]
        for start, end in zip(corners, corners[1:] + corners[:1]):
            msp.add_line(start, end, dxfattribs=attribs)

        splines = 0
        for shape in cover.shapes:
            match shape:
                case Circle(center, radius):
                    msp.add_circle(to_world(center.x, center.y), radius, dxfattribs=attribs)
                case Path():
                    splines += self._add_path(msp, cover, shape, to_world)
                case _:
                    assert_never(shape)

        logger.debug("DXF document built", shapes=len(cover.shapes), splines=splines)
        return doc

    def _add_path(
        self,
        msp: "ezdxf.layouts.Modelspace",
        cover: Cover,
        path: Path,
        to_world: Callable[[float, float], tuple[float, float]],
    ) -> int:
        count = 0
        for run in outline_runs(path.outline, self._flatten_tolerance):
            vertices = []
            for point in run:
                doc_point = cover.to_document(path, point)
                vertices.append(to_world(doc_point.x, doc_point.y))

            if len(vertices) <= SPLINE_DEGREE:
                # Too few vertices for a cubic spline
                msp.add_lwpolyline(vertices, dxfattribs={"layer": LAYER})
                continue

            spline = msp.add_spline(dxfattribs={"layer": LAYER})
            spline.dxf.degree = SPLINE_DEGREE
            spline.control_points = vertices
            spline.knots = uniform_knot_vector(len(vertices), SPLINE_DEGREE + 1)
            count += 1
        return count

    def render(self, cover: Cover) -> str:
        """Render the whole document in memory.

        Timestamps and GUIDs are pinned from document creation to the final
        write so that identical covers give identical files.

        Args:
            cover: The panel to render

        Returns:
            The DXF document text
        """
        buffer = StringIO()
        previous = ezdxf.options.write_fixed_meta_data_for_testing
        ezdxf.options.write_fixed_meta_data_for_testing = True
        try:
            doc = self.build(cover)
            doc.write(buffer)
        finally:
            ezdxf.options.write_fixed_meta_data_for_testing = previous
        return buffer.getvalue()

    def export(self, cover: Cover, sink: TextIO) -> None:
        """Write the document to a text sink with a single write.

        Args:
            cover: The panel to export
            sink: Text stream receiving the document
        """
        document = self.render(cover)
        sink.write(document)
        logger.info("DXF exported", shapes=len(cover.shapes), chars=len(document))
