"""Output format dispatch and file writing.

This module selects the exporter of an output format and writes a cover to
disk. The document is rendered completely before the file is opened, so a
failing export never leaves a file behind; a failing write may still leave a
truncated one.
"""

from pathlib import Path
from typing import Protocol, TextIO

import structlog

from genfront.config.settings import ExportConfig, OutputFormat
from genfront.domain import Cover
from genfront.exceptions import UnsupportedOutputFormatError
from genfront.io.dxf import DxfExporter
from genfront.io.svg import SvgExporter

logger = structlog.get_logger(__name__)


class CoverExporter(Protocol):
    """Renders a Cover into a standalone document."""

    def render(self, cover: Cover) -> str: ...

    def export(self, cover: Cover, sink: TextIO) -> None: ...


def get_exporter(fmt: "OutputFormat | str", config: ExportConfig | None = None) -> CoverExporter:
    """Get the exporter of an output format.

    Args:
        fmt: Output format, or its name
        config: Export settings (defaults if None)

    Returns:
        Exporter for the format

    Raises:
        UnsupportedOutputFormatError: If the format is unknown
    """
    config = config or ExportConfig()
    output_format = OutputFormat.parse(fmt)

    if output_format is OutputFormat.SVG:
        return SvgExporter(stroke=config.stroke, stroke_width=config.stroke_width)
    if output_format is OutputFormat.DXF:
        return DxfExporter(flatten_tolerance=config.flatten_tolerance)
    raise UnsupportedOutputFormatError(fmt)


def write_cover(
    cover: Cover,
    output_path: Path,
    fmt: "OutputFormat | str",
    config: ExportConfig | None = None,
) -> int:
    """Export a cover to a file.

    Args:
        cover: The panel to export
        output_path: Destination file
        fmt: Output format, or its name
        config: Export settings (defaults if None)

    Returns:
        Number of bytes written

    Raises:
        UnsupportedOutputFormatError: If the format is unknown (no file is created)
        OSError: If the file cannot be written
    """
    exporter = get_exporter(fmt, config)
    document = exporter.render(cover)
    data = document.encode("utf-8")

    with open(output_path, "wb") as sink:
        sink.write(data)

    logger.info("Cover written", path=str(output_path), bytes=len(data))
    return len(data)
