"""Font and document I/O layer for gen-front.

This module handles reading fonts with fonttools and writing the finished
panel as SVG or DXF. It provides a clean abstraction layer between the
third-party libraries and the domain models.

Key responsibilities:
- Parse TTF/OTF fonts and extract glyph outlines and metrics
- Render a Cover as SVG (native transforms) or DXF (manual transforms)
- Select the exporter of an output format and write the file

Key classes:
- FontReader: Parse fonts and extract glyphs
- SvgExporter: SVG backend
- DxfExporter: DXF backend
"""

from genfront.io.dxf import DxfExporter
from genfront.io.reader import FontReader, analyze_font
from genfront.io.svg import SvgExporter
from genfront.io.writer import get_exporter, write_cover

__all__ = [
    "DxfExporter",
    "FontReader",
    "SvgExporter",
    "analyze_font",
    "get_exporter",
    "write_cover",
]
