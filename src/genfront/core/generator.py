"""Front panel generation pipeline.

This module chains the stages of a run: font analysis, layout solving,
shape composition and export. Each stage hands an immutable value to the
next one, and every analysis or composition error is raised before the
output file is opened.
"""

import time
from pathlib import Path

import structlog

from genfront.config import FrontPanelSettings, OutputFormat
from genfront.core.composer import CoverComposer
from genfront.core.layout import Layout, layout_for_metrics
from genfront.domain import Cover, FontMetrics
from genfront.io import analyze_font, write_cover
from genfront.utils import GenerationStats, configure_logging


class FrontPanelGenerator:
    """Orchestrates the generation of a front panel.

    Manages the complete workflow:
    1. Parse the font and extract the analyzed glyphs
    2. Solve the layout for the configured grid
    3. Compose the ordered shape list
    4. Export the cover in the requested format

    Example:
        generator = FrontPanelGenerator(FrontPanelSettings())
        stats = generator.generate(
            font_data=Path("Siruca.ttf").read_bytes(),
            output_path=Path("cover.svg"),
        )
    """

    def __init__(self, config: FrontPanelSettings, setup_logging: bool = False) -> None:
        """Initialize the generator with configuration.

        Args:
            config: Front panel settings
            setup_logging: Configure logging handlers from config.logging
        """
        self.config = config
        if setup_logging:
            self.logger = configure_logging(
                log_file=config.logging.log_file,
                console_level=config.logging.log_level,
                file_level=config.logging.file_log_level,
                quiet=config.logging.quiet,
            )
        else:
            self.logger = structlog.get_logger(__name__)

    def analyze(self, font_data: bytes, source: str = "<bytes>") -> FontMetrics:
        """Extract glyphs and metrics from a font binary.

        Raises:
            FontParseError: If the font cannot be parsed
        """
        return analyze_font(font_data, marker=self.config.font.marker, source=source)

    def solve(self, metrics: FontMetrics) -> Layout:
        """Solve the layout of the configured grid for a font.

        Raises:
            DegenerateLayoutError: If the layout has no usable solution
        """
        rows = self.config.grid.rows()
        return layout_for_metrics(
            metrics,
            rows=len(rows),
            columns=len(rows[0]),
            led_pitch=self.config.panel.led_pitch,
            margin=self.config.panel.margin,
        )

    def compose(self, metrics: FontMetrics, layout: Layout) -> Cover:
        """Compose the shape list of the panel.

        Raises:
            MissingGlyphError: If a needed character has no glyph
        """
        composer = CoverComposer(
            metrics,
            layout,
            self.config.grid.rows(),
            hole_diameter=self.config.panel.hole_diameter,
            marker=self.config.font.marker,
            draw_bounding_boxes=self.config.export.draw_bounding_boxes,
        )
        return composer.compose()

    def build_cover(self, font_data: bytes, source: str = "<bytes>") -> Cover:
        """Run analysis, layout and composition.

        Args:
            font_data: Raw font file bytes
            source: Name of the font used in messages

        Returns:
            The finished Cover
        """
        metrics = self.analyze(font_data, source=source)
        layout = self.solve(metrics)
        return self.compose(metrics, layout)

    def generate(
        self,
        font_data: bytes,
        output_path: Path,
        fmt: "OutputFormat | str | None" = None,
        source: str = "<bytes>",
    ) -> GenerationStats:
        """Generate the panel and write it to a file.

        The output format is resolved first, so an unknown format fails
        before any work is done and no file is created.

        Args:
            font_data: Raw font file bytes
            output_path: Destination file
            fmt: Output format (config.export.format if None)
            source: Name of the font used in messages

        Returns:
            Statistics of the run

        Raises:
            UnsupportedOutputFormatError: If the format is unknown
            FontParseError: If the font cannot be parsed
            DegenerateLayoutError: If the layout has no usable solution
            MissingGlyphError: If a needed character has no glyph
            OSError: If the output file cannot be written
        """
        stats = GenerationStats(start_time=time.time())
        output_format = OutputFormat.parse(fmt if fmt is not None else self.config.export.format)

        metrics = self.analyze(font_data, source=source)
        layout = self.solve(metrics)
        cover = self.compose(metrics, layout)

        stats.output_bytes = write_cover(cover, output_path, output_format, self.config.export)
        stats.glyph_count = len(metrics.glyphs)
        stats.shape_count = len(cover.shapes)
        stats.document_width = cover.width
        stats.document_height = cover.height
        stats.end_time = time.time()

        self.logger.info(
            "Front panel generated",
            output=str(output_path),
            format=output_format.value,
            shapes=stats.shape_count,
            duration_s=round(stats.duration_seconds, 3),
        )
        return stats
