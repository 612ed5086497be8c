"""Font reader for analyzing TTF/OTF fonts.

This module provides the FontReader class for parsing a font binary and
extracting the glyph outlines and metrics the panel layout depends on.
"""

import string
from io import BytesIO

import structlog
from fontTools.ttLib import TTFont

from genfront.domain.glyph import FontMetrics, Glyph
from genfront.exceptions import FontParseError
from genfront.io.converter import empty_glyph, fonttools_glyph_to_domain

logger = structlog.get_logger(__name__)

# Characters whose metrics drive the layout
LETTERS: tuple[str, ...] = (*string.ascii_uppercase, "-")


class FontReader:
    """Parses a font binary and extracts glyph data.

    Example:
        with FontReader(Path("Siruca.ttf").read_bytes()) as reader:
            metrics = reader.analyze(marker="⚘")
    """

    def __init__(self, data: bytes, source: str = "<bytes>") -> None:
        """Initialize the font reader.

        Args:
            data: Raw font file bytes
            source: Name of the font used in messages (usually its path)
        """
        self._data = data
        self._source = source
        self._font: TTFont | None = None
        self._cmap: dict[int, str] = {}

    def load(self) -> None:
        """Parse the font binary.

        The tables needed for analysis are decompiled right away so that
        a corrupt font fails here rather than halfway through the analysis.

        Raises:
            FontParseError: If the font cannot be parsed
        """
        try:
            font = TTFont(BytesIO(self._data), lazy=False)
            _ = font["head"].unitsPerEm
            _ = font["hhea"].ascent
            cmap = font.getBestCmap()
        except Exception as e:
            raise FontParseError(self._source, str(e) or type(e).__name__) from e

        if cmap is None:
            raise FontParseError(self._source, "no Unicode character map")

        self._font = font
        self._cmap = dict(cmap)
        logger.debug(
            "Font loaded",
            source=self._source,
            glyphs=font["maxp"].numGlyphs if "maxp" in font else None,
            upm=self.units_per_em,
        )

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        return self._font["head"].unitsPerEm  # type: ignore[attr-defined]

    def get_glyph(self, char: str) -> Glyph | None:
        """Extract the glyph of a character.

        A glyph whose outline cannot be drawn degrades to an empty glyph with
        a zero bounding box instead of aborting the analysis.

        Args:
            char: Character to look up

        Returns:
            Glyph domain model, or None if the font does not map the character

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        glyph_name = self._cmap.get(ord(char))
        if glyph_name is None:
            return None

        glyph_set = self._font.getGlyphSet()
        try:
            return fonttools_glyph_to_domain(char, glyph_set[glyph_name], glyph_set)
        except Exception as e:
            logger.warning(
                "Glyph outline unreadable, using empty outline",
                char=char,
                glyph=glyph_name,
                error=str(e),
                error_type=type(e).__name__,
            )
            return empty_glyph(char)

    def analyze(self, marker: str) -> FontMetrics:
        """Extract the analyzed character set and aggregate its metrics.

        The letters (A-Z and hyphen) contribute to y_max and to the average
        width. The marker glyph is extracted too but does not count.

        Args:
            marker: Character drawn on the panel edges

        Returns:
            FontMetrics of the font

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        glyphs: dict[str, Glyph] = {}
        y_max: int | None = None
        width_sum = 0
        letter_count = 0

        for char in LETTERS:
            glyph = self.get_glyph(char)
            if glyph is None:
                logger.debug("Character not in font", char=char)
                continue
            if glyph.is_empty():
                logger.debug("Letter has no outline, counted with zero width", char=char)
            glyphs[char] = glyph
            y_max = glyph.bbox.y_max if y_max is None else max(y_max, glyph.bbox.y_max)
            width_sum += glyph.bbox.width
            letter_count += 1

        if marker not in glyphs:
            glyph = self.get_glyph(marker)
            if glyph is None:
                logger.warning("Marker character not in font", char=marker)
            else:
                glyphs[marker] = glyph

        hhea = self._font["hhea"]
        metrics = FontMetrics(
            ascender=hhea.ascent,  # type: ignore[attr-defined]
            descender=hhea.descent,  # type: ignore[attr-defined]
            y_max=y_max if y_max is not None else 0,
            glyph_width_avg=width_sum / letter_count if letter_count else 0.0,
            glyphs=glyphs,
            units_per_em=self.units_per_em,
        )
        logger.info(
            "Font analyzed",
            source=self._source,
            letters=letter_count,
            y_max=metrics.y_max,
            glyph_width_avg=round(metrics.glyph_width_avg, 3),
            ascender=metrics.ascender,
            descender=metrics.descender,
        )
        return metrics

    def close(self) -> None:
        """Close the font and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()


def analyze_font(data: bytes, marker: str, source: str = "<bytes>") -> FontMetrics:
    """Parse a font binary and return its metrics.

    Args:
        data: Raw font file bytes
        marker: Character drawn on the panel edges
        source: Name of the font used in messages

    Returns:
        FontMetrics of the font

    Raises:
        FontParseError: If the font cannot be parsed
    """
    with FontReader(data, source=source) as reader:
        return reader.analyze(marker)
