"""Glyph representation and font metrics.

This module defines the glyph domain model, which holds the outline and
bounding box of a single character, and the metrics aggregated over the
analyzed character set of a font.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from genfront.domain.outline import BoundingBox, Outline
from genfront.exceptions import MissingGlyphError


@dataclass(frozen=True, slots=True)
class Glyph:
    """Outline and bounding box of one character.

    Attributes:
        char: The character this glyph renders
        outline: Typed drawing commands in font design units
        bbox: Bounding box in font design units
    """

    char: str
    outline: Outline
    bbox: BoundingBox

    def is_empty(self) -> bool:
        """Check if glyph has no outline.

        Returns:
            True if glyph has no drawing commands, False otherwise
        """
        return len(self.outline) == 0


@dataclass(frozen=True)
class FontMetrics:
    """Metrics aggregated over the analyzed character set.

    Attributes:
        ascender: Font ascender in font units
        descender: Font descender in font units (usually negative)
        y_max: Highest bounding-box top among the analyzed letters
        glyph_width_avg: Mean bounding-box width of the analyzed letters
        glyphs: Read-only mapping from character to Glyph
        units_per_em: Resolution of the font coordinate system
    """

    ascender: int
    descender: int
    y_max: int
    glyph_width_avg: float
    glyphs: Mapping[str, Glyph] = field(default_factory=dict)
    units_per_em: int = 1000

    def __post_init__(self) -> None:
        object.__setattr__(self, "glyphs", MappingProxyType(dict(self.glyphs)))

    @property
    def aspect_ratio(self) -> float:
        """Ratio of the maximum letter height to the average letter width.

        Returns:
            k = y_max / glyph_width_avg, or 0.0 when no width is known
        """
        if self.glyph_width_avg <= 0:
            return 0.0
        return self.y_max / self.glyph_width_avg

    def get(self, char: str) -> Glyph:
        """Get the glyph of a character.

        Args:
            char: Character to look up

        Returns:
            The extracted Glyph

        Raises:
            MissingGlyphError: If the character was not extracted
        """
        try:
            return self.glyphs[char]
        except KeyError:
            raise MissingGlyphError(char) from None

    def __contains__(self, char: object) -> bool:
        return char in self.glyphs
