"""Exception hierarchy for gen-front."""


class GenFrontError(Exception):
    """Base exception for all gen-front errors."""

    pass


class FontError(GenFrontError):
    """Errors related to font loading or glyph lookup."""

    pass


class FontParseError(FontError):
    """The font binary is malformed or cannot be parsed."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to parse font '{source}': {reason}")


class MissingGlyphError(FontError):
    """A requested character has no extracted glyph."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"No glyph for character {char!r} (U+{ord(char):04X})")


class LayoutError(GenFrontError):
    """Errors in layout calculations."""

    pass


class DegenerateLayoutError(LayoutError):
    """The layout solver preconditions do not hold."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Degenerate layout: {reason}")


class ExportError(GenFrontError):
    """Errors related to document export."""

    pass


class UnsupportedOutputFormatError(ExportError):
    """The requested output format is not known."""

    def __init__(self, fmt: object) -> None:
        self.format = fmt
        super().__init__(f"Unsupported output format: {fmt!r}")
