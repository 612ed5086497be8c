"""Shared fixtures: a small TrueType font built in memory.

Letters are 500x700 rectangles, except:
- I: a narrow 200x700 rectangle
- O: a 500x700 lozenge drawn with quadratic curves
- hyphen: a 400x100 bar
- marker (U+2698): a 600x600 diamond below and above the baseline
"""

from collections.abc import Callable, Iterable
from io import BytesIO

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from genfront.config import FLOWER
from genfront.domain import (
    BoundingBox,
    ClosePath,
    FontMetrics,
    Glyph,
    LineTo,
    MoveTo,
    Point,
    QuadTo,
)

UPM = 1000
ASCENT = 800
DESCENT = -200
LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ-"


def _rectangle(pen: TTGlyphPen, x_min: int, y_min: int, x_max: int, y_max: int) -> None:
    pen.moveTo((x_min, y_min))
    pen.lineTo((x_min, y_max))
    pen.lineTo((x_max, y_max))
    pen.lineTo((x_max, y_min))
    pen.closePath()


def _draw(pen: TTGlyphPen, char: str) -> None:
    if char == "I":
        _rectangle(pen, 200, 0, 400, 700)
    elif char == "O":
        pen.moveTo((300, 0))
        pen.qCurveTo((550, 0), (550, 350))
        pen.qCurveTo((550, 700), (300, 700))
        pen.qCurveTo((50, 700), (50, 350))
        pen.qCurveTo((50, 0), (300, 0))
        pen.closePath()
    elif char == "-":
        _rectangle(pen, 100, 300, 500, 400)
    elif char == FLOWER:
        pen.moveTo((300, -100))
        pen.lineTo((0, 200))
        pen.lineTo((300, 500))
        pen.lineTo((600, 200))
        pen.closePath()
    else:
        _rectangle(pen, 50, 0, 550, 700)


def _x_min(glyph) -> int:
    coordinates = getattr(glyph, "coordinates", None)
    if not coordinates:
        return 0
    return min(int(x) for x, _ in coordinates)


def build_font(
    chars: Iterable[str] = (*LETTERS, FLOWER),
    empty: Iterable[str] = (),
) -> bytes:
    """Build a TrueType font mapping the given characters.

    Args:
        chars: Characters to include
        empty: Characters mapped to a glyph without outline

    Returns:
        The font binary
    """
    chars = list(chars)
    empty = set(empty)
    names = {char: f"uni{ord(char):04X}" for char in chars}

    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder([".notdef", *names.values()])
    fb.setupCharacterMap({ord(char): name for char, name in names.items()})

    glyphs = {".notdef": TTGlyphPen(None).glyph()}
    for char, name in names.items():
        pen = TTGlyphPen(None)
        if char not in empty:
            _draw(pen, char)
        glyphs[name] = pen.glyph()
    fb.setupGlyf(glyphs)

    # Left side bearing must equal xMin or fontTools shifts the drawn outline
    fb.setupHorizontalMetrics({name: (600, _x_min(glyph)) for name, glyph in glyphs.items()})
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupNameTable({"familyName": "GenFront Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=ASCENT, sTypoDescender=DESCENT, usWinAscent=ASCENT, usWinDescent=-DESCENT)
    fb.setupPost()

    buffer = BytesIO()
    fb.save(buffer)
    return buffer.getvalue()


@pytest.fixture(scope="session")
def font_bytes() -> bytes:
    """Font covering A-Z, hyphen and the marker."""
    return build_font()


@pytest.fixture
def font_factory() -> Callable[..., bytes]:
    """Build fonts with custom coverage."""
    return build_font


def _square(size: int) -> Glyph:
    return Glyph(
        char="X",
        outline=(
            MoveTo(Point(0, 0)),
            LineTo(Point(0, size)),
            LineTo(Point(size, size)),
            LineTo(Point(size, 0)),
            ClosePath(),
        ),
        bbox=BoundingBox(0, 0, size, size),
    )


@pytest.fixture
def simple_metrics() -> FontMetrics:
    """Hand-built metrics: 'A' and 'B' are 500x700 boxes, '*' a diamond marker."""
    letter = Glyph(
        char="A",
        outline=(
            MoveTo(Point(50, 0)),
            LineTo(Point(50, 700)),
            QuadTo(Point(300, 800), Point(550, 700)),
            LineTo(Point(550, 0)),
            ClosePath(),
        ),
        bbox=BoundingBox(50, 0, 550, 800),
    )
    narrow = Glyph(
        char="B",
        outline=(
            MoveTo(Point(200, 0)),
            LineTo(Point(200, 700)),
            LineTo(Point(400, 700)),
            LineTo(Point(400, 0)),
            ClosePath(),
        ),
        bbox=BoundingBox(200, 0, 400, 700),
    )
    marker = Glyph(
        char="*",
        outline=(
            MoveTo(Point(300, -100)),
            LineTo(Point(0, 200)),
            LineTo(Point(300, 500)),
            LineTo(Point(600, 200)),
            ClosePath(),
        ),
        bbox=BoundingBox(0, -100, 600, 500),
    )
    return FontMetrics(
        ascender=ASCENT,
        descender=DESCENT,
        y_max=800,
        glyph_width_avg=350.0,
        glyphs={"A": letter, "B": narrow, "*": marker, "X": _square(400)},
        units_per_em=UPM,
    )
