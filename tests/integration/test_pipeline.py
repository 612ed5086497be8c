"""End-to-end tests that generate panels and verify the written files."""

import io
import math
import xml.etree.ElementTree as ET
from unittest.mock import Mock, patch

import ezdxf
import pytest

from genfront.config import (
    FLOWER,
    ExportConfig,
    FrontPanelSettings,
    GridConfig,
    GridContent,
    LoggingConfig,
    OutputFormat,
)
from genfront.core import FrontPanelGenerator
from genfront.domain import Circle, Path
from genfront.exceptions import (
    FontParseError,
    MissingGlyphError,
    UnsupportedOutputFormatError,
)

SVG_NS = "{http://www.w3.org/2000/svg}"


@pytest.fixture
def generator():
    """Generator with default settings."""
    return FrontPanelGenerator(FrontPanelSettings())


class TestFrontPanelGenerator:
    """Tests for FrontPanelGenerator setup."""

    def test_logging_settings_forwarded(self, tmp_path):
        """Test logging setup receives the configured levels and quiet flag."""
        log_file = tmp_path / "run.log"
        settings = FrontPanelSettings(
            logging=LoggingConfig(log_file=log_file, log_level="ERROR", quiet=True)
        )

        with patch("genfront.core.generator.configure_logging") as mock_logging:
            mock_logging.return_value = Mock()
            generator = FrontPanelGenerator(settings, setup_logging=True)

        assert generator.logger is mock_logging.return_value
        mock_logging.assert_called_once_with(
            log_file=log_file,
            console_level="ERROR",
            file_level="DEBUG",
            quiet=True,
        )

    def test_logging_setup_optional(self):
        """Test no handlers are configured unless asked."""
        with patch("genfront.core.generator.configure_logging") as mock_logging:
            FrontPanelGenerator(FrontPanelSettings())
        mock_logging.assert_not_called()


class TestBuildCover:
    """Tests for the analysis, layout and composition stages together."""

    def test_shape_count(self, generator, font_bytes):
        """Test 4 holes, 4 markers and one shape per grid cell."""
        cover = generator.build_cover(font_bytes)

        assert len(cover.shapes) == 4 + 4 + 110
        assert all(isinstance(shape, Circle) for shape in cover.shapes[:4])
        assert all(isinstance(shape, Path) for shape in cover.shapes[4:])

    def test_square_panel(self, generator, font_bytes):
        """Test the panel is square for the 11x10 grid."""
        cover = generator.build_cover(font_bytes)
        assert math.isclose(cover.width, cover.height, abs_tol=1e-9)

    def test_letters_fit_pitch(self, generator, font_bytes):
        """Test the solved letters are narrower than the LED pitch."""
        metrics = generator.analyze(font_bytes)
        layout = generator.solve(metrics)

        assert metrics.aspect_ratio == pytest.approx(700 / ((25 * 500 + 200 + 400) / 27))
        assert 0 < layout.letter_width < 17.0

    def test_english_grid(self, font_bytes):
        """Test the English grid composes with the same font."""
        settings = FrontPanelSettings(grid=GridConfig(content=GridContent.ENGLISH))
        cover = FrontPanelGenerator(settings).build_cover(font_bytes)
        assert len(cover.shapes) == 118

    def test_bounding_boxes(self, font_bytes):
        """Test bounding box mode keeps the shape count."""
        settings = FrontPanelSettings(export=ExportConfig(draw_bounding_boxes=True))
        cover = FrontPanelGenerator(settings).build_cover(font_bytes)
        assert len(cover.shapes) == 118

    def test_missing_grid_letter(self, generator, font_factory):
        """Test a font lacking a grid letter fails composition."""
        # ONZE needs a Z
        data = font_factory(chars=[*"ABCDEFGHIJKLMNOPQRSTUVWXY-", FLOWER])

        with pytest.raises(MissingGlyphError) as exc_info:
            generator.build_cover(data)
        assert exc_info.value.char == "Z"


class TestGenerate:
    """Tests for FrontPanelGenerator.generate."""

    def test_svg_output(self, tmp_path, generator, font_bytes):
        """Test the SVG file and the run statistics."""
        output = tmp_path / "cover.svg"
        stats = generator.generate(font_bytes, output)

        root = ET.fromstring(output.read_bytes())
        assert len(root.findall(f"{SVG_NS}g/{SVG_NS}circle")) == 4
        assert len(root.findall(f"{SVG_NS}g/{SVG_NS}path")) == 114
        assert stats.shape_count == 118
        assert stats.output_bytes == output.stat().st_size
        assert stats.glyph_count == 28

    def test_dxf_output(self, tmp_path, generator, font_bytes):
        """Test the DXF file has the panel outline, holes and contours."""
        output = tmp_path / "cover.dxf"
        generator.generate(font_bytes, output, fmt=OutputFormat.DXF)

        doc = ezdxf.read(io.StringIO(output.read_text(encoding="utf-8")))
        msp = doc.modelspace()
        assert len(msp.query("LINE")) == 4
        assert len(msp.query("CIRCLE")) == 4
        # One contour per glyph in the test font
        assert len(msp.query("SPLINE")) == 114

    @pytest.mark.parametrize("fmt", ["svg", "dxf"])
    def test_byte_identical_runs(self, tmp_path, generator, font_bytes, fmt):
        """Test two runs over the same inputs write identical files."""
        first = tmp_path / f"first.{fmt}"
        second = tmp_path / f"second.{fmt}"

        generator.generate(font_bytes, first, fmt=fmt)
        generator.generate(font_bytes, second, fmt=fmt)

        assert first.read_bytes() == second.read_bytes()

    def test_unsupported_format(self, tmp_path, generator, font_bytes):
        """Test an unknown format fails without creating the file."""
        output = tmp_path / "cover.svg"
        with pytest.raises(UnsupportedOutputFormatError):
            generator.generate(font_bytes, output, fmt="png")
        assert not output.exists()

    def test_invalid_font(self, tmp_path, generator):
        """Test an unparsable font fails without creating the file."""
        output = tmp_path / "cover.svg"
        with pytest.raises(FontParseError):
            generator.generate(b"\x00\x01\x00\x00garbage", output)
        assert not output.exists()

    def test_missing_marker(self, tmp_path, generator, font_factory):
        """Test a font without the marker fails without creating the file."""
        output = tmp_path / "cover.svg"
        data = font_factory(chars="ABCDEFGHIJKLMNOPQRSTUVWXYZ-")

        with pytest.raises(MissingGlyphError):
            generator.generate(data, output)
        assert not output.exists()
