"""Tests for configuration models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from genfront.config import (
    ENGLISH_GRID,
    FLOWER,
    FRENCH_GRID,
    FrontPanelSettings,
    GridConfig,
    GridContent,
    LoggingConfig,
    OutputFormat,
    PanelConfig,
    get_default_settings,
)
from genfront.exceptions import UnsupportedOutputFormatError


class TestGrids:
    """Tests for the built-in grids."""

    @pytest.mark.parametrize("grid", [FRENCH_GRID, ENGLISH_GRID])
    def test_grid_is_eleven_by_ten(self, grid: tuple[str, ...]) -> None:
        assert len(grid) == 10
        assert all(len(row) == 11 for row in grid)

    @pytest.mark.parametrize("grid", [FRENCH_GRID, ENGLISH_GRID])
    def test_grid_uses_analyzed_characters(self, grid: tuple[str, ...]) -> None:
        allowed = set("ABCDEFGHIJKLMNOPQRSTUVWXYZ-")
        assert set("".join(grid)) <= allowed


class TestGridConfig:
    """Tests for GridConfig."""

    def test_default_is_french(self) -> None:
        assert GridConfig().rows() == FRENCH_GRID

    def test_content_selects_grid(self) -> None:
        assert GridConfig(content=GridContent.ENGLISH).rows() == ENGLISH_GRID

    def test_custom_overrides_content(self) -> None:
        config = GridConfig(content=GridContent.ENGLISH, custom=["AB", "CD"])
        assert config.rows() == ("AB", "CD")

    def test_custom_must_be_rectangular(self) -> None:
        with pytest.raises(ValidationError, match="row 1"):
            GridConfig(custom=["ABC", "AB"])

    @pytest.mark.parametrize("rows", [["AB"], ["A", "B"]])
    def test_custom_needs_two_rows_and_columns(self, rows: list[str]) -> None:
        with pytest.raises(ValidationError):
            GridConfig(custom=rows)


class TestPanelConfig:
    """Tests for PanelConfig."""

    def test_default_pitch(self) -> None:
        assert PanelConfig().led_pitch == 17.0

    def test_rejects_non_positive(self) -> None:
        with pytest.raises(ValidationError):
            PanelConfig(margin=0.0)


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_defaults(self) -> None:
        config = LoggingConfig()
        assert config.log_level == "WARNING"
        assert config.file_log_level == "DEBUG"
        assert not config.quiet

    @pytest.mark.parametrize("field", ["log_level", "file_log_level"])
    def test_rejects_unknown_level(self, field: str) -> None:
        with pytest.raises(ValidationError, match=field):
            LoggingConfig(**{field: "foo"})

class TestOutputFormat:
    """Tests for OutputFormat."""

    def test_parse(self) -> None:
        assert OutputFormat.parse("SVG") is OutputFormat.SVG
        assert OutputFormat.parse(OutputFormat.DXF) is OutputFormat.DXF

    def test_parse_unknown(self) -> None:
        with pytest.raises(UnsupportedOutputFormatError) as exc_info:
            OutputFormat.parse("pdf")
        assert exc_info.value.format == "pdf"

    def test_from_path(self) -> None:
        assert OutputFormat.from_path(Path("out/cover.dxf")) is OutputFormat.DXF
        with pytest.raises(UnsupportedOutputFormatError):
            OutputFormat.from_path(Path("cover.png"))


class TestSettings:
    """Tests for FrontPanelSettings."""

    def test_defaults(self) -> None:
        settings = get_default_settings()
        assert settings.font.marker == FLOWER
        assert settings.export.format is OutputFormat.SVG
        assert settings.export.flatten_tolerance is None
        assert settings.panel.hole_diameter == 3.3

    def test_hole_must_fit_margin(self) -> None:
        with pytest.raises(ValidationError, match="hole_diameter"):
            FrontPanelSettings(panel=PanelConfig(hole_diameter=25.0, margin=20.0))

    def test_marker_is_one_character(self) -> None:
        with pytest.raises(ValidationError):
            FrontPanelSettings(font={"marker": "ab"})
