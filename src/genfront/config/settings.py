"""Configuration settings for gen-front."""

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from genfront.config.grids import GRIDS, GridContent
from genfront.exceptions import UnsupportedOutputFormatError

FLOWER = "⚘"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class OutputFormat(str, Enum):
    """Supported export formats."""

    SVG = "svg"
    DXF = "dxf"

    @classmethod
    def parse(cls, value: "str | OutputFormat") -> "OutputFormat":
        """Resolve a format name.

        Args:
            value: Format name (case insensitive) or OutputFormat

        Returns:
            Matching OutputFormat

        Raises:
            UnsupportedOutputFormatError: If the name is unknown
        """
        if isinstance(value, OutputFormat):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise UnsupportedOutputFormatError(value) from None

    @classmethod
    def from_path(cls, path: Path) -> "OutputFormat":
        """Infer the format from a file suffix ("cover.svg" -> SVG)."""
        return cls.parse(path.suffix.lstrip("."))


class PanelConfig(BaseModel):
    """Physical dimensions of the panel, in millimeters."""

    led_size: float = Field(
        default=5.0,
        gt=0.0,
        description="Size of one LED",
    )
    led_spacing: float = Field(
        default=12.0,
        gt=0.0,
        description="Gap between two adjacent LEDs",
    )
    hole_diameter: float = Field(
        default=3.3,
        gt=0.0,
        description="Diameter of the corner mounting holes (M3 clearance)",
    )
    margin: float = Field(
        default=20.0,
        gt=0.0,
        description="Border around the letter grid",
    )

    @property
    def led_pitch(self) -> float:
        """Center-to-center distance of two adjacent LEDs."""
        return self.led_size + self.led_spacing


class GridConfig(BaseModel):
    """Letter grid content."""

    content: GridContent = Field(
        default=GridContent.FRENCH,
        description="Built-in grid to use when no custom grid is given",
    )
    custom: list[str] | None = Field(
        default=None,
        description="Caller-supplied grid rows, overrides content",
    )

    @field_validator("custom")
    @classmethod
    def _check_rectangular(cls, rows: list[str] | None) -> list[str] | None:
        if rows is None:
            return rows
        if len(rows) < 2:
            raise ValueError("grid needs at least 2 rows")
        width = len(rows[0])
        if width < 2:
            raise ValueError("grid needs at least 2 columns")
        for index, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {index} has {len(row)} cells, expected {width}")
        return rows

    def rows(self) -> tuple[str, ...]:
        """Resolve the grid to a tuple of rows."""
        if self.custom is not None:
            return tuple(self.custom)
        return GRIDS[self.content]


class FontConfig(BaseModel):
    """Font analysis settings."""

    marker: str = Field(
        default=FLOWER,
        min_length=1,
        max_length=1,
        description="Character drawn at the middle of each panel edge",
    )


class ExportConfig(BaseModel):
    """Export settings."""

    format: OutputFormat = Field(
        default=OutputFormat.SVG,
        description="Output document format",
    )
    flatten_tolerance: float | None = Field(
        default=None,
        gt=0.0,
        description=(
            "DXF only: flatten curves to this tolerance (font units) instead of "
            "using their control polygon"
        ),
    )
    stroke: str = Field(
        default="black",
        description="SVG stroke color",
    )
    stroke_width: float = Field(
        default=0.1,
        gt=0.0,
        description="SVG stroke width in document units",
    )
    draw_bounding_boxes: bool = Field(
        default=False,
        description="Draw glyph bounding boxes instead of the letters",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    quiet: bool = Field(
        default=False,
        description="Suppress console log output",
    )


class FrontPanelSettings(BaseModel):
    """Main application settings."""

    panel: PanelConfig = Field(default_factory=PanelConfig)
    grid: GridConfig = Field(default_factory=GridConfig)
    font: FontConfig = Field(default_factory=FontConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def _check_hole_fits_margin(self) -> "FrontPanelSettings":
        if self.panel.hole_diameter >= self.panel.margin:
            raise ValueError("hole_diameter must be smaller than margin")
        return self


def get_default_settings() -> FrontPanelSettings:
    """Get default application settings."""
    return FrontPanelSettings()
