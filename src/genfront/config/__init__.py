"""Configuration management for gen-front.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- PanelConfig: Physical panel dimensions
- GridConfig: Letter grid content
- FontConfig: Font analysis settings
- ExportConfig: Output format and styling
- LoggingConfig: Logging settings
- FrontPanelSettings: Main application settings
"""

from genfront.config.grids import ENGLISH_GRID, FRENCH_GRID, GridContent
from genfront.config.settings import (
    FLOWER,
    ExportConfig,
    FontConfig,
    FrontPanelSettings,
    GridConfig,
    LoggingConfig,
    OutputFormat,
    PanelConfig,
    get_default_settings,
)

__all__ = [
    "ENGLISH_GRID",
    "FLOWER",
    "FRENCH_GRID",
    "ExportConfig",
    "FontConfig",
    "FrontPanelSettings",
    "GridConfig",
    "GridContent",
    "LoggingConfig",
    "OutputFormat",
    "PanelConfig",
    "get_default_settings",
]
