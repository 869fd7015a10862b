"""Configuration management for gfont.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FetchConfig: Font-face CSS download settings
- RenderConfig: CSS output settings
- LoggingConfig: Logging settings
- GfontSettings: Main application settings
"""

from gfont.config.settings import (
    GOOGLE_FONTS_CSS_API,
    FetchConfig,
    GfontSettings,
    LoggingConfig,
    QueryField,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "GOOGLE_FONTS_CSS_API",
    "FetchConfig",
    "GfontSettings",
    "LoggingConfig",
    "QueryField",
    "RenderConfig",
    "get_default_settings",
]
