"""Configuration settings for gfont."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

GOOGLE_FONTS_CSS_API = "https://fonts.googleapis.com/css2"


class QueryField(str, Enum):
    """Collection field listed by the filter command."""

    URL = "url"
    FAMILY = "family"
    FORMAT = "format"
    STYLE = "style"
    WEIGHT = "weight"


class FetchConfig(BaseModel):
    """Configuration for downloading font-face CSS."""

    api_url: str = Field(
        default=GOOGLE_FONTS_CSS_API,
        description="Base URL of the font-face CSS API",
    )
    mirror: str | None = Field(
        default=None,
        description="Mirror proxy replacing the API base URL",
    )
    profile: str = Field(
        default="woff2",
        description="Font profile (browser user agent) to request",
    )
    timeout: float = Field(
        default=30.0,
        gt=0.0,
        le=600.0,
        description="HTTP request timeout in seconds",
    )

    @property
    def base_url(self) -> str:
        """Get the effective API base URL (mirror wins)."""
        return self.mirror or self.api_url


class RenderConfig(BaseModel):
    """Configuration for CSS output."""

    pretty: bool = Field(
        default=False,
        description="Human readable output",
    )
    compat: bool = Field(
        default=False,
        description="Consolidate formats into legacy compatible rules",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GfontSettings(BaseModel):
    """Main application settings."""

    fetch: FetchConfig = Field(default_factory=FetchConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GfontSettings:
    """Get default application settings."""
    return GfontSettings()
