"""Font-face record.

This module defines the FontFace domain model, which represents the data of
one parsed @font-face declaration: a single source URL in a single format for
one family, style and weight.
"""

from dataclasses import dataclass, field
from typing import Any

from gfont.domain.source import parse_url, url_filename, url_version


@dataclass(frozen=True)
class FontFace:
    """A single @font-face declaration.

    Records are immutable; version and filename are derived from the URL
    on every access rather than stored.

    Attributes:
        format: Font format hint (e.g. "woff2", "eot"), empty if undetermined
        weight: Numeric font weight, 0 when unspecified
        family: Font family display name
        style: Font style keyword (e.g. "normal", "italic")
        url: Source URL of the font file
        unicode_range: Unicode range tokens in source order
    """

    format: str = ""
    weight: int = 0
    family: str = ""
    style: str = ""
    url: str = ""
    unicode_range: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.unicode_range, tuple):
            object.__setattr__(self, "unicode_range", tuple(self.unicode_range))
        if self.url:
            parse_url(self.url)

    @property
    def version(self) -> str:
        """Get the font version recovered from the source URL."""
        return url_version(self.url)

    @property
    def filename(self) -> str:
        """Get the font file name recovered from the source URL."""
        return url_filename(self.url)

    def __str__(self) -> str:
        return f"{self.family} {self.style} {self.weight}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON document shape.

        Returns:
            Dictionary with the stored fields plus computed version and
            filename; unicodeRange is omitted when empty
        """
        data: dict[str, Any] = {
            "format": self.format,
            "weight": self.weight,
            "family": self.family,
            "style": self.style,
            "url": self.url,
            "version": self.version,
            "filename": self.filename,
        }
        if self.unicode_range:
            data["unicodeRange"] = list(self.unicode_range)
        return data
