"""Domain models for gfont.

This module contains the font-face record and collection models. All models
are designed to be:

- Immutable (frozen dataclasses, tuple-backed collections)
- Serializable to the JSON document shape
- Independent of the CSS tokenizer

Key classes:
- FontFace: One @font-face declaration
- FontFaceCollection: Ordered sequence of font faces with selection helpers

Key functions:
- parse_url: Validate a source URL with the general URL grammar
- url_version / url_filename: Metadata recovered from a source URL
"""

from gfont.domain.collection import FontFaceCollection
from gfont.domain.source import parse_url, url_filename, url_version
from gfont.domain.typeface import FontFace

__all__: list[str] = [
    "FontFace",
    "FontFaceCollection",
    "parse_url",
    "url_filename",
    "url_version",
]
