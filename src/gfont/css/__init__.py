"""CSS layer for gfont.

This module turns @font-face style sheets into domain models and back:

- Token stream over the cssutils tokenizer, filtered to significant tokens
- Declaration parser (state machine over the token stream)
- Per-record and consolidated CSS serializers

Key classes:
- TokenFilter: Drops whitespace and comment tokens
- FontFaceParser: Parses @font-face blocks into FontFace records

Key functions:
- parse_css: Parse a style sheet into a FontFaceCollection
- face_css / collection_css: One rule per record
- consolidated_css: One rule per (family, weight, style) triple
- render_css: Serialize according to RenderConfig
"""

from gfont.css.parser import FontFaceParser, parse_css
from gfont.css.tokens import Token, TokenFilter, TokenKind, tokenize
from gfont.css.writer import (
    FORMAT_PRIORITY,
    collection_css,
    consolidated_css,
    face_css,
    render_css,
)

__all__ = [
    "FORMAT_PRIORITY",
    "FontFaceParser",
    "Token",
    "TokenFilter",
    "TokenKind",
    "collection_css",
    "consolidated_css",
    "face_css",
    "parse_css",
    "render_css",
    "tokenize",
]
