"""I/O layer for gfont.

This module handles everything that leaves the process: JSON documents on
disk or stdin/stdout, and font-face CSS downloaded over HTTP.

Key responsibilities:
- Encode/decode font-face collections as JSON documents
- Read and write files, with "-" meaning stdin/stdout
- Merge several JSON documents into one collection
- Download CSS from the Google Fonts API with per-format user agents

Key classes:
- CSSFetcher: Download font-face CSS
- FontProfile: Browser profile selecting the served font format
"""

from gfont.io.fetch import USER_AGENTS, CSSFetcher, FontProfile, build_css_url
from gfont.io.jsonio import (
    STDIO_PATH,
    FontFaceDocument,
    FontFaceEntry,
    decode_collection,
    encode_collection,
    load_collection,
    merge_documents,
    read_text,
    save_collection,
    write_text,
)

__all__ = [
    "STDIO_PATH",
    "USER_AGENTS",
    "CSSFetcher",
    "FontFaceDocument",
    "FontFaceEntry",
    "FontProfile",
    "build_css_url",
    "decode_collection",
    "encode_collection",
    "load_collection",
    "merge_documents",
    "read_text",
    "save_collection",
    "write_text",
]
