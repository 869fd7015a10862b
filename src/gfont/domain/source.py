"""Source URL parsing and metadata extraction.

Web-font APIs serve two shapes of font URL:

- Static assets, versioned in the path:
  ``https://fonts.gstatic.com/s/domine/v10/L0x8DFMnlVwD4h3Lt9JWnbX3jG-2X3LAI10.woff2``
- Dynamic endpoints, parameterized by query (SVG fonts):
  ``https://fonts.gstatic.com/l/font?kit=L0xhDFMnlVwD4h3Lt9JWnbX3jG-2X3LAI18&skey=ea73fc1e1d1dfd9a&v=v10#Domine``

The font "version" and "file name" are recovered from whichever shape applies.
"""

import re
from urllib.parse import SplitResult, parse_qs, unquote, urlsplit

from gfont.exceptions import URLParseError

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def parse_url(url: str) -> SplitResult:
    """Parse a URL with the general URL grammar.

    Args:
        url: Absolute or relative URL string

    Returns:
        The split URL

    Raises:
        URLParseError: If the URL contains control characters, invalid
            percent escapes, a malformed host or port, or a missing scheme
    """
    if _CONTROL_CHARS.search(url):
        raise URLParseError(url, "invalid control character in URL")

    match = _BAD_ESCAPE.search(url)
    if match:
        raise URLParseError(url, f"invalid URL escape {url[match.start():match.start() + 3]!r}")

    if url.startswith(":"):
        raise URLParseError(url, "missing protocol scheme")

    try:
        parts = urlsplit(url)
        # Port is validated lazily by urllib
        _ = parts.port
    except ValueError as e:
        raise URLParseError(url, str(e)) from e

    return parts


def _query_value(parts: SplitResult, key: str) -> str:
    values = parse_qs(parts.query, keep_blank_values=True).get(key)
    if not values:
        return ""
    return values[0]


def _path_segments(parts: SplitResult) -> list[str]:
    return [unquote(segment) for segment in parts.path.split("/")]


def url_version(url: str) -> str:
    """Return the font version encoded in a source URL.

    Query-bearing URLs carry it in the ``v`` parameter. Path-based URLs carry
    it in the second-to-last path segment, which only counts when it starts
    with ``v``.

    Args:
        url: Source URL (may be empty)

    Returns:
        Version string such as ``"v10"``, or an empty string
    """
    if not url:
        return ""

    parts = parse_url(url)
    if parts.query:
        return _query_value(parts, "v")

    segments = _path_segments(parts)
    if len(segments) < 2 or not segments[-2].startswith("v"):
        return ""
    return segments[-2]


def url_filename(url: str) -> str:
    """Return the font file name encoded in a source URL.

    Query-bearing URLs name the file after the ``kit`` parameter with an
    ``.svg`` suffix. Path-based URLs use the last path segment.

    Args:
        url: Source URL (may be empty)

    Returns:
        File name, or an empty string
    """
    if not url:
        return ""

    parts = parse_url(url)
    if parts.query:
        kit = _query_value(parts, "kit")
        if not kit:
            return ""
        return kit + ".svg"

    return _path_segments(parts)[-1]
