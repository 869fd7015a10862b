"""JSON persistence for font-face collections.

Documents have the shape::

    {"fonts": [{"format": "woff2", "weight": 400, "family": "Domine",
                "style": "normal", "url": "...", "version": "v10",
                "filename": "...", "unicodeRange": ["U+0000-00FF"]}]}

version and filename are recomputed from url on every write and ignored on
read. Paths may be "-" to use stdin/stdout.
"""

import json
import sys
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gfont.domain import FontFace, FontFaceCollection
from gfont.exceptions import FontDataError, InputDecodeError

STDIO_PATH = "-"


class FontFaceEntry(BaseModel):
    """Validated JSON representation of one font face."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", strict=True)

    format: str = ""
    weight: int = 0
    family: str = ""
    style: str = ""
    url: str = ""
    unicode_range: list[str] | None = Field(default=None, alias="unicodeRange")

    def to_domain(self) -> FontFace:
        """Convert to a FontFace record."""
        return FontFace(
            format=self.format,
            weight=self.weight,
            family=self.family,
            style=self.style,
            url=self.url,
            unicode_range=tuple(self.unicode_range or ()),
        )


class FontFaceDocument(BaseModel):
    """Validated JSON document holding a list of font faces."""

    model_config = ConfigDict(extra="ignore", strict=True)

    fonts: list[FontFaceEntry] | None = None


def read_text(path: str | Path) -> str:
    """Read a text file, or stdin when path is "-".

    Args:
        path: File path or "-"

    Returns:
        File contents

    Raises:
        InputDecodeError: If the contents are not valid UTF-8
    """
    try:
        if str(path) == STDIO_PATH:
            return sys.stdin.read()
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        source = "stdin" if str(path) == STDIO_PATH else str(path)
        raise InputDecodeError(source, str(e)) from e


def write_text(content: str, path: str | Path | None = None) -> None:
    """Write text to a file, or stdout when path is "-" or None.

    Args:
        content: Text to write
        path: File path, "-" or None
    """
    if path is None or str(path) == STDIO_PATH:
        sys.stdout.write(content)
        sys.stdout.flush()
        return
    Path(path).write_text(content, encoding="utf-8")


def encode_collection(faces: FontFaceCollection, indent: int | None = None) -> str:
    """Encode a collection as a JSON document.

    Args:
        faces: Collection to encode
        indent: Indentation for pretty output (compact when None)

    Returns:
        JSON text
    """
    separators = None if indent is not None else (",", ":")
    return json.dumps(faces.to_dict(), indent=indent, separators=separators, ensure_ascii=False)


def decode_collection(text: str | bytes, source: str = "<string>") -> FontFaceCollection:
    """Decode a JSON document into a collection.

    Args:
        text: JSON text
        source: Name of the document for error messages

    Returns:
        Collection in document order

    Raises:
        FontDataError: If the document is not valid JSON or has the wrong shape
        URLParseError: If a font face URL cannot be parsed
    """
    try:
        document = FontFaceDocument.model_validate_json(text)
    except ValidationError as e:
        raise FontDataError(source, str(e)) from e

    return FontFaceCollection(entry.to_domain() for entry in document.fonts or [])


def load_collection(path: str | Path) -> FontFaceCollection:
    """Load a collection from a JSON file (or stdin when path is "-")."""
    return decode_collection(read_text(path), source=str(path))


def save_collection(
    faces: FontFaceCollection, path: str | Path | None = None, indent: int | None = None
) -> None:
    """Save a collection as JSON to a file (or stdout when path is "-" or None)."""
    write_text(encode_collection(faces, indent=indent), path)


def merge_documents(paths: Iterable[str | Path]) -> FontFaceCollection:
    """Load several JSON documents and concatenate their collections.

    Args:
        paths: Document paths, in merge order

    Returns:
        Collection holding every font face of every document
    """
    return FontFaceCollection.merge(load_collection(path) for path in paths)
