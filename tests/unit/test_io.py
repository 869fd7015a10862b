"""Unit tests for the I/O layer.

Tests for JSON persistence, stdin/stdout handling and the CSS fetcher.
"""

import io
import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from gfont.config import FetchConfig
from gfont.domain import FontFace, FontFaceCollection
from gfont.exceptions import FetchError, FontDataError, InputDecodeError, URLParseError
from gfont.io import (
    CSSFetcher,
    FontProfile,
    build_css_url,
    decode_collection,
    encode_collection,
    load_collection,
    merge_documents,
    read_text,
    save_collection,
    write_text,
)

WOFF2 = "https://fonts.gstatic.com/s/domine/v10/a.woff2"
WOFF = "https://fonts.gstatic.com/s/domine/v10/a.woff"


@pytest.fixture
def faces() -> FontFaceCollection:
    return FontFaceCollection(
        [
            FontFace(
                format="woff2",
                weight=400,
                family="Domine",
                style="normal",
                url=WOFF2,
                unicode_range=("U+0000-00FF",),
            ),
            FontFace(format="woff", weight=700, family="Domine", style="normal", url=WOFF),
        ]
    )


class TestJsonEncoding:
    """Tests for encode_collection and decode_collection."""

    def test_encode_compact(self, faces):
        """Test the compact document layout."""
        text = encode_collection(faces)
        assert "\n" not in text
        assert text.startswith('{"fonts":[{"format":"woff2","weight":400,')
        assert '"version":"v10","filename":"a.woff2","unicodeRange":["U+0000-00FF"]' in text

    def test_encode_indented(self, faces):
        """Test indented output."""
        text = encode_collection(faces, indent=2)
        assert text.startswith('{\n  "fonts": [')

    def test_encode_omits_empty_unicode_range(self, faces):
        """Test that records without ranges have no unicodeRange key."""
        data = json.loads(encode_collection(faces))
        assert "unicodeRange" not in data["fonts"][1]

    def test_encode_empty(self):
        """Test encoding an empty collection."""
        assert encode_collection(FontFaceCollection()) == '{"fonts":[]}'

    def test_decode(self, faces):
        """Test that decoding restores every record."""
        assert decode_collection(encode_collection(faces)) == faces

    def test_decode_ignores_computed_fields(self):
        """Test that version and filename are recomputed from url."""
        text = json.dumps(
            {"fonts": [{"format": "woff2", "url": WOFF2, "version": "v1", "filename": "x"}]}
        )
        face = decode_collection(text)[0]
        assert face.version == "v10"
        assert face.filename == "a.woff2"

    def test_decode_missing_or_null_fonts(self):
        """Test documents without a fonts list."""
        assert len(decode_collection("{}")) == 0
        assert len(decode_collection('{"fonts": null}')) == 0

    def test_decode_null_unicode_range(self):
        """Test that a null unicodeRange is an empty range list."""
        text = json.dumps({"fonts": [{"url": WOFF2, "unicodeRange": None}]})
        assert decode_collection(text)[0].unicode_range == ()

    def test_decode_invalid_json(self):
        """Test that syntax errors are reported with the source name."""
        with pytest.raises(FontDataError, match="fonts.json"):
            decode_collection("{not json", source="fonts.json")

    @pytest.mark.parametrize(
        "text",
        [
            '{"fonts": [{"weight": "bold"}]}',
            '{"fonts": [{"weight": "400"}]}',
            '{"fonts": [{"weight": true}]}',
            '{"fonts": [{"weight": 400.5}]}',
            '{"fonts": [{"family": 42}]}',
            '{"fonts": [{"unicodeRange": "U+0131"}]}',
            '{"fonts": {"url": "x"}}',
        ],
    )
    def test_decode_wrong_shape(self, text):
        """Test that type mismatches are rejected without coercion."""
        with pytest.raises(FontDataError):
            decode_collection(text)

    def test_decode_invalid_url(self):
        """Test that stored URLs are validated."""
        with pytest.raises(URLParseError):
            decode_collection('{"fonts": [{"url": "https://example.com/%zz"}]}')


class TestFiles:
    """Tests for file and stdio helpers."""

    def test_save_and_load(self, faces, tmp_path: Path):
        """Test saving and loading a document file."""
        path = tmp_path / "fonts.json"
        save_collection(faces, path, indent=2)
        assert load_collection(path) == faces

    def test_load_missing_file(self, tmp_path: Path):
        """Test loading a nonexistent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_collection(tmp_path / "missing.json")

    def test_read_stdin(self):
        """Test that "-" reads stdin."""
        with patch("sys.stdin", io.StringIO("body {}")):
            assert read_text("-") == "body {}"

    def test_read_invalid_utf8(self, tmp_path: Path):
        """Test that undecodable files raise InputDecodeError naming the file."""
        path = tmp_path / "latin1.css"
        path.write_bytes(b"@font-face { font-family: '\xff'; }")
        with pytest.raises(InputDecodeError) as exc_info:
            read_text(path)
        assert exc_info.value.source == str(path)

    def test_load_invalid_utf8(self, tmp_path: Path):
        """Test that undecodable JSON documents are reported, not raised raw."""
        path = tmp_path / "fonts.json"
        path.write_bytes(b'{"fonts": [{"family": "\xff"}]}')
        with pytest.raises(InputDecodeError):
            load_collection(path)

    @pytest.mark.parametrize("path", [None, "-"])
    def test_write_stdout(self, path, capsys):
        """Test that None and "-" write to stdout."""
        write_text("hello", path)
        assert capsys.readouterr().out == "hello"

    def test_write_file(self, tmp_path: Path):
        """Test writing a file as UTF-8."""
        path = tmp_path / "out.css"
        write_text("font-family: 'Noto Sans 日本語'", path)
        assert path.read_text(encoding="utf-8") == "font-family: 'Noto Sans 日本語'"

    def test_merge_documents(self, faces, tmp_path: Path):
        """Test concatenation of several documents in argument order."""
        first = tmp_path / "a.json"
        second = tmp_path / "b.json"
        save_collection(faces[:1], first)
        save_collection(faces, second)

        merged = merge_documents([first, second])
        assert len(merged) == 3
        assert merged[0] == merged[1]
        assert merged[2] == faces[1]

    def test_merge_no_documents(self):
        """Test merging nothing."""
        assert len(merge_documents([])) == 0


class TestBuildCssUrl:
    """Tests for build_css_url."""

    def test_family_only(self):
        """Test spaces in family names."""
        assert build_css_url("Open Sans") == "https://fonts.googleapis.com/css2?family=Open+Sans"

    def test_with_style(self):
        """Test axis parameters."""
        url = build_css_url("Domine", "wght@400;700", "https://mirror.example/css2")
        assert url == "https://mirror.example/css2?family=Domine:wght@400;700"


class TestCSSFetcher:
    """Tests for CSSFetcher class."""

    @pytest.fixture
    def session(self) -> MagicMock:
        session = MagicMock(spec=requests.Session)
        session.get.return_value.text = "@font-face {}"
        return session

    def test_download(self, session):
        """Test a successful request."""
        fetcher = CSSFetcher(FetchConfig(timeout=5), session=session)
        css = fetcher.download(FontProfile.WOFF2, "Domine", "wght@400")

        assert css == "@font-face {}"
        session.get.assert_called_once_with(
            "https://fonts.googleapis.com/css2?family=Domine:wght@400",
            headers={"User-Agent": FontProfile.WOFF2.user_agent},
            timeout=5,
        )
        session.get.return_value.raise_for_status.assert_called_once()

    def test_profile_by_name(self, session):
        """Test that profiles can be given by value."""
        CSSFetcher(session=session).download("eot", "Domine")
        _, kwargs = session.get.call_args
        assert kwargs["headers"] == {"User-Agent": "MSIE 8.0"}

    def test_mirror(self, session):
        """Test that a mirror replaces the API base URL."""
        fetcher = CSSFetcher(FetchConfig(mirror="https://mirror.example/css2"), session=session)
        fetcher.download(FontProfile.TTF, "Domine")
        args, _ = session.get.call_args
        assert args[0] == "https://mirror.example/css2?family=Domine"

    def test_unknown_profile(self, session):
        """Test that an unknown profile is rejected before any request."""
        with pytest.raises(ValueError):
            CSSFetcher(session=session).download("otf", "Domine")
        session.get.assert_not_called()

    def test_empty_family(self, session):
        """Test that the family is mandatory."""
        with pytest.raises(ValueError, match="mandatory"):
            CSSFetcher(session=session).download(FontProfile.WOFF, "")
        session.get.assert_not_called()

    def test_connection_error(self, session):
        """Test that transport errors become FetchError."""
        session.get.side_effect = requests.ConnectionError("connection refused")
        with pytest.raises(FetchError, match="connection refused"):
            CSSFetcher(session=session).download(FontProfile.WOFF2, "Domine")

    def test_http_error(self, session):
        """Test that a non-success status becomes FetchError."""
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError("400 Client Error")
        with pytest.raises(FetchError) as exc_info:
            CSSFetcher(session=session).download(FontProfile.WOFF2, "Nope")
        assert exc_info.value.url.endswith("family=Nope")

    def test_every_profile_has_user_agent(self):
        """Test that the profile table is complete."""
        for profile in FontProfile:
            assert profile.user_agent
