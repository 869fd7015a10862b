"""Unit tests for the FontFaceToolkit orchestrator."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from gfont.config import GfontSettings, LoggingConfig, QueryField, RenderConfig
from gfont.core import FontFaceToolkit
from gfont.domain import FontFace, FontFaceCollection
from gfont.exceptions import FetchError, FontDataError, NumericConversionError
from gfont.io import CSSFetcher, FontProfile, save_collection

CSS = """@font-face {
  font-family: 'Domine';
  font-style: normal;
  font-weight: 400;
  font-display: swap;
  src: url(https://fonts.gstatic.com/s/domine/v10/a.woff2) format('woff2');
}
@font-face {
  font-family: 'Domine';
  font-style: normal;
  font-weight: 700;
  src: url(https://fonts.gstatic.com/s/domine/v10/b.woff2) format('woff2');
}
"""


@pytest.fixture
def fetcher() -> MagicMock:
    fetcher = MagicMock(spec=CSSFetcher)
    fetcher.css_url.return_value = "https://fonts.googleapis.com/css2?family=Domine"
    fetcher.download.return_value = CSS
    return fetcher


@pytest.fixture
def toolkit(fetcher: MagicMock) -> FontFaceToolkit:
    return FontFaceToolkit(GfontSettings(), fetcher=fetcher)


class TestFontFaceToolkit:
    """Tests for FontFaceToolkit class."""

    def test_download_uses_settings_profile(self, toolkit, fetcher):
        """Test that the configured profile is used by default."""
        assert toolkit.download("Domine", "wght@400;700") == CSS
        fetcher.download.assert_called_once_with(FontProfile.WOFF2, "Domine", "wght@400;700")

    def test_download_explicit_profile(self, toolkit, fetcher):
        """Test overriding the profile."""
        toolkit.download("Domine", profile="eot")
        fetcher.download.assert_called_once_with(FontProfile.EOT, "Domine", "")

    def test_download_error_counted(self, toolkit, fetcher):
        """Test that a failed download is recorded and re-raised."""
        fetcher.download.side_effect = FetchError("https://x", "timeout")
        with pytest.raises(FetchError):
            toolkit.download("Domine")
        assert toolkit.stats.error_count == 1
        assert toolkit.stats.errors[0][0] == "download"

    def test_parse_updates_stats(self, toolkit):
        """Test parsing and the statistics it records."""
        faces = toolkit.parse(CSS, source="domine.css")
        assert len(faces) == 2

        stats = toolkit.stats
        assert stats.documents_read == 1
        assert stats.faces_parsed == 2
        assert stats.skipped_properties == 1
        assert stats.duration_seconds >= 0.0

    def test_parse_error(self, toolkit):
        """Test that parse errors are recorded and re-raised."""
        with pytest.raises(NumericConversionError):
            toolkit.parse("@font-face { font-weight: bold; }")
        assert toolkit.stats.error_count == 1

    def test_load_and_merge(self, toolkit, tmp_path: Path):
        """Test loading and merging JSON documents."""
        faces = toolkit.parse(CSS)
        first = tmp_path / "a.json"
        second = tmp_path / "b.json"
        save_collection(faces[:1], first)
        save_collection(faces[1:], second)

        merged = toolkit.merge([first, second])
        assert merged == faces
        assert toolkit.stats.documents_read == 3

    def test_load_invalid_document(self, toolkit, tmp_path: Path):
        """Test that invalid documents are recorded and re-raised."""
        path = tmp_path / "bad.json"
        path.write_text('{"fonts": 1}')
        with pytest.raises(FontDataError):
            toolkit.load(path)
        assert toolkit.stats.errors[0][0] == "load"

    @pytest.mark.parametrize(
        ("field", "expected"),
        [
            (QueryField.URL, ["https://a/v1/1.woff2", "https://a/v1/2.woff"]),
            (QueryField.FAMILY, ["Domine", "Lora"]),
            (QueryField.FORMAT, ["woff2", "woff"]),
            ("style", ["normal"]),
            ("weight", ["400", "700"]),
        ],
    )
    def test_query(self, toolkit, field, expected):
        """Test listing distinct field values."""
        faces = FontFaceCollection(
            [
                FontFace("woff2", 400, "Domine", "normal", "https://a/v1/1.woff2"),
                FontFace("woff", 700, "Lora", "normal", "https://a/v1/2.woff"),
                FontFace("woff", 0, "Lora", "normal", "https://a/v1/2.woff"),
            ]
        )
        assert toolkit.query(faces, field) == expected

    def test_query_unknown_field(self, toolkit):
        """Test that unsupported fields are rejected."""
        with pytest.raises(ValueError):
            toolkit.query(FontFaceCollection(), "version")

    def test_render_uses_settings(self, fetcher):
        """Test that render settings select the serializer."""
        settings = GfontSettings(render=RenderConfig(compat=True))
        toolkit = FontFaceToolkit(settings, fetcher=fetcher)
        css = toolkit.render(toolkit.parse(CSS))
        assert css.count("@font-face{") == 2

    def test_record_output(self, toolkit):
        """Test output statistics."""
        toolkit.record_output("css", toolkit.parse(CSS), "-")
        assert toolkit.stats.faces_written == 2

    def test_log_file(self, fetcher, tmp_path: Path):
        """Test that structured events reach the log file."""
        log_file = tmp_path / "gfont.log"
        settings = GfontSettings(logging=LoggingConfig(log_file=log_file))
        toolkit = FontFaceToolkit(settings, fetcher=fetcher)
        toolkit.parse(CSS, source="domine.css")

        lines = [line for line in log_file.read_text().splitlines() if "CSS parsed" in line]
        assert lines
        event = json.loads(lines[-1].split(" | ", 3)[3])
        assert event["source"] == "domine.css"
        assert event["skipped_properties"] == ["font-display"]
