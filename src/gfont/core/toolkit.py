"""Workflow orchestration for gfont.

This module ties the CSS, domain and I/O layers together into the steps the
command-line tool exposes: download, parse, load, merge, query and render.

Key components:
- FontFaceToolkit: Main orchestrator class
"""

import time
from collections.abc import Iterable
from pathlib import Path

from gfont.config import GfontSettings, QueryField
from gfont.css import FontFaceParser, render_css
from gfont.domain import FontFaceCollection
from gfont.exceptions import GfontError
from gfont.io import CSSFetcher, FontProfile, load_collection
from gfont.utils import RunLogger, RunStats, configure_logging


class FontFaceToolkit:
    """Orchestrates font-face download, parsing, merging and rendering.

    Every step logs through structlog and updates the run statistics. Errors
    are logged and re-raised; nothing is partially applied.

    Example:
        toolkit = FontFaceToolkit(GfontSettings())
        faces = toolkit.parse(toolkit.download("Domine", "wght@400;700"))
        print(toolkit.render(faces))
    """

    def __init__(self, settings: GfontSettings, fetcher: CSSFetcher | None = None) -> None:
        """Initialize the toolkit with configuration.

        Args:
            settings: gfont settings containing fetch, render and logging config
            fetcher: CSS fetcher to use (built from settings when None)
        """
        self.settings = settings
        self.logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
        )
        self.run_logger = RunLogger(self.logger)
        self.run_logger.stats.start_time = time.time()
        self.fetcher = fetcher or CSSFetcher(settings.fetch)

    @property
    def stats(self) -> RunStats:
        """Get run statistics, with the end time set to now."""
        stats = self.run_logger.stats
        stats.end_time = time.time()
        return stats

    def download(
        self,
        family: str,
        style: str = "",
        profile: FontProfile | str | None = None,
    ) -> str:
        """Download font-face CSS for a family.

        Args:
            family: Font family name
            style: Axis/style parameters (optional)
            profile: Font profile (settings default when None)

        Returns:
            CSS text

        Raises:
            FetchError: If the download fails
        """
        profile = FontProfile(profile or self.settings.fetch.profile)
        self.logger.info(
            "Downloading CSS",
            family=family,
            style=style,
            profile=profile.value,
            url=self.fetcher.css_url(family, style),
        )
        try:
            css = self.fetcher.download(profile, family, style)
        except GfontError as e:
            self.run_logger.log_error("download", e)
            raise
        self.logger.info("CSS downloaded", family=family, size=len(css))
        return css

    def parse(self, css: str, source: str = "<string>") -> FontFaceCollection:
        """Parse font-face CSS.

        Args:
            css: Style sheet text
            source: Name of the document for logging

        Returns:
            Parsed collection

        Raises:
            CSSParseError: If the document is malformed
            URLParseError: If a src URL cannot be parsed
        """
        parser = FontFaceParser(css)
        try:
            faces = parser.parse()
        except GfontError as e:
            self.run_logger.log_error("parse", e)
            raise
        self.run_logger.log_document_parsed(source, len(faces), parser.skipped_properties)
        return faces

    def load(self, path: str | Path) -> FontFaceCollection:
        """Load a JSON font-face document ("-" for stdin)."""
        try:
            faces = load_collection(path)
        except GfontError as e:
            self.run_logger.log_error("load", e)
            raise
        self.run_logger.log_document_loaded(str(path), len(faces))
        return faces

    def merge(self, paths: Iterable[str | Path]) -> FontFaceCollection:
        """Load several JSON documents and concatenate them in order."""
        faces = FontFaceCollection.merge(self.load(path) for path in paths)
        self.logger.info("Documents merged", faces=len(faces))
        return faces

    def query(self, faces: FontFaceCollection, field: QueryField | str) -> list[str]:
        """List the distinct values of one field, in first-seen order.

        Args:
            faces: Collection to query
            field: Field name (url, family, format, style or weight)

        Returns:
            Distinct values as strings

        Raises:
            ValueError: If the field is not supported
        """
        field = QueryField(field)
        if field is QueryField.URL:
            values = faces.urls()
        elif field is QueryField.FAMILY:
            values = faces.families()
        elif field is QueryField.FORMAT:
            values = faces.formats()
        elif field is QueryField.STYLE:
            values = faces.styles()
        else:
            values = [str(weight) for weight in faces.weights()]

        self.logger.debug("Query", field=field.value, results=len(values))
        return values

    def render(self, faces: FontFaceCollection) -> str:
        """Render a collection as CSS according to the render settings."""
        css = render_css(faces, self.settings.render)
        self.logger.info(
            "CSS rendered",
            faces=len(faces),
            compat=self.settings.render.compat,
            pretty=self.settings.render.pretty,
        )
        return css

    def record_output(self, kind: str, faces: FontFaceCollection, target: str) -> None:
        """Record that output was written for the run statistics."""
        self.run_logger.log_output(kind, len(faces), target)
