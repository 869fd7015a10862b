"""Font-face CSS download from the Google Fonts CSS API.

The API picks the font format it serves from the request's User-Agent, so
each FontProfile maps to a browser signature known to receive that format.
"""

import logging
from enum import Enum

import requests

from gfont.config import FetchConfig
from gfont.exceptions import FetchError

logger = logging.getLogger(__name__)


class FontProfile(str, Enum):
    """Font format profile, selected by browser user agent."""

    WOFF2 = "woff2"
    APPLE_WOFF2 = "apple_woff2"
    LEGACY_WOFF2 = "legacy_woff2"
    APPLE_LEGACY_WOFF2 = "apple_legacy_woff2"
    WOFF = "woff"
    APPLE_WOFF = "apple_woff"
    LEGACY_WOFF = "legacy_woff"
    APPLE_LEGACY_WOFF = "apple_legacy_woff"
    TTF = "ttf"
    APPLE_TTF = "apple_ttf"
    SVG = "svg"
    EOT = "eot"

    @property
    def user_agent(self) -> str:
        """Get the User-Agent header that makes the API serve this profile."""
        return USER_AGENTS[self]


USER_AGENTS: dict[FontProfile, str] = {
    # WOFF2 with unicode-range subsets
    FontProfile.WOFF2: (
        "Mozilla/5.0 (Windows NT 6.2; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/51.0.2704.106 Safari/537.36"
    ),
    FontProfile.APPLE_WOFF2: (
        "Mozilla/5.0 (Macintosh; U; Intel Mac OS X 10.10; rv:62.0) Gecko/20100101 Firefox/62.0"
    ),
    # WOFF2 without unicode-range support
    FontProfile.LEGACY_WOFF2: (
        "Mozilla/5.0 (Windows NT 6.1; WOW64; rv:40.0) Gecko/20100101 Firefox/40.1"
    ),
    FontProfile.APPLE_LEGACY_WOFF2: (
        "Mozilla/5.0 (Macintosh; U; PPC Mac OS X; en) Gecko/20100101 Firefox/40.1"
    ),
    FontProfile.WOFF: (
        "Mozilla/5.0 (Windows NT 6.1) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/41.0.2228.0 Safari/537.36"
    ),
    FontProfile.APPLE_WOFF: (
        "Mozilla/5.0 (Macintosh; U; PPC Mac OS X; en) AppleWebKit/418 "
        "(KHTML, like Gecko) Safari/417.9.2"
    ),
    FontProfile.LEGACY_WOFF: (
        "Mozilla/4.0 (Windows NT 6.2; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/32.0.1667.0 Safari/537.36"
    ),
    FontProfile.APPLE_LEGACY_WOFF: (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_10_1) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/37.0.2062.124 Safari/537.36"
    ),
    FontProfile.TTF: "Mozilla/5.0",
    FontProfile.APPLE_TTF: (
        "Mozilla/5.0 (Macintosh; U; PPC Mac OS X 10_4_11; en) AppleWebKit/528.4+ "
        "(KHTML, like Gecko) Version/4.0dp1 Safari/526.11.2"
    ),
    FontProfile.SVG: "(iPad) AppleWebKit/534",
    FontProfile.EOT: "MSIE 8.0",
}


def build_css_url(family: str, style: str = "", api_url: str | None = None) -> str:
    """Build the CSS API URL for a font family.

    Args:
        family: Font family name (spaces become "+")
        style: Axis/style parameters such as "wght@400;700" (optional)
        api_url: API base URL (Google Fonts CSS2 API when None)

    Returns:
        Request URL, e.g. ``https://fonts.googleapis.com/css2?family=Open+Sans:wght@400``
    """
    base = api_url or FetchConfig().api_url
    query = family.replace(" ", "+")
    if style:
        query = f"{query}:{style}"
    return f"{base}?family={query}"


class CSSFetcher:
    """Downloads font-face CSS for a family.

    Example:
        fetcher = CSSFetcher(FetchConfig())
        css = fetcher.download(FontProfile.WOFF2, "Domine", "wght@400;700")
    """

    def __init__(
        self,
        config: FetchConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            config: Download settings (defaults when None)
            session: HTTP session to reuse (a new one when None)
        """
        self.config = config or FetchConfig()
        self._session = session or requests.Session()

    def css_url(self, family: str, style: str = "") -> str:
        """Get the request URL for a family under the current settings."""
        return build_css_url(family, style, self.config.base_url)

    def download(self, profile: FontProfile | str, family: str, style: str = "") -> str:
        """Download the font-face CSS for a family.

        Args:
            profile: Font profile selecting the served format
            family: Font family name
            style: Axis/style parameters (optional)

        Returns:
            CSS text served by the API

        Raises:
            ValueError: If the profile is unknown or the family is empty
            FetchError: If the request fails or returns a non-success status
        """
        profile = FontProfile(profile)
        if not family:
            raise ValueError("Font family is mandatory")

        url = self.css_url(family, style)
        logger.info("HTTP GET %s (profile=%s)", url, profile.value)

        try:
            response = self._session.get(
                url,
                headers={"User-Agent": profile.user_agent},
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(url, str(e)) from e

        return response.text
