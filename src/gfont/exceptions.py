"""Exception hierarchy for gfont."""


class GfontError(Exception):
    """Base exception for all gfont errors."""

    pass


class CSSParseError(GfontError):
    """Errors raised while walking an @font-face style sheet.

    Attributes:
        last_token: Description of the last token the parser accepted, used
            to locate the problem in the source text.
    """

    def __init__(self, message: str, last_token: str | None = None) -> None:
        self.last_token = last_token
        if last_token:
            message = f"{message} after {last_token}"
        super().__init__(message)


class GrammarError(CSSParseError):
    """Unexpected token kind or value in a declaration."""

    def __init__(self, expected: str, found: str, last_token: str | None = None) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"expect {expected} but got {found}", last_token)


class NumericConversionError(CSSParseError):
    """A font-weight value is not a valid integer."""

    def __init__(self, value: str, last_token: str | None = None) -> None:
        self.value = value
        super().__init__(f"convert {value!r} to number failed", last_token)


class UnexpectedEndOfInput(CSSParseError):
    """Input or block ended in the middle of a declaration."""

    def __init__(self, found: str, last_token: str | None = None) -> None:
        self.found = found
        super().__init__(f"unexpected {found}", last_token)


class URLParseError(GfontError):
    """A source URL does not follow the general URL grammar."""

    def __init__(self, url: str, reason: str, last_token: str | None = None) -> None:
        self.url = url
        self.reason = reason
        self.last_token = last_token
        message = f"Failed to parse url '{url}': {reason}"
        if last_token:
            message = f"{message} (after {last_token})"
        super().__init__(message)


class FontDataError(GfontError):
    """Font-face JSON document could not be decoded."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid font data in '{source}': {reason}")


class InputDecodeError(GfontError):
    """Input file or stream is not valid UTF-8 text."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot decode '{source}' as UTF-8: {reason}")


class FetchError(GfontError):
    """Error downloading font-face CSS."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to download '{url}': {reason}")
