"""@font-face declaration parser.

The parser is a small state machine over the significant-token stream:

    scan-for-at-rule -> expect-open-brace -> consume-properties -> block-closed

repeated until the input is exhausted. Only the @font-face at-rule is
understood; every other rule is skipped while scanning. Inside a block the
properties font-family, font-style, font-weight, src and unicode-range are
parsed with strict sub-grammars; any other property is skipped as a whole
``name: ... ;`` declaration.

There is no error recovery: the first malformed declaration aborts the whole
document.
"""

import logging
from collections.abc import Callable
from typing import Any

from gfont.css.tokens import Token, TokenFilter, TokenKind, tokenize
from gfont.domain import FontFace, FontFaceCollection, parse_url
from gfont.exceptions import (
    GrammarError,
    NumericConversionError,
    UnexpectedEndOfInput,
    URLParseError,
)

logger = logging.getLogger(__name__)

FONT_FACE_KEYWORD = "@font-face"

# Format assumed for a bare `src: url(...);` (legacy IE declarations)
DEFAULT_SRC_FORMAT = "eot"


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return value[1:-1]
    return value


def _strip_url(value: str) -> str:
    if value[:4].lower() == "url(":
        value = value[4:]
    if value.endswith(")"):
        value = value[:-1]
    return _unquote(value)


class FontFaceParser:
    """Parses @font-face style sheets into FontFace records.

    A parser instance walks a single document; use ``parse_css()`` for the
    common case.

    Example:
        parser = FontFaceParser(css_text)
        faces = parser.parse()
        print(faces.families())
    """

    def __init__(self, css: str) -> None:
        """Initialize the parser.

        Args:
            css: Style sheet source text
        """
        self._tokens = TokenFilter(tokenize(css))
        self._pending: Token | None = None
        self._last_good: Token | None = None
        self.skipped_properties: list[str] = []
        self._properties: dict[str, Callable[[dict[str, Any]], None]] = {
            "font-family": self._parse_family,
            "font-style": self._parse_style,
            "font-weight": self._parse_weight,
            "src": self._parse_src,
            "unicode-range": self._parse_unicode_range,
        }

    @property
    def _last(self) -> str | None:
        return str(self._last_good) if self._last_good is not None else None

    def _next(self) -> Token:
        if self._pending is not None:
            token, self._pending = self._pending, None
            return token
        return self._tokens.next()

    def _push_back(self, token: Token) -> None:
        self._pending = token

    def _accept(self, token: Token) -> Token:
        self._last_good = token
        return token

    def _next_in_block(self) -> Token:
        """Return the next token of an open block, failing on end of input."""
        token = self._next()
        if token.ends_input():
            raise UnexpectedEndOfInput(f"{token.kind.value}", self._last)
        return token

    def _next_in_declaration(self) -> Token:
        """Return the next token of an unfinished declaration.

        Reaching the end of input or the closing brace here means the
        declaration was cut short.
        """
        token = self._next_in_block()
        if token.is_char("}"):
            raise UnexpectedEndOfInput("end of block", self._last)
        return token

    def _expect_char(self, char: str) -> Token:
        token = self._next_in_declaration()
        if not token.is_char(char):
            raise GrammarError(repr(char), str(token), self._last)
        return self._accept(token)

    def _expect_kind(self, kind: TokenKind) -> Token:
        token = self._next_in_declaration()
        if token.kind is not kind:
            raise GrammarError(f"<{kind.value}>", str(token), self._last)
        return self._accept(token)

    def parse(self) -> FontFaceCollection:
        """Parse the whole document.

        Returns:
            Collection of font faces in source order (empty when the document
            contains no @font-face rule)

        Raises:
            GrammarError: If a token does not fit the @font-face grammar
            NumericConversionError: If a font-weight value is not an integer
            URLParseError: If a src URL cannot be parsed
            UnexpectedEndOfInput: If the input ends inside a block
        """
        faces: list[FontFace] = []

        while True:
            token = self._next()
            if token.ends_input():
                break
            if token.kind is not TokenKind.AT_KEYWORD or token.value != FONT_FACE_KEYWORD:
                continue
            self._accept(token)

            brace = self._next()
            if not brace.is_char("{"):
                raise GrammarError("'{'", str(brace), self._last)
            self._accept(brace)

            face = self._parse_block()
            logger.debug(
                "Parsed font face %s (format=%s, url=%s)", face, face.format, face.url
            )
            faces.append(face)

        return FontFaceCollection(faces)

    def _parse_block(self) -> FontFace:
        fields: dict[str, Any] = {}

        while True:
            token = self._next_in_block()
            if token.is_char("}"):
                self._accept(token)
                break

            if token.kind is not TokenKind.IDENT:
                raise GrammarError("<property>", str(token), self._last)
            self._accept(token)

            parse_property = self._properties.get(token.value)
            if parse_property is None:
                self._skip_property(token)
                continue
            parse_property(fields)

        return FontFace(**fields)

    def _skip_property(self, name: Token) -> None:
        self._expect_char(":")
        while True:
            token = self._next_in_block()
            if token.is_char("}"):
                self._push_back(token)
                break
            self._accept(token)
            if token.is_char(";"):
                break

        logger.debug("Skipped unsupported property %s", name.value)
        self.skipped_properties.append(name.value)

    def _parse_family(self, fields: dict[str, Any]) -> None:
        self._expect_char(":")

        token = self._next_in_declaration()
        if token.kind is TokenKind.STRING:
            self._accept(token)
            fields["family"] = _unquote(token.value)
            self._expect_char(";")
            return

        if token.kind is not TokenKind.IDENT:
            raise GrammarError("<string>", str(token), self._last)

        # Unquoted family names are a sequence of identifiers
        words = [self._accept(token).value]
        while True:
            token = self._next_in_declaration()
            if token.kind is TokenKind.IDENT:
                words.append(self._accept(token).value)
                continue
            if not token.is_char(";"):
                raise GrammarError("';'", str(token), self._last)
            self._accept(token)
            break
        fields["family"] = " ".join(words)

    def _parse_style(self, fields: dict[str, Any]) -> None:
        self._expect_char(":")
        fields["style"] = self._expect_kind(TokenKind.IDENT).value
        self._expect_char(";")

    def _parse_weight(self, fields: dict[str, Any]) -> None:
        self._expect_char(":")

        token = self._next_in_declaration()
        if token.is_char(";"):
            raise GrammarError("<number>", str(token), self._last)
        try:
            weight = int(token.value)
        except ValueError:
            raise NumericConversionError(token.value, self._last) from None
        self._accept(token)
        fields["weight"] = weight

        self._expect_char(";")

    def _parse_src(self, fields: dict[str, Any]) -> None:
        self._expect_char(":")

        uri = self._expect_kind(TokenKind.URI)
        url = _strip_url(uri.value)
        try:
            parse_url(url)
        except URLParseError as e:
            raise URLParseError(url, e.reason, self._last) from e
        fields["url"] = url

        token = self._next_in_declaration()
        if token.is_char(";"):
            self._accept(token)
            fields["format"] = DEFAULT_SRC_FORMAT
            return

        if token.kind is not TokenKind.FUNCTION or token.value.lower() != "format(":
            raise GrammarError("format(", str(token), self._last)
        self._accept(token)

        fields["format"] = _unquote(self._expect_kind(TokenKind.STRING).value)
        self._expect_char(")")
        self._expect_char(";")

    def _parse_unicode_range(self, fields: dict[str, Any]) -> None:
        self._expect_char(":")

        ranges: list[str] = []
        while True:
            token = self._next_in_block()
            if token.kind is TokenKind.UNICODE_RANGE:
                ranges.append(self._accept(token).value)
            elif token.is_char(","):
                self._accept(token)
            elif token.is_char(";"):
                self._accept(token)
                break
            else:
                self._push_back(token)
                break

        fields["unicode_range"] = tuple(ranges)


def parse_css(css: str | bytes) -> FontFaceCollection:
    """Parse an @font-face style sheet.

    Args:
        css: Style sheet text (bytes are decoded as UTF-8)

    Returns:
        Collection of font faces in source order

    Raises:
        CSSParseError: If the document is malformed
        URLParseError: If a src URL cannot be parsed
    """
    if isinstance(css, bytes):
        css = css.decode("utf-8")
    return FontFaceParser(css).parse()
