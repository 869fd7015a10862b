"""CSS token stream.

This module adapts the cssutils tokenizer to the handful of token kinds the
@font-face parser understands, and provides the TokenFilter that hides
whitespace and comments from the grammar walk.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from cssutils.tokenize2 import Tokenizer


class TokenKind(str, Enum):
    """Classification of a CSS token."""

    AT_KEYWORD = "at-keyword"
    IDENT = "ident"
    STRING = "string"
    NUMBER = "number"
    URI = "uri"
    FUNCTION = "function"
    CHAR = "char"
    UNICODE_RANGE = "unicode-range"
    WHITESPACE = "whitespace"
    COMMENT = "comment"
    OTHER = "other"
    ERROR = "error"
    EOF = "eof"


# cssutils production names; at-rules such as @font-face come back as *_SYM
_PRODUCTION_KINDS: dict[str, TokenKind] = {
    "ATKEYWORD": TokenKind.AT_KEYWORD,
    "IDENT": TokenKind.IDENT,
    "STRING": TokenKind.STRING,
    "NUMBER": TokenKind.NUMBER,
    "URI": TokenKind.URI,
    "FUNCTION": TokenKind.FUNCTION,
    "CHAR": TokenKind.CHAR,
    "UNICODE-RANGE": TokenKind.UNICODE_RANGE,
    "UNICODE_RANGE": TokenKind.UNICODE_RANGE,
    "S": TokenKind.WHITESPACE,
    "COMMENT": TokenKind.COMMENT,
    "INVALID": TokenKind.ERROR,
    "EOF": TokenKind.EOF,
}


@dataclass(frozen=True)
class Token:
    """A classified CSS token.

    Attributes:
        kind: Token classification
        value: Source text of the token
        line: 1-based line of the token start
        col: 1-based column of the token start
    """

    kind: TokenKind
    value: str
    line: int = 0
    col: int = 0

    def is_char(self, char: str) -> bool:
        """Check whether this is the given delimiter character."""
        return self.kind is TokenKind.CHAR and self.value == char

    def ends_input(self) -> bool:
        """Check whether this token terminates the stream (EOF or lexical error)."""
        return self.kind in (TokenKind.EOF, TokenKind.ERROR)

    def __str__(self) -> str:
        return f"{self.kind.name} (line: {self.line}, column: {self.col}): {self.value!r}"


def _classify(production: str) -> TokenKind:
    kind = _PRODUCTION_KINDS.get(production)
    if kind is not None:
        return kind
    if production.endswith("_SYM"):
        return TokenKind.AT_KEYWORD
    return TokenKind.OTHER


def tokenize(css: str) -> Iterator[Token]:
    """Tokenize CSS text.

    Args:
        css: Style sheet source

    Yields:
        Tokens in source order, whitespace and comments included. The stream
        simply stops at the end of the input; no EOF token is produced.
    """
    for production, value, line, col in Tokenizer().tokenize(css):
        yield Token(_classify(production), value or "", line, col)


class TokenFilter:
    """Yields only significant tokens from a token source.

    Whitespace and comments are dropped. Once the source is exhausted every
    call returns an EOF token; lexical error tokens are returned as-is.

    Example:
        tokens = TokenFilter(tokenize("@font-face { }"))
        tokens.next()  # AT_KEYWORD '@font-face'
    """

    def __init__(self, source: Iterable[Token]) -> None:
        self._source = iter(source)
        self._last: Token | None = None

    def next(self) -> Token:
        """Return the next token that is not whitespace or a comment."""
        for token in self._source:
            if token.kind in (TokenKind.WHITESPACE, TokenKind.COMMENT):
                continue
            self._last = token
            return token

        line = self._last.line if self._last else 0
        col = self._last.col if self._last else 0
        return Token(TokenKind.EOF, "", line, col)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next()
            if token.kind is TokenKind.EOF:
                return
            yield token
