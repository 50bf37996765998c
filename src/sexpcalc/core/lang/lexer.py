"""
Lexer for the sexpcalc language.

Scans a source string one token at a time. Tokens carry a Span into the
original source instead of a copy of the matched text.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum, auto


class TokenKind(StrEnum):
    """Token types for the sexpcalc language."""

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # Literals
    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # End of input
    END = auto()

    # Anything the language does not recognise
    UNKNOWN = auto()


OPERATOR_KINDS = frozenset({TokenKind.PLUS, TokenKind.MINUS, TokenKind.STAR, TokenKind.SLASH})

_SINGLE_CHAR: dict[str, TokenKind] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
}

_WHITESPACE = frozenset(" \t\n\r\v\f")
_DIGITS = frozenset("0123456789")


class Span:
    """A view of source[start:end]; the text is sliced only when asked for."""

    __slots__ = ("source", "start", "end")

    def __init__(self, source: str, start: int, end: int) -> None:
        self.source = source
        self.start = start
        self.end = end

    @property
    def text(self) -> str:
        return self.source[self.start : self.end]

    def __len__(self) -> int:
        return self.end - self.start

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return (
            self.source == other.source
            and self.start == other.start
            and self.end == other.end
        )

    def __hash__(self) -> int:
        return hash((self.start, self.end))

    def __repr__(self) -> str:
        return f"Span({self.start}, {self.end}, {self.text!r})"


class Token:
    """A single token from the lexer."""

    __slots__ = ("kind", "span")

    def __init__(self, kind: TokenKind, span: Span) -> None:
        self.kind = kind
        self.span = span

    @property
    def value(self) -> str:
        return self.span.text

    @property
    def pos(self) -> int:
        return self.span.start

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


class Lexer:
    """
    One-token-lookahead scanner.

    ``current`` is None until the first call to ``advance``. Once the input is
    exhausted every further ``advance`` yields another END token.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.offset = 0
        self.current: Token | None = None

    def advance(self) -> Token:
        """Scan the next token, store it as ``current`` and return it."""
        text = self.text
        n = len(text)
        i = self.offset

        while i < n and text[i] in _WHITESPACE:
            i += 1

        if i >= n:
            tok = Token(TokenKind.END, Span(text, n, n))
            self.offset = n
        elif text[i] in _SINGLE_CHAR:
            tok = Token(_SINGLE_CHAR[text[i]], Span(text, i, i + 1))
            self.offset = i + 1
        elif text[i] in _DIGITS:
            end = i + 1
            while end < n and text[end] in _DIGITS:
                end += 1
            tok = Token(TokenKind.NUMBER, Span(text, i, end))
            self.offset = end
        else:
            tok = Token(TokenKind.UNKNOWN, Span(text, i, i + 1))
            self.offset = i + 1

        self.current = tok
        return tok

    def done(self) -> bool:
        """True once all input is consumed and the lookahead is END."""
        return (
            self.offset >= len(self.text)
            and self.current is not None
            and self.current.kind == TokenKind.END
        )


def tokenize(source: str) -> Iterator[Token]:
    """Lazily yield every token of source, ending with a single END token."""
    lexer = Lexer(source)
    while True:
        tok = lexer.advance()
        yield tok
        if tok.kind == TokenKind.END:
            return
