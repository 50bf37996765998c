"""
Recursive descent parser for the sexpcalc language.

Grammar:
    program     → expr END
    expr        → NUMBER | "(" operator expr expr ")"
    operator    → "+" | "-" | "*" | "/"

Every compound expression is fully parenthesized, so there is no operator
precedence to resolve.
"""

from __future__ import annotations

import logging

from sexpcalc.core.errors import (
    LexError,
    NumberFormatError,
    ParseError,
    SexpCalcError,
    make_location,
)
from sexpcalc.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Literal
from sexpcalc.core.lang.lexer import OPERATOR_KINDS, Lexer, Token, TokenKind
from sexpcalc.core.settings import DEFAULT_SETTINGS, EvalSettings

logger = logging.getLogger(__name__)

_OPERATORS: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
    TokenKind.STAR: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
}


def _describe(tok: Token) -> str:
    if tok.kind == TokenKind.END:
        return "end of input"
    return f"{tok.kind} ({tok.value!r})"


class _Parser:
    """Recursive descent parser over a Lexer's one-token lookahead."""

    def __init__(self, text: str, settings: EvalSettings) -> None:
        self.text = text
        self.settings = settings
        self.lexer = Lexer(text)
        self.lexer.advance()
        self.depth = 0

    @property
    def current(self) -> Token:
        tok = self.lexer.current
        assert tok is not None
        return tok

    def error(self, message: str, tok: Token) -> SexpCalcError:
        if tok.kind == TokenKind.UNKNOWN:
            return LexError(
                f"Unexpected character {tok.value!r} at offset {tok.pos}",
                make_location(self.text, tok.pos),
            )
        return ParseError(message, make_location(self.text, tok.pos))

    def consume(self, kind: TokenKind) -> Token:
        tok = self.current
        if tok.kind != kind:
            raise self.error(f"Unexpected token type: expected {kind}, got {_describe(tok)}", tok)
        self.lexer.advance()
        return tok

    # -- Grammar rules --

    def parse_program(self) -> Expr:
        """expr END"""
        expr = self.parse_expr()
        tok = self.current
        if not self.lexer.done():
            raise self.error(f"Trailing input after expression: {_describe(tok)}", tok)
        return expr

    def parse_expr(self) -> Expr:
        """NUMBER | '(' operator expr expr ')'"""
        tok = self.current

        if tok.kind == TokenKind.NUMBER:
            self.lexer.advance()
            return Literal(value=self.number_value(tok))

        if tok.kind == TokenKind.LPAREN:
            return self.parse_application()

        raise self.error(f"Expected expression, got {_describe(tok)}", tok)

    def parse_application(self) -> BinaryExpr:
        """'(' operator expr expr ')'"""
        open_tok = self.consume(TokenKind.LPAREN)
        self.depth += 1
        if self.depth > self.settings.max_depth:
            raise ParseError(
                f"Maximum nesting depth of {self.settings.max_depth} exceeded",
                make_location(self.text, open_tok.pos),
            )

        op_tok = self.current
        if op_tok.kind not in OPERATOR_KINDS:
            raise self.error(f"Expected operator after '(', got {_describe(op_tok)}", op_tok)
        self.lexer.advance()

        left = self.parse_expr()
        right = self.parse_expr()

        if self.current.kind != TokenKind.RPAREN:
            raise self.error(f"Expected ')', got {_describe(self.current)}", self.current)
        self.lexer.advance()
        self.depth -= 1

        return BinaryExpr(op=_OPERATORS[op_tok.kind], left=left, right=right)

    def number_value(self, tok: Token) -> int:
        """Convert a NUMBER token's span to an int within the configured width."""
        digits = tok.value
        # Length check keeps oversized digit runs away from int().
        limit = str(self.settings.int_max)
        if len(digits.lstrip("0")) > len(limit):
            raise self._number_error(tok)
        value = int(digits, 10)
        if value > self.settings.int_max:
            raise self._number_error(tok)
        return value

    def _number_error(self, tok: Token) -> NumberFormatError:
        return NumberFormatError(
            f"Integer literal {tok.value} does not fit in {self.settings.int_bits} bits",
            make_location(self.text, tok.pos),
        )


def parse(source: str, settings: EvalSettings | None = None) -> Expr:
    """Parse a source string into an AST.

    Args:
        source: Program text (e.g., "(* (- 7 4) 2)")
        settings: Nesting and integer width limits. Defaults apply when omitted.

    Returns:
        Parsed expression AST.

    Raises:
        LexError: If an unrecognised character is reached.
        ParseError: If the program does not match the grammar.
        NumberFormatError: If a literal does not fit the integer width.
    """
    parser = _Parser(source, settings or DEFAULT_SETTINGS)
    expr = parser.parse_program()
    logger.debug("Parsed %r into %s", source, expr)
    return expr
