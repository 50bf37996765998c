"""
sexpcalc language pipeline.

Lexer, parser, and evaluator for fully parenthesized prefix arithmetic.

Usage:
    from sexpcalc.core.lang import evaluate

    result = evaluate("(* (- 7 4) (+ (/ 26 2) 1))")
    # result == 42
"""

from __future__ import annotations

import logging

from sexpcalc.core.lang.evaluator import evaluate_expr
from sexpcalc.core.lang.lexer import Lexer, Span, Token, TokenKind, tokenize
from sexpcalc.core.lang.parser import parse
from sexpcalc.core.settings import EvalSettings

logger = logging.getLogger(__name__)


def evaluate(source: str, settings: EvalSettings | None = None) -> int:
    """Lex, parse, and evaluate a program in one call.

    Raises:
        LexError, ParseError, NumberFormatError, DivisionByZero: The first
            error encountered aborts the call.
    """
    expr = parse(source, settings)
    result = evaluate_expr(expr, settings)
    logger.debug("Evaluated %s = %d", expr, result)
    return result


__all__ = [
    "Lexer",
    "Span",
    "Token",
    "TokenKind",
    "evaluate",
    "evaluate_expr",
    "parse",
    "tokenize",
]
