"""
sexpcalc - an evaluator for fully parenthesized prefix integer arithmetic.

    >>> from sexpcalc import evaluate
    >>> evaluate("(* (- 7 4) (+ (/ 26 2) 1))")
    42
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import (
    DivisionByZero,
    EvaluationError,
    LexError,
    NumberFormatError,
    ParseError,
    SexpCalcError,
)
from .core.lang import evaluate, evaluate_expr, parse, tokenize
from .core.settings import EvalSettings, load_settings

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "evaluate",
    "evaluate_expr",
    "parse",
    "tokenize",
    "EvalSettings",
    "load_settings",
    "SexpCalcError",
    "LexError",
    "ParseError",
    "NumberFormatError",
    "EvaluationError",
    "DivisionByZero",
]
