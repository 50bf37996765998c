"""Core sexpcalc functionality: IR, lexer, parser, evaluator, settings."""

from . import ir
from .errors import (
    DivisionByZero,
    EvaluationError,
    LexError,
    NumberFormatError,
    ParseError,
    SettingsError,
    SexpCalcError,
    SourceLocation,
)
from .settings import EvalSettings, load_settings

__all__ = [
    "ir",
    "DivisionByZero",
    "EvalSettings",
    "EvaluationError",
    "LexError",
    "NumberFormatError",
    "ParseError",
    "SettingsError",
    "SexpCalcError",
    "SourceLocation",
    "load_settings",
]
