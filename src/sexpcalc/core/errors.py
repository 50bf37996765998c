"""
Error types for sexpcalc lexing, parsing, and evaluation.
"""

from dataclasses import dataclass
from typing import Optional


class SexpCalcError(Exception):
    """Base exception for all sexpcalc errors."""

    def __init__(self, message: str, location: Optional["SourceLocation"] = None):
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    @property
    def pos(self) -> int | None:
        """Character offset of the error in the source, if known."""
        return self.location.offset if self.location else None

    def _format_message(self) -> str:
        """Format error message with location if available."""
        if self.location:
            return f"{self.location.format()}\n{self.message}"
        return self.message


class LexError(SexpCalcError):
    """
    Raised when the parser reaches a character the lexer cannot classify.

    Examples:
    - Letters: (+ 1 a)
    - Punctuation outside the language: (% 4 2)
    """

    pass


class ParseError(SexpCalcError):
    """
    Raised when the token stream does not match the grammar.

    Examples:
    - Missing operator after '('
    - Missing closing ')'
    - Empty input
    - Trailing input after a complete expression
    - Nesting deeper than the configured limit
    """

    pass


class NumberFormatError(ParseError):
    """Raised when a numeric literal does not fit the configured integer width."""

    pass


class EvaluationError(SexpCalcError):
    """Raised when a well-formed tree cannot be reduced to an integer."""

    pass


class DivisionByZero(EvaluationError):
    """Raised when the right operand of '/' evaluates to 0."""

    pass


class SettingsError(SexpCalcError):
    """Raised when a settings file is missing, malformed, or holds invalid values."""

    pass


@dataclass(frozen=True)
class SourceLocation:
    """
    Location of an error inside the evaluated source text.

    Attributes:
        source: The full source string
        offset: Character offset (0-indexed)
    """

    source: str
    offset: int

    @property
    def line(self) -> int:
        """Line number (1-indexed)."""
        return self.source.count("\n", 0, self.offset) + 1

    @property
    def column(self) -> int:
        """Column number (1-indexed)."""
        line_start = self.source.rfind("\n", 0, self.offset) + 1
        return self.offset - line_start + 1

    def format(self) -> str:
        """
        Format the location as a human-readable string.

        Returns:
            Formatted string like "1:7" followed by the source line and a
            caret under the offending column.
        """
        return f"{self.line}:{self.column}\n{self._format_snippet()}"

    def _format_snippet(self) -> str:
        line_text = self.source.split("\n")[self.line - 1]
        prefix = f"{self.line:4d} | "
        marker = " " * (len(prefix) + self.column - 1) + "^"
        return f"{prefix}{line_text}\n{marker}"


def make_location(source: str, offset: int) -> SourceLocation:
    """Helper to build a SourceLocation clamped to the bounds of source."""
    return SourceLocation(source=source, offset=max(0, min(offset, len(source))))
