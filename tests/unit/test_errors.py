"""Tests for error types and source locations."""

import pytest

from sexpcalc.core.errors import (
    DivisionByZero,
    EvaluationError,
    LexError,
    NumberFormatError,
    ParseError,
    SexpCalcError,
    SourceLocation,
    make_location,
)
from sexpcalc.core.lang import evaluate


class TestHierarchy:
    @pytest.mark.parametrize(
        "error,parent",
        [
            (LexError, SexpCalcError),
            (ParseError, SexpCalcError),
            (NumberFormatError, ParseError),
            (EvaluationError, SexpCalcError),
            (DivisionByZero, EvaluationError),
        ],
    )
    def test_subclass(self, error: type, parent: type) -> None:
        assert issubclass(error, parent)

    def test_lex_error_is_not_parse_error(self) -> None:
        assert not issubclass(LexError, ParseError)


class TestSourceLocation:
    def test_line_and_column(self) -> None:
        location = SourceLocation(source="(+ 1\n  a)", offset=7)
        assert location.line == 2
        assert location.column == 3

    def test_format(self) -> None:
        location = SourceLocation(source="(+ 1 a)", offset=5)
        assert location.format() == "1:6\n   1 | (+ 1 a)\n" + " " * 12 + "^"

    def test_offset_past_trailing_newline(self) -> None:
        location = make_location("(+ 1\n", 5)
        assert location.line == 2
        assert location.column == 1
        assert location.format().startswith("2:1\n")

    def test_make_location_clamps(self) -> None:
        assert make_location("abc", 10).offset == 3
        assert make_location("abc", -1).offset == 0


class TestErrorMessages:
    def test_without_location(self) -> None:
        error = ParseError("Expected expression")
        assert str(error) == "Expected expression"
        assert error.message == "Expected expression"
        assert error.pos is None

    def test_with_location(self) -> None:
        error = ParseError("Expected expression", SourceLocation(source=")", offset=0))
        assert str(error).startswith("1:1\n")
        assert str(error).endswith("Expected expression")
        assert error.pos == 0

    def test_evaluate_error_carries_snippet(self) -> None:
        with pytest.raises(LexError) as exc_info:
            evaluate("(+ 1 a)")
        assert "   1 | (+ 1 a)" in str(exc_info.value)
        assert exc_info.value.message == "Unexpected character 'a' at offset 5"
