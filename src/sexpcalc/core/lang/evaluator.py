"""
Expression evaluator for the sexpcalc language.

Reduces an AST to a single integer using fixed-width two's-complement
arithmetic. Pure evaluation: no I/O, no side effects, no Python eval().
"""

from __future__ import annotations

from typing import assert_never

from sexpcalc.core.errors import DivisionByZero
from sexpcalc.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Literal
from sexpcalc.core.settings import DEFAULT_SETTINGS, EvalSettings


def evaluate_expr(expr: Expr, settings: EvalSettings | None = None) -> int:
    """Evaluate a parsed expression.

    Addition, subtraction and multiplication wrap silently on overflow.
    Division truncates toward zero.

    Args:
        expr: Parsed expression AST.
        settings: Integer width to compute in. Defaults apply when omitted.

    Returns:
        The computed integer.

    Raises:
        DivisionByZero: If any divisor evaluates to 0.
    """
    return _interpret(expr, settings or DEFAULT_SETTINGS)


def _interpret(expr: Expr, settings: EvalSettings) -> int:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(expr, Literal):
        return expr.value

    if isinstance(expr, BinaryExpr):
        return _interpret_binary(expr, settings)

    assert_never(expr)


def _interpret_binary(expr: BinaryExpr, settings: EvalSettings) -> int:
    """Evaluate a binary expression, left operand first."""
    left = _interpret(expr.left, settings)
    right = _interpret(expr.right, settings)

    if expr.op == BinaryOp.ADD:
        return wrap(left + right, settings.int_bits)
    if expr.op == BinaryOp.SUB:
        return wrap(left - right, settings.int_bits)
    if expr.op == BinaryOp.MUL:
        return wrap(left * right, settings.int_bits)
    if expr.op == BinaryOp.DIV:
        if right == 0:
            raise DivisionByZero(
                f"Division by zero: divisor {_abbreviate(expr.right)} evaluates to 0"
            )
        return wrap(truncating_div(left, right), settings.int_bits)

    assert_never(expr.op)


def _abbreviate(expr: Expr, limit: int = 40) -> str:
    """Canonical form of expr, cut to at most limit characters."""
    text = str(expr)
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


def truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero, like C's '/'."""
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def wrap(value: int, bits: int) -> int:
    """Reduce value to a signed two's-complement integer of the given width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value
