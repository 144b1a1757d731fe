"""
Expression evaluator for calcolatrice.

Evaluates a parsed shape to a float. Pure evaluation: no I/O, no state.
Arithmetic follows IEEE-754 doubles; only the failures listed in
ErrorKind are reported, everything else (overflow, NaN) is a value.
"""

from __future__ import annotations

import logging
import math

from calcolatrice.core.errors import ErrorKind, EvaluationError, make_evaluation_error
from calcolatrice.core.expression_lang.parser import parse_expr
from calcolatrice.core.ir.expressions import (
    BinaryCall,
    BinaryOperation,
    Expr,
    Factorial,
    Operator,
    UnaryCall,
    UnaryFunction,
)
from calcolatrice.core.ir.results import EvaluationResult

logger = logging.getLogger(__name__)

# Factorial operands must fit a signed 64-bit integer.
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def evaluate(expression: str | None) -> float:
    """Evaluate one expression line.

    Args:
        expression: e.g. "1 + 1", "SIN 0", "root 3 -27", "5!"

    Returns:
        The result as a float. May be inf or nan where IEEE-754 says so.

    Raises:
        EvaluationError: If the line is malformed or the math is undefined.
    """
    expr = parse_expr(expression)
    try:
        return interpret(expr)
    except EvaluationError as e:
        logger.debug("Evaluation of %r failed: %s", expression, e.kind)
        raise


def try_evaluate(expression: str | None) -> EvaluationResult:
    """Evaluate one expression line without raising on failure."""
    source = expression or ""
    try:
        return EvaluationResult.success(source, evaluate(expression))
    except EvaluationError as e:
        return EvaluationResult.failure(source, e)


def interpret(expr: Expr) -> float:
    """Dispatch evaluation to the handler for the expression's shape."""
    logger.debug("Evaluating %s: %s", expr.shape, expr)

    if isinstance(expr, Factorial):
        return _interpret_factorial(expr)

    if isinstance(expr, UnaryCall):
        return _interpret_unary_call(expr)

    if isinstance(expr, BinaryCall):
        return _interpret_binary_call(expr)

    if isinstance(expr, BinaryOperation):
        return _interpret_binary_operation(expr)

    raise TypeError(f"Unknown expression type: {type(expr).__name__}")


def _interpret_factorial(expr: Factorial) -> float:
    """Product 2..n as a float; overflows to inf without error."""
    x = expr.operand
    if not x.is_integer() or not _INT64_MIN <= x <= _INT64_MAX:
        raise make_evaluation_error(ErrorKind.NON_INTEGER_FACTORIAL_OPERAND)
    n = int(x)
    if n < 0:
        raise make_evaluation_error(ErrorKind.NEGATIVE_FACTORIAL_OPERAND)

    result = 1.0
    for i in range(2, n + 1):
        result *= i
        if math.isinf(result):
            break
    return result


def _interpret_unary_call(expr: UnaryCall) -> float:
    x = expr.operand
    if expr.name == UnaryFunction.SIN:
        return math.sin(x)
    if expr.name == UnaryFunction.COS:
        return math.cos(x)
    if expr.name == UnaryFunction.TAN:
        return math.tan(x)
    if expr.name == UnaryFunction.SEC:
        cos = math.cos(x)
        if cos == 0:
            raise make_evaluation_error(ErrorKind.DIVISION_BY_ZERO)
        return 1.0 / cos
    # UnaryFunction is closed; INV is the only member left.
    if x == 0:
        raise make_evaluation_error(ErrorKind.DIVISION_BY_ZERO)
    return 1.0 / x


def _interpret_binary_call(expr: BinaryCall) -> float:
    """root degree value == value ** (1 / degree), sign-preserving for odd roots.

    BinaryFunction is closed and ROOT is its only member.
    """
    degree, value = expr.degree, expr.value
    if degree == 0:
        raise make_evaluation_error(ErrorKind.ZERO_ROOT_DEGREE)
    # Floating modulo: a fractional degree such as 2.5 never counts as even.
    if value < 0 and math.fmod(degree, 2) == 0:
        raise make_evaluation_error(ErrorKind.EVEN_ROOT_OF_NEGATIVE)

    exponent = 1.0 / degree
    if value < 0:
        return -ieee_pow(-value, exponent)
    return ieee_pow(value, exponent)


def _interpret_binary_operation(expr: BinaryOperation) -> float:
    left, right = expr.left, expr.right
    if expr.op == Operator.ADD:
        return left + right
    if expr.op == Operator.SUB:
        return left - right
    if expr.op == Operator.MUL:
        return left * right
    if expr.op == Operator.DIV:
        if right == 0:
            raise make_evaluation_error(ErrorKind.DIVISION_BY_ZERO)
        return left / right
    # Operator is closed; POW is the only member left.
    return ieee_pow(left, right)


def ieee_pow(base: float, exponent: float) -> float:
    """math.pow with IEEE-754 results instead of OverflowError/ValueError.

    Overflow gives +/-inf, zero to a negative power gives +/-inf, and a
    negative base with a non-integer exponent gives nan.
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            if math.copysign(1.0, base) < 0 and _is_odd_integer(exponent):
                return -math.inf
            return math.inf
        return math.nan


def _is_odd_integer(x: float) -> bool:
    return x.is_integer() and math.fmod(x, 2) != 0
