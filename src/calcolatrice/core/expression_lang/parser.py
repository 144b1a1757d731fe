"""
Shape classifier for calcolatrice expressions.

Forms (first match wins):
    factorial        → NUMBER "!"
    unary_function   → NAME NUMBER
    binary_function  → NAME NUMBER NUMBER      (NAME is a known function)
    binary_operator  → NUMBER OP NUMBER

Operands are parsed before the function name or operator symbol is
looked up, so a bad number is always reported ahead of a bad name.
"""

from __future__ import annotations

import logging
import math

from calcolatrice.core.errors import ErrorKind, EvaluationError, make_evaluation_error
from calcolatrice.core.expression_lang.tokenizer import Token, leading_whitespace, tokenize
from calcolatrice.core.ir.expressions import (
    FUNCTION_NAMES,
    BinaryCall,
    BinaryFunction,
    BinaryOperation,
    Expr,
    Factorial,
    Operator,
    UnaryCall,
    UnaryFunction,
)

logger = logging.getLogger(__name__)


class _Parser:
    """Classifies one input line and builds the matching AST node."""

    def __init__(self, source: str) -> None:
        self.source = source

    def parse(self) -> Expr:
        text = self.source.strip()
        if text.endswith("!"):
            return self.parse_factorial(text)

        tokens = tokenize(self.source)
        if len(tokens) == 2:
            return self.parse_unary_call(tokens)
        if len(tokens) == 3:
            if tokens[0].value.lower() in FUNCTION_NAMES:
                return self.parse_binary_call(tokens)
            return self.parse_binary_operation(tokens)

        logger.debug("Rejecting %d-token expression %r", len(tokens), self.source)
        raise make_evaluation_error(ErrorKind.INVALID_FORMAT)

    # -- Shapes --

    def parse_factorial(self, text: str) -> Factorial:
        """NUMBER '!' (whitespace before the bang is allowed)"""
        body = text[:-1]
        operand = body.strip()
        pos = leading_whitespace(self.source) + leading_whitespace(body)
        return Factorial(operand=self.number(Token(operand, pos)))

    def parse_unary_call(self, tokens: list[Token]) -> UnaryCall:
        """NAME NUMBER"""
        name_tok, arg_tok = tokens
        operand = self.number(arg_tok)
        name = name_tok.value.lower()
        try:
            func = UnaryFunction(name)
        except ValueError:
            raise self.error_at(ErrorKind.UNKNOWN_FUNCTION, name_tok, name) from None
        return UnaryCall(name=func, operand=operand)

    def parse_binary_call(self, tokens: list[Token]) -> BinaryCall:
        """NAME NUMBER NUMBER"""
        name_tok, first, second = tokens
        degree = self.number(first)
        value = self.number(second)
        name = name_tok.value.lower()
        try:
            func = BinaryFunction(name)
        except ValueError:
            raise self.error_at(ErrorKind.UNKNOWN_FUNCTION, name_tok, name) from None
        return BinaryCall(name=func, degree=degree, value=value)

    def parse_binary_operation(self, tokens: list[Token]) -> BinaryOperation:
        """NUMBER OP NUMBER"""
        left_tok, op_tok, right_tok = tokens
        left = self.number(left_tok)
        right = self.number(right_tok)
        try:
            op = Operator(op_tok.value)
        except ValueError:
            raise self.error_at(ErrorKind.UNKNOWN_OPERATOR, op_tok, op_tok.value) from None
        return BinaryOperation(op=op, left=left, right=right)

    # -- Helpers --

    def number(self, tok: Token) -> float:
        """Parse a token as a finite float."""
        try:
            value = float(tok.value)
        except ValueError:
            raise self.error_at(ErrorKind.INVALID_NUMBER, tok, tok.value) from None
        if not math.isfinite(value):
            raise self.error_at(ErrorKind.INVALID_NUMBER, tok, tok.value)
        return value

    def error_at(self, kind: ErrorKind, tok: Token, text: str) -> EvaluationError:
        return make_evaluation_error(kind, expression=self.source, column=tok.pos, token=text)


def parse_expr(source: str | None) -> Expr:
    """Classify an expression line and parse it into an AST.

    Args:
        source: One line of input, e.g. "1 + 1", "sin 0", "root 2 4", "5!"

    Returns:
        Parsed expression AST.

    Raises:
        EvaluationError: EMPTY_EXPRESSION, INVALID_FORMAT, INVALID_NUMBER,
            UNKNOWN_FUNCTION or UNKNOWN_OPERATOR.
    """
    if source is None or not source.strip():
        raise make_evaluation_error(ErrorKind.EMPTY_EXPRESSION)
    return _Parser(source).parse()
