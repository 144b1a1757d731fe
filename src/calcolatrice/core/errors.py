"""
Error types for calcolatrice expression evaluation and configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorKind(StrEnum):
    """Tag for every way an evaluation can fail."""

    EMPTY_EXPRESSION = "empty_expression"
    INVALID_FORMAT = "invalid_format"
    INVALID_NUMBER = "invalid_number"
    UNKNOWN_FUNCTION = "unknown_function"
    UNKNOWN_OPERATOR = "unknown_operator"
    DIVISION_BY_ZERO = "division_by_zero"
    NON_INTEGER_FACTORIAL_OPERAND = "non_integer_factorial_operand"
    NEGATIVE_FACTORIAL_OPERAND = "negative_factorial_operand"
    ZERO_ROOT_DEGREE = "zero_root_degree"
    EVEN_ROOT_OF_NEGATIVE = "even_root_of_negative"

    @property
    def category(self) -> str:
        """Either "validation" (malformed input) or "arithmetic" (undefined math)."""
        if self in _ARITHMETIC_KINDS:
            return "arithmetic"
        return "validation"


_ARITHMETIC_KINDS = frozenset(
    {
        ErrorKind.DIVISION_BY_ZERO,
        ErrorKind.NEGATIVE_FACTORIAL_OPERAND,
        ErrorKind.ZERO_ROOT_DEGREE,
        ErrorKind.EVEN_ROOT_OF_NEGATIVE,
    }
)

_DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.EMPTY_EXPRESSION: "Expression cannot be empty",
    ErrorKind.INVALID_FORMAT: 'Invalid format. Use: "1 + 1", "sin 0", "root 2 4" or "5!"',
    ErrorKind.INVALID_NUMBER: "Invalid number",
    ErrorKind.UNKNOWN_FUNCTION: "Unknown function",
    ErrorKind.UNKNOWN_OPERATOR: "Unknown operator",
    ErrorKind.DIVISION_BY_ZERO: "Division by zero",
    ErrorKind.NON_INTEGER_FACTORIAL_OPERAND: "Factorial requires integer input",
    ErrorKind.NEGATIVE_FACTORIAL_OPERAND: "Factorial is not defined for negative numbers",
    ErrorKind.ZERO_ROOT_DEGREE: "Root degree cannot be zero",
    ErrorKind.EVEN_ROOT_OF_NEGATIVE: "Cannot calculate even root of negative number",
}


@dataclass
class ErrorContext:
    """
    Location of an error inside the evaluated expression.

    Attributes:
        expression: The raw input line
        column: 0-based offset of the offending text
        length: Number of characters to underline
    """

    expression: str
    column: int
    length: int = 1

    def format(self) -> str:
        """
        Format the expression with a marker under the offending text.

        Returns:
            Two lines, e.g.::

                  2 & 3
                    ^
        """
        marker = " " * self.column + "^" * max(1, self.length)
        return f"  {self.expression}\n  {marker}"


class CalcolatriceError(Exception):
    """Base exception for all calcolatrice errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(message)

    def describe(self) -> str:
        """Message followed by the marked-up expression when a context is known."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message


class EvaluationError(CalcolatriceError):
    """
    Raised when an expression cannot be evaluated.

    Callers branch on ``kind`` rather than on the exception class.
    ``token`` holds the offending number, function name or operator
    symbol for the kinds that have one.
    """

    def __init__(
        self,
        kind: ErrorKind,
        token: str | None = None,
        context: ErrorContext | None = None,
        message: str | None = None,
    ):
        self.kind = kind
        self.token = token
        if message is None:
            message = _DEFAULT_MESSAGES[kind]
            if token is not None:
                message = f"{message}: {token}"
        super().__init__(message, context)

    @property
    def category(self) -> str:
        return self.kind.category

    def __repr__(self) -> str:
        return f"EvaluationError({self.kind.value!r}, token={self.token!r})"


class ConfigError(CalcolatriceError):
    """
    Raised when a calcolatrice.toml file cannot be used.

    Examples:
    - Invalid TOML syntax
    - Wrong value types
    - Unknown logging level
    """

    pass


def make_evaluation_error(
    kind: ErrorKind,
    expression: str | None = None,
    column: int | None = None,
    token: str | None = None,
) -> EvaluationError:
    """
    Helper to create an EvaluationError with optional location context.

    Args:
        kind: Failure tag
        expression: Raw input line
        column: 0-based offset of the offending token
        token: Offending token text

    Returns:
        EvaluationError with context if a location was provided
    """
    if expression is not None and column is not None:
        length = len(token) if token else 1
        context = ErrorContext(expression=expression, column=column, length=length)
        return EvaluationError(kind, token=token, context=context)
    return EvaluationError(kind, token=token)
