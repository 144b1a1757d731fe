"""
Expression types for calcolatrice.

A parsed expression is exactly one of four shapes:

- Factorial: 5!
- Unary function call: sin 0, inv 4
- Binary function call: root 2 4
- Binary operation: 1 + 1, 2 ^ 10

There is no nesting: every operand is a plain float.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Closed vocabularies
# ---------------------------------------------------------------------------


class Shape(StrEnum):
    """The four textual forms the evaluator recognises."""

    FACTORIAL = "factorial"
    UNARY_FUNCTION = "unary_function"
    BINARY_FUNCTION = "binary_function"
    BINARY_OPERATOR = "binary_operator"


class UnaryFunction(StrEnum):
    """Single-argument functions. Angles are in radians."""

    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    SEC = "sec"
    INV = "inv"


class BinaryFunction(StrEnum):
    """Two-argument functions."""

    ROOT = "root"


class Operator(StrEnum):
    """Binary operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"


# Lower-case names that select the function shapes over the operator shape.
FUNCTION_NAMES: frozenset[str] = frozenset(
    [f.value for f in UnaryFunction] + [f.value for f in BinaryFunction]
)


def _fmt(value: float) -> str:
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Factorial(BaseModel):
    """Postfix factorial: operand!"""

    operand: float = Field(description="Value whose factorial is taken")

    model_config = ConfigDict(frozen=True)

    @property
    def shape(self) -> Shape:
        return Shape.FACTORIAL

    def __str__(self) -> str:
        return f"{_fmt(self.operand)}!"


class UnaryCall(BaseModel):
    """Single-argument function call: name operand."""

    name: UnaryFunction
    operand: float

    model_config = ConfigDict(frozen=True)

    @property
    def shape(self) -> Shape:
        return Shape.UNARY_FUNCTION

    def __str__(self) -> str:
        return f"{self.name.value} {_fmt(self.operand)}"


class BinaryCall(BaseModel):
    """
    Two-argument function call: name degree value.

    Only ``root`` exists; ``root 3 27`` is the cube root of 27.
    """

    name: BinaryFunction
    degree: float = Field(description="First argument (root degree)")
    value: float = Field(description="Second argument (radicand)")

    model_config = ConfigDict(frozen=True)

    @property
    def shape(self) -> Shape:
        return Shape.BINARY_FUNCTION

    def __str__(self) -> str:
        return f"{self.name.value} {_fmt(self.degree)} {_fmt(self.value)}"


class BinaryOperation(BaseModel):
    """Binary operation: left op right."""

    op: Operator
    left: float
    right: float

    model_config = ConfigDict(frozen=True)

    @property
    def shape(self) -> Shape:
        return Shape.BINARY_OPERATOR

    def __str__(self) -> str:
        return f"{_fmt(self.left)} {self.op.value} {_fmt(self.right)}"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Factorial | UnaryCall | BinaryCall | BinaryOperation
