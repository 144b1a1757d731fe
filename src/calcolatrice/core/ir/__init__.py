"""Typed AST for the four calcolatrice expression shapes."""

from calcolatrice.core.ir.expressions import (
    FUNCTION_NAMES,
    BinaryCall,
    BinaryFunction,
    BinaryOperation,
    Expr,
    Factorial,
    Operator,
    Shape,
    UnaryCall,
    UnaryFunction,
)

__all__ = [
    "FUNCTION_NAMES",
    "BinaryCall",
    "BinaryFunction",
    "BinaryOperation",
    "Expr",
    "Factorial",
    "Operator",
    "Shape",
    "UnaryCall",
    "UnaryFunction",
]
