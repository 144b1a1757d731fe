"""Core calcolatrice functionality: AST, shape classifier, evaluator, configuration."""

from . import ir
from .errors import (
    CalcolatriceError,
    ConfigError,
    ErrorContext,
    ErrorKind,
    EvaluationError,
)

__all__ = [
    "ir",
    "CalcolatriceError",
    "ConfigError",
    "ErrorContext",
    "ErrorKind",
    "EvaluationError",
]
