"""
calcolatrice - single-line calculator.

Evaluates one of four fixed expression shapes:

    1 + 1        binary operator (+ - * / ^)
    sin 0        unary function (sin cos tan sec inv)
    root 3 27    binary function (root)
    5!           factorial
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("calcolatrice")
except PackageNotFoundError:
    __version__ = "0.0.0"

from .core import ir  # noqa: E402
from .core.errors import CalcolatriceError, ConfigError, ErrorKind, EvaluationError
from .core.expression_lang import evaluate, parse_expr, try_evaluate
from .core.ir.results import EvaluationResult

__all__ = [
    "__version__",
    "ir",
    "evaluate",
    "parse_expr",
    "try_evaluate",
    "EvaluationResult",
    "CalcolatriceError",
    "ConfigError",
    "ErrorKind",
    "EvaluationError",
]
