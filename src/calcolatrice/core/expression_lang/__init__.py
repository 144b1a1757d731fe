"""
calcolatrice expression language.

Tokenizer, shape classifier and evaluator for single-line expressions.

Usage:
    from calcolatrice.core.expression_lang import evaluate, parse_expr

    evaluate("root 2 4")
    # 2.0
    parse_expr("SIN 0").shape
    # Shape.UNARY_FUNCTION
"""

from calcolatrice.core.expression_lang.evaluator import evaluate, interpret, try_evaluate
from calcolatrice.core.expression_lang.parser import parse_expr

__all__ = ["evaluate", "interpret", "parse_expr", "try_evaluate"]
