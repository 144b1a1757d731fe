"""
Tokenizer for calcolatrice expressions.

Splits an input line on runs of whitespace. Tokens keep their offset in
the untrimmed input line so errors can point at them.
"""

from __future__ import annotations

import re

_TOKEN_RE = re.compile(r"\S+")


class Token:
    """A single whitespace-delimited token."""

    __slots__ = ("value", "pos")

    def __init__(self, value: str, pos: int) -> None:
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f"Token({self.value!r}, pos={self.pos})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.value == other.value and self.pos == other.pos

    def __hash__(self) -> int:
        return hash((self.value, self.pos))


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression line into whitespace-delimited tokens."""
    return [Token(m.group(0), m.start()) for m in _TOKEN_RE.finditer(source)]


def leading_whitespace(source: str) -> int:
    """Number of whitespace characters before the first token."""
    return len(source) - len(source.lstrip())
