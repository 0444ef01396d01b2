"""
patternbook - the Interpreter pattern as a small integer calculator.

Lexes, parses, and evaluates expressions built from integers, "+", "-",
and parentheses.
"""

from __future__ import annotations

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import (
    ExpressionError,
    MalformedLiteral,
    MissingOperand,
    PatternbookError,
    UnmatchedParenthesis,
)
from .core.expression_lang import evaluate, lex, parse

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ir",
    "evaluate",
    "lex",
    "parse",
    "PatternbookError",
    "ExpressionError",
    "MalformedLiteral",
    "MissingOperand",
    "UnmatchedParenthesis",
]
