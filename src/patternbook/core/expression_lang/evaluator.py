"""
Expression evaluator for the arithmetic expression language.

Pure evaluation: no I/O, no side effects. Does NOT use Python's eval().
Each tree node computes its own value; this module composes lexing,
parsing, and that tree walk for callers holding plain text.
"""

from __future__ import annotations

from patternbook.core.errors import (
    MalformedLiteral,
    SourceContext,
    UnmatchedParenthesis,
)
from patternbook.core.expression_lang.parser import parse
from patternbook.core.expression_lang.tokenizer import lex


def evaluate(source: str) -> int:
    """Evaluate an expression string to an integer.

    Args:
        source: Expression string (e.g., "(13+4)-(12+1)")

    Returns:
        The computed value.

    Raises:
        MalformedLiteral: If lexing fails.
        UnmatchedParenthesis: If a "(" is never closed.
        MissingOperand: If an operator lacks one of its operands.
    """
    try:
        tree = parse(lex(source))
    except (MalformedLiteral, UnmatchedParenthesis) as e:
        e.with_context(SourceContext(source, e.pos))
        raise
    return tree.value
