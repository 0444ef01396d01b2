"""
Integer arithmetic expression language.

Lexer, parser, and evaluator for expressions over integers, "+", "-",
and parentheses.

Usage:
    from patternbook.core.expression_lang import evaluate, lex, parse

    tree = parse(lex("(13+4)-(12+1)"))
    result = tree.value
    # result == 4 == evaluate("(13+4)-(12+1)")
"""

from patternbook.core.expression_lang.evaluator import evaluate
from patternbook.core.expression_lang.parser import parse
from patternbook.core.expression_lang.tokenizer import Token, TokenKind, TokenSequence, lex

__all__ = ["Token", "TokenKind", "TokenSequence", "evaluate", "lex", "parse"]
