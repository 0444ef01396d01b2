"""
Lexer for the arithmetic expression language.

Converts an expression string into a sequence of typed tokens.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum, auto

from patternbook.core.errors import MalformedLiteral


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Literals
    INTEGER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single token from the lexer."""

    kind: TokenKind
    text: str
    pos: int

    def __str__(self) -> str:
        return f"`{self.text}`"


TokenSequence = tuple[Token, ...]

_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

_DIGITS_RE = re.compile(r"[0-9]+")


def lex(source: str) -> TokenSequence:
    """Lex an expression string into a token sequence.

    Raises:
        MalformedLiteral: If a character that is neither whitespace, an
            operator, nor a parenthesis does not start a digit run.
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        # Skip whitespace
        if c in " \t\n\r":
            i += 1
            continue

        if c in _SINGLE_CHAR:
            tokens.append(Token(_SINGLE_CHAR[c], c, i))
            i += 1
            continue

        # Anything else must be an integer literal
        m = _DIGITS_RE.match(source, i)
        if m is None:
            raise MalformedLiteral(f"Expected an integer literal, got {c!r}", i)
        tokens.append(Token(TokenKind.INTEGER, m.group(0), i))
        i = m.end()

    return tuple(tokens)
