"""
Recursive descent parser for the arithmetic expression language.

The grammar is flat rather than precedence-based. A token range is read in
a single pass into one operation:

    range   → (operand | operator | ")")*
    operand → INT | "(" range ")"

- The first operand becomes the left side; every later operand replaces
  the right side.
- Every operator replaces the previous one.
- "(" pairs with the first ")" after it, without counting nested "(".

So "1+2+3" reads as 1 + 3, and "((1+2)+3)" pairs the outer "(" with the
first ")" and then fails on the unclosed inner group. Parenthesized groups
are the only way to build nested operations.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from patternbook.core.errors import MalformedLiteral, UnmatchedParenthesis
from patternbook.core.expression_lang.tokenizer import Token, TokenKind
from patternbook.core.ir.expressions import (
    BinaryOp,
    BinaryOperation,
    Expr,
    IntegerLiteral,
)


@dataclass
class _Accumulator:
    """Operation under construction for one token range."""

    left: Expr | None = None
    right: Expr | None = None
    operator: BinaryOp | None = None
    has_left: bool = False

    def add_operand(self, node: Expr) -> None:
        if not self.has_left:
            self.left = node
            self.has_left = True
        else:
            self.right = node

    def build(self) -> Expr:
        # A lone operand stands for itself
        if self.has_left and self.operator is None and self.right is None:
            assert self.left is not None
            return self.left
        return BinaryOperation(operator=self.operator, left=self.left, right=self.right)


class _Parser:
    """Single-pass parser over a token range."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = tokens
        self.pos = 0

    def parse_range(self) -> Expr:
        acc = _Accumulator()

        while self.pos < len(self.tokens):
            tok = self.tokens[self.pos]
            match tok.kind:
                case TokenKind.INTEGER:
                    acc.add_operand(_integer(tok))
                    self.pos += 1
                case TokenKind.PLUS:
                    acc.operator = BinaryOp.ADD
                    self.pos += 1
                case TokenKind.MINUS:
                    acc.operator = BinaryOp.SUB
                    self.pos += 1
                case TokenKind.LPAREN:
                    acc.add_operand(self._parse_group())
                case TokenKind.RPAREN:
                    # Stray ")" outside any group
                    self.pos += 1

        return acc.build()

    def _parse_group(self) -> Expr:
        """'(' range ')' where ')' is the first one after '('."""
        open_tok = self.tokens[self.pos]
        close = self._find_close(self.pos + 1)
        if close is None:
            raise UnmatchedParenthesis("Unmatched '(': no ')' follows it", open_tok.pos)

        inner = _Parser(self.tokens[self.pos + 1 : close]).parse_range()
        self.pos = close + 1
        return inner

    def _find_close(self, start: int) -> int | None:
        for idx in range(start, len(self.tokens)):
            if self.tokens[idx].kind == TokenKind.RPAREN:
                return idx
        return None


def _integer(tok: Token) -> IntegerLiteral:
    try:
        return IntegerLiteral(value=int(tok.text))
    except ValueError as e:
        # int() refuses digit runs beyond sys.get_int_max_str_digits()
        raise MalformedLiteral(
            f"Integer literal too long ({len(tok.text)} digits)", tok.pos
        ) from e


def parse(tokens: Sequence[Token]) -> Expr:
    """Parse a token sequence into an expression tree.

    Args:
        tokens: Output of ``lex``.

    Returns:
        The root node. A range holding a single operand yields that operand;
        anything else yields a ``BinaryOperation``.

    Raises:
        UnmatchedParenthesis: If a "(" has no ")" after it.
        MalformedLiteral: If an integer literal is too long to convert.
    """
    return _Parser(tokens).parse_range()
