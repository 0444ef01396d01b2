"""
Expression tree types for the arithmetic interpreter.

Supports:
- Integer literals: 0, 42, 1300
- Addition and subtraction: +, -
- Parenthesized groups, which become nested operations

Nodes evaluate themselves through their ``value`` property.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from patternbook.core.errors import MissingOperand

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators for expressions."""

    ADD = "+"
    SUB = "-"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class IntegerLiteral(BaseModel):
    """A terminal integer value."""

    value: int = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.value)


class BinaryOperation(BaseModel):
    """
    An addition or subtraction over two subtrees.

    The parser fills this in as it reads a token range, so any part may be
    unset. An unset operator evaluates to 0; an unset operand under a set
    operator is a fault.
    """

    operator: BinaryOp | None = Field(default=None, description="Operator")
    left: Expr | None = Field(default=None, description="Left operand")
    right: Expr | None = Field(default=None, description="Right operand")

    model_config = ConfigDict(frozen=True)

    @property
    def value(self) -> int:
        if self.operator is None:
            return 0
        if self.left is None:
            raise MissingOperand(f"Operator '{self.operator}' has no left operand", "left")
        if self.right is None:
            raise MissingOperand(f"Operator '{self.operator}' has no right operand", "right")

        if self.operator == BinaryOp.ADD:
            return self.left.value + self.right.value
        return self.left.value - self.right.value

    def __str__(self) -> str:
        left = _operand_str(self.left)
        right = _operand_str(self.right)
        if self.operator is None:
            return " ".join(part for part in (left, right) if part)
        return f"{left} {self.operator} {right}".strip()


def _operand_str(node: Expr | None) -> str:
    if node is None:
        return ""
    if isinstance(node, BinaryOperation):
        return f"({node})"
    return str(node)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = IntegerLiteral | BinaryOperation

# Rebuild models for recursive forward references
BinaryOperation.model_rebuild()
