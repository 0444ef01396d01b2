"""
Intermediate representation (IR) types for the arithmetic interpreter.

All types are re-exported from this package.
"""

from .expressions import (
    BinaryOp,
    BinaryOperation,
    Expr,
    IntegerLiteral,
)

__all__ = [
    "BinaryOp",
    "BinaryOperation",
    "Expr",
    "IntegerLiteral",
]
