"""
Error types for expression lexing, parsing, and evaluation.
"""

from dataclasses import dataclass
from typing import Optional


class PatternbookError(Exception):
    """Base exception for all patternbook errors."""

    def __init__(self, message: str, context: Optional["SourceContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message

    def with_context(self, context: "SourceContext") -> "PatternbookError":
        """Attach source context after the fact and refresh the message."""
        self.context = context
        self.args = (self._format_message(),)
        return self


class ExpressionError(PatternbookError):
    """Raised when an arithmetic expression cannot be lexed, parsed, or evaluated."""

    pass


class MalformedLiteral(ExpressionError):
    """
    Raised when a character where an integer literal is expected is not a digit.

    Examples:
    - "12a"
    - "1 * 2"
    """

    def __init__(self, message: str, pos: int, context: Optional["SourceContext"] = None):
        self.pos = pos
        super().__init__(message, context)


class UnmatchedParenthesis(ExpressionError):
    """Raised when "(" has no ")" anywhere after it in the token sequence."""

    def __init__(self, message: str, pos: int, context: Optional["SourceContext"] = None):
        self.pos = pos
        super().__init__(message, context)


class MissingOperand(ExpressionError):
    """Raised when an operation with an operator is evaluated without both operands."""

    def __init__(self, message: str, side: str):
        self.side = side
        super().__init__(message)


@dataclass
class SourceContext:
    """
    The expression text an error refers to.

    Attributes:
        source: Full expression text
        column: Offending column (0-indexed); None when no single position applies
    """

    source: str
    column: int | None = None

    def format(self) -> str:
        """
        Format the expression with a marker under the offending column.

        Returns:
            Formatted string like:
                  | (1+2
                  | ^
        """
        prefix = "  | "
        lines = [prefix + self.source]
        if self.column is not None:
            lines.append(prefix + " " * self.column + "^")
        return "\n".join(lines)
