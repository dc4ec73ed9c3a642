"""Error kinds raised while building or evaluating an expression.

Every failure derives from ExpressionError, which is itself a ValueError so
callers that only care about "bad input" can catch that.
"""

from __future__ import annotations


class ExpressionError(ValueError):
    """Base class for every expression failure."""

    @property
    def kind(self) -> str:
        return type(self).__name__


class UnknownOperator(ExpressionError):
    """Symbol lookup or apply for a symbol absent from the operator table."""


class UnbalancedParentheses(ExpressionError):
    """Opening and closing parentheses do not pair up."""


class UnrecognizedSymbol(ExpressionError):
    """A token that is neither a number, a known operator nor a parenthesis."""


class MalformedExpression(ExpressionError):
    """Structurally invalid token sequence (missing operands, leftovers)."""
