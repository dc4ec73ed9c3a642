"""infixcalc — arithmetic expression evaluator.

Parses infix text with the four basic operators, parentheses, decimal
literals and unary minus, converts it to postfix with the shunting-yard
algorithm and evaluates the result.

Usage:
    python -m infixcalc eval "2 + 3 * 4"   # 14.0
    python -m infixcalc demo               # Canned pass/fail cases

    >>> from infixcalc import Expression
    >>> Expression("-(-1) * 3 - -1").calculate()
    4.0
"""

from infixcalc.errors import (
    ExpressionError,
    MalformedExpression,
    UnbalancedParentheses,
    UnknownOperator,
    UnrecognizedSymbol,
)
from infixcalc.expression import Expression, evaluate
from infixcalc.models import Outcome
from infixcalc.operators import DEFAULT_OPERATORS, DEFAULT_TABLE, Operator, OperatorTable

__all__ = [
    "DEFAULT_OPERATORS",
    "DEFAULT_TABLE",
    "Expression",
    "ExpressionError",
    "MalformedExpression",
    "Operator",
    "OperatorTable",
    "Outcome",
    "UnbalancedParentheses",
    "UnknownOperator",
    "UnrecognizedSymbol",
    "evaluate",
]
