"""Expression orchestration.

Construction strips whitespace, validates the parentheses and removes unary
minuses; calculate() then runs tokenizer -> converter -> evaluator on the
normalized notation.
"""

from __future__ import annotations

from infixcalc.converter import to_postfix
from infixcalc.errors import ExpressionError, UnbalancedParentheses
from infixcalc.evaluator import evaluate_postfix
from infixcalc.models import Outcome
from infixcalc.normalizer import normalize
from infixcalc.operators import DEFAULT_TABLE, OperatorTable
from infixcalc.tokenizer import tokenize


def check_parentheses(notation: str) -> None:
    """Raise UnbalancedParentheses unless every ")" closes an earlier "("."""
    depth = 0
    for position, char in enumerate(notation):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise UnbalancedParentheses(f'Unmatched ")" at position {position}')
    if depth != 0:
        raise UnbalancedParentheses(f'Unmatched parentheses found ({depth} left open)')


class Expression:
    """An arithmetic expression bound to an operator table.

    Args:
        notation: Raw infix text, e.g. "-2 * 4 + (5.5 - -7.25)".
        operators: Table of known operators; shared, never modified.

    Raises:
        UnbalancedParentheses: if the parentheses do not pair up.
    """

    def __init__(self, notation: str, operators: OperatorTable = DEFAULT_TABLE):
        self.operators = operators
        self.notation = "".join(notation.split())
        check_parentheses(self.notation)
        self.notation = normalize(self.notation, operators)

    def tokens(self) -> list[str]:
        return tokenize(self.notation, self.operators)

    def postfix(self) -> list[str]:
        """Postfix form of the normalized notation.

        Conversion failures are re-raised as the same kind with a parse
        prefix; the original error is kept as __cause__.
        """
        try:
            return to_postfix(self.tokens(), self.operators)
        except ExpressionError as e:
            raise type(e)(f"An error occurred while parsing: {e}") from e

    def calculate(self) -> float:
        return evaluate_postfix(self.postfix(), self.operators)

    def __repr__(self) -> str:
        return f"Expression({self.notation!r})"


def evaluate(notation: str, operators: OperatorTable = DEFAULT_TABLE) -> Outcome:
    """Build and calculate an expression without raising ExpressionError."""
    try:
        value = Expression(notation, operators).calculate()
    except ExpressionError as e:
        return Outcome(notation=notation, error=str(e), error_kind=e.kind)
    return Outcome(notation=notation, value=value)
