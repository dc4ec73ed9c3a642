"""Postfix (Reverse Polish) evaluation."""

from __future__ import annotations

from typing import Iterable

from infixcalc.errors import MalformedExpression
from infixcalc.operators import OperatorTable
from infixcalc.tokenizer import is_number

_FORMAT_ERROR = "Incorrect expression format, please check for typing errors"


def evaluate_postfix(tokens: Iterable[str], operators: OperatorTable) -> float:
    """Evaluate postfix tokens with a single value stack.

    The second value popped is the left operand. Exactly one value must be
    left once every token is consumed.
    """
    stack: list[float] = []

    for token in tokens:
        if is_number(token):
            stack.append(float(token))
            continue

        if len(stack) < 2:
            raise MalformedExpression(f'{_FORMAT_ERROR} (operator "{token}" needs two operands)')
        right = stack.pop()
        left = stack.pop()
        stack.append(operators.apply(left, right, token))

    if not stack:
        raise MalformedExpression(f"{_FORMAT_ERROR} (nothing to evaluate)")
    if len(stack) > 1:
        raise MalformedExpression(f"{_FORMAT_ERROR} ({len(stack)} values left without an operator)")
    return stack[0]
