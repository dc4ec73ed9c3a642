"""Infix to postfix conversion (shunting-yard)."""

from __future__ import annotations

from typing import Iterable

from infixcalc.errors import MalformedExpression, UnrecognizedSymbol
from infixcalc.operators import Operator, OperatorTable
from infixcalc.tokenizer import is_number

# Marker pushed for "(" so the stack only ever holds Operator values
_OPEN_MARKER = Operator("(", 0, True)


def to_postfix(tokens: Iterable[str], operators: OperatorTable) -> list[str]:
    """Reorder infix tokens into Reverse Polish order.

    Raises:
        UnrecognizedSymbol: a token is not a number, operator or parenthesis.
        MalformedExpression: a ")" has no matching "(" on the stack.
    """
    output: list[str] = []
    stack: list[Operator] = []

    for token in tokens:
        if is_number(token):
            output.append(token)
        elif operators.is_operator(token):
            current = operators.find(token)
            while stack and stack[-1] is not _OPEN_MARKER and (
                stack[-1].precedence > current.precedence
                or (stack[-1].precedence == current.precedence and not current.right_associative)
            ):
                output.append(stack.pop().symbol)
            stack.append(current)
        elif token == "(":
            stack.append(_OPEN_MARKER)
        elif token == ")":
            while stack and stack[-1] is not _OPEN_MARKER:
                output.append(stack.pop().symbol)
            if not stack:
                raise MalformedExpression('Found ")" without a matching "("')
            stack.pop()
        else:
            raise UnrecognizedSymbol(
                f'Unrecognised character "{token}". Make sure you have declared it '
                "as an operator before using it."
            )

    while stack:
        top = stack.pop()
        if top is _OPEN_MARKER:
            raise MalformedExpression('Found "(" without a matching ")"')
        output.append(top.symbol)

    return output
