"""Unary-minus elimination.

The converter only understands binary operators, so a minus sign at the
start of the notation, after another operator, or right after "(" is
rewritten textually: -<operand> becomes (0-<operand>). One pass can expose
new unary minuses (e.g. "-(-1)"), so passes repeat until none remain.
"""

from __future__ import annotations

from infixcalc.operators import OperatorTable
from infixcalc.tokenizer import is_number, read_segment


def _is_unary_minus(notation: str, index: int, operators: OperatorTable) -> bool:
    if notation[index] != "-":
        return False
    if index == 0:
        return True
    previous = notation[index - 1]
    return previous == "(" or operators.is_operator(previous)


def has_unary_minus(notation: str, operators: OperatorTable) -> bool:
    return any(_is_unary_minus(notation, i, operators) for i in range(len(notation)))


def _read_group(notation: str, start: int, operators: OperatorTable) -> str:
    """Read from the "(" at `start` through its matching ")"."""
    depth = 0
    index = start
    while index < len(notation):
        segment = read_segment(notation, index, operators)
        index += len(segment)
        if segment == "(":
            depth += 1
        elif segment == ")":
            depth -= 1
            if depth == 0:
                break
    return notation[start:index]


def rewrite_unary_minus_once(notation: str, operators: OperatorTable) -> str:
    """Run a single left-to-right rewrite pass.

    Operands are copied verbatim, so minuses nested inside a wrapped group
    are left for the next pass. A minus whose operand is another minus is
    kept as-is until the inner one has been rewritten. A minus with no
    usable operand becomes "(0-)" and fails later during evaluation.
    """
    parts = []
    index = 0
    while index < len(notation):
        if not _is_unary_minus(notation, index, operators):
            parts.append(notation[index])
            index += 1
            continue

        operand = read_segment(notation, index + 1, operators)
        if operand == "-" and _is_unary_minus(notation, index + 1, operators):
            parts.append("-")
            index += 1
            continue
        if operand == "(":
            operand = _read_group(notation, index + 1, operators)
        elif not is_number(operand):
            operand = ""

        parts.append(f"(0-{operand})")
        index += 1 + len(operand)

    return "".join(parts)


def normalize(notation: str, operators: OperatorTable) -> str:
    """Rewrite until no unary minus is left."""
    while has_unary_minus(notation, operators):
        notation = rewrite_unary_minus_once(notation, operators)
    return notation
