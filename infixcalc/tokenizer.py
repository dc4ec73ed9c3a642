"""Segment reader and tokenizer.

A segment is one token's worth of text: a single operator symbol or
parenthesis, or a run that starts at any other character and extends
through the digits and decimal points that follow it.
"""

from __future__ import annotations

import re

from infixcalc.operators import PARENTHESES, OperatorTable

_NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")
_NUMBER_CHARS = frozenset("0123456789.")


def is_number(token: str) -> bool:
    """True for a non-negative decimal literal with at most one point."""
    return _NUMBER_RE.fullmatch(token) is not None


def read_segment(notation: str, start: int, operators: OperatorTable) -> str:
    """Read the segment beginning at `start`. Empty at end of text."""
    if start >= len(notation):
        return ""

    first = notation[start]
    if operators.is_operator(first) or first in PARENTHESES:
        return first

    end = start + 1
    while end < len(notation) and notation[end] in _NUMBER_CHARS:
        end += 1
    return notation[start:end]


def tokenize(notation: str, operators: OperatorTable) -> list[str]:
    """Split a whitespace-free notation into segments."""
    tokens = []
    index = 0
    while index < len(notation):
        segment = read_segment(notation, index, operators)
        tokens.append(segment)
        index += len(segment)
    return tokens
