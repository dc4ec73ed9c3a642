"""Operator registry for infixcalc.

Holds the known binary operators with their precedence and associativity,
answers "is this symbol an operator", and applies the built-in arithmetic.
"""

from __future__ import annotations

import math
import operator as _op
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, Union

from infixcalc.errors import UnknownOperator

PARENTHESES = ("(", ")")


@dataclass(frozen=True)
class Operator:
    """A single binary operator. Higher precedence binds tighter."""

    symbol: str
    precedence: int
    right_associative: bool = False

    def __str__(self) -> str:
        return (
            f'Operator "{self.symbol}" | Precedence {self.precedence} '
            f"| Associativity {'Right' if self.right_associative else 'Left'}"
        )


OperatorSpec = Union[Operator, tuple[str, int, bool]]


def _divide(a: float, b: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity, 0/0 is nan."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


# Built-in arithmetic, keyed by symbol
_ARITHMETIC: dict[str, Callable[[float, float], float]] = {
    "*": _op.mul,
    "/": _divide,
    "-": _op.sub,
    "+": _op.add,
}

# (symbol, precedence, right_associative)
DEFAULT_OPERATORS: tuple[tuple[str, int, bool], ...] = (
    ("*", 3, False),
    ("/", 3, False),
    ("+", 2, False),
    ("-", 2, False),
)


class OperatorTable:
    """Immutable symbol -> Operator mapping.

    Built once from (symbol, precedence, right_associative) triples or
    Operator values; lookups are exact-match and a missing symbol is an error.
    """

    def __init__(self, operators: Iterable[OperatorSpec]):
        table: dict[str, Operator] = {}
        for spec in operators:
            op = spec if isinstance(spec, Operator) else Operator(*spec)
            if len(op.symbol) != 1:
                raise ValueError(f'Operator symbol must be one character, got "{op.symbol}"')
            if op.symbol.isdigit() or op.symbol.isspace() or op.symbol in (".", *PARENTHESES):
                raise ValueError(f'"{op.symbol}" cannot be used as an operator symbol')
            if op.precedence <= 0:
                raise ValueError(f'Operator "{op.symbol}" needs a positive precedence')
            if op.symbol in table:
                raise ValueError(f'Operator "{op.symbol}" is defined twice')
            table[op.symbol] = op
        self._operators = MappingProxyType(table)

    def find(self, symbol: str) -> Operator:
        try:
            return self._operators[symbol]
        except KeyError:
            raise UnknownOperator(f'An operator "{symbol}" is not defined') from None

    def is_operator(self, symbol: str) -> bool:
        return symbol in self._operators

    def compare(self, a: str, b: str) -> int:
        """Return 1, 0 or -1 as operator `a` binds tighter, equal or looser than `b`."""
        diff = self.find(a).precedence - self.find(b).precedence
        return (diff > 0) - (diff < 0)

    def apply(self, a: float, b: float, symbol: str) -> float:
        """Compute `a <symbol> b`."""
        func = _ARITHMETIC.get(symbol)
        if func is None or symbol not in self._operators:
            raise UnknownOperator(f'Operation "{symbol}" is not recognised')
        return func(a, b)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._operators

    def __iter__(self) -> Iterator[Operator]:
        return iter(self._operators.values())

    def __len__(self) -> int:
        return len(self._operators)

    def __repr__(self) -> str:
        return f"OperatorTable({list(self._operators.values())!r})"


DEFAULT_TABLE = OperatorTable(DEFAULT_OPERATORS)
