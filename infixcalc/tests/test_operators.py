"""Tests for the operator table: lookup, comparison, arithmetic, validation."""

import dataclasses
import math

import pytest

from infixcalc.errors import UnknownOperator
from infixcalc.operators import DEFAULT_TABLE, Operator, OperatorTable


@pytest.fixture
def table():
    return OperatorTable([("*", 3, False), ("/", 3, False), ("+", 2, False), ("-", 2, False)])


# --- Lookup ---

def test_find_returns_registered_operator(table):
    op = table.find("*")
    assert op == Operator("*", 3, False)


def test_find_unknown_symbol_raises(table):
    with pytest.raises(UnknownOperator, match='"%"'):
        table.find("%")


@pytest.mark.parametrize("symbol", ["(", ")", "1", ".", "", "**", "%"])
def test_is_operator_false_for_non_operators(table, symbol):
    assert table.is_operator(symbol) is False


def test_is_operator_true_for_defaults(table):
    assert all(table.is_operator(s) for s in "*/+-")


def test_iteration_keeps_registration_order(table):
    assert [op.symbol for op in table] == ["*", "/", "+", "-"]
    assert len(table) == 4
    assert "+" in table


def test_compare_precedence(table):
    assert table.compare("*", "+") == 1
    assert table.compare("+", "-") == 0
    assert table.compare("-", "/") == -1


def test_table_accepts_operator_values():
    table = OperatorTable([Operator("^", 4, True), ("+", 2, False)])
    assert table.find("^").right_associative is True


# --- Arithmetic ---

@pytest.mark.parametrize(
    "a, b, symbol, expected",
    [
        (6.0, 3.0, "*", 18.0),
        (6.0, 3.0, "/", 2.0),
        (2.0, 5.0, "-", -3.0),
        (2.5, 0.25, "+", 2.75),
    ],
)
def test_apply(table, a, b, symbol, expected):
    assert table.apply(a, b, symbol) == pytest.approx(expected)


def test_division_by_zero_is_infinite(table):
    assert table.apply(1.0, 0.0, "/") == math.inf
    assert table.apply(-1.0, 0.0, "/") == -math.inf
    assert table.apply(1.0, -0.0, "/") == -math.inf


def test_zero_over_zero_is_nan(table):
    assert math.isnan(table.apply(0.0, 0.0, "/"))


def test_apply_unregistered_symbol_raises():
    table = OperatorTable([("+", 2, False)])
    with pytest.raises(UnknownOperator):
        table.apply(2.0, 3.0, "*")


def test_apply_symbol_without_arithmetic_raises():
    table = OperatorTable([("^", 4, True)])
    with pytest.raises(UnknownOperator):
        table.apply(2.0, 3.0, "^")


# --- Validation ---

@pytest.mark.parametrize(
    "operators",
    [
        [("+", 2, False), ("+", 3, False)],
        [("**", 3, False)],
        [("(", 3, False)],
        [("7", 3, False)],
        [(".", 3, False)],
        [("+", 0, False)],
    ],
)
def test_invalid_tables_rejected(operators):
    with pytest.raises(ValueError):
        OperatorTable(operators)


def test_operator_is_frozen():
    op = DEFAULT_TABLE.find("+")
    with pytest.raises(dataclasses.FrozenInstanceError):
        op.precedence = 9


def test_operator_str():
    assert str(DEFAULT_TABLE.find("*")) == 'Operator "*" | Precedence 3 | Associativity Left'
    assert str(Operator("^", 4, True)) == 'Operator "^" | Precedence 4 | Associativity Right'
