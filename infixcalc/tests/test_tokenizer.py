"""Tests for the segment reader and tokenizer."""

import pytest

from infixcalc.operators import DEFAULT_TABLE
from infixcalc.tokenizer import is_number, read_segment, tokenize


@pytest.mark.parametrize(
    "token, expected",
    [
        ("87.5", True),
        ("5.", True),
        (".25", True),
        ("0", True),
        (".", False),
        ("", False),
        ("1.2.3", False),
        ("-1", False),
        ("1e5", False),
        ("inf", False),
        ("%2", False),
    ],
)
def test_is_number(token, expected):
    assert is_number(token) is expected


def test_read_segment_number_then_operator():
    assert read_segment("12.5+3", 0, DEFAULT_TABLE) == "12.5"
    assert read_segment("12.5+3", 4, DEFAULT_TABLE) == "+"
    assert read_segment("12.5+3", 5, DEFAULT_TABLE) == "3"


def test_read_segment_parentheses_are_single_tokens():
    assert read_segment("((1", 0, DEFAULT_TABLE) == "("
    assert read_segment("1))", 1, DEFAULT_TABLE) == ")"


def test_read_segment_past_end_is_empty():
    assert read_segment("1+2", 3, DEFAULT_TABLE) == ""


def test_read_segment_unknown_character_swallows_following_digits():
    assert read_segment("%2*3", 0, DEFAULT_TABLE) == "%2"


def test_tokenize_normalized_notation():
    assert tokenize("(0-2)*4", DEFAULT_TABLE) == ["(", "0", "-", "2", ")", "*", "4"]


def test_tokenize_decimals():
    assert tokenize("5.5+.25", DEFAULT_TABLE) == ["5.5", "+", ".25"]


def test_tokenize_unregistered_symbol():
    assert tokenize("22*14%2", DEFAULT_TABLE) == ["22", "*", "14", "%2"]


def test_tokenize_empty():
    assert tokenize("", DEFAULT_TABLE) == []
