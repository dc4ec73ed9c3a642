"""Demonstration driver — canned expressions with their expected outcome.

Runs each case through evaluate() and renders a Rich table with the
expected and actual outcome and a Passed/Failed status per case.
"""

from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from infixcalc.errors import MalformedExpression, UnbalancedParentheses, UnrecognizedSymbol
from infixcalc.expression import evaluate
from infixcalc.models import CaseResult, DemoCase
from infixcalc.operators import DEFAULT_TABLE, OperatorTable

CASES: list[DemoCase] = [
    DemoCase("Normal", "-2 * 4 + (5.5 - -7.25)", expected=4.75),
    DemoCase("Just a number", "87.5", expected=87.5),
    DemoCase("Just a negative number", "-87.5", expected=-87.5),
    DemoCase("Empty expression", "", expected_error=MalformedExpression),
    DemoCase("Just an operator", " * ", expected_error=MalformedExpression),
    DemoCase("Excess operators", "-2 * / 4 + (5.5 - -7.25)", expected_error=MalformedExpression),
    DemoCase("Unrecognised symbol", "22 * 14 % 2", expected_error=UnrecognizedSymbol),
    DemoCase("Unmatched parentheses", "-7 * 14 + (22 * (8 - 12)", expected_error=UnbalancedParentheses),
    DemoCase("Nested unary minus", "-(-1) * 3 - -1", expected=4.0),
]


def run_case(case: DemoCase, operators: OperatorTable = DEFAULT_TABLE) -> CaseResult:
    return CaseResult(case=case, outcome=evaluate(case.notation, operators))


def run_demo(
    cases: Optional[Iterable[DemoCase]] = None,
    operators: OperatorTable = DEFAULT_TABLE,
) -> list[CaseResult]:
    """Run every case (the built-in CASES by default) in order."""
    return [run_case(case, operators) for case in (CASES if cases is None else cases)]


def _fmt_expected(case: DemoCase) -> str:
    if case.expected_error is not None:
        return case.expected_error.__name__
    return f"{case.expected:g}"


def _fmt_actual(result: CaseResult) -> str:
    outcome = result.outcome
    if outcome.ok:
        return f"{outcome.value:g}"
    return outcome.error_kind


def render_demo(results: list[CaseResult], console: Console) -> None:
    """Render a Rich table of demo results with a pass count summary."""
    if not results:
        console.print("[yellow]No demo cases to run.[/yellow]")
        return

    table = Table(title="Expression demo", show_header=True, header_style="bold")
    table.add_column("Case", style="dim", min_width=16)
    table.add_column("Expression", min_width=24)
    table.add_column("Expected", justify="right")
    table.add_column("Actual", justify="right")
    table.add_column("Status", justify="center")

    for r in results:
        color = "green" if r.verdict == "pass" else "red"
        status = "Passed" if r.verdict == "pass" else "Failed"
        table.add_row(
            r.case.label,
            escape(f'"{r.case.notation}"'),
            _fmt_expected(r.case),
            _fmt_actual(r),
            f"[{color}]{status}[/{color}]",
        )

    passed = sum(1 for r in results if r.verdict == "pass")
    console.print()
    console.print(table)
    color = "green" if passed == len(results) else "yellow"
    console.print(f"[{color}]{passed}/{len(results)} passed[/{color}]")
    console.print()
