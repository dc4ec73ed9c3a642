"""CLI for infixcalc.

Usage:
    python -m infixcalc eval "2 + 3 * 4"          # Print the result
    python -m infixcalc eval "-(-1)*3" --show-postfix
    python -m infixcalc rpn "(1 + 2) * 3"          # Print postfix tokens
    python -m infixcalc operators                   # Show the operator table
    python -m infixcalc demo                        # Run the canned cases
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from infixcalc.demo import render_demo, run_demo
from infixcalc.errors import ExpressionError
from infixcalc.expression import Expression
from infixcalc.operators import DEFAULT_TABLE

app = typer.Typer(
    name="infixcalc",
    help="Evaluate arithmetic expressions with a shunting-yard parser",
    no_args_is_help=True,
)
console = Console(stderr=True)


def _report(e: ExpressionError) -> None:
    console.print(f"[red]{e.kind}:[/red] {escape(str(e))}")


def _build(notation: str) -> Expression:
    try:
        return Expression(notation, DEFAULT_TABLE)
    except ExpressionError as e:
        _report(e)
        raise typer.Exit(1)


@app.command("eval", context_settings={"ignore_unknown_options": True})
def cmd_eval(
    expression: str = typer.Argument(help="Infix expression, e.g. '2 + 3 * 4'"),
    show_postfix: bool = typer.Option(False, "--show-postfix", "-p", help="Also show the postfix form"),
) -> None:
    """Evaluate an expression and print the result."""
    expr = _build(expression)
    try:
        if show_postfix:
            console.print(f"  [dim]postfix:[/dim] {escape(' '.join(expr.postfix()))}")
        value = expr.calculate()
    except ExpressionError as e:
        _report(e)
        raise typer.Exit(1)
    typer.echo(value)


@app.command("rpn", context_settings={"ignore_unknown_options": True})
def cmd_rpn(
    expression: str = typer.Argument(help="Infix expression, e.g. '(1 + 2) * 3'"),
) -> None:
    """Print the postfix (Reverse Polish) form of an expression."""
    expr = _build(expression)
    try:
        tokens = expr.postfix()
    except ExpressionError as e:
        _report(e)
        raise typer.Exit(1)
    typer.echo(" ".join(tokens))


@app.command("operators")
def cmd_operators() -> None:
    """Show the operator table."""
    table = Table(title="Operators", show_header=True, header_style="bold")
    table.add_column("Symbol", style="green", justify="center")
    table.add_column("Precedence", justify="right")
    table.add_column("Associativity")

    for op in DEFAULT_TABLE:
        table.add_row(op.symbol, str(op.precedence), "Right" if op.right_associative else "Left")

    console.print()
    console.print(table)
    console.print()


@app.command("demo")
def cmd_demo() -> None:
    """Run the canned demonstration cases."""
    results = run_demo()
    render_demo(results, console)
    if any(r.verdict != "pass" for r in results):
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
