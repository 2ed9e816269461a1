"""Typer CLI interface for the corporate tax calculator."""

import json
import logging
from typing import NoReturn

import typer
from rich.console import Console
from rich.table import Table

from corptax.config import DEFAULT_PRECISION, CalculatorConfig
from corptax.exceptions import TaxComputationError
from corptax.formatting import format_percent

app = typer.Typer(
    name="corptax",
    help="營利事業所得稅試算: Taiwan corporate income tax calculator.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Taiwan corporate income tax calculator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(exc: TaxComputationError) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(1)


def _emit(result, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(result.as_plain_dict(), ensure_ascii=False, indent=2, default=str))
        return
    from corptax.reports import TaxSummaryGenerator

    typer.echo(TaxSummaryGenerator().render(result))


@app.command()
def direct(
    revenue: str = typer.Option("0", "--revenue", help="營業收入 Operating revenue"),
    cost: str = typer.Option("0", "--cost", help="營業成本 Cost of revenue"),
    expense: str = typer.Option("0", "--expense", help="營業費用 Operating expenses"),
    other_income: str = typer.Option("0", "--other-income", help="Non-operating income"),
    other_expense: str = typer.Option("0", "--other-expense", help="Non-operating expenses"),
    prior_loss: str = typer.Option("0", "--prior-loss", help="Prior-period loss carried forward"),
    dividend: str = typer.Option("0", "--dividend", help="Dividends distributed"),
    legal_reserve: str = typer.Option("0", "--legal-reserve", help="Legal reserve set aside"),
    precision: int = typer.Option(
        DEFAULT_PRECISION, "--precision", help="Significant digits for decimal arithmetic"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Compute corporate and undistributed-earnings tax from income figures."""
    from corptax.api import compute_direct

    inputs = {
        "revenue": revenue,
        "cost": cost,
        "expense": expense,
        "other_income": other_income,
        "other_expense": other_expense,
        "prior_loss": prior_loss,
        "dividend_distributed": dividend,
        "legal_reserve": legal_reserve,
    }
    try:
        result = compute_direct(inputs, CalculatorConfig(precision=precision))
    except TaxComputationError as exc:
        _fail(exc)
    _emit(result, as_json)


@app.command()
def filing(
    method: str | None = typer.Option(
        None, "--method", "-m", help="Filing method: book, standard, audit"
    ),
    revenue: str = typer.Option("0", "--revenue", help="營業收入 Operating revenue"),
    industry: str | None = typer.Option(None, "--industry", "-i", help="Industry label, e.g. 零售業"),
    custom_rate: str | None = typer.Option(
        None, "--custom-rate", help="Override the industry rate (e.g. 0.05)"
    ),
    accounting_profit: str = typer.Option("0", "--accounting-profit", help="[audit] Book profit"),
    non_deductible: str = typer.Option(
        "0", "--non-deductible", help="[audit] Non-deductible expenses added back"
    ),
    additional_deduct: str = typer.Option(
        "0", "--additional-deduct", help="[audit] Additional deductions"
    ),
    prior_losses: str = typer.Option("0", "--prior-losses", help="[audit] Prior losses deducted"),
    precision: int = typer.Option(
        DEFAULT_PRECISION, "--precision", help="Significant digits for decimal arithmetic"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Compute tax under the book, standard, or audit filing method."""
    from corptax.api import compute_by_filing_method

    params = {
        "filing_method": method,
        "revenue": revenue,
        "industry": industry,
        "custom_rate": custom_rate,
        "accounting_profit": accounting_profit,
        "non_deductible": non_deductible,
        "additional_deduct": additional_deduct,
        "prior_losses": prior_losses,
    }
    try:
        result = compute_by_filing_method(params, CalculatorConfig(precision=precision))
    except TaxComputationError as exc:
        _fail(exc)
    _emit(result, as_json)


@app.command()
def industries() -> None:
    """List industries with their book-review and income-standard rates."""
    from corptax.engines.rates import book_review_rate, income_standard_rate, list_industries

    table = Table(title="Industry rates")
    table.add_column("Industry")
    table.add_column("Book review", justify="right")
    table.add_column("Income standard", justify="right")
    for name in list_industries():
        table.add_row(
            name,
            format_percent(book_review_rate(name) * 100),
            format_percent(income_standard_rate(name) * 100),
        )
    Console().print(table)


@app.command()
def rate(
    industry: str = typer.Argument(..., help="Industry label, e.g. 零售業"),
) -> None:
    """Show the rates applied to one industry (defaults for unknown labels)."""
    from corptax.engines.rates import book_review_rate, income_standard_rate, list_industries

    if industry not in list_industries():
        typer.echo(f"Warning: '{industry}' not in rate tables, using defaults", err=True)
    typer.echo(f"Book review:     {format_percent(book_review_rate(industry) * 100)}")
    typer.echo(f"Income standard: {format_percent(income_standard_rate(industry) * 100)}")


if __name__ == "__main__":
    app()
