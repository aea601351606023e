"""Typer CLI interface for the property tax savings estimator."""

import json
import logging
from pathlib import Path
from typing import Any

import typer

from proptax.config import DEFAULT_TAX_YEAR, TAX_YEAR_ENVVAR
from proptax.exceptions import InputFileError, TaxComputationError

MASCOT = r"""
         /\
        /  \   ____
       /    \ |[][]|
      /      \|    |
     /   /\   \    |
    /___|  |___\___|
    |   |  |   |   |
    |[] |__| []|   |
    |___|==|___|___|

  Property Tax Savings Estimator
  "Itemize, or not itemize?"
"""


def show_mascot() -> None:
    typer.echo(MASCOT)


app = typer.Typer(
    name="proptax",
    help="Property Tax Savings Estimator — standard vs. itemized deductions.",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Property Tax Savings Estimator — standard vs. itemized deductions."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        show_mascot()
        raise typer.Exit()


def load_input_file(path: Path) -> dict[str, Any]:
    """Read estimate inputs from a JSON object file."""
    try:
        data = json.loads(path.read_text())
    except OSError as exc:
        raise InputFileError(path, exc.strerror or str(exc)) from exc
    except json.JSONDecodeError as exc:
        raise InputFileError(path, f"invalid JSON ({exc.msg}, line {exc.lineno})") from exc
    if not isinstance(data, dict):
        raise InputFileError(path, "expected a JSON object of input fields")
    return data


def _print_estimate(result: Any) -> None:
    """Render a TaxEstimate as sectioned text."""
    from proptax.reports import format_money as m

    typer.echo("")
    typer.echo(f"=== Deduction Comparison: {result.tax_year} ({result.filing_status.value}) ===")
    typer.echo("")
    typer.echo("INCOME")
    typer.echo(f"  Gross Income:          {m(result.income):>14}")
    typer.echo(f"  Retirement:            {m(-result.retirement_contributions):>14}")
    if result.is_rental:
        typer.echo(f"  Net Rental Income:     {m(result.net_rental_income):>14}")
    typer.echo("  ──────────────────────────────────────")
    typer.echo(f"  Adjusted Income:       {m(result.adjusted_income):>14}")
    typer.echo("")
    typer.echo("DEDUCTIONS")
    typer.echo(f"  Mortgage Interest:     {m(result.mortgage_interest):>14}")
    typer.echo(f"  Standard Deduction:    {m(result.standard_deduction):>14}")
    typer.echo(f"  Itemized Deduction:    {m(result.itemized_deduction):>14}")
    typer.echo("")
    typer.echo("STANDARD")
    typer.echo(f"  Taxable Income:        {m(result.taxable_income_standard):>14}")
    typer.echo(f"  Tax Liability:         {m(result.tax_liability_standard):>14}")
    typer.echo("")
    typer.echo("ITEMIZED")
    typer.echo(f"  Taxable Income:        {m(result.taxable_income_itemized):>14}")
    if result.tax_credits > 0:
        typer.echo(f"  Tax Before Credits:    {m(result.tax_liability_itemized_raw):>14}")
        typer.echo(f"  Dependent Credits:     {m(-result.tax_credits):>14}")
    typer.echo(f"  Tax Liability:         {m(result.tax_liability_itemized):>14}")
    typer.echo("  ══════════════════════════════════════")
    typer.echo(f"  TAX SAVINGS:           {m(result.display_savings):>14}")
    typer.echo(f"  {result.explanation()}")

    if result.warnings:
        typer.echo("")
        typer.echo("WARNINGS:")
        for w in result.warnings:
            typer.echo(f"  - {w}")


@app.command()
def estimate(
    income: str | None = typer.Option(None, "--income", help="Gross annual income"),
    loan_amount: str | None = typer.Option(None, "--loan-amount", help="Mortgage loan amount"),
    interest_rate: str | None = typer.Option(
        None,
        "--interest-rate",
        help="Mortgage interest rate in percent (e.g. 4 for 4%)",
    ),
    filing_status: str | None = typer.Option(
        None,
        "--filing-status",
        "-s",
        help="Filing status: SINGLE or MARRIED (MFJ)",
    ),
    property_tax: str | None = typer.Option(None, "--property-tax", help="Annual property tax"),
    home_repairs: str | None = typer.Option(
        None,
        "--home-repairs",
        help="Home repairs/improvements",
    ),
    retirement: str | None = typer.Option(
        None,
        "--retirement",
        help="401(k)/traditional IRA contributions",
    ),
    other_deductions: str | None = typer.Option(
        None,
        "--other-deductions",
        help="Other itemized deductions",
    ),
    state_taxes: str | None = typer.Option(
        None,
        "--state-taxes",
        help="State and local taxes paid (capped at $10,000)",
    ),
    rental: bool | None = typer.Option(
        None,
        "--rental/--no-rental",
        help="The property is a rental",
    ),
    rental_income: str | None = typer.Option(None, "--rental-income", help="Annual rental income"),
    rental_expenses: str | None = typer.Option(
        None,
        "--rental-expenses",
        help="Annual rental expenses",
    ),
    dependents: str | None = typer.Option(
        None,
        "--dependents",
        help="Number of dependents ($2,000 credit each)",
    ),
    year: int | None = typer.Option(
        None,
        "--year",
        "-y",
        envvar=TAX_YEAR_ENVVAR,
        help=f"Tax year for brackets and deductions (default {DEFAULT_TAX_YEAR})",
    ),
    input_file: Path | None = typer.Option(
        None,
        "--input-file",
        "-f",
        help="JSON file with input fields; command-line options override it",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the estimate as JSON",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the summary report to this file",
    ),
) -> None:
    """Compare tax liability under the standard and itemized deductions.

    Blank or non-numeric amounts count as 0.
    """
    from proptax.engines.estimator import TaxEstimator
    from proptax.models.inputs import EstimateInput

    try:
        data: dict[str, Any] = load_input_file(input_file) if input_file is not None else {}
    except InputFileError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    overrides = {
        "income": income,
        "loan_amount": loan_amount,
        "interest_rate": interest_rate,
        "filing_status": filing_status,
        "property_tax": property_tax,
        "home_repairs": home_repairs,
        "retirement_contributions": retirement,
        "other_deductions": other_deductions,
        "state_taxes": state_taxes,
        "is_rental": rental,
        "rental_income": rental_income,
        "rental_expenses": rental_expenses,
        "dependents": dependents,
        "tax_year": year,
    }
    data.update({k: v for k, v in overrides.items() if v is not None})

    inputs = EstimateInput.model_validate(data)
    engine = TaxEstimator()
    try:
        result = engine.estimate(inputs)
    except TaxComputationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    if output is not None:
        from proptax.reports import DeductionSummaryGenerator

        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(DeductionSummaryGenerator().render(result))
        typer.echo(f"Report written to {output}", err=True)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        _print_estimate(result)


@app.command()
def brackets(
    year: int = typer.Option(
        DEFAULT_TAX_YEAR,
        "--year",
        "-y",
        envvar=TAX_YEAR_ENVVAR,
        help="Tax year",
    ),
    filing_status: str = typer.Option(
        "SINGLE",
        "--filing-status",
        "-s",
        help="Filing status: SINGLE or MARRIED (MFJ)",
    ),
) -> None:
    """Show the federal bracket table and standard deduction for a year."""
    from proptax.engines.brackets import FEDERAL_BRACKETS, FEDERAL_STANDARD_DEDUCTION
    from proptax.models.inputs import FILING_STATUS_ALIASES, lookup_filing_status

    fs = lookup_filing_status(filing_status)
    if fs is None:
        valid = ", ".join(FILING_STATUS_ALIASES)
        typer.echo(f"Error: Invalid filing status '{filing_status}'. Valid: {valid}", err=True)
        raise typer.Exit(1)

    table = FEDERAL_BRACKETS.get(year, {}).get(fs)
    if not table:
        supported = ", ".join(str(y) for y in sorted(FEDERAL_BRACKETS))
        typer.echo(f"Error: No tax tables for {year}. Supported years: {supported}", err=True)
        raise typer.Exit(1)

    typer.echo(f"=== Federal Brackets: {year} ({fs.value}) ===")
    typer.echo(f"  {'Over':>12}  {'Up to':>12}  {'Base Tax':>12}  {'Rate':>5}")
    prev = 0
    for upper, base, rate in table:
        upper_label = f"{upper:,.0f}" if upper is not None else "and up"
        typer.echo(f"  {prev:>12,.0f}  {upper_label:>12}  {base:>12,.2f}  {rate * 100:>4.0f}%")
        prev = upper if upper is not None else prev
    typer.echo("")
    typer.echo(f"  Standard Deduction: ${FEDERAL_STANDARD_DEDUCTION[year][fs]:,.2f}")


@app.command()
def wizard(
    quick: bool = typer.Option(
        False,
        "--quick",
        "-q",
        help="Quick-start form: income, loan, rate and filing status only",
    ),
) -> None:
    """Interactive step-by-step calculator."""
    from proptax.wizard import run_wizard

    run_wizard(quick=quick)


if __name__ == "__main__":
    app()
