"""Interactive step-by-step calculator.

Walks the user through the calculator form:
  Section 1 — Basic inputs (income, loan, rate, filing status)
  Section 2 — Property (property tax, repairs, rental details)
  Section 3 — Other deductions (retirement, SALT, other, dependents)
  Results  — standard vs. itemized comparison, then optionally recalculate

Quick-start mode asks only for Section 1 and leaves everything else at 0.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.rule import Rule
from rich.table import Table

from proptax.cli import MASCOT
from proptax.config import DEFAULT_TAX_YEAR, WIZARD_DEFAULTS
from proptax.engines.brackets import (
    DEPENDENT_CREDIT,
    FEDERAL_SALT_CAP,
    FEDERAL_STANDARD_DEDUCTION,
    SUPPORTED_TAX_YEARS,
)
from proptax.engines.estimator import TaxEstimator
from proptax.models.enums import DeductionChoice, FilingStatus
from proptax.models.inputs import EstimateInput, parse_filing_status
from proptax.models.reports import TaxEstimate
from proptax.reports import format_money

_FS_CHOICES = ["SINGLE", "MARRIED"]


def _filing_status_to_enum(key: str) -> FilingStatus:
    """Convert a short filing-status key (e.g. 'MARRIED') to a FilingStatus enum."""
    if key.upper() not in _FS_CHOICES:
        raise KeyError(key)
    return parse_filing_status(key)


# ---------------------------------------------------------------------------
# Decimal prompt helper
# ---------------------------------------------------------------------------


def _prompt_decimal(
    label: str,
    default: Decimal,
    console: Console,
) -> Decimal:
    """Prompt the user for a Decimal value, retrying on bad input."""
    while True:
        raw = Prompt.ask(
            label,
            default=str(default),
            console=console,
        )
        try:
            return Decimal(raw.strip())
        except InvalidOperation:
            console.print(f"[red]Invalid number: {raw!r}. Try again.[/red]")


def _default(field: str) -> Decimal:
    return Decimal(WIZARD_DEFAULTS[field])


def _show_section_header(title: str, console: Console) -> None:
    console.print()
    console.print(Rule(title, style="bold cyan"))
    console.print()


# ---------------------------------------------------------------------------
# Form sections
# ---------------------------------------------------------------------------


def _section_basic(console: Console) -> dict:
    _show_section_header("Basic Inputs", console)
    values: dict = {
        "income": _prompt_decimal("Annual income ($)", _default("income"), console),
        "loan_amount": _prompt_decimal("Loan amount ($)", _default("loan_amount"), console),
        "interest_rate": _prompt_decimal(
            "Interest rate (%)", _default("interest_rate"), console
        ),
    }
    fs_key = Prompt.ask(
        "Filing status",
        choices=_FS_CHOICES,
        default="SINGLE",
        console=console,
    )
    values["filing_status"] = _filing_status_to_enum(fs_key)
    return values


def _section_property(console: Console) -> dict:
    _show_section_header("Property-Related Inputs", console)
    values: dict = {
        "property_tax": _prompt_decimal(
            "Annual property tax ($)", _default("property_tax"), console
        ),
        "home_repairs": _prompt_decimal(
            "Home repairs/improvements ($)", _default("home_repairs"), console
        ),
    }
    values["is_rental"] = Confirm.ask(
        "Is this a rental property?", default=False, console=console
    )
    if values["is_rental"]:
        values["rental_income"] = _prompt_decimal(
            "  Annual rental income ($)", _default("rental_income"), console
        )
        values["rental_expenses"] = _prompt_decimal(
            "  Rental expenses ($)", _default("rental_expenses"), console
        )
    return values


def _section_other(console: Console) -> dict:
    _show_section_header("Other Deductions and Contributions", console)
    values: dict = {
        "retirement_contributions": _prompt_decimal(
            "401(k)/Traditional IRA contributions ($)",
            _default("retirement_contributions"),
            console,
        ),
        "other_deductions": _prompt_decimal(
            "Other deductions ($)", _default("other_deductions"), console
        ),
        "state_taxes": _prompt_decimal(
            "State and local taxes ($)", _default("state_taxes"), console
        ),
        "dependents": IntPrompt.ask(
            "Number of dependents",
            default=int(WIZARD_DEFAULTS["dependents"]),
            console=console,
        ),
    }
    values["tax_year"] = IntPrompt.ask(
        "Tax year",
        choices=[str(y) for y in SUPPORTED_TAX_YEARS],
        default=DEFAULT_TAX_YEAR,
        console=console,
    )
    return values


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


def _display_estimate(result: TaxEstimate, console: Console) -> None:
    """Pretty-print a TaxEstimate using Rich."""
    ded = Table(title="Deductions", show_header=False, padding=(0, 1))
    ded.add_column("", style="cyan", min_width=28)
    ded.add_column("", justify="right", style="green")
    ded.add_row("Annual Mortgage Interest", format_money(result.mortgage_interest))
    ded.add_row("Standard Deduction", format_money(result.standard_deduction))
    ded.add_row("Itemized Deduction", format_money(result.itemized_deduction))
    if result.is_rental:
        ded.add_row("Net Rental Income", format_money(result.net_rental_income))
    console.print(ded)

    cmp_table = Table(title="Tax Liability")
    cmp_table.add_column("", style="cyan", min_width=20)
    cmp_table.add_column("Standard", justify="right", style="green")
    cmp_table.add_column("Itemized", justify="right", style="green")
    cmp_table.add_row(
        "Taxable Income",
        format_money(result.taxable_income_standard),
        format_money(result.taxable_income_itemized),
    )
    if result.tax_credits > 0:
        cmp_table.add_row("Dependent Credits", "", format_money(-result.tax_credits))
    cmp_table.add_row(
        "Tax Liability",
        format_money(result.tax_liability_standard),
        format_money(result.tax_liability_itemized),
    )
    console.print(cmp_table)

    style = "bold green" if result.recommendation == DeductionChoice.ITEMIZED else "bold yellow"
    console.print(
        Panel(
            f"[bold]Tax Savings:[/bold] {format_money(result.display_savings)}\n"
            f"[{style}]{result.explanation()}[/{style}]",
            title="[bold]Summary[/bold]",
            border_style="cyan",
        )
    )

    for w in result.warnings:
        console.print(f"[yellow]Warning: {w}[/yellow]")


def _describe_change(previous: Decimal | None, current: Decimal) -> str | None:
    """Sentence comparing this run's itemized liability with the previous run."""
    if previous is None:
        return None
    delta = current - previous
    if delta < 0:
        return f"Your tax liability went down by {format_money(-delta)} since the last calculation."
    if delta > 0:
        return f"Your tax liability went up by {format_money(delta)} since the last calculation."
    return "Your tax liability is unchanged since the last calculation."


def _assumptions(tax_year: int = DEFAULT_TAX_YEAR) -> str:
    """Bullet list of what the estimate assumes, built from the year's tables."""
    std = FEDERAL_STANDARD_DEDUCTION[tax_year]
    return "\n".join([
        f"- Tax rates follow the {tax_year} federal brackets.",
        f"- Standard deduction: {format_money(std[FilingStatus.SINGLE])} single,",
        f"  {format_money(std[FilingStatus.MFJ])} married filing jointly.",
        "- Itemized deductions are mortgage interest, property tax, state and",
        "  local taxes, other deductions and home repairs (not on a rental).",
        f"- State and local taxes are capped at {format_money(FEDERAL_SALT_CAP[tax_year])}.",
        "- Rental income less expenses and repairs is added to income.",
        "- Retirement contributions reduce income before either deduction.",
        f"- Each dependent earns a {format_money(DEPENDENT_CREDIT[tax_year])} credit "
        "against the itemized tax.",
    ])


def run_wizard(console: Console | None = None, quick: bool = False) -> None:
    """Main wizard orchestration — called from cli.py."""
    if console is None:
        console = Console()

    console.print(
        Panel(
            f"[bold green]{MASCOT}[/bold green]\n"
            "[bold]Interactive Deduction Calculator[/bold]\n\n"
            "Compares your federal tax under the standard deduction\n"
            "with itemizing mortgage interest, property and state taxes.\n"
            "Estimates only; consult a tax professional for advice.",
            title="[bold cyan]Property Tax Savings Estimator[/bold cyan]",
            border_style="cyan",
        )
    )
    console.print(
        Panel(
            _assumptions(),
            title="[bold]Assumptions[/bold]",
            border_style="dim",
        )
    )

    engine = TaxEstimator()
    previous_liability: Decimal | None = None

    while True:
        values = _section_basic(console)
        if not quick:
            values.update(_section_property(console))
            values.update(_section_other(console))

        result = engine.estimate(EstimateInput(**values))

        _show_section_header("Results", console)
        _display_estimate(result, console)

        change = _describe_change(previous_liability, result.tax_liability_itemized)
        if change:
            console.print(f"[dim]{change}[/dim]")
        previous_liability = result.tax_liability_itemized

        if not Confirm.ask("\nCalculate again?", default=False, console=console):
            break

    console.print("[bold green]Done![/bold green]")
