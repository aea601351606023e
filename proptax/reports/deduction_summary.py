"""Standard vs. itemized deduction summary report generator."""

from decimal import Decimal
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from proptax.models.reports import TaxEstimate

TEMPLATE_DIR = Path(__file__).parent / "templates"


def format_money(value: Decimal) -> str:
    """Format an amount as dollars with two decimals, sign before the symbol."""
    if value < 0:
        return f"-${-value:,.2f}"
    return f"${abs(value):,.2f}"


class DeductionSummaryGenerator:
    """Generates a human-readable deduction comparison report."""

    def __init__(self) -> None:
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["money"] = format_money

    def render(self, estimate: TaxEstimate) -> str:
        """Render the deduction summary report."""
        template = self.env.get_template("deduction_summary.txt")
        return template.render(est=estimate)
