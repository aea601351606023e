"""Report generation for the property tax savings estimator."""

from proptax.reports.deduction_summary import DeductionSummaryGenerator, format_money

__all__ = [
    "DeductionSummaryGenerator",
    "format_money",
]
