"""Report output models."""

from decimal import Decimal

from pydantic import BaseModel, Field

from proptax.models.enums import DeductionChoice, FilingStatus

_EXPLANATIONS: dict[DeductionChoice, str] = {
    DeductionChoice.ITEMIZED: "You save money by itemizing deductions.",
    DeductionChoice.STANDARD: "You save more by taking the standard deduction.",
    DeductionChoice.TIE: "Both deduction methods result in the same tax liability.",
}


class TaxEstimate(BaseModel):
    tax_year: int
    filing_status: FilingStatus
    is_rental: bool = False
    dependents: int = 0
    # Income
    income: Decimal
    retirement_contributions: Decimal
    net_rental_income: Decimal = Decimal("0")
    adjusted_income: Decimal
    # Deductions
    mortgage_interest: Decimal
    standard_deduction: Decimal
    itemized_deduction: Decimal
    # Taxable income
    taxable_income_standard: Decimal
    taxable_income_itemized: Decimal
    # Liability
    tax_liability_standard: Decimal
    tax_liability_itemized_raw: Decimal
    tax_credits: Decimal = Decimal("0")
    tax_liability_itemized: Decimal
    # Comparison
    tax_savings: Decimal
    recommendation: DeductionChoice
    warnings: list[str] = Field(default_factory=list)

    @property
    def display_savings(self) -> Decimal:
        """Savings as shown on the results panel: never below zero."""
        return max(self.tax_savings, Decimal("0"))

    def explanation(self) -> str:
        """One-sentence recommendation for the results panel."""
        return _EXPLANATIONS[self.recommendation]
