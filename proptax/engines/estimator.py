"""Tax-savings estimation engine.

Computes federal income tax under the standard deduction and under
itemized deductions for the same household, then compares the two.
Implements:
  - Progressive ordinary income tax from (upper bound, base, rate) brackets
  - Mortgage interest from loan amount and rate
  - Itemized deductions with the SALT cap; home repairs move to the rental
    schedule when the property is rented
  - Rental income netting into adjusted income
  - Per-dependent credit against the itemized liability
"""

import logging
from decimal import Decimal

from proptax.engines.brackets import (
    DEPENDENT_CREDIT,
    FEDERAL_BRACKETS,
    FEDERAL_SALT_CAP,
    FEDERAL_STANDARD_DEDUCTION,
    Bracket,
)
from proptax.config import DEFAULT_TAX_YEAR
from proptax.exceptions import UnsupportedTaxYearError
from proptax.models.enums import DeductionChoice, FilingStatus
from proptax.models.inputs import EstimateInput
from proptax.models.reports import TaxEstimate

logger = logging.getLogger(__name__)


class TaxEstimator:
    """Estimates federal tax liability with standard vs. itemized deductions."""

    def __init__(self) -> None:
        self.warnings: list[str] = []

    def estimate(self, inputs: EstimateInput) -> TaxEstimate:
        """Run both deduction paths for *inputs* and compare them."""
        self.warnings = []
        year = inputs.tax_year
        status = inputs.filing_status

        # 1. Deductions
        mortgage_interest = self.compute_mortgage_interest(
            inputs.loan_amount, inputs.interest_rate
        )
        standard = self.standard_deduction(status, year)
        itemized = self.compute_itemized_deduction(inputs, mortgage_interest)

        # 2. Income
        net_rental = self.compute_net_rental_income(inputs)
        adjusted_income = self.compute_adjusted_income(inputs, net_rental)

        # 3. Taxable income, floored at zero
        taxable_standard = max(adjusted_income - standard, Decimal("0"))
        taxable_itemized = max(adjusted_income - itemized, Decimal("0"))

        # 4. Liability
        liability_standard = self.compute_bracket_tax(taxable_standard, status, year)
        liability_itemized_raw = self.compute_bracket_tax(taxable_itemized, status, year)
        credits = self.compute_tax_credits(inputs.dependents, year)
        liability_itemized = max(liability_itemized_raw - credits, Decimal("0"))

        if credits > liability_itemized_raw:
            self.warnings.append(
                f"Dependent credits of ${credits:,.2f} exceed the itemized tax "
                f"liability of ${liability_itemized_raw:,.2f}. "
                f"${credits - liability_itemized_raw:,.2f} of credit is unused."
            )

        # 5. Comparison
        savings = liability_standard - liability_itemized
        recommendation = self.recommend(savings)

        logger.debug(
            "Estimate %s/%s: standard=%s itemized=%s savings=%s (%s)",
            year,
            status.value,
            liability_standard,
            liability_itemized,
            savings,
            recommendation.value,
        )

        return TaxEstimate(
            tax_year=year,
            filing_status=status,
            is_rental=inputs.is_rental,
            dependents=inputs.dependents,
            income=inputs.income,
            retirement_contributions=inputs.retirement_contributions,
            net_rental_income=net_rental,
            adjusted_income=adjusted_income,
            mortgage_interest=mortgage_interest,
            standard_deduction=standard,
            itemized_deduction=itemized,
            taxable_income_standard=taxable_standard,
            taxable_income_itemized=taxable_itemized,
            tax_liability_standard=liability_standard,
            tax_liability_itemized_raw=liability_itemized_raw,
            tax_credits=credits,
            tax_liability_itemized=liability_itemized,
            tax_savings=savings,
            recommendation=recommendation,
            warnings=list(self.warnings),
        )

    # ------------------------------------------------------------------
    # Deduction components
    # ------------------------------------------------------------------

    @staticmethod
    def compute_mortgage_interest(loan_amount: Decimal, interest_rate: Decimal) -> Decimal:
        """Annual interest on the full loan amount; *interest_rate* is a percent."""
        return loan_amount * interest_rate / Decimal("100")

    def standard_deduction(
        self, filing_status: FilingStatus, tax_year: int = DEFAULT_TAX_YEAR
    ) -> Decimal:
        amounts = FEDERAL_STANDARD_DEDUCTION.get(tax_year)
        if not amounts or filing_status not in amounts:
            raise UnsupportedTaxYearError(tax_year, filing_status.value)
        return amounts[filing_status]

    def compute_itemized_deduction(
        self, inputs: EstimateInput, mortgage_interest: Decimal | None = None
    ) -> Decimal:
        """Sum the itemizable expenses.

        State taxes are capped at the SALT limit. Home repairs count only for a
        personal residence; on a rental they are netted against rental income.
        """
        if mortgage_interest is None:
            mortgage_interest = self.compute_mortgage_interest(
                inputs.loan_amount, inputs.interest_rate
            )

        salt_cap = FEDERAL_SALT_CAP.get(inputs.tax_year)
        if salt_cap is None:
            raise UnsupportedTaxYearError(inputs.tax_year)
        salt = min(inputs.state_taxes, salt_cap)
        salt_cap_lost = inputs.state_taxes - salt
        if salt_cap_lost > Decimal("0"):
            self.warnings.append(
                f"SALT cap: ${inputs.state_taxes:,.2f} in state/local taxes exceeds "
                f"the ${salt_cap:,.2f} federal limit. "
                f"${salt_cap_lost:,.2f} is not deductible."
            )

        total = mortgage_interest + inputs.property_tax + salt + inputs.other_deductions
        if not inputs.is_rental:
            total += inputs.home_repairs
        return total

    def compute_net_rental_income(self, inputs: EstimateInput) -> Decimal:
        if not inputs.is_rental:
            return Decimal("0")
        net = inputs.rental_income - inputs.rental_expenses - inputs.home_repairs
        if net < Decimal("0"):
            self.warnings.append(
                f"Rental property shows a net loss of ${-net:,.2f}, "
                "which reduces adjusted income in full (passive loss limits not applied)."
            )
        return net

    @staticmethod
    def compute_adjusted_income(inputs: EstimateInput, net_rental_income: Decimal) -> Decimal:
        adjusted = inputs.income - inputs.retirement_contributions
        if inputs.is_rental:
            adjusted += net_rental_income
        return adjusted

    @staticmethod
    def compute_tax_credits(dependents: int, tax_year: int) -> Decimal:
        per_dependent = DEPENDENT_CREDIT.get(tax_year)
        if per_dependent is None:
            raise UnsupportedTaxYearError(tax_year)
        return per_dependent * dependents

    @staticmethod
    def recommend(tax_savings: Decimal) -> DeductionChoice:
        """Which deduction method wins given the signed savings from itemizing."""
        if tax_savings > Decimal("0"):
            return DeductionChoice.ITEMIZED
        if tax_savings < Decimal("0"):
            return DeductionChoice.STANDARD
        return DeductionChoice.TIE

    # ------------------------------------------------------------------
    # Tax computation
    # ------------------------------------------------------------------

    def compute_bracket_tax(
        self,
        taxable_income: Decimal,
        filing_status: FilingStatus,
        tax_year: int = DEFAULT_TAX_YEAR,
    ) -> Decimal:
        """Compute federal ordinary income tax using progressive brackets."""
        brackets = FEDERAL_BRACKETS.get(tax_year, {}).get(filing_status)
        if not brackets:
            raise UnsupportedTaxYearError(tax_year, filing_status.value)
        return self._apply_brackets(taxable_income, brackets)

    @staticmethod
    def _apply_brackets(income: Decimal, brackets: list[Bracket]) -> Decimal:
        """Base tax of the first bracket containing *income* plus its marginal excess."""
        prev_bound = Decimal("0")
        for upper_bound, base, rate in brackets:
            if upper_bound is None or income <= upper_bound:
                return base + rate * (income - prev_bound)
            prev_bound = upper_bound
        # Tables always end with an unbounded bracket
        raise ValueError("Bracket table has no top bracket")
