"""Tests for TaxEstimator — standard vs. itemized comparison.

Expected values are hand-computed from the 2023 bracket tables.
"""

from decimal import Decimal

import pytest

from proptax.exceptions import UnsupportedTaxYearError
from proptax.models.enums import DeductionChoice, FilingStatus
from proptax.models.inputs import EstimateInput


class TestHomeownerSingle:
    """Pre-filled form values: $100k single, $300k loan at 4%, not a rental."""

    def test_deductions(self, engine, homeowner_input):
        r = engine.estimate(homeowner_input)
        assert r.mortgage_interest == Decimal("12000")
        assert r.standard_deduction == Decimal("13850")
        assert r.itemized_deduction == Decimal("23000")

    def test_income(self, engine, homeowner_input):
        r = engine.estimate(homeowner_input)
        assert r.net_rental_income == Decimal("0")
        assert r.adjusted_income == Decimal("94000")
        assert r.taxable_income_standard == Decimal("80150")
        assert r.taxable_income_itemized == Decimal("71000")

    def test_liability(self, engine, homeowner_input):
        r = engine.estimate(homeowner_input)
        assert r.tax_liability_standard == Decimal("12940.50")
        assert r.tax_liability_itemized_raw == Decimal("10927.50")
        assert r.tax_credits == Decimal("0")
        assert r.tax_liability_itemized == Decimal("10927.50")

    def test_comparison(self, engine, homeowner_input):
        r = engine.estimate(homeowner_input)
        assert r.tax_savings == Decimal("2013.00")
        assert r.recommendation == DeductionChoice.ITEMIZED
        assert r.explanation() == "You save money by itemizing deductions."
        assert r.warnings == []

    def test_repeatable(self, engine, homeowner_input):
        first = engine.estimate(homeowner_input)
        second = engine.estimate(homeowner_input)
        assert first == second


class TestRentalProperty:
    """Same household renting the property out: $24k rent, $4k expenses."""

    def test_home_repairs_excluded_from_itemized(self, engine, rental_input):
        r = engine.estimate(rental_input)
        assert r.itemized_deduction == Decimal("21000")

    def test_net_rental_income(self, engine, rental_input):
        r = engine.estimate(rental_input)
        assert r.net_rental_income == Decimal("18000")
        assert r.adjusted_income == Decimal("112000")

    def test_liability(self, engine, rental_input):
        r = engine.estimate(rental_input)
        assert r.taxable_income_standard == Decimal("98150")
        assert r.taxable_income_itemized == Decimal("91000")
        assert r.tax_liability_standard == Decimal("16956.00")
        assert r.tax_liability_itemized == Decimal("15327.50")
        assert r.tax_savings == Decimal("1628.50")

    def test_rental_loss_warning(self, engine, rental_input):
        losing = rental_input.model_copy(update={"rental_income": Decimal("1000")})
        r = engine.estimate(losing)
        assert r.net_rental_income == Decimal("-5000")
        assert r.adjusted_income == Decimal("89000")
        assert any("net loss of $5,000.00" in w for w in r.warnings)

    def test_rental_fields_ignored_when_not_rental(self, engine, homeowner_input):
        with_rent = homeowner_input.model_copy(
            update={"rental_income": Decimal("50000"), "rental_expenses": Decimal("1")}
        )
        assert engine.estimate(with_rent) == engine.estimate(homeowner_input)


class TestDependentCredits:
    def test_credits_reduce_itemized_only(self, engine, homeowner_input):
        r = engine.estimate(homeowner_input.model_copy(update={"dependents": 2}))
        assert r.tax_credits == Decimal("4000")
        assert r.tax_liability_itemized_raw == Decimal("10927.50")
        assert r.tax_liability_itemized == Decimal("6927.50")
        assert r.tax_liability_standard == Decimal("12940.50")
        assert r.tax_savings == Decimal("6013.00")

    def test_credits_floor_at_zero(self, engine):
        inputs = EstimateInput(income=Decimal("30000"), dependents=3)
        r = engine.estimate(inputs)
        assert r.tax_liability_itemized_raw == Decimal("3380.00")
        assert r.tax_liability_itemized == Decimal("0")
        assert r.tax_liability_standard == Decimal("1718.00")
        assert r.tax_savings == Decimal("1718.00")
        assert any("$2,620.00 of credit is unused" in w for w in r.warnings)


class TestSALTCap:
    def test_state_taxes_capped(self, engine, homeowner_input):
        r = engine.estimate(homeowner_input.model_copy(update={"state_taxes": Decimal("15000")}))
        assert r.itemized_deduction == Decimal("28000")
        assert len(r.warnings) == 1
        assert "$5,000.00 is not deductible" in r.warnings[0]

    def test_at_cap_no_warning(self, engine, homeowner_input):
        r = engine.estimate(homeowner_input.model_copy(update={"state_taxes": Decimal("10000")}))
        assert r.itemized_deduction == Decimal("28000")
        assert r.warnings == []

    def test_warnings_reset_between_calls(self, engine, homeowner_input):
        engine.estimate(homeowner_input.model_copy(update={"state_taxes": Decimal("15000")}))
        r = engine.estimate(homeowner_input)
        assert r.warnings == []
        assert engine.warnings == []


class TestRecommendation:
    def test_standard_wins(self, engine):
        r = engine.estimate(EstimateInput(income=Decimal("60000")))
        assert r.tax_liability_standard == Decimal("5460.50")
        assert r.tax_liability_itemized == Decimal("8507.50")
        assert r.tax_savings == Decimal("-3047.00")
        assert r.recommendation == DeductionChoice.STANDARD
        assert r.display_savings == Decimal("0")
        assert r.explanation() == "You save more by taking the standard deduction."

    def test_tie(self, engine):
        r = engine.estimate(EstimateInput())
        assert r.tax_savings == Decimal("0")
        assert r.recommendation == DeductionChoice.TIE

    @pytest.mark.parametrize(
        "savings,expected",
        [
            (Decimal("0.01"), DeductionChoice.ITEMIZED),
            (Decimal("-0.01"), DeductionChoice.STANDARD),
            (Decimal("0"), DeductionChoice.TIE),
        ],
    )
    def test_sign_rule(self, engine, savings, expected):
        assert engine.recommend(savings) == expected


class TestMarried:
    def test_married_standard_deduction(self, engine, homeowner_input):
        r = engine.estimate(homeowner_input.model_copy(update={"filing_status": FilingStatus.MFJ}))
        assert r.standard_deduction == Decimal("27700")
        assert r.taxable_income_standard == Decimal("66300")
        assert r.taxable_income_itemized == Decimal("71000")
        assert r.tax_savings < Decimal("0")
        assert r.recommendation == DeductionChoice.STANDARD


class TestEdgeInputs:
    def test_negative_income_floors_taxable(self, engine):
        r = engine.estimate(EstimateInput(income=Decimal("-5000")))
        assert r.adjusted_income == Decimal("-5000")
        assert r.taxable_income_standard == Decimal("0")
        assert r.taxable_income_itemized == Decimal("0")
        assert r.tax_liability_standard == Decimal("0")

    def test_itemized_above_income(self, engine):
        r = engine.estimate(
            EstimateInput(
                income=Decimal("20000"),
                loan_amount=Decimal("500000"),
                interest_rate=Decimal("7"),
            )
        )
        assert r.itemized_deduction == Decimal("35000")
        assert r.taxable_income_itemized == Decimal("0")

    def test_unsupported_year(self, engine, homeowner_input):
        with pytest.raises(UnsupportedTaxYearError):
            engine.estimate(homeowner_input.model_copy(update={"tax_year": 1999}))

    def test_2024_year(self, engine, homeowner_input):
        r = engine.estimate(homeowner_input.model_copy(update={"tax_year": 2024}))
        assert r.tax_year == 2024
        assert r.standard_deduction == Decimal("14600")


class TestComponents:
    def test_mortgage_interest(self, engine):
        assert engine.compute_mortgage_interest(Decimal("250000"), Decimal("6.5")) == Decimal("16250")

    def test_itemized_includes_repairs_for_residence(self, engine, homeowner_input):
        assert engine.compute_itemized_deduction(homeowner_input) == Decimal("23000")

    def test_itemized_excludes_repairs_for_rental(self, engine, rental_input):
        assert engine.compute_itemized_deduction(rental_input) == Decimal("21000")

    def test_tax_credits(self, engine):
        assert engine.compute_tax_credits(3, 2023) == Decimal("6000")
        assert engine.compute_tax_credits(0, 2023) == Decimal("0")
