"""Shared test fixtures for the property tax savings estimator."""

from decimal import Decimal

import pytest

from proptax.engines.estimator import TaxEstimator
from proptax.models.enums import FilingStatus
from proptax.models.inputs import EstimateInput


@pytest.fixture
def engine() -> TaxEstimator:
    return TaxEstimator()


@pytest.fixture
def homeowner_input() -> EstimateInput:
    """The calculator form's pre-filled values: single homeowner, not a rental."""
    return EstimateInput(
        income=Decimal("100000"),
        loan_amount=Decimal("300000"),
        interest_rate=Decimal("4"),
        filing_status=FilingStatus.SINGLE,
        property_tax=Decimal("3000"),
        home_repairs=Decimal("2000"),
        retirement_contributions=Decimal("6000"),
        other_deductions=Decimal("1000"),
        state_taxes=Decimal("5000"),
    )


@pytest.fixture
def rental_input(homeowner_input: EstimateInput) -> EstimateInput:
    return homeowner_input.model_copy(
        update={
            "is_rental": True,
            "rental_income": Decimal("24000"),
            "rental_expenses": Decimal("4000"),
        }
    )
