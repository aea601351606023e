"""Estimator input record.

Every field mirrors one entry of the calculator form. Values arrive as
whatever the caller has (form strings, CLI floats, JSON numbers) and are
coerced before validation: blank or unparseable amounts become 0, so
building an ``EstimateInput`` never fails on bad numbers.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel, Field, field_validator

from proptax.config import DEFAULT_TAX_YEAR
from proptax.models.enums import FilingStatus

FILING_STATUS_ALIASES: dict[str, FilingStatus] = {
    "SINGLE": FilingStatus.SINGLE,
    "MARRIED": FilingStatus.MFJ,
    "MFJ": FilingStatus.MFJ,
    "MARRIED_FILING_JOINTLY": FilingStatus.MFJ,
}

_TRUE_FLAGS = {"1", "true", "yes", "y", "on"}

# Amounts at or above 10**16 are treated as unparseable. Products of two
# such amounts stay well inside the default decimal context.
_MAX_AMOUNT_EXPONENT = 15


def coerce_amount(value: Any) -> Decimal:
    """Convert a raw form value to Decimal, defaulting to 0."""
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        amount = value
    else:
        raw = str(value).strip()
        if not raw:
            return Decimal("0")
        try:
            amount = Decimal(raw)
        except InvalidOperation:
            return Decimal("0")
    if not amount.is_finite() or amount.adjusted() > _MAX_AMOUNT_EXPONENT:
        return Decimal("0")
    return amount


def lookup_filing_status(value: Any) -> FilingStatus | None:
    """Return the FilingStatus for a known key or alias, else None."""
    if isinstance(value, FilingStatus):
        return value
    key = str(value or "").strip().upper().replace("-", "_").replace(" ", "_")
    return FILING_STATUS_ALIASES.get(key)


def parse_filing_status(value: Any) -> FilingStatus:
    """Map a filing-status key (``single``, ``married``, ``MFJ``...) to the enum.

    Unknown or blank values fall back to SINGLE, matching the form's default.
    """
    return lookup_filing_status(value) or FilingStatus.SINGLE


class EstimateInput(BaseModel):
    """Form values for one estimate. All amounts are annual."""

    income: Decimal = Field(default=Decimal("0"), description="Gross annual income")
    loan_amount: Decimal = Field(default=Decimal("0"), description="Outstanding mortgage principal")
    interest_rate: Decimal = Field(
        default=Decimal("0"),
        description="Mortgage interest rate in percent (4 means 4%)",
    )
    filing_status: FilingStatus = Field(default=FilingStatus.SINGLE)

    property_tax: Decimal = Field(default=Decimal("0"), description="Annual property tax")
    home_repairs: Decimal = Field(
        default=Decimal("0"),
        description="Home repairs/improvements; a rental expense when the property is rented",
    )
    retirement_contributions: Decimal = Field(
        default=Decimal("0"),
        description="401(k)/traditional IRA contributions (above-the-line)",
    )
    other_deductions: Decimal = Field(default=Decimal("0"), description="Other itemized deductions")
    state_taxes: Decimal = Field(
        default=Decimal("0"),
        description="State and local taxes paid (subject to the SALT cap)",
    )

    is_rental: bool = Field(default=False, description="Property is rented out")
    rental_income: Decimal = Field(default=Decimal("0"))
    rental_expenses: Decimal = Field(default=Decimal("0"))

    dependents: int = Field(default=0, ge=0)
    tax_year: int = Field(default=DEFAULT_TAX_YEAR)

    @field_validator(
        "income",
        "loan_amount",
        "interest_rate",
        "property_tax",
        "home_repairs",
        "retirement_contributions",
        "other_deductions",
        "state_taxes",
        "rental_income",
        "rental_expenses",
        mode="before",
    )
    @classmethod
    def _coerce_amounts(cls, value: Any) -> Decimal:
        return coerce_amount(value)

    @field_validator("filing_status", mode="before")
    @classmethod
    def _coerce_filing_status(cls, value: Any) -> FilingStatus:
        return parse_filing_status(value)

    @field_validator("is_rental", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        return str(value or "").strip().lower() in _TRUE_FLAGS

    @field_validator("dependents", mode="before")
    @classmethod
    def _coerce_dependents(cls, value: Any) -> int:
        if isinstance(value, bool):
            return 0
        return max(int(coerce_amount(value)), 0)

    @field_validator("tax_year", mode="before")
    @classmethod
    def _coerce_tax_year(cls, value: Any) -> int:
        if isinstance(value, bool):
            return DEFAULT_TAX_YEAR
        year = int(coerce_amount(value))
        return year or DEFAULT_TAX_YEAR
