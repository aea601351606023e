"""Runtime defaults for the estimator and CLI."""

DEFAULT_TAX_YEAR = 2023

# Environment variable consulted by the CLI when --year is not given.
TAX_YEAR_ENVVAR = "PROPTAX_TAX_YEAR"

# Pre-filled values shown by the interactive wizard.
WIZARD_DEFAULTS: dict[str, str] = {
    "income": "100000",
    "loan_amount": "300000",
    "interest_rate": "4",
    "property_tax": "3000",
    "home_repairs": "2000",
    "retirement_contributions": "6000",
    "other_deductions": "1000",
    "state_taxes": "5000",
    "rental_income": "0",
    "rental_expenses": "0",
    "dependents": "0",
}
