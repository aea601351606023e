"""Data models for the property tax savings estimator."""

from proptax.models.enums import DeductionChoice, FilingStatus
from proptax.models.inputs import EstimateInput, coerce_amount, parse_filing_status
from proptax.models.reports import TaxEstimate

__all__ = [
    "DeductionChoice",
    "EstimateInput",
    "FilingStatus",
    "TaxEstimate",
    "coerce_amount",
    "parse_filing_status",
]
