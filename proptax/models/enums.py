"""Enumerations for the property tax savings estimator."""

from enum import StrEnum


class FilingStatus(StrEnum):
    SINGLE = "SINGLE"
    MFJ = "MARRIED_FILING_JOINTLY"


class DeductionChoice(StrEnum):
    ITEMIZED = "ITEMIZED"
    STANDARD = "STANDARD"
    TIE = "TIE"
