"""Custom exceptions for the property tax savings estimator."""

from pathlib import Path


class TaxComputationError(Exception):
    """Base exception for tax computation errors."""


class UnsupportedTaxYearError(TaxComputationError):
    """Raised when no constant tables exist for a tax year / filing status."""

    def __init__(self, tax_year: int, filing_status: str | None = None):
        self.tax_year = tax_year
        self.filing_status = filing_status
        target = f"{tax_year}/{filing_status}" if filing_status else str(tax_year)
        super().__init__(f"No tax tables for {target}")


class InputFileError(TaxComputationError):
    """Raised when an estimate input file cannot be read or parsed."""

    def __init__(self, file_path: Path | str, message: str):
        self.file_path = str(file_path)
        super().__init__(f"Input file error for {file_path}: {message}")
