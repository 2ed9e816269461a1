"""Data models for the corporate tax calculator."""

from corptax.models.enums import ErrorKind, FilingMethod, Industry
from corptax.models.inputs import FilingParams, FinancialInput
from corptax.models.results import (
    CalculationOutcome,
    FilingResult,
    FullTaxResult,
    TaxableIncomeResult,
    UndistributedEarningsResult,
)

__all__ = [
    "CalculationOutcome",
    "ErrorKind",
    "FilingMethod",
    "FilingParams",
    "FilingResult",
    "FinancialInput",
    "FullTaxResult",
    "Industry",
    "TaxableIncomeResult",
    "UndistributedEarningsResult",
]
