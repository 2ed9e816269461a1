"""Taiwan corporate income tax and undistributed-earnings tax calculator."""

from corptax.api import (
    book_review_rate,
    compute_by_filing_method,
    compute_direct,
    income_standard_rate,
    list_industries,
    try_compute_by_filing_method,
    try_compute_direct,
)
from corptax.config import CalculatorConfig
from corptax.exceptions import (
    InitializationError,
    InvalidInputError,
    TaxComputationError,
    UnspecifiedFilingMethodError,
)

__version__ = "0.1.0"

__all__ = [
    "CalculatorConfig",
    "InitializationError",
    "InvalidInputError",
    "TaxComputationError",
    "UnspecifiedFilingMethodError",
    "book_review_rate",
    "compute_by_filing_method",
    "compute_direct",
    "income_standard_rate",
    "list_industries",
    "try_compute_by_filing_method",
    "try_compute_direct",
]
