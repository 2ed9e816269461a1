"""Caller-facing entry points.

Each call builds its own calculator from *config* (defaults: 20 significant
digits, round half up), so calls never share mutable state.
"""

from collections.abc import Mapping
from typing import Any

from corptax.config import CalculatorConfig
from corptax.engines.corporate import CorporateTaxCalculator
from corptax.engines.filing import FilingMethodCalculator
from corptax.engines.rates import book_review_rate, income_standard_rate, list_industries
from corptax.exceptions import TaxComputationError
from corptax.models.inputs import FilingParams, FinancialInput
from corptax.models.results import CalculationOutcome, FilingResult, FullTaxResult

__all__ = [
    "book_review_rate",
    "compute_by_filing_method",
    "compute_direct",
    "income_standard_rate",
    "list_industries",
    "try_compute_by_filing_method",
    "try_compute_direct",
]


def compute_direct(
    inputs: FinancialInput | Mapping[str, Any],
    config: CalculatorConfig | None = None,
) -> FullTaxResult:
    return CorporateTaxCalculator(config).compute_full_tax(inputs)


def compute_by_filing_method(
    params: FilingParams | Mapping[str, Any],
    config: CalculatorConfig | None = None,
) -> FilingResult:
    return FilingMethodCalculator(config).compute(params)


def _failure(exc: TaxComputationError) -> CalculationOutcome:
    return CalculationOutcome(ok=False, error_kind=exc.kind, error_message=str(exc))


def try_compute_direct(
    inputs: FinancialInput | Mapping[str, Any],
    config: CalculatorConfig | None = None,
) -> CalculationOutcome:
    """Like compute_direct, but returns a tagged failure instead of raising."""
    try:
        return CalculationOutcome(ok=True, result=compute_direct(inputs, config))
    except TaxComputationError as exc:
        return _failure(exc)


def try_compute_by_filing_method(
    params: FilingParams | Mapping[str, Any],
    config: CalculatorConfig | None = None,
) -> CalculationOutcome:
    """Like compute_by_filing_method, but returns a tagged failure instead of raising."""
    try:
        return CalculationOutcome(ok=True, result=compute_by_filing_method(params, config))
    except TaxComputationError as exc:
        return _failure(exc)
