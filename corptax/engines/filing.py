"""Filing-method tax engine.

Dispatches on the filing method:
  - book:     taxable income = revenue x book-review net profit rate
  - standard: taxable income = revenue x income-standard rate
  - audit:    taxable income = accounting profit + non-deductible expenses
              - additional deductions - prior losses (clamped at zero)

Basic tax is 20% of taxable income. Undistributed-earnings tax is 5% of the
whole taxable income; unlike CorporateTaxCalculator, no dividend or legal
reserve deduction is applied here.
"""

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from corptax.config import CalculatorConfig, build_context
from corptax.engines.coercion import ZERO, arithmetic, parse_filing_method, parse_filing_params
from corptax.engines.corporate import format_rate
from corptax.engines.rates import (
    CORPORATE_TAX_RATE,
    UNDISTRIBUTED_EARNINGS_TAX_RATE,
    book_review_rate,
    income_standard_rate,
)
from corptax.exceptions import TaxComputationError
from corptax.models.enums import FilingMethod
from corptax.models.inputs import FilingParams
from corptax.models.results import FilingResult

logger = logging.getLogger(__name__)


class FilingMethodCalculator:
    """Computes tax under the book, standard, or audit filing method."""

    def __init__(self, config: CalculatorConfig | None = None) -> None:
        self.config = config or CalculatorConfig()
        self.context = build_context(self.config)

    def compute(self, data: FilingParams | Mapping[str, Any]) -> FilingResult:
        try:
            params = parse_filing_params(data)
            method = parse_filing_method(params.filing_method)
        except TaxComputationError:
            logger.error("Filing method computation failed", exc_info=True)
            raise
        logger.debug("Computing %s filing for industry=%s", method, params.industry)

        applied_rate: Decimal | None = None
        with arithmetic(self.context, "filingTax"):
            if method == FilingMethod.AUDIT:
                taxable_income = self.compute_audit_taxable_income(params)
            else:
                applied_rate = self.resolve_rate(method, params)
                taxable_income = params.revenue * applied_rate

            basic_tax = taxable_income * CORPORATE_TAX_RATE
            undistributed_tax = taxable_income * UNDISTRIBUTED_EARNINGS_TAX_RATE
            total_tax = basic_tax + undistributed_tax

            if params.revenue.is_zero():
                effective_rate = "0.00%"
            else:
                effective_rate = format_rate(total_tax, params.revenue) + "%"

        return FilingResult(
            filing_method=method,
            applied_rate=applied_rate,
            taxable_income=taxable_income,
            basic_tax=basic_tax,
            undistributed_tax=undistributed_tax,
            total_tax=total_tax,
            effective_rate=effective_rate,
        )

    def resolve_rate(self, method: FilingMethod, params: FilingParams) -> Decimal:
        """Custom rate if set and non-zero, else the industry table rate."""
        if params.custom_rate:
            return params.custom_rate
        if method == FilingMethod.BOOK:
            return book_review_rate(params.industry)
        return income_standard_rate(params.industry)

    def compute_audit_taxable_income(self, params: FilingParams) -> Decimal:
        with arithmetic(self.context, "taxableIncome"):
            taxable = (
                params.accounting_profit
                + params.non_deductible
                - params.additional_deduct
                - params.prior_losses
            )
            return max(taxable, ZERO)
