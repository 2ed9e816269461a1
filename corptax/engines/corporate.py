"""Direct corporate income tax engine.

Computes, from income statement figures:
  - Taxable income after prior-period loss deduction (clamped at zero)
  - Basic corporate income tax at the flat 20% rate
  - Undistributed-earnings tax at 5% of after-tax earnings not distributed
    as dividends or set aside as legal reserve
  - Total tax and the effective rate against pre-tax net income

All arithmetic runs inside the calculator's own decimal context.
"""

import logging
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any

from corptax.config import CalculatorConfig, build_context
from corptax.engines.coercion import ZERO, arithmetic, coerce_decimal, parse_financial_input
from corptax.engines.rates import CORPORATE_TAX_RATE, UNDISTRIBUTED_EARNINGS_TAX_RATE
from corptax.exceptions import TaxComputationError
from corptax.models.inputs import FinancialInput
from corptax.models.results import (
    FullTaxResult,
    TaxableIncomeResult,
    UndistributedEarningsResult,
)

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")
TWO_PLACES = Decimal("0.01")


def format_rate(numerator: Decimal, denominator: Decimal) -> str:
    """numerator / denominator as a percentage string with two decimals.

    The division runs in the current context. The rendering context is sized
    to the integer digits of the percentage, so it never depends on the
    configured precision and cannot overflow.
    """
    percent = numerator / denominator * HUNDRED
    # integer digits + two decimals + one for a rounding carry
    display = Context(prec=max(percent.adjusted(), 0) + 4, rounding=ROUND_HALF_UP)
    return str(percent.quantize(TWO_PLACES, context=display))


class CorporateTaxCalculator:
    """Computes corporate income tax and undistributed-earnings tax."""

    def __init__(self, config: CalculatorConfig | None = None) -> None:
        self.config = config or CalculatorConfig()
        self.context = build_context(self.config)

    def compute_taxable_income(
        self, data: FinancialInput | Mapping[str, Any]
    ) -> TaxableIncomeResult:
        """Taxable income after deducting the prior-period loss.

        The loss used is bounded by current net income; taxable income never
        goes below zero.
        """
        try:
            inputs = parse_financial_input(data)
            with arithmetic(self.context, "taxableIncome"):
                gross_profit = inputs.revenue - inputs.cost
                operating_income = gross_profit - inputs.expense
                net_income_before_tax = (
                    operating_income + inputs.other_income - inputs.other_expense
                )
                taxable_income = max(net_income_before_tax - inputs.prior_loss, ZERO)
                used_prior_loss = min(inputs.prior_loss, net_income_before_tax)
        except TaxComputationError:
            logger.error("Taxable income computation failed", exc_info=True)
            raise

        return TaxableIncomeResult(
            gross_profit=gross_profit,
            operating_income=operating_income,
            net_income_before_tax=net_income_before_tax,
            taxable_income=taxable_income,
            used_prior_loss=used_prior_loss,
        )

    def compute_corporate_tax(self, taxable_income: Decimal | int | float | str) -> Decimal:
        """Basic corporate income tax: taxable income x 20%."""
        income = coerce_decimal("taxableIncome", taxable_income)
        with arithmetic(self.context, "corporateTax"):
            return income * CORPORATE_TAX_RATE

    def compute_undistributed_earnings_tax(
        self,
        net_income_after_tax: Decimal | int | float | str | None,
        dividend_distributed: Decimal | int | float | str | None = None,
        legal_reserve: Decimal | int | float | str | None = None,
    ) -> UndistributedEarningsResult:
        """5% tax on after-tax earnings left after dividends and legal reserve."""
        try:
            net_after = coerce_decimal("netIncomeAfterTax", net_income_after_tax)
            dividends = coerce_decimal("dividendDistributed", dividend_distributed)
            reserve = coerce_decimal("legalReserve", legal_reserve)
        except TaxComputationError:
            logger.error("Undistributed earnings tax computation failed", exc_info=True)
            raise

        with arithmetic(self.context, "undistributedEarnings"):
            deductible = dividends + reserve
            undistributed = max(net_after - deductible, ZERO)
            tax = undistributed * UNDISTRIBUTED_EARNINGS_TAX_RATE

        return UndistributedEarningsResult(undistributed_earnings=undistributed, tax=tax)

    def compute_full_tax(self, data: FinancialInput | Mapping[str, Any]) -> FullTaxResult:
        """Run the full pipeline: taxable income, corporate tax, undistributed tax."""
        try:
            inputs = parse_financial_input(data)
        except TaxComputationError:
            logger.error("Full tax computation failed", exc_info=True)
            raise
        logger.debug("Computing full tax for revenue=%s", inputs.revenue)

        income = self.compute_taxable_income(inputs)
        corporate_tax = self.compute_corporate_tax(income.taxable_income)

        with arithmetic(self.context, "netIncomeAfterTax"):
            net_income_after_tax = income.net_income_before_tax - corporate_tax

        undistributed = self.compute_undistributed_earnings_tax(
            net_income_after_tax,
            inputs.dividend_distributed,
            inputs.legal_reserve,
        )

        with arithmetic(self.context, "totalTax"):
            total_tax = corporate_tax + undistributed.tax
            if income.net_income_before_tax > ZERO:
                effective_tax_rate = format_rate(total_tax, income.net_income_before_tax)
            else:
                effective_tax_rate = "0.00"

        return FullTaxResult(
            gross_profit=income.gross_profit,
            operating_income=income.operating_income,
            net_income_before_tax=income.net_income_before_tax,
            used_prior_loss=income.used_prior_loss,
            taxable_income=income.taxable_income,
            corporate_tax=corporate_tax,
            net_income_after_tax=net_income_after_tax,
            undistributed_earnings=undistributed.undistributed_earnings,
            undistributed_earnings_tax=undistributed.tax,
            total_tax=total_tax,
            effective_tax_rate=effective_tax_rate,
        )
