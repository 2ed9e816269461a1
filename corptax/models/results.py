"""Calculation result models."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from corptax.models.enums import ErrorKind, FilingMethod


def _plain(value: Any) -> Any:
    # float() on Decimal is lossy past ~15 significant digits
    if isinstance(value, Decimal):
        return float(value)
    return value


class TaxableIncomeResult(BaseModel):
    gross_profit: Decimal
    operating_income: Decimal
    net_income_before_tax: Decimal
    taxable_income: Decimal
    used_prior_loss: Decimal


class UndistributedEarningsResult(BaseModel):
    undistributed_earnings: Decimal
    tax: Decimal


class FullTaxResult(BaseModel):
    """Complete breakdown of the direct computation."""

    gross_profit: Decimal
    operating_income: Decimal
    net_income_before_tax: Decimal
    used_prior_loss: Decimal
    taxable_income: Decimal
    corporate_tax: Decimal
    net_income_after_tax: Decimal
    undistributed_earnings: Decimal
    undistributed_earnings_tax: Decimal
    total_tax: Decimal
    effective_tax_rate: str  # "12.34", no percent sign

    def as_plain_dict(self) -> dict[str, Any]:
        """Amounts as floats, keyed by camelCase names, for display layers."""
        return {to_camel(k): _plain(v) for k, v in self.model_dump().items()}


class FilingResult(BaseModel):
    """Breakdown of a filing-method computation."""

    filing_method: FilingMethod
    applied_rate: Decimal | None = None  # None for the audit method
    taxable_income: Decimal
    basic_tax: Decimal
    undistributed_tax: Decimal
    total_tax: Decimal
    effective_rate: str  # "0.75%"

    def as_plain_dict(self) -> dict[str, Any]:
        return {to_camel(k): _plain(v) for k, v in self.model_dump().items()}


class CalculationOutcome(BaseModel):
    """Either a complete result or a tagged failure, never both."""

    ok: bool
    result: FullTaxResult | FilingResult | None = None
    error_kind: ErrorKind | None = None
    error_message: str | None = None
