"""Tests for FilingMethodCalculator: book, standard, and audit filing methods."""

from decimal import Decimal

import pytest

from corptax.config import CalculatorConfig
from corptax.engines.corporate import format_rate
from corptax.engines.filing import FilingMethodCalculator
from corptax.exceptions import InitializationError, InvalidInputError, UnspecifiedFilingMethodError
from corptax.models.enums import FilingMethod, Industry
from corptax.models.inputs import FilingParams


class TestBookMethod:
    def test_retail_scenario(self, filing_calculator):
        r = filing_calculator.compute({
            "filingMethod": "book",
            "revenue": 1_000_000,
            "industry": "零售業",
        })
        assert r.filing_method == FilingMethod.BOOK
        assert r.applied_rate == Decimal("0.03")
        assert r.taxable_income == Decimal("30000")
        assert r.basic_tax == Decimal("6000")
        assert r.undistributed_tax == Decimal("1500")
        assert r.total_tax == Decimal("7500")
        assert r.effective_rate == "0.75%"

    def test_unknown_industry_uses_default(self, filing_calculator):
        r = filing_calculator.compute({
            "filing_method": "book",
            "revenue": 1_000_000,
            "industry": "太空採礦業",
        })
        assert r.applied_rate == Decimal("0.06")
        assert r.taxable_income == Decimal("60000")

    def test_custom_rate_overrides_table(self, filing_calculator):
        r = filing_calculator.compute({
            "filing_method": "book",
            "revenue": 1_000_000,
            "industry": "零售業",
            "custom_rate": "0.05",
        })
        assert r.applied_rate == Decimal("0.05")
        assert r.taxable_income == Decimal("50000")

    def test_zero_custom_rate_falls_back_to_table(self, filing_calculator):
        r = filing_calculator.compute({
            "filing_method": "book",
            "revenue": 1_000_000,
            "industry": "零售業",
            "custom_rate": 0,
        })
        assert r.applied_rate == Decimal("0.03")

    def test_zero_revenue(self, filing_calculator):
        r = filing_calculator.compute({"filing_method": "book", "industry": "製造業"})
        assert r.total_tax == Decimal("0")
        assert r.effective_rate == "0.00%"


class TestStandardMethod:
    def test_industry_rate(self, filing_calculator):
        r = filing_calculator.compute(FilingParams(
            filing_method=FilingMethod.STANDARD,
            revenue=Decimal("1000000"),
            industry=Industry.RETAIL,
        ))
        assert r.applied_rate == Decimal("0.06")
        assert r.taxable_income == Decimal("60000")
        assert r.basic_tax == Decimal("12000")
        assert r.undistributed_tax == Decimal("3000")
        assert r.total_tax == Decimal("15000")
        assert r.effective_rate == "1.50%"

    def test_unknown_industry_uses_default(self, filing_calculator):
        r = filing_calculator.compute({"filing_method": "standard", "revenue": 1_000_000})
        assert r.applied_rate == Decimal("0.25")
        assert r.taxable_income == Decimal("250000")
        assert r.total_tax == Decimal("62500")
        assert r.effective_rate == "6.25%"


class TestAuditMethod:
    def test_losses_exceed_profit(self, filing_calculator):
        r = filing_calculator.compute({
            "filing_method": "audit",
            "accountingProfit": 500_000,
            "nonDeductible": 50_000,
            "additionalDeduct": 20_000,
            "priorLosses": 600_000,
        })
        assert r.applied_rate is None
        assert r.taxable_income == Decimal("0")
        assert r.basic_tax == Decimal("0")
        assert r.undistributed_tax == Decimal("0")
        assert r.effective_rate == "0.00%"

    def test_positive_taxable_income(self, filing_calculator):
        r = filing_calculator.compute({
            "filing_method": "audit",
            "revenue": 2_000_000,
            "accounting_profit": 500_000,
            "non_deductible": 50_000,
            "additional_deduct": 20_000,
            "prior_losses": 100_000,
        })
        assert r.taxable_income == Decimal("430000")
        assert r.basic_tax == Decimal("86000")
        assert r.undistributed_tax == Decimal("21500")
        assert r.total_tax == Decimal("107500")
        # 5.375% rounds half up
        assert r.effective_rate == "5.38%"

    def test_industry_ignored(self, filing_calculator):
        r = filing_calculator.compute({
            "filing_method": "audit",
            "industry": "零售業",
            "accounting_profit": 100_000,
        })
        assert r.taxable_income == Decimal("100000")


class TestFilingMethodErrors:
    def test_missing_method(self, filing_calculator):
        with pytest.raises(UnspecifiedFilingMethodError, match="not specified"):
            filing_calculator.compute({"revenue": 1_000_000})

    def test_unrecognized_method(self, filing_calculator):
        with pytest.raises(UnspecifiedFilingMethodError) as exc_info:
            filing_calculator.compute({"filing_method": "quarterly", "revenue": 1_000_000})
        assert exc_info.value.value == "quarterly"

    def test_method_checked_before_amounts(self, filing_calculator):
        with pytest.raises(UnspecifiedFilingMethodError):
            filing_calculator.compute({"filing_method": "bogus", "revenue": "not a number"})

    def test_model_without_method(self, filing_calculator):
        with pytest.raises(UnspecifiedFilingMethodError):
            filing_calculator.compute(FilingParams(revenue=Decimal("100")))

    def test_invalid_amount(self, filing_calculator):
        with pytest.raises(InvalidInputError, match="revenue"):
            filing_calculator.compute({"filing_method": "book", "revenue": "abc"})

    def test_invalid_custom_rate(self, filing_calculator):
        with pytest.raises(InvalidInputError, match="customRate"):
            filing_calculator.compute({"filing_method": "book", "custom_rate": "high"})

    def test_invalid_config(self):
        with pytest.raises(InitializationError):
            FilingMethodCalculator(CalculatorConfig(precision=-1))

    def test_amount_out_of_range(self, filing_calculator):
        with pytest.raises(InvalidInputError, match="out of range"):
            filing_calculator.compute({"filing_method": "book", "revenue": "1e1000000"})

    def test_arithmetic_overflow_reported_as_invalid_input(self, filing_calculator):
        params = FilingParams(
            filing_method=FilingMethod.AUDIT,
            accounting_profit=Decimal("9e999999"),
            non_deductible=Decimal("9e999999"),
        )
        with pytest.raises(InvalidInputError) as exc_info:
            filing_calculator.compute(params)
        assert exc_info.value.field == "taxableIncome"
        assert "Overflow" in str(exc_info.value)


class TestEffectiveRateRendering:
    def test_rate_wider_than_any_fixed_precision(self, filing_calculator):
        r = filing_calculator.compute({
            "filing_method": "audit",
            "revenue": 1,
            "accounting_profit": "1e40",
        })
        assert r.total_tax == Decimal("2.5e39")
        assert r.effective_rate == "25" + "0" * 40 + ".00%"

    def test_rounding_carry_adds_a_digit(self):
        assert format_rate(Decimal("99.995"), Decimal("100")) == "100.00"
