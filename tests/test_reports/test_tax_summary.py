"""Tests for the text summary report generator."""

import pytest

from corptax.api import compute_by_filing_method, compute_direct
from corptax.reports import TaxSummaryGenerator


@pytest.fixture
def generator() -> TaxSummaryGenerator:
    return TaxSummaryGenerator()


class TestFullTaxSummary:
    def test_renders_amounts(self, generator, basic_financials):
        text = generator.render(compute_direct(basic_financials))
        assert "Taxable income" in text
        assert "200,000" in text
        assert "40,000" in text
        assert "48,000" in text
        assert "24.00%" in text


class TestFilingSummary:
    def test_book_method(self, generator):
        result = compute_by_filing_method(
            {"filing_method": "book", "revenue": 1_000_000, "industry": "零售業"}
        )
        text = generator.render(result)
        assert "書審" in text
        assert "Applied rate" in text
        assert "3.00%" in text
        assert "7,500" in text
        assert "0.75%" in text

    def test_audit_method_has_no_rate_line(self, generator):
        result = compute_by_filing_method({"filing_method": "audit", "accounting_profit": 100_000})
        text = generator.render(result)
        assert "查帳" in text
        assert "Applied rate" not in text
        assert "100,000" in text
