"""Shared test fixtures for the corporate tax calculator."""

import pytest

from corptax.engines import CorporateTaxCalculator, FilingMethodCalculator


@pytest.fixture
def calculator() -> CorporateTaxCalculator:
    return CorporateTaxCalculator()


@pytest.fixture
def filing_calculator() -> FilingMethodCalculator:
    return FilingMethodCalculator()


@pytest.fixture
def basic_financials() -> dict:
    return {
        "revenue": 1_000_000,
        "cost": 600_000,
        "expense": 200_000,
        "otherIncome": 0,
        "otherExpense": 0,
        "priorLoss": 0,
    }
