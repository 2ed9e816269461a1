"""Tax rate configuration.

Statutory rates and the two industry rate tables used by the simplified
filing regimes. Never hardcode rates in computation functions.

  - Book-review (書審) net profit rates: fraction of revenue deemed taxable
    income when the return is filed under the book-review method.
  - Income-standard (所得額標準) rates: fraction of revenue deemed taxable
    income when books are not reviewed.

Tables are read-only views keyed by Industry, in listing order.
"""

from decimal import Decimal
from types import MappingProxyType

from corptax.models.enums import Industry

# ---------------------------------------------------------------------------
# Statutory rates
# ---------------------------------------------------------------------------
CORPORATE_TAX_RATE = Decimal("0.20")
UNDISTRIBUTED_EARNINGS_TAX_RATE = Decimal("0.05")

# ---------------------------------------------------------------------------
# Fallback rates for industries missing from a table
# ---------------------------------------------------------------------------
DEFAULT_BOOK_REVIEW_RATE = Decimal("0.06")
DEFAULT_INCOME_STANDARD_RATE = Decimal("0.25")

# ---------------------------------------------------------------------------
# Book-review net profit rates
# ---------------------------------------------------------------------------
BOOK_REVIEW_RATES: MappingProxyType[Industry, Decimal] = MappingProxyType({
    Industry.MANUFACTURING: Decimal("0.06"),
    Industry.WHOLESALE: Decimal("0.06"),
    Industry.RETAIL: Decimal("0.03"),
    Industry.FOOD_SERVICE: Decimal("0.06"),
    Industry.CONSTRUCTION: Decimal("0.08"),
    Industry.TRANSPORTATION: Decimal("0.07"),
    Industry.INFORMATION_SERVICES: Decimal("0.10"),
    Industry.CONSULTING: Decimal("0.10"),
    Industry.REAL_ESTATE: Decimal("0.08"),
})

# ---------------------------------------------------------------------------
# Income-standard rates
# ---------------------------------------------------------------------------
INCOME_STANDARD_RATES: MappingProxyType[Industry, Decimal] = MappingProxyType({
    Industry.MANUFACTURING: Decimal("0.08"),
    Industry.WHOLESALE: Decimal("0.07"),
    Industry.RETAIL: Decimal("0.06"),
    Industry.FOOD_SERVICE: Decimal("0.09"),
    Industry.CONSTRUCTION: Decimal("0.10"),
    Industry.TRANSPORTATION: Decimal("0.09"),
    Industry.INFORMATION_SERVICES: Decimal("0.20"),
    Industry.CONSULTING: Decimal("0.20"),
    Industry.REAL_ESTATE: Decimal("0.12"),
})


def _as_industry(industry: Industry | str | None) -> Industry | None:
    if industry is None:
        return None
    try:
        return Industry(industry)
    except ValueError:
        return None


def list_industries() -> list[str]:
    """Return industry labels in table order."""
    return [industry.value for industry in BOOK_REVIEW_RATES]


def book_review_rate(industry: Industry | str | None) -> Decimal:
    """Book-review rate for *industry*, or the default for unknown labels."""
    key = _as_industry(industry)
    return BOOK_REVIEW_RATES.get(key, DEFAULT_BOOK_REVIEW_RATE)


def income_standard_rate(industry: Industry | str | None) -> Decimal:
    """Income-standard rate for *industry*, or the default for unknown labels."""
    key = _as_industry(industry)
    return INCOME_STANDARD_RATES.get(key, DEFAULT_INCOME_STANDARD_RATE)
