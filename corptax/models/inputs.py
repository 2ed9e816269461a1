"""Calculation input models.

Field names are snake_case; the camelCase names used by form front-ends
(``otherIncome``, ``filingMethod``, ...) are accepted as aliases.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from corptax.models.enums import FilingMethod, Industry


class FinancialInput(BaseModel):
    """Income statement figures for the direct computation.

    All amounts are annual totals for the fiscal year, in whole currency.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    revenue: Decimal = Decimal("0")
    cost: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")
    other_income: Decimal = Decimal("0")
    other_expense: Decimal = Decimal("0")
    prior_loss: Decimal = Field(
        default=Decimal("0"),
        description="Prior-period loss carried forward into this year",
    )
    dividend_distributed: Decimal = Decimal("0")
    legal_reserve: Decimal = Field(
        default=Decimal("0"),
        description="Legal reserve set aside from after-tax earnings",
    )


class FilingParams(BaseModel):
    """Inputs for filing-method dispatch.

    ``revenue``, ``industry`` and ``custom_rate`` drive the book and standard
    methods; the accounting fields are read by the audit method only.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    filing_method: FilingMethod | None = None
    revenue: Decimal = Decimal("0")
    industry: Industry | str | None = None
    custom_rate: Decimal | None = Field(
        default=None,
        description="Overrides the industry table rate when set and non-zero",
    )
    # --- Audit method ---
    accounting_profit: Decimal = Decimal("0")
    non_deductible: Decimal = Field(
        default=Decimal("0"),
        description="Non-deductible expenses added back to accounting profit",
    )
    additional_deduct: Decimal = Decimal("0")
    prior_losses: Decimal = Decimal("0")
