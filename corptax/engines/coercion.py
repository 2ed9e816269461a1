"""Decimal coercion for raw caller input.

Accepts the loosely-typed values a form or JSON payload produces (numbers,
numeric strings, None) and turns them into finite Decimals. Absent values
become zero; anything else that is not a finite number raises
InvalidInputError naming the offending field.
"""

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from decimal import Context, Decimal, DecimalException, InvalidOperation, localcontext
from typing import Any

from pydantic.alias_generators import to_camel

from corptax.exceptions import InvalidInputError, UnspecifiedFilingMethodError
from corptax.models.enums import FilingMethod
from corptax.models.inputs import FilingParams, FinancialInput

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

# Largest adjusted exponent an amount may carry; the decimal module's default Emax.
MAX_AMOUNT_EXPONENT = Context().Emax


def coerce_decimal(field: str, value: Any) -> Decimal:
    """Coerce *value* to a finite Decimal. None and "" mean zero."""
    if value is None:
        return ZERO
    if isinstance(value, bool):
        raise InvalidInputError(field, value)
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, (float, str)):
        text = str(value).strip()
        if not text:
            return ZERO
        try:
            result = Decimal(text)
        except InvalidOperation as exc:
            raise InvalidInputError(field, value) from exc
    else:
        raise InvalidInputError(field, value)

    if not result.is_finite():
        raise InvalidInputError(field, value)
    if not result.is_zero() and result.adjusted() > MAX_AMOUNT_EXPONENT:
        raise InvalidInputError(field, value, reason="amount out of range")
    return result


@contextmanager
def arithmetic(context: Context, step: str) -> Iterator[None]:
    """Run a block in *context*, reporting decimal traps as InvalidInputError."""
    try:
        with localcontext(context):
            yield
    except DecimalException as exc:
        logger.error("Decimal arithmetic failed computing %s: %s", step, type(exc).__name__)
        raise InvalidInputError(step, None, reason=f"{type(exc).__name__} in decimal arithmetic") from exc


def _lookup(data: Mapping[str, Any], name: str, alias: str | None) -> Any:
    if name in data:
        return data[name]
    if alias is not None and alias in data:
        return data[alias]
    return None


def _coerce_amounts(data: Mapping[str, Any], names: list[str]) -> dict[str, Decimal]:
    amounts: dict[str, Decimal] = {}
    for name in names:
        alias = to_camel(name)
        amounts[name] = coerce_decimal(alias, _lookup(data, name, alias))
    return amounts


def parse_financial_input(data: FinancialInput | Mapping[str, Any]) -> FinancialInput:
    """Build a FinancialInput from a model or a raw mapping."""
    if isinstance(data, FinancialInput):
        return data
    names = list(FinancialInput.model_fields)
    return FinancialInput(**_coerce_amounts(data, names))


def parse_filing_method(value: Any) -> FilingMethod:
    """Resolve the filing-method discriminator or raise UnspecifiedFilingMethodError."""
    if value is None or value == "":
        raise UnspecifiedFilingMethodError()
    if isinstance(value, FilingMethod):
        return value
    try:
        return FilingMethod(value)
    except ValueError as exc:
        raise UnspecifiedFilingMethodError(value) from exc


def parse_filing_params(data: FilingParams | Mapping[str, Any]) -> FilingParams:
    """Build FilingParams from a model or a raw mapping.

    The filing method is resolved first, so a bad discriminator is reported
    before any amount is looked at.
    """
    if isinstance(data, FilingParams):
        parse_filing_method(data.filing_method)
        return data

    method = parse_filing_method(_lookup(data, "filing_method", "filingMethod"))
    amounts = _coerce_amounts(
        data,
        ["revenue", "accounting_profit", "non_deductible", "additional_deduct", "prior_losses"],
    )
    raw_rate = _lookup(data, "custom_rate", "customRate")
    custom_rate = None if raw_rate in (None, "") else coerce_decimal("customRate", raw_rate)
    industry = _lookup(data, "industry", None)
    if industry is not None:
        industry = str(industry)

    logger.debug("Parsed filing params: method=%s industry=%s", method, industry)
    return FilingParams(
        filing_method=method,
        industry=industry,
        custom_rate=custom_rate,
        **amounts,
    )
