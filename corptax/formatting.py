"""Display formatters for amounts and rates (zh-TW conventions).

Values that are not numbers raise ValueError.
"""

from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation

GROUPING_SEPARATOR = ","


def _to_decimal(value: Decimal | int | float | str) -> Decimal:
    try:
        result = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Not a number: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result


def _round(value: Decimal, places: Decimal) -> Decimal:
    # sized to the integer digits so large amounts never exceed the precision
    context = Context(prec=max(value.adjusted(), 0) + 4, rounding=ROUND_HALF_UP)
    return value.quantize(places, context=context)


def format_currency(amount: Decimal | int | float | str | None) -> str:
    """Whole-currency amount with thousands separators, e.g. ``1,234,568``."""
    if amount is None:
        return "0"
    value = _round(_to_decimal(amount), Decimal("1"))
    if value.is_zero():
        value = abs(value)
    return f"{value:,.0f}"


def format_percent(value: Decimal | int | float | str | None) -> str:
    """Two-decimal percentage, e.g. ``20.00%``."""
    if value is None:
        return "0.00%"
    rate = _round(_to_decimal(value), Decimal("0.01"))
    return f"{rate:.2f}%"


def parse_currency(text: str) -> int:
    """Inverse of format_currency for whole amounts."""
    try:
        return int(Decimal(text.strip().replace(GROUPING_SEPARATOR, "")))
    except InvalidOperation as exc:
        raise ValueError(f"Not a currency amount: {text!r}") from exc
