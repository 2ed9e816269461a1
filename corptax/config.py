"""Calculator configuration.

Each calculator owns its own decimal context, built from a CalculatorConfig
when the calculator is constructed. The process-wide ``decimal.getcontext()``
is never modified.
"""

import decimal
from decimal import ROUND_HALF_UP, Context

from pydantic import BaseModel, ConfigDict

from corptax.exceptions import InitializationError

DEFAULT_PRECISION = 20

_ROUNDING_MODES = frozenset({
    decimal.ROUND_CEILING,
    decimal.ROUND_DOWN,
    decimal.ROUND_FLOOR,
    decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN,
    decimal.ROUND_HALF_UP,
    decimal.ROUND_UP,
    decimal.ROUND_05UP,
})


class CalculatorConfig(BaseModel):
    """Decimal precision and rounding for one calculator instance."""
    model_config = ConfigDict(frozen=True)

    precision: int = DEFAULT_PRECISION
    rounding: str = ROUND_HALF_UP


def build_context(config: CalculatorConfig) -> Context:
    """Build the decimal context for *config*.

    Raises InitializationError when the precision or rounding mode is not
    something the decimal module accepts.
    """
    if config.rounding not in _ROUNDING_MODES:
        raise InitializationError(f"unknown rounding mode {config.rounding!r}")
    try:
        return Context(prec=config.precision, rounding=config.rounding)
    except (TypeError, ValueError) as exc:
        raise InitializationError(f"invalid precision {config.precision!r} ({exc})") from exc
