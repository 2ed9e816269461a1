"""Tax computation engines."""

from corptax.engines.corporate import CorporateTaxCalculator
from corptax.engines.filing import FilingMethodCalculator

__all__ = [
    "CorporateTaxCalculator",
    "FilingMethodCalculator",
]
