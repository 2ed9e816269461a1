"""Report generators."""

from corptax.reports.tax_summary import TaxSummaryGenerator

__all__ = ["TaxSummaryGenerator"]
