"""Tax computation summary report generator."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from corptax.formatting import format_currency, format_percent
from corptax.models.results import FilingResult, FullTaxResult

TEMPLATE_DIR = Path(__file__).parent / "templates"

FILING_METHOD_LABELS = {
    "book": "書審",
    "standard": "所得額標準",
    "audit": "查帳",
}


class TaxSummaryGenerator:
    """Generates a human-readable summary of a tax computation."""

    def __init__(self) -> None:
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)))
        self.env.filters["currency"] = format_currency
        self.env.filters["percent"] = format_percent

    def render(self, result: FullTaxResult | FilingResult) -> str:
        """Render the summary for either computation variant."""
        if isinstance(result, FilingResult):
            template = self.env.get_template("filing_summary.txt")
            label = FILING_METHOD_LABELS[result.filing_method.value]
            return template.render(res=result, method_label=label)
        template = self.env.get_template("tax_summary.txt")
        return template.render(res=result)
