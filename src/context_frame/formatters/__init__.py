"""Output formatters for Context Frame."""

from .base import BaseFormatter, build_report_data
from .badge import badge_color, badge_markdown, badge_url
from .csv_formatter import CsvFormatter
from .json_formatter import JsonFormatter
from .markdown_formatter import MarkdownFormatter
from .rich_formatter import RichFormatter
from .sarif_formatter import SarifFormatter

FORMATTERS = {
    "terminal": RichFormatter,
    "json": JsonFormatter,
    "markdown": MarkdownFormatter,
    "csv": CsvFormatter,
    "sarif": SarifFormatter,
}


def get_formatter(name: str) -> BaseFormatter:
    """Instantiate the formatter registered under ``name`` (the --format choice)."""
    cls = FORMATTERS.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(FORMATTERS))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "RichFormatter",
    "JsonFormatter",
    "MarkdownFormatter",
    "CsvFormatter",
    "SarifFormatter",
    "FORMATTERS",
    "build_report_data",
    "badge_color",
    "badge_url",
    "badge_markdown",
    "get_formatter",
]
