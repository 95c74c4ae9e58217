"""Plain-text rendering of search results."""

from strsearch.reporting.report import (
    format_comparison,
    format_report,
    format_summary,
    write_report,
)

__all__ = [
    "format_comparison",
    "format_report",
    "format_summary",
    "write_report",
]
