"""
Output formatters for scan results.

Provides:
- Human-readable CLI output
- JSON for machine processing
"""

from layoutscanner.formatters.cli import CLIFormatter
from layoutscanner.formatters.json_formatter import JSONFormatter

__all__ = [
    "CLIFormatter",
    "JSONFormatter",
    "get_formatter",
]


def get_formatter(format_name: str, **kwargs):
    """Get a formatter by name."""
    formatters = {
        "text": CLIFormatter,
        "cli": CLIFormatter,
        "json": JSONFormatter,
    }

    formatter_class = formatters.get(format_name.lower())
    if formatter_class:
        return formatter_class(**kwargs)

    raise ValueError(f"Unknown format: {format_name}")
