"""
JSON output formatter for machine-readable results.
"""

import json
from typing import List

from layoutscanner.core.issues import Issue, ScanResult


class JSONFormatter:
    """
    Formats scan results as JSON for machine consumption.
    """

    def __init__(self, indent: int = 2):
        self.indent = indent

    def format_result(self, result: ScanResult) -> str:
        """Format a complete scan result as JSON."""
        return json.dumps(result.to_dict(), indent=self.indent, ensure_ascii=False)

    def format_issue(self, issue: Issue) -> str:
        """Format a single issue as JSON."""
        return json.dumps(issue.to_dict(), indent=self.indent, ensure_ascii=False)

    def format_issues(self, issues: List[Issue]) -> str:
        """Format a list of issues as JSON."""
        return json.dumps([i.to_dict() for i in issues], indent=self.indent, ensure_ascii=False)
