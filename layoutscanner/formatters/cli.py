"""
CLI output formatter for human-readable results.
"""

import os
import sys
from typing import List

from layoutscanner.config import DEFAULT_PREVIEW_LIMIT
from layoutscanner.core.issues import Issue, ScanResult


# ANSI color codes
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"


def supports_color() -> bool:
    """Check if the terminal supports color output."""
    if not hasattr(sys.stdout, "isatty"):
        return False
    if not sys.stdout.isatty():
        return False
    return True


class CLIFormatter:
    """
    Formats scan results for human-readable CLI output.

    Issues are grouped by type and each group is capped at
    ``preview_limit`` entries. The cap is for the terminal only; it
    never changes which issues get fixed.
    """

    def __init__(self, use_color: bool = True, preview_limit: int = DEFAULT_PREVIEW_LIMIT):
        self.use_color = use_color and supports_color()
        self.preview_limit = preview_limit

    def _color(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled."""
        if self.use_color:
            return f"{color}{text}{Colors.RESET}"
        return text

    def format_result(self, result: ScanResult) -> str:
        """Format a complete scan result."""
        lines = []

        lines.append("")
        lines.append(self._color(f"📊 Scan Complete: {result.files_scanned} files scanned", Colors.BOLD))
        lines.append("")
        lines.append(f"Found {result.total_issues} issues:")

        for issue_type, issues in result.by_type().items():
            lines.append("")
            lines.append(self._color(f"{issue_type.icon} {issue_type.label} ({len(issues)})", Colors.BOLD))
            lines.append(self._color("─" * 60, Colors.DIM))

            for issue in issues[:self.preview_limit]:
                lines.extend(self._format_issue(issue))
                lines.append("")

            remaining = len(issues) - self.preview_limit
            if remaining > 0:
                lines.append(f"  ... and {remaining} more")
                lines.append("")

        lines.append("")
        lines.append(f"💡 {result.auto_fixable_count} issues can be auto-fixed")
        lines.append("Run with --fix flag to apply automatic fixes")

        return "\n".join(lines)

    def _format_issue(self, issue: Issue) -> List[str]:
        """Format a single issue."""
        location = f"{os.path.relpath(issue.file)}:{issue.line}"
        lines = [
            f"  📄 {self._color(location, Colors.CYAN)}",
            f"     {issue.message}",
            f"     💡 {issue.suggestion}",
        ]
        if issue.auto_fixable:
            lines.append(self._color("     ✅ Auto-fixable", Colors.GREEN))
        return lines

    def format_issue(self, issue: Issue) -> str:
        """Format a single issue."""
        return "\n".join(self._format_issue(issue))
