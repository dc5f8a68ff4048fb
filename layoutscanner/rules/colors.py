"""
Hard-coded color detection.

Flags Tailwind palette classes such as ``bg-gray-50`` that should be
expressed through the app's ``pr-*`` theme tokens instead.
"""

import re

from layoutscanner.core.issues import IssueType
from layoutscanner.core.rules import PatternRule, RuleMetadata, rule
from layoutscanner.rules.tokens import THEME_TOKEN_REPLACEMENTS


@rule
class HardCodedColorRule(PatternRule):
    """
    Detects ``{bg|text|border}-{palette}-{shade}`` classes.

    Only literals present in the theme token table are auto-fixable; an
    unlisted shade is still reported, with a generic suggestion.
    """

    patterns = [
        re.compile(r"(bg|text|border)-(gray|white|black|neutral|slate|zinc|stone)-(\d+)"),
    ]
    replacements = THEME_TOKEN_REPLACEMENTS
    message_template = "Hard-coded color: {match}"
    suggestion_template = "Replace with: {replacement}"
    fallback_suggestion = "Replace with a theme token (bg-pr-*, text-pr-* or border-pr-*)"

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            rule_id="LAYOUT-COLOR-001",
            name="Hard-coded Color",
            issue_type=IssueType.HARD_CODED_COLOR,
            description="Palette color classes bypass the theme and break dark mode.",
        )
