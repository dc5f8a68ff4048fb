"""
Layout rules: legacy containers, fixed pixel widths and cards that
can overflow their parent.
"""

import re
from typing import Generator

from layoutscanner.core.issues import Issue, IssueType
from layoutscanner.core.rules import (
    Rule, PatternRule, RuleMetadata, AnalysisContext, rule
)
from layoutscanner.rules.tokens import DEPRECATED_LAYOUT_REPLACEMENTS, FLUID_MAX_WIDTH


@rule
class DeprecatedLayoutRule(PatternRule):
    """
    Detects legacy max-width and container idioms.

    ``max-w-screen-xl`` has an exact table entry and is auto-fixable;
    ``max-w-screen-md`` matches the family but has none, so it is
    reported as advisory.
    """

    patterns = [
        re.compile(r"max-w-screen-(xl|lg|md|sm)"),
        re.compile(r"container\s+px-\d+"),
        re.compile(r"max-w-\d+xl(?!\s*2xl)"),
    ]
    replacements = DEPRECATED_LAYOUT_REPLACEMENTS
    message_template = "Deprecated layout class: {match}"
    fallback_suggestion = "Use ultrawide-friendly max-width utilities"

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            rule_id="LAYOUT-DEPR-001",
            name="Deprecated Layout Class",
            issue_type=IssueType.DEPRECATED_LAYOUT,
            description="Fixed breakpoint containers leave ultrawide screens mostly empty.",
        )


@rule
class NonFluidWidthRule(PatternRule):
    """
    Detects pixel max-widths with no ``2xl:max-w-`` override on the line.

    Never auto-fixable: the right breakpoint value depends on context.
    """

    patterns = [
        re.compile(r"max-w-\[(\d+)px\]"),
    ]
    exclude_patterns = [
        re.compile(r"2xl:max-w-"),
    ]
    message_template = "Non-fluid width: {match}"
    fallback_suggestion = f"Add responsive 2xl breakpoint: {FLUID_MAX_WIDTH}"

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            rule_id="LAYOUT-WIDTH-001",
            name="Non-fluid Width",
            issue_type=IssueType.NON_FLUID_WIDTH,
            description="Pixel max-widths should scale up at the 2xl breakpoint.",
        )


@rule
class MissingOverflowRule(Rule):
    """
    Detects card elements without overflow protection.

    This is a single-line heuristic, not a JSX parser: an overflow
    utility declared on another line or in a shared style object is not
    seen, and any styled line mentioning "card" is considered a card.
    """

    ATTRIBUTE_PATTERN = re.compile(r"\b(?:className|class|style)\s*=")
    CARD_PATTERN = re.compile(r"card", re.IGNORECASE)
    OVERFLOW_PATTERN = re.compile(r"\boverflow-(?:[xy]-)?(?:hidden|clip)\b")

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            rule_id="LAYOUT-OVERFLOW-001",
            name="Missing Overflow Protection",
            issue_type=IssueType.MISSING_OVERFLOW,
            description="Cards without overflow-hidden can push wide content past the viewport.",
        )

    def analyze(self, context: AnalysisContext) -> Generator[Issue, None, None]:
        for line_num, line in enumerate(context.lines, start=1):
            if not self.ATTRIBUTE_PATTERN.search(line):
                continue
            if not self.CARD_PATTERN.search(line):
                continue
            if self.OVERFLOW_PATTERN.search(line):
                continue

            yield self.create_issue(
                context,
                line_num,
                message="Card component without overflow-hidden",
                suggestion="Add: w-full max-w-full overflow-hidden",
            )
