"""
Rule engine for the layout scanner.

This module provides the base classes for defining layout and theme
rules, as well as the registry for managing and discovering rules.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Dict, Optional, Type, Generator, Iterable
import re

from layoutscanner.core.issues import Issue, IssueType


@dataclass
class RuleMetadata:
    """Metadata for a rule."""
    rule_id: str
    name: str
    issue_type: IssueType
    description: str = ""
    enabled_by_default: bool = True


class AnalysisContext:
    """
    Context provided to rules during analysis.

    Holds one file's content; rules never touch the filesystem.
    """

    def __init__(self, file_path: str, content: str):
        self.file_path = file_path
        self.content = content
        self._lines: Optional[List[str]] = None

    @property
    def lines(self) -> List[str]:
        """Get the source code lines."""
        if self._lines is None:
            # Only "\n" ends a line; form feeds and other separators inside
            # literals must not shift line numbers.
            self._lines = self.content.split("\n")
        return self._lines


class Rule(ABC):
    """
    Base class for all layout rules.

    Each rule inspects one line at a time and yields issues of a
    single type. Patterns spanning line breaks are not detected.
    """

    @property
    @abstractmethod
    def metadata(self) -> RuleMetadata:
        """Return rule metadata."""
        pass

    @abstractmethod
    def analyze(self, context: AnalysisContext) -> Generator[Issue, None, None]:
        """
        Analyze the file content and yield issues.

        Args:
            context: The analysis context holding the file's lines.

        Yields:
            Issue objects for each detected inconsistency.
        """
        pass

    def create_issue(
        self,
        context: AnalysisContext,
        line_number: int,
        message: str,
        suggestion: str = "",
        matched_text: str = "",
        replacement: Optional[str] = None,
    ) -> Issue:
        """Create an issue using the rule's metadata as defaults."""
        return Issue(
            file=context.file_path,
            line=line_number,
            type=self.metadata.issue_type,
            message=message,
            suggestion=suggestion,
            auto_fixable=replacement is not None,
            matched_text=matched_text,
            replacement=replacement,
            rule_id=self.metadata.rule_id,
        )


class PatternRule(Rule):
    """
    A rule described entirely by data.

    Subclasses set the class attributes below; ``analyze`` does the rest.
    Every match is looked up in ``replacements`` by its exact literal text:
    a hit yields an auto-fixable issue carrying the table value, a miss
    yields an advisory issue with ``fallback_suggestion``.
    """

    patterns: List["re.Pattern[str]"] = []
    exclude_patterns: List["re.Pattern[str]"] = []
    replacements: Optional[Dict[str, str]] = None
    message_template: str = "{match}"
    suggestion_template: str = "{replacement}"
    fallback_suggestion: str = ""

    def lookup(self, matched_text: str) -> Optional[str]:
        """Return the table replacement for an exact literal, if any."""
        if self.replacements is None:
            return None
        return self.replacements.get(matched_text)

    def is_excluded(self, line: str) -> bool:
        return any(exclude.search(line) for exclude in self.exclude_patterns)

    def analyze(self, context: AnalysisContext) -> Generator[Issue, None, None]:
        """Analyze using pattern matching."""
        for line_num, line in enumerate(context.lines, start=1):
            if self.is_excluded(line):
                continue

            for pattern in self.patterns:
                for match in pattern.finditer(line):
                    matched_text = match.group()
                    replacement = self.lookup(matched_text)
                    message = self.message_template.format(match=matched_text)

                    if replacement is not None:
                        suggestion = self.suggestion_template.format(replacement=replacement)
                    else:
                        suggestion = self.fallback_suggestion

                    yield self.create_issue(
                        context,
                        line_num,
                        message=message,
                        suggestion=suggestion,
                        matched_text=matched_text,
                        replacement=replacement,
                    )


class RuleRegistry:
    """
    Registry for managing and discovering rules.

    Holds rule classes; callers receive fresh instances so that
    enabling or disabling rules for one scan never leaks into another.
    """

    def __init__(self):
        self._rules: Dict[str, Type[Rule]] = {}

    def register(self, rule_class: Type[Rule]) -> Type[Rule]:
        """
        Register a rule class.

        Can be used as a decorator:

        @registry.register
        class MyRule(PatternRule):
            ...
        """
        rule_id = rule_class().metadata.rule_id
        if rule_id in self._rules and self._rules[rule_id] is not rule_class:
            raise ValueError(f"Duplicate rule id: {rule_id}")
        self._rules[rule_id] = rule_class
        return rule_class

    def get_rule(self, rule_id: str) -> Optional[Rule]:
        """Get a rule instance by ID."""
        rule_class = self._rules.get(rule_id)
        return rule_class() if rule_class else None

    def get_rules(self, disabled: Iterable[str] = ()) -> List[Rule]:
        """Get all rules enabled by default and not explicitly disabled."""
        disabled = set(disabled)
        rules = []
        for rule_id, rule_class in self._rules.items():
            if rule_id in disabled:
                continue
            rule = rule_class()
            if rule.metadata.enabled_by_default:
                rules.append(rule)
        return rules

    def get_all_rules(self) -> List[Rule]:
        """Get all registered rules."""
        return [rule_class() for rule_class in self._rules.values()]

    @property
    def rule_ids(self) -> List[str]:
        return list(self._rules)

    @property
    def rule_count(self) -> int:
        """Return the number of registered rules."""
        return len(self._rules)


# Global registry instance
registry = RuleRegistry()


def rule(cls: Type[Rule]) -> Type[Rule]:
    """
    Decorator to register a rule with the global registry.

    Usage:
        @rule
        class MyRule(PatternRule):
            ...
    """
    return registry.register(cls)
