"""
Issue data structures for the layout scanner.

This module defines the closed set of issue types and the records
produced by rules and consumed by the reporter and the fixer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any
import json


class IssueType(Enum):
    """Categories of layout and theme inconsistencies."""
    HARD_CODED_COLOR = "hard-coded-color"
    DEPRECATED_LAYOUT = "deprecated-layout"
    MISSING_OVERFLOW = "missing-overflow"
    NON_FLUID_WIDTH = "non-fluid-width"
    SHADOW_INCONSISTENCY = "shadow-inconsistency"

    @property
    def icon(self) -> str:
        return _TYPE_ICONS[self]

    @property
    def label(self) -> str:
        return _TYPE_LABELS[self]


_TYPE_ICONS: Dict[IssueType, str] = {
    IssueType.HARD_CODED_COLOR: "🎨",
    IssueType.DEPRECATED_LAYOUT: "📐",
    IssueType.MISSING_OVERFLOW: "📦",
    IssueType.NON_FLUID_WIDTH: "📏",
    IssueType.SHADOW_INCONSISTENCY: "🌓",
}

_TYPE_LABELS: Dict[IssueType, str] = {
    IssueType.HARD_CODED_COLOR: "Hard-coded Colors",
    IssueType.DEPRECATED_LAYOUT: "Deprecated Layout Classes",
    IssueType.MISSING_OVERFLOW: "Missing Overflow Protection",
    IssueType.NON_FLUID_WIDTH: "Non-fluid Widths",
    IssueType.SHADOW_INCONSISTENCY: "Shadow Inconsistencies",
}


@dataclass(frozen=True)
class Issue:
    """
    One inconsistency detected by a rule at a specific file and line.

    ``replacement`` is decided at scan time from a static table and is
    set exactly when ``auto_fixable`` is true.
    """
    file: str
    line: int
    type: IssueType
    message: str
    suggestion: str = ""
    auto_fixable: bool = False
    matched_text: str = ""
    replacement: Optional[str] = None
    rule_id: str = ""

    def __post_init__(self):
        """Validate and normalize the issue."""
        if isinstance(self.type, str):
            object.__setattr__(self, "type", IssueType(self.type))
        if self.line < 1:
            raise ValueError(f"Line numbers are 1-based, got {self.line}")
        if self.auto_fixable and not self.replacement:
            raise ValueError("Auto-fixable issues need a replacement")
        if self.auto_fixable and not self.matched_text:
            raise ValueError("Auto-fixable issues need the matched literal")

    @property
    def location(self) -> str:
        return f"{self.file}:{self.line}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert issue to a dictionary."""
        return {
            "file": self.file,
            "line": self.line,
            "type": self.type.value,
            "message": self.message,
            "suggestion": self.suggestion,
            "auto_fixable": self.auto_fixable,
            "matched_text": self.matched_text,
            "replacement": self.replacement,
            "rule_id": self.rule_id,
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Issue":
        """Create an Issue from a dictionary."""
        known_fields = {f for f in cls.__dataclass_fields__}
        return cls(**{k: v for k, v in data.items() if k in known_fields})


@dataclass
class ScanResult:
    """Results from a complete scan."""
    issues: List[Issue]
    files_scanned: int
    scan_time_seconds: float = 0.0
    rules_applied: List[str] = field(default_factory=list)

    @property
    def total_issues(self) -> int:
        return len(self.issues)

    @property
    def auto_fixable(self) -> List[Issue]:
        return [i for i in self.issues if i.auto_fixable]

    @property
    def auto_fixable_count(self) -> int:
        return len(self.auto_fixable)

    def by_type(self) -> Dict[IssueType, List[Issue]]:
        """Group issues by type, in the order each type was first seen."""
        groups: Dict[IssueType, List[Issue]] = {}
        for issue in self.issues:
            groups.setdefault(issue.type, []).append(issue)
        return groups

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": {
                "files_scanned": self.files_scanned,
                "scan_time_seconds": self.scan_time_seconds,
                "rules_applied": self.rules_applied,
                "total_issues": self.total_issues,
                "auto_fixable": self.auto_fixable_count,
                "by_type": {
                    issue_type.value: len(issues)
                    for issue_type, issues in self.by_type().items()
                },
            },
            "issues": [i.to_dict() for i in self.issues],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
