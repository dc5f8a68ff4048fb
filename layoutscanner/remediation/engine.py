"""
Remediation engine for applying table-driven layout fixes.

This module provides:
- Fix plans grouping auto-fixable issues by file
- Whole-file literal substitution
- Before/after diff generation
- Per-file fix application that survives individual write failures
"""

import difflib
import logging
import os
import re
import shutil
import tempfile
from typing import List, Dict, Optional, Tuple, Iterable
from dataclasses import dataclass, field

from layoutscanner.core.errors import FixWriteError
from layoutscanner.core.issues import Issue


logger = logging.getLogger(__name__)


@dataclass
class FilePlan:
    """Auto-fixable issues for a single file."""
    file_path: str
    issues: List[Issue]

    @property
    def replacements(self) -> Dict[str, str]:
        """Distinct literal-to-literal replacements, in first-seen order."""
        table: Dict[str, str] = {}
        for issue in self.issues:
            table.setdefault(issue.matched_text, issue.replacement)
        return table


@dataclass
class RemediationPlan:
    """A plan for remediating the issues of a scan."""
    files: List[FilePlan]
    auto_fixable_count: int
    manual_fix_count: int

    @property
    def total_issues(self) -> int:
        return self.auto_fixable_count + self.manual_fix_count


@dataclass
class FileFixResult:
    """Result of applying fixes to one file."""
    file_path: str
    issues_fixed: int
    substitutions: int = 0
    diff: str = ""
    success: bool = True
    error_message: Optional[str] = None


@dataclass
class FixReport:
    """Outcome of a fix pass over every planned file."""
    results: List[FileFixResult] = field(default_factory=list)

    @property
    def succeeded(self) -> List[FileFixResult]:
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> List[FileFixResult]:
        return [r for r in self.results if not r.success]

    @property
    def issues_fixed(self) -> int:
        return sum(r.issues_fixed for r in self.succeeded)


def _literal_pattern(literal: str) -> "re.Pattern[str]":
    # Rules match shades and paddings with a greedy \d+, so a literal
    # ending in a digit never continues into another digit.
    guard = r"(?!\d)" if literal[-1:].isdigit() else ""
    return re.compile(re.escape(literal) + guard)


def fix_content(content: str, replacements: Dict[str, str]) -> Tuple[str, int]:
    """
    Replace every occurrence of each literal across the whole content.

    A literal ending in a digit is not replaced where more digits follow,
    so ``bg-gray-50`` leaves ``bg-gray-500`` alone. Longer literals are
    applied first.

    Returns:
        The fixed content and the number of substitutions made.
    """
    total = 0
    for old in sorted(replacements, key=len, reverse=True):
        content, count = _literal_pattern(old).subn(
            lambda _match, new=replacements[old]: new, content
        )
        total += count
    return content, total


def generate_diff(original: str, fixed: str, file_path: str) -> str:
    """Generate a unified diff between original and fixed content."""
    diff = difflib.unified_diff(
        original.splitlines(keepends=True),
        fixed.splitlines(keepends=True),
        fromfile=f"a/{file_path}",
        tofile=f"b/{file_path}",
    )
    return "".join(diff)


def _write_atomic(file_path: str, content: str) -> None:
    """
    Replace ``file_path`` with ``content`` via a sibling temp file.

    The original is either fully replaced or left untouched.
    """
    try:
        fd, tmp_path = tempfile.mkstemp(
            dir=os.path.dirname(file_path) or ".", prefix=".", suffix=".tmp"
        )
    except OSError as e:
        raise FixWriteError(file_path, e) from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        shutil.copymode(file_path, tmp_path)
        os.replace(tmp_path, file_path)
    except OSError as e:
        try:
            os.remove(tmp_path)
        except OSError:
            logger.debug("Could not remove temp file %s", tmp_path)
        raise FixWriteError(file_path, e) from e


class RemediationEngine:
    """
    Engine for applying table-driven layout fixes.

    The remediation engine:
    1. Filters the full issue list down to auto-fixable issues
    2. Groups them by file
    3. Reads each file once, substitutes every listed literal, writes once

    Files are rewritten in place without backups; run on a clean
    working tree and review the result with ``git diff``.
    """

    def generate_remediation_plan(self, issues: Iterable[Issue]) -> RemediationPlan:
        """
        Generate a remediation plan for all issues.

        Args:
            issues: Every issue from a scan, not a display preview.

        Returns:
            A RemediationPlan grouping auto-fixable issues by file.
        """
        by_file: Dict[str, List[Issue]] = {}
        auto_fixable = 0
        manual_fix = 0

        for issue in issues:
            if issue.auto_fixable:
                auto_fixable += 1
                by_file.setdefault(issue.file, []).append(issue)
            else:
                manual_fix += 1

        return RemediationPlan(
            files=[FilePlan(path, file_issues) for path, file_issues in by_file.items()],
            auto_fixable_count=auto_fixable,
            manual_fix_count=manual_fix,
        )

    def fix_file(self, file_plan: FilePlan) -> FileFixResult:
        """
        Apply one file's fixes.

        Raises:
            FixWriteError: if the file cannot be read or written.
        """
        file_path = file_plan.file_path

        try:
            with open(file_path, "r", encoding="utf-8", newline="") as f:
                original = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FixWriteError(file_path, e) from e

        fixed, substitutions = fix_content(original, file_plan.replacements)

        if fixed != original:
            _write_atomic(file_path, fixed)

        return FileFixResult(
            file_path=file_path,
            issues_fixed=len(file_plan.issues),
            substitutions=substitutions,
            diff=generate_diff(original, fixed, file_path),
        )

    def apply_fixes(self, plan: RemediationPlan) -> FixReport:
        """
        Apply every file plan, continuing past per-file failures.

        Args:
            plan: The remediation plan to apply.

        Returns:
            A FixReport with one result per planned file.
        """
        report = FixReport()

        for file_plan in plan.files:
            try:
                result = self.fix_file(file_plan)
            except FixWriteError as e:
                logger.warning("Skipping %s: %s", file_plan.file_path, e)
                result = FileFixResult(
                    file_path=file_plan.file_path,
                    issues_fixed=0,
                    success=False,
                    error_message=str(e),
                )
            report.results.append(result)

        return report

    def format_remediation_report(self, plan: RemediationPlan, report: FixReport) -> str:
        """
        Format a fix pass as a human-readable report.

        Args:
            plan: The plan that was applied.
            report: The outcome of applying it.

        Returns:
            A formatted string report.
        """
        lines = [f"🔧 Applying {plan.auto_fixable_count} automatic fixes...", ""]

        for result in report.results:
            path = os.path.relpath(result.file_path)
            if result.success:
                lines.append(f"  ✅ Fixed {result.issues_fixed} issues in {path}")
            else:
                lines.append(f"  ❌ Failed to fix {path}: {result.error_message}")

        lines.append("")
        lines.append(f"✨ Applied {report.issues_fixed} fixes in {len(report.succeeded)} files")
        if report.failed:
            lines.append(f"❌ {len(report.failed)} files could not be fixed")
        lines.append("")
        lines.append("⚠️  Please review changes and run tests before committing.")

        return "\n".join(lines)
