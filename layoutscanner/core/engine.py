"""
Main scanning engine for the layout scanner.

This module orchestrates the scanning process: the walker supplies
file paths, rules turn each file's content into issues, and the
per-file lists are concatenated into a ScanResult.
"""

import logging
import time
from typing import List, Optional

from layoutscanner.config import ScanConfig
from layoutscanner.core.errors import TraversalError
from layoutscanner.core.issues import Issue, ScanResult
from layoutscanner.core.rules import Rule, RuleRegistry, AnalysisContext, registry
from layoutscanner.core.walker import iter_source_files

# Import rules to register them with the registry
import layoutscanner.rules  # noqa: F401


logger = logging.getLogger(__name__)


class ScanEngine:
    """
    Runs every enabled rule over every source file under a target.

    Scanning is sequential. Each file yields its own list of issues and
    nothing is shared between files.
    """

    def __init__(
        self,
        config: Optional[ScanConfig] = None,
        rule_registry: Optional[RuleRegistry] = None,
    ):
        self.config = config or ScanConfig()
        self.registry = rule_registry or registry
        self.rules: List[Rule] = self.registry.get_rules(disabled=self.config.disabled_rules)

    def discover_files(self, target_path: str) -> List[str]:
        """Discover all files to scan in the target path."""
        return list(iter_source_files(
            target_path,
            excluded_dirs=set(self.config.excluded_dirs),
            extensions=self.config.extensions,
            test_suffixes=self.config.test_suffixes,
        ))

    def read_file(self, file_path: str) -> str:
        """Read a file's contents, raising TraversalError on failure."""
        try:
            with open(file_path, "r", encoding="utf-8", errors="replace") as f:
                return f.read()
        except OSError as e:
            raise TraversalError(file_path, e) from e

    def scan_content(self, content: str, file_path: str = "<stdin>") -> List[Issue]:
        """
        Scan code content directly without reading from a file.

        Pure: the same content always yields the same issues.
        """
        context = AnalysisContext(file_path, content)
        issues: List[Issue] = []
        for rule in self.rules:
            issues.extend(rule.analyze(context))
        return issues

    def scan_file(self, file_path: str) -> List[Issue]:
        """Scan a single file and return its issues."""
        issues = self.scan_content(self.read_file(file_path), file_path)
        logger.debug("Scanned %s: %d issues", file_path, len(issues))
        return issues

    def scan(self, target_path: Optional[str] = None) -> ScanResult:
        """
        Scan a target directory and return results.

        Args:
            target_path: Directory to scan; defaults to the configured target.

        Returns:
            ScanResult containing all issues and metadata.

        Raises:
            TraversalError: if any directory or file cannot be read.
        """
        target_path = target_path or self.config.target
        start_time = time.time()
        all_issues: List[Issue] = []
        files_scanned = 0

        for file_path in self.discover_files(target_path):
            all_issues.extend(self.scan_file(file_path))
            files_scanned += 1

        elapsed_time = time.time() - start_time
        rules_applied = sorted({issue.rule_id for issue in all_issues})

        return ScanResult(
            issues=all_issues,
            files_scanned=files_scanned,
            scan_time_seconds=round(elapsed_time, 3),
            rules_applied=rules_applied,
        )


def create_engine(config_path: Optional[str] = None) -> ScanEngine:
    """
    Create a scan engine with configuration.

    Args:
        config_path: Optional path to a YAML or JSON configuration file.

    Returns:
        Configured ScanEngine instance.
    """
    from layoutscanner.config import load_scan_config

    return ScanEngine(load_scan_config(config_path))
