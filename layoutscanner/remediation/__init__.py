"""
Table-driven remediation.

Applies the literal-to-literal fixes carried by auto-fixable issues.
"""

from layoutscanner.remediation.engine import (
    RemediationEngine,
    RemediationPlan,
    FilePlan,
    FileFixResult,
    FixReport,
    fix_content,
)

__all__ = [
    "RemediationEngine",
    "RemediationPlan",
    "FilePlan",
    "FileFixResult",
    "FixReport",
    "fix_content",
]
