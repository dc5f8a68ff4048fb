"""
Layout Scanner

Scans React/Tailwind source trees for layout and theme inconsistencies
and applies table-driven fixes.
"""

__version__ = "1.0.0"
__author__ = "Promorang Web Team"

from layoutscanner.core.engine import ScanEngine
from layoutscanner.core.issues import Issue, IssueType, ScanResult
from layoutscanner.core.errors import LayoutScannerError, TraversalError, FixWriteError
from layoutscanner.config import ScanConfig

__all__ = [
    "ScanEngine",
    "Issue",
    "IssueType",
    "ScanResult",
    "LayoutScannerError",
    "TraversalError",
    "FixWriteError",
    "ScanConfig",
]
