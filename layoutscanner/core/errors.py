"""
Exceptions raised by the layout scanner.
"""

from typing import Optional


class LayoutScannerError(Exception):
    """Base class for all scanner errors."""


class TraversalError(LayoutScannerError):
    """
    Raised when a directory or source file cannot be read.

    A partial traversal would produce a falsely clean report, so this
    error always halts the scan.
    """

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Cannot read {path}{detail}")


class FixWriteError(LayoutScannerError):
    """Raised when a fixed file cannot be read back or written."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Cannot rewrite {path}{detail}")
