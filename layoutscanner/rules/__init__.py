"""
Layout and theme rules.

Importing this package registers every built-in rule.
"""

# Import all rules to register them
from layoutscanner.rules import colors, layout

__all__ = [
    "colors",
    "layout",
]
