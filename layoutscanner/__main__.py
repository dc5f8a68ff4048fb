"""
Entry point for running the layout scanner as a module.

Usage:
    python -m layoutscanner
    python -m layoutscanner --fix
"""

import sys
from layoutscanner.cli import main

if __name__ == "__main__":
    sys.exit(main())
