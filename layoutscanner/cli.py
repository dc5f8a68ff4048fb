"""
Command-line interface for the layout scanner.

Scans ``src/react-app`` under the current directory, prints a grouped
report and, with ``--fix``, rewrites auto-fixable issues in place.
"""

import argparse
import logging
import os
import sys
from typing import Optional, List

from layoutscanner import __version__
from layoutscanner.config import ScanConfig
from layoutscanner.core.engine import ScanEngine
from layoutscanner.core.errors import TraversalError
from layoutscanner.formatters import CLIFormatter
from layoutscanner.remediation import RemediationEngine


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="layoutscanner",
        description="Scan the codebase for layout and theme inconsistencies.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  layoutscanner          # Report issues under src/react-app
  layoutscanner --fix    # Report, then apply auto-fixable replacements

Fixes rewrite files in place without backups. Run on a clean working
tree and review the result with git diff.
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--fix",
        action="store_true",
        help="Apply auto-fixable replacements after reporting",
    )

    return parser


def run(config: ScanConfig, fix: bool = False) -> int:
    """Scan, report and optionally fix. Returns the exit code."""
    print("🔍 Scanning layout and theme consistency...")

    engine = ScanEngine(config)
    result = engine.scan(os.path.join(os.getcwd(), config.target))

    formatter = CLIFormatter(preview_limit=config.preview_limit)
    print(formatter.format_result(result))

    if not fix:
        return 0

    remediation_engine = RemediationEngine()
    plan = remediation_engine.generate_remediation_plan(result.issues)

    if plan.auto_fixable_count == 0:
        print("\n✅ No auto-fixable issues found")
        return 0

    report = remediation_engine.apply_fixes(plan)
    print()
    print(remediation_engine.format_remediation_report(plan, report))

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    try:
        return run(ScanConfig(), fix=args.fix)

    except KeyboardInterrupt:
        print("\nScan interrupted.")
        return 130
    except TraversalError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(f"Scan aborted at {e.path}; no report was produced.", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
