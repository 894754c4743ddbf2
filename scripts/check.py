#!/usr/bin/env python
"""
Pre-push checks for KittyLib
============================

Runs the same checks CI runs: the package imports cleanly with no
third-party packages, the test suite passes, flake8 finds no syntax
errors and the example script runs.

Usage:
    python scripts/check.py
    python scripts/check.py --skip-lint
"""

import argparse
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

CHECKS = [
    ("Package imports", [sys.executable, "-c", "import kittylib"], True),
    ("Test suite", [sys.executable, "-m", "pytest", "tests", "--tb=short", "-q"], True),
    ("Syntax errors", [sys.executable, "-m", "flake8", "kittylib", "tests",
                       "--count", "--select=E9,F63,F7,F82", "--show-source"], True),
    ("Example script", [sys.executable, "examples/basic_usage.py"], False),
]


def run_check(description, cmd, critical):
    """Run one check and return True if it passed (or is non-critical)."""
    print(f"\n[Checking] {description}...")
    result = subprocess.run(cmd, cwd=PROJECT_ROOT, capture_output=True, text=True)

    if result.returncode == 0:
        print("  PASSED")
        return True

    label = "FAILED" if critical else "WARNING"
    print(f"  {label}")
    output = (result.stdout + result.stderr).strip()
    if output:
        print(f"  {output[-1000:]}")
    return not critical


def main():
    parser = argparse.ArgumentParser(description="Pre-push checks for KittyLib")
    parser.add_argument("--skip-lint", action="store_true", help="Skip the flake8 check")
    args = parser.parse_args()

    print("=" * 60)
    print("KITTYLIB PRE-PUSH CHECKS")
    print("=" * 60)

    all_passed = True
    for description, cmd, critical in CHECKS:
        if args.skip_lint and "flake8" in cmd:
            print(f"\n[Skipped] {description}")
            continue
        if not run_check(description, cmd, critical):
            all_passed = False

    print("\n" + "=" * 60)
    print("SUCCESS: all checks passed" if all_passed else "FAILURE: fix the issues above before pushing")
    print("=" * 60)
    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
