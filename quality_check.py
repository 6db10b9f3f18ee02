#!/usr/bin/env python3
"""
Code quality checks for the Project Workspace API.

Runs, in order:
1. Ruff (import sorting + linting) over the application, models and tests
2. Black (formatting, check only)
3. Pylint (scored analysis of the application and models)

Usage: python quality_check.py [--fix]
"""

import re
import subprocess
import sys

PYLINT_MIN_SCORE = 9.5


def run_check(cmd: list[str], description: str, scored: bool = False) -> bool:
    """Run one tool and report whether it passed."""
    print(f"\n{'='*60}")
    print(f"🔍 {description}")
    print(f"Command: {' '.join(cmd)}")
    print("=" * 60)

    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except OSError as e:
        print(f"💥 Could not run {cmd[0]}: {e}")
        return False

    if result.stdout:
        print(result.stdout)
    if result.stderr:
        print(result.stderr)

    # Pylint exits non-zero on any message; gate on the score instead
    if scored:
        match = re.search(r"rated at ([\d.]+)/10", result.stdout or "")
        if match:
            score = float(match.group(1))
            passed = score >= PYLINT_MIN_SCORE
            print(f"{'✅' if passed else '⚠️'} {description}: {score}/10 (minimum {PYLINT_MIN_SCORE})")
            return passed

    passed = result.returncode == 0
    print(f"{'✅' if passed else '❌'} {description} (exit code {result.returncode})")
    return passed


def main() -> int:
    fix = "--fix" in sys.argv[1:]
    print("🚀 Project Workspace API quality checks")

    ruff_cmd = ["ruff", "check", "app/", "models/", "tests/"]
    black_cmd = [sys.executable, "-m", "black", "app/", "models/", "tests/", "migrations/"]
    if fix:
        ruff_cmd.append("--fix")
    else:
        black_cmd.append("--check")

    checks = [
        (ruff_cmd, "Ruff - imports and lint", False),
        (black_cmd, "Black - formatting", False),
        ([sys.executable, "-m", "pylint", "app/", "models/", "--score=y"], "Pylint - analysis", True),
    ]

    results = [(description, run_check(cmd, description, scored)) for cmd, description, scored in checks]

    print(f"\n{'='*60}")
    print("📊 QUALITY CHECK SUMMARY")
    print("=" * 60)
    for description, passed in results:
        print(f"{description}: {'✅ PASSED' if passed else '❌ FAILED'}")

    failed = sum(1 for _, passed in results if not passed)
    print(f"\nOverall: {len(results) - failed}/{len(results)} checks passed")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
