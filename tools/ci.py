#!/usr/bin/env python3
# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the schematype CI checks locally.

Usage::

    tools/ci.py                 # every step
    tools/ci.py --only tests    # a single step
    tools/ci.py --fail-fast     # stop at the first failing step
"""

import argparse
import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, list[str]] = {
    "format": ["uv", "run", "ruff", "format", "--check", "src/", "tests/"],
    "lint": ["uv", "run", "ruff", "check", "src/", "tests/"],
    "types": ["uv", "run", "ty", "check", "src/"],
    "tests": ["uv", "run", "pytest", "--cov=schematype", "--cov-report=term-missing"],
    "build": ["uv", "build"],
}


def main() -> int:
    """Run the selected CI steps and print a summary table."""
    parser = argparse.ArgumentParser(prog="ci", description="Run schematype CI checks.")
    parser.add_argument("--only", choices=sorted(STEPS), action="append", help="Run only this step (repeatable)")
    parser.add_argument("--fail-fast", action="store_true", help="Stop after the first failing step")
    args = parser.parse_args()

    selected = args.only or list(STEPS)
    outcomes: list[tuple[str, int, float]] = []
    for step in selected:
        returncode, elapsed = _run_step(step, STEPS[step])
        outcomes.append((step, returncode, elapsed))
        if returncode != 0 and args.fail_fast:
            break

    _print_summary(outcomes)
    return 0 if all(code == 0 for _, code, _ in outcomes) else 1


# ################
# Implementation
# ################

_REPO_ROOT = Path(__file__).resolve().parent.parent


def _run_step(step: str, command: list[str]) -> tuple[int, float]:
    print(chalk.blue(f"\n==> {step}: {' '.join(command)}"))
    started = time.monotonic()
    returncode = subprocess.run(command, cwd=_REPO_ROOT).returncode
    return returncode, time.monotonic() - started


def _print_summary(outcomes: list[tuple[str, int, float]]) -> None:
    print(chalk.blue("\nSummary"))
    width = max((len(step) for step, _, _ in outcomes), default=0)
    for step, returncode, elapsed in outcomes:
        label = chalk.green("PASS") if returncode == 0 else chalk.red(f"FAIL ({returncode})")
        print(f"  {step.ljust(width)}  {label}  {elapsed:.1f}s")
    skipped = [step for step in STEPS if step not in {s for s, _, _ in outcomes}]
    if skipped:
        print(chalk.yellow(f"  skipped: {', '.join(skipped)}"))


if __name__ == "__main__":
    sys.exit(main())
