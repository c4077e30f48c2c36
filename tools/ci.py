#!/usr/bin/env python3
# Copyright 2026 ccdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the ccdgen CI checks locally.

Usage: ``tools/ci.py [STEP ...]``. Without arguments every step runs; step
names are matched case-insensitively against the prefix of each step title.
"""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Doctests", ["uv", "run", "pytest", "--doctest-modules", "src/ccdgen"]),
    ("Tests", ["uv", "run", "pytest", "--cov=ccdgen", "--cov-report=term-missing"]),
    ("Build", ["uv", "build"]),
]


def main(argv: list[str]) -> int:
    """Run the selected CI steps and print a summary. Returns the exit code."""
    selected = _select_steps(argv)
    if not selected:
        print(chalk.red(f"No CI step matches: {' '.join(argv)}"))
        return 2

    results: list[tuple[str, bool, float]] = []
    for name, cmd in selected:
        _banner(name)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_REPO_ROOT)
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    _banner("  Summary")
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_REPO_ROOT = pathlib.Path(__file__).parent.parent


def _select_steps(argv: list[str]) -> list[tuple[str, list[str]]]:
    if not argv:
        return list(STEPS)
    wanted = [arg.lower() for arg in argv]
    return [step for step in STEPS if any(step[0].lower().startswith(w) for w in wanted)]


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(title))
    print(sep)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
