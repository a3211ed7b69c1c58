#!/usr/bin/env python3
# Copyright 2026 classdiagram Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, type check, tests, build, and a PlantUML smoke test."""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=classdiagram", "--cov-report=term-missing"]),
    ("Render example", ["uv", "run", "classdiagram", "render", "examples/zoo.yaml", "-o", "build/zoo.puml"]),
    ("Build", ["uv", "build"]),
]


def main() -> int:
    """Run all CI steps and report results."""
    results: list[tuple[str, bool, float]] = []

    for name, cmd in STEPS:
        sep = chalk.blue("=" * 60)
        print(f"\n{sep}")
        print(chalk.blue(name))
        print(sep)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_repo_root())
        elapsed = time.monotonic() - start
        results.append((name, proc.returncode == 0, elapsed))

    sep = "=" * 60
    print(f"\n{chalk.blue(sep)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(sep))
    failed = [name for name, passed, _ in results if not passed]
    for name, passed, elapsed in results:
        if passed:
            print(chalk.green(f"  PASS  {name} ({elapsed:.1f}s)"))
        else:
            print(chalk.red(f"  FAIL  {name} ({elapsed:.1f}s)"))

    print()
    if failed:
        print(chalk.red(f"{len(failed)} of {len(results)} step(s) failed."))
    return 1 if failed else 0


# ################
# Implementation
# ################


def _repo_root() -> str:
    return str(Path(__file__).parent.parent)


if __name__ == "__main__":
    sys.exit(main())
