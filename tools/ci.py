#!/usr/bin/env python3
# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the wsdlview CI checks locally.

Usage: ``tools/ci.py [STEP ...]`` where STEP is one of the keys in
:data:`STEPS` (all steps run when none is given).
"""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

SAMPLE_WSDL = "tests/data/calculator.wsdl"

STEPS: dict[str, tuple[str, list[str]]] = {
    "format": ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    "lint": ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    "types": ("Type check", ["uv", "run", "ty", "check", "src/"]),
    "tests": ("Tests", ["uv", "run", "pytest", "--cov=wsdlview", "--cov-report=term-missing"]),
    "smoke": ("CLI smoke test", ["uv", "run", "wsdlview", "show", SAMPLE_WSDL]),
    "build": ("Build", ["uv", "build"]),
}


def main(argv: list[str]) -> int:
    """Run the selected CI steps and report a summary."""
    selected = argv or list(STEPS)
    unknown = [name for name in selected if name not in STEPS]
    if unknown:
        print(chalk.red(f"Unknown step(s): {', '.join(unknown)}. Available: {', '.join(STEPS)}"))
        return 2

    results: list[tuple[str, bool, float]] = []
    for key in selected:
        title, cmd = STEPS[key]
        _banner(title)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_repo_root())
        results.append((title, proc.returncode == 0, time.monotonic() - start))

    _banner("Summary")
    for title, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {title} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(f"  {title}"))
    print(sep)


def _repo_root() -> pathlib.Path:
    return pathlib.Path(__file__).resolve().parent.parent


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
