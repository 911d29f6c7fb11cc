#!/usr/bin/env python3
"""
Unified ycomb_pi test runner.

Runs pytest -vv so that the single source of truth for test status is
pytest. Pass --coverage to print recursion call counts at the end.
"""

import os
import subprocess
import sys


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    env = dict(os.environ)
    if "--coverage" in argv:
        argv = [a for a in argv if a != "--coverage"]
        env["YCOMB_CALL_COVERAGE"] = "1"

    print("=== ycomb_pi: running full pytest suite ===")
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "-vv", *argv],
        check=False,
        env=env,
    )
    return result.returncode


if __name__ == "__main__":
    raise SystemExit(main())
