# ycomb_pi/bench.py
"""
Tiny benchmarking helper for named ycomb_pi programs.

Church arithmetic is deliberately slow; this makes the cost visible.

Usage:

    from ycomb_pi.bench import benchmark_program

    stats = benchmark_program("fibonacci", [6], repeats=5)
    print(stats)
"""

from __future__ import annotations
import time
from typing import Any, Dict, List

from ycomb_pi.api import run_named_program


def benchmark_program(
    name: str,
    xs: List[int],
    repeats: int = 10,
) -> Dict[str, Any]:
    """
    Run `repeats` calls of `run_named_program(name, xs)`.

    Returns a small stats dict:
        {
            "repeats": N,
            "min_s": ...,
            "max_s": ...,
            "avg_s": ...,
            "total_s": ...,
        }
    """
    if repeats <= 0:
        raise ValueError("repeats must be > 0")

    times = []

    for _ in range(repeats):
        t0 = time.perf_counter()
        _ = run_named_program(name, xs)
        t1 = time.perf_counter()
        times.append(t1 - t0)

    total = sum(times)
    return {
        "repeats": repeats,
        "min_s": min(times),
        "max_s": max(times),
        "avg_s": total / repeats,
        "total_s": total,
    }
