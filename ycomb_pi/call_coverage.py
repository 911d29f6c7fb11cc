"""
Call Coverage Tracking for ycomb_pi

Counts how many times each named generator is unfolded by a fixed-point
combinator. Every recursive call made through `Y(counted(name, step))`
records one hit, so the counts show how much work the Church-encoded
programs really do.

Usage:
    from ycomb_pi import call_coverage

    call_coverage.enable()
    fib = Y(call_coverage.counted("fibonacci", fibonacci_step))
    fib(to_numeral(5))

    print(call_coverage.report())
    assert call_coverage.calls("fibonacci") == 15
"""

from __future__ import annotations

import json
from collections import defaultdict
from typing import Any, Callable

# Global coverage state
_coverage_enabled = False
_call_counts: dict[str, int] = defaultdict(int)
_total_calls = 0


def enable():
    """Enable call counting."""
    global _coverage_enabled
    _coverage_enabled = True


def disable():
    """Disable call counting."""
    global _coverage_enabled
    _coverage_enabled = False


def reset():
    """Reset all counts."""
    global _call_counts, _total_calls
    _call_counts = defaultdict(int)
    _total_calls = 0


def is_enabled() -> bool:
    return _coverage_enabled


def record_call(name: str) -> None:
    """Record one unfolding of generator `name` (no-op when disabled)."""
    global _total_calls
    if _coverage_enabled:
        _call_counts[name] += 1
        _total_calls += 1


def calls(name: str) -> int:
    return _call_counts.get(name, 0)


def counted(name: str, step: Callable[[Callable], Callable]) -> Callable[[Callable], Callable]:
    """
    Wrap a curried generator so that each call of the resulting function
    is recorded under `name`.

    The wrapper records when the inner function is applied, not when the
    fixed point is built.
    """
    def wrapped(self):
        inner = step(self)

        def call(arg):
            record_call(name)
            return inner(arg)

        return call

    return wrapped


def get_stats() -> dict[str, Any]:
    return {
        "enabled": _coverage_enabled,
        "total_calls": _total_calls,
        "generators": dict(sorted(_call_counts.items())),
    }


def report() -> str:
    """Return a JSON report of the current counts."""
    return json.dumps(get_stats(), indent=2, sort_keys=True)
