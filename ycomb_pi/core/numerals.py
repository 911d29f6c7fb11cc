# ycomb_pi/core/numerals.py
"""
Church numerals.

Numeral n is a function `(step, seed)` that applies `step` to `seed`
exactly n times:

    zero(step, seed)         = seed
    successor(n)(step, seed) = step(n(step, seed))
    add(n, k)                = n(successor, k)

to_numeral / from_numeral are the only crossing points with Python ints.
"""

from __future__ import annotations

from typing import Any, Callable

Numeral = Callable[[Callable[[Any], Any], Any], Any]


def zero(step, seed):
    return seed


def successor(n: Numeral) -> Numeral:
    return lambda step, seed: step(n(step, seed))


def add(n: Numeral, k: Numeral) -> Numeral:
    """Apply `successor` to `k`, `n` times."""
    return n(successor, k)


one = successor(zero)
two = successor(one)
three = successor(two)
four = successor(three)
five = successor(four)


# ---------------------------------------------------------------------------
# Native projection
# ---------------------------------------------------------------------------


def to_numeral(n: int) -> Numeral:
    """Build numeral n as a successor chain over zero."""
    # bool is an int subclass; True is not a count.
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"to_numeral expects int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"to_numeral only supports n >= 0, got {n}")
    m = zero
    for _ in range(n):
        m = successor(m)
    return m


def from_numeral(n: Numeral) -> int:
    return n(lambda x: x + 1, 0)
